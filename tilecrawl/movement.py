"""
Movement engine: moves the player one tile per call.

Each call validates first and commits second. The bounds check runs before
anything is touched, so a rejected move leaves the grid and the player record
exactly as they were. A committed move:

1. removes the player reference from the origin tile (other occupants stay, in order)
2. updates the player's recorded position
3. appends the player reference to the destination tile

Nothing blocks movement besides the map edge: walls, rock, gold and hostiles
all stay where they are and the player is simply stacked on top.
"""

from typing import Tuple, Union

from tilecrawl.environment import EntityRegistry, OccupancyGrid
from tilecrawl.schemas import DIRECTION_OFFSETS, Direction, MoveOutcome, MoveResult


def step(position: Tuple[int, int], direction: Direction) -> Tuple[int, int]:
    """Apply one unit step in ``direction`` to ``position``."""
    dx, dy = DIRECTION_OFFSETS[direction]
    return position[0] + dx, position[1] + dy


class MovementEngine:
    """Relocates the player between tiles while keeping grid and registry in sync."""

    def __init__(self, grid: OccupancyGrid, registry: EntityRegistry):
        self.grid = grid
        self.registry = registry

    def move_player(self, direction: Union[Direction, str]) -> MoveResult:
        """Move the player one tile in ``direction``.

        Args:
            direction: A Direction or its string value ("left", "up", ...)

        Returns:
            MoveResult with outcome MOVED, or OUT_OF_BOUNDS when the target is
            off the map (in which case nothing was changed)
        """
        direction = Direction(direction)
        player = self.registry.player()
        origin = player.position
        target = step(origin, direction)

        if not self.grid.in_bounds(*target):
            return MoveResult(
                outcome=MoveOutcome.OUT_OF_BOUNDS,
                direction=direction,
                origin=origin,
                target=target,
            )

        self.grid.remove_player(*origin)
        player.position = target
        self.grid.insert_player(*target, player.ref())

        return MoveResult(
            outcome=MoveOutcome.MOVED,
            direction=direction,
            origin=origin,
            target=target,
        )
