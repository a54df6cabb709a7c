"""
Game aggregate and command dispatch.

A Game bundles the occupancy grid, the entity registry and a movement engine.
It is built once by the loader and mutated in place, one command per turn.

Commands (first character of the input line):
    h / j / k / l   move left / down / up / right
    ,               pass the turn
    q               quit
Anything else is reported back and leaves the game untouched.
"""

from typing import Dict, List, Tuple

from tilecrawl.environment import (
    EntityRegistry,
    Hostile,
    OccupancyGrid,
    OccupancyInvariantError,
    Player,
    format_status,
    render_frame,
    render_map,
)
from tilecrawl.movement import MovementEngine
from tilecrawl.schemas import (
    Direction,
    GameSnapshot,
    MoveOutcome,
    TurnOutcome,
    TurnResult,
)

MOVE_KEYS: Dict[str, Direction] = {
    "h": Direction.LEFT,
    "j": Direction.DOWN,
    "k": Direction.UP,
    "l": Direction.RIGHT,
}
PASS_KEY = ","
QUIT_KEY = "q"

QUIT_MESSAGE = "I fall on my sword."


class Game:
    """A loaded map with its player and hostiles."""

    def __init__(self, grid: OccupancyGrid, registry: EntityRegistry):
        self.grid = grid
        self.registry = registry
        self.engine = MovementEngine(grid, registry)
        self.check_invariants()

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def player(self) -> Player:
        return self.registry.player()

    @property
    def hostiles(self) -> Tuple[Hostile, ...]:
        return self.registry.hostiles()

    def apply_command(self, line: str) -> TurnResult:
        """Run one turn for an input line. Only its first character matters."""
        command = line[:1]

        if command in MOVE_KEYS:
            move = self.engine.move_player(MOVE_KEYS[command])
            outcome = (
                TurnOutcome.MOVED
                if move.outcome == MoveOutcome.MOVED
                else TurnOutcome.OUT_OF_BOUNDS
            )
            return TurnResult(outcome=outcome, command=command, move=move)

        if command == PASS_KEY:
            return TurnResult(outcome=TurnOutcome.PASSED, command=command)

        if command == QUIT_KEY:
            return TurnResult(
                outcome=TurnOutcome.QUIT, command=command, message=QUIT_MESSAGE
            )

        return TurnResult(
            outcome=TurnOutcome.UNRECOGNIZED,
            command=command,
            message=f"I don't know how to {command}",
        )

    def render(self) -> str:
        return render_map(self.grid)

    def render_frame(self, *, show_status: bool = True) -> str:
        return render_frame(self.grid, self.player, show_status=show_status)

    def status_line(self) -> str:
        return format_status(self.player)

    def snapshot(self) -> GameSnapshot:
        """Deep copy of the current state."""
        return GameSnapshot(
            width=self.width,
            height=self.height,
            tiles=self.grid.snapshot(),
            player=self.player.model_copy(deep=True),
            hostiles=[hostile.model_copy(deep=True) for hostile in self.hostiles],
        )

    def check_invariants(self) -> None:
        """Verify the grid and the registry agree on where every entity is.

        Raises:
            OccupancyInvariantError: If the player reference is missing,
                duplicated, or on a tile other than the recorded position, or
                if a hostile is not referenced exactly once, on its spawn tile.
        """
        self._check_player()
        self._check_hostiles()

    def _check_hostiles(self) -> None:
        seen: Dict[str, List[Tuple[int, int]]] = {}
        for y in range(self.height):
            for x in range(self.width):
                for occupant in self.grid.tile_at(x, y):
                    if occupant.kind == "hostile":
                        seen.setdefault(occupant.entity_id, []).append((x, y))

        known = {hostile.entity_id for hostile in self.hostiles}
        unknown = sorted(set(seen) - known)
        if unknown:
            raise OccupancyInvariantError(f"Tiles reference unregistered hostiles: {unknown}")

        for hostile in self.hostiles:
            positions = seen.get(hostile.entity_id, [])
            if positions != [tuple(hostile.position)]:
                raise OccupancyInvariantError(
                    f"Hostile '{hostile.entity_id}' spawned at {hostile.position} "
                    f"but referenced from {positions}"
                )

    def _check_player(self) -> None:
        positions = self.grid.player_positions()
        if len(positions) != 1:
            raise OccupancyInvariantError(
                f"Expected exactly one player tile, found {len(positions)}: {positions}"
            )
        if positions[0] != tuple(self.player.position):
            raise OccupancyInvariantError(
                f"Player recorded at {self.player.position} but found on tile {positions[0]}"
            )
        refs = [
            occupant
            for occupant in self.grid.tile_at(*positions[0])
            if occupant.kind == "player"
        ]
        if len(refs) != 1 or refs[0].entity_id != self.player.entity_id:
            raise OccupancyInvariantError(
                f"Tile {positions[0]} does not hold a single reference to '{self.player.entity_id}'"
            )
