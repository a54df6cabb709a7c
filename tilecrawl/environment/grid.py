"""Occupancy grid: the width x height map of tile occupant lists.

Each tile holds an ordered list of occupants. The base entry (terrain, gold
or a hostile) comes first; the player reference is appended when the player
steps onto the tile and removed again when it leaves. Entity state lives in
the registry, the grid only stores references.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from .schemas import Gold, HostileRef, Occupant, PlayerRef, Terrain, TerrainKind

PLAYER_GLYPH = "@"

TERRAIN_GLYPHS = {
    TerrainKind.ROCK: " ",
    TerrainKind.EMPTY: ".",
    TerrainKind.WALL: "#",
}
GOLD_GLYPH = "*"
HOSTILE_GLYPH = "E"


class OutOfBoundsError(IndexError):
    """Raised when a coordinate falls outside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        self.x = x
        self.y = y
        super().__init__(
            f"Coordinate ({x}, {y}) is outside the {width}x{height} grid"
        )


class OccupancyInvariantError(AssertionError):
    """Raised when the grid and the registry disagree about the player."""


def occupant_glyph(occupant: Occupant) -> str:
    """Glyph for a single occupant."""
    if isinstance(occupant, PlayerRef):
        return PLAYER_GLYPH
    if isinstance(occupant, Terrain):
        return TERRAIN_GLYPHS[occupant.terrain]
    if isinstance(occupant, Gold):
        return GOLD_GLYPH
    if isinstance(occupant, HostileRef):
        return HOSTILE_GLYPH
    raise TypeError(f"Unknown occupant: {occupant!r}")


@dataclass
class OccupancyGrid:
    """Dense 2D grid of occupant lists, flat-indexed by ``y * width + x``."""

    width: int
    height: int
    tiles: List[List[Occupant]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Grid dimensions must be positive, got {self.width}x{self.height}"
            )
        if len(self.tiles) != self.width * self.height:
            raise ValueError(
                f"Expected {self.width * self.height} tiles, got {len(self.tiles)}"
            )
        for index, tile in enumerate(self.tiles):
            if not any(not isinstance(occupant, PlayerRef) for occupant in tile):
                x, y = index % self.width, index // self.width
                raise ValueError(f"Tile ({x}, {y}) has no base occupant")

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _index(self, x: int, y: int) -> int:
        # Python would happily wrap negative indices, so both bounds are explicit.
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.width, self.height)
        return y * self.width + x

    def tile_at(self, x: int, y: int) -> Tuple[Occupant, ...]:
        """Return the occupants of tile (x, y) in append order.

        Raises:
            OutOfBoundsError: If (x, y) is not on the grid.
        """
        return tuple(self.tiles[self._index(x, y)])

    def remove_player(self, x: int, y: int) -> None:
        """Drop the player reference from (x, y), keeping everything else in order.

        Raises:
            OutOfBoundsError: If (x, y) is not on the grid.
            OccupancyInvariantError: If the tile holds no player reference.
        """
        index = self._index(x, y)
        tile = self.tiles[index]
        remaining = [occupant for occupant in tile if not isinstance(occupant, PlayerRef)]
        if len(remaining) == len(tile):
            raise OccupancyInvariantError(f"No player on tile ({x}, {y})")
        self.tiles[index] = remaining

    def insert_player(self, x: int, y: int, ref: PlayerRef) -> None:
        """Append the player reference to (x, y)."""
        self.tiles[self._index(x, y)].append(ref)

    def render_glyph(self, x: int, y: int) -> str:
        """Player glyph if the player is here, otherwise the first occupant's glyph."""
        tile = self.tiles[self._index(x, y)]
        if any(isinstance(occupant, PlayerRef) for occupant in tile):
            return PLAYER_GLYPH
        return occupant_glyph(tile[0])

    def player_positions(self) -> List[Tuple[int, int]]:
        """Every (x, y) whose tile holds a player reference."""
        positions = []
        for index, tile in enumerate(self.tiles):
            if any(isinstance(occupant, PlayerRef) for occupant in tile):
                positions.append((index % self.width, index // self.width))
        return positions

    def render(self) -> str:
        """All rows of glyphs, top row first, joined by newlines."""
        rows = []
        for y in range(self.height):
            rows.append("".join(self.render_glyph(x, y) for x in range(self.width)))
        return "\n".join(rows)

    def snapshot(self) -> List[List[Occupant]]:
        """Copy of every tile's occupant list (occupants are frozen)."""
        return [list(tile) for tile in self.tiles]
