"""Map occupancy and entity storage for Tilecrawl."""

from .grid import (
    OccupancyGrid,
    OccupancyInvariantError,
    OutOfBoundsError,
    occupant_glyph,
)
from .registry import EntityRegistry
from .schemas import (
    PLAYER_ID,
    Gold,
    Hostile,
    HostileRef,
    Occupant,
    Player,
    PlayerRef,
    Terrain,
    TerrainKind,
)
from .helpers import format_status, render_frame, render_map

__all__ = [
    "OccupancyGrid",
    "OccupancyInvariantError",
    "OutOfBoundsError",
    "occupant_glyph",
    "EntityRegistry",
    "PLAYER_ID",
    "Gold",
    "Hostile",
    "HostileRef",
    "Occupant",
    "Player",
    "PlayerRef",
    "Terrain",
    "TerrainKind",
    "format_status",
    "render_frame",
    "render_map",
]
