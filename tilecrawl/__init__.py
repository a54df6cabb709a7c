"""
Tilecrawl - turn-based grid crawler.

Load a fixed-size text map, then move the player one tile per command.
The occupancy grid and the entity registry are kept in agreement after
every turn: exactly one tile holds the player, and it is the tile the
player record says it is on.
"""

__version__ = "0.1.0"

# Map occupancy and entities
from .environment import (
    EntityRegistry,
    Gold,
    Hostile,
    HostileRef,
    OccupancyGrid,
    OccupancyInvariantError,
    OutOfBoundsError,
    Player,
    PlayerRef,
    Terrain,
    TerrainKind,
    format_status,
    render_map,
)

# Turn records
from .schemas import (
    Direction,
    GameSnapshot,
    MoveOutcome,
    MoveResult,
    TurnOutcome,
    TurnResult,
)

# Engine, game and loading
from .movement import MovementEngine
from .game import Game
from .loader import (
    DuplicatePlayerError,
    LoadfileError,
    MalformedLoadfileError,
    MapLoader,
    MissingPlayerError,
    load_game,
    load_game_file,
)

__all__ = [
    # Occupancy and entities
    "EntityRegistry",
    "Gold",
    "Hostile",
    "HostileRef",
    "OccupancyGrid",
    "OccupancyInvariantError",
    "OutOfBoundsError",
    "Player",
    "PlayerRef",
    "Terrain",
    "TerrainKind",
    "format_status",
    "render_map",
    # Turn records
    "Direction",
    "GameSnapshot",
    "MoveOutcome",
    "MoveResult",
    "TurnOutcome",
    "TurnResult",
    # Engine and game
    "MovementEngine",
    "Game",
    # Loading
    "DuplicatePlayerError",
    "LoadfileError",
    "MalformedLoadfileError",
    "MapLoader",
    "MissingPlayerError",
    "load_game",
    "load_game_file",
]
