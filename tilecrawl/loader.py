"""
Loadfile parsing: turns a fixed-size character buffer into a Game.

A loadfile is ``height`` rows of ``width`` characters. Newlines between rows
are skipped and do not take up a cell. Characters after the last cell are
ignored.

Character map:
    ' '   rock
    '.'   empty floor
    '@'   the player, standing on empty floor (exactly one required)
    'E'   a hostile
    '*'   a pile of gold
    '#'   wall

Usage:
    game = load_game(b"@..\\n...\\n..#", width=3, height=3)

    loader = MapLoader()
    game = loader.load("emu_pen", width=12, height=6)
"""

from pathlib import Path
from typing import Dict, List, Optional, Union

from .config import Config
from .environment import (
    EntityRegistry,
    Gold,
    Hostile,
    OccupancyGrid,
    Occupant,
    Player,
    Terrain,
    TerrainKind,
)
from .game import Game

NEWLINE_CHARS = frozenset("\r\n")


# =============================
# Module-level Exceptions
# =============================

class LoadfileError(ValueError):
    """Base class for every failure to build a Game from a loadfile."""


class MalformedLoadfileError(LoadfileError):
    """Raised for an unknown character or a buffer that is too short."""

    def __init__(self, message: str, *, position: Optional[tuple] = None, char: Optional[str] = None) -> None:
        self.position = position
        self.char = char
        super().__init__(message)


class DuplicatePlayerError(LoadfileError):
    """Raised when a loadfile places a second player."""

    def __init__(self, *, first: tuple, second: tuple) -> None:
        self.first = first
        self.second = second
        super().__init__(
            f"More than one player in loadfile: '@' at {first} and again at {second}"
        )


class MissingPlayerError(LoadfileError):
    """Raised when a loadfile has no player at all."""

    def __init__(self) -> None:
        super().__init__("Loadfile has no player ('@')")


def _decode(raw: Union[bytes, str]) -> str:
    if isinstance(raw, str):
        return raw
    # latin-1 maps every byte to one character, so stray bytes reach the
    # unknown-character check instead of failing to decode.
    return raw.decode("latin-1")


def load_game(
    raw: Union[bytes, str],
    width: int,
    height: int,
    *,
    player_hp: Optional[int] = None,
    player_damage: Optional[int] = None,
    hostile_hp: Optional[int] = None,
    hostile_damage: Optional[int] = None,
    gold_amount: Optional[int] = None,
) -> Game:
    """Parse a loadfile buffer into a new Game.

    Stats default to the values in ``Config``.

    Args:
        raw: Loadfile contents (bytes or text)
        width: Number of cells per row
        height: Number of rows

    Returns:
        Game with the player on its starting tile and every hostile registered

    Raises:
        LoadfileError: If width or height is not positive
        MalformedLoadfileError: Unknown character, or fewer than width*height cells
        DuplicatePlayerError: More than one '@'
        MissingPlayerError: No '@'
    """
    if width <= 0 or height <= 0:
        raise LoadfileError(f"Map dimensions must be positive, got {width}x{height}")

    player_hp = Config.PLAYER_HP if player_hp is None else player_hp
    player_damage = Config.PLAYER_DAMAGE if player_damage is None else player_damage
    hostile_hp = Config.HOSTILE_HP if hostile_hp is None else hostile_hp
    hostile_damage = Config.HOSTILE_DAMAGE if hostile_damage is None else hostile_damage
    gold_amount = Config.GOLD_AMOUNT if gold_amount is None else gold_amount

    text = _decode(raw)
    total = width * height
    tiles: List[List[Occupant]] = []
    player: Optional[Player] = None
    hostiles: List[Hostile] = []

    for char in text:
        if len(tiles) == total:
            break
        if char in NEWLINE_CHARS:
            continue

        x, y = len(tiles) % width, len(tiles) // width

        if char == " ":
            tiles.append([Terrain(terrain=TerrainKind.ROCK)])
        elif char == ".":
            tiles.append([Terrain(terrain=TerrainKind.EMPTY)])
        elif char == "@":
            if player is not None:
                raise DuplicatePlayerError(first=player.position, second=(x, y))
            player = Player(position=(x, y), hp=player_hp, damage=player_damage, gold=0)
            # Floor goes under the player so it shows again once the player leaves.
            tiles.append([player.ref(), Terrain(terrain=TerrainKind.EMPTY)])
        elif char == "E":
            hostile = Hostile(
                entity_id=f"hostile-{len(hostiles) + 1}",
                position=(x, y),
                hp=hostile_hp,
                damage=hostile_damage,
            )
            hostiles.append(hostile)
            tiles.append([hostile.ref()])
        elif char == "*":
            tiles.append([Gold(amount=gold_amount)])
        elif char == "#":
            tiles.append([Terrain(terrain=TerrainKind.WALL)])
        else:
            raise MalformedLoadfileError(
                f"Unknown character {char!r} at {(x, y)} in loadfile",
                position=(x, y),
                char=char,
            )

    if player is None:
        raise MissingPlayerError()

    if len(tiles) < total:
        raise MalformedLoadfileError(
            f"Loadfile ended after {len(tiles)} of {total} cells ({width}x{height})"
        )

    grid = OccupancyGrid(width=width, height=height, tiles=tiles)
    registry = EntityRegistry(player, hostiles)
    return Game(grid, registry)


def load_game_file(path: Union[str, Path], width: int, height: int, **stats: int) -> Game:
    """Read a loadfile from disk and parse it with ``load_game``.

    Raises:
        FileNotFoundError: If the file does not exist
        OSError: If the file cannot be read
        LoadfileError: If the contents are not a valid loadfile
    """
    return load_game(Path(path).read_bytes(), width, height, **stats)


class MapLoader:
    """Load named maps from a directory of ``.txt`` loadfiles.

    Directory structure:
    - Default: Config.MAPS_DIR (the maps bundled in tilecrawl/maps)
    - Override via constructor: MapLoader(Path("/custom/maps"))
    - Map files: {map_name}.txt (e.g., "emu_pen.txt")
    """

    def __init__(self, maps_dir: Optional[Path] = None):
        self.maps_dir = Path(maps_dir) if maps_dir is not None else Config.MAPS_DIR

    def path_for(self, map_name: str) -> Path:
        return self.maps_dir / f"{map_name}.txt"

    def load(self, map_name: str, width: int, height: int, **stats: int) -> Game:
        """Load a map by name.

        Raises:
            FileNotFoundError: If no {map_name}.txt exists in maps_dir
            LoadfileError: If the file is not a valid loadfile
        """
        map_path = self.path_for(map_name)

        if not map_path.exists():
            raise FileNotFoundError(f"Map '{map_name}' not found at {map_path}")

        return load_game_file(map_path, width, height, **stats)

    def list_maps(self) -> List[str]:
        """List available map names (without .txt extension)."""
        if not self.maps_dir.exists():
            return []

        return sorted(
            f.stem for f in self.maps_dir.glob("*.txt")
            if not f.name.startswith("_")
        )

    def get_map_info(self, map_name: str) -> Dict[str, int]:
        """Row count and widest row of a map file, without parsing it."""
        rows = self.path_for(map_name).read_text(encoding="latin-1").splitlines()
        return {
            "rows": len(rows),
            "widest_row": max((len(row) for row in rows), default=0),
        }
