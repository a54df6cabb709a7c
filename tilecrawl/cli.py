"""
Command-line front end for Tilecrawl.

Usage:
    tilecrawl path/to/room.txt 12 6
    tilecrawl emu_pen 12 6          # looked up in Config.MAPS_DIR
    tilecrawl --list-maps

Each turn prints the map (plus a status line unless --no-status), then reads
one line of input. ``q`` or end of input ends the session.
"""

import argparse
import sys
from pathlib import Path
from typing import Callable, List, Optional

from .config import Config
from .game import Game
from .loader import MapLoader, load_game_file
from .logging_utils import (
    log_error,
    log_info,
    log_success,
    log_turn,
    log_warning,
    verbose_enabled,
)
from .schemas import TurnOutcome

EXIT_OK = 0
EXIT_LOAD_FAILED = 1

PROMPT = "Input: "


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tilecrawl",
        description="Walk a text-file map one step per command (h/j/k/l, ',' to wait, q to quit).",
    )
    parser.add_argument("mapfile", nargs="?", help="Loadfile path, or a map name from the maps directory")
    parser.add_argument("width", nargs="?", type=int, help="Cells per row")
    parser.add_argument("height", nargs="?", type=int, help="Number of rows")
    parser.add_argument("--no-status", action="store_true", help="Hide the HP/Damage/Gold line")
    parser.add_argument("--show-config", action="store_true", help="Print configuration before starting")
    parser.add_argument("--list-maps", action="store_true", help="List maps in the maps directory and exit")
    return parser


def open_game(mapfile: str, width: int, height: int) -> Game:
    """Load ``mapfile`` as a path, falling back to a named map in Config.MAPS_DIR."""
    path = Path(mapfile)
    if path.exists():
        return load_game_file(path, width, height)
    return MapLoader().load(mapfile, width, height)


def run_session(
    game: Game,
    *,
    read_line: Optional[Callable[[str], str]] = None,
    show_status: bool = True,
) -> int:
    """Drive the interactive loop until quit or end of input.

    Returns:
        Number of turns processed (including the quitting one)
    """
    read_line = read_line or input
    verbose = verbose_enabled()
    turns = 0

    while True:
        print(game.render_frame(show_status=show_status))
        try:
            line = read_line(PROMPT)
        except EOFError:
            print()
            return turns

        result = game.apply_command(line)
        turns += 1

        if result.outcome == TurnOutcome.QUIT:
            print(result.message)
            return turns
        if result.outcome == TurnOutcome.UNRECOGNIZED:
            print(result.message)
        elif verbose and result.move is not None:
            if result.outcome == TurnOutcome.MOVED:
                log_turn(f"{result.move.direction.value}: {result.move.origin} -> {result.move.target}")
            else:
                log_warning(f"{result.move.direction.value}: {result.move.target} is off the map")
        elif verbose and result.outcome == TurnOutcome.PASSED:
            log_turn("pass")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.show_config:
        print(Config.display())

    if args.list_maps:
        loader = MapLoader()
        for name in loader.list_maps():
            info = loader.get_map_info(name)
            print(f"{name}  ({info['widest_row']}x{info['rows']})")
        return EXIT_OK

    if args.mapfile is None or args.width is None or args.height is None:
        parser.error("mapfile, width and height are required")

    try:
        Config.validate()
        game = open_game(args.mapfile, args.width, args.height)
    except (ValueError, OSError) as exc:
        log_error(f"Could not load {args.mapfile}: {exc}")
        return EXIT_LOAD_FAILED

    if verbose_enabled():
        log_success(f"Loaded {game.width}x{game.height} map")
        log_info(f"{len(game.hostiles)} hostile(s), player at {game.player.position}")

    show_status = Config.SHOW_STATUS and not args.no_status
    run_session(game, show_status=show_status)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
