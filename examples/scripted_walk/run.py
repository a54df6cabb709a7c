"""
Scripted Walk - replay a command string against a bundled map
==============================================================

WHAT THIS SHOWS:
- Loading a named map with MapLoader
- Feeding commands to Game.apply_command without a terminal
- Reading TurnResult outcomes (moved, off the map, unknown command)

RUN:
    python examples/scripted_walk/run.py
    python examples/scripted_walk/run.py --commands "llllhhjj" --map emu_pen
"""

import argparse

from tilecrawl import MapLoader, TurnOutcome
from tilecrawl.logging_utils import log_info, log_success, log_turn, log_warning

MAP_SIZES = {
    "emu_pen": (12, 6),
    "corner": (3, 3),
}


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Replay tilecrawl commands on a bundled map")
    parser.add_argument("--map", default="emu_pen", choices=sorted(MAP_SIZES), help="Map to load")
    parser.add_argument("--commands", default="llllljjjkkhx,q", help="Command characters, one per turn")
    return parser.parse_args()


def main(args: argparse.Namespace) -> None:
    width, height = MAP_SIZES[args.map]
    game = MapLoader().load(args.map, width, height)
    log_info(f"{args.map}: {width}x{height}, {len(game.hostiles)} hostile(s)")
    print(game.render_frame())

    for command in args.commands:
        result = game.apply_command(command)
        if result.outcome == TurnOutcome.MOVED:
            log_turn(f"{command}: {result.move.origin} -> {result.move.target}")
        elif result.outcome == TurnOutcome.OUT_OF_BOUNDS:
            log_warning(f"{command}: {result.move.target} is off the map")
        elif result.message:
            log_warning(f"{command}: {result.message}")
        if result.ends_session:
            break
        game.check_invariants()

    print(game.render_frame())
    log_success(f"Player finished at {game.player.position}")


if __name__ == "__main__":
    main(parse_args())
