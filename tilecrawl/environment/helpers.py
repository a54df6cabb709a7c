"""Read-only views over the occupancy grid for console display."""

from __future__ import annotations

from typing import List

from .grid import OccupancyGrid
from .schemas import Player


def render_map(grid: OccupancyGrid) -> str:
    """Render the whole map, one line per row, top row first.

    Each tile shows ``@`` when the player stands on it, otherwise the glyph of
    its first occupant (rock `` ``, floor ``.``, wall ``#``, gold ``*``,
    hostile ``E``).
    """

    return grid.render()


def format_status(player: Player) -> str:
    """Format the player's stats as a single status line.

    Example output:
    "HP=42, Damage=7, Gold=0"
    """

    parts: List[str] = [
        f"HP={player.hp}",
        f"Damage={player.damage}",
        f"Gold={player.gold}",
    ]
    return ", ".join(parts)


def render_frame(grid: OccupancyGrid, player: Player, *, show_status: bool = True) -> str:
    """Map plus an optional status line underneath, as printed each turn."""

    frame = render_map(grid)
    if show_status:
        frame = f"{frame}\n{format_status(player)}"
    return frame
