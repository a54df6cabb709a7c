"""
Tilecrawl Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Config:
    """Application configuration loaded from environment variables."""

    # Starting stats for the player ('@' in a loadfile)
    PLAYER_HP: int = int(os.getenv("TILECRAWL_PLAYER_HP", "42"))
    PLAYER_DAMAGE: int = int(os.getenv("TILECRAWL_PLAYER_DAMAGE", "7"))

    # Starting stats for hostiles ('E' in a loadfile)
    HOSTILE_HP: int = int(os.getenv("TILECRAWL_HOSTILE_HP", "42"))
    HOSTILE_DAMAGE: int = int(os.getenv("TILECRAWL_HOSTILE_DAMAGE", "1"))

    # Size of every gold pile ('*' in a loadfile)
    GOLD_AMOUNT: int = int(os.getenv("TILECRAWL_GOLD_AMOUNT", "42"))

    # Console
    SHOW_STATUS: bool = _env_flag("TILECRAWL_SHOW_STATUS", "true")

    # Project Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    # Shipped as package data, so named maps resolve after a regular install
    BUNDLED_MAPS_DIR: Path = Path(__file__).parent / "maps"
    MAPS_DIR: Path = Path(os.getenv("TILECRAWL_MAPS_DIR", str(BUNDLED_MAPS_DIR)))

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are unusable."""
        stats = {
            "TILECRAWL_PLAYER_HP": cls.PLAYER_HP,
            "TILECRAWL_PLAYER_DAMAGE": cls.PLAYER_DAMAGE,
            "TILECRAWL_HOSTILE_HP": cls.HOSTILE_HP,
            "TILECRAWL_HOSTILE_DAMAGE": cls.HOSTILE_DAMAGE,
            "TILECRAWL_GOLD_AMOUNT": cls.GOLD_AMOUNT,
        }
        negative = [name for name, value in stats.items() if value < 0]
        if negative:
            raise ValueError(
                f"Configuration values must not be negative: {', '.join(negative)}"
            )

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "Tilecrawl Configuration:",
            f"  Player: hp={cls.PLAYER_HP} damage={cls.PLAYER_DAMAGE}",
            f"  Hostile: hp={cls.HOSTILE_HP} damage={cls.HOSTILE_DAMAGE}",
            f"  Gold per pile: {cls.GOLD_AMOUNT}",
            f"  Show status: {cls.SHOW_STATUS}",
            f"  Maps: {cls.MAPS_DIR}",
        ]
        return "\n".join(lines)
