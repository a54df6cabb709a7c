"""Logging utilities for Tilecrawl sessions.

Provides color-coded console output so map frames, turn traces and errors
are easy to tell apart.
"""

import os
from enum import Enum


class Color(Enum):
    """ANSI color codes for terminal output."""

    BLUE = "\033[94m"      # Turn traces (moves, passes)
    RED = "\033[91m"       # Load failures
    GREEN = "\033[92m"     # Successful load / exit
    CYAN = "\033[96m"      # Info/metadata
    YELLOW = "\033[93m"    # Rejected or unknown commands

    # Formatting
    BOLD = "\033[1m"
    RESET = "\033[0m"


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Wrap text in ANSI color codes if colors are enabled.

    Args:
        text: Text to colorize
        color: Color to apply
        bold: Whether to make text bold

    Returns:
        Colorized text if TILECRAWL_NO_COLOR is not set, otherwise plain text
    """
    if os.getenv("TILECRAWL_NO_COLOR"):
        return text

    prefix = color.value
    if bold:
        prefix = Color.BOLD.value + prefix

    return f"{prefix}{text}{Color.RESET.value}"


def verbose_enabled() -> bool:
    """True when TILECRAWL_VERBOSE asks for per-turn traces."""
    return os.getenv("TILECRAWL_VERBOSE", "").strip().lower() in {"1", "true", "yes", "on"}


def log_turn(message: str) -> None:
    """Log a turn trace (blue)."""
    print(colored(f"{LOG_TAG_TURN} {message}", Color.BLUE))


def log_warning(message: str) -> None:
    """Log a recoverable problem (yellow)."""
    print(colored(f"{LOG_TAG_WARNING} {message}", Color.YELLOW))


def log_error(message: str) -> None:
    """Log an error (red)."""
    print(colored(f"{LOG_TAG_ERROR} {message}", Color.RED))


def log_success(message: str) -> None:
    """Log a success (green)."""
    print(colored(f"{LOG_TAG_SUCCESS} {message}", Color.GREEN))


def log_info(message: str) -> None:
    """Log metadata/info (cyan)."""
    print(colored(f"{LOG_TAG_INFO} {message}", Color.CYAN))


# Markers for message types (color-blind accessible)
LOG_TAG_TURN = "[•]"
LOG_TAG_WARNING = "[?]"
LOG_TAG_ERROR = "[!]"
LOG_TAG_SUCCESS = "[✓]"
LOG_TAG_INFO = "[i]"
