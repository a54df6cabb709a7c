"""
Pydantic schemas for turn results and game snapshots.

Tile and entity models live in ``tilecrawl.environment.schemas``; this module
holds the records produced by the movement engine and the command dispatcher,
plus a serializable snapshot of the whole game.
"""

from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from tilecrawl.environment import Hostile, Occupant, Player


class Direction(str, Enum):
    """The four axis-aligned step directions."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


# Screen coordinates: x grows to the right, y grows downwards (row 0 is the top row).
DIRECTION_OFFSETS = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
}


class MoveOutcome(str, Enum):
    MOVED = "moved"
    OUT_OF_BOUNDS = "out_of_bounds"


class MoveResult(BaseModel):
    """Result of a single ``MovementEngine.move_player`` call."""

    outcome: MoveOutcome
    direction: Direction
    origin: Tuple[int, int] = Field(..., description="Player position before the call")
    # For a rejected move this is the off-map coordinate that was refused.
    target: Tuple[int, int] = Field(..., description="Candidate position")

    @property
    def moved(self) -> bool:
        return self.outcome == MoveOutcome.MOVED


class TurnOutcome(str, Enum):
    MOVED = "moved"
    OUT_OF_BOUNDS = "out_of_bounds"
    PASSED = "passed"
    QUIT = "quit"
    UNRECOGNIZED = "unrecognized"


class TurnResult(BaseModel):
    """Result of dispatching one command line to the game.

    Only QUIT ends the session; every other outcome returns to the prompt.
    """

    outcome: TurnOutcome
    command: str = Field(..., description="Command character that was read ('' for an empty line)")
    move: Optional[MoveResult] = Field(None, description="Set for movement commands")
    message: Optional[str] = Field(None, description="Text to show the user, if any")

    @property
    def ends_session(self) -> bool:
        return self.outcome == TurnOutcome.QUIT


class GameSnapshot(BaseModel):
    """Complete copy of the game state at one point in time.

    Used to compare state across a turn; JSON-serializable via ``model_dump``.
    """

    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    tiles: List[List[Occupant]] = Field(..., description="Occupants per tile, row-major")
    player: Player
    hostiles: List[Hostile] = Field(default_factory=list)
