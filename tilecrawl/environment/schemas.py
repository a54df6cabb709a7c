"""Pydantic schemas for tiles and the entities that stand on them.

Tile occupants are small frozen values discriminated by ``kind``. Entity
records (``Player``, ``Hostile``) are mutable and owned by the
``EntityRegistry``; tiles only carry their ``entity_id``.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

PLAYER_ID = "player"


class TerrainKind(str, Enum):
    """Base terrain a tile can be made of."""

    ROCK = "rock"
    EMPTY = "empty"
    WALL = "wall"


class Terrain(BaseModel):
    """Terrain marker; conventionally the first entry of a tile."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["terrain"] = "terrain"
    terrain: TerrainKind


class Gold(BaseModel):
    """A pile of gold lying on a tile."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["gold"] = "gold"
    amount: int = Field(..., ge=0, description="Coins in the pile")


class PlayerRef(BaseModel):
    """Non-owning reference to the player record held by the registry."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["player"] = "player"
    entity_id: str = PLAYER_ID


class HostileRef(BaseModel):
    """Non-owning reference to a hostile record held by the registry."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["hostile"] = "hostile"
    entity_id: str


Occupant = Annotated[
    Union[Terrain, Gold, PlayerRef, HostileRef],
    Field(discriminator="kind"),
]


class Player(BaseModel):
    """The single controllable actor.

    Mutated in place (position, hp, gold) so every holder of the record sees
    the same values.
    """

    entity_id: str = Field(PLAYER_ID, description="Registry key")
    position: Tuple[int, int] = Field(..., description="Current (x, y) tile")
    hp: int = Field(..., ge=0, description="Hit points")
    damage: int = Field(..., ge=0, description="Damage dealt per hit")
    gold: int = Field(0, ge=0, description="Gold carried")

    def ref(self) -> PlayerRef:
        return PlayerRef(entity_id=self.entity_id)


class Hostile(BaseModel):
    """A stationary hostile actor, referenced from its spawn tile."""

    entity_id: str = Field(..., description="Registry key, e.g. hostile-1")
    position: Tuple[int, int] = Field(..., description="Spawn (x, y) tile")
    hp: int = Field(..., ge=0, description="Hit points")
    damage: int = Field(..., ge=0, description="Damage dealt per hit")

    def ref(self) -> HostileRef:
        return HostileRef(entity_id=self.entity_id)
