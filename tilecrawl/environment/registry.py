"""Entity registry: canonical storage for the player and hostile records."""

from __future__ import annotations

from typing import Dict, Iterable, Tuple, Union

from .schemas import Hostile, HostileRef, Player, PlayerRef


class EntityRegistry:
    """Owns the single player and the hostiles placed on the map.

    The grid refers to entities by ``entity_id``; ``resolve()`` turns such a
    reference back into the live record. Records are handed out as shared
    handles, so in-place updates are visible to every caller.
    """

    def __init__(self, player: Player, hostiles: Iterable[Hostile] = ()):
        if player is None:
            raise ValueError("A registry needs exactly one player")
        self._player = player
        self._hostiles: Dict[str, Hostile] = {}
        for hostile in hostiles:
            if hostile.entity_id == player.entity_id or hostile.entity_id in self._hostiles:
                raise ValueError(f"Duplicate entity id: {hostile.entity_id}")
            self._hostiles[hostile.entity_id] = hostile

    def player(self) -> Player:
        return self._player

    def hostiles(self) -> Tuple[Hostile, ...]:
        """Hostiles in registration order."""
        return tuple(self._hostiles.values())

    def get(self, entity_id: str) -> Union[Player, Hostile]:
        """Look up an entity by id.

        Raises:
            KeyError: If no entity has that id.
        """
        if entity_id == self._player.entity_id:
            return self._player
        try:
            return self._hostiles[entity_id]
        except KeyError:
            raise KeyError(f"Unknown entity '{entity_id}'") from None

    def resolve(self, ref: Union[PlayerRef, HostileRef]) -> Union[Player, Hostile]:
        return self.get(ref.entity_id)

    def __len__(self) -> int:
        return 1 + len(self._hostiles)
