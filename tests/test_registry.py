"""Tests for the entity registry and entity schemas."""

import pytest
from pydantic import ValidationError

from tilecrawl.environment import (
    EntityRegistry,
    Hostile,
    HostileRef,
    Player,
    PlayerRef,
)


def make_registry() -> EntityRegistry:
    player = Player(position=(1, 1), hp=42, damage=7)
    hostiles = [
        Hostile(entity_id="hostile-1", position=(3, 0), hp=42, damage=1),
        Hostile(entity_id="hostile-2", position=(0, 2), hp=42, damage=1),
    ]
    return EntityRegistry(player, hostiles)


def test_player_handle_is_shared():
    registry = make_registry()
    registry.player().gold += 42
    registry.player().hp -= 5

    assert registry.player().gold == 42
    assert registry.player().hp == 37
    assert registry.player() is registry.get("player")


def test_hostiles_keep_registration_order():
    registry = make_registry()
    assert [h.entity_id for h in registry.hostiles()] == ["hostile-1", "hostile-2"]
    assert len(registry) == 3


def test_hostile_updates_visible_through_every_lookup():
    registry = make_registry()
    registry.hostiles()[0].hp = 10
    assert registry.get("hostile-1").hp == 10
    assert registry.resolve(HostileRef(entity_id="hostile-1")).hp == 10


def test_resolve_player_ref():
    registry = make_registry()
    assert registry.resolve(PlayerRef()) is registry.player()
    assert registry.player().ref() == PlayerRef(entity_id="player")


def test_unknown_entity_raises_key_error():
    registry = make_registry()
    with pytest.raises(KeyError):
        registry.get("hostile-9")


def test_registry_requires_a_player():
    with pytest.raises(ValueError):
        EntityRegistry(None)


def test_duplicate_ids_rejected():
    player = Player(position=(0, 0), hp=42, damage=7)
    twin = Hostile(entity_id="hostile-1", position=(1, 0), hp=1, damage=1)
    with pytest.raises(ValueError):
        EntityRegistry(player, [twin, twin.model_copy()])
    with pytest.raises(ValueError):
        EntityRegistry(player, [Hostile(entity_id="player", position=(1, 0), hp=1, damage=1)])


def test_entity_stats_must_not_be_negative():
    with pytest.raises(ValidationError):
        Player(position=(0, 0), hp=-1, damage=7)
    with pytest.raises(ValidationError):
        Hostile(entity_id="hostile-1", position=(0, 0), hp=1, damage=-3)


def test_occupant_refs_are_frozen():
    ref = HostileRef(entity_id="hostile-1")
    with pytest.raises(ValidationError):
        ref.entity_id = "hostile-2"
