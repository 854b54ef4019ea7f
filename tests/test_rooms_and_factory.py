from __future__ import annotations

import pytest

from castle_kingdom.factory import RoomFactory
from castle_kingdom.rooms import Room, RoomKind


@pytest.mark.parametrize(
    ("kind", "fragment"),
    [(RoomKind.THRONE_ROOM, "camera tronului, "), (RoomKind.DUNGEON, "temnita, ")],
)
def test_factory_builds_room_with_kind_label(kind: RoomKind, fragment: str) -> None:
    room = RoomFactory().create(kind)

    assert room is not None
    assert room.kind is kind
    assert room.describe() == fragment


def test_factory_accepts_kind_values() -> None:
    room = RoomFactory().create("dungeon")

    assert room is not None
    assert room.label == "temnita"


@pytest.mark.parametrize("kind", ["ballroom", "", None, 3])
def test_factory_returns_none_for_unknown_kind(kind) -> None:
    assert RoomFactory().create(kind) is None


def test_factory_returns_fresh_instances() -> None:
    factory = RoomFactory()

    first = factory.create(RoomKind.THRONE_ROOM)
    second = factory.create(RoomKind.THRONE_ROOM)

    assert first is not second


def test_clone_describes_like_source_and_is_independent() -> None:
    source = Room.dungeon()
    clone = source.clone_self()

    assert clone is not source
    assert clone.describe() == source.describe()
    assert clone.kind is source.kind

    clone.kind = RoomKind.THRONE_ROOM
    assert source.describe() == "temnita, "

    del clone
    assert source.describe() == "temnita, "
