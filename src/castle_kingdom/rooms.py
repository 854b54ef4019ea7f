"""Room variants and their cloning capability."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Protocol


class RoomKind(str, Enum):
    """Discriminant selecting which room variant to build."""

    THRONE_ROOM = "throne_room"
    DUNGEON = "dungeon"


ROOM_LABELS: dict[RoomKind, str] = {
    RoomKind.THRONE_ROOM: "camera tronului",
    RoomKind.DUNGEON: "temnita",
}


class RoomPrototype(Protocol):
    """Anything that can describe itself and produce an independent copy."""

    def describe(self) -> str:
        """Return the fragment used in the castle description."""

    def clone_self(self) -> RoomPrototype:
        """Return a new object of the same variant."""


@dataclass(slots=True, eq=False)
class Room:
    """A single chamber. Its kind is the only state it carries."""

    kind: RoomKind

    @property
    def label(self) -> str:
        return ROOM_LABELS[self.kind]

    def describe(self) -> str:
        return f"{self.label}, "

    def clone_self(self) -> Room:
        return replace(self)

    @classmethod
    def throne_room(cls) -> Room:
        return cls(RoomKind.THRONE_ROOM)

    @classmethod
    def dungeon(cls) -> Room:
        return cls(RoomKind.DUNGEON)
