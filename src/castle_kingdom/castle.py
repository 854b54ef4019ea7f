"""The castle: an ordered collection of rooms it exclusively owns."""

from __future__ import annotations

from typing import Callable

from castle_kingdom.rooms import Room

DESCRIPTION_PREFIX = "Castelul are: "


class Castle:
    """Append-only sequence of rooms, kept in the order they were added."""

    def __init__(self) -> None:
        self._rooms: list[Room] = []

    def __len__(self) -> int:
        return len(self._rooms)

    @property
    def rooms(self) -> tuple[Room, ...]:
        return tuple(self._rooms)

    def add_room(self, room: Room) -> None:
        if room is None:
            raise TypeError("Castle cannot hold an absent room")
        self._rooms.append(room)

    def description(self) -> str:
        fragments = "".join(room.describe() for room in self._rooms)
        return f"{DESCRIPTION_PREFIX}{fragments}\n"

    def describe(self, write: Callable[[str], None]) -> None:
        """Write the full castle description through ``write``."""
        write(self.description())
