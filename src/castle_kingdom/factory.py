"""Factory method for rooms, backed by one prototype per kind."""

from __future__ import annotations

import logging

from castle_kingdom.rooms import Room, RoomKind


class RoomFactory:
    """Builds fresh rooms by cloning a registered prototype for each kind."""

    def __init__(self, *, logger: logging.Logger | None = None) -> None:
        self._prototypes: dict[RoomKind, Room] = {
            RoomKind.THRONE_ROOM: Room.throne_room(),
            RoomKind.DUNGEON: Room.dungeon(),
        }
        self._logger = logger or logging.getLogger("castle_kingdom.factory")

    def create(self, kind: RoomKind | str | None) -> Room | None:
        """Return a new room for ``kind``, or ``None`` when the kind is unknown."""
        try:
            resolved = RoomKind(kind)
        except ValueError:
            self._logger.warning("unknown_room_kind", extra={"kind": kind})
            return None

        room = self._prototypes[resolved].clone_self()
        self._logger.debug("room_created", extra={"kind": resolved.value})
        return room
