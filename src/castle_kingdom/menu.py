"""Interactive menu loop driving the kingdom."""

from __future__ import annotations

import logging
from enum import Enum, IntEnum

from castle_kingdom.cli import MenuIO
from castle_kingdom.factory import RoomFactory
from castle_kingdom.kingdom import Kingdom
from castle_kingdom.rooms import RoomKind
from castle_kingdom.telemetry import NullTelemetry, Telemetry

MENU_TEXT = (
    "1. Adauga o camera a tronului\n"
    "2. Adauga o temnita\n"
    "3. Descrie castel\n"
    "4. Incheiere operatiune\n"
)
PROMPT = "Alege o optiune: "
INVALID_CHOICE_MESSAGE = "Optiunea nu se afla in meniu.\n"
EXIT_MESSAGE = "Iesire program.\n"


class MenuOption(IntEnum):
    ADD_THRONE_ROOM = 1
    ADD_DUNGEON = 2
    DESCRIBE_CASTLE = 3
    EXIT = 4


class MenuState(str, Enum):
    AWAITING_CHOICE = "awaiting_choice"
    TERMINATED = "terminated"


_ROOM_OPTIONS: dict[MenuOption, tuple[RoomKind, str]] = {
    MenuOption.ADD_THRONE_ROOM: (RoomKind.THRONE_ROOM, "Camera tronului adaugata.\n"),
    MenuOption.ADD_DUNGEON: (RoomKind.DUNGEON, "Temnita adaugata.\n"),
}


def parse_choice(raw: str) -> MenuOption | None:
    """Map a line of input to a menu option; ``None`` for anything else."""
    try:
        return MenuOption(int(raw.strip()))
    except ValueError:
        return None


class MenuLoop:
    """Two-state loop: awaiting a choice until the exit option or end of input."""

    def __init__(
        self,
        io: MenuIO,
        *,
        kingdom: Kingdom | None = None,
        factory: RoomFactory | None = None,
        telemetry: Telemetry | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._io = io
        self._kingdom = kingdom or Kingdom.get_instance()
        self._factory = factory or RoomFactory()
        self._telemetry = telemetry or NullTelemetry()
        self._logger = logger or logging.getLogger("castle_kingdom.menu")
        self._state = MenuState.AWAITING_CHOICE

    @property
    def state(self) -> MenuState:
        return self._state

    def run(self) -> None:
        while self._state is MenuState.AWAITING_CHOICE:
            self.step()

    def step(self) -> MenuState:
        """Prompt once, read one choice and act on it."""
        self._io.write(MENU_TEXT)
        raw = self._io.read_line(PROMPT)
        if raw is None:
            self._logger.info("menu_input_closed")
            self._state = MenuState.TERMINATED
            return self._state

        option = parse_choice(raw)
        if option is None:
            self._io.write(INVALID_CHOICE_MESSAGE)
            self._telemetry.emit("invalid_choice", {"raw": raw})
        elif option in _ROOM_OPTIONS:
            self._add_room(*_ROOM_OPTIONS[option])
        elif option is MenuOption.DESCRIBE_CASTLE:
            self._kingdom.describe_castle(self._io.write)
            self._telemetry.emit("castle_described", {"rooms": len(self._kingdom.castle)})
        else:
            self._io.write(EXIT_MESSAGE)
            self._telemetry.emit("menu_exited", {"rooms": len(self._kingdom.castle)})
            self._state = MenuState.TERMINATED
        return self._state

    def _add_room(self, kind: RoomKind, confirmation: str) -> None:
        room = self._factory.create(kind)
        if room is None:
            self._logger.error("room_not_created", extra={"kind": kind.value})
            return
        self._kingdom.add_room(room)
        self._io.write(confirmation)
        self._telemetry.emit("room_added", {"kind": kind.value, "rooms": len(self._kingdom.castle)})
