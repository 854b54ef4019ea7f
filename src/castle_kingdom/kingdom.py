"""Process-wide kingdom owning the one castle."""

from __future__ import annotations

from typing import Callable, ClassVar

from castle_kingdom.castle import Castle
from castle_kingdom.rooms import Room


class KingdomAlreadyCreatedError(RuntimeError):
    """Raised when a second kingdom is constructed directly."""


class Kingdom:
    """Lazily created singleton. Use :meth:`get_instance` rather than the constructor.

    Access is not synchronised; the menu drives it from a single thread.
    """

    _instance: ClassVar[Kingdom | None] = None

    def __init__(self) -> None:
        if Kingdom._instance is not None:
            raise KingdomAlreadyCreatedError("Kingdom already exists; use Kingdom.get_instance()")
        self._castle = Castle()
        Kingdom._instance = self

    @classmethod
    def get_instance(cls) -> Kingdom:
        if cls._instance is None:
            cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the current kingdom so the next access builds a new one.

        Test hook only. Any reference still held to the old kingdom stays
        alive, so calling this outside test teardown breaks the single-kingdom
        guarantee.
        """
        cls._instance = None

    @property
    def castle(self) -> Castle:
        return self._castle

    def add_room(self, room: Room) -> None:
        self._castle.add_room(room)

    def describe_castle(self, write: Callable[[str], None]) -> None:
        self._castle.describe(write)
