"""Castle Kingdom: prototype, factory method and singleton on a toy castle."""

from .castle import Castle
from .factory import RoomFactory
from .kingdom import Kingdom, KingdomAlreadyCreatedError
from .rooms import Room, RoomKind, RoomPrototype

__all__ = [
    "Castle",
    "Kingdom",
    "KingdomAlreadyCreatedError",
    "Room",
    "RoomFactory",
    "RoomKind",
    "RoomPrototype",
]
