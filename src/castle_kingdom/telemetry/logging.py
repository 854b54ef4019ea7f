"""Contract for runtime telemetry and the logging sink behind it."""

from __future__ import annotations

import logging
import sys
from typing import Protocol

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


class Telemetry(Protocol):
    """Reports menu events and castle changes."""

    def emit(self, event_name: str, payload: dict) -> None:
        """Publish telemetry event to the configured sink."""


class LoggingTelemetry:
    """Telemetry sink that forwards events to a standard logger."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("castle_kingdom.telemetry")

    def emit(self, event_name: str, payload: dict) -> None:
        self._logger.info(event_name, extra={"payload": payload})


class NullTelemetry:
    """Discards every event."""

    def emit(self, event_name: str, payload: dict) -> None:
        return None


def configure_logging(level: str = "WARNING") -> None:
    """Send ``castle_kingdom`` records to stderr so the menu owns stdout."""
    logger = logging.getLogger("castle_kingdom")
    logger.setLevel(level.upper())
    # Rebind on every call; sys.stderr may have been swapped since the last one.
    for handler in [h for h in logger.handlers if getattr(h, "_castle_kingdom", False)]:
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    handler._castle_kingdom = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
