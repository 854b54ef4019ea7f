from __future__ import annotations

import logging

from castle_kingdom.telemetry import LoggingTelemetry, NullTelemetry, configure_logging


def test_logging_telemetry_forwards_events(caplog) -> None:
    telemetry = LoggingTelemetry(logging.getLogger("castle_kingdom.test"))

    with caplog.at_level(logging.INFO, logger="castle_kingdom.test"):
        telemetry.emit("room_added", {"kind": "dungeon"})

    assert caplog.records[0].getMessage() == "room_added"
    assert caplog.records[0].payload == {"kind": "dungeon"}


def test_null_telemetry_accepts_events() -> None:
    assert NullTelemetry().emit("anything", {}) is None


def test_configure_logging_installs_single_handler() -> None:
    configure_logging("info")
    configure_logging("debug")

    logger = logging.getLogger("castle_kingdom")
    tagged = [handler for handler in logger.handlers if getattr(handler, "_castle_kingdom", False)]

    assert len(tagged) == 1
    assert logger.level == logging.DEBUG
    configure_logging("warning")
