"""CLI startup entrypoint for Castle Kingdom."""

from __future__ import annotations

import typer
from rich import print

from castle_kingdom.cli import ConsoleIO
from castle_kingdom.config import settings
from castle_kingdom.factory import RoomFactory
from castle_kingdom.kingdom import Kingdom
from castle_kingdom.menu import MenuLoop
from castle_kingdom.rooms import RoomKind
from castle_kingdom.telemetry import LoggingTelemetry, NullTelemetry, Telemetry, configure_logging

app = typer.Typer(help="Castle Kingdom design pattern demo")


def _build_telemetry() -> Telemetry:
    if settings.telemetry_enabled:
        return LoggingTelemetry()
    return NullTelemetry()


def _run_menu() -> None:
    configure_logging(settings.log_level)
    MenuLoop(ConsoleIO(), kingdom=Kingdom.get_instance(), telemetry=_build_telemetry()).run()


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Run the interactive menu when no subcommand is given."""
    if ctx.invoked_subcommand is None:
        _run_menu()


@app.command()
def menu() -> None:
    """Run the interactive castle menu."""
    _run_menu()


@app.command()
def start() -> None:
    """Show runtime configuration."""
    print(
        {
            "app_name": settings.app_name,
            "log_level": settings.log_level,
            "telemetry_enabled": settings.telemetry_enabled,
        }
    )


@app.command()
def build(kinds: list[str] = typer.Argument(..., help="Room kinds: throne_room or dungeon")) -> None:
    """Add the given rooms to the castle and describe it."""
    configure_logging(settings.log_level)
    factory = RoomFactory()
    kingdom = Kingdom.get_instance()
    rooms = []
    for kind in kinds:
        room = factory.create(kind.lower())
        if room is None:
            valid = ", ".join(member.value for member in RoomKind)
            raise typer.BadParameter(f"Unknown room kind {kind!r}; expected one of: {valid}")
        rooms.append(room)

    for room in rooms:
        kingdom.add_room(room)
    kingdom.describe_castle(lambda text: typer.echo(text, nl=False))


if __name__ == "__main__":
    app()
