"""Console I/O used by the interactive menu."""

from __future__ import annotations

from typing import Protocol

import typer


class MenuIO(Protocol):
    """Line-oriented input and raw text output."""

    def read_line(self, prompt: str) -> str | None:
        """Show ``prompt`` and return one line, or ``None`` at end of input."""

    def write(self, text: str) -> None:
        """Write ``text`` exactly as given."""


class ConsoleIO:
    """Standard input/output implementation of :class:`MenuIO`."""

    def read_line(self, prompt: str) -> str | None:
        typer.echo(prompt, nl=False)
        try:
            return input()
        except EOFError:
            return None

    def write(self, text: str) -> None:
        typer.echo(text, nl=False)
