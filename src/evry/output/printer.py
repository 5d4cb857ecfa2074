"""Debug printer — ``type:body`` lines on stderr, or one JSON array.

evry is silent by default; it only prints when ``EVRY_DEBUG`` or
``EVRY_JSON`` is set. In JSON mode every message is buffered and
:meth:`Printer.flush` writes them to stdout as::

    [{"type": "tag_name", "body": "scrapesite"}, ...]

Some messages are only interesting to scripts parsing the JSON (raw
millisecond counts, for instance), so :meth:`Printer.print` can restrict
a message to one mode.
"""

from __future__ import annotations

import json
from enum import StrEnum

import click
from pydantic import BaseModel


class PrinterMode(StrEnum):
    """Where printed messages go."""

    STDERR = "stderr"
    JSON = "json"


class Message(BaseModel):
    """One debug message."""

    model_config = {"frozen": True}

    type: str
    body: str

    def intersperse(self, delim: str = ":") -> str:
        return f"{self.type}{delim}{self.body}"


class Printer:
    """Routes debug messages to stderr, or buffers them for JSON output."""

    def __init__(self, mode: PrinterMode) -> None:
        self.mode = mode
        self.messages: list[Message] = []

    def print(self, message: Message, only: PrinterMode | None = None) -> None:
        """Print *message*, unless *only* names a different mode."""
        if only is not None and only != self.mode:
            return
        if self.mode == PrinterMode.STDERR:
            click.echo(message.intersperse(), err=True)
        else:
            self.messages.append(message)

    def echo(self, type_: str, body: str) -> None:
        """Print a message in every mode."""
        self.print(Message(type=type_, body=body))

    def serialize(self) -> str:
        return json.dumps([m.model_dump() for m in self.messages], separators=(",", ":"))

    def flush(self) -> None:
        """In JSON mode, write the buffered messages to stdout."""
        if self.mode == PrinterMode.JSON:
            click.echo(self.serialize())
