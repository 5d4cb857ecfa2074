"""Command: restore a tag to the time it ran before its latest run."""

from __future__ import annotations

from typing import TYPE_CHECKING

from evry.commands._context import EXIT_FATAL, EXIT_OK
from evry.infrastructure.tags import StorageError
from evry.services.schedule import ScheduleService

if TYPE_CHECKING:
    from evry.commands._args import Invocation
    from evry.commands._context import AppContext


def rollback(app: AppContext, invocation: Invocation) -> int:
    try:
        restored = ScheduleService(app.store).rollback(invocation.tag)
    except StorageError as exc:
        app.printer.echo("error", str(exc))
        return EXIT_FATAL
    if app.debug:
        app.printer.echo("log", f"Restored tag '{invocation.tag}' to {restored}")
    return EXIT_OK
