"""Command: decide whether a tagged job may run now."""

from __future__ import annotations

from typing import TYPE_CHECKING

from evry.commands._context import EXIT_FATAL, EXIT_NOT_ELAPSED, EXIT_OK
from evry.domain.decision import Elapsed, FirstRun, NotElapsed, Outcome
from evry.domain.duration import describe_ms
from evry.infrastructure.tags import StorageError
from evry.output.printer import Message, PrinterMode
from evry.services.schedule import ScheduleService

if TYPE_CHECKING:
    from evry.commands._args import Invocation
    from evry.commands._context import AppContext


def exit_code_for(outcome: Outcome) -> int:
    """Map a decision onto the exit status the calling shell branches on."""
    return EXIT_OK if outcome.permits_run else EXIT_NOT_ELAPSED


def run(app: AppContext, invocation: Invocation) -> int:
    printer = app.printer
    if app.debug:
        printer.echo("tag_name", invocation.tag)
        printer.echo("data_directory", str(app.store.data_dir))

    threshold = app.parse_duration(invocation.raw_duration, invocation.tag)
    if threshold is None:
        return EXIT_FATAL

    if app.debug:
        printer.echo("log", f"parsed '{invocation.raw_duration}' into {threshold}ms")
        printer.print(Message(type="duration", body=str(threshold)), only=PrinterMode.JSON)
        printer.print(
            Message(type="duration_pretty", body=describe_ms(threshold)),
            only=PrinterMode.JSON,
        )

    try:
        outcome = ScheduleService(app.store).evaluate(invocation.tag, threshold)
    except StorageError as exc:
        printer.echo("error", str(exc))
        return EXIT_FATAL

    if app.debug:
        _report(app, outcome)
    return exit_code_for(outcome)


def _report(app: AppContext, outcome: Outcome) -> None:
    printer = app.printer
    if isinstance(outcome, FirstRun):
        printer.echo("log", "Tag file doesn't exist, creating and exiting with code 0")
    elif isinstance(outcome, Elapsed):
        printer.echo(
            "log",
            f"Has been more than '{describe_ms(outcome.threshold)}' ({outcome.threshold}ms) "
            "since last succeeded, writing to tag file, exiting with code 0",
        )
    elif isinstance(outcome, NotElapsed):
        till_next_pretty = describe_ms(outcome.remaining)
        printer.echo(
            "log",
            f"{describe_ms(outcome.threshold)} ({outcome.threshold}ms) haven't elapsed "
            "since last run, exiting with code 2",
        )
        printer.echo(
            "log",
            f"Will next be able to run in '{till_next_pretty}' ({outcome.remaining}ms)",
        )
        printer.print(
            Message(type="till_next", body=str(outcome.remaining)),
            only=PrinterMode.JSON,
        )
        printer.print(
            Message(type="till_next_pretty", body=till_next_pretty),
            only=PrinterMode.JSON,
        )
