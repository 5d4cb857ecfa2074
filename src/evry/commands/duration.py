"""Command: parse a duration without touching any tag."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from evry.commands._context import EXIT_FATAL, EXIT_OK
from evry.domain.duration import describe_ms

if TYPE_CHECKING:
    from evry.commands._args import Invocation
    from evry.commands._context import AppContext


def duration(app: AppContext, invocation: Invocation) -> int:
    """Print the parsed duration in whole seconds (more formats in debug mode)."""
    millis = app.parse_duration(invocation.raw_duration, invocation.tag)
    if millis is None:
        return EXIT_FATAL

    if not app.debug:
        click.echo(str(millis // 1000))
    else:
        app.printer.echo("duration", str(millis))
        app.printer.echo("duration_seconds", str(millis // 1000))
        app.printer.echo("duration_pretty", describe_ms(millis))
    return EXIT_OK
