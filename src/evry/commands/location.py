"""Command: print the tag file location."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from evry.commands._context import EXIT_FATAL, EXIT_OK
from evry.infrastructure.tags import StorageError

if TYPE_CHECKING:
    from evry.commands._args import Invocation
    from evry.commands._context import AppContext


def location(app: AppContext, invocation: Invocation) -> int:
    """Print where *invocation.tag* is stored.

    Printed directly rather than through the printer, since this is meant
    for ``TAGFILE="$(evry location -tagname)"``. An empty tag (``-``)
    prints the data directory itself.
    """
    try:
        path = app.store.path_for(invocation.tag)
    except StorageError as exc:
        app.printer.echo("error", str(exc))
        return EXIT_FATAL
    click.echo(str(path))
    return EXIT_OK
