"""Root CLI command for evry.

evry's own arguments are not Click options: hyphenated words are tags, so
every argument is collected raw and split by :func:`parse_argv`. Usage
errors and ``help`` exit with status 10 (not Click's 2, which evry uses
for "ran too recently") so a chained ``&& command`` never runs by accident.
"""

from __future__ import annotations

import click

from evry import __version__
from evry.commands import dispatch
from evry.commands._args import USAGE, HelpRequested, UsageError, parse_argv
from evry.commands._context import EXIT_USAGE, AppContext
from evry.config.settings import EvrySettings


@click.command(
    "evry",
    add_help_option=False,
    context_settings={"ignore_unknown_options": True},
)
@click.version_option(version=__version__, prog_name="evry")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, args: tuple[str, ...]) -> None:
    """evry — run commands periodically, using exit codes for control flow."""
    try:
        invocation = parse_argv(args)
    except HelpRequested:
        click.echo(USAGE)
        ctx.exit(EXIT_USAGE)
    except UsageError as exc:
        click.echo(f"Error: {exc}\n", err=True)
        click.echo(USAGE)
        ctx.exit(EXIT_USAGE)

    app = AppContext(EvrySettings.from_env())
    try:
        code = dispatch(app, invocation)
    finally:
        app.printer.flush()
    ctx.exit(code)
