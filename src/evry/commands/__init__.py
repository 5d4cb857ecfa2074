"""Command implementations for evry.

Provides dispatch(), which uses deferred imports so ``evry help`` and
usage errors never load the storage and decision modules.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from evry.commands._args import Command

if TYPE_CHECKING:
    from evry.commands._args import Invocation
    from evry.commands._context import AppContext


def dispatch(app: AppContext, invocation: Invocation) -> int:
    """Run the command named by *invocation* and return its exit code."""
    if invocation.command == Command.LOCATION:
        from evry.commands.location import location

        return location(app, invocation)
    if invocation.command == Command.DURATION:
        from evry.commands.duration import duration

        return duration(app, invocation)
    if invocation.command == Command.ROLLBACK:
        from evry.commands.rollback import rollback

        return rollback(app, invocation)

    from evry.commands.run import run

    return run(app, invocation)
