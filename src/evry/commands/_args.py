"""Argument splitting for the ``evry`` command line.

evry does not use option syntax for its own arguments: any word starting
with a hyphen is a *tag*, everything else is either a command name or part
of the duration text::

    evry 2 weeks -scrapesite      -> run,      tag "scrapesite", "2 weeks"
    evry location -scrapesite     -> location, tag "scrapesite"
    evry duration 5wk, 5d         -> duration, no tag, "5wk, 5d"

Several tags are joined with ``_`` (``-a -b`` names tag ``a_b``).
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

USAGE = """\
A tool to manually run commands -- periodically.
Uses shell exit codes to determine control flow in shell scripts

Usage:
  evry <describe duration>... <-tagname>
  evry location <-tagname>
  evry duration <some duration string...>
  evry rollback <-tagname>
  evry help

Best explained with an example:

evry 2 weeks -scrapesite && wget "https://" -o ....

In other words, run the wget command every 2 weeks.

evry exits with an unsuccessful exit code if the command has
been run in the last 2 weeks, which means the wget command wouldn't run.

When evry exits with a successful exit code, it saves the current time
to a metadata file for that tag (-scrapesite). That way, when evry
is run again with that tag, it can compare the current time against that file.

location prints the computed tag file location

duration just lets you use this as a duration parser, without interacting
with the filesystem. It prints the parsed duration in seconds. Running
with EVRY_JSON=1 prints more formats

rollback restores the time a tag last ran before its most recent run,
for when the command it guarded failed and should be retried

Exit codes:
  0   run the command (first run, or the duration has elapsed)
  1   fatal error (duration could not be parsed, tag file unreadable)
  2   don't run the command (ran too recently)
  10  usage error, or this help text

Environment:
  EVRY_DIR               data directory (default: user data dir)
  EVRY_DEBUG             print debug messages to stderr
  EVRY_JSON              print debug messages as JSON to stdout
  EVRY_PARSE_ERROR_LOG   append unparseable durations to this file"""


class Command(StrEnum):
    """What an invocation asks evry to do."""

    RUN = "run"
    LOCATION = "location"
    DURATION = "duration"
    ROLLBACK = "rollback"


_NAMED_COMMANDS = frozenset({Command.LOCATION, Command.DURATION, Command.ROLLBACK})


class UsageError(Exception):
    """The command line could not be understood."""


class HelpRequested(UsageError):
    """``help`` or ``--help`` appeared on the command line."""


@dataclass(frozen=True)
class Invocation:
    """A split command line.

    Attributes:
        command: The requested command.
        raw_duration: Duration words joined by single spaces (may be empty).
        tag: Tag name with leading hyphens removed, or "" if none was given.
    """

    command: Command
    raw_duration: str
    tag: str


def parse_argv(args: Sequence[str]) -> Invocation:
    """Split *args* into command, duration text, and tag.

    Raises:
        HelpRequested: ``help`` or ``--help`` was passed.
        UsageError: The arguments do not form a valid invocation.
    """
    if any(arg in ("help", "--help") for arg in args):
        raise HelpRequested

    tags = [arg for arg in args if arg.startswith("-")]
    words = [arg for arg in args if not arg.startswith("-")]
    if not words:
        raise UsageError("Must provide a duration string or a command")

    first = words[0]
    if first in _NAMED_COMMANDS:
        command = Command(first)
        words = words[1:]
    else:
        command = Command.RUN

    if not tags and command != Command.DURATION:
        raise UsageError("Must provide a tag name using a hyphen or a command")
    tag = "_".join(arg[1:] for arg in tags)
    if not tag and command in (Command.RUN, Command.ROLLBACK):
        raise UsageError("passed tag was an empty string")

    raw_duration = " ".join(words)
    if command in (Command.RUN, Command.DURATION) and not raw_duration.strip():
        raise UsageError("passed duration was an empty string")

    return Invocation(command=command, raw_duration=raw_duration, tag=tag)
