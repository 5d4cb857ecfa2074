"""AppContext — shared state for one evry invocation.

Created once by the root CLI command and handed to the selected command.
Configures logging, owns the debug printer, and lazily builds the
:class:`TagStore` so ``help`` and ``duration`` never touch the data
directory.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from evry.domain.duration import DurationError, parse_duration
from evry.infrastructure.tags import TagStore
from evry.output.printer import Printer, PrinterMode

if TYPE_CHECKING:
    from evry.config.settings import EvrySettings

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_NOT_ELAPSED = 2
EXIT_USAGE = 10


class AppContext:
    """Settings, printer, and tag storage for the running command."""

    def __init__(self, settings: EvrySettings) -> None:
        self.settings = settings
        self._store: TagStore | None = None

        from evry.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        mode = PrinterMode.JSON if settings.json_output else PrinterMode.STDERR
        self.printer = Printer(mode)

    @property
    def debug(self) -> bool:
        return self.settings.show_debug

    @property
    def store(self) -> TagStore:
        """The tag store (created lazily on first access)."""
        if self._store is None:
            self._store = TagStore(self.settings.data_root)
        return self._store

    def parse_duration(self, raw: str, tag: str) -> int | None:
        """Parse *raw*, reporting failures through the printer.

        Returns the duration in milliseconds, or None if it did not parse.
        Unparseable input is appended to ``EVRY_PARSE_ERROR_LOG`` when set.
        """
        try:
            return parse_duration(raw)
        except DurationError as exc:
            logger.debug("Duration parse failed: %s", exc)
            self.printer.echo("error", f"couldn't parse '{raw}' into a duration")
            self._log_parse_error(raw, tag)
            return None

    def _log_parse_error(self, raw: str, tag: str) -> None:
        logfile = self.settings.parse_error_log
        if logfile is None:
            return
        try:
            with logfile.open("a", encoding="utf-8") as fp:
                fp.write(f"Could not parse: {raw} -{tag}\n")
        except OSError:
            logger.warning("Couldn't write to EVRY_PARSE_ERROR_LOG %s", logfile, exc_info=True)
