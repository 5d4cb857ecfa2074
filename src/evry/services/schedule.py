"""ScheduleService — read the tag, decide, record the run.

The decision itself is the pure :func:`evry.domain.decision.decide`.
This service owns the side effects around it:

- reads the last run from the :class:`TagStore` (when the tag exists),
- on a permitting outcome, writes the current time. An :class:`Elapsed`
  run first snapshots the previous value for rollback; a :class:`FirstRun`
  discards any snapshot left from before the tag was reset,
- on :class:`NotElapsed`, writes nothing.

The read, decide, write sequence is not atomic. Callers running the same
tag concurrently need their own lock.

Log records emitted while a tag is being handled carry it as a ``tag``
field (bound through :mod:`structlog.contextvars`).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

import structlog

from evry.domain.decision import Elapsed, FirstRun, Outcome, decide
from evry.infrastructure.clock import epoch_millis

if TYPE_CHECKING:
    from evry.infrastructure.tags import TagStore

logger = logging.getLogger(__name__)


class ScheduleService:
    """Evaluate run attempts for tags stored in a :class:`TagStore`."""

    def __init__(
        self,
        store: TagStore,
        clock: Callable[[], int] = epoch_millis,
    ) -> None:
        self._store = store
        self._clock = clock

    def evaluate(self, tag: str, threshold_ms: int) -> Outcome:
        """Decide whether *tag* may run now, recording the run if so.

        Raises:
            StorageError: The tag file could not be read or written.
        """
        with structlog.contextvars.bound_contextvars(tag=tag):
            now = self._clock()
            exists = self._store.exists(tag)
            last_run = self._store.read(tag) if exists else None
            outcome = decide(now, exists, last_run, threshold_ms)
            logger.debug(
                "Decided %s (threshold=%dms, last_run=%s, now=%d)",
                outcome.kind,
                threshold_ms,
                last_run,
                now,
            )
            if isinstance(outcome, Elapsed):
                self._store.save_rollback(tag, outcome.last_run)
            elif isinstance(outcome, FirstRun):
                # A snapshot left from before the tag was reset is stale.
                self._store.discard_rollback(tag)
            if outcome.permits_run:
                self._store.write(tag, now)
            return outcome

    def rollback(self, tag: str) -> int:
        """Restore the value *tag* held before its last recorded run.

        Raises:
            StorageError: No snapshot exists for *tag*, or it cannot be applied.
        """
        with structlog.contextvars.bound_contextvars(tag=tag):
            value = self._store.restore_rollback(tag)
            logger.info("Rolled back to %d", value)
        return value
