"""Run decision — has the threshold elapsed since the tag last ran?

The decision is a pure function of its inputs. Reading and writing the
tag file is the caller's job (see :mod:`evry.services.schedule`).

INVARIANT: the boundary is strict. Exactly ``threshold_ms`` elapsed is
not enough; the next permitted run is at least one millisecond later.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, NonNegativeInt


class FirstRun(BaseModel):
    """No run has been recorded for the tag. Permits execution."""

    model_config = {"frozen": True}

    kind: Literal["first_run"] = "first_run"
    now: NonNegativeInt

    @property
    def permits_run(self) -> bool:
        return True


class Elapsed(BaseModel):
    """More than the threshold has passed since the last run. Permits execution."""

    model_config = {"frozen": True}

    kind: Literal["elapsed"] = "elapsed"
    last_run: NonNegativeInt
    now: NonNegativeInt
    threshold: NonNegativeInt

    @property
    def permits_run(self) -> bool:
        return True


class NotElapsed(BaseModel):
    """The tag ran too recently. Forbids execution.

    Attributes:
        remaining: Milliseconds until the threshold is reached again.
    """

    model_config = {"frozen": True}

    kind: Literal["not_elapsed"] = "not_elapsed"
    last_run: NonNegativeInt
    now: NonNegativeInt
    threshold: NonNegativeInt
    remaining: NonNegativeInt

    @property
    def permits_run(self) -> bool:
        return False


Outcome = FirstRun | Elapsed | NotElapsed


def decide(
    now_ms: int,
    tag_exists: bool,
    last_run_ms: int | None,
    threshold_ms: int,
) -> Outcome:
    """Classify a run attempt as first run, elapsed, or not elapsed.

    When the clock reads earlier than the recorded last run (the system
    clock moved backward), elapsed time is taken as zero: the outcome is
    :class:`NotElapsed` with the full threshold remaining.

    Raises:
        ValueError: A negative input, or *tag_exists* without *last_run_ms*.
    """
    if now_ms < 0 or threshold_ms < 0:
        msg = f"now_ms and threshold_ms must be non-negative, got {now_ms}, {threshold_ms}"
        raise ValueError(msg)
    if not tag_exists:
        return FirstRun(now=now_ms)
    if last_run_ms is None or last_run_ms < 0:
        msg = f"an existing tag needs a non-negative last run, got {last_run_ms!r}"
        raise ValueError(msg)

    if now_ms < last_run_ms:
        return NotElapsed(
            last_run=last_run_ms,
            now=now_ms,
            threshold=threshold_ms,
            remaining=threshold_ms,
        )

    elapsed = now_ms - last_run_ms
    if elapsed > threshold_ms:
        return Elapsed(last_run=last_run_ms, now=now_ms, threshold=threshold_ms)
    return NotElapsed(
        last_run=last_run_ms,
        now=now_ms,
        threshold=threshold_ms,
        remaining=last_run_ms + threshold_ms - now_ms,
    )
