"""System clock, in epoch milliseconds."""

from __future__ import annotations

import time


def epoch_millis() -> int:
    """Return whole milliseconds elapsed since the Unix epoch."""
    return time.time_ns() // 1_000_000
