"""Duration unit lexicon.

Every unit is a fixed number of milliseconds. Nothing here is calendar
aware: a month is always 30 days and a year is the mean Gregorian year.

Spelling normalization (case folding, plural ``s``, abbreviations) lives
here so the grammar in :mod:`evry.domain.duration` never needs to know
which words are units.
"""

from __future__ import annotations

from enum import StrEnum


class TimeUnit(StrEnum):
    """Canonical duration units."""

    YEAR = "year"
    MONTH = "month"
    WEEK = "week"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"


UNIT_MILLIS: dict[TimeUnit, int] = {
    TimeUnit.YEAR: 31_556_952_000,
    TimeUnit.MONTH: 2_592_000_000,
    TimeUnit.WEEK: 604_800_000,
    TimeUnit.DAY: 86_400_000,
    TimeUnit.HOUR: 3_600_000,
    TimeUnit.MINUTE: 60_000,
    TimeUnit.SECOND: 1_000,
}

# Singular spellings only; plurals are handled by lookup_unit().
UNIT_SPELLINGS: dict[str, TimeUnit] = {
    "year": TimeUnit.YEAR,
    "yr": TimeUnit.YEAR,
    "y": TimeUnit.YEAR,
    "month": TimeUnit.MONTH,
    "mo": TimeUnit.MONTH,
    "week": TimeUnit.WEEK,
    "wk": TimeUnit.WEEK,
    "w": TimeUnit.WEEK,
    "day": TimeUnit.DAY,
    "d": TimeUnit.DAY,
    "hour": TimeUnit.HOUR,
    "hr": TimeUnit.HOUR,
    "h": TimeUnit.HOUR,
    "minute": TimeUnit.MINUTE,
    "min": TimeUnit.MINUTE,
    "m": TimeUnit.MINUTE,
    "second": TimeUnit.SECOND,
    "sec": TimeUnit.SECOND,
    "s": TimeUnit.SECOND,
}


def lookup_unit(spelling: str) -> TimeUnit | None:
    """Map a unit spelling to its canonical :class:`TimeUnit`.

    Matching is case-insensitive. A single trailing ``s`` is accepted as a
    plural, but only on multi-letter stems: ``"hrs"`` is hours while
    ``"ms"`` is rejected rather than guessed to mean minutes.

    Examples:
        >>> lookup_unit("Weeks")
        <TimeUnit.WEEK: 'week'>
        >>> lookup_unit("ms") is None
        True
    """
    key = spelling.casefold()
    unit = UNIT_SPELLINGS.get(key)
    if unit is not None:
        return unit
    if len(key) > 2 and key.endswith("s"):
        return UNIT_SPELLINGS.get(key[:-1])
    return None


def resolve_unit(spelling: str) -> int | None:
    """Return the millisecond value of *spelling*, or None if it is not a unit."""
    unit = lookup_unit(spelling)
    if unit is None:
        return None
    return UNIT_MILLIS[unit]
