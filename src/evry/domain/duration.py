"""Duration grammar — free-form text to milliseconds.

Accepted input is one or more ``<quantity> <unit>`` terms, separated by
any mix of whitespace and commas (or nothing at all)::

    2 months, 5 day
    2weeks 5hrs
    60secs
    5wk, 5d
    5weeks, 2weeks      (additive: 7 weeks)
    60sec 2weeks        (order doesn't matter)

Grammar::

    file     := sep* term (sep* term)* sep* EOF
    sep      := whitespace | ","
    term     := quantity sep* unit
    quantity := digit+ (("_" | ",") digit+)*
    digit    := "0" .. "9"          (ASCII only)
    unit     := letter+            (resolved by evry.domain.units)

INVARIANT: parsing is all-or-nothing. A malformed term anywhere in the
input fails the whole parse; no partial total is ever returned.
"""

from __future__ import annotations

import re

from evry.domain.units import resolve_unit

# Tag files historically hold unsigned 128-bit integers.
MAX_MILLIS = 2**128 - 1
_MAX_DIGITS = len(str(MAX_MILLIS))

_SEPARATOR_RE = re.compile(r"[\s,]+")
_QUANTITY_RE = re.compile(r"[0-9]+(?:[_,][0-9]+)*")
_UNIT_RE = re.compile(r"[^\W\d_]+")

_SNIPPET_WIDTH = 12


class DurationError(ValueError):
    """Base class for duration parse failures."""


class EmptyDurationError(DurationError):
    """The duration text was blank after trimming."""

    def __init__(self) -> None:
        super().__init__("duration is empty")


class DurationSyntaxError(DurationError):
    """The duration text does not match the grammar.

    Attributes:
        position: Character offset (into the trimmed text) where parsing failed.
        snippet: The text at *position*, truncated for display.
    """

    def __init__(self, reason: str, text: str, position: int) -> None:
        self.reason = reason
        self.position = position
        self.snippet = text[position : position + _SNIPPET_WIDTH] or "<end of input>"
        super().__init__(f"{reason} at position {position}: {self.snippet!r}")


class DurationOverflowError(DurationError):
    """The accumulated total does not fit in 128 unsigned bits."""

    def __init__(self, text: str) -> None:
        super().__init__(f"duration {text!r} is too large")


class _DurationParser:
    """Recursive-descent parser over a single trimmed input string."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def parse(self) -> int:
        total = 0
        self._skip_separators()
        if self._at_end():
            raise DurationSyntaxError("expected a duration", self.text, self.pos)
        while not self._at_end():
            quantity, unit_millis = self._term()
            total += quantity * unit_millis
            if total > MAX_MILLIS:
                raise DurationOverflowError(self.text)
            self._skip_separators()
        return total

    def _term(self) -> tuple[int, int]:
        quantity = self._quantity()
        self._skip_separators()
        return quantity, self._unit()

    def _quantity(self) -> int:
        match = _QUANTITY_RE.match(self.text, self.pos)
        if match is None:
            raise DurationSyntaxError("expected a number", self.text, self.pos)
        self.pos = match.end()
        digits = re.sub(r"[_,]", "", match.group()).lstrip("0") or "0"
        # Longer than MAX_MILLIS already overflows; also keeps int() under
        # the interpreter's digit limit.
        if len(digits) > _MAX_DIGITS:
            raise DurationOverflowError(self.text)
        return int(digits)

    def _unit(self) -> int:
        match = _UNIT_RE.match(self.text, self.pos)
        if match is None:
            raise DurationSyntaxError("expected a time unit", self.text, self.pos)
        millis = resolve_unit(match.group())
        if millis is None:
            raise DurationSyntaxError("unknown time unit", self.text, self.pos)
        self.pos = match.end()
        return millis

    def _skip_separators(self) -> None:
        match = _SEPARATOR_RE.match(self.text, self.pos)
        if match is not None:
            self.pos = match.end()

    def _at_end(self) -> bool:
        return self.pos >= len(self.text)


def parse_duration(text: str) -> int:
    """Parse a duration expression into milliseconds.

    Raises:
        EmptyDurationError: *text* is blank.
        DurationSyntaxError: *text* does not match the grammar.
        DurationOverflowError: the total exceeds the 128-bit range.

    Examples:
        >>> parse_duration("2 months, 5 day")
        5616000000
        >>> parse_duration("5hrs 2weeks") == parse_duration("2weeks 5hrs")
        True
    """
    trimmed = text.strip()
    if not trimmed:
        raise EmptyDurationError
    return _DurationParser(trimmed).parse()


def _add_part(parts: list[str], value: int, name: str) -> None:
    if value == 1:
        parts.append(f"1 {name}")
    elif value > 1:
        parts.append(f"{value} {name}s")


def describe_ms(ms: int) -> str:
    """Describe a millisecond count for humans, largest unit first.

    Only days, hours, minutes, and seconds are used; zero parts are
    omitted and sub-second remainders are dropped.

    Examples:
        >>> describe_ms(4_799_805_877)
        '55 days, 13 hours, 16 minutes, 45 seconds'
        >>> describe_ms(61_000)
        '1 minute, 1 second'
    """
    minutes, seconds = divmod(ms // 1000, 60)
    hours, minutes = divmod(minutes, 60)
    days, hours = divmod(hours, 24)
    parts: list[str] = []
    _add_part(parts, days, "day")
    _add_part(parts, hours, "hour")
    _add_part(parts, minutes, "minute")
    _add_part(parts, seconds, "second")
    return ", ".join(parts)
