from __future__ import annotations

import re
from datetime import timedelta
from decimal import MAX_EMAX, MIN_EMIN, ROUND_HALF_UP, Context, Decimal, localcontext

from sleep_utils.errors import ErrorCode, SleepError, invalid_duration
from sleep_utils.units import UNIT_MILLIS, unit_multiplier

ZERO = timedelta(0)
MAX_MILLIS = timedelta.max // timedelta(milliseconds=1)

_BARE_RE = re.compile(r"^\d+(?:\.\d+)?$", re.ASCII)
_SEGMENT_RE = re.compile(r"(?P<amount>\d+(?:\.\d+)?)\s*(?P<unit>[a-z]+)\s*", re.ASCII)


def _out_of_range(source: object, millis: object) -> SleepError:
    return SleepError(
        code=ErrorCode.OUT_OF_RANGE,
        message=f"sleep duration out of range: {source!r}",
        details={"input": source, "millis": millis},
    )


def millis_to_timedelta(millis: int, *, source: object) -> timedelta:
    if millis <= 0:
        return ZERO
    try:
        return timedelta(milliseconds=millis)
    except OverflowError as exc:
        raise _out_of_range(source, millis) from exc


def _exact_context(body: str) -> Context:
    # wide enough that products and sums of the numerals never round
    return Context(prec=len(body) + 16, Emax=MAX_EMAX, Emin=MIN_EMIN, rounding=ROUND_HALF_UP)


def _segment_millis(body: str, original: str) -> Decimal:
    total = Decimal(0)
    pos = 0
    while pos < len(body):
        match = _SEGMENT_RE.match(body, pos)
        if not match:
            raise invalid_duration(original)
        unit = match.group("unit")
        multiplier = UNIT_MILLIS.get(unit)
        if multiplier is None:
            raise invalid_duration(original, reason=f"unknown unit {unit!r}")
        total += Decimal(match.group("amount")) * multiplier
        pos = match.end()
    return total


def parse_sleep_duration(text: str, *, default_unit: str = "ms") -> timedelta:
    """Parse a human-friendly duration string into a non-negative timedelta.

    Accepts a bare numeral (``"250"``, read in ``default_unit``), a numeral
    with a unit (``"1.5s"``, ``"2 minutes"``) or several unit-tagged segments
    (``"1m30s"``, ``"1h 2m 3s"``). Units are case-insensitive. The result is
    rounded to the nearest millisecond, ties rounding up.

    Zero and negative values yield ``timedelta(0)`` instead of an error.

    Raises ``SleepError`` with code ``invalid_duration`` when the text does not
    parse, or ``out_of_range`` when the value does not fit a timedelta. An
    unknown ``default_unit`` raises ``ValueError``.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")

    default_multiplier = unit_multiplier(default_unit)
    if default_multiplier is None:
        raise ValueError(f"unknown default unit: {default_unit!r}")

    normalized = text.strip().lower()
    if not normalized:
        raise invalid_duration(text, reason="empty")

    sign, body = "", normalized
    if body[0] in "+-":
        sign, body = body[0], body[1:]
    if not body:
        raise invalid_duration(text)

    with localcontext(_exact_context(body)):
        if _BARE_RE.match(body):
            total = Decimal(body) * default_multiplier
        else:
            total = _segment_millis(body, text)

        if sign == "-":
            return ZERO

        rounded = total.to_integral_value(rounding=ROUND_HALF_UP)

    if rounded > MAX_MILLIS:
        raise _out_of_range(text, None)
    return millis_to_timedelta(int(rounded), source=text)
