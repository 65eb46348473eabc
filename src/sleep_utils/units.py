from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

MILLISECOND = 1
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

UNIT_MILLIS: Mapping[str, int] = MappingProxyType(
    {
        "ms": MILLISECOND,
        "milli": MILLISECOND,
        "millis": MILLISECOND,
        "millisecond": MILLISECOND,
        "milliseconds": MILLISECOND,
        "s": SECOND,
        "sec": SECOND,
        "secs": SECOND,
        "second": SECOND,
        "seconds": SECOND,
        "m": MINUTE,
        "min": MINUTE,
        "mins": MINUTE,
        "minute": MINUTE,
        "minutes": MINUTE,
        "h": HOUR,
        "hr": HOUR,
        "hrs": HOUR,
        "hour": HOUR,
        "hours": HOUR,
    }
)


def unit_multiplier(token: str) -> int | None:
    """Return the millisecond multiplier for a unit token, or None if unknown."""
    return UNIT_MILLIS.get(token.strip().lower())
