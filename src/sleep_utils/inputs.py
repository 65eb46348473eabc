from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Literal

from sleep_utils.duration import ZERO, millis_to_timedelta, parse_sleep_duration
from sleep_utils.errors import SleepError
from sleep_utils.settings import DEFAULT_SETTINGS, SleepSettings

InputKind = Literal["number", "text", "duration"]

_KIND_TYPES: dict[str, type] = {
    "number": int,
    "text": str,
    "duration": timedelta,
}


@dataclass(frozen=True, slots=True)
class SleepInput:
    """One of three input shapes: milliseconds, a duration string, or a timedelta."""

    kind: InputKind
    value: int | str | timedelta

    def __post_init__(self) -> None:
        expected = _KIND_TYPES.get(self.kind)
        if expected is None:
            raise ValueError(f"unknown sleep input kind: {self.kind!r}")
        # bool is an int subclass but never a meaningful sleep amount
        if isinstance(self.value, bool) or not isinstance(self.value, expected):
            raise TypeError(
                f"{self.kind} input expects {expected.__name__}, got {type(self.value).__name__}"
            )

    @classmethod
    def number(cls, millis: int) -> SleepInput:
        return cls(kind="number", value=millis)

    @classmethod
    def text(cls, text: str) -> SleepInput:
        return cls(kind="text", value=text)

    @classmethod
    def duration(cls, duration: timedelta) -> SleepInput:
        return cls(kind="duration", value=duration)

    @classmethod
    def coerce(cls, value: SleepInputLike) -> SleepInput:
        if isinstance(value, SleepInput):
            return value
        if isinstance(value, timedelta):
            return cls.duration(value)
        if isinstance(value, str):
            return cls.text(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.number(value)
        raise TypeError(f"expected int, str or timedelta, got {type(value).__name__}")

    def to_duration(self, *, settings: SleepSettings | None = None) -> timedelta:
        return normalize(self, settings=settings)

    def should_sleep(self) -> bool:
        """Whether this input asks for a pause at all.

        Text that does not parse counts as a pause so that ``to_duration``
        gets to report the error.
        """
        if isinstance(self.value, timedelta):
            return self.value > ZERO
        if isinstance(self.value, str):
            try:
                return parse_sleep_duration(self.value) > ZERO
            except SleepError:
                return True
        return self.value > 0


SleepInputLike = SleepInput | int | str | timedelta


def normalize(value: SleepInputLike, *, settings: SleepSettings | None = None) -> timedelta:
    """Convert any accepted input shape into a non-negative timedelta."""
    settings = settings or DEFAULT_SETTINGS
    raw = SleepInput.coerce(value).value

    if isinstance(raw, timedelta):
        return raw if raw > ZERO else ZERO
    if isinstance(raw, str):
        return parse_sleep_duration(raw, default_unit=settings.default_unit)
    return millis_to_timedelta(raw, source=raw)
