from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class ErrorCode:
    INVALID_DURATION = "invalid_duration"
    OUT_OF_RANGE = "out_of_range"
    PLATFORM = "platform"


@dataclass(frozen=True, slots=True)
class SleepError(Exception):
    code: str
    message: str
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        return self.message

    def to_error_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


def invalid_duration(text: str, *, reason: str | None = None) -> SleepError:
    message = f"invalid sleep duration: {text!r}"
    if reason:
        message = f"{message} ({reason})"
    return SleepError(
        code=ErrorCode.INVALID_DURATION,
        message=message,
        details={"input": text},
    )
