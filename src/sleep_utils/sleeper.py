from __future__ import annotations

import logging
from datetime import timedelta

from sleep_utils.duration import ZERO
from sleep_utils.errors import ErrorCode, SleepError
from sleep_utils.inputs import SleepInputLike, normalize
from sleep_utils.settings import DEFAULT_SETTINGS, SleepSettings

logger = logging.getLogger(__name__)


def _pause(duration: timedelta, settings: SleepSettings) -> None:
    seconds = duration.total_seconds()
    try:
        settings.sleep_func(seconds)
    except (OSError, OverflowError, ValueError) as exc:
        logger.warning("Sleep of %.3fs failed: %s", seconds, exc)
        raise SleepError(
            code=ErrorCode.PLATFORM,
            message=f"sleep failed: {exc}",
            details={"seconds": seconds},
        ) from exc


def invoke(duration: timedelta, *, settings: SleepSettings | None = None) -> None:
    """Block for ``duration``; return at once when it is zero or negative."""
    settings = settings or DEFAULT_SETTINGS
    if duration <= ZERO:
        logger.debug("Skipping sleep for non-positive duration %s", duration)
        return
    logger.debug("Sleeping for %s", duration)
    _pause(duration, settings)


def sleep(duration: timedelta, *, settings: SleepSettings | None = None) -> None:
    """Plain pause with no parsing and no zero shortcut."""
    _pause(duration, settings or DEFAULT_SETTINGS)


def smart_sleep(value: SleepInputLike, *, settings: SleepSettings | None = None) -> timedelta:
    """Normalize ``value`` and sleep for it.

    ``value`` may be an int (milliseconds), a duration string such as
    ``"1.5s"`` or ``"1m30s"``, a ``timedelta`` or a ``SleepInput``. Zero and
    negative amounts return immediately. Returns the duration slept.
    """
    settings = settings or DEFAULT_SETTINGS
    duration = normalize(value, settings=settings)
    invoke(duration, settings=settings)
    return duration
