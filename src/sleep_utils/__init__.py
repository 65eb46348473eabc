from __future__ import annotations

import logging

from sleep_utils.duration import parse_sleep_duration
from sleep_utils.errors import ErrorCode, SleepError
from sleep_utils.inputs import SleepInput, normalize
from sleep_utils.settings import DEFAULT_SETTINGS, SleepSettings
from sleep_utils.sleeper import invoke, sleep, smart_sleep
from sleep_utils.units import UNIT_MILLIS

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_SETTINGS",
    "UNIT_MILLIS",
    "ErrorCode",
    "SleepError",
    "SleepInput",
    "SleepSettings",
    "invoke",
    "normalize",
    "parse_sleep_duration",
    "sleep",
    "smart_sleep",
]
