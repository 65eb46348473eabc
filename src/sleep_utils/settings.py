from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

from sleep_utils.units import unit_multiplier


@dataclass(frozen=True, slots=True)
class SleepSettings:
    default_unit: str = "ms"
    sleep_func: Callable[[float], None] = time.sleep

    def __post_init__(self) -> None:
        if unit_multiplier(self.default_unit) is None:
            raise ValueError(f"unknown default unit: {self.default_unit!r}")


DEFAULT_SETTINGS = SleepSettings()
