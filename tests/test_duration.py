from __future__ import annotations

from datetime import timedelta
from decimal import Decimal

import pytest

from sleep_utils.duration import parse_sleep_duration
from sleep_utils.errors import ErrorCode, SleepError
from sleep_utils.units import UNIT_MILLIS


@pytest.mark.parametrize(
    ("value", "expected_ms"),
    [
        ("100", 100),
        ("100ms", 100),
        ("100 millis", 100),
        ("100 milliseconds", 100),
        ("1 millisecond", 1),
        ("1s", 1000),
        ("1 sec", 1000),
        ("1 second", 1000),
        ("1 seconds", 1000),
        ("1.5s", 1500),
        ("2.5 seconds", 2500),
        ("0.5m", 30000),
        ("2m", 120000),
        ("2 min", 120000),
        ("2 minutes", 120000),
        ("2h", 7_200_000),
        ("1 hour", 3_600_000),
        ("+250", 250),
        ("  5S  ", 5000),
        ("100MS", 100),
        ("1 SECOND", 1000),
    ],
)
def test_parse_single_unit(value: str, expected_ms: int) -> None:
    assert parse_sleep_duration(value) == timedelta(milliseconds=expected_ms)


@pytest.mark.parametrize(
    ("value", "expected_ms"),
    [
        ("1m30s", 90000),
        ("1h2m3s", 3_723_000),
        ("1h 2m 3s", 3_723_000),
        ("2s500ms", 2500),
        ("1m30s500ms", 90500),
        ("1s500ms", 1500),
        ("1h30m", 5_400_000),
        ("2m 30s", 150000),
    ],
)
def test_parse_compound(value: str, expected_ms: int) -> None:
    assert parse_sleep_duration(value) == timedelta(milliseconds=expected_ms)


@pytest.mark.parametrize(
    "value",
    ["0", "0ms", "0s", "0m", "0h", "0h0m0s", "0s0ms", "-5s", "-100", "-1m30s", "0.0004s"],
)
def test_parse_zero_and_negative(value: str) -> None:
    assert parse_sleep_duration(value) == timedelta(0)


@pytest.mark.parametrize(
    "value",
    ["", "   ", "abc", "5x", "1.", ".5s", "1..5s", "1s2", "1s garbage", "-", "+ms", "- 5s", "5 s s", "ms"],
)
def test_parse_rejects_invalid(value: str) -> None:
    with pytest.raises(SleepError) as exc:
        parse_sleep_duration(value)
    assert exc.value.code == ErrorCode.INVALID_DURATION
    assert exc.value.details == {"input": value}


def test_parse_reports_unknown_unit() -> None:
    with pytest.raises(SleepError) as exc:
        parse_sleep_duration("3 fortnights")
    assert "fortnights" in exc.value.message


def test_parse_rounds_half_up_to_millis() -> None:
    assert parse_sleep_duration("0.0005s") == timedelta(milliseconds=1)
    assert parse_sleep_duration("0.0015s") == timedelta(milliseconds=2)
    assert parse_sleep_duration("0.0014s") == timedelta(milliseconds=1)
    assert parse_sleep_duration("1.4") == timedelta(milliseconds=1)
    assert parse_sleep_duration("1.5") == timedelta(milliseconds=2)


@pytest.mark.parametrize("unit", sorted(UNIT_MILLIS))
@pytest.mark.parametrize("amount", ["1", "7", "2.25", "12.345"])
def test_parse_matches_manual_conversion(unit: str, amount: str) -> None:
    expected = Decimal(amount) * UNIT_MILLIS[unit]
    parsed_ms = Decimal(parse_sleep_duration(f"{amount}{unit}") / timedelta(microseconds=1)) / 1000
    assert abs(parsed_ms - expected) <= 1


def test_parse_default_unit() -> None:
    assert parse_sleep_duration("3", default_unit="s") == timedelta(seconds=3)
    assert parse_sleep_duration("3ms", default_unit="s") == timedelta(milliseconds=3)


def test_parse_rejects_unknown_default_unit() -> None:
    with pytest.raises(ValueError):
        parse_sleep_duration("3", default_unit="fortnight")


def test_parse_out_of_range() -> None:
    with pytest.raises(SleepError) as exc:
        parse_sleep_duration("99999999999999999999h")
    assert exc.value.code == ErrorCode.OUT_OF_RANGE


def test_parse_rejects_non_string() -> None:
    with pytest.raises(TypeError):
        parse_sleep_duration(100)  # type: ignore[arg-type]


def test_parse_out_of_range_for_very_long_numeral() -> None:
    with pytest.raises(SleepError) as exc:
        parse_sleep_duration("9" * 1_000_001 + "h")
    assert exc.value.code == ErrorCode.OUT_OF_RANGE


def test_parse_negative_very_long_numeral_is_zero() -> None:
    assert parse_sleep_duration("-" + "9" * 100_000 + "s") == timedelta(0)


@pytest.mark.parametrize(
    ("value", "expected_ms"),
    [
        ("0.4" + "9" * 30, 0),
        ("0.5" + "0" * 30 + "1", 1),
        ("1.4" + "9" * 40 + "ms", 1),
        ("0.0004" + "9" * 30 + "s", 0),
    ],
)
def test_parse_rounds_long_fractions_exactly(value: str, expected_ms: int) -> None:
    assert parse_sleep_duration(value) == timedelta(milliseconds=expected_ms)


@pytest.mark.parametrize("value", ["１００ms", "١٢", "1٠s"])
def test_parse_rejects_non_ascii_digits(value: str) -> None:
    with pytest.raises(SleepError) as exc:
        parse_sleep_duration(value)
    assert exc.value.code == ErrorCode.INVALID_DURATION
