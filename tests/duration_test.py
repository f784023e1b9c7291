from fractions import Fraction
import logging
import math

import pytest

from etafmt import DurationFormatter, Unit, UnitsStyle, decompose, format_eta, format_eta_or


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "0m"),
        (59, "0m"),
        (59.999, "0m"),
        (60, "1m"),
        (61.5, "1m"),
        (300, "5m"),
        (3_600, "1h"),
        (3_661, "1h 1m"),
        (4_800, "1h 20m"),
        (86_400, "1d"),
        (86_460, "1d 1m"),
        (90_000, "1d 1h"),
        (90_061, "1d 1h"),
        (30 * 86_400 + 5, "30d"),
    ],
)
def test_format_eta(seconds: float, expected: str) -> None:
    assert format_eta(seconds) == expected


@pytest.mark.parametrize(
    "seconds", [-1, -0.5, math.nan, math.inf, -math.inf, "60", None, 1j, True, [60]]
)
def test_format_eta_failure(seconds: object) -> None:
    assert format_eta(seconds) is None


def test_format_eta_failure_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="etafmt.duration"):
        assert format_eta(-5) is None
    assert "non-negative" in caplog.text


def test_format_eta_or() -> None:
    assert format_eta_or(3_661) == "1h 1m"
    assert format_eta_or(-1) == "--"
    assert format_eta_or(math.nan, default="") == ""


def test_format_eta_is_pure() -> None:
    first = [format_eta(s) for s in range(0, 200_000, 997)]
    second = [format_eta(s) for s in range(0, 200_000, 997)]
    assert first == second


def test_format_eta_monotone_within_hour() -> None:
    minutes = [int(format_eta(s)[:-1]) for s in range(60, 3_600, 7)]  # type: ignore[index]
    assert minutes == sorted(minutes)


def test_decompose() -> None:
    assert decompose(90_061) == {Unit.DAY: 1, Unit.HOUR: 1, Unit.MINUTE: 1}
    assert decompose(Fraction(121, 2), units=["second", "minute"]) == {
        Unit.MINUTE: 1,
        Unit.SECOND: 0,
    }
    assert list(decompose(0, units=[Unit.MINUTE, Unit.WEEK])) == [Unit.WEEK, Unit.MINUTE]
    with pytest.raises(ValueError):
        decompose(-1)
    with pytest.raises(ValueError):
        decompose(math.inf)
    with pytest.raises(ValueError):
        decompose(10, units=[])
    with pytest.raises(TypeError):
        decompose("10")


def test_formatter_defaults_match_format_eta() -> None:
    formatter = DurationFormatter()
    assert formatter.allowed_units == (Unit.DAY, Unit.HOUR, Unit.MINUTE)
    assert formatter.max_unit_count == 2
    assert formatter.units_style is UnitsStyle.ABBREVIATED
    for seconds in (0, 59, 3_661, 90_061):
        assert formatter(seconds) == format_eta(seconds)


@pytest.mark.parametrize(
    "style, seconds, expected",
    [
        (UnitsStyle.ABBREVIATED, 3_661, "1h 1m"),
        (UnitsStyle.SHORT, 3_661, "1 hr, 1 min"),
        (UnitsStyle.SHORT, 2 * 86_400 + 7_200, "2 days, 2 hr"),
        (UnitsStyle.FULL, 3_661, "1 hour, 1 minute"),
        (UnitsStyle.FULL, 2 * 86_400 + 180, "2 days, 3 minutes"),
        (UnitsStyle.FULL, 10, "0 minutes"),
    ],
)
def test_formatter_styles(style: UnitsStyle, seconds: int, expected: str) -> None:
    assert DurationFormatter(units_style=style).format(seconds) == expected


def test_formatter_units_and_cap() -> None:
    formatter = DurationFormatter(["second", "MINUTE", Unit.HOUR, Unit.WEEK], max_unit_count=3)
    assert formatter.allowed_units == (Unit.WEEK, Unit.HOUR, Unit.MINUTE, Unit.SECOND)
    assert formatter(604_800 + 3_600 + 61) == "1w 1h 1m"
    assert formatter(45) == "45s"
    assert formatter(0.4) == "0s"
    # days are not allowed, so they're carried into hours
    assert DurationFormatter([Unit.HOUR, Unit.MINUTE])(90_000) == "25h"
    assert DurationFormatter(max_unit_count=1)(90_061) == "1d"


def test_formatter_invalid_config() -> None:
    with pytest.raises(ValueError):
        DurationFormatter([])
    with pytest.raises(ValueError):
        DurationFormatter(max_unit_count=0)
    with pytest.raises(TypeError):
        DurationFormatter(max_unit_count=2.0)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        DurationFormatter(["fortnight"])
    with pytest.raises(TypeError):
        DurationFormatter(units_style="verbose")


def test_formatter_repr() -> None:
    assert repr(DurationFormatter()) == (
        "DurationFormatter(allowed_units=[day, hour, minute], max_unit_count=2, "
        "units_style=abbreviated)"
    )


def test_format_eta_huge_int() -> None:
    eta = format_eta(10**400)
    assert eta is not None
    assert eta.startswith(f"{10**400 // 86_400}d")


def test_format_eta_huge_fraction() -> None:
    seconds = Fraction(10**400, 3)
    eta = format_eta(seconds)
    assert eta is not None
    assert eta.startswith(f"{10**400 // 3 // 86_400}d")
    assert decompose(seconds)[Unit.DAY] == 10**400 // 3 // 86_400


@pytest.mark.parametrize(
    "unit, expected_unit, expected",
    [
        ("minute", Unit.MINUTE, "120m"),
        ("HOUR", Unit.HOUR, "2h"),
        (Unit.SECOND, Unit.SECOND, "7200s"),
    ],
)
def test_formatter_single_unit(unit: Unit | str, expected_unit: Unit, expected: str) -> None:
    formatter = DurationFormatter(unit)
    assert formatter.allowed_units == (expected_unit,)
    assert formatter(7_200) == expected
    assert list(decompose(7_200, units=unit)) == [expected_unit]
