from __future__ import annotations

import pytest

from suite_money.domain.monetary.fixed_decimal import Decimal
from suite_money.domain.monetary.rounding import (
    RoundingMode,
    round_down,
    round_down_to_unit,
    round_nearest,
    round_to_unit,
    round_up,
    round_up_to_unit,
)


def d(text: str) -> Decimal:
    return Decimal.parse(text)


@pytest.mark.parametrize(
    "value, precision, expected",
    [
        ("5.45", 1, "5.5"),
        ("5.44", 1, "5.4"),
        ("-5.45", 1, "-5.5"),
        ("-5.44", 1, "-5.4"),
        ("-0.105", 2, "-0.11"),
        ("0.5", 0, "1.0"),
        ("-0.5", 0, "-1.0"),
        ("2.5", 0, "3.0"),  # not banker's rounding
        ("1.2345", 0, "1.0"),
        ("545", -1, "550.0"),
        ("544", -1, "540.0"),
        ("3.1", 3, "3.100"),
    ],
)
def test_round_nearest(value: str, precision: int, expected: str) -> None:
    result = round_nearest(d(value), precision)
    assert str(result) == expected


def test_round_nearest_result_exponent() -> None:
    assert round_nearest(d("3.14159"), 2).exponent == -2
    assert round_nearest(d("545"), -1).exponent == 1


@pytest.mark.parametrize(
    "value, precision, expected",
    [
        ("3.1416", 3, "3.142"),
        ("3.1416", 2, "3.15"),
        ("-3.1416", 2, "-3.14"),
        ("-3.135", 2, "-3.13"),
        ("1.001", 0, "2.0"),
        ("3.1400001", 2, "3.15"),
        ("541", -1, "550.0"),
        ("545", -1, "550.0"),
    ],
)
def test_round_up(value: str, precision: int, expected: str) -> None:
    assert str(round_up(d(value), precision)) == expected


@pytest.mark.parametrize(
    "value, precision, expected",
    [
        ("3.1416", 3, "3.141"),
        ("1.88", 0, "1.0"),
        ("-1.88", 0, "-2.0"),
        ("3.145", 2, "3.14"),
        ("-3.141", 2, "-3.15"),
        ("549", -1, "540.0"),
        ("545", -1, "540.0"),
    ],
)
def test_round_down(value: str, precision: int, expected: str) -> None:
    assert str(round_down(d(value), precision)) == expected


def test_directional_rounding_returns_exact_values_unchanged() -> None:
    # Stored scale survives when no rounding is needed
    assert str(round_up(d("3.1400"), 2)) == "3.1400"
    assert str(round_down(d("3.1400"), 2)) == "3.1400"
    assert str(round_up(d("540"), -1)) == "540.0"


@pytest.mark.parametrize(
    "value, unit, expected",
    [
        ("3.1216", "0.05", "3.10"),
        ("3.1416", "0.05", "3.15"),
        ("0.13", "0.05", "0.15"),
        ("-0.13", "0.05", "-0.15"),
        ("0.12", "0.05", "0.10"),
        ("-0.12", "0.05", "-0.10"),
        ("0.025", "0.05", "0.05"),
        ("0.25", "0.50", "0.50"),
        ("-0.25", "0.50", "-0.50"),
        ("0.24", "0.50", "0.00"),
        ("120.75", "1", "121.0"),
        ("120.03", "0.05", "120.05"),
        ("120.01", "0.05", "120.00"),
        ("1.2", "0.25", "1.25"),
        ("0.245", "0.50", "0.00"),
        ("0.2500", "0.50", "0.50"),
        ("0.745", "0.50", "0.50"),
        ("0.0451", "0.10", "0.00"),
        ("0.05", "0.10", "0.10"),
        ("-0.0451", "0.10", "0.00"),
        ("0.125", "0.05", "0.15"),
        ("0.1249", "0.05", "0.10"),
    ],
)
def test_round_to_unit(value: str, unit: str, expected: str) -> None:
    assert str(round_to_unit(d(value), d(unit))) == expected


def test_round_to_unit_is_symmetric_around_zero() -> None:
    unit = d("0.05")
    for text in ["0.01", "0.02", "0.03", "0.07", "1.234", "99.975"]:
        assert round_to_unit(d(text).neg(), unit) == round_to_unit(d(text), unit).neg()


@pytest.mark.parametrize(
    "value, unit, expected",
    [
        ("1.41", "0.05", "1.45"),
        ("1.45", "0.05", "1.45"),
        ("-1.41", "0.05", "-1.40"),
        ("120.01", "0.05", "120.05"),
        ("1.41", "1", "2.0"),
        ("1.4100", "0.05", "1.45"),
        ("0", "0.05", "0.00"),
    ],
)
def test_round_up_to_unit(value: str, unit: str, expected: str) -> None:
    assert str(round_up_to_unit(d(value), d(unit))) == expected


@pytest.mark.parametrize(
    "value, unit, expected",
    [
        ("1.49", "0.05", "1.45"),
        ("-1.41", "0.05", "-1.45"),
        ("120.03", "0.05", "120.00"),
        ("1.49", "0.1", "1.4"),
        ("-1.40", "0.05", "-1.40"),
    ],
)
def test_round_down_to_unit(value: str, unit: str, expected: str) -> None:
    assert str(round_down_to_unit(d(value), d(unit))) == expected


@pytest.mark.parametrize("function", [round_to_unit, round_up_to_unit, round_down_to_unit])
@pytest.mark.parametrize("unit", ["0", "-0.05"])
def test_unit_must_be_positive(function, unit: str) -> None:
    with pytest.raises(ValueError):
        function(d("1.00"), d(unit))


def test_rounding_mode_values() -> None:
    assert RoundingMode("down") is RoundingMode.DOWN
    assert RoundingMode("up") is RoundingMode.UP
    assert RoundingMode("to_nearest") is RoundingMode.TO_NEAREST
