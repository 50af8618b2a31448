from __future__ import annotations

import pytest

from suite_money.domain.monetary.currency_properties import (
    DEFAULT_CURRENCY_PROPERTIES,
    CurrencyRounding,
    RoundingStandard,
    TableCurrencyProperties,
)
from suite_money.domain.monetary.iso4217 import DEFAULT_SCALE, ISO_4217_SCALES
from suite_money.errors import InvalidCurrency


@pytest.mark.parametrize(
    "code, standard, expected",
    [
        ("CHF", RoundingStandard.STANDARD, (2, 1)),
        ("CHF", RoundingStandard.CASH, (2, 5)),
        ("CHF", RoundingStandard.ACCOUNTING, (2, 1)),
        ("EUR", RoundingStandard.STANDARD, (2, 1)),
        ("EUR", RoundingStandard.CASH, (2, 1)),
        ("EUR", RoundingStandard.ACCOUNTING, (2, 1)),
        ("JPY", RoundingStandard.STANDARD, (0, 1)),
        ("JPY", RoundingStandard.CASH, (0, 1)),
        ("JPY", RoundingStandard.ACCOUNTING, (0, 1)),
        ("DKK", RoundingStandard.CASH, (2, 50)),
        ("SEK", RoundingStandard.STANDARD, (2, 1)),
        ("SEK", RoundingStandard.CASH, (0, 1)),
        ("KWD", RoundingStandard.STANDARD, (3, 1)),
        ("CLF", RoundingStandard.STANDARD, (4, 1)),
    ],
)
def test_default_rounding_table(code: str, standard: RoundingStandard, expected: tuple[int, int]) -> None:
    rounding = DEFAULT_CURRENCY_PROPERTIES.rounding(code, standard)
    assert rounding == CurrencyRounding(*expected)
    assert rounding.scale == expected[0]
    assert rounding.increment == expected[1]


def test_codes_without_minor_unit_use_default_scale() -> None:
    assert DEFAULT_CURRENCY_PROPERTIES.rounding("XAU", RoundingStandard.STANDARD).scale == DEFAULT_SCALE
    assert ISO_4217_SCALES["XXX"] == DEFAULT_SCALE


def test_unknown_code_raises() -> None:
    with pytest.raises(InvalidCurrency):
        DEFAULT_CURRENCY_PROPERTIES.rounding("ETH", RoundingStandard.STANDARD)


def test_extra_scales_for_unofficial_codes() -> None:
    provider = TableCurrencyProperties(extra_scales={"eth": 18, "JPY": 2})
    assert provider.rounding("ETH", RoundingStandard.STANDARD) == CurrencyRounding(18, 1)
    assert provider.rounding("ETH", RoundingStandard.CASH) == CurrencyRounding(18, 1)
    assert provider.rounding("JPY", RoundingStandard.STANDARD) == CurrencyRounding(2, 1)

    # Default provider is not affected
    assert DEFAULT_CURRENCY_PROPERTIES.rounding("JPY", RoundingStandard.STANDARD) == CurrencyRounding(0, 1)


@pytest.mark.parametrize("scale", [-1, 1.5, True])
def test_extra_scales_must_be_non_negative_ints(scale) -> None:
    with pytest.raises(ValueError):
        TableCurrencyProperties(extra_scales={"ETH": scale})


def test_rounding_standard_values() -> None:
    assert RoundingStandard("cash") is RoundingStandard.CASH
    assert RoundingStandard("standard") is RoundingStandard.STANDARD
    assert RoundingStandard("accounting") is RoundingStandard.ACCOUNTING
