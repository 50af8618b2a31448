"""Rounding of amounts to the subdivisions of a currency.

This is the only place where a currency and its rounding increment meet: the provider resolves
(currency, standard) to a scale and increment, which become a rounding unit for the
currency-agnostic functions in `rounding`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from suite_money.domain.monetary.currency_properties import DEFAULT_CURRENCY_PROPERTIES, CurrencyPropertiesProvider, RoundingStandard
from suite_money.domain.monetary.fixed_decimal import Decimal
from suite_money.domain.monetary.rounding import RoundingMode, round_down_to_unit, round_to_unit, round_up_to_unit

if TYPE_CHECKING:
    from suite_money.domain.monetary.currency import Currency

logger = logging.getLogger(__name__)


def rounding_unit(currency: Currency, standard: RoundingStandard = RoundingStandard.STANDARD, provider: CurrencyPropertiesProvider | None = None) -> Decimal:
    """Return the rounding unit `increment * 10 ** -scale` of $currency under $standard.

    Args:
        currency: Currency to resolve.
        standard: Rounding standard (standard, cash or accounting).
        provider: Source of scale and increment. If None, `DEFAULT_CURRENCY_PROPERTIES` is used.

    Returns:
        Decimal: Unit such as 0.05 for cash CHF.

    Raises:
        InvalidCurrency: If $provider has no data for $currency.
    """
    provider = provider or DEFAULT_CURRENCY_PROPERTIES
    scale, increment = provider.rounding(currency.code, standard)

    # Raise: a unit of zero or less cannot be rounded to
    if increment <= 0:
        raise ValueError(f"Cannot call `rounding_unit` because provider returned $increment ({increment}) <= 0 for $currency '{currency.code}'")

    unit = Decimal(increment, -scale)
    logger.debug(f"Resolved rounding unit {unit} for $currency '{currency.code}' and $standard '{standard.value}'")
    return unit


def round_amount(x: Decimal, unit: Decimal, mode: RoundingMode = RoundingMode.TO_NEAREST) -> Decimal:
    """Snap $x to a multiple of $unit in the direction given by $mode.

    Examples:
        120.03 with unit 0.05, TO_NEAREST -> 120.05
        120.03 with unit 0.05, DOWN -> 120.00
        120.01 with unit 0.05, UP -> 120.05

    Raises:
        ValueError: If $unit is not positive.
    """
    if mode is RoundingMode.UP:
        return round_up_to_unit(x, unit)
    if mode is RoundingMode.DOWN:
        return round_down_to_unit(x, unit)
    return round_to_unit(x, unit)


def round_to_currency(
    x: Decimal,
    currency: Currency,
    standard: RoundingStandard = RoundingStandard.STANDARD,
    mode: RoundingMode = RoundingMode.TO_NEAREST,
    provider: CurrencyPropertiesProvider | None = None,
) -> Decimal:
    """Round $x to the rounding unit of $currency under $standard.

    The result carries the scale of the rounding unit:

        120.03 CHF, cash     -> 120.05
        120.01 CHF, cash     -> 120.00
        120.75 JPY, standard -> 121

    Args:
        x: Amount to round.
        currency: Currency whose subdivision is used.
        standard: Rounding standard.
        mode: Nearest multiple (default) or directional rounding.
        provider: Source of scale and increment.

    Returns:
        Decimal: Rounded amount.

    Raises:
        InvalidCurrency: If $provider has no data for $currency.
    """
    return round_amount(x, rounding_unit(currency, standard, provider), mode)
