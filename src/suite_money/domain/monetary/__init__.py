"""Monetary domain package.

This package contains the fixed-point `Decimal`, the rounding engine, currencies with their
registry and rounding properties, and `Money` values built on top of them.
"""

from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.currency_properties import CurrencyPropertiesProvider, CurrencyRounding, RoundingStandard, TableCurrencyProperties
from suite_money.domain.monetary.currency_registry import CurrencyRegistry
from suite_money.domain.monetary.fixed_decimal import Decimal
from suite_money.domain.monetary.money import Money
from suite_money.domain.monetary.rounding import RoundingMode

__all__ = [
    "Currency",
    "CurrencyPropertiesProvider",
    "CurrencyRegistry",
    "CurrencyRounding",
    "Decimal",
    "Money",
    "RoundingMode",
    "RoundingStandard",
    "TableCurrencyProperties",
]
