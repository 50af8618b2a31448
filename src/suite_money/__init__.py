__version__ = "0.0.1"

from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.fixed_decimal import Decimal
from suite_money.domain.monetary.money import Money

__all__ = ["Currency", "Decimal", "Money"]
