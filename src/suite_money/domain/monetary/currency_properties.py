from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import NamedTuple, Protocol

from suite_money.domain.monetary.iso4217 import CASH_ROUNDING, ISO_4217_SCALES
from suite_money.errors import InvalidCurrency


class RoundingStandard(Enum):
    """Named rounding policy a currency-properties provider resolves to a scale and increment.

    Members:
        STANDARD: Standard rounding and formatting of the currency.
        CASH: Rounding for cash transactions (e.g. CHF to 0.05).
        ACCOUNTING: Rounding for accounting.
    """

    STANDARD = "standard"
    CASH = "cash"
    ACCOUNTING = "accounting"


class CurrencyRounding(NamedTuple):
    """Rounding data of a currency: the unit is `increment * 10 ** -scale`."""

    scale: int
    increment: int


# region Interface


class CurrencyPropertiesProvider(Protocol):
    """Source of per-currency rounding data, supplied by the embedding system."""

    def rounding(self, code: str, standard: RoundingStandard) -> CurrencyRounding:
        """Return the rounding data of currency $code under $standard.

        Args:
            code: Normalized currency code (e.g. "CHF").
            standard: Rounding standard to resolve.

        Returns:
            The scale and increment coefficient, e.g. (2, 5) for cash CHF.

        Raises:
            InvalidCurrency: If the provider has no data for $code.
        """
        ...


# endregion


class TableCurrencyProperties(CurrencyPropertiesProvider):
    """Provider backed by the bundled ISO 4217 and cash rounding tables.

    Accounting rounding resolves like standard rounding. Codes outside ISO 4217 (e.g.
    registered crypto tickers) need their scale passed in $extra_scales.

    Args:
        extra_scales: Additional or overriding standard scales per code (e.g. {"ETH": 18}).
    """

    __slots__ = ("_scales", "_cash_rounding")

    def __init__(self, extra_scales: Mapping[str, int] | None = None) -> None:
        self._scales = dict(ISO_4217_SCALES)
        self._cash_rounding = {code: CurrencyRounding(*rounding) for code, rounding in CASH_ROUNDING.items()}

        for code, scale in (extra_scales or {}).items():
            # Raise: a scale is a non-negative count of fractional digits
            if not isinstance(scale, int) or isinstance(scale, bool) or scale < 0:
                raise ValueError(f"Cannot call `TableCurrencyProperties.__init__` because scale of $code '{code}' ({scale}) is not a non-negative int")
            self._scales[code.strip().upper()] = scale

    def rounding(self, code: str, standard: RoundingStandard) -> CurrencyRounding:
        """Implements: CurrencyPropertiesProvider.rounding"""
        scale = self._scales.get(code)

        # Raise: no rounding data exists for this code
        if scale is None:
            raise InvalidCurrency(f"Cannot call `rounding` because $code '{code}' has no rounding data")

        if standard is RoundingStandard.CASH and code in self._cash_rounding:
            return self._cash_rounding[code]
        return CurrencyRounding(scale, 1)


DEFAULT_CURRENCY_PROPERTIES = TableCurrencyProperties()
