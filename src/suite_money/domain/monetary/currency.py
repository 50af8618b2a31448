from __future__ import annotations

import json

from suite_money.domain.monetary.currency_properties import DEFAULT_CURRENCY_PROPERTIES, CurrencyPropertiesProvider, RoundingStandard
from suite_money.domain.monetary.currency_registry import DEFAULT_CURRENCY_REGISTRY, CurrencyRegistry
from suite_money.domain.monetary.currency_rounding import rounding_unit
from suite_money.domain.monetary.fixed_decimal import Decimal
from suite_money.errors import InvalidCurrency


class Currency:
    """Represents a validated currency code.

    The code is normalized (stripped, upper-cased) and checked against a `CurrencyRegistry`
    when the instance is created, so every Currency holds either an ISO 4217 code or a
    registered unofficial code.

    Attributes:
        code (str): Normalized currency code (e.g. "CHF", "ETH").
    """

    __slots__ = ("_code",)

    def __init__(self, code: str, registry: CurrencyRegistry | None = None) -> None:
        """Initialize a Currency instance.

        Args:
            code: Currency code, case-insensitive (e.g. "chf").
            registry: Registry to validate against. If None, `DEFAULT_CURRENCY_REGISTRY` is used.

        Raises:
            InvalidCurrency: If $code is not known to the registry.
            TypeError: If $code is not a string.
        """
        registry = registry or DEFAULT_CURRENCY_REGISTRY
        self._code = registry.parse(code)

    @classmethod
    def from_str(cls, code: str, registry: CurrencyRegistry | None = None) -> Currency:
        """Parse currency from its code.

        Args:
            code: Currency code to parse.
            registry: Registry to validate against.

        Returns:
            Currency: The currency instance.

        Raises:
            InvalidCurrency: If $code is not known to the registry.
        """
        return cls(code, registry)

    @property
    def code(self) -> str:
        """Get the currency code."""
        return self._code

    def validate(self, registry: CurrencyRegistry | None = None) -> None:
        """Check that the code is still known to $registry.

        Raises:
            InvalidCurrency: If the code is unknown to $registry.
        """
        (registry or DEFAULT_CURRENCY_REGISTRY).parse(self._code)

    def is_official(self, registry: CurrencyRegistry | None = None) -> bool:
        """Check if the code is part of ISO 4217.

        Returns:
            bool: False for registered unofficial codes such as crypto tickers.
        """
        return (registry or DEFAULT_CURRENCY_REGISTRY).is_iso(self._code)

    def scale(self, provider: CurrencyPropertiesProvider | None = None) -> int:
        """Return the standard number of fractional digits (e.g. 2 for CHF, 0 for JPY).

        Raises:
            InvalidCurrency: If $provider has no data for this currency.
        """
        provider = provider or DEFAULT_CURRENCY_PROPERTIES
        return provider.rounding(self._code, RoundingStandard.STANDARD).scale

    def round_unit(self, standard: RoundingStandard = RoundingStandard.STANDARD, provider: CurrencyPropertiesProvider | None = None) -> Decimal:
        """Return the smallest amount this currency rounds to under $standard.

        Examples:
            CHF standard -> 0.01
            CHF cash -> 0.05
            JPY standard -> 1

        Raises:
            InvalidCurrency: If $provider has no data for this currency.
        """
        return rounding_unit(self, standard, provider)

    def to_json(self) -> str:
        """Return the code as a JSON string literal, e.g. '"CHF"'."""
        return json.dumps(self._code)

    @classmethod
    def from_json(cls, data: str | bytes, registry: CurrencyRegistry | None = None) -> Currency:
        """Parse a JSON string literal holding a currency code.

        Raises:
            InvalidCurrency: If $data is not a JSON string or holds an unknown code.
        """
        try:
            value = json.loads(data)
        except json.JSONDecodeError as e:
            raise InvalidCurrency(f"Cannot call `Currency.from_json` because $data ({data!r}) is not valid JSON") from e

        # Raise: currencies travel as JSON strings
        if not isinstance(value, str):
            raise InvalidCurrency(f"Cannot call `Currency.from_json` because $data ({data!r}) is not a JSON string")

        return cls(value, registry)

    def __eq__(self, other) -> bool:
        """Check equality with another Currency."""
        if not isinstance(other, Currency):
            return False
        return self._code == other._code

    def __hash__(self) -> int:
        """Hash based on currency code."""
        return hash(self._code)

    def __str__(self) -> str:
        return self._code

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self._code}')"


# Frequently used ISO 4217 currencies
USD = Currency("USD")
EUR = Currency("EUR")
GBP = Currency("GBP")
CHF = Currency("CHF")
JPY = Currency("JPY")
