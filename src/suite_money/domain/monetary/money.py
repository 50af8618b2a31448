from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, ValidationError

from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.currency_properties import CurrencyPropertiesProvider, RoundingStandard
from suite_money.domain.monetary.currency_registry import CurrencyRegistry
from suite_money.domain.monetary.currency_rounding import round_to_currency
from suite_money.domain.monetary.fixed_decimal import Decimal
from suite_money.domain.monetary.rounding import RoundingMode
from suite_money.errors import InvalidMoneyFormat
from suite_money.utils.numeric_tools import DecimalLike, as_decimal


class MoneyPayload(BaseModel):
    """Wire form of `Money`: `{"amount": "120.00", "currency": "CHF"}`.

    The amount travels as canonical decimal text, never as a JSON number.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    amount: str = Field(..., min_length=1, description="Canonical decimal text, e.g. '120.00'")
    currency: str = Field(..., min_length=1, description="Currency code, e.g. 'CHF'")


class Money:
    """Represents a monetary amount with currency.

    The amount is a fixed-point `Decimal` and keeps the scale it was given: Money("120.00", CHF)
    renders as "120.00 CHF". Rounding to the currency's subdivision is explicit, see `round`.

    Arithmetic between Money values is not provided; compute on `amount` and wrap the result.
    """

    __slots__ = ("_amount", "_currency")

    def __init__(self, amount: DecimalLike, currency: Currency) -> None:
        """Initialize Money with amount and currency.

        Args:
            amount: Numeric amount (Decimal-like scalar). Strings keep their scale.
            currency: Currency object.

        Raises:
            TypeError: If $currency is not Currency instance, or $amount has an unsupported type.
            InvalidDecimalFormat: If $amount cannot be converted to Decimal.
        """
        # Raise: currency must be an instance of Currency
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency!r}")

        self._amount = as_decimal(amount)
        self._currency = currency

    # region Construction

    @classmethod
    def parse(cls, amount: str, currency: str, registry: CurrencyRegistry | None = None) -> Money:
        """Build Money from canonical amount text and a currency code.

        Args:
            amount: Canonical decimal text, e.g. "120.00".
            currency: Currency code, e.g. "CHF".
            registry: Registry to validate $currency against.

        Raises:
            InvalidDecimalFormat: If $amount is not a valid decimal.
            InvalidCurrency: If $currency is not a known code.
        """
        return cls(Decimal.parse(amount), Currency(currency, registry))

    @classmethod
    def from_str(cls, value_str: str, registry: CurrencyRegistry | None = None) -> Money:
        """Parse Money from string like '120.00 CHF'.

        Args:
            value_str: Amount and currency code separated by whitespace.
            registry: Registry to validate the currency against.

        Returns:
            Money: Money object.

        Raises:
            InvalidMoneyFormat: If $value_str is not in format 'amount currency_code'.
            InvalidDecimalFormat: If the amount part is not a valid decimal.
            InvalidCurrency: If the currency part is not a known code.
        """
        parts = value_str.split()

        # Raise: exactly an amount and a currency code are expected
        if len(parts) != 2:
            raise InvalidMoneyFormat(f"Cannot call `Money.from_str` because $value_str ('{value_str}') is not in format 'amount currency_code'")

        amount_part, currency_part = parts
        return cls.parse(amount_part, currency_part, registry)

    @classmethod
    def from_dict(cls, data: dict[str, Any], registry: CurrencyRegistry | None = None) -> Money:
        """Build Money from a dict like {"amount": "120.00", "currency": "CHF"}.

        Raises:
            InvalidMoneyFormat: If $data does not have exactly the string fields `amount` and `currency`.
            InvalidDecimalFormat: If the amount is not a valid decimal.
            InvalidCurrency: If the currency is not a known code.
        """
        try:
            payload = MoneyPayload.model_validate(data)
        except ValidationError as e:
            raise InvalidMoneyFormat(f"Cannot call `Money.from_dict` because $data ({data!r}) is not a valid money payload") from e

        return cls.parse(payload.amount, payload.currency, registry)

    @classmethod
    def from_json(cls, data: str | bytes, registry: CurrencyRegistry | None = None) -> Money:
        """Parse JSON produced by `to_json`.

        Raises:
            InvalidMoneyFormat: If $data is not a JSON object with string fields `amount` and `currency`.
            InvalidDecimalFormat: If the amount is not a valid decimal.
            InvalidCurrency: If the currency is not a known code.
        """
        try:
            payload = MoneyPayload.model_validate_json(data)
        except ValidationError as e:
            raise InvalidMoneyFormat(f"Cannot call `Money.from_json` because $data ({data!r}) is not a valid money payload") from e

        return cls.parse(payload.amount, payload.currency, registry)

    # endregion

    # region Properties

    @property
    def amount(self) -> Decimal:
        """Get the decimal amount."""
        return self._amount

    @property
    def currency(self) -> Currency:
        """Get the currency."""
        return self._currency

    # endregion

    # region Operations

    def validate(self, registry: CurrencyRegistry | None = None) -> None:
        """Check that the currency is known to $registry.

        Raises:
            InvalidCurrency: If the currency is unknown to $registry.
        """
        self._currency.validate(registry)

    def round(
        self,
        standard: RoundingStandard = RoundingStandard.STANDARD,
        mode: RoundingMode = RoundingMode.TO_NEAREST,
        provider: CurrencyPropertiesProvider | None = None,
    ) -> Money:
        """Return a new Money rounded to the currency's unit under $standard.

        Examples:
            120.03 CHF, cash -> 120.05 CHF
            120.75 JPY       -> 121 JPY

        Raises:
            InvalidCurrency: If $provider has no data for the currency.
        """
        return self.__class__(round_to_currency(self._amount, self._currency, standard, mode, provider), self._currency)

    def equal(self, other: Money) -> bool:
        """Check same currency and same numeric amount, whatever the stored scale."""
        return self._currency == other._currency and self._amount.equal(other._amount)

    def _check_same_currency(self, other: Money) -> None:
        # Raise: amounts in different currencies cannot be ordered
        if self._currency != other._currency:
            raise ValueError(f"Cannot compare different currencies: {self._currency} and {other._currency}")

    # endregion

    # region Serialization

    def to_dict(self) -> dict[str, str]:
        """Return {"amount": "<canonical text>", "currency": "<code>"}."""
        return {"amount": str(self._amount), "currency": self._currency.code}

    def to_json(self) -> str:
        """Return JSON like '{"amount":"120.00","currency":"CHF"}'."""
        return MoneyPayload(amount=str(self._amount), currency=self._currency.code).model_dump_json()

    # endregion

    # region Comparison operators (same currency required)

    def __eq__(self, other) -> bool:
        """Check equality with another Money object."""
        if not isinstance(other, Money):
            return False
        return self.equal(other)

    def __lt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self._amount < other._amount

    def __le__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self._amount <= other._amount

    def __gt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self._amount > other._amount

    def __ge__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self._amount >= other._amount

    def __hash__(self) -> int:
        """Hash based on numeric amount and currency code."""
        return hash((self._amount, self._currency.code))

    # endregion

    # region String representations

    def __str__(self) -> str:
        """Return string like '120.00 CHF'."""
        return f"{self._amount} {self._currency.code}"

    def __repr__(self) -> str:
        """Return string like 'Money(120.00, CHF)'."""
        return f"{self.__class__.__name__}({self._amount}, {self._currency.code})"

    # endregion
