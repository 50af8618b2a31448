from __future__ import annotations

from decimal import Decimal as StdDecimal
from typing import TypeAlias

from suite_money.domain.monetary.fixed_decimal import Decimal

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | StdDecimal | float


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Strings are parsed in canonical decimal form and keep their scale. Floats are converted via
    their shortest string form to avoid precision noise.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.

    Raises:
        InvalidDecimalFormat: If a string is not a valid decimal, or a float / standard library
            decimal is not finite.
        TypeError: If $value has an unsupported type.
    """
    if isinstance(value, Decimal):
        return value
    # Raise: bool is an int subclass, but not an amount
    if isinstance(value, bool):
        raise TypeError(f"Cannot call `as_decimal` because $value ({value}) is bool")
    if isinstance(value, int):
        return Decimal.from_int(value)
    if isinstance(value, str):
        return Decimal.parse(value.strip())
    if isinstance(value, StdDecimal):
        return Decimal.from_std_decimal(value)
    if isinstance(value, float):
        return Decimal.from_float(value)

    # Raise: no conversion exists for this type
    raise TypeError(f"Cannot call `as_decimal` because $value has unsupported type '{type(value).__name__}'")
