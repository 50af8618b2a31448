"""Error kinds raised by the monetary domain.

Two families exist:

- Format errors (`InvalidDecimalFormat`, `InvalidCurrency`, `InvalidMoneyFormat`) are recoverable and are raised to the
  caller whenever text, JSON or binary input cannot be turned into a value.
- Arithmetic errors (`DivisionByZero`, `ExponentOverflow`) are programmer errors. The operation is
  aborted instead of producing an approximate number. Callers should not branch on them.
"""

from __future__ import annotations


class MoneyError(Exception):
    """Base class for recoverable errors of this package."""


class InvalidDecimalFormat(MoneyError, ValueError):
    """Text, JSON or binary input is not a valid decimal."""


class InvalidCurrency(MoneyError, ValueError):
    """Currency code is malformed or not recognized."""


class DecimalArithmeticError(ArithmeticError):
    """Unrecoverable arithmetic failure; indicates a bug in the calling code."""


class DivisionByZero(DecimalArithmeticError, ZeroDivisionError):
    """Divisor of a decimal division is zero."""


class ExponentOverflow(DecimalArithmeticError, OverflowError):
    """Decimal exponent left the signed 32-bit range."""


class InvalidMoneyFormat(MoneyError, ValueError):
    """Serialized money value is malformed."""
