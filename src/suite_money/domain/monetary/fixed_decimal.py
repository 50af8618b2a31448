from __future__ import annotations

import json
import math
import re
import struct
from decimal import Decimal as StdDecimal
from fractions import Fraction

from suite_money.errors import DivisionByZero, ExponentOverflow, InvalidDecimalFormat

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

# Number of fractional digits of a quotient that does not divide exactly
DIVISION_PRECISION = 16

# Version stored in the coefficient header byte of the binary form
BINARY_VERSION = 1

_DECIMAL_PATTERN = re.compile(r"[+-]?(?P<integer>[0-9]*)(?:\.(?P<fraction>[0-9]*))?")

# Digits per chunk when converting between text and int (stays below the interpreter's str/int limit)
_DIGIT_CHUNK = 1000


def _quo_trunc(dividend: int, divisor: int) -> int:
    """Return $dividend / $divisor truncated toward zero."""
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


def _check_exponent(exponent: int, operation: str) -> int:
    # Raise: exponent must fit into a signed 32-bit integer; a wrong monetary amount is worse than a failure
    if exponent < INT32_MIN or exponent > INT32_MAX:
        raise ExponentOverflow(f"Cannot call `{operation}` because exponent ({exponent}) overflows a signed 32-bit integer")
    return exponent


def _int_from_digits(digits: str) -> int:
    value = 0
    for start in range(0, len(digits), _DIGIT_CHUNK):
        chunk = digits[start : start + _DIGIT_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def _digits_of(value: int) -> str:
    """Return decimal digits of abs($value)."""
    value = abs(value)
    base = 10**_DIGIT_CHUNK
    if value < base:
        return str(value)

    chunks = []
    while value >= base:
        value, low = divmod(value, base)
        chunks.append(str(low).rjust(_DIGIT_CHUNK, "0"))
    chunks.append(str(value))
    return "".join(reversed(chunks))


class Decimal:
    """Immutable fixed-point decimal: `coefficient * 10 ** exponent`.

    The coefficient is an arbitrary-precision int, the exponent a signed 32-bit integer. The
    stored precision is kept as-is: "120.00" and "120.0000" are different representations of
    the same number. Comparison and equality are over the numeric value only.

    Attributes:
        coefficient (int): Signed unscaled value.
        exponent (int): Power of ten applied to $coefficient.
    """

    __slots__ = ("_coefficient", "_exponent")

    def __init__(self, coefficient: int, exponent: int = 0) -> None:
        """Initialize a Decimal from an unscaled $coefficient and an $exponent.

        Args:
            coefficient: Signed unscaled integer value.
            exponent: Power of ten; the value is `coefficient * 10 ** exponent`.

        Raises:
            TypeError: If $coefficient or $exponent is not int.
            ExponentOverflow: If $exponent is outside the signed 32-bit range.
        """
        # Raise: coefficient must be an exact int (bool is rejected)
        if not isinstance(coefficient, int) or isinstance(coefficient, bool):
            raise TypeError(f"Cannot call `Decimal.__init__` because $coefficient is not int (got type '{type(coefficient).__name__}')")

        # Raise: exponent must be an exact int (bool is rejected)
        if not isinstance(exponent, int) or isinstance(exponent, bool):
            raise TypeError(f"Cannot call `Decimal.__init__` because $exponent is not int (got type '{type(exponent).__name__}')")

        self._coefficient = coefficient
        self._exponent = _check_exponent(exponent, "Decimal.__init__")

    # region Construction

    @classmethod
    def parse(cls, text: str) -> Decimal:
        """Parse the canonical text form `[sign] digits ['.' digits]`.

        The number of digits after the point becomes the scale of the result:

            "120.0"   -> scale 1
            "123.456" -> scale 3

        Args:
            text: Text representation without exponent notation or grouping separators.

        Returns:
            Decimal: Parsed value with the scale of $text.

        Raises:
            InvalidDecimalFormat: If $text contains anything besides digits, one leading sign
                and at most one decimal point.
        """
        # Raise: only text can be parsed
        if not isinstance(text, str):
            raise TypeError(f"Cannot call `Decimal.parse` because $text is not str (got type '{type(text).__name__}')")

        match = _DECIMAL_PATTERN.fullmatch(text)

        # Raise: digits, one optional leading sign and at most one decimal point; at least one digit
        if match is None or not (match.group("integer") or match.group("fraction")):
            raise InvalidDecimalFormat(f"Cannot call `Decimal.parse` because $text ('{text}') is not a valid decimal")

        fraction = match.group("fraction") or ""

        # Raise: scale must be representable by the exponent
        if -len(fraction) < INT32_MIN:
            raise InvalidDecimalFormat(f"Cannot call `Decimal.parse` because $text has {len(fraction)} fractional digits, which overflows the exponent")

        coefficient = _int_from_digits((match.group("integer") or "") + fraction)
        if text.startswith("-"):
            coefficient = -coefficient
        return cls(coefficient, -len(fraction))

    @classmethod
    def from_int(cls, value: int, exponent: int = 0) -> Decimal:
        """Build a Decimal from a small integer $value scaled by $exponent."""
        return cls(value, exponent)

    @classmethod
    def from_float(cls, value: float) -> Decimal:
        """Convert $value via its shortest text form to avoid binary noise.

        Raises:
            InvalidDecimalFormat: If $value is NaN or infinite.
        """
        # Raise: NaN and infinities have no decimal representation
        if not math.isfinite(value):
            raise InvalidDecimalFormat(f"Cannot call `Decimal.from_float` because $value ({value}) is not finite")

        # Fast path, the float is an integer
        if float(value).is_integer():
            return cls(int(value), 0)

        return cls.from_std_decimal(StdDecimal(str(value)))

    @classmethod
    def from_std_decimal(cls, value: StdDecimal) -> Decimal:
        """Convert a standard library `decimal.Decimal` without loss."""
        # Raise: NaN and infinities have no fixed-point representation
        if not value.is_finite():
            raise InvalidDecimalFormat(f"Cannot call `Decimal.from_std_decimal` because $value ({value}) is not finite")

        sign, digits, exponent = value.as_tuple()

        # Raise: exponent must fit into a signed 32-bit integer
        if exponent < INT32_MIN or exponent > INT32_MAX:
            raise InvalidDecimalFormat(f"Cannot call `Decimal.from_std_decimal` because exponent of $value ({exponent}) overflows a signed 32-bit integer")

        coefficient = _int_from_digits("".join(str(digit) for digit in digits))
        return cls(-coefficient if sign else coefficient, exponent)

    @staticmethod
    def min_of(first: Decimal, *rest: Decimal) -> Decimal:
        """Return the smallest of the given values (first one wins on ties)."""
        result = first
        for item in rest:
            if item.cmp(result) < 0:
                result = item
        return result

    @staticmethod
    def max_of(first: Decimal, *rest: Decimal) -> Decimal:
        """Return the largest of the given values (first one wins on ties)."""
        result = first
        for item in rest:
            if item.cmp(result) > 0:
                result = item
        return result

    # endregion

    # region Properties

    @property
    def coefficient(self) -> int:
        """Get the unscaled coefficient."""
        return self._coefficient

    @property
    def exponent(self) -> int:
        """Get the exponent (power of ten)."""
        return self._exponent

    @property
    def scale(self) -> int:
        """Get the number of fractional digits represented (0 for non-negative exponents)."""
        return -self._exponent if self._exponent < 0 else 0

    def sign(self) -> int:
        """Return -1, 0 or +1 depending on the sign of the value."""
        return (self._coefficient > 0) - (self._coefficient < 0)

    def is_zero(self) -> bool:
        return self._coefficient == 0

    # endregion

    # region Scaling

    def rescale(self, exponent: int) -> Decimal:
        """Return the same value expressed with $exponent.

        Moving to a coarser (larger) exponent truncates toward zero, it does NOT round.
        Moving to a finer (smaller) exponent is exact.

        Example:
            1.2345 rescaled to -1 is 1.2; rescaled back to -4 it is 1.2000.

        Raises:
            ExponentOverflow: If $exponent is outside the signed 32-bit range.
        """
        _check_exponent(exponent, "rescale")
        if exponent == self._exponent:
            return self

        diff = exponent - self._exponent
        if diff > 0:
            # 10 ** diff exceeds any coefficient with fewer than $diff bits
            if diff > abs(self._coefficient).bit_length():
                return Decimal(0, exponent)
            return Decimal(_quo_trunc(self._coefficient, 10**diff), exponent)

        return Decimal(self._coefficient * 10**-diff, exponent)

    def truncate(self, precision: int) -> Decimal:
        """Cut digits after $precision fractional digits without rounding.

        Values already coarser than $precision are returned unchanged.

        Raises:
            ValueError: If $precision is negative.
        """
        # Raise: precision is a count of fractional digits
        if precision < 0:
            raise ValueError(f"Cannot call `truncate` because $precision ({precision}) < 0")

        if -precision > self._exponent:
            return self.rescale(-precision)
        return self

    def floor(self) -> Decimal:
        """Return the nearest integer value less than or equal to this value (exponent 0)."""
        if self._exponent >= 0:
            return self.rescale(0)
        return Decimal(self._coefficient // 10**-self._exponent, 0)

    def ceil(self) -> Decimal:
        """Return the nearest integer value greater than or equal to this value (exponent 0)."""
        if self._exponent >= 0:
            return self.rescale(0)

        # Floored quotient; any remainder means the value lies above it, whatever the sign
        quotient, remainder = divmod(self._coefficient, 10**-self._exponent)
        if remainder != 0:
            quotient += 1
        return Decimal(quotient, 0)

    def int_part(self) -> int:
        """Return the integer component, truncated toward zero."""
        return self.rescale(0)._coefficient

    # endregion

    # region Arithmetic

    def abs(self) -> Decimal:
        return Decimal(abs(self._coefficient), self._exponent)

    def neg(self) -> Decimal:
        return Decimal(-self._coefficient, self._exponent)

    def add(self, other: Decimal) -> Decimal:
        """Return self + $other at the finer of both exponents."""
        exponent = min(self._exponent, other._exponent)
        return Decimal(self.rescale(exponent)._coefficient + other.rescale(exponent)._coefficient, exponent)

    def sub(self, other: Decimal) -> Decimal:
        """Return self - $other at the finer of both exponents."""
        exponent = min(self._exponent, other._exponent)
        return Decimal(self.rescale(exponent)._coefficient - other.rescale(exponent)._coefficient, exponent)

    def mul(self, other: Decimal) -> Decimal:
        """Return self * $other; the result exponent is the sum of both exponents.

        Raises:
            ExponentOverflow: If the summed exponent overflows a signed 32-bit integer.
        """
        exponent = _check_exponent(self._exponent + other._exponent, "mul")
        return Decimal(self._coefficient * other._coefficient, exponent)

    def div(self, other: Decimal, precision: int = DIVISION_PRECISION) -> Decimal:
        """Return self / $other with $precision fractional digits.

        A quotient that does not divide exactly is rounded half away from zero:

            2 / 3         -> 0.6666666666666667
            20000 / 3     -> 6666.6666666666666667
            100.0 / 1.08  -> 92.5925925925925926

        Args:
            other: Divisor.
            precision: Fractional digits of the result; may be negative.

        Raises:
            DivisionByZero: If $other is zero.
            ExponentOverflow: If an intermediate exponent overflows.
        """
        quotient, remainder = self.quo_rem(other, precision)

        # Compare 2 * |r| * 10^precision with |other| instead of r * 10^precision with |other| / 2
        doubled_remainder = Decimal(abs(remainder._coefficient) * 2, _check_exponent(remainder._exponent + precision, "div"))
        if doubled_remainder.cmp(other.abs()) < 0:
            return quotient

        last_place = Decimal(1, -precision)
        if self.sign() * other.sign() < 0:
            return quotient.sub(last_place)
        return quotient.add(last_place)

    def quo_rem(self, other: Decimal, precision: int) -> tuple[Decimal, Decimal]:
        """Divide with remainder.

        Returns `(q, r)` such that `self == other * q + r`, where `q` is an integer multiple of
        `10 ** -precision` (truncated toward zero) and `r` carries the sign of self with
        `|r| < |other| * 10 ** -precision`.

        Raises:
            DivisionByZero: If $other is zero.
            ExponentOverflow: If an intermediate exponent overflows.
        """
        # Raise: division by zero is a programming error, not a reportable condition
        if other._coefficient == 0:
            raise DivisionByZero(f"Cannot call `quo_rem` because divisor $other ({other}) is zero")

        scale = _check_exponent(-precision, "quo_rem")
        shift = _check_exponent(self._exponent - other._exponent - scale, "quo_rem")

        # self = a * 10^ea, other = b * 10^eb
        if shift < 0:
            # dividend = a, divisor = b * 10^(scale + eb - ea)
            dividend = self._coefficient
            divisor = other._coefficient * 10**-shift
            remainder_exponent = self._exponent
        else:
            # dividend = a * 10^(ea - eb - scale), divisor = b
            dividend = self._coefficient * 10**shift
            divisor = other._coefficient
            remainder_exponent = scale + other._exponent

        quotient = _quo_trunc(dividend, divisor)
        remainder = dividend - quotient * divisor
        return Decimal(quotient, scale), Decimal(remainder, remainder_exponent)

    def mod(self, other: Decimal) -> Decimal:
        """Return the remainder of the truncated division self / $other (sign of self).

        Raises:
            DivisionByZero: If $other is zero.
        """
        return self.quo_rem(other, 0)[1]

    def pow(self, exponent: int) -> Decimal:
        """Raise to an integer power using exponentiation by squaring.

        Negative powers divide by self, so each division step carries `DIVISION_PRECISION`
        fractional digits.

        Raises:
            TypeError: If $exponent is not int.
            DivisionByZero: If self is zero and $exponent is negative.
        """
        # Raise: only integer powers are supported
        if not isinstance(exponent, int) or isinstance(exponent, bool):
            raise TypeError(f"Cannot call `pow` because $exponent is not int (got type '{type(exponent).__name__}')")

        if exponent == 0:
            return Decimal(1, 0)

        half = exponent // 2 if exponent > 0 else -(-exponent // 2)
        partial = self.pow(half)
        squared = partial.mul(partial)
        if exponent % 2 == 0:
            return squared
        if exponent > 0:
            return squared.mul(self)
        return squared.div(self)

    # endregion

    # region Comparison

    def cmp(self, other: Decimal) -> int:
        """Compare numeric values: -1 if self < $other, 0 if equal, +1 if self > $other."""
        if self._exponent == other._exponent:
            left, right = self._coefficient, other._coefficient
        elif self.sign() != other.sign():
            left, right = self.sign(), other.sign()
        else:
            exponent = min(self._exponent, other._exponent)
            left, right = self.rescale(exponent)._coefficient, other.rescale(exponent)._coefficient
        return (left > right) - (left < right)

    def equal(self, other: Decimal) -> bool:
        """Return True if both represent the same number, whatever their stored precision."""
        return self.cmp(other) == 0

    # endregion

    # region Conversion

    def to_fraction(self) -> Fraction:
        if self._exponent >= 0:
            return Fraction(self._coefficient * 10**self._exponent)
        return Fraction(self._coefficient, 10**-self._exponent)

    def to_float(self) -> float:
        """Return the nearest float; for display and interop only."""
        return float(self.to_fraction())

    def to_std_decimal(self) -> StdDecimal:
        """Return an exactly equal standard library `decimal.Decimal` with the same exponent."""
        digits = tuple(int(digit) for digit in _digits_of(self._coefficient))
        return StdDecimal((1 if self._coefficient < 0 else 0, digits, self._exponent))

    def to_json(self) -> str:
        """Return a JSON string literal; never a bare JSON number, which would go through float."""
        return json.dumps(str(self))

    @classmethod
    def from_json(cls, data: str | bytes) -> Decimal:
        """Parse a JSON string literal produced by `to_json`.

        Raises:
            InvalidDecimalFormat: If $data is not a JSON string holding a valid decimal.
        """
        try:
            value = json.loads(data)
        except json.JSONDecodeError as e:
            raise InvalidDecimalFormat(f"Cannot call `Decimal.from_json` because $data ({data!r}) is not valid JSON") from e

        # Raise: decimals travel as JSON strings
        if not isinstance(value, str):
            raise InvalidDecimalFormat(f"Cannot call `Decimal.from_json` because $data ({data!r}) is not a JSON string")

        return cls.parse(value)

    def to_bytes(self) -> bytes:
        """Encode as a 4-byte big-endian signed exponent followed by the coefficient.

        The coefficient is one header byte (`BINARY_VERSION << 1 | sign`) and the big-endian
        bytes of its magnitude (none for zero).
        """
        magnitude = abs(self._coefficient)
        header = (BINARY_VERSION << 1) | (1 if self._coefficient < 0 else 0)
        return struct.pack(">i", self._exponent) + bytes([header]) + magnitude.to_bytes((magnitude.bit_length() + 7) // 8, "big")

    @classmethod
    def from_bytes(cls, data: bytes) -> Decimal:
        """Decode the binary form produced by `to_bytes`.

        Raises:
            InvalidDecimalFormat: If $data is truncated or has an unknown version.
        """
        # Raise: need 4 exponent bytes and the coefficient header byte
        if len(data) < 5:
            raise InvalidDecimalFormat(f"Cannot call `Decimal.from_bytes` because $data has {len(data)} byte(s), expected at least 5")

        (exponent,) = struct.unpack(">i", data[:4])
        header = data[4]

        # Raise: only the known encoding version can be decoded
        if header >> 1 != BINARY_VERSION:
            raise InvalidDecimalFormat(f"Cannot call `Decimal.from_bytes` because encoding version ({header >> 1}) is not supported")

        magnitude = int.from_bytes(data[5:], "big")
        return cls(-magnitude if header & 1 else magnitude, exponent)

    # endregion

    # region Operators

    @staticmethod
    def _coerce(value: object) -> Decimal | None:
        if isinstance(value, Decimal):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return Decimal(value, 0)
        return None

    def __add__(self, other: object) -> Decimal:
        other_decimal = self._coerce(other)
        if other_decimal is None:
            return NotImplemented
        return self.add(other_decimal)

    def __radd__(self, other: object) -> Decimal:
        return self.__add__(other)

    def __sub__(self, other: object) -> Decimal:
        other_decimal = self._coerce(other)
        if other_decimal is None:
            return NotImplemented
        return self.sub(other_decimal)

    def __rsub__(self, other: object) -> Decimal:
        other_decimal = self._coerce(other)
        if other_decimal is None:
            return NotImplemented
        return other_decimal.sub(self)

    def __mul__(self, other: object) -> Decimal:
        other_decimal = self._coerce(other)
        if other_decimal is None:
            return NotImplemented
        return self.mul(other_decimal)

    def __rmul__(self, other: object) -> Decimal:
        return self.__mul__(other)

    def __truediv__(self, other: object) -> Decimal:
        other_decimal = self._coerce(other)
        if other_decimal is None:
            return NotImplemented
        return self.div(other_decimal)

    def __rtruediv__(self, other: object) -> Decimal:
        other_decimal = self._coerce(other)
        if other_decimal is None:
            return NotImplemented
        return other_decimal.div(self)

    def __mod__(self, other: object) -> Decimal:
        other_decimal = self._coerce(other)
        if other_decimal is None:
            return NotImplemented
        return self.mod(other_decimal)

    def __pow__(self, exponent: int) -> Decimal:
        if not isinstance(exponent, int) or isinstance(exponent, bool):
            return NotImplemented
        return self.pow(exponent)

    def __neg__(self) -> Decimal:
        return self.neg()

    def __pos__(self) -> Decimal:
        return self

    def __abs__(self) -> Decimal:
        return self.abs()

    def __eq__(self, other: object) -> bool:
        """Check numeric equality with another Decimal or an int."""
        other_decimal = self._coerce(other)
        if other_decimal is None:
            return False
        return self.equal(other_decimal)

    def __lt__(self, other: object) -> bool:
        other_decimal = self._coerce(other)
        if other_decimal is None:
            return NotImplemented
        return self.cmp(other_decimal) < 0

    def __le__(self, other: object) -> bool:
        other_decimal = self._coerce(other)
        if other_decimal is None:
            return NotImplemented
        return self.cmp(other_decimal) <= 0

    def __gt__(self, other: object) -> bool:
        other_decimal = self._coerce(other)
        if other_decimal is None:
            return NotImplemented
        return self.cmp(other_decimal) > 0

    def __ge__(self, other: object) -> bool:
        other_decimal = self._coerce(other)
        if other_decimal is None:
            return NotImplemented
        return self.cmp(other_decimal) >= 0

    def __hash__(self) -> int:
        """Hash of the numeric value, so equal values (and equal ints) hash alike."""
        return hash(self.to_fraction())

    def __bool__(self) -> bool:
        return self._coefficient != 0

    def __float__(self) -> float:
        return self.to_float()

    def __int__(self) -> int:
        return self.int_part()

    # endregion

    # region String representations

    def __str__(self) -> str:
        """Return the canonical text form, keeping the stored scale (e.g. '120.00')."""
        sign = "-" if self._coefficient < 0 else ""
        if self._exponent >= 0:
            return f"{sign}{_digits_of(self.rescale(0)._coefficient)}.0"

        digits = _digits_of(self._coefficient)
        scale = -self._exponent
        if len(digits) > scale:
            integer_part, fractional_part = digits[:-scale], digits[-scale:]
        else:
            integer_part, fractional_part = "0", digits.rjust(scale, "0")
        return f"{sign}{integer_part}.{fractional_part}"

    def __repr__(self) -> str:
        """Return string like "Decimal('120.00')"."""
        return f"{self.__class__.__name__}('{self}')"

    # endregion
