from __future__ import annotations

from enum import Enum

from suite_money.domain.monetary.fixed_decimal import Decimal


class RoundingMode(Enum):
    """Direction used when snapping an amount to a rounding unit.

    Members:
        DOWN: Previous unit multiple (1.49 with unit 0.1 -> 1.4).
        UP: Next unit multiple (1.41 with unit 0.1 -> 1.5).
        TO_NEAREST: Nearest unit multiple, ties away from zero (1.45 with unit 0.1 -> 1.5).
    """

    DOWN = "down"
    UP = "up"
    TO_NEAREST = "to_nearest"


def round_nearest(x: Decimal, precision: int) -> Decimal:
    """Round $x to $precision fractional digits, half away from zero (not banker's rounding).

    A negative $precision rounds the integer part to the nearest `10 ** -precision`.

    Examples:
        5.45 with precision 1 -> 5.5
        -0.105 with precision 2 -> -0.11
        545 with precision -1 -> 550

    Args:
        x: Value to round.
        precision: Number of fractional digits to keep.

    Returns:
        Decimal: Rounded value with exponent `-precision`.
    """
    # Keep one extra digit, then push it by 5 away from zero
    coefficient = x.rescale(-precision - 1).coefficient
    coefficient += 5 if coefficient >= 0 else -5

    # Drop the extra digit: floor for positive values, ceiling for negative ones
    quotient, remainder = divmod(coefficient, 10)
    if quotient < 0 and remainder != 0:
        quotient += 1

    return Decimal(quotient, -precision)


def round_up(x: Decimal, precision: int) -> Decimal:
    """Round $x up (toward positive infinity) to $precision fractional digits.

    Values already exact at $precision are returned unchanged, including their scale.

    Examples:
        3.1416 with precision 3 -> 3.142
        3.1416 with precision 2 -> 3.15
    """
    if round_nearest(x, precision) == x:
        return x

    half_unit = Decimal(5, -precision - 1)
    return round_nearest(x.add(half_unit), precision)


def round_down(x: Decimal, precision: int) -> Decimal:
    """Round $x down (toward negative infinity) to $precision fractional digits.

    Values already exact at $precision are returned unchanged, including their scale.

    Examples:
        3.1416 with precision 3 -> 3.141
        1.88 with precision 0 -> 1
    """
    if round_nearest(x, precision) == x:
        return x

    half_unit = Decimal(-5, -precision - 1)
    return round_nearest(x.add(half_unit), precision)


def round_to_unit(x: Decimal, unit: Decimal) -> Decimal:
    """Snap $x to the nearest multiple of $unit; ties go away from zero.

    The decision is made on the exact remainder of $x, so only exact midpoints move away from
    zero. The result carries the scale of $unit.

    Examples:
        3.1216 with unit 0.05 -> 3.10
        3.1416 with unit 0.05 -> 3.15
        -0.13 with unit 0.05 -> -0.15
        0.245 with unit 0.50 -> 0.00

    Args:
        x: Value to round.
        unit: Positive rounding increment (e.g. 0.05).

    Returns:
        Decimal: Nearest multiple of $unit.

    Raises:
        ValueError: If $unit is not positive.
    """
    _check_unit(unit, "round_to_unit")

    # Remainder carries the sign of $x, so `x - remainder` is the multiple toward zero
    remainder = x.mod(unit)
    rounded = x.sub(remainder)

    # 2 * |r| >= unit means $x lies at or beyond the midpoint, away from zero
    doubled_remainder = Decimal(abs(remainder.coefficient) * 2, remainder.exponent)
    if doubled_remainder.cmp(unit) >= 0:
        rounded = rounded.add(unit) if x.sign() > 0 else rounded.sub(unit)

    return rounded.rescale(unit.exponent)


def round_up_to_unit(x: Decimal, unit: Decimal) -> Decimal:
    """Snap $x to the next multiple of $unit toward positive infinity.

    Raises:
        ValueError: If $unit is not positive.
    """
    _check_unit(unit, "round_up_to_unit")

    rounded = round_up(x, -unit.exponent)
    remainder = rounded.mod(unit)
    if remainder.sign() > 0:
        rounded = rounded.add(unit.sub(remainder))
    else:
        rounded = rounded.sub(remainder)
    return rounded.rescale(unit.exponent)


def round_down_to_unit(x: Decimal, unit: Decimal) -> Decimal:
    """Snap $x to the previous multiple of $unit toward negative infinity.

    Raises:
        ValueError: If $unit is not positive.
    """
    _check_unit(unit, "round_down_to_unit")

    rounded = round_down(x, -unit.exponent)
    remainder = rounded.mod(unit)
    if remainder.sign() < 0:
        rounded = rounded.sub(unit.add(remainder))
    else:
        rounded = rounded.sub(remainder)
    return rounded.rescale(unit.exponent)


def _check_unit(unit: Decimal, operation: str) -> None:
    # Raise: rounding needs a positive increment to snap to
    if unit.sign() <= 0:
        raise ValueError(f"Cannot call `{operation}` because $unit ({unit}) is not positive")
