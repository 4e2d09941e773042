from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import TypeAlias

from decimal_money.domain.exceptions import InvalidArgumentError

# Anything that can be turned into a Decimal without losing the intent
DecimalLike: TypeAlias = Decimal | int | float | str


def as_decimal(value: DecimalLike) -> Decimal:
    """
    Convert a numeric value or numeric string to a finite Decimal.

    Floats go through ``str`` so that ``0.1`` becomes ``Decimal("0.1")``
    instead of its binary expansion.

    Raises:
        InvalidArgumentError: Value is not numeric, is a bool, or is
            NaN / infinite.
    """
    if isinstance(value, bool) or not isinstance(
        value, (Decimal, int, float, str)
    ):
        raise InvalidArgumentError(
            f"Expected a number or numeric string, got {type(value).__name__}: "
            f"{value!r}"
        )

    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except InvalidOperation as e:
            raise InvalidArgumentError(
                f"Invalid numeric value: {value!r}"
            ) from e

    if not result.is_finite():
        raise InvalidArgumentError(f"Value must be finite: {value!r}")

    return result


def quantum(precision: int) -> Decimal:
    """Smallest step for ``precision`` fractional digits, e.g. 4 -> 0.0001."""
    if precision < 0:
        raise InvalidArgumentError(
            f"Precision cannot be negative: {precision}"
        )
    return Decimal(1).scaleb(-precision)


def to_fixed_point(value: Decimal) -> str:
    """Render without exponent; negative zero loses its sign."""
    if value.is_zero():
        value = value.copy_abs()
    return format(value, "f")


def format_fixed(value: DecimalLike, precision: int) -> str:
    """
    Format a number with exactly ``precision`` fractional digits.

    Rounds half away from zero, uses ``.`` as separator and no grouping,
    e.g. ``format_fixed(9.89, 4) == "9.8900"``.
    """
    decimal_value = as_decimal(value)
    step = quantum(precision)
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the fraction
        ctx.prec = max(ctx.prec, decimal_value.adjusted() + precision + 2)
        rounded = decimal_value.quantize(step, rounding=ROUND_HALF_UP)
    return to_fixed_point(rounded)
