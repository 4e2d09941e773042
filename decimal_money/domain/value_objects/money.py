"""
DecimalMoney value object for financial amounts.

Immutable fixed-precision money: every operation returns a new instance and
all arithmetic goes through the decimal engine, truncated to ``PRECISION``
fractional digits.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, ClassVar, Self, TypeAlias, Union

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from decimal_money.domain.exceptions import InvalidArgumentError
from decimal_money.infrastructure.decimal_engine import get_decimal_engine
from decimal_money.utils.numeric import format_fixed

MoneyLike: TypeAlias = Union["DecimalMoney", Decimal, int, float, str]


@dataclass(frozen=True)
class DecimalMoney:
    """
    Immutable money amount with exactly ``PRECISION`` fractional digits.

    Attributes:
        value: Normalized decimal string, e.g. ``"9.8900"`` or ``"-0.0001"``.

    Raises:
        InvalidArgumentError: Input is neither numeric nor a DecimalMoney.
    """

    PRECISION: ClassVar[int] = 4

    value: str

    def __init__(self, value: MoneyLike) -> None:
        """
        Initialize money from a number, numeric string or another instance.

        Args:
            value: Another DecimalMoney is copied as is; anything else is
                formatted to ``PRECISION`` digits, rounding half up.
        """
        if isinstance(value, DecimalMoney):
            normalized = value.value
        else:
            normalized = format_fixed(value, self.PRECISION)

        # Use __setattr__ because of frozen=True
        object.__setattr__(self, "value", normalized)

    @classmethod
    def create(cls, value: MoneyLike) -> Self:
        return cls(value)

    @classmethod
    def from_minor_units(cls, units: int) -> Self:
        """
        Create money from minor units (cents): ``989`` becomes ``9.8900``.

        Raises:
            InvalidArgumentError: ``units`` is not an integer.
        """
        if isinstance(units, bool) or not isinstance(units, int):
            raise InvalidArgumentError(
                f"Minor units must be an integer, got {units!r}"
            )
        return cls(Decimal(units).scaleb(-2))

    def add(self, other: MoneyLike) -> Self:
        """
        Add and return a new instance.

        Like every arithmetic operation, ``other`` is first normalized as
        by the constructor, which rounds half up, so
        ``DecimalMoney(1).add("0.00005")`` is ``"1.0001"``. Only the result
        itself is truncated.
        """
        return self._combine(get_decimal_engine().add, other)

    def subtract(self, other: MoneyLike) -> Self:
        """Subtract and return a new instance."""
        return self._combine(get_decimal_engine().subtract, other)

    def multiply(self, other: MoneyLike) -> Self:
        """Multiply and return a new instance."""
        return self._combine(get_decimal_engine().multiply, other)

    def divide(self, other: MoneyLike) -> Self:
        """
        Divide and return a new instance.

        Raises:
            DivisionByZeroError: ``other`` normalizes to zero.
        """
        return self._combine(get_decimal_engine().divide, other)

    def is_zero(self) -> bool:
        return self._compare_to_zero() == 0

    def is_positive(self) -> bool:
        return self._compare_to_zero() > 0

    def is_negative(self) -> bool:
        return self._compare_to_zero() < 0

    def is_zero_or_positive(self) -> bool:
        return self.is_zero() or self.is_positive()

    def is_zero_or_negative(self) -> bool:
        return self.is_zero() or self.is_negative()

    def to_positive(self) -> Self:
        # zero is not positive, so it takes the multiply path as well
        if self.is_positive():
            return self.__class__(self)

        return self.multiply(-1)

    def to_negative(self) -> Self:
        if self.is_negative():
            return self.__class__(self)

        return self.multiply(-1)

    def abs(self) -> Self:
        return self.to_positive()

    def greater_than(self, other: "DecimalMoney") -> bool:
        if not isinstance(other, DecimalMoney):
            raise InvalidArgumentError(
                f"Can only compare with DecimalMoney, got "
                f"{type(other).__name__}"
            )
        return self._compare(other) > 0

    def to_double(self, precision: int = PRECISION) -> float:
        """
        Convert to float, rounding half up to ``precision`` digits first.

        Crosses into binary floating point: the result is approximate.
        """
        return float(format_fixed(self.value, precision))

    def to_minor_units(self) -> int:
        """
        Convert to minor units (cents): ``9.89`` becomes ``989``.

        Multiplies as float and rounds to the nearest integer, so only
        amounts near the limits of double precision can be off by a unit.
        """
        return round(float(self.value) * 100)

    def _combine(self, operation: Any, other: MoneyLike) -> Self:
        # operand rounds half up on construction; the engine truncates
        operand = DecimalMoney(other)
        return self.__class__(
            operation(self.value, operand.value, self.PRECISION)
        )

    def _compare(self, other: "DecimalMoney") -> int:
        return get_decimal_engine().compare(
            self.value, other.value, self.PRECISION
        )

    def _compare_to_zero(self) -> int:
        return get_decimal_engine().compare(self.value, "0", self.PRECISION)

    def __add__(self, other: Any) -> Self:
        if not _is_operand(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Any) -> Self:
        if not _is_operand(other):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> Self:
        if not _is_operand(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: Any) -> Self:
        if not _is_operand(other):
            return NotImplemented
        return self.__class__(other).subtract(self)

    def __mul__(self, other: Any) -> Self:
        if not _is_operand(other):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: Any) -> Self:
        if not _is_operand(other):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: Any) -> Self:
        if not _is_operand(other):
            return NotImplemented
        return self.divide(other)

    def __neg__(self) -> Self:
        return self.multiply(-1)

    def __abs__(self) -> Self:
        return self.abs()

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, DecimalMoney):
            return NotImplemented
        return self._compare(other) < 0

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, DecimalMoney):
            return NotImplemented
        return self._compare(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, DecimalMoney):
            return NotImplemented
        return self._compare(other) > 0

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, DecimalMoney):
            return NotImplemented
        return self._compare(other) >= 0

    def __float__(self) -> float:
        return self.to_double()

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self.value}')"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Let pydantic models declare ``DecimalMoney`` fields."""
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str
            ),
        )

    @classmethod
    def _validate(cls, value: Any) -> Self:
        if isinstance(value, cls):
            return value
        # InvalidArgumentError is a ValueError, pydantic reports it as such
        return cls(value)


def _is_operand(value: Any) -> bool:
    return isinstance(
        value, (DecimalMoney, Decimal, int, float, str)
    ) and not isinstance(value, bool)
