from decimal import Decimal
from typing import Literal, Protocol, TypeAlias

# Decimal number as text, e.g. "9.8900" or "-0.0001"
DecimalString: TypeAlias = str

Ordering: TypeAlias = Literal[-1, 0, 1]


class IDecimalEngine(Protocol):
    """
    Exact decimal arithmetic with an explicit output precision.

    Arithmetic results are truncated toward zero to ``precision``
    fractional digits, never rounded to nearest.
    """

    def add(
        self,
        left: DecimalString | Decimal,
        right: DecimalString | Decimal,
        precision: int,
    ) -> DecimalString: ...

    def subtract(
        self,
        left: DecimalString | Decimal,
        right: DecimalString | Decimal,
        precision: int,
    ) -> DecimalString: ...

    def multiply(
        self,
        left: DecimalString | Decimal,
        right: DecimalString | Decimal,
        precision: int,
    ) -> DecimalString: ...

    def divide(
        self,
        left: DecimalString | Decimal,
        right: DecimalString | Decimal,
        precision: int,
    ) -> DecimalString: ...

    def compare(
        self,
        left: DecimalString | Decimal,
        right: DecimalString | Decimal,
        precision: int,
    ) -> Ordering: ...
