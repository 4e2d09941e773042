"""
Fixed-precision decimal money.

Usage:
    >>> from decimal_money import DecimalMoney
    >>> str(DecimalMoney(1).divide(3))
    '0.3333'
"""

from .domain import (
    DecimalMoney,
    DivisionByZeroError,
    InvalidArgumentError,
    MoneyError,
    MoneyLike,
)

__all__ = [
    "DecimalMoney",
    "MoneyLike",
    "MoneyError",
    "InvalidArgumentError",
    "DivisionByZeroError",
]
