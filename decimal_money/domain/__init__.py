"""
Domain layer containing the money value object and its errors.

This layer is framework-agnostic and contains core business logic.
"""

from .exceptions import DivisionByZeroError, InvalidArgumentError, MoneyError
from .value_objects.money import DecimalMoney, MoneyLike

__all__ = [
    # Value Objects
    "DecimalMoney",
    "MoneyLike",
    # Errors
    "MoneyError",
    "InvalidArgumentError",
    "DivisionByZeroError",
]
