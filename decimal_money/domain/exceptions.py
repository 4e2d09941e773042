"""
Errors raised by the money domain.

Both concrete errors also derive from the matching builtin exception, so
callers that already catch ``ValueError`` / ``TypeError`` or
``ZeroDivisionError`` keep working.
"""


class MoneyError(Exception):
    """Base class for all money errors."""


class InvalidArgumentError(MoneyError, TypeError, ValueError):
    """Input is neither numeric nor a DecimalMoney."""


class DivisionByZeroError(MoneyError, ZeroDivisionError):
    """Divisor normalizes to zero."""
