"""
Decimal engine backed by the standard ``decimal`` module.

Every operation runs inside a private ``decimal.Context`` so the global
context of the host application is never touched.
"""

import logging
import operator
from decimal import (
    ROUND_DOWN,
    Context,
    Decimal,
    InvalidOperation,
    localcontext,
)
from functools import lru_cache
from typing import Callable

import structlog

from decimal_money.config import get_config
from decimal_money.domain.exceptions import (
    DivisionByZeroError,
    InvalidArgumentError,
)
from decimal_money.utils.numeric import as_decimal, quantum, to_fixed_point

from .interfaces import DecimalString, IDecimalEngine, Ordering

# stdlib-backed so an unconfigured host gets the logging defaults
logger = structlog.wrap_logger(
    logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger
)

DEFAULT_MAX_DIGITS = 100


class DecimalEngine:
    """
    Truncating decimal arithmetic on decimal strings.

    Args:
        max_digits: Minimum significant digits of the working context.
    """

    def __init__(self, max_digits: int = DEFAULT_MAX_DIGITS) -> None:
        self.max_digits = max_digits
        self.context = Context(
            prec=max_digits,
            rounding=ROUND_DOWN,
            traps=[InvalidOperation],
        )

    def add(
        self,
        left: DecimalString | Decimal,
        right: DecimalString | Decimal,
        precision: int,
    ) -> DecimalString:
        return self._apply("add", operator.add, left, right, precision)

    def subtract(
        self,
        left: DecimalString | Decimal,
        right: DecimalString | Decimal,
        precision: int,
    ) -> DecimalString:
        return self._apply("subtract", operator.sub, left, right, precision)

    def multiply(
        self,
        left: DecimalString | Decimal,
        right: DecimalString | Decimal,
        precision: int,
    ) -> DecimalString:
        return self._apply("multiply", operator.mul, left, right, precision)

    def divide(
        self,
        left: DecimalString | Decimal,
        right: DecimalString | Decimal,
        precision: int,
    ) -> DecimalString:
        """
        Divide ``left`` by ``right``, truncating the quotient.

        Raises:
            DivisionByZeroError: ``right`` is zero.
        """
        divisor = self._parse(right)
        if divisor.is_zero():
            logger.warning(
                "Division by zero", dividend=str(left), divisor=str(right)
            )
            raise DivisionByZeroError(f"Cannot divide {left} by zero")

        def truncated_division(dividend: Decimal, by: Decimal) -> Decimal:
            # integer division of the scaled dividend is exact truncation
            scaled = dividend.scaleb(precision) // by
            return scaled.scaleb(-precision)

        return self._apply(
            "divide", truncated_division, left, divisor, precision
        )

    def compare(
        self,
        left: DecimalString | Decimal,
        right: DecimalString | Decimal,
        precision: int,
    ) -> Ordering:
        """Three-way compare of both operands truncated to ``precision``."""
        left_value = self._truncate(self._parse(left), precision)
        right_value = self._truncate(self._parse(right), precision)
        if left_value < right_value:
            return -1
        if left_value > right_value:
            return 1
        return 0

    def _apply(
        self,
        operation: str,
        func: Callable[[Decimal, Decimal], Decimal],
        left: DecimalString | Decimal,
        right: DecimalString | Decimal,
        precision: int,
    ) -> DecimalString:
        left_value = self._parse(left)
        right_value = self._parse(right)
        context = self._context_for(precision, left_value, right_value)

        try:
            with localcontext(context):
                raw = func(left_value, right_value)
        except InvalidOperation as e:
            raise InvalidArgumentError(
                f"Cannot {operation} {left} and {right}"
            ) from e

        return to_fixed_point(self._truncate(raw, precision))

    def _context_for(self, precision: int, *values: Decimal) -> Context:
        """
        Context wide enough for the exact result of combining ``values``.

        Sums, products and scaled integer quotients of the operands fit in
        their combined digit count, so truncation to ``precision`` is the
        only loss. ``max_digits`` is the lower bound.
        """
        needed = 2 * (precision + 1) + sum(
            len(value.as_tuple().digits) + abs(value.adjusted())
            for value in values
        )
        if needed <= self.max_digits:
            return self.context

        context = self.context.copy()
        context.prec = needed
        return context

    def _truncate(self, value: Decimal, precision: int) -> Decimal:
        step = quantum(precision)
        context = self._context_for(precision, value)
        try:
            return value.quantize(step, context=context)
        except InvalidOperation as e:
            raise InvalidArgumentError(
                f"Cannot truncate {value} to {precision} digits"
            ) from e

    @staticmethod
    def _parse(value: DecimalString | Decimal) -> Decimal:
        return as_decimal(value)


@lru_cache
def get_decimal_engine() -> IDecimalEngine:
    config = get_config()
    return DecimalEngine(max_digits=config.engine.max_digits)
