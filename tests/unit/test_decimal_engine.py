"""
Tests for the decimal engine.

Checks:
1. Exact arithmetic truncated (not rounded) to the requested precision
2. Division by zero
3. Three-way comparison at precision
4. Isolation from the global decimal context and operand-sized precision
"""

import decimal
from decimal import Decimal

import pytest

from decimal_money.domain.exceptions import (
    DivisionByZeroError,
    InvalidArgumentError,
)
from decimal_money.infrastructure.decimal_engine import (
    DEFAULT_MAX_DIGITS,
    DecimalEngine,
    get_decimal_engine,
)


@pytest.fixture
def engine() -> DecimalEngine:
    return DecimalEngine()


class TestArithmetic:
    def test_add(self, engine: DecimalEngine) -> None:
        assert engine.add("1.0000", "2.5000", 4) == "3.5000"

    def test_subtract_below_zero(self, engine: DecimalEngine) -> None:
        assert engine.subtract("1", "2.5", 4) == "-1.5000"

    def test_multiply(self, engine: DecimalEngine) -> None:
        assert engine.multiply("2", "3", 4) == "6.0000"
        assert engine.multiply("0.3333", "3", 4) == "0.9999"

    def test_multiply_truncates(self, engine: DecimalEngine) -> None:
        assert engine.multiply("1.0001", "1.0001", 4) == "1.0002"
        assert engine.multiply("1.23456", "1", 4) == "1.2345"

    def test_truncation_is_toward_zero(self, engine: DecimalEngine) -> None:
        assert engine.multiply("-1.00005", "1", 4) == "-1.0000"

    def test_accepts_decimal_operands(self, engine: DecimalEngine) -> None:
        assert engine.add(Decimal("0.1"), Decimal("0.2"), 4) == "0.3000"

    def test_negative_zero_result_is_unsigned(
        self, engine: DecimalEngine
    ) -> None:
        assert engine.multiply("0.0000", "-1", 4) == "0.0000"

    def test_invalid_operand(self, engine: DecimalEngine) -> None:
        with pytest.raises(InvalidArgumentError):
            engine.add("abc", "1", 4)

    def test_negative_precision(self, engine: DecimalEngine) -> None:
        with pytest.raises(InvalidArgumentError):
            engine.add("1", "1", -1)


class TestDivide:
    def test_one_third_is_truncated(self, engine: DecimalEngine) -> None:
        assert engine.divide("1", "3", 4) == "0.3333"

    def test_two_thirds_is_not_rounded_up(self, engine: DecimalEngine) -> None:
        assert engine.divide("2", "3", 4) == "0.6666"

    def test_negative_quotient_truncates_toward_zero(
        self, engine: DecimalEngine
    ) -> None:
        assert engine.divide("-1", "3", 4) == "-0.3333"

    def test_quotient_with_extra_digits(self, engine: DecimalEngine) -> None:
        assert engine.divide("0.123456", "1", 4) == "0.1234"

    def test_other_precision(self, engine: DecimalEngine) -> None:
        assert engine.divide("10", "4", 2) == "2.50"
        assert engine.divide("7", "2", 0) == "3"

    @pytest.mark.parametrize("divisor", ["0", "0.0000", "-0"])
    def test_division_by_zero(self, engine: DecimalEngine, divisor) -> None:
        with pytest.raises(DivisionByZeroError):
            engine.divide("10", divisor, 4)

    def test_division_by_zero_is_zero_division_error(
        self, engine: DecimalEngine
    ) -> None:
        with pytest.raises(ZeroDivisionError):
            engine.divide("10", "0", 4)


class TestCompare:
    def test_greater(self, engine: DecimalEngine) -> None:
        assert engine.compare("5.0001", "5.0000", 4) == 1

    def test_less(self, engine: DecimalEngine) -> None:
        assert engine.compare("-1", "0", 4) == -1

    def test_equal_after_truncation(self, engine: DecimalEngine) -> None:
        assert engine.compare("1.00001", "1.00009", 4) == 0

    def test_equal_representations(self, engine: DecimalEngine) -> None:
        assert engine.compare("1", "1.0000", 4) == 0

    def test_invalid_operand(self, engine: DecimalEngine) -> None:
        with pytest.raises(InvalidArgumentError):
            engine.compare("abc", "1", 4)


class TestEngineContext:
    def test_global_context_untouched(self, engine: DecimalEngine) -> None:
        context = decimal.getcontext()
        prec, rounding = context.prec, context.rounding

        engine.divide("1", "3", 4)
        engine.multiply("1.23456", "7", 4)

        assert decimal.getcontext().prec == prec
        assert decimal.getcontext().rounding == rounding

    def test_context_grows_past_max_digits(self) -> None:
        engine = DecimalEngine(max_digits=28)
        assert engine.multiply("9" * 20, "9" * 20, 4) == (
            str(int("9" * 20) ** 2) + ".0000"
        )
        assert engine.divide("1" + "0" * 40, "3", 4) == "3" * 40 + ".3333"
        assert engine.add("1" + "0" * 40, "0.0001", 4) == (
            "1" + "0" * 40 + ".0001"
        )

    def test_compare_past_max_digits(self) -> None:
        engine = DecimalEngine(max_digits=28)
        big = "1" + "0" * 120
        assert engine.compare(big + ".0001", big, 4) == 1
        assert engine.compare(big, "0", 4) == 1

    def test_large_values_within_default_capacity(
        self, engine: DecimalEngine
    ) -> None:
        assert engine.multiply("9" * 20, "9" * 20, 4) == (
            str(int("9" * 20) ** 2) + ".0000"
        )

    def test_default_engine_is_cached(self) -> None:
        default = get_decimal_engine()
        assert default is get_decimal_engine()
        assert isinstance(default, DecimalEngine)
        assert default.max_digits == DEFAULT_MAX_DIGITS
