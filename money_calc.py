"""
Money calculator script.

Usage:
    python money_calc.py LEFT OPERATION [RIGHT] [--json]

Examples:
    python money_calc.py 10 divide 3          # 3.3333
    python money_calc.py 989 from-minor-units # 9.8900
"""

import argparse
import sys
from typing import Any, Callable

import orjson
from structlog import get_logger

from decimal_money import DecimalMoney, MoneyError
from decimal_money.config import get_config
from decimal_money.infrastructure.logger import (
    bind_context,
    clear_context,
    setup_logging,
)

# operation name -> (needs right operand, handler)
OPERATIONS: dict[str, tuple[bool, Callable[..., Any]]] = {
    "add": (True, lambda left, right: DecimalMoney(left).add(right)),
    "subtract": (
        True,
        lambda left, right: DecimalMoney(left).subtract(right),
    ),
    "multiply": (
        True,
        lambda left, right: DecimalMoney(left).multiply(right),
    ),
    "divide": (True, lambda left, right: DecimalMoney(left).divide(right)),
    "greater-than": (
        True,
        lambda left, right: DecimalMoney(left).greater_than(
            DecimalMoney(right)
        ),
    ),
    "to-positive": (False, lambda left: DecimalMoney(left).to_positive()),
    "to-negative": (False, lambda left: DecimalMoney(left).to_negative()),
    "abs": (False, lambda left: DecimalMoney(left).abs()),
    "to-minor-units": (
        False,
        lambda left: DecimalMoney(left).to_minor_units(),
    ),
    "from-minor-units": (
        False,
        lambda left: DecimalMoney.from_minor_units(int(left)),
    ),
}


def setup_arg_parser() -> argparse.ArgumentParser:
    """Setup command line argument parser."""
    parser = argparse.ArgumentParser(
        description="Evaluate a fixed-precision money operation"
    )
    parser.add_argument("left", help="Left operand, e.g. 10 or 9.89")
    parser.add_argument(
        "operation",
        choices=sorted(OPERATIONS),
        help="Operation to apply",
    )
    parser.add_argument(
        "right",
        nargs="?",
        default=None,
        help="Right operand for binary operations",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as a JSON document",
    )
    return parser


def evaluate(operation: str, left: str, right: str | None) -> Any:
    """
    Run a single operation on string operands.

    Raises:
        ValueError: A binary operation is missing its right operand.
        MoneyError: The operation itself failed.
    """
    needs_right, handler = OPERATIONS[operation]
    if needs_right:
        if right is None:
            raise ValueError(f"Operation '{operation}' needs a right operand")
        return handler(left, right)
    return handler(left)


def render_result(
    operation: str, left: str, right: str | None, result: Any, as_json: bool
) -> str:
    if isinstance(result, bool):
        text = "true" if result else "false"
    else:
        text = str(result)

    if not as_json:
        return text

    document = {
        "operation": operation,
        "left": left,
        "right": right,
        "result": result if isinstance(result, (bool, int)) else text,
    }
    return orjson.dumps(document).decode("utf-8")


def main(argv: list[str] | None = None) -> int:
    """Main calculator execution."""
    config = get_config()
    setup_logging(config.logger_adapter)
    logger = get_logger("money_calc.py")

    parser = setup_arg_parser()
    args = parser.parse_args(argv)

    bind_context(operation=args.operation)

    try:
        result = evaluate(args.operation, args.left, args.right)
    except (MoneyError, ValueError) as e:
        logger.error("Calculation failed", error=str(e))
        return 1
    finally:
        clear_context("operation")

    logger.debug("Calculation finished", result=result)
    print(
        render_result(
            args.operation, args.left, args.right, result, args.json
        )
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
