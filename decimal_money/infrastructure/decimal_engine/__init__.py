from .engine import DEFAULT_MAX_DIGITS, DecimalEngine, get_decimal_engine
from .interfaces import DecimalString, IDecimalEngine, Ordering

__all__ = [
    "DEFAULT_MAX_DIGITS",
    "DecimalEngine",
    "DecimalString",
    "IDecimalEngine",
    "Ordering",
    "get_decimal_engine",
]
