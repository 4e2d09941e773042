from .money import DecimalMoney, MoneyLike

__all__ = ["DecimalMoney", "MoneyLike"]
