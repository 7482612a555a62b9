from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .currency import Currency


@dataclass(frozen=True)
class Money:
    """金額（通貨情報含む）"""

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))
        if not self.amount.is_finite():
            raise ValueError(f"Amount must be a finite number: {self.amount}")
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def add(self, other: Money) -> Money:
        """金額を加算する"""
        if self.currency != other.currency:
            raise ValueError("Cannot add money with different currencies")
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def multiply(self, factor: Decimal | int) -> Money:
        """金額を factor 倍する（factor は 0 以上）"""
        return Money(amount=self.amount * Decimal(factor), currency=self.currency)

    @classmethod
    def zero(cls, currency: Currency) -> Money:
        """指定通貨の 0"""
        return cls(Decimal("0"), currency)

    @classmethod
    def php(cls, amount: Decimal) -> Money:
        """フィリピン・ペソで Money を生成"""
        return cls(amount, Currency.php())
