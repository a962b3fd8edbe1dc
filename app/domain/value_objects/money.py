"""Asking price value object"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Union


@dataclass(frozen=True)
class Money:
    amount: Decimal
    currency: str = "USD"

    def __post_init__(self):
        if self.amount <= 0:
            raise ValueError("Amount must be positive")
        if not self.currency:
            raise ValueError("Currency required")

    @classmethod
    def of(cls, amount: Union[int, float, str, Decimal], currency: str = "USD") -> "Money":
        return cls(amount=Decimal(str(amount)), currency=currency)

    def formatted(self) -> str:
        """Display form used in listing copy, e.g. $5,000 or $1,250.50"""
        if self.amount == self.amount.to_integral_value():
            return f"${int(self.amount):,}"
        return f"${self.amount:,.2f}"

    def __str__(self) -> str:
        return f"{self.amount:.2f} {self.currency}"
