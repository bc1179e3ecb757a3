from dataclasses import dataclass
from decimal import Decimal
from datetime import date
from typing import Optional
from expense_tracker.domain.enums import TransactionType

@dataclass(frozen=True)
class Transaction:
    """Core domain value representing a single transaction"""
    date: date
    description: str
    amount: Decimal
    type: TransactionType
    account: str
    category: Optional[str] = None

    def __hash__(self):
        """Hash on the identifying fields"""
        return hash((self.date, self.description, self.amount, self.type))
    
    @property
    def signed_amount(self) -> Decimal:
        """Return amount with sign for net calculations"""
        return self.amount if self.type == TransactionType.CREDIT else -self.amount
    
    def __repr__(self):
        return f"Transaction({self.date}, {self.description[:30]}, {self.type.sign}${self.amount})"
