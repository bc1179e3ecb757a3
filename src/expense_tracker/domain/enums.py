from enum import Enum

class TransactionType(Enum):
    """Represents whether money is coming in or out"""
    DEBIT = "Debit" # out
    CREDIT = "Credit" # in

    @property
    def sign(self) -> str:
        """Sign used when displaying an amount of this type"""
        return "+" if self is TransactionType.CREDIT else "-"
