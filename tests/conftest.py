import logging
import pytest
from datetime import date
from decimal import Decimal
from typing import List, Optional

from expense_tracker.domain.enums import TransactionType
from expense_tracker.domain.models import Transaction
from expense_tracker.logging_config import LOGGER_NAME
from expense_tracker.model import ExpenseTrackerModel, ExpenseTrackerModelListener


class RecordingListener(ExpenseTrackerModelListener):
    """Listener that remembers every update it receives"""

    def __init__(self, name: str = "listener", calls: Optional[List] = None):
        self.name = name
        self.calls = calls if calls is not None else []

    def update(self, model):
        self.calls.append((self.name, model))

    def __repr__(self):
        return f"RecordingListener({self.name!r})"


@pytest.fixture
def model() -> ExpenseTrackerModel:
    """Create an empty model for each test"""
    return ExpenseTrackerModel()

@pytest.fixture
def sample_transactions() -> List[Transaction]:
    """Three distinct transactions"""
    return [
        Transaction(
            date=date(2025, 1, 15),
            description="Coffee Shop",
            amount=Decimal("4.50"),
            type=TransactionType.DEBIT,
            account="amex",
            category="Food & Dining",
        ),
        Transaction(
            date=date(2025, 1, 16),
            description="Salary",
            amount=Decimal("5000.00"),
            type=TransactionType.CREDIT,
            account="amex",
            category="Income",
        ),
        Transaction(
            date=date(2025, 1, 17),
            description="LOBLAWS OTTAWA",
            amount=Decimal("45.67"),
            type=TransactionType.DEBIT,
            account="amex",
        ),
    ]

@pytest.fixture
def populated_model(
    model: ExpenseTrackerModel,
    sample_transactions: List[Transaction]
) -> ExpenseTrackerModel:
    """Model holding the sample transactions, in order"""
    for txn in sample_transactions:
        model.add_transaction(txn)
    return model

@pytest.fixture
def make_listener():
    """Factory for listeners that record their updates"""
    return RecordingListener

@pytest.fixture
def clean_logger():
    """Remove handlers installed by a test and restore the package logger"""
    logger = logging.getLogger(LOGGER_NAME)
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    saved_propagate = logger.propagate
    logger.handlers.clear()
    yield logger
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)
    logger.propagate = saved_propagate
