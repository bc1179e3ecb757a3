"""
In-memory model for expense tracking.

Holds the transactions, the indices matched by the active filter, and the
listeners that re-render when the model's owner triggers a state change.

Quick Start:
    >>> from expense_tracker.model import ExpenseTrackerModel
    >>> 
    >>> model = ExpenseTrackerModel()
    >>> model.register(view)
    >>> model.add_transaction(transaction)
    >>> model.trigger_state_changed()
"""
from expense_tracker.model.expense_tracker_model import ExpenseTrackerModel
from expense_tracker.model.base import (
    ExpenseTrackerModelListener,
    InvalidArgumentError,
)

__all__ = [
    "ExpenseTrackerModel",
    "ExpenseTrackerModelListener",
    "InvalidArgumentError",
]
