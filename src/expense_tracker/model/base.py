from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from expense_tracker.model.expense_tracker_model import ExpenseTrackerModel


class InvalidArgumentError(ValueError):
    """Raised when the model is handed an argument it cannot accept."""
    pass


class ExpenseTrackerModelListener(ABC):
    """
    Abstract base class for observers of the expense tracker model.

    Implements the Observer side of the pattern: the model keeps a registry
    of listeners and calls `update` on each of them whenever its owner
    triggers a state change.

    Usage:
        ```
        class MyView(ExpenseTrackerModelListener):
            def update(self, model):
                print(model.get_transactions())

        model.register(MyView())
        model.trigger_state_changed()
        ```
    """

    @abstractmethod
    def update(self, model: "ExpenseTrackerModel") -> None:
        """
        Receive the model after a state change.

        Args:
            model: The model that changed
        """
        pass
