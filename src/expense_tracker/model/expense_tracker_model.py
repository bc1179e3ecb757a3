import logging
from typing import Any, Iterable, List, Optional, Tuple

from expense_tracker.domain.models import Transaction
from expense_tracker.model.base import ExpenseTrackerModelListener, InvalidArgumentError

logger = logging.getLogger(__name__)


class ExpenseTrackerModel:
    """
    The M in MVC: holds the transactions, the indices matched by the
    current filter, and the listeners to notify on state changes.

    Observable side of the Observer pattern. Mutations never notify on
    their own; the owning controller calls `trigger_state_changed()` once
    it considers the change worth rendering.

    Usage:
        ```
        model = ExpenseTrackerModel()
        model.register(view)

        model.add_transaction(transaction)
        model.set_matched_filter_indices([0])
        model.trigger_state_changed()
        ```
    """

    def __init__(self):
        self._transactions: List[Transaction] = []
        self._matched_filter_indices: List[int] = []
        self._listeners: List[ExpenseTrackerModelListener] = []

    def add_transaction(self, transaction: Transaction) -> None:
        """
        Append a transaction to the end of the list.

        The previous filter result no longer applies and is cleared.

        Args:
            transaction: Transaction to add

        Raises:
            InvalidArgumentError: If transaction is None
        """
        if transaction is None:
            raise InvalidArgumentError("The new transaction must be non-null.")

        self._transactions.append(transaction)
        self._matched_filter_indices.clear()
        logger.debug("Added %r (%d transactions)", transaction, len(self._transactions))

    def remove_transaction(self, transaction: Transaction) -> None:
        """
        Remove the first transaction equal to the given one, if any.

        The matched filter indices are cleared whether or not anything
        was removed.

        Args:
            transaction: Transaction to remove
        """
        try:
            self._transactions.remove(transaction)
            logger.debug("Removed %r (%d transactions)", transaction, len(self._transactions))
        except ValueError:
            logger.debug("Nothing to remove for %r", transaction)

        self._matched_filter_indices.clear()

    def get_transactions(self) -> Tuple[Transaction, ...]:
        """Return a read-only snapshot of the transactions, in insertion order"""
        return tuple(self._transactions)

    def set_matched_filter_indices(self, indices: Optional[Iterable[int]]) -> None:
        """
        Replace the matched filter indices.

        Args:
            indices: Positions into the transaction list selected by a filter.
                Order and duplicates are kept as given.

        Raises:
            InvalidArgumentError: If indices is None, or any index is not an
                integer between 0 (inclusive) and the number of
                transactions (exclusive). The current indices are kept.
        """
        if indices is None:
            raise InvalidArgumentError("The matched filter indices list must be non-null.")

        new_indices = list(indices)
        for index in new_indices:
            if not self._is_valid_index(index):
                raise InvalidArgumentError(
                    "Each matched filter index must be between 0 (inclusive) "
                    "and the number of transactions (exclusive)."
                )

        self._matched_filter_indices = new_indices
        logger.debug("Matched filter indices set to %s", new_indices)

    def get_matched_filter_indices(self) -> List[int]:
        """Return a copy of the matched filter indices"""
        return list(self._matched_filter_indices)

    def register(self, listener: Optional[ExpenseTrackerModelListener]) -> bool:
        """
        Register a listener for state change events.

        Args:
            listener: Object with an `update(model)` method

        Returns:
            True if the listener is non-null and was not already registered,
            False otherwise
        """
        if listener is not None and not self.contains_listener(listener):
            self._listeners.append(listener)
            logger.debug("Registered listener %r", listener)
            return True
        return False

    def number_of_listeners(self) -> int:
        """Return the number of registered listeners"""
        return len(self._listeners)

    def contains_listener(self, listener: Any) -> bool:
        """Return True if this exact listener object is registered"""
        return any(registered is listener for registered in self._listeners)

    def _state_changed(self) -> None:
        """Call update on every listener registered when the fan-out starts"""
        listeners = list(self._listeners)
        logger.debug("Notifying %d listeners", len(listeners))
        for listener in listeners:
            listener.update(self)

    def trigger_state_changed(self) -> None:
        """Notify every registered listener of a state change"""
        self._state_changed()

    def _is_valid_index(self, index: Any) -> bool:
        if isinstance(index, bool) or not isinstance(index, int):
            return False
        return 0 <= index <= len(self._transactions) - 1

    def __repr__(self) -> str:
        return (
            f"ExpenseTrackerModel({len(self._transactions)} transactions, "
            f"{len(self._matched_filter_indices)} matched, "
            f"{len(self._listeners)} listeners)"
        )
