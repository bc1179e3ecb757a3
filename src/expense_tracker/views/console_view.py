import logging
from typing import Any, Dict, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.style import Style
from rich.errors import StyleSyntaxError
from rich.table import Table

from expense_tracker.config.settings import ConfigLoader
from expense_tracker.domain.enums import TransactionType
from expense_tracker.model.base import ExpenseTrackerModelListener
from expense_tracker.model.expense_tracker_model import ExpenseTrackerModel

logger = logging.getLogger(__name__)


class ConsoleTableView(ExpenseTrackerModelListener):
    """
    Listener that prints the model as a rich table on every update.

    Rows matched by the current filter are highlighted.

    Usage:
        # Production - loads from ConfigLoader
        view = ConsoleTableView()

        # Testing - inject console and config
        view = ConsoleTableView(
            console=Console(record=True),
            config={"max_rows": 10},
        )

        model.register(view)
    """

    DEFAULT_CONFIG: Dict[str, Any] = {
        "title": "Transactions",
        "highlight_style": "bold black on green",
        "max_rows": 50,
    }

    def __init__(
        self,
        console: Optional[Console] = None,
        config: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize the view.

        Args:
            console: Console to print to. Defaults to stdout.
            config: Optional config dict. If None, loads from ConfigLoader.
                Missing keys fall back to DEFAULT_CONFIG.

        Raises:
            ValueError: If max_rows is not a positive integer or
                highlight_style is not a valid rich style
        """
        self.console = console or Console()
        self.config = {**self.DEFAULT_CONFIG, **self._load_config(config)}

        max_rows = self.config["max_rows"]
        if isinstance(max_rows, bool) or not isinstance(max_rows, int) or max_rows < 1:
            raise ValueError(f"View config 'max_rows' must be a positive integer, got {max_rows!r}")

        try:
            self.highlight_style = Style.parse(self.config["highlight_style"])
        except (StyleSyntaxError, TypeError, AttributeError) as e:
            raise ValueError(
                f"View config 'highlight_style' is not a valid style: "
                f"{self.config['highlight_style']!r}"
            ) from e

    def _load_config(self, config: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        if config is not None:
            return config

        try:
            return ConfigLoader.load_view_config()
        except FileNotFoundError:
            return {}

    def render(self, model: ExpenseTrackerModel) -> Table:
        """
        Build the table for the current model state.

        Args:
            model: Model to render

        Returns:
            Table with one row per transaction, capped at max_rows
        """
        transactions = model.get_transactions()
        matched = set(model.get_matched_filter_indices())
        max_rows = self.config["max_rows"]

        table = Table(title=self.config["title"], show_header=True, padding=(0, 1))
        table.add_column("#", justify="right", style="dim")
        table.add_column("Date", style="cyan")
        table.add_column("Description", style="white", max_width=40)
        table.add_column("Category", style="magenta")
        table.add_column("Amount", justify="right")

        for index, txn in enumerate(transactions[:max_rows]):
            amount_color = "red" if txn.type == TransactionType.DEBIT else "green"
            amount_str = f"[{amount_color}]{txn.type.sign}${txn.amount:,.2f}[/{amount_color}]"

            table.add_row(
                str(index),
                str(txn.date),
                escape(txn.description),
                escape(txn.category or "Uncategorized"),
                amount_str,
                style=self.highlight_style if index in matched else None,
            )

        captions = []
        if matched:
            captions.append(f"Matched: {len(matched)} of {len(transactions)}")
        if len(transactions) > max_rows:
            captions.append(f"Showing {max_rows} of {len(transactions)} transactions")
        if captions:
            table.caption = " | ".join(captions)

        return table

    def update(self, model: ExpenseTrackerModel) -> None:
        """Print the model"""
        logger.debug("Rendering %r", model)

        if not model.get_transactions():
            self.console.print(Panel(
                "[yellow]No transactions[/yellow]",
                title=self.config["title"],
                border_style="yellow"
            ))
            return

        self.console.print(self.render(model))
