import logging
import shlex
import typer
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Callable, Dict, List

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape

from expense_tracker.config.settings import ConfigLoader
from expense_tracker.domain.enums import TransactionType
from expense_tracker.domain.models import Transaction
from expense_tracker.logging_config import configure_logging
from expense_tracker.model import ExpenseTrackerModel
from expense_tracker.views.console_view import ConsoleTableView

app = typer.Typer(
    name="expense-tracker",
    help="Track your expenses in an interactive session",
    add_completion=False,
)

console = Console()
logger = logging.getLogger(__name__)

PROMPT = "[bold cyan]expense-tracker>[/bold cyan] "
CREDIT_FLAG = "--credit"
SESSION_ACCOUNT = "session"

class State:
    verbose: bool = False


state = State()

@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Enable verbose output",
    )
):
    """
    Expense Tracker - Add, filter, and review your expenses.
    """
    state.verbose = verbose

    try:
        if verbose:
            level = "DEBUG"
        else:
            try:
                level = ConfigLoader.load_logging_config().get("level", "WARNING")
            except FileNotFoundError:
                level = "WARNING"

        configure_logging(level)
    except (ValueError, TypeError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        if state.verbose:
            console.print_exception()
        raise typer.Exit(code=1)


def _parse_row(token: str) -> int:
    """Parse a table row number"""
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"Row must be a whole number, got '{token}'")


def _add(model: ExpenseTrackerModel, args: List[str]) -> None:
    credit = CREDIT_FLAG in args
    args = [arg for arg in args if arg != CREDIT_FLAG]

    if len(args) < 2:
        raise ValueError("Usage: add AMOUNT CATEGORY [DESCRIPTION...] [--credit]")

    try:
        amount = Decimal(args[0])
    except InvalidOperation:
        raise ValueError(f"Amount must be a number, got '{args[0]}'")

    if not amount.is_finite() or amount <= 0:
        raise ValueError(f"Amount must be a positive number, got '{args[0]}'")

    category = args[1]
    description = " ".join(args[2:]) or category

    model.add_transaction(Transaction(
        date=date.today(),
        description=description,
        amount=amount,
        type=TransactionType.CREDIT if credit else TransactionType.DEBIT,
        account=SESSION_ACCOUNT,
        category=category,
    ))


def _remove(model: ExpenseTrackerModel, args: List[str]) -> None:
    if len(args) != 1:
        raise ValueError("Usage: remove ROW")

    row = _parse_row(args[0])
    transactions = model.get_transactions()
    if not 0 <= row < len(transactions):
        raise ValueError(f"No transaction at row {row}")

    model.remove_transaction(transactions[row])


def _match(model: ExpenseTrackerModel, args: List[str]) -> None:
    model.set_matched_filter_indices([_parse_row(arg) for arg in args])


def _list(model: ExpenseTrackerModel, args: List[str]) -> None:
    pass


COMMANDS: Dict[str, Callable[[ExpenseTrackerModel, List[str]], None]] = {
    "add": _add,
    "remove": _remove,
    "match": _match,
    "list": _list,
}

HELP_ROWS = [
    ("add AMOUNT CATEGORY [DESCRIPTION...] [--credit]", "Add a transaction dated today"),
    ("remove ROW", "Remove the transaction at ROW"),
    ("match [ROW...]", "Highlight the given rows (no rows clears the filter)"),
    ("list", "Show the transactions"),
    ("help", "Show this help"),
    ("quit", "End the session"),
]


def _print_help() -> None:
    help_table = Table(show_header=True, box=None, padding=(0, 2))
    help_table.add_column("Command", style="cyan", no_wrap=True)
    help_table.add_column("Description", style="white")
    for command, description in HELP_ROWS:
        help_table.add_row(escape(command), description)
    console.print(help_table)


def run_command(model: ExpenseTrackerModel, line: str) -> bool:
    """
    Run a single session command against the model.

    Mutating commands trigger a state change so registered views re-render.

    Args:
        model: Model the session works on
        line: Raw command line typed by the user

    Returns:
        False when the session should end, True otherwise

    Raises:
        ValueError: If the command is unknown or its arguments are invalid
    """
    tokens = shlex.split(line)
    if not tokens:
        return True

    name, args = tokens[0].lower(), tokens[1:]

    if name in ("quit", "exit"):
        return False

    if name == "help":
        _print_help()
        return True

    if name not in COMMANDS:
        raise ValueError(f"Unknown command '{name}'. Type 'help' for a list of commands")

    COMMANDS[name](model, args)
    logger.debug("Ran '%s', model is now %r", name, model)
    model.trigger_state_changed()
    return True


@app.command(name="session")
def session():
    """
    Start an interactive session.

    Examples:
        expense-tracker session
        expense-tracker -v session
    """
    try:
        model = ExpenseTrackerModel()
        model.register(ConsoleTableView(console=console))
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        if state.verbose:
            console.print_exception()
        raise typer.Exit(code=1)

    console.print(Panel.fit(
        "[bold cyan]Expense Tracker[/bold cyan]\n"
        "Type 'help' for a list of commands, 'quit' to leave.",
        border_style="cyan"
    ))

    while True:
        try:
            line = console.input(PROMPT)
        except EOFError:
            break

        try:
            if not run_command(model, line):
                break
        except ValueError as e:
            console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
            if state.verbose:
                console.print_exception()

    console.print("[dim]Bye[/dim]")


def cli_main():
    """Entry point for the CLI"""
    app()


if __name__ == "__main__":
    cli_main()
