"""Terminal I/O protocol and shared formatting."""

from decimal import Decimal
from typing import Protocol


def format_amount(amount: Decimal) -> str:
    """Format a dollar amount as $1,234.56."""
    return f"${Decimal(amount):,.2f}"


class Terminal(Protocol):
    """
    Protocol for the screen and keypad of the terminal.

    Implementations block in read_integer() until a whole number is entered.
    Non-numeric input raises InputFormatError; a closed input stream raises
    EOFError, which ends the terminal rather than the session.
    """

    def display_message(self, text: str) -> None:
        """Show text without a trailing newline."""
        ...

    def display_line(self, text: str) -> None:
        """Show text followed by a newline."""
        ...

    def display_amount(self, amount: Decimal) -> None:
        """Show a dollar amount with thousands separators and two decimals."""
        ...

    def read_integer(self) -> int:
        """Block until a whole number is entered and return it."""
        ...
