"""Enumerations for domain models."""

from enum import Enum, IntEnum


class TransactionType(str, Enum):
    """Transactions a customer can run from the main menu."""

    BALANCE_INQUIRY = "BALANCE_INQUIRY"
    WITHDRAWAL = "WITHDRAWAL"
    DEPOSIT = "DEPOSIT"


class TransactionStatus(str, Enum):
    """Outcome recorded in the transaction journal."""

    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
    FAILED = "FAILED"


class SessionState(str, Enum):
    """Lifecycle of one customer session at the terminal."""

    UNAUTHENTICATED = "UNAUTHENTICATED"
    AUTHENTICATING = "AUTHENTICATING"
    AUTHENTICATED = "AUTHENTICATED"


class MainMenuOption(IntEnum):
    """Numeric keys of the main menu."""

    BALANCE_INQUIRY = 1
    WITHDRAWAL = 2
    DEPOSIT = 3
    EXIT = 4

    @property
    def transaction_type(self) -> TransactionType:
        """Transaction started by this option (not defined for EXIT)."""
        return TransactionType[self.name]
