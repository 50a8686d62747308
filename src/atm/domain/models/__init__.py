"""Domain models package."""

from atm.domain.models.enums import (
    TransactionType,
    TransactionStatus,
    SessionState,
    MainMenuOption,
)
from atm.domain.models.account import Account
from atm.domain.models.session import Session
from atm.domain.models.transaction import (
    TransactionRequest,
    TransactionRecord,
    cents_to_dollars,
)

__all__ = [
    "TransactionType",
    "TransactionStatus",
    "SessionState",
    "MainMenuOption",
    "Account",
    "Session",
    "TransactionRequest",
    "TransactionRecord",
    "cents_to_dollars",
]
