"""Domain layer - pure business models with no external dependencies."""

from atm.domain.models import (
    Account,
    Session,
    TransactionRequest,
    TransactionRecord,
    TransactionType,
    TransactionStatus,
    SessionState,
    MainMenuOption,
)
from atm.domain.views import BalanceSnapshot

__all__ = [
    "Account",
    "Session",
    "TransactionRequest",
    "TransactionRecord",
    "TransactionType",
    "TransactionStatus",
    "SessionState",
    "MainMenuOption",
    "BalanceSnapshot",
]
