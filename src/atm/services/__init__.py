"""Service layer - business logic orchestration."""

from atm.services.ledger_service import AccountLedger
from atm.services.cash_dispenser import CashInventory
from atm.services.transaction_engine import TransactionEngine
from atm.services.session_controller import SessionController

__all__ = [
    "AccountLedger",
    "CashInventory",
    "TransactionEngine",
    "SessionController",
]
