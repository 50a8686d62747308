"""Repository protocol definitions (interfaces)."""

from atm.repositories.protocols.account_repo import AccountRepository
from atm.repositories.protocols.journal_repo import JournalRepository

__all__ = [
    "AccountRepository",
    "JournalRepository",
]
