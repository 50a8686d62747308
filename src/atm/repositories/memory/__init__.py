"""In-memory repository implementations."""

from atm.repositories.memory.account_repo import InMemoryAccountRepository
from atm.repositories.memory.journal_repo import InMemoryJournalRepository

__all__ = [
    "InMemoryAccountRepository",
    "InMemoryJournalRepository",
]
