"""Repository layer - data access abstractions and implementations."""

from atm.repositories.protocols import (
    AccountRepository,
    JournalRepository,
)
from atm.repositories.memory import (
    InMemoryAccountRepository,
    InMemoryJournalRepository,
)

__all__ = [
    "AccountRepository",
    "JournalRepository",
    "InMemoryAccountRepository",
    "InMemoryJournalRepository",
]
