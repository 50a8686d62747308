"""Transaction journal repository protocol."""

from typing import Protocol, Optional

from atm.domain.models import TransactionRecord, TransactionType


class JournalRepository(Protocol):
    """Interface for the append-only transaction journal."""

    def append(self, record: TransactionRecord) -> TransactionRecord:
        """Append a record to the journal."""
        ...

    def query(
        self,
        account_number: Optional[int] = None,
        kinds: Optional[list[TransactionType]] = None,
    ) -> list[TransactionRecord]:
        """Return records in the order they were written, optionally filtered."""
        ...
