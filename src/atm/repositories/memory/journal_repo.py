"""In-memory implementation of JournalRepository."""

from typing import Optional

from atm.domain.models import TransactionRecord, TransactionType


class InMemoryJournalRepository:
    """List-backed journal; records are never edited or removed."""

    def __init__(self):
        self._records: list[TransactionRecord] = []

    def append(self, record: TransactionRecord) -> TransactionRecord:
        """Append a record to the journal."""
        self._records.append(record)
        return record

    def query(
        self,
        account_number: Optional[int] = None,
        kinds: Optional[list[TransactionType]] = None,
    ) -> list[TransactionRecord]:
        """Return records in the order they were written, optionally filtered."""
        records = self._records
        if account_number is not None:
            records = [r for r in records if r.account_number == account_number]
        if kinds:
            records = [r for r in records if r.kind in kinds]
        return list(records)
