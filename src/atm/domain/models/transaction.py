"""Transaction request and journal record models."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from atm.domain.models.enums import TransactionType, TransactionStatus
from atm.domain.views.balance import BalanceSnapshot


CENTS_PER_DOLLAR = Decimal("100")


def cents_to_dollars(cents: int) -> Decimal:
    """
    Convert a keypad deposit entry (minor units) to dollars.

    Deposits are keyed in cents while withdrawals are picked in whole dollars
    from a fixed menu; this is the only place the two units meet.
    """
    return (Decimal(cents) / CENTS_PER_DOLLAR).quantize(Decimal("0.01"))


@dataclass
class TransactionRequest:
    """
    One menu selection to be executed against the ledger.

    - BALANCE_INQUIRY carries no amount
    - WITHDRAWAL amount is whole dollars from the withdrawal menu
    - DEPOSIT amount is dollars (already converted from cents)
    """

    kind: TransactionType
    account_number: int
    amount: Optional[Decimal] = None

    def __post_init__(self) -> None:
        if isinstance(self.kind, str):
            self.kind = TransactionType(self.kind)
        if self.amount is not None:
            self.amount = Decimal(self.amount)


@dataclass
class TransactionRecord:
    """Journal entry written for every executed or cancelled transaction."""

    record_id: str
    account_number: int
    kind: TransactionType
    status: TransactionStatus
    amount: Optional[Decimal] = None
    message: Optional[str] = None
    balance: Optional[BalanceSnapshot] = None
    recorded_at_est: Optional[datetime] = field(default=None)

    def __post_init__(self) -> None:
        if isinstance(self.kind, str):
            self.kind = TransactionType(self.kind)
        if isinstance(self.status, str):
            self.status = TransactionStatus(self.status)

    @property
    def is_mutating(self) -> bool:
        """Return True if this record changed a balance."""
        return (
            self.status == TransactionStatus.COMPLETED
            and self.kind in (TransactionType.WITHDRAWAL, TransactionType.DEPOSIT)
        )
