"""Account domain model."""

from dataclasses import dataclass, field
from decimal import Decimal

from atm.core.exceptions import ValidationError


@dataclass
class Account:
    """
    Ledger entry for one customer.

    available_balance is what can be withdrawn right now; total_balance also
    includes deposits that have not cleared yet, so total >= available holds
    at all times. Deposits are never cleared by this system, which means the
    two figures can drift apart permanently once a deposit posts.

    Availability is the caller's concern: debit() trusts that the amount has
    already been checked against available_balance.
    """

    account_number: int
    pin: int = field(repr=False)
    available_balance: Decimal
    total_balance: Decimal

    def __post_init__(self) -> None:
        self.available_balance = Decimal(self.available_balance)
        self.total_balance = Decimal(self.total_balance)
        if self.account_number <= 0:
            raise ValidationError("Account number must be a positive integer")
        if self.available_balance < 0:
            raise ValidationError("Available balance cannot be negative")
        if self.total_balance < self.available_balance:
            raise ValidationError("Total balance cannot be less than available balance")

    def validate_pin(self, pin: int) -> bool:
        """Return True if pin matches this account's PIN."""
        return pin == self.pin

    def credit(self, amount: Decimal) -> None:
        """Add a pending deposit (total balance only)."""
        self.total_balance += amount

    def debit(self, amount: Decimal) -> None:
        """Take amount out of both balances."""
        self.available_balance -= amount
        self.total_balance -= amount

    def reverse_debit(self, amount: Decimal) -> None:
        """Undo a debit() of the same amount."""
        self.available_balance += amount
        self.total_balance += amount
