"""View models for ledger query outputs."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class BalanceSnapshot:
    """Balances of one account at the moment of the query."""

    account_number: int
    available_balance: Decimal
    total_balance: Decimal

    @property
    def pending_balance(self) -> Decimal:
        """Deposits posted but not yet cleared."""
        return self.total_balance - self.available_balance
