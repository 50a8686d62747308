"""Account repository protocol."""

from typing import Protocol, Optional

from atm.domain.models import Account


class AccountRepository(Protocol):
    """Interface for account data access."""

    def add(self, account: Account) -> Account:
        """Store a new account."""
        ...

    def get_by_number(self, account_number: int) -> Optional[Account]:
        """Retrieve account by account number."""
        ...

    def list_all(self) -> list[Account]:
        """List all accounts in insertion order."""
        ...
