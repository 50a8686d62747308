"""In-memory implementation of AccountRepository."""

from typing import Optional

from atm.core.exceptions import ValidationError
from atm.domain.models import Account


class InMemoryAccountRepository:
    """Dict-backed account repository; lives as long as the process."""

    def __init__(self, accounts: Optional[list[Account]] = None):
        self._accounts: dict[int, Account] = {}
        for account in accounts or []:
            self.add(account)

    def add(self, account: Account) -> Account:
        """Store a new account."""
        if account.account_number in self._accounts:
            raise ValidationError(
                f"Account number {account.account_number} already exists"
            )
        self._accounts[account.account_number] = account
        return account

    def get_by_number(self, account_number: int) -> Optional[Account]:
        """Retrieve account by account number."""
        return self._accounts.get(account_number)

    def list_all(self) -> list[Account]:
        """List all accounts in insertion order."""
        return list(self._accounts.values())
