"""Ledger service for account balances and authentication."""

import logging
import threading
from contextlib import contextmanager
from decimal import Decimal
from typing import Iterator

from atm.config.settings import SeedAccount
from atm.core.exceptions import AccountNotFound, InsufficientFunds, ValidationError
from atm.domain.models import Account
from atm.domain.views import BalanceSnapshot
from atm.repositories.protocols import AccountRepository

logger = logging.getLogger(__name__)


class AccountLedger:
    """
    Service owning the terminal's account ledger.

    Callers address accounts by number only; Account objects never leave
    this class, so every balance change goes through credit/debit.

    debit() refuses to overdraw (raises InsufficientFunds) even though the
    withdrawal flow checks availability first. Every account also carries a
    re-entrant lock; hold account_lock() across a check-then-debit sequence.
    """

    def __init__(self, account_repo: AccountRepository):
        self._account_repo = account_repo
        self._locks: dict[int, threading.RLock] = {}
        self._locks_guard = threading.Lock()

    @classmethod
    def from_seed(
        cls,
        account_repo: AccountRepository,
        seed_accounts: list[SeedAccount],
    ) -> "AccountLedger":
        """Build a ledger and load the given seed accounts into the repository."""
        for seed in seed_accounts:
            account_repo.add(
                Account(
                    account_number=seed.account_number,
                    pin=seed.pin,
                    available_balance=seed.available_balance,
                    total_balance=seed.total_balance,
                )
            )
        logger.info("Ledger seeded with %d accounts", len(seed_accounts))
        return cls(account_repo)

    def authenticate(self, account_number: int, pin: int) -> bool:
        """Return True iff the account exists and the PIN matches."""
        account = self._account_repo.get_by_number(account_number)
        authenticated = account is not None and account.validate_pin(pin)
        if authenticated:
            logger.info("Account %s authenticated", account_number)
        else:
            logger.warning("Authentication failed for account %s", account_number)
        return authenticated

    def list_account_numbers(self) -> list[int]:
        """List account numbers in ledger order."""
        return [a.account_number for a in self._account_repo.list_all()]

    def available_balance(self, account_number: int) -> Decimal:
        """Get funds currently withdrawable from the account."""
        return self._get_account(account_number).available_balance

    def total_balance(self, account_number: int) -> Decimal:
        """Get available funds plus pending deposits."""
        return self._get_account(account_number).total_balance

    def balance(self, account_number: int) -> BalanceSnapshot:
        """Get both balances in one read."""
        with self.account_lock(account_number):
            account = self._get_account(account_number)
            return BalanceSnapshot(
                account_number=account.account_number,
                available_balance=account.available_balance,
                total_balance=account.total_balance,
            )

    def credit(self, account_number: int, amount: Decimal) -> None:
        """
        Post a deposit to the account.

        Only total_balance grows; the funds do not become available until
        cleared, which this system never does.
        """
        amount = self._validate_amount(amount)
        with self.account_lock(account_number):
            self._get_account(account_number).credit(amount)
        logger.info("Credited %s to account %s (pending)", amount, account_number)

    def debit(self, account_number: int, amount: Decimal) -> None:
        """Take amount out of both balances; never overdraws."""
        amount = self._validate_amount(amount)
        with self.account_lock(account_number):
            account = self._get_account(account_number)
            if amount > account.available_balance:
                raise InsufficientFunds(str(amount), str(account.available_balance))
            account.debit(amount)
        logger.info("Debited %s from account %s", amount, account_number)

    def reverse_debit(self, account_number: int, amount: Decimal) -> None:
        """Restore a debit that could not be completed (e.g. dispense failed)."""
        amount = self._validate_amount(amount)
        with self.account_lock(account_number):
            self._get_account(account_number).reverse_debit(amount)
        logger.warning("Reversed debit of %s on account %s", amount, account_number)

    @contextmanager
    def account_lock(self, account_number: int) -> Iterator[None]:
        """Hold the per-account lock for the duration of the block."""
        with self._locks_guard:
            lock = self._locks.setdefault(account_number, threading.RLock())
        with lock:
            yield

    def _get_account(self, account_number: int) -> Account:
        account = self._account_repo.get_by_number(account_number)
        if account is None:
            raise AccountNotFound(account_number)
        return account

    @staticmethod
    def _validate_amount(amount: Decimal) -> Decimal:
        amount = Decimal(amount)
        if amount <= 0:
            raise ValidationError(f"Amount must be positive, got {amount}")
        return amount
