"""
Pytest configuration and fixtures for ATM terminal tests.

This module provides:
- A scripted terminal that replays keypad input and captures the screen
- Seeded in-memory ledger and journal fixtures
- Cash dispenser and deposit slot fixtures
- Engine, controller and application context fixtures
"""

from decimal import Decimal
from typing import Union

import pytest

from atm.app_context import AppContext
from atm.config.settings import Settings, SeedAccount, default_seed_accounts, reset_settings
from atm.core.exceptions import InputFormatError
from atm.providers.deposit_slot import SimulatedDepositSlot
from atm.providers.terminal import format_amount
from atm.repositories.memory import InMemoryAccountRepository, InMemoryJournalRepository
from atm.services import AccountLedger, CashInventory, SessionController, TransactionEngine


# =============================================================================
# SEED CONSTANTS
# =============================================================================

ACCOUNT = 12345
PIN = 54321
OTHER_ACCOUNT = 98765
OTHER_PIN = 56789
UNKNOWN_ACCOUNT = 11111


# =============================================================================
# TERMINAL DOUBLE
# =============================================================================


class ScriptedTerminal:
    """
    Terminal that replays a fixed list of keypad entries.

    Integers are returned as-is; strings are parsed like a keypad line and
    raise InputFormatError when they are not whole numbers. Running out of
    input raises EOFError.
    """

    def __init__(self, inputs: tuple = ()):
        self._inputs: list[Union[int, str]] = list(inputs)
        self.output: list[str] = []

    def feed(self, *values: Union[int, str]) -> None:
        self._inputs.extend(values)

    @property
    def remaining(self) -> int:
        return len(self._inputs)

    @property
    def text(self) -> str:
        return "".join(self.output)

    def display_message(self, text: str) -> None:
        self.output.append(text)

    def display_line(self, text: str) -> None:
        self.output.append(text + "\n")

    def display_amount(self, amount: Decimal) -> None:
        self.output.append(format_amount(amount))

    def read_integer(self) -> int:
        if not self._inputs:
            raise EOFError("script exhausted")
        value = self._inputs.pop(0)
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                raise InputFormatError(value) from None
        return value


# =============================================================================
# SETTINGS FIXTURES
# =============================================================================


@pytest.fixture(autouse=True)
def clean_settings():
    """Reset global settings around every test."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def settings() -> Settings:
    """Default settings (seed accounts, 500 bills of $20)."""
    return Settings()


# =============================================================================
# REPOSITORY FIXTURES
# =============================================================================


@pytest.fixture
def account_repo() -> InMemoryAccountRepository:
    """Provide an empty AccountRepository."""
    return InMemoryAccountRepository()


@pytest.fixture
def journal_repo() -> InMemoryJournalRepository:
    """Provide an empty JournalRepository."""
    return InMemoryJournalRepository()


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def ledger(account_repo) -> AccountLedger:
    """Ledger seeded with 12345/54321 (1000.00/1200.00) and 98765/56789 (200.00/200.00)."""
    return AccountLedger.from_seed(account_repo, default_seed_accounts())


@pytest.fixture
def cash_inventory() -> CashInventory:
    """Full dispenser: 500 bills of $20."""
    return CashInventory(initial_count=500, denomination=20)


@pytest.fixture
def deposit_slot() -> SimulatedDepositSlot:
    return SimulatedDepositSlot()


@pytest.fixture
def terminal() -> ScriptedTerminal:
    return ScriptedTerminal()


@pytest.fixture
def engine(ledger, cash_inventory, deposit_slot, journal_repo, terminal) -> TransactionEngine:
    """Provide a TransactionEngine over the seeded ledger."""
    return TransactionEngine(
        ledger=ledger,
        cash_inventory=cash_inventory,
        deposit_slot=deposit_slot,
        journal_repo=journal_repo,
        terminal=terminal,
    )


@pytest.fixture
def controller(ledger, engine, terminal) -> SessionController:
    """Provide a SessionController sharing the engine's terminal."""
    return SessionController(ledger=ledger, engine=engine, terminal=terminal)


# =============================================================================
# APPLICATION CONTEXT FIXTURES
# =============================================================================


@pytest.fixture
def rich_account() -> SeedAccount:
    """Account with more money than the dispenser holds."""
    return SeedAccount(
        account_number=55555,
        pin=1111,
        available_balance=Decimal("50000.00"),
        total_balance=Decimal("50000.00"),
    )


@pytest.fixture
def app_context(terminal) -> AppContext:
    """Context with default settings and the scripted terminal."""
    return AppContext(settings=Settings(), terminal=terminal)
