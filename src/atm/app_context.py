"""Application context for in-process service management.

Wires settings, repositories, providers and services for one terminal.
Each service is created lazily and shared afterwards.
"""

from typing import Optional

from atm.config.settings import Settings, get_settings
from atm.providers.console_terminal import ConsoleTerminal
from atm.providers.deposit_slot import DepositReceiver, SimulatedDepositSlot
from atm.providers.terminal import Terminal
from atm.repositories.memory import InMemoryAccountRepository, InMemoryJournalRepository
from atm.services import AccountLedger, CashInventory, SessionController, TransactionEngine


class AppContext:
    """
    Application context providing access to all terminal services.

    Everything lives in memory: a new context starts from the seed accounts
    and a full dispenser.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        terminal: Optional[Terminal] = None,
        deposit_slot: Optional[DepositReceiver] = None,
    ):
        """
        Initialize application context.

        Args:
            settings: Settings to use. Falls back to the global settings.
            terminal: Screen/keypad implementation. Defaults to the console.
            deposit_slot: Envelope slot. Defaults to the always-accepting simulation.
        """
        self._settings = settings or get_settings()
        self._terminal = terminal
        self._deposit_slot = deposit_slot

        self._account_repo: Optional[InMemoryAccountRepository] = None
        self._journal_repo: Optional[InMemoryJournalRepository] = None
        self._ledger: Optional[AccountLedger] = None
        self._cash_inventory: Optional[CashInventory] = None
        self._engine: Optional[TransactionEngine] = None
        self._controller: Optional[SessionController] = None

    @property
    def settings(self) -> Settings:
        return self._settings

    # Providers
    @property
    def terminal(self) -> Terminal:
        if self._terminal is None:
            self._terminal = ConsoleTerminal()
        return self._terminal

    @property
    def deposit_slot(self) -> DepositReceiver:
        if self._deposit_slot is None:
            self._deposit_slot = SimulatedDepositSlot()
        return self._deposit_slot

    # Repository accessors
    @property
    def journal(self) -> InMemoryJournalRepository:
        """Get the transaction journal."""
        if self._journal_repo is None:
            self._journal_repo = InMemoryJournalRepository()
        return self._journal_repo

    def _get_account_repo(self) -> InMemoryAccountRepository:
        if self._account_repo is None:
            self._account_repo = InMemoryAccountRepository()
        return self._account_repo

    # Service accessors
    @property
    def ledger(self) -> AccountLedger:
        """Get the AccountLedger instance (seeded on first access)."""
        if self._ledger is None:
            self._ledger = AccountLedger.from_seed(
                self._get_account_repo(),
                self._settings.seed_accounts,
            )
        return self._ledger

    @property
    def cash_inventory(self) -> CashInventory:
        """Get the CashInventory instance."""
        if self._cash_inventory is None:
            self._cash_inventory = CashInventory(
                initial_count=self._settings.initial_bill_count,
                denomination=self._settings.bill_denomination,
            )
        return self._cash_inventory

    @property
    def engine(self) -> TransactionEngine:
        """Get the TransactionEngine instance."""
        if self._engine is None:
            self._engine = TransactionEngine(
                ledger=self.ledger,
                cash_inventory=self.cash_inventory,
                deposit_slot=self.deposit_slot,
                journal_repo=self.journal,
                terminal=self.terminal,
                withdrawal_amounts=self._settings.withdrawal_amounts,
            )
        return self._engine

    @property
    def controller(self) -> SessionController:
        """Get the SessionController instance."""
        if self._controller is None:
            self._controller = SessionController(
                ledger=self.ledger,
                engine=self.engine,
                terminal=self.terminal,
            )
        return self._controller
