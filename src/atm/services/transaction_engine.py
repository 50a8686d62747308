"""Transaction engine: balance inquiry, withdrawal and deposit."""

import logging
import uuid
from decimal import Decimal
from typing import Callable, Optional, Sequence

from atm.core.exceptions import (
    AppError,
    EnvelopeNotReceived,
    InsufficientFunds,
    InsufficientInventory,
    InvalidSelection,
    ValidationError,
)
from atm.core.timezone import now_eastern
from atm.domain.models import (
    Session,
    TransactionRecord,
    TransactionRequest,
    TransactionStatus,
    TransactionType,
    cents_to_dollars,
)
from atm.domain.views import BalanceSnapshot
from atm.providers.deposit_slot import DepositReceiver
from atm.providers.terminal import Terminal
from atm.repositories.protocols import JournalRepository
from atm.services.cash_dispenser import CashInventory
from atm.services.ledger_service import AccountLedger

logger = logging.getLogger(__name__)

DEFAULT_WITHDRAWAL_AMOUNTS = (20, 40, 60, 100, 200)
DEPOSIT_CANCELED = 0
# $1,000,000,000.00
MAX_DEPOSIT_CENTS = 100_000_000_000

PENDING_DEPOSIT_NOTICE = (
    "\nYour envelope has been received."
    "\nNOTE: The money just deposited will not be available until we verify "
    "the amount of any enclosed cash and your checks clear."
)


class TransactionEngine:
    """
    Executes the three transaction kinds against the ledger.

    The set of kinds is closed and dispatched through one table keyed by
    TransactionType. execute() runs a TransactionRequest whose amount is
    already known; perform() runs the keypad prompts for the session's
    customer, builds the request and hands it to execute().

    Every outcome is written to the journal. When execute() fails with a
    domain error, the journal record is attached to the error as
    ``error.record`` before it propagates.
    """

    def __init__(
        self,
        ledger: AccountLedger,
        cash_inventory: CashInventory,
        deposit_slot: DepositReceiver,
        journal_repo: JournalRepository,
        terminal: Terminal,
        withdrawal_amounts: Sequence[int] = DEFAULT_WITHDRAWAL_AMOUNTS,
    ):
        self._ledger = ledger
        self._cash_inventory = cash_inventory
        self._deposit_slot = deposit_slot
        self._journal_repo = journal_repo
        self._terminal = terminal
        self._withdrawal_amounts = tuple(withdrawal_amounts)

        self._executors: dict[TransactionType, Callable[[TransactionRequest], BalanceSnapshot]] = {
            TransactionType.BALANCE_INQUIRY: self._execute_balance_inquiry,
            TransactionType.WITHDRAWAL: self._execute_withdrawal,
            TransactionType.DEPOSIT: self._execute_deposit,
        }
        self._flows: dict[TransactionType, Callable[[int], TransactionRecord]] = {
            TransactionType.BALANCE_INQUIRY: self._perform_balance_inquiry,
            TransactionType.WITHDRAWAL: self._perform_withdrawal,
            TransactionType.DEPOSIT: self._perform_deposit,
        }

    @property
    def cancel_option(self) -> int:
        """Withdrawal menu key that cancels the transaction."""
        return len(self._withdrawal_amounts) + 1

    # ------------------------------------------------------------------
    # Non-interactive operations
    # ------------------------------------------------------------------

    def inquire_balance(self, account_number: int) -> BalanceSnapshot:
        """Read available and total balance; no mutation."""
        return self._ledger.balance(account_number)

    def withdraw(self, account_number: int, amount: int) -> Decimal:
        """
        Debit the account and dispense cash as one unit.

        amount must be a positive multiple of the bill denomination.
        Order: funds check, inventory check, debit, dispense. If dispense
        fails the debit is reversed before the error propagates, so the
        ledger and the dispenser never disagree.

        Returns the new available balance.
        """
        if amount <= 0:
            raise ValidationError(f"Withdrawal amount must be positive, got {amount}")
        denomination = self._cash_inventory.denomination
        if amount % denomination:
            raise ValidationError(
                f"Withdrawal amount must be a multiple of {denomination}, got {amount}"
            )

        with self._ledger.account_lock(account_number):
            available = self._ledger.available_balance(account_number)
            if amount > available:
                raise InsufficientFunds(str(amount), str(available))
            if not self._cash_inventory.is_sufficient(amount):
                raise InsufficientInventory(
                    str(amount), str(self._cash_inventory.total_value())
                )

            self._ledger.debit(account_number, Decimal(amount))
            try:
                self._cash_inventory.dispense(amount)
            except Exception:
                logger.error(
                    "Dispense of %s failed for account %s; reversing debit",
                    amount,
                    account_number,
                )
                self._ledger.reverse_debit(account_number, Decimal(amount))
                raise

            return self._ledger.available_balance(account_number)

    def deposit(self, account_number: int, amount: Decimal) -> Decimal:
        """
        Accept an envelope and post amount as a pending deposit.

        Raises EnvelopeNotReceived (no mutation) when the slot reports
        nothing arrived. Returns the new total balance.
        """
        amount = Decimal(amount)
        if amount <= 0:
            raise ValidationError(f"Deposit amount must be positive, got {amount}")
        if not self._deposit_slot.receive_envelope():
            raise EnvelopeNotReceived(account_number)
        self._ledger.credit(account_number, amount)
        return self._ledger.total_balance(account_number)

    def execute(self, request: TransactionRequest) -> TransactionRecord:
        """
        Run one transaction request and journal the outcome.

        A missing envelope is journaled as CANCELLED, any other domain
        error as FAILED; the error is then re-raised with the record attached.
        """
        executor = self._executors[request.kind]
        try:
            snapshot = executor(request)
        except AppError as e:
            status = (
                TransactionStatus.CANCELLED
                if isinstance(e, EnvelopeNotReceived)
                else TransactionStatus.FAILED
            )
            e.record = self._record(
                request.account_number,
                request.kind,
                status,
                amount=request.amount,
                message=e.code,
            )
            raise
        return self._record(
            request.account_number,
            request.kind,
            TransactionStatus.COMPLETED,
            amount=request.amount,
            message=(
                f"available={snapshot.available_balance} "
                f"total={snapshot.total_balance} "
                f"pending={snapshot.pending_balance}"
            ),
            balance=snapshot,
        )

    def _execute_balance_inquiry(self, request: TransactionRequest) -> BalanceSnapshot:
        return self.inquire_balance(request.account_number)

    def _execute_withdrawal(self, request: TransactionRequest) -> BalanceSnapshot:
        if request.amount is None:
            raise ValidationError("Withdrawal requires an amount")
        if request.amount != request.amount.to_integral_value():
            raise ValidationError("Withdrawal amount must be whole dollars")
        self.withdraw(request.account_number, int(request.amount))
        return self.inquire_balance(request.account_number)

    def _execute_deposit(self, request: TransactionRequest) -> BalanceSnapshot:
        if request.amount is None:
            raise ValidationError("Deposit requires an amount")
        self.deposit(request.account_number, request.amount)
        return self.inquire_balance(request.account_number)

    # ------------------------------------------------------------------
    # Interactive flows
    # ------------------------------------------------------------------

    def perform(self, kind: TransactionType, session: Session) -> TransactionRecord:
        """Run the keypad flow for kind on behalf of the session's customer."""
        if not session.authenticated or session.account_number is None:
            raise ValidationError("Transactions require an authenticated session")
        logger.debug("Starting %s for account %s", kind.value, session.account_number)
        return self._flows[kind](session.account_number)

    def _perform_balance_inquiry(self, account_number: int) -> TransactionRecord:
        record = self.execute(
            TransactionRequest(
                kind=TransactionType.BALANCE_INQUIRY,
                account_number=account_number,
            )
        )
        screen = self._terminal
        screen.display_message("\nBalance Information:\n - Available balance: ")
        screen.display_amount(record.balance.available_balance)
        screen.display_message("\n - Total balance: ")
        screen.display_amount(record.balance.total_balance)
        screen.display_line("")
        return record

    def _perform_withdrawal(self, account_number: int) -> TransactionRecord:
        # Only a dispense or an explicit cancel ends this loop
        while True:
            amount = self._prompt_withdrawal_amount()
            if amount is None:
                self._terminal.display_message("\nCanceling transaction...\n")
                return self._record(
                    account_number, TransactionType.WITHDRAWAL, TransactionStatus.CANCELLED
                )

            request = TransactionRequest(
                kind=TransactionType.WITHDRAWAL,
                account_number=account_number,
                amount=Decimal(amount),
            )
            try:
                record = self.execute(request)
            except InsufficientFunds:
                self._terminal.display_message("\nInsufficient funds in your account.\n")
            except InsufficientInventory:
                self._terminal.display_message("\nInsufficient cash available in the ATM.\n")
            except ValidationError:
                self._terminal.display_message("\nThat amount cannot be dispensed.\n")
            else:
                self._terminal.display_message(
                    "\nYour cash has been dispensed. Please take your cash now.\n"
                )
                return record

    def _prompt_withdrawal_amount(self) -> Optional[int]:
        """Show the amount menu until a valid key is pressed; None means cancel."""
        while True:
            self._display_withdrawal_menu()
            try:
                return self._withdrawal_amount_for(self._terminal.read_integer())
            except InvalidSelection:
                self._terminal.display_message("\nInvalid selection. Try again.")

    def _display_withdrawal_menu(self) -> None:
        screen = self._terminal
        screen.display_message("\nWithdrawal menu:")
        for key, amount in enumerate(self._withdrawal_amounts, start=1):
            screen.display_message(f"\n{key} - ${amount}")
        screen.display_message(f"\n{self.cancel_option} - Cancel transaction")
        screen.display_message("\n\nChoose a withdrawal amount: ")

    def _withdrawal_amount_for(self, option: int) -> Optional[int]:
        if option == self.cancel_option:
            return None
        if 1 <= option <= len(self._withdrawal_amounts):
            return self._withdrawal_amounts[option - 1]
        raise InvalidSelection(option)

    def _perform_deposit(self, account_number: int) -> TransactionRecord:
        screen = self._terminal
        screen.display_message(
            "\nPlease enter a deposit amount in CENTS (or 0 to cancel): "
        )
        cents = screen.read_integer()

        if cents == DEPOSIT_CANCELED:
            screen.display_line("\nCanceling transaction...")
            return self._record(
                account_number, TransactionType.DEPOSIT, TransactionStatus.CANCELLED
            )
        if cents < 0 or cents > MAX_DEPOSIT_CENTS:
            screen.display_line("\nInvalid deposit amount. Canceling transaction...")
            return self._record(
                account_number,
                TransactionType.DEPOSIT,
                TransactionStatus.CANCELLED,
                message="INVALID_AMOUNT",
            )

        amount = cents_to_dollars(cents)
        screen.display_message("\nPlease insert a deposit envelope containing ")
        screen.display_amount(amount)
        screen.display_line(".")

        request = TransactionRequest(
            kind=TransactionType.DEPOSIT,
            account_number=account_number,
            amount=amount,
        )
        try:
            record = self.execute(request)
        except EnvelopeNotReceived as e:
            screen.display_line(
                "\nYou did not insert an envelope, so the ATM has canceled your transaction."
            )
            return e.record

        screen.display_line(PENDING_DEPOSIT_NOTICE)
        return record

    def _record(
        self,
        account_number: int,
        kind: TransactionType,
        status: TransactionStatus,
        amount: Optional[Decimal] = None,
        message: Optional[str] = None,
        balance: Optional[BalanceSnapshot] = None,
    ) -> TransactionRecord:
        record = TransactionRecord(
            record_id=str(uuid.uuid4()),
            account_number=account_number,
            kind=kind,
            status=status,
            amount=amount,
            message=message,
            balance=balance,
            recorded_at_est=now_eastern(),
        )
        logger.info(
            "Transaction %s %s for account %s (amount=%s)",
            kind.value,
            status.value,
            account_number,
            amount,
        )
        return self._journal_repo.append(record)
