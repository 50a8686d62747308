"""Session controller: authentication loop and main menu."""

import logging
from typing import Optional

from atm.core.exceptions import AuthenticationFailed, InputFormatError, InvalidSelection
from atm.domain.models import MainMenuOption, Session
from atm.providers.terminal import Terminal
from atm.services.ledger_service import AccountLedger
from atm.services.transaction_engine import TransactionEngine

logger = logging.getLogger(__name__)


class SessionController:
    """
    Drives the terminal through one customer session after another.

    UNAUTHENTICATED -> AUTHENTICATING (prompt for account number and PIN)
    -> AUTHENTICATED (main menu loop) -> UNAUTHENTICATED on exit.

    Failed logins retry without limit. Malformed keypad input closes the
    current session instead of stopping the terminal.
    """

    def __init__(
        self,
        ledger: AccountLedger,
        engine: TransactionEngine,
        terminal: Terminal,
    ):
        self._ledger = ledger
        self._engine = engine
        self._terminal = terminal

    def run_forever(self) -> None:
        """Serve sessions until the process is stopped."""
        while True:
            self.run_session()

    def run_session(self) -> Optional[int]:
        """Serve one customer from welcome screen to goodbye; return the account served."""
        session = Session()
        try:
            while not session.authenticated:
                self._terminal.display_message("\nWelcome!")
                self.authenticate_user(session)
            logger.info("Session opened for account %s", session.account_number)
            self.perform_transactions(session)
        except InputFormatError as e:
            logger.warning("Closing session after bad keypad input: %s", e.message)
            self._terminal.display_line(
                "\nThat entry was not a whole number. Your session has been closed."
            )
        finally:
            closed_account = session.account_number
            session.reset()
        self._terminal.display_message("\nThank you! Goodbye!")
        logger.info("Session closed for account %s", closed_account)
        return closed_account

    def authenticate_user(self, session: Session) -> bool:
        """Prompt once for credentials; on success bind the account to the session."""
        session.begin_authentication()
        self._terminal.display_message("\nPlease enter your account number: ")
        account_number = self._terminal.read_integer()
        self._terminal.display_message("\nEnter your PIN: ")
        pin = self._terminal.read_integer()

        try:
            self._check_credentials(account_number, pin)
        except AuthenticationFailed:
            self._terminal.display_message(
                "Invalid account number or PIN. Please try again."
            )
            return False

        session.authenticate(account_number)
        return True

    def perform_transactions(self, session: Session) -> None:
        """Show the main menu and run transactions until the customer exits."""
        while True:
            selection = self.display_main_menu()
            try:
                option = self._menu_option(selection)
            except InvalidSelection:
                self._terminal.display_message(
                    "\nYou did not enter a valid selection. Try again."
                )
                continue

            if option == MainMenuOption.EXIT:
                self._terminal.display_message("\nExiting the system...")
                return
            self._engine.perform(option.transaction_type, session)

    def display_main_menu(self) -> int:
        """Show the main menu and return the raw keypad selection."""
        screen = self._terminal
        screen.display_message("\nMain menu:")
        screen.display_message("\n1 - View my balance")
        screen.display_message("\n2 - Withdraw cash")
        screen.display_message("\n3 - Deposit funds")
        screen.display_message("\n4 - Exit\n")
        screen.display_message("\nEnter a choice: ")
        return screen.read_integer()

    def _check_credentials(self, account_number: int, pin: int) -> None:
        if not self._ledger.authenticate(account_number, pin):
            raise AuthenticationFailed(account_number)

    @staticmethod
    def _menu_option(selection: int) -> MainMenuOption:
        try:
            return MainMenuOption(selection)
        except ValueError:
            raise InvalidSelection(selection) from None
