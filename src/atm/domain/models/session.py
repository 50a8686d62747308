"""Session domain model."""

from dataclasses import dataclass
from typing import Optional

from atm.domain.models.enums import SessionState


@dataclass
class Session:
    """State of the customer currently at the terminal."""

    authenticated: bool = False
    account_number: Optional[int] = None
    state: SessionState = SessionState.UNAUTHENTICATED

    def begin_authentication(self) -> None:
        self.state = SessionState.AUTHENTICATING

    def authenticate(self, account_number: int) -> None:
        self.authenticated = True
        self.account_number = account_number
        self.state = SessionState.AUTHENTICATED

    def reset(self) -> None:
        self.authenticated = False
        self.account_number = None
        self.state = SessionState.UNAUTHENTICATED
