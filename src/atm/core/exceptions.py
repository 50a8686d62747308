"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        self.record = None
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} not found: {identifier}", code="NOT_FOUND")


class AccountNotFound(NotFoundError):
    """Raised when an account number does not resolve in the ledger."""

    def __init__(self, account_number: int):
        super().__init__("Account", str(account_number))
        self.code = "ACCOUNT_NOT_FOUND"
        self.account_number = account_number


class AuthenticationFailed(AppError):
    """Raised when an account number / PIN pair does not match."""

    def __init__(self, account_number: int):
        super().__init__(
            f"Authentication failed for account {account_number}",
            code="AUTHENTICATION_FAILED",
        )
        self.account_number = account_number


class InsufficientFunds(AppError):
    """Raised when a withdrawal exceeds the available balance."""

    def __init__(self, requested: str, available: str):
        super().__init__(
            f"Insufficient funds: requested {requested}, available {available}",
            code="INSUFFICIENT_FUNDS",
        )


class InsufficientInventory(AppError):
    """Raised when the cash dispenser cannot cover the requested amount."""

    def __init__(self, requested: str, available: str):
        super().__init__(
            f"Insufficient cash in dispenser: requested {requested}, available {available}",
            code="INSUFFICIENT_INVENTORY",
        )


class EnvelopeNotReceived(AppError):
    """Raised when the deposit slot reports no envelope."""

    def __init__(self, account_number: int):
        super().__init__(
            f"No deposit envelope received for account {account_number}",
            code="ENVELOPE_NOT_RECEIVED",
        )


class InvalidSelection(AppError):
    """Raised when a menu choice is outside the offered options."""

    def __init__(self, selection: int):
        super().__init__(f"Invalid selection: {selection}", code="INVALID_SELECTION")
        self.selection = selection


class InputFormatError(AppError):
    """Raised by a terminal when whole-number input could not be read."""

    def __init__(self, raw: str):
        super().__init__(f"Expected a whole number, got {raw!r}", code="INPUT_FORMAT_ERROR")
        self.raw = raw
