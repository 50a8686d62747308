"""Core utilities and shared functionality."""

from atm.core.timezone import (
    now_eastern,
    EASTERN_TZ,
)
from atm.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    AccountNotFound,
    AuthenticationFailed,
    InsufficientFunds,
    InsufficientInventory,
    EnvelopeNotReceived,
    InvalidSelection,
    InputFormatError,
)

__all__ = [
    "now_eastern",
    "EASTERN_TZ",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "AccountNotFound",
    "AuthenticationFailed",
    "InsufficientFunds",
    "InsufficientInventory",
    "EnvelopeNotReceived",
    "InvalidSelection",
    "InputFormatError",
]
