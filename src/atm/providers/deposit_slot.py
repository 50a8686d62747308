"""Deposit slot protocol and simulated implementation."""

from typing import Protocol


class DepositReceiver(Protocol):
    """
    Protocol for the envelope slot.

    Hardware-backed implementations may report that no envelope arrived;
    the transaction is then cancelled without touching the ledger.
    """

    def receive_envelope(self) -> bool:
        """Wait for the envelope and return True if it was received."""
        ...


class SimulatedDepositSlot:
    """Software stand-in for the slot; answers with a fixed result."""

    def __init__(self, accept: bool = True):
        self._accept = accept

    def receive_envelope(self) -> bool:
        """Return the configured answer (received by default)."""
        return self._accept
