"""Cash dispenser inventory."""

import logging
import threading
from decimal import Decimal

from atm.core.exceptions import InsufficientInventory, ValidationError

logger = logging.getLogger(__name__)


class CashInventory:
    """
    Tracks the bills left in the dispenser.

    Amounts are whole dollars. Bills needed for an amount are computed with
    integer division, so an amount that is not a multiple of the denomination
    silently loses its remainder; withdrawals reject such amounts before
    reaching the dispenser.
    The stock is never replenished while the terminal runs.
    """

    def __init__(self, initial_count: int = 500, denomination: int = 20):
        if initial_count < 0:
            raise ValidationError("Initial bill count cannot be negative")
        if denomination <= 0:
            raise ValidationError("Denomination must be positive")
        self._count = initial_count
        self._denomination = denomination
        self._lock = threading.Lock()

    @property
    def count(self) -> int:
        """Number of bills remaining."""
        return self._count

    @property
    def denomination(self) -> int:
        return self._denomination

    def total_value(self) -> Decimal:
        """Dollar value of the bills remaining."""
        return Decimal(self._count * self._denomination)

    def is_sufficient(self, amount: int) -> bool:
        """Return True if the dispenser holds enough bills for amount."""
        if amount < 0:
            raise ValidationError(f"Amount cannot be negative, got {amount}")
        return self._count * self._denomination >= amount

    def dispense(self, amount: int) -> None:
        """
        Release bills for amount.

        Raises InsufficientInventory instead of letting the count go negative;
        callers are still expected to ask is_sufficient() first.
        """
        bills = self._bills_required(amount)
        if amount % self._denomination:
            logger.warning(
                "Dispense amount %s is not a multiple of %s; remainder dropped",
                amount,
                self._denomination,
            )
        with self._lock:
            if bills > self._count:
                raise InsufficientInventory(str(amount), str(self.total_value()))
            self._count -= bills
        logger.info("Dispensed %s bills, %s remaining", bills, self._count)

    def _bills_required(self, amount: int) -> int:
        if amount < 0:
            raise ValidationError(f"Amount cannot be negative, got {amount}")
        return int(amount) // self._denomination
