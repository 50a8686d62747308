"""View models for service outputs."""

from atm.domain.views.balance import BalanceSnapshot

__all__ = [
    "BalanceSnapshot",
]
