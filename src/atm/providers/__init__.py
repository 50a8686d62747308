"""Terminal and hardware providers module."""

from atm.providers.terminal import Terminal, format_amount
from atm.providers.console_terminal import ConsoleTerminal
from atm.providers.deposit_slot import DepositReceiver, SimulatedDepositSlot

__all__ = [
    "Terminal",
    "format_amount",
    "ConsoleTerminal",
    "DepositReceiver",
    "SimulatedDepositSlot",
]
