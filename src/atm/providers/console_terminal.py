"""Console-backed terminal (stdin keypad, stdout screen)."""

import sys
from decimal import Decimal
from typing import Optional, TextIO

from atm.core.exceptions import InputFormatError
from atm.providers.terminal import format_amount


class ConsoleTerminal:
    """Terminal that reads whole numbers from a text stream, one per line."""

    def __init__(
        self,
        stream_in: Optional[TextIO] = None,
        stream_out: Optional[TextIO] = None,
    ):
        self._in = stream_in or sys.stdin
        self._out = stream_out or sys.stdout

    def display_message(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def display_line(self, text: str) -> None:
        self._out.write(text + "\n")
        self._out.flush()

    def display_amount(self, amount: Decimal) -> None:
        self.display_message(format_amount(amount))

    def read_integer(self) -> int:
        line = self._in.readline()
        if not line:
            raise EOFError("keypad input closed")
        raw = line.strip()
        try:
            return int(raw)
        except ValueError:
            raise InputFormatError(raw) from None
