#!/usr/bin/env python3
"""
Console Output
==============
Rich-based printing of generated passwords, either one per line or laid
out in columns sized to the terminal like ``pwgen`` does.

Usage:
    from phonopass.ui import PasswordPrinter

    printer = PasswordPrinter()
    printer.print_passwords(passwords, length=8)
"""

import logging
from typing import List, Optional, Sequence

from rich.console import Console
from rich.logging import RichHandler


class PasswordPrinter:
    """Writes passwords to a rich console."""

    def __init__(self, columns: Optional[bool] = None, console: Optional[Console] = None):
        """
        columns: force column layout on (True) or off (False). ``None``
        uses columns only when writing to a terminal.
        """
        self.console = console or Console(highlight=False)
        if columns is None:
            columns = self.console.is_terminal
        self.columns = columns

    @property
    def width(self) -> int:
        return self.console.width

    def column_count(self, length: int) -> int:
        """Number of passwords of ``length`` characters that fit on a line."""
        if not self.columns:
            return 1
        return max(self.width // (length + 1), 1)

    def default_count(self, length: int, rows: int) -> int:
        """How many passwords to print when the user did not say."""
        if not self.columns:
            return 1
        return self.column_count(length) * rows

    def format_lines(self, passwords: Sequence[str], length: int) -> List[str]:
        per_line = self.column_count(length)
        return [' '.join(passwords[i:i + per_line])
                for i in range(0, len(passwords), per_line)]

    def print_passwords(self, passwords: Sequence[str], length: int):
        # out() skips markup parsing; passwords may contain '[' and ']'
        for line in self.format_lines(passwords, length):
            self.console.out(line, highlight=False)


def configure_logging(verbose: bool = False):
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=verbose)],
        force=True,
    )
