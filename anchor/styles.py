"""Coloured log-level badges for terminal output."""

from __future__ import annotations

from enum import Enum

_BOLD = "\x1b[1m"
_RESET = "\x1b[0m"
_FG_BRIGHT_BLACK = "\x1b[90m"
_FG_DEFAULT = "\x1b[39m"
_BG_DEFAULT = "\x1b[49m"


class LogLevel(Enum):
    """Severity of a message, rendered as a coloured badge."""

    INFO = ("[INFO]", 106)
    ERROR = ("[ERR]", 101)
    SUCCESS = ("[SUCCESS]", 102)

    @property
    def label(self) -> str:
        return self.value[0]

    def fmt(self) -> str:
        """Return the badge: bold bright-black text on a bright background."""
        label, background = self.value
        return (
            f"{_BOLD}\x1b[{background}m{_FG_BRIGHT_BLACK}{label}"
            f"{_FG_DEFAULT}{_BG_DEFAULT}{_RESET}"
        )

    def __str__(self) -> str:
        return self.fmt()