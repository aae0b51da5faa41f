from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

from .errors import FormatError


class Disk(Enum):
    """One of the two sides. Dark always moves first."""
    DARK = "x"
    LIGHT = "o"

    @property
    def flipped(self) -> 'Disk':
        return Disk.LIGHT if self is Disk.DARK else Disk.DARK

    @property
    def symbol(self) -> str:
        return self.value


SIDES: Tuple[Disk, Disk] = (Disk.DARK, Disk.LIGHT)

EMPTY_SYMBOL = "-"


def disk_symbol(disk: Optional[Disk]) -> str:
    """Save-format symbol for a cell or turn; '-' stands for no disk."""
    return EMPTY_SYMBOL if disk is None else disk.symbol


def disk_from_symbol(symbol: str) -> Optional[Disk]:
    """Inverse of `disk_symbol`. Unknown symbols raise FormatError."""
    if symbol == EMPTY_SYMBOL:
        return None
    try:
        return Disk(symbol)
    except ValueError:
        raise FormatError(f"unknown disk symbol {symbol!r}") from None
