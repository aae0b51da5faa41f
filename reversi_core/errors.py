from __future__ import annotations

from typing import Optional


class ReversiError(Exception):
    """Base class for every error raised by the Reversi core."""


class IllegalMoveError(ReversiError):
    """Raised when a disk cannot be placed: the cell is occupied or nothing would flip."""

    def __init__(self, disk, x: int, y: int) -> None:
        super().__init__(f"cannot place {disk.name.lower()} at ({x}, {y})")
        self.disk = disk
        self.x = x
        self.y = y


class GameOverError(ReversiError):
    """Raised when a move or turn advance is requested after the game has ended."""


class NotYourTurnError(ReversiError):
    """Raised when input arrives for a side that is not on turn or is not manual."""


class FormatError(ReversiError, ValueError):
    """Malformed serialized game text."""


class DimensionMismatchError(ReversiError):
    """A decoded board does not have the dimensions the driver expects."""

    def __init__(self, expected: tuple, actual: str) -> None:
        super().__init__(f"expected a {expected[0]}x{expected[1]} board, got {actual}")
        self.expected = expected
        self.actual = actual


class FinishedGameError(ReversiError):
    """A saved game has already ended and cannot be resumed."""

    def __init__(self, path: str) -> None:
        super().__init__(f"saved game at {path} has already ended")
        self.path = path


class PersistenceError(ReversiError):
    """Reading or writing the save slot failed. `cause` holds the underlying OSError."""

    def __init__(self, kind: str, path: str, cause: Optional[BaseException] = None) -> None:
        msg = f"failed to {kind} game at {path}"
        if cause is not None:
            msg += f": {cause}"
        super().__init__(msg)
        self.kind = kind
        self.path = path
        self.cause = cause
