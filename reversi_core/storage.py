from __future__ import annotations

import logging
import os
import tempfile

from .errors import DimensionMismatchError, FinishedGameError, FormatError, PersistenceError, ReversiError
from .serializer import decode, encode
from .state import GameState

logger = logging.getLogger(__name__)


def _ensure_save_dir(path: str) -> None:
    """Ensures the directory for the save file exists before writing."""
    directory = os.path.dirname(path)
    if directory and not os.path.exists(directory):
        os.makedirs(directory, exist_ok=True)


def save_game(path: str, state: GameState) -> None:
    """Writes the game to `path` atomically: a temp file in the same directory replaces the old save."""
    try:
        _ensure_save_dir(path)
        fd, tmp_path = tempfile.mkstemp(prefix=".reversi-", dir=os.path.dirname(path) or ".")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(encode(state))
            os.replace(tmp_path, path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
    except OSError as e:
        raise PersistenceError("write", path, e) from e


def read_game(path: str) -> GameState:
    """Reads and decodes the save file. Decoding problems surface as FormatError."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise FormatError(f"save file is not valid UTF-8: {e}") from e
    except OSError as e:
        raise PersistenceError("read", path, e) from e
    return decode(text)


def load_game(path: str, width: int, height: int) -> GameState:
    """Reads a save and checks it can be resumed on a `width` x `height` board."""
    state = read_game(path)
    if state.turn is None:
        raise FinishedGameError(path)
    if not state.board.has_shape(width, height):
        rows = [len(row) for row in state.board.rows]
        raise DimensionMismatchError((width, height), f"rows of widths {rows}")
    return state


def load_or_new_game(path: str, width: int = 8, height: int = 8) -> GameState:
    """Restores the saved game, or starts a fresh one when there is no usable save."""
    if not os.path.exists(path):
        logger.info("No saved game at %s, starting a new game", path)
        return GameState.new_game(width, height)
    try:
        state = load_game(path, width, height)
    except ReversiError as e:
        logger.warning("Ignoring saved game: %s", e)
        return GameState.new_game(width, height)
    logger.info("Restored game from %s", path)
    return state
