from __future__ import annotations

from typing import List

from .board import Board
from .disk import disk_from_symbol, disk_symbol
from .errors import FormatError
from .state import GameState, Player

# Save format:
#   line 0:    <turn><player1 mode><player2 mode>, e.g. "x01"
#   line 1..H: one symbol per cell, 'x' dark, 'o' light, '-' empty


def _player_from_digit(ch: str) -> Player:
    if not ch.isdigit():
        raise FormatError(f"bad player mode {ch!r}")
    try:
        return Player(int(ch))
    except ValueError:
        raise FormatError(f"unknown player mode {ch!r}") from None


def encode(state: GameState) -> str:
    """Serializes a game state. Never fails."""
    header = disk_symbol(state.turn) + str(int(state.player1)) + str(int(state.player2))
    lines: List[str] = [header]
    lines.extend("".join(disk_symbol(cell) for cell in row) for row in state.board.rows)
    return "\n".join(lines)


def decode(text: str) -> GameState:
    """Parses serialized text into a GameState.

    Empty lines are skipped. Row widths are not checked against each other;
    callers that expect a particular board size must verify it themselves.
    """
    lines = [line for line in text.split("\n") if line]
    if not lines:
        raise FormatError("missing header line")
    header = lines[0]
    if len(header) < 3:
        raise FormatError(f"header too short: {header!r}")
    turn = disk_from_symbol(header[0])
    player1 = _player_from_digit(header[1])
    player2 = _player_from_digit(header[2])
    board = Board.from_rows([disk_from_symbol(ch) for ch in line] for line in lines[1:])
    return GameState(turn=turn, player1=player1, player2=player2, board=board)
