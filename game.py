from __future__ import annotations

# Facade module that re-exports the Reversi core for the Flask app, scripts and tests.
# Single-responsibility modules live under reversi_core/*.

from reversi_core.ai import ManualAgent, RandomAgent, agent_for
from reversi_core.board import Board, Cell, Coord
from reversi_core.disk import SIDES, Disk, disk_from_symbol, disk_symbol
from reversi_core.errors import (
    DimensionMismatchError,
    FinishedGameError,
    FormatError,
    GameOverError,
    IllegalMoveError,
    NotYourTurnError,
    PersistenceError,
    ReversiError,
)
from reversi_core.moves import (
    DIRECTIONS,
    GameResult,
    MoveResult,
    TurnOutcome,
    TurnResult,
    advance_turn,
    apply_move,
    can_place_disk,
    count_disks,
    flipped_disk_coordinates,
    game_result,
    has_valid_move,
    side_with_more_disks,
    valid_moves,
)
from reversi_core.serializer import decode, encode
from reversi_core.state import GameState, Player
from reversi_core.storage import load_game, load_or_new_game, read_game, save_game

__all__ = [
    "Board", "Cell", "Coord",
    "Disk", "SIDES", "disk_symbol", "disk_from_symbol",
    "GameState", "Player",
    "DIRECTIONS", "GameResult", "MoveResult", "TurnOutcome", "TurnResult",
    "flipped_disk_coordinates", "can_place_disk", "valid_moves", "has_valid_move",
    "apply_move", "advance_turn", "count_disks", "side_with_more_disks", "game_result",
    "encode", "decode",
    "save_game", "read_game", "load_game", "load_or_new_game",
    "ManualAgent", "RandomAgent", "agent_for",
    "ReversiError", "IllegalMoveError", "GameOverError", "NotYourTurnError",
    "FinishedGameError", "FormatError", "DimensionMismatchError", "PersistenceError",
]
