from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Optional

from .board import Board
from .disk import Disk


class Player(IntEnum):
    """How a side chooses its moves. The value is the digit used in save files."""
    MANUAL = 0
    AUTOMATIC = 1


@dataclass(frozen=True)
class GameState:
    """Represents a whole game: side to move (None once the game is over), both player modes and the board.

    player1 plays dark, player2 plays light.
    """
    turn: Optional[Disk]
    player1: Player
    player2: Player
    board: Board

    @classmethod
    def new_game(
        cls,
        width: int = 8,
        height: int = 8,
        player1: Player = Player.MANUAL,
        player2: Player = Player.MANUAL,
    ) -> 'GameState':
        return cls(turn=Disk.DARK, player1=player1, player2=player2, board=Board.standard(width, height))

    @property
    def is_over(self) -> bool:
        return self.turn is None

    def player_for(self, side: Disk) -> Player:
        return self.player1 if side is Disk.DARK else self.player2

    def current_player(self) -> Optional[Player]:
        if self.turn is None:
            return None
        return self.player_for(self.turn)

    def with_turn(self, next_turn: Optional[Disk]) -> 'GameState':
        return replace(self, turn=next_turn)

    def with_player(self, side: Disk, mode: Player) -> 'GameState':
        if side is Disk.DARK:
            return replace(self, player1=mode)
        return replace(self, player2=mode)

    def with_board(self, board: Board) -> 'GameState':
        return replace(self, board=board)
