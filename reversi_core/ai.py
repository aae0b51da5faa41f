from __future__ import annotations

import random
from typing import Optional

from .board import Coord
from .moves import valid_moves
from .state import GameState, Player


class ManualAgent:
    """The move comes from outside (a click, a typed coordinate), so there is nothing to choose here."""

    def choose_move(self, state: GameState) -> Optional[Coord]:
        return None


class RandomAgent:
    """Picks uniformly at random among the legal moves of the side to move."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    def choose_move(self, state: GameState) -> Optional[Coord]:
        if state.turn is None:
            return None
        moves = valid_moves(state, state.turn)
        if not moves:
            return None
        return self.rng.choice(moves)


def agent_for(mode: Player, rng: Optional[random.Random] = None):
    if mode == Player.AUTOMATIC:
        return RandomAgent(rng)
    return ManualAgent()
