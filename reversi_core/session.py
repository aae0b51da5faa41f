from __future__ import annotations

import logging
import random
import threading
from typing import Callable, Dict, List, Optional, Tuple

from .ai import RandomAgent
from .board import Coord
from .disk import SIDES, Disk
from .errors import GameOverError, NotYourTurnError, PersistenceError
from .moves import TurnOutcome, advance_turn, apply_move, game_result, has_valid_move
from .state import GameState, Player
from .storage import load_or_new_game, save_game

logger = logging.getLogger(__name__)

Listener = Callable[[GameState], None]


class Canceller:
    """One-shot cancellation flag with an optional cleanup callback."""

    def __init__(self, body: Optional[Callable[[], None]] = None) -> None:
        self._cancelled = False
        self._body = body

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        if self._cancelled:
            return
        self._cancelled = True
        if self._body is not None:
            self._body()


class GameSession:
    """Drives one game: holds the current state, saves it after every change and notifies listeners.

    Automatic players move after `auto_delay` seconds on a background timer.
    With `auto_delay=None` nothing is scheduled and the caller drives automatic
    turns through `play_automatic_turn`.
    """

    def __init__(
        self,
        save_path: Optional[str],
        width: int = 8,
        height: int = 8,
        auto_delay: Optional[float] = 2.0,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.save_path = save_path
        self.width = width
        self.height = height
        self.auto_delay = auto_delay
        self.agent = RandomAgent(rng)
        self.pending_pass = False
        self.last_flipped: Tuple[Coord, ...] = ()
        self._state = GameState.new_game(width, height)
        self._lock = threading.RLock()
        self._listeners: List[Listener] = []
        self._player_cancellers: Dict[Disk, Canceller] = {}

    @property
    def state(self) -> GameState:
        return self._state

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def start(self) -> None:
        """Restores the saved game (or starts a new one) and waits for the side to move."""
        with self._lock:
            if self.save_path:
                state = load_or_new_game(self.save_path, self.width, self.height)
            else:
                state = GameState.new_game(self.width, self.height)
            self._commit(state)
            if state.turn is not None and not has_valid_move(state, state.turn):
                # a restored side on turn may be stuck; resolve it like a finished turn
                self.next_turn()
            else:
                self.wait_for_player()

    def _commit(self, state: GameState) -> None:
        self._state = state
        if self.save_path:
            try:
                save_game(self.save_path, state)
            except PersistenceError as e:
                logger.warning("Could not save game: %s", e)
        for listener in list(self._listeners):
            listener(state)

    # ---------- moves ----------

    def _check_can_move(self, expected: Player) -> Disk:
        turn = self._state.turn
        if turn is None:
            raise GameOverError("the game is over")
        if self.pending_pass:
            raise NotYourTurnError("the pass has not been acknowledged yet")
        if self._state.player_for(turn) != expected:
            raise NotYourTurnError(f"{turn.name.lower()} is not a {expected.name.lower()} player")
        return turn

    def _place(self, disk: Disk, x: int, y: int) -> Tuple[Coord, ...]:
        result = apply_move(self._state, disk, x, y)
        logger.debug("%s plays (%d, %d), flipping %d", disk.name.lower(), x, y, len(result.flipped))
        self.last_flipped = result.flipped
        self._commit(result.state)
        self.next_turn()
        return result.flipped

    def place_disk(self, x: int, y: int) -> Tuple[Coord, ...]:
        """Plays a manual move for the side on turn. Returns the flipped coordinates in order."""
        with self._lock:
            turn = self._check_can_move(Player.MANUAL)
            return self._place(turn, x, y)

    def play_automatic_turn(self) -> Optional[Coord]:
        """Lets the automatic player on turn move right away, cancelling its scheduled move."""
        with self._lock:
            turn = self._check_can_move(Player.AUTOMATIC)
            self._cancel_player(turn)
            move = self.agent.choose_move(self._state)
            if move is None:
                self.next_turn()
                return None
            self._place(turn, *move)
            return move

    # ---------- turn flow ----------

    def next_turn(self) -> TurnOutcome:
        """Ends the current player's turn: advance, pass, or finish the game."""
        with self._lock:
            if self._state.turn is None:
                return TurnOutcome.GAME_OVER
            result = advance_turn(self._state)
            self._commit(result.state)
            if result.outcome is TurnOutcome.PASSED:
                self.pending_pass = True
                logger.info("%s cannot move and passes", result.state.turn.flipped.name.lower())
            elif result.outcome is TurnOutcome.ADVANCED:
                self.wait_for_player()
            else:
                final = game_result(result.state)
                logger.info("Game over: dark %d, light %d", final.dark, final.light)
            return result.outcome

    def acknowledge_pass(self) -> None:
        with self._lock:
            if not self.pending_pass:
                return
            self.pending_pass = False
            self.wait_for_player()

    def wait_for_player(self) -> None:
        """Schedules the automatic player's move if it is on turn; manual players need nothing."""
        with self._lock:
            turn = self._state.turn
            if turn is None or self.pending_pass or self.auto_delay is None:
                return
            if self._state.player_for(turn) != Player.AUTOMATIC:
                return
            if turn in self._player_cancellers:
                return
            self._schedule_automatic_move(turn)

    def _schedule_automatic_move(self, side: Disk) -> None:
        def fire() -> None:
            with self._lock:
                if canceller.is_cancelled:
                    return
                self._player_cancellers.pop(side, None)
                if self._state.turn is not side or self.pending_pass:
                    return
                if self._state.player_for(side) != Player.AUTOMATIC:
                    return
                self.play_automatic_turn()

        timer = threading.Timer(self.auto_delay, fire)
        timer.daemon = True
        canceller = Canceller(timer.cancel)
        self._player_cancellers[side] = canceller
        timer.start()

    def has_scheduled_move(self, side: Disk) -> bool:
        with self._lock:
            return side in self._player_cancellers

    def _cancel_player(self, side: Disk) -> None:
        canceller = self._player_cancellers.pop(side, None)
        if canceller is not None:
            canceller.cancel()

    # ---------- controls ----------

    def set_player_mode(self, side: Disk, mode: Player) -> None:
        with self._lock:
            self._cancel_player(side)
            self._commit(self._state.with_player(side, mode))
            if self._state.turn is side and mode == Player.AUTOMATIC:
                self.wait_for_player()

    def reset(self) -> None:
        """Abandons the current game and starts a new one."""
        with self._lock:
            self.close()
            self.pending_pass = False
            self.last_flipped = ()
            logger.info("Starting a new game")
            self._commit(GameState.new_game(self.width, self.height))
            self.wait_for_player()

    def close(self) -> None:
        with self._lock:
            for side in SIDES:
                self._cancel_player(side)
