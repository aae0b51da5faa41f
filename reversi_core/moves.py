from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .board import Coord
from .disk import Disk
from .errors import GameOverError, IllegalMoveError
from .state import GameState

# Fixed scan order keeps flip lists stable for replay and animation.
DIRECTIONS: Tuple[Coord, ...] = (
    (-1, -1), (0, -1), (1, -1),
    (1, 0), (1, 1), (0, 1),
    (-1, 1), (-1, 0),
)


class TurnOutcome(Enum):
    ADVANCED = "advanced"
    PASSED = "passed"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class MoveResult:
    state: GameState
    flipped: Tuple[Coord, ...]


@dataclass(frozen=True)
class TurnResult:
    state: GameState
    outcome: TurnOutcome


@dataclass(frozen=True)
class GameResult:
    """Final score. `winner` is None for a tie."""
    winner: Optional[Disk]
    dark: int
    light: int

    @property
    def is_tie(self) -> bool:
        return self.winner is None


def _ray_flips(state: GameState, disk: Disk, x: int, y: int, dx: int, dy: int) -> List[Coord]:
    """Walks from (x, y) along (dx, dy); the run of opposite disks counts only if a `disk` closes it."""
    board = state.board
    run: List[Coord] = []
    cx, cy = x + dx, y + dy
    while board.contains(cx, cy):
        cell = board.disk_at(cx, cy)
        if cell is None:
            return []
        if cell is disk:
            return run
        run.append((cx, cy))
        cx += dx
        cy += dy
    return []


def flipped_disk_coordinates(state: GameState, disk: Disk, x: int, y: int) -> List[Coord]:
    """Collects the coordinates that placing `disk` at (x, y) would flip, direction by direction."""
    board = state.board
    if not board.contains(x, y) or board.disk_at(x, y) is not None:
        return []
    flips: List[Coord] = []
    for dx, dy in DIRECTIONS:
        flips.extend(_ray_flips(state, disk, x, y, dx, dy))
    return flips


def can_place_disk(state: GameState, disk: Disk, x: int, y: int) -> bool:
    return bool(flipped_disk_coordinates(state, disk, x, y))


def valid_moves(state: GameState, side: Disk) -> List[Coord]:
    """Calculates all legal placements for `side`, row-major."""
    return [(x, y) for (x, y) in state.board.coords() if can_place_disk(state, side, x, y)]


def has_valid_move(state: GameState, side: Disk) -> bool:
    return any(can_place_disk(state, side, x, y) for (x, y) in state.board.coords())


def apply_move(state: GameState, disk: Disk, x: int, y: int) -> MoveResult:
    """Places `disk` at (x, y) and flips the captured disks, returning a new state.

    The turn is left as is; call `advance_turn` on the result.
    """
    if state.turn is None:
        raise GameOverError("the game is over")
    flips = flipped_disk_coordinates(state, disk, x, y)
    if not flips:
        raise IllegalMoveError(disk, x, y)
    board = state.board.with_disks(disk, [(x, y)] + flips)
    return MoveResult(state=state.with_board(board), flipped=tuple(flips))


def advance_turn(state: GameState) -> TurnResult:
    """Hands the turn to the opponent, or reports a pass or the end of the game."""
    current = state.turn
    if current is None:
        raise GameOverError("the game is over")
    nxt = current.flipped
    if has_valid_move(state, nxt):
        return TurnResult(state.with_turn(nxt), TurnOutcome.ADVANCED)
    if has_valid_move(state, current):
        return TurnResult(state, TurnOutcome.PASSED)
    return TurnResult(state.with_turn(None), TurnOutcome.GAME_OVER)


def count_disks(state: GameState, disk: Disk) -> int:
    return state.board.count_disks(disk)


def side_with_more_disks(state: GameState) -> Optional[Disk]:
    """Returns the side with the majority of disks, or None on a tie."""
    dark = count_disks(state, Disk.DARK)
    light = count_disks(state, Disk.LIGHT)
    if dark == light:
        return None
    return Disk.DARK if dark > light else Disk.LIGHT


def game_result(state: GameState) -> Optional[GameResult]:
    """Final score once the game is over, None while it is still running."""
    if state.turn is not None:
        return None
    return GameResult(
        winner=side_with_more_disks(state),
        dark=count_disks(state, Disk.DARK),
        light=count_disks(state, Disk.LIGHT),
    )
