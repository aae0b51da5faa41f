from __future__ import annotations

import argparse
import random
from typing import List, Optional

from .board import Coord
from .config import configure_logging, load_settings
from .disk import SIDES, Disk
from .errors import ReversiError
from .moves import count_disks, game_result, valid_moves
from .session import GameSession
from .state import Player

_MODES = {"manual": Player.MANUAL, "automatic": Player.AUTOMATIC}


def parse_move(text: str) -> Optional[Coord]:
    """Parses "x,y" or "x y" into a coordinate; None when the text is not two integers."""
    sep = "," if "," in text else " "
    parts = [t for t in text.strip().split(sep) if t.strip() != ""]
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def _side_label(disk: Disk) -> str:
    return f"{disk.name.lower()} ({disk.symbol})"


def render(session: GameSession) -> str:
    state = session.state
    hints = valid_moves(state, state.turn) if state.turn is not None else []
    lines: List[str] = [state.board.pretty(hints)]
    lines.append(
        f"dark (x): {count_disks(state, Disk.DARK)}  light (o): {count_disks(state, Disk.LIGHT)}"
    )
    return "\n".join(lines)


def _result_line(session: GameSession) -> str:
    result = game_result(session.state)
    if result is None:
        return ""
    if result.is_tie:
        return "Tied"
    return f"{_side_label(result.winner)} won"


def _prompt_manual_move(session: GameSession) -> bool:
    """Asks for a move until one is played. Returns False when the user quits."""
    turn = session.state.turn
    while True:
        text = input(f"{_side_label(turn)} to move, enter x,y (r = reset, q = quit): ").strip()
        if text.lower() in {"q", "quit", "exit"}:
            return False
        if text.lower() in {"r", "reset"}:
            session.reset()
            return True
        move = parse_move(text)
        if move is None:
            print("Could not parse. Try again.")
            continue
        try:
            session.place_disk(*move)
        except ReversiError as e:
            print(f"Illegal move: {e}")
            continue
        return True


def play(
    session: GameSession,
    player1: Optional[Player] = None,
    player2: Optional[Player] = None,
    fresh: bool = False,
) -> None:
    """Runs the console game loop until the game ends or the user quits."""
    session.start()
    if fresh:
        session.reset()
    for side, mode in zip(SIDES, (player1, player2)):
        if mode is not None:
            session.set_player_mode(side, mode)
    while True:
        print(render(session))
        state = session.state
        if state.turn is None:
            print(_result_line(session))
            return
        if session.pending_pass:
            print(f"{_side_label(state.turn.flipped)} cannot place a disk. Pass.")
            session.acknowledge_pass()
            continue
        if state.current_player() == Player.AUTOMATIC:
            move = session.play_automatic_turn()
            if move is None:
                print(f"{_side_label(state.turn)} cannot place a disk.")
            else:
                print(f"{_side_label(state.turn)} plays {move[0]},{move[1]}")
            continue
        if not _prompt_manual_move(session):
            return


def main(argv: Optional[List[str]] = None) -> None:
    settings = load_settings()
    parser = argparse.ArgumentParser(description='Play Reversi in the terminal')
    parser.add_argument('--save', default=settings.save_path, help='Save file path')
    parser.add_argument('--width', type=int, default=settings.board_width, help='Board width')
    parser.add_argument('--height', type=int, default=settings.board_height, help='Board height')
    parser.add_argument('--player1', choices=sorted(_MODES), default=None, help='Mode of the dark player')
    parser.add_argument('--player2', choices=sorted(_MODES), default=None, help='Mode of the light player')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for automatic players')
    parser.add_argument('--new', action='store_true', help='Ignore the saved game and start over')
    parser.add_argument('--verbose', action='store_true', help='Log every move')
    args = parser.parse_args(argv)

    configure_logging("DEBUG" if args.verbose else settings.log_level)
    session = GameSession(
        args.save,
        width=args.width,
        height=args.height,
        auto_delay=None,
        rng=random.Random(args.seed),
    )
    try:
        play(
            session,
            player1=_MODES.get(args.player1),
            player2=_MODES.get(args.player2),
            fresh=args.new,
        )
    except (KeyboardInterrupt, EOFError):
        print("\nInterrupted.")
    finally:
        session.close()


if __name__ == '__main__':
    main()
