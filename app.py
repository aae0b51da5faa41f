from __future__ import annotations

import logging
import os
import threading
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, request

from reversi_core.config import configure_logging, load_settings
from reversi_core.disk import SIDES, Disk
from reversi_core.errors import GameOverError, IllegalMoveError, NotYourTurnError
from reversi_core.moves import count_disks, game_result, valid_moves
from reversi_core.serializer import encode
from reversi_core.session import GameSession
from reversi_core.state import GameState, Player

logger = logging.getLogger(__name__)

SETTINGS = load_settings()

app = Flask(__name__)

_session: Optional[GameSession] = None
_session_lock = threading.Lock()


def get_session() -> GameSession:
    """Returns the single game session, creating and starting it on first use."""
    global _session
    with _session_lock:
        if _session is None:
            _session = GameSession(
                SETTINGS.save_path,
                width=SETTINGS.board_width,
                height=SETTINGS.board_height,
                auto_delay=SETTINGS.auto_delay,
            )
            _session.start()
        return _session


def _disk_to_json(disk: Optional[Disk]) -> Optional[str]:
    return disk.name.lower() if disk is not None else None


def _mode_to_json(mode: Player) -> str:
    return mode.name.lower()


def _mode_from_json(value: Any) -> Player:
    if isinstance(value, str) and not value.isdigit():
        return Player[value.upper()]
    return Player(int(value))


def state_to_json(s: GameState, pending_pass: bool = False) -> Dict[str, Any]:
    result = game_result(s)
    moves: List[List[int]] = []
    if s.turn is not None:
        moves = [[x, y] for (x, y) in valid_moves(s, s.turn)]
    return {
        "turn": _disk_to_json(s.turn),
        "player1": _mode_to_json(s.player1),
        "player2": _mode_to_json(s.player2),
        "board": encode(s).split("\n")[1:],
        "counts": {"dark": count_disks(s, Disk.DARK), "light": count_disks(s, Disk.LIGHT)},
        "validMoves": moves,
        "pendingPass": pending_pass,
        "result": None if result is None else {
            "winner": _disk_to_json(result.winner),
            "dark": result.dark,
            "light": result.light,
        },
        "serialized": encode(s),
    }


def _session_json(session: GameSession, **extra: Any) -> Dict[str, Any]:
    out: Dict[str, Any] = {"ok": True, "state": state_to_json(session.state, session.pending_pass)}
    out.update(extra)
    return out


def _error(session: GameSession, message: str, status: int = 400) -> Any:
    return jsonify({
        "ok": False,
        "error": message,
        "state": state_to_json(session.state, session.pending_pass),
    }), status


# ---------- Game API ----------

@app.get("/api/state")
def api_state() -> Any:
    return jsonify(_session_json(get_session()))


@app.post("/api/new")
def api_new() -> Any:
    session = get_session()
    session.reset()
    return jsonify(_session_json(session))


@app.post("/api/move")
def api_move() -> Any:
    session = get_session()
    body = request.get_json(force=True, silent=True) or {}
    try:
        x = int(body["x"])
        y = int(body["y"])
    except (KeyError, TypeError, ValueError):
        return _error(session, "x and y are required integers")
    try:
        flipped = session.place_disk(x, y)
    except IllegalMoveError as e:
        logger.debug("Rejected move (%d, %d): %s", x, y, e)
        return _error(session, f"Illegal move: {e}")
    except (GameOverError, NotYourTurnError) as e:
        return _error(session, str(e))
    return jsonify(_session_json(session, move=[x, y], flipped=[[fx, fy] for (fx, fy) in flipped]))


@app.post("/api/ai")
def api_ai() -> Any:
    session = get_session()
    try:
        move = session.play_automatic_turn()
    except (GameOverError, NotYourTurnError) as e:
        return _error(session, str(e))
    flipped = [[fx, fy] for (fx, fy) in session.last_flipped] if move is not None else []
    return jsonify(_session_json(session, move=list(move) if move else None, flipped=flipped))


@app.post("/api/pass")
def api_pass() -> Any:
    session = get_session()
    if not session.pending_pass:
        return _error(session, "no pass to acknowledge")
    session.acknowledge_pass()
    return jsonify(_session_json(session))


@app.post("/api/players")
def api_players() -> Any:
    session = get_session()
    body = request.get_json(force=True, silent=True) or {}
    try:
        index = int(body["player"])
        mode = _mode_from_json(body["mode"])
    except (KeyError, TypeError, ValueError):
        return _error(session, "player (1 or 2) and mode (manual or automatic) are required")
    if index not in (1, 2):
        return _error(session, "player must be 1 or 2")
    session.set_player_mode(SIDES[index - 1], mode)
    return jsonify(_session_json(session))


# Entrypoint for "python app.py"
if __name__ == "__main__":
    configure_logging(SETTINGS.log_level)
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="127.0.0.1", port=int(os.getenv("PORT", "5000")), debug=debug)
