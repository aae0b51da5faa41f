from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_SAVE_PATH = os.path.join("data", "reversi_save.txt")


@dataclass(frozen=True)
class Settings:
    save_path: str = DEFAULT_SAVE_PATH
    board_width: int = 8
    board_height: int = 8
    auto_delay: float = 2.0  # seconds an automatic player waits before moving
    log_level: str = "INFO"


def _int_env(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _float_env(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Reads REVERSI_* environment variables, falling back to the defaults above."""
    if env is None:
        env = os.environ
    level = env.get("REVERSI_LOG_LEVEL", "INFO").upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"REVERSI_LOG_LEVEL is not a logging level: {level!r}")
    return Settings(
        save_path=env.get("REVERSI_SAVE_PATH") or DEFAULT_SAVE_PATH,
        board_width=_int_env(env, "REVERSI_BOARD_WIDTH", 8),
        board_height=_int_env(env, "REVERSI_BOARD_HEIGHT", 8),
        auto_delay=_float_env(env, "REVERSI_AUTO_DELAY", 2.0),
        log_level=level,
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
