"""Environment-driven defaults for the CLI.

Environment first, then built-in defaults:
- TTT_NO_COLOR / NO_COLOR: any non-empty value disables ANSI styling.
- TTT_X_PLAYER / TTT_O_PLAYER: default player kinds for `ttt play`.
"""

from __future__ import annotations

import os

from .players import PLAYER_KINDS

DEFAULT_X_PLAYER = "human"
DEFAULT_O_PLAYER = "search"


def color_enabled() -> bool:
    return not (os.getenv("TTT_NO_COLOR") or os.getenv("NO_COLOR"))


def _player_kind(var: str, default: str) -> str:
    kind = (os.getenv(var) or default).strip().lower()
    if kind not in PLAYER_KINDS:
        raise ValueError(f"{var}={kind!r} is not one of {', '.join(PLAYER_KINDS)}")
    return kind


def default_x_player() -> str:
    return _player_kind("TTT_X_PLAYER", DEFAULT_X_PLAYER)


def default_o_player() -> str:
    return _player_kind("TTT_O_PLAYER", DEFAULT_O_PLAYER)
