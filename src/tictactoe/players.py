"""
Players: anything with `play(board, mark) -> index` can take a seat.
Teaching notes:
- The controller hands each player a copy of the board, so players may scribble on it.
- SearchPlayer is perfect (never loses); RandomPlayer is the usual weak baseline.
"""
from __future__ import annotations

import re
import sys
from typing import Callable, Dict, Optional, Protocol, TextIO

import numpy as np

from .errors import MalformedInputError
from .game_basics import Board, Mark, board_to_string, empty_cells
from .solver import choose_move

PLAYER_KINDS = ("human", "search", "random")

_INDEX_RE = re.compile(r"[+-]?[0-9]+")


class Player(Protocol):
    def play(self, board: Board, mark: Mark) -> int:
        ...


class SearchPlayer:
    """Exhaustive negamax player."""

    def play(self, board: Board, mark: Mark) -> int:
        return choose_move(board, mark)


class RandomPlayer:
    def __init__(self, seed: Optional[int] = None):
        self.rng = np.random.default_rng(seed)

    def play(self, board: Board, mark: Mark) -> int:
        return int(self.rng.choice(empty_cells(board)))


class HumanPlayer:
    """Reads one integer per move; anything else aborts the game (no reprompt)."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None,
                 color: bool = True):
        self.stdin = stdin
        self.stdout = stdout
        self.color = color

    def play(self, board: Board, mark: Mark) -> int:
        out = self.stdout or sys.stdout
        inp = self.stdin or sys.stdin
        out.write(board_to_string(board, color=self.color)
                  + f"where to put the next {mark}? (0-8): \n")
        out.flush()
        line = inp.readline()
        if not line:
            raise MalformedInputError("no input (end of stream)")
        text = line.strip()
        # ASCII digits with an optional sign only
        if not _INDEX_RE.fullmatch(text):
            raise MalformedInputError(f"not a cell index: {text!r}")
        return int(text)


def make_player(kind: str, seed: Optional[int] = None, color: bool = True) -> Player:
    factories: Dict[str, Callable[[], Player]] = {
        "human": lambda: HumanPlayer(color=color),
        "search": SearchPlayer,
        "random": lambda: RandomPlayer(seed),
    }
    if kind not in factories:
        raise ValueError(f"Unknown player kind: {kind}")
    return factories[kind]()
