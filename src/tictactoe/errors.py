"""Exceptions raised by the turn controller and the players."""
from __future__ import annotations

from typing import Any, Optional

from .game_basics import Board, Mark, copy_board


class TicTacToeError(Exception):
    pass


class IllegalMoveError(TicTacToeError):
    """A player picked an index outside 0-8 or an occupied cell."""

    def __init__(self, index: Any, mark: Mark, board: Optional[Board] = None):
        self.index = index
        self.mark = mark
        self.board = copy_board(board) if board is not None else None
        super().__init__(f"cannot play {mark} to position {index!r}")


class MalformedInputError(TicTacToeError, ValueError):
    pass


class GameOverError(TicTacToeError):
    pass
