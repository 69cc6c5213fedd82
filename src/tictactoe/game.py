"""
Turn controller: alternates two players on one board of record.
Teaching notes:
- States: IN_PROGRESS -> X_WINS / O_WINS (move completes a line) or DRAW (board full, no line).
- Side to move comes from the board: X when both marks have been placed equally often.
- Every player sees a copy of the board; only the controller writes the board of record.
- An illegal index aborts the game immediately; nothing is clamped or retried.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from .errors import GameOverError, IllegalMoveError
from .game_basics import (
    BOARD_SIZE,
    Board,
    Mark,
    copy_board,
    current_player,
    get_winner,
    is_win,
    new_board,
)
from .players import Player

log = logging.getLogger(__name__)

MoveObserver = Callable[[Board, Mark, int], None]


class GameStatus(enum.Enum):
    IN_PROGRESS = "in_progress"
    X_WINS = "x_wins"
    O_WINS = "o_wins"
    DRAW = "draw"

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.IN_PROGRESS


_WIN_STATUS = {Mark.CROSS: GameStatus.X_WINS, Mark.CIRCLE: GameStatus.O_WINS}


@dataclass
class GameResult:
    status: GameStatus
    winner: Optional[Mark]
    board: Board
    moves: List[Tuple[Mark, int]]


@dataclass
class Game:
    x_player: Player
    o_player: Player
    board: Board = field(default_factory=new_board)
    moves: List[Tuple[Mark, int]] = field(default_factory=list)
    status: GameStatus = GameStatus.IN_PROGRESS

    def __post_init__(self) -> None:
        # a board handed in may already be finished
        winner = get_winner(self.board)
        if winner is not None:
            self.status = _WIN_STATUS[winner]
        elif None not in self.board:
            self.status = GameStatus.DRAW

    @property
    def to_move(self) -> Mark:
        return current_player(self.board)

    @property
    def winner(self) -> Optional[Mark]:
        if self.status is GameStatus.X_WINS:
            return Mark.CROSS
        if self.status is GameStatus.O_WINS:
            return Mark.CIRCLE
        return None

    def step(self) -> int:
        if self.status.is_terminal:
            raise GameOverError(f"game already finished: {self.status.value}")
        mark = self.to_move
        player = self.x_player if mark is Mark.CROSS else self.o_player
        idx = player.play(copy_board(self.board), mark)
        if (not isinstance(idx, int) or isinstance(idx, bool)
                or not 0 <= idx < BOARD_SIZE or self.board[idx] is not None):
            raise IllegalMoveError(idx, mark, self.board)
        self.board[idx] = mark
        self.moves.append((mark, idx))
        log.debug("move %d: %s -> %d", len(self.moves), mark, idx)
        if is_win(self.board, mark):
            self.status = _WIN_STATUS[mark]
        elif None not in self.board:
            self.status = GameStatus.DRAW
        return idx

    def result(self) -> GameResult:
        return GameResult(self.status, self.winner, copy_board(self.board), list(self.moves))

    def run(self, on_move: Optional[MoveObserver] = None) -> GameResult:
        while not self.status.is_terminal:
            mark = self.to_move
            idx = self.step()
            if on_move is not None:
                on_move(copy_board(self.board), mark, idx)
        log.info("game over: %s after %d moves", self.status.value, len(self.moves))
        return self.result()


def play_game(x_player: Player, o_player: Player,
              on_move: Optional[MoveObserver] = None) -> GameResult:
    return Game(x_player, o_player).run(on_move=on_move)
