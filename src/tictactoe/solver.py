"""
Exhaustive game-tree search (negamax), scored from the side-to-move perspective.
Scoring:
- -1 if the opponent of the mark to move already has a line, 0 if no empty cells remain.
- Otherwise the best negated child score over all empty cells.
Tie-break policy:
- Among equally scored moves, the lowest cell index wins (scan order 0..8).
The board is mutated in place and restored after every branch; no pruning or caching.
"""
import logging
from typing import Tuple

from .game_basics import BOARD_SIZE, Board, Mark, empty_cells, is_win

log = logging.getLogger(__name__)


def negamax_score(board: Board, mark: Mark, depth: int) -> int:
    # a line may be completed on the last reachable ply, so check before depth
    if is_win(board, mark.opponent()):
        return -1
    if depth == 0:
        return 0
    best = -2
    for i in range(BOARD_SIZE):
        if board[i] is not None:
            continue
        board[i] = mark
        score = -negamax_score(board, mark.opponent(), depth - 1)
        board[i] = None
        if score > best:
            best = score
    return best


def best_move(board: Board, mark: Mark) -> Tuple[int, int]:
    """Return (index, score) of the first empty cell reaching the best score."""
    depth = len(empty_cells(board))
    if depth == 0:
        raise ValueError("cannot search a full board")
    best_idx = -1
    best = -2
    for i in range(BOARD_SIZE):
        if board[i] is not None:
            continue
        board[i] = mark
        score = -negamax_score(board, mark.opponent(), depth - 1)
        board[i] = None
        if score > best:
            best = score
            best_idx = i
    return best_idx, best


def choose_move(board: Board, mark: Mark) -> int:
    """Pick the move for `mark` and place it on `board`.

    Every tentative placement is undone during the search, so on return the
    board equals the input plus `mark` at the returned index.
    """
    idx, score = best_move(board, mark)
    log.debug("search mark=%s move=%d score=%d", mark, idx, score)
    board[idx] = mark
    return idx
