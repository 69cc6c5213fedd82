"""
Game basics: marks, board representation, serialization, win/draw checks, validity.
Teaching notes:
- A board is a list of 9 cells, each either None (empty) or a Mark. X always starts.
- A "ply" is a half-move (one player's turn).
- Valid states have counts either equal (X to move) or X has one more (O to move).
"""
from __future__ import annotations

import enum
from typing import List, Optional, Tuple

BOARD_SIZE = 9

WIN_PATTERNS = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class Mark(enum.Enum):
    CROSS = 1
    CIRCLE = 2

    @property
    def code(self) -> int:
        return self.value

    @property
    def symbol(self) -> str:
        return "X" if self is Mark.CROSS else "O"

    def opponent(self) -> "Mark":
        return Mark.CIRCLE if self is Mark.CROSS else Mark.CROSS

    def __str__(self) -> str:
        return self.symbol


Cell = Optional[Mark]
Board = List[Cell]

_BY_CODE = {0: None, 1: Mark.CROSS, 2: Mark.CIRCLE}


def new_board() -> Board:
    return [None] * BOARD_SIZE


def copy_board(board: Board) -> Board:
    return list(board)


def serialize_board(board: Board) -> str:
    return ''.join('0' if cell is None else str(cell.code) for cell in board)


def deserialize_board(board_str: str) -> Board:
    raw = board_str.strip()
    if len(raw) != BOARD_SIZE or any(c not in "012" for c in raw):
        raise ValueError(f"Invalid board string {board_str!r}. Must be 9 chars of 0/1/2.")
    return [_BY_CODE[int(c)] for c in raw]


def is_win(board: Board, mark: Mark) -> bool:
    """True if `mark` holds all three cells of any row, column or diagonal."""
    for a, b, c in WIN_PATTERNS:
        if board[a] is mark and board[b] is mark and board[c] is mark:
            return True
    return False


def get_winner(board: Board) -> Optional[Mark]:
    for mark in Mark:
        if is_win(board, mark):
            return mark
    return None


def empty_cells(board: Board) -> List[int]:
    return [i for i, cell in enumerate(board) if cell is None]


def is_draw(board: Board) -> bool:
    return None not in board and get_winner(board) is None


def get_piece_counts(board: Board) -> Tuple[int, int]:
    return board.count(Mark.CROSS), board.count(Mark.CIRCLE)


def current_player(board: Board) -> Mark:
    x, o = get_piece_counts(board)
    return Mark.CROSS if x == o else Mark.CIRCLE


def is_valid_state(board: Board) -> bool:
    if len(board) != BOARD_SIZE:
        return False
    x_count, o_count = get_piece_counts(board)
    if not (x_count == o_count or x_count == o_count + 1):
        return False
    x_wins = is_win(board, Mark.CROSS)
    o_wins = is_win(board, Mark.CIRCLE)
    # no double winners
    if x_wins and o_wins:
        return False
    if x_wins and x_count != o_count + 1:
        return False
    if o_wins and x_count != o_count:
        return False
    return True


def is_terminal(board: Board) -> bool:
    return get_winner(board) is not None or None not in board


def board_to_string(board: Board, color: bool = True) -> str:
    """Render the board as three rows; empty cells show their index as a hint.

    With `color`, marks are bold and hints are dimmed using ANSI escapes.
    """
    rows = []
    for r in range(3):
        cells = []
        for c in range(3):
            idx = r * 3 + c
            cell = board[idx]
            if cell is None:
                text = f"\033[37m{idx}\033[0m" if color else str(idx)
            else:
                text = f"\033[1m{cell.symbol}\033[0m" if color else cell.symbol
            cells.append(text)
        rows.append("  ".join(cells))
    return "\n".join(rows) + "\n"
