"""tictactoe package.

Win detection, an exhaustive negamax opponent, a turn controller, and a simple CLI.

Convenience imports are exposed for common workflows.
"""

from .errors import GameOverError, IllegalMoveError, MalformedInputError, TicTacToeError
from .game import Game, GameResult, GameStatus, play_game
from .game_basics import Mark, is_win, new_board
from .players import HumanPlayer, Player, RandomPlayer, SearchPlayer
from .solver import choose_move

__all__ = [
    "Mark",
    "new_board",
    "is_win",
    "choose_move",
    "Player",
    "SearchPlayer",
    "HumanPlayer",
    "RandomPlayer",
    "Game",
    "GameResult",
    "GameStatus",
    "play_game",
    "TicTacToeError",
    "IllegalMoveError",
    "MalformedInputError",
    "GameOverError",
]
