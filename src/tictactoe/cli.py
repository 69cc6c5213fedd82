from __future__ import annotations

import argparse
import logging

from . import settings
from .errors import IllegalMoveError, TicTacToeError
from .game import GameResult, GameStatus, play_game
from .game_basics import (
    Board,
    Mark,
    board_to_string,
    copy_board,
    current_player,
    deserialize_board,
    is_terminal,
    is_valid_state,
)
from .players import PLAYER_KINDS, SearchPlayer, make_player
from .solver import best_move


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt", description="Tic-tac-toe CLI")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument("--seed", type=int, default=None, help="Seed for random players")
    p.add_argument(
        "--no-color",
        action="store_true",
        help="Render boards without ANSI styling (also: TTT_NO_COLOR / NO_COLOR)",
    )

    # interactive game
    p_play = sub.add_parser("play", help="Play one game (default: human X vs search O)")
    p_play.add_argument(
        "--x", dest="x_kind", choices=PLAYER_KINDS, default=None,
        help="Player for X (default: $TTT_X_PLAYER or human)",
    )
    p_play.add_argument(
        "--o", dest="o_kind", choices=PLAYER_KINDS, default=None,
        help="Player for O (default: $TTT_O_PLAYER or search)",
    )

    # demo: move
    p_move = sub.add_parser("move", help="Print the search's move for the side to move")
    p_move.add_argument("--board", required=True, help="Board string, e.g., 110220000 (0=empty,1=X,2=O)")

    # batch: selfplay
    p_self = sub.add_parser("selfplay", help="Play the search against an opponent, alternating seats")
    p_self.add_argument("--games", type=int, default=10, help="Number of games (default: 10)")
    p_self.add_argument(
        "--opponent", choices=["random", "search"], default="random",
        help="Opponent kind (default: random)",
    )

    return p


def _print_result(result: GameResult, color: bool) -> None:
    if result.winner is not None:
        print(board_to_string(result.board, color=color) + f"...and the winner is: {result.winner}")
    else:
        print(board_to_string(result.board, color=color) + "it's a draw!")


def _board_printer(color: bool):
    def _show(board: Board, mark: Mark, idx: int) -> None:
        print(f"{mark} -> {idx}\n" + board_to_string(board, color=color))

    return _show


def _cmd_play(ns: argparse.Namespace, color: bool) -> int:
    x_kind = ns.x_kind or settings.default_x_player()
    o_kind = ns.o_kind or settings.default_o_player()
    x_player = make_player(x_kind, seed=ns.seed, color=color)
    o_player = make_player(o_kind, seed=None if ns.seed is None else ns.seed + 1, color=color)
    logging.debug("x=%s o=%s", x_kind, o_kind)
    on_move = None
    if "human" not in (x_kind, o_kind):
        # nobody is prompted, so show the boards as the game goes
        on_move = _board_printer(color)
    try:
        result = play_game(x_player, o_player, on_move=on_move)
    except IllegalMoveError as exc:
        if exc.board is not None:
            print(board_to_string(exc.board, color=color))
        logging.error("%s", exc)
        return 1
    _print_result(result, color)
    return 0


def _cmd_move(ns: argparse.Namespace) -> int:
    try:
        board: Board = deserialize_board(ns.board)
    except ValueError as exc:
        logging.error("%s", exc)
        return 2
    if not is_valid_state(board):
        logging.error("Board is not a valid reachable state.")
        return 2
    if is_terminal(board):
        logging.error("Board is already finished; no move to search.")
        return 2
    mark = current_player(board)
    idx, score = best_move(copy_board(board), mark)
    logging.info("move=%d mark=%s score=%d", idx, mark, score)
    return 0


def _cmd_selfplay(ns: argparse.Namespace) -> int:
    if ns.games < 1:
        logging.error("--games must be positive: %s", ns.games)
        return 2
    search = SearchPlayer()
    tally = {"wins": 0, "draws": 0, "losses": 0}
    for g in range(ns.games):
        seed = None if ns.seed is None else ns.seed + g
        opponent = make_player(ns.opponent, seed=seed)
        search_mark = Mark.CROSS if g % 2 == 0 else Mark.CIRCLE
        if search_mark is Mark.CROSS:
            result = play_game(search, opponent)
        else:
            result = play_game(opponent, search)
        if result.status is GameStatus.DRAW:
            tally["draws"] += 1
        elif result.winner is search_mark:
            tally["wins"] += 1
        else:
            tally["losses"] += 1
            logging.warning("search lost game %d as %s: moves=%s", g, search_mark,
                            [i for _, i in result.moves])
    logging.info("games=%d wins=%d draws=%d losses=%d",
                 ns.games, tally["wins"], tally["draws"], tally["losses"])
    return 1 if tally["losses"] else 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    # Early exits
    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("tictactoe"))
        except Exception:
            print("unknown")
        return 0

    color = settings.color_enabled() and not ns.no_color

    try:
        if ns.cmd == "play":
            return _cmd_play(ns, color)
        if ns.cmd == "move":
            return _cmd_move(ns)
        if ns.cmd == "selfplay":
            return _cmd_selfplay(ns)
    except TicTacToeError as exc:
        logging.error("game aborted: %s", exc)
        return 1
    except ValueError as exc:
        logging.error("%s", exc)
        return 2

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
