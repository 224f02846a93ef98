"""CLI entrypoint for watching two Lines of Action AIs play."""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from ai.minimax_ai import DEFAULT_DEPTH, MinimaxAI
from engine.board import DEFAULT_MOVE_LIMIT, Board, INITIAL_PIECES
from engine.errors import MoveLimitError
from engine.pieces import Piece


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Lines of Action, machine against machine.")
    parser.add_argument("--white-depth", type=int, default=DEFAULT_DEPTH, help="Minimax depth for white")
    parser.add_argument("--black-depth", type=int, default=DEFAULT_DEPTH, help="Minimax depth for black")
    parser.add_argument(
        "--move-limit",
        type=int,
        default=DEFAULT_MOVE_LIMIT,
        help="Moves per side before the game is tied",
    )
    parser.add_argument(
        "--first",
        type=str,
        default="black",
        choices=["black", "white"],
        help="Which side moves first",
    )
    parser.add_argument("--max-plies", type=int, default=None, help="Stop after this many plies")
    parser.add_argument("--quiet", action="store_true", help="Only print the result")
    parser.add_argument("--log-level", type=str, default="INFO", help="Python logging level")
    args = parser.parse_args(argv)
    if args.white_depth < 1 or args.black_depth < 1:
        parser.error("search depth must be at least 1")
    if args.max_plies is not None and args.max_plies < 0:
        parser.error("--max-plies must be non-negative")
    try:
        Board(move_limit=args.move_limit)
    except MoveLimitError as exc:
        parser.error(str(exc))
    return args


def result_line(board: Board) -> str:
    winner = board.winner()
    if winner is Piece.EMPTY:
        return "Tie."
    if winner is None:
        return f"Stopped after {board.moves_made()} plies."
    return f"{winner.full_name} wins."


def run_cli(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))
    logger = logging.getLogger("loa.cli")

    first = Piece.BLACK if args.first == "black" else Piece.WHITE
    board = Board(INITIAL_PIECES, first, move_limit=args.move_limit)
    players = {
        Piece.WHITE: MinimaxAI(depth=args.white_depth),
        Piece.BLACK: MinimaxAI(depth=args.black_depth),
    }
    logger.info(
        "Starting game. first=%s white_depth=%d black_depth=%d move_limit=%d",
        first.value,
        args.white_depth,
        args.black_depth,
        args.move_limit,
    )

    while not board.game_over():
        if args.max_plies is not None and board.moves_made() >= args.max_plies:
            break
        if not args.quiet:
            print(board.render_ascii())
        side = board.turn
        if not board.legal_moves():
            logger.info("%s has no legal moves; stopping.", side.full_name)
            break
        move = players[side].choose_move(board)
        board.make_move(move)
        if not args.quiet:
            print(f"{side.full_name} plays {move}")

    if not args.quiet:
        print(board.render_ascii())
    print(result_line(board))
    logger.info("Game finished after %d plies: %s", board.moves_made(), result_line(board))
    return 0


if __name__ == "__main__":
    raise SystemExit(run_cli())
