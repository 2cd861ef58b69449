"""Command-line utilities for the Nim search engine."""

from __future__ import annotations

import argparse
import logging
import random
import time

from nimengine.analytics import compare
from nimengine.config import EngineConfig
from nimengine.constants import Algorithm, PLAYER
from nimengine.game import IllegalMoveError, NimGame
from nimengine.search import run_search
from nimengine.selector import choose_move


def build_parser(config: EngineConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Nim minimax / alpha-beta utilities")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, ...)")

    subparsers = parser.add_subparsers(dest="command", required=False)
    algorithms = [algorithm.value for algorithm in Algorithm]

    search_parser = subparsers.add_parser("search", help="Search one position and print the tree")
    search_parser.add_argument("--stones", type=int, default=config.initial_pile, help="Pile size")
    search_parser.add_argument("--algorithm", choices=algorithms, default=Algorithm.ALPHABETA.value)
    search_parser.add_argument("--depth", type=int, default=None, help="Target depth (default: min(stones, max depth))")
    search_parser.add_argument("--maximizing", action="store_true", help="Evaluate the root as the maximizing side")
    search_parser.add_argument("--tree", action="store_true", help="Print the search tree")

    compare_parser = subparsers.add_parser("compare", help="Compare node counts per depth")
    compare_parser.add_argument("--stones", type=int, default=config.initial_pile, help="Pile size")
    compare_parser.add_argument("--quiet", action="store_true", help="Zero all time estimates")
    compare_parser.add_argument("--seed", type=int, default=None, help="Seed for the timing jitter")

    best_parser = subparsers.add_parser("best", help="Pick the engine move for a pile")
    best_parser.add_argument("--stones", type=int, default=config.initial_pile, help="Pile size")
    best_parser.add_argument("--algorithm", choices=algorithms, default=Algorithm.ALPHABETA.value)
    best_parser.add_argument("--seed", type=int, default=None, help="Seed for the timing jitter")

    play_parser = subparsers.add_parser("play", help="Play against the engine")
    play_parser.add_argument("--algorithm", choices=algorithms, default=Algorithm.ALPHABETA.value)
    play_parser.add_argument("--delay-ms", type=int, default=config.move_delay_ms, help="Engine thinking delay")

    return parser


def _print_rows(rows) -> None:
    print(f"{'depth':>5} {'minimax':>8} {'alphabeta':>9} {'mm_time':>8} {'ab_time':>8}")
    for row in rows:
        print(
            f"{row.depth:>5} {row.minimax_nodes:>8} {row.alphabeta_nodes:>9} "
            f"{row.minimax_time:>8.2f} {row.alphabeta_time:>8.2f}"
        )


def play(config: EngineConfig, algorithm: str, delay_ms: int) -> None:
    game = NimGame(config=config, algorithm=Algorithm(algorithm))

    while not game.over:
        print(f"stones: {game.stones}")
        if game.player_turn:
            view = game.refresh()
            print(
                f"minimax {view.stats.minimax_nodes} nodes, alphabeta {view.stats.alphabeta_nodes} nodes, "
                f"time {view.stats.elapsed_time:.2f}"
            )
            raw = input(f"take {game.legal_moves()}: ").strip()
            try:
                game.player_move(int(raw))
            except (ValueError, IllegalMoveError) as exc:
                print(f"illegal move: {exc}")
            continue

        pending = game.plan_engine_move()
        time.sleep(delay_ms / 1000.0)
        if game.commit_engine_move(pending):
            stats = pending.selection.stats
            print(
                f"engine takes {pending.selection.move} "
                f"(minimax {stats.minimax_nodes} nodes, alphabeta {stats.alphabeta_nodes} nodes)"
            )

    print("you win" if game.winner == PLAYER else "engine wins")


def run() -> None:
    config = EngineConfig.from_env()
    parser = build_parser(config)
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        dispatch(parser, args, config)
    except ValueError as exc:
        parser.error(str(exc))


def dispatch(parser: argparse.ArgumentParser, args: argparse.Namespace, config: EngineConfig) -> None:
    if args.command == "search":
        result = run_search(Algorithm(args.algorithm), args.stones, args.maximizing, args.depth, config.max_depth)
        print(f"algorithm {result.algorithm.value} depth {result.target_depth} score {result.score} nodes {result.nodes}")
        if args.tree:
            print(result.root.render())
        return

    if args.command == "compare":
        _print_rows(compare(args.stones, quiet=args.quiet, rng=random.Random(args.seed), max_depth=config.max_depth))
        return

    if args.command == "best":
        selection = choose_move(Algorithm(args.algorithm), args.stones, rng=random.Random(args.seed), config=config)
        print(f"bestmove {selection.move} depth {selection.search_depth} nodes {selection.nodes}")
        print(
            f"stats minimax {selection.stats.minimax_nodes} alphabeta {selection.stats.alphabeta_nodes} "
            f"time {selection.stats.elapsed_time:.2f}"
        )
        return

    if args.command == "play":
        play(config, args.algorithm, args.delay_ms)
        return

    parser.print_help()


if __name__ == "__main__":
    run()
