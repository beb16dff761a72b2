"""CLI entry point: python -m snakes_ladders {play,series,board}."""

from __future__ import annotations

import argparse
import logging
import random
import sys

from snakes_ladders.board import STANDARD_SIDE, Board
from snakes_ladders.chart import make_wins_chart
from snakes_ladders.dice import Dice, PromptDice
from snakes_ladders.factory import build_board
from snakes_ladders.game import Game
from snakes_ladders.layouts import (
    BoardSetup,
    CustomCountSetup,
    Difficulty,
    RandomizedSetup,
    StandardSetup,
)
from snakes_ladders.notify import ConsoleNotifier
from snakes_ladders.players import Player
from snakes_ladders.series import play_series

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def _span(text: str) -> tuple[int, int]:
    """Parse a START:END cell pair."""
    try:
        start, end = (int(part) for part in text.split(":"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected START:END, got {text!r}")
    return start, end


def _make_setup(args: argparse.Namespace, rng: random.Random) -> BoardSetup:
    if args.layout == "random":
        return RandomizedSetup(Difficulty(args.difficulty), rng=rng)
    if args.layout == "custom" and (args.snake or args.ladder):
        setup = CustomCountSetup(random_placement=False)
        for start, end in args.snake or []:
            setup.add_snake(start, end)
        for start, end in args.ladder or []:
            setup.add_ladder(start, end)
        return setup
    if args.layout == "custom":
        return CustomCountSetup(args.snakes, args.ladders, random_placement=True, rng=rng)
    return StandardSetup()


def _make_board(args: argparse.Namespace, rng: random.Random) -> Board:
    return build_board(args.side, _make_setup(args, rng))


def _print_positions(game: Game) -> None:
    print("\n=== Current Player Positions ===")
    for name, position in game.positions().items():
        print(f"{name}: {position}")
    print("================================")


# ── play ─────────────────────────────────────────────────────────────

def cmd_play(args: argparse.Namespace) -> None:
    """Play a single game, printing every notice to the console."""
    rng = random.Random(args.seed)
    board = _make_board(args, rng)
    print(board.describe())

    dice = Dice(faces=args.faces, rng=rng)
    game = Game(
        board,
        dice=PromptDice(dice) if args.interactive else dice,
        max_turns=args.max_turns,
    )
    for name in args.players:
        game.add_player(Player(name))
    game.add_notifier(ConsoleNotifier())

    result = game.play()
    if result.reason == "insufficient_players":
        print("A minimum of 2 players is required to start the game.", file=sys.stderr)
        sys.exit(1)

    _print_positions(game)
    if result.winner is not None:
        print(f"\n{result.winner} has won the game in {result.turns} turns.")
    else:
        print(f"\nStopped after {result.turns} turns with no winner.")


# ── series ───────────────────────────────────────────────────────────

def cmd_series(args: argparse.Namespace) -> None:
    """Play many games in a row and report the win tally."""
    rng = random.Random(args.seed)
    board = _make_board(args, rng)
    players = [Player(name) for name in args.players]

    result = play_series(
        players, board, games=args.games,
        dice=Dice(faces=args.faces, rng=rng),
        max_turns=args.max_turns,
    )
    if not result.games or result.games[0].reason == "insufficient_players":
        print("A minimum of 2 players is required to start the game.", file=sys.stderr)
        sys.exit(1)

    print("\nWins")
    print("=" * 40)
    for name, wins in sorted(result.tallies.items(), key=lambda kv: kv[1], reverse=True):
        print(f"  {name:30s} {wins:5d}")

    if args.chart:
        make_wins_chart(result.tallies, output_path=args.chart)
        print(f"Chart saved to {args.chart}")


# ── board ────────────────────────────────────────────────────────────

def cmd_board(args: argparse.Namespace) -> None:
    """Print the board layout that the given options produce."""
    print(_make_board(args, random.Random(args.seed)).describe())


# ── main ─────────────────────────────────────────────────────────────

def main() -> None:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--side", type=int, default=STANDARD_SIDE, help="Board side length (default 10)")
    common.add_argument(
        "--layout", choices=["standard", "random", "custom"], default="standard",
        help="How snakes and ladders are placed",
    )
    common.add_argument(
        "--difficulty", choices=[d.value for d in Difficulty], default=Difficulty.MEDIUM.value,
        help="Snake share for the random layout",
    )
    common.add_argument("--snakes", type=int, default=8, help="Snake count for the custom layout")
    common.add_argument("--ladders", type=int, default=8, help="Ladder count for the custom layout")
    common.add_argument(
        "--snake", type=_span, action="append", metavar="START:END",
        help="Place a snake at fixed cells (custom layout, repeatable)",
    )
    common.add_argument(
        "--ladder", type=_span, action="append", metavar="START:END",
        help="Place a ladder at fixed cells (custom layout, repeatable)",
    )
    common.add_argument("--seed", type=int, help="Seed for layout and dice")
    common.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    game_opts = argparse.ArgumentParser(add_help=False)
    game_opts.add_argument(
        "--players", nargs="+", default=["Player 1", "Player 2"], help="Player names, in turn order",
    )
    game_opts.add_argument("--faces", type=int, default=6, help="Dice faces (default 6)")
    game_opts.add_argument("--max-turns", type=int, help="Stop after this many turns")

    parser = argparse.ArgumentParser(
        prog="snakes_ladders",
        description="Snakes & Ladders simulator",
    )
    sub = parser.add_subparsers(dest="command")

    p_play = sub.add_parser("play", parents=[common, game_opts], help="Play one game")
    p_play.add_argument("--interactive", action="store_true", help="Wait for Enter before each roll")

    p_series = sub.add_parser("series", parents=[common, game_opts], help="Play many games, tally wins")
    p_series.add_argument("--games", type=int, default=10, help="Games to play (default 10)")
    p_series.add_argument("--chart", help="Save a wins chart to this PNG path")

    sub.add_parser("board", parents=[common], help="Show a board layout")

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        return
    if args.side < 1:
        parser.error("--side must be at least 1")
    if getattr(args, "faces", 6) < 2:
        parser.error("--faces must be at least 2")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    if args.command == "play":
        cmd_play(args)
    elif args.command == "series":
        cmd_series(args)
    elif args.command == "board":
        cmd_board(args)


if __name__ == "__main__":
    main()
