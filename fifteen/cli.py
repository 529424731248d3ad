"""Command-line front end for playing the fifteen puzzle."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Optional, Sequence

from fifteen.game import Game

TITLE = "15 puzzle"
HELP = "Commands: start, auto, <tile number>, retry, quit"
NOT_STARTED = "Press start first"
AFTER_SOLVE = "Type retry or close."


def _run(game: Game, command: str) -> None:
    if command == "start":
        try:
            game.start()
        except RuntimeError as exc:
            print(f"Error: {exc}")
            return
        print(game.render())
    elif command == "auto":
        print("Solving...")
        try:
            moves = game.auto_solve()
        except RuntimeError as exc:
            print(f"Error: {exc}")
            return
        print("Moves: " + " ".join(str(number) for number in moves))
        print(game.render())
    elif command == "retry":
        print(f"Error: puzzle is not solved yet")
    elif command.isdigit():
        number = int(command)
        if not game.started:
            print(NOT_STARTED)
            return
        try:
            moved = game.click(number)
        except ValueError as exc:
            print(f"Error: {exc}")
            return
        if moved:
            print(game.render())
        else:
            print(f"Tile {number} cannot move")
    else:
        print(f"Unknown command: {command}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play the puzzle with commands read from standard input."""
    parser = argparse.ArgumentParser(prog="fifteen", description="Play the fifteen puzzle.")
    parser.add_argument("--seed", type=int, default=None, help="seed for shuffling")
    args = parser.parse_args(argv)

    game = Game(random.Random(args.seed))
    print(TITLE)
    print(HELP)
    print(game.render())

    for line in sys.stdin:
        command = line.strip().lower()
        if not command:
            continue
        if command in ("quit", "close", "q"):
            return 0
        if game.solved:
            if command == "retry":
                game.retry()
                print(game.render())
            else:
                print(AFTER_SOLVE)
            continue
        _run(game, command)
        if game.solved:
            print("Congratulations!!!")
            print(game.result_message)
            print(AFTER_SOLVE)
    return 0


if __name__ == "__main__":
    sys.exit(main())