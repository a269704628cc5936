#!/usr/bin/env python3
"""
Minegrid - Main entry point.

Usage:
    python main.py play [--difficulty {easy,medium,hard}]
    python main.py demo [--difficulty D] [--games N] [--seed S] [--delay T]
"""
import argparse
import logging
import time

import numpy as np

from src.minegrid import DIFFICULTIES, GameSession, MinesweeperEnv

PLAY_HELP = """Commands:
  r ROW COL   reveal a cell
  f ROW COL   toggle a flag
  n [LEVEL]   new game, optionally at another difficulty
  q           quit"""


def positive_int(value: str) -> int:
    """Argparse type for counts that must be at least 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def format_board(text: str, cols: int) -> str:
    """Add row and column indices around a text board."""
    header = "    " + " ".join(str(col % 10) for col in range(cols))
    lines = [header]
    for row, line in enumerate(text.splitlines()):
        lines.append(f"{row:>2}  {line}")
    return "\n".join(lines)


def play(args: argparse.Namespace) -> None:
    """Play an interactive game in the terminal."""
    session = GameSession(args.difficulty)
    print(PLAY_HELP)

    while True:
        print()
        print(format_board(session.render(), session.board.cols))
        if session.is_over:
            print("\n*** LOST (hit mine) ***  'n' for a new game, 'q' to quit")
        elif session.is_won:
            print("\n*** WIN! ***  'n' for a new game, 'q' to quit")

        try:
            command = input("> ").split()
        except EOFError:
            break
        if not command:
            continue

        action = command[0].lower()
        if action == "q":
            break
        if action == "n":
            level = command[1] if len(command) > 1 else None
            if level is not None and level not in DIFFICULTIES:
                print(f"Unknown difficulty: {level}")
                continue
            session.new_game(level)
            continue
        if action in ("r", "f") and len(command) == 3:
            try:
                row, col = int(command[1]), int(command[2])
            except ValueError:
                print("Row and column must be numbers")
                continue
            if action == "r":
                applied = session.click(row, col)
            else:
                applied = session.toggle_flag(row, col)
            if not applied:
                print("Move ignored")
            continue

        print(PLAY_HELP)


def demo(args: argparse.Namespace) -> None:
    """Watch random legal moves play out through the environment."""
    env = MinesweeperEnv(difficulty=args.difficulty, render_mode="ansi")
    rng = np.random.default_rng(args.seed)
    wins = 0

    for game in range(args.games):
        seed = args.seed + game if args.seed is not None else None
        _, info = env.reset(seed=seed)
        done = False
        step = 0

        while not done:
            valid = np.flatnonzero(env.get_action_mask())
            action = int(rng.choice(valid))
            _, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

        print(f"=== Game {game + 1}/{args.games} | Steps {step} ===")
        print(format_board(env.render(), env.config.cols))
        if info["game_state"] == "WON":
            wins += 1
            print("*** WIN! ***")
        else:
            print("*** LOST (hit mine) ***")
        time.sleep(args.delay)

    print(f"\n=== Final: {wins}/{args.games} wins ({100 * wins / args.games:.0f}%) ===")


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description="Minegrid - Play Minesweeper in the terminal"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play interactively")
    play_parser.add_argument(
        "--difficulty",
        choices=list(DIFFICULTIES),
        default="easy",
        help="Board preset",
    )

    # Demo command
    demo_parser = subparsers.add_parser("demo", help="Watch random play")
    demo_parser.add_argument(
        "--difficulty",
        choices=list(DIFFICULTIES),
        default="easy",
        help="Board preset",
    )
    demo_parser.add_argument(
        "--games", type=positive_int, default=5, help="Number of games"
    )
    demo_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for boards and moves"
    )
    demo_parser.add_argument(
        "--delay", type=float, default=0.0, help="Pause between games"
    )

    return parser


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = build_parser()
    args = parser.parse_args()
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command == "play":
        play(args)
    elif args.command == "demo":
        demo(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
