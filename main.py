#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--size 10x8] [--mines N] [--preset NAME] [--seed S]
    python main.py demo [--games N] [--size 9x9] [--mines N] [--delay S]
"""
import argparse
import logging
import os
import random
import time
from typing import Optional

import numpy as np

from src.minesweeper.board import BoardConfig, PRESETS, default_mine_count
from src.minesweeper.environment import MinesweeperEnv
from src.minesweeper.exceptions import InvalidInputError
from src.minesweeper.parser import parse_board_size
from src.minesweeper.render import Color, colorize, render_prompt
from src.minesweeper.session import GameSession


def clear_screen() -> None:
    os.system('cls' if os.name == 'nt' else 'clear')


def warn(message: str, color: bool = True) -> None:
    print(colorize(f"\n{message}\n", Color.RED, color))


def ask_board_size(color: bool) -> Optional[BoardConfig]:
    """Prompt until the player types a valid board size."""
    print("Choose the size of your board (e.g. 8x10):\n")
    while True:
        try:
            text = input("-> ")
        except EOFError:
            return None
        try:
            columns, rows = parse_board_size(text)
        except InvalidInputError as exc:
            warn(str(exc), color)
            continue
        return BoardConfig(columns, rows, default_mine_count(columns, rows))


def resolve_config(args: argparse.Namespace, color: bool) -> Optional[BoardConfig]:
    """Build the board configuration from flags, prompting if needed."""
    if args.preset:
        return PRESETS[args.preset]
    if args.size is None:
        return ask_board_size(color)
    columns, rows = parse_board_size(args.size)
    mines = args.mines
    if mines is None:
        mines = default_mine_count(columns, rows)
    return BoardConfig(columns, rows, mines)


def play(args: argparse.Namespace) -> None:
    """Play an interactive game in the terminal."""
    color = not args.no_color
    print("Welcome to Minesweeper <3\n")

    try:
        config = resolve_config(args, color)
    except (InvalidInputError, ValueError) as exc:
        warn(f"Error: {exc}", color)
        return
    if config is None:
        return

    rng = random.Random(args.seed) if args.seed is not None else None
    session = GameSession()
    session.new_game(config.columns, config.rows, config.mines, rng=rng)

    message = ""
    while session.state_code == 0:
        clear_screen()
        if message:
            warn(message, color)
        print(
            f"Board: {session.columns}x{session.rows} | "
            f"Mines: {session.mines_total} | Flags: {session.flags}\n"
        )
        print(session.render(color))
        print()
        print(render_prompt(color))

        try:
            text = input("\n -> ")
        except EOFError:
            print("\nGame abandoned.")
            return
        message = session.submit(text).message

    clear_screen()
    print(session.render(color))
    warn(message, color)


def demo(args: argparse.Namespace) -> None:
    """Watch a random player click through games."""
    columns, rows = parse_board_size(args.size)
    mines = args.mines
    if mines is None:
        mines = default_mine_count(columns, rows)
    config = BoardConfig(columns, rows, mines)
    env = MinesweeperEnv(config=config, render_mode="ansi")
    env.action_space.seed(args.seed)
    cells = config.cell_count

    print(f"Board: {columns}x{rows} with {mines} mines")
    wins = 0

    for game in range(args.games):
        seed = None if args.seed is None else args.seed + game
        obs, info = env.reset(seed=seed)
        done = False
        step = 0

        while not done:
            mask = env.get_action_mask()
            mask[cells:] = False
            action = env.action_space.sample(mask=mask.astype(np.int8))
            column, row, _ = env.decode_action(action)

            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{args.games} | Step {step} ===")
            print(f"Wins so far: {wins}")
            print(f"Last move: ({column}, {row})\n")
            print(env.render())
            time.sleep(args.delay)

        if info["game_state"] == "WON":
            wins += 1
            print("\n*** WIN! ***")
        else:
            print("\n*** LOST (hit mine) ***")
        time.sleep(1.0)

    print(f"\n=== Final: {wins}/{args.games} wins ===")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper in the terminal")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a game")
    play_parser.add_argument(
        "--size", default=None, help="Board size as COLUMNSxROWS (5-30 each)"
    )
    play_parser.add_argument(
        "--mines", type=int, default=None, help="Number of mines"
    )
    play_parser.add_argument(
        "--preset", choices=sorted(PRESETS), default=None,
        help="Use a classic difficulty instead of --size",
    )
    play_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    play_parser.add_argument(
        "--no-color", action="store_true", help="Disable ANSI colours"
    )

    # Demo command
    demo_parser = subparsers.add_parser("demo", help="Watch a random player")
    demo_parser.add_argument("--games", type=int, default=5, help="Number of games")
    demo_parser.add_argument("--size", default="9x9", help="Board size")
    demo_parser.add_argument(
        "--mines", type=int, default=None, help="Number of mines"
    )
    demo_parser.add_argument(
        "--delay", type=float, default=0.3, help="Delay between moves"
    )
    demo_parser.add_argument("--seed", type=int, default=None, help="Random seed")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
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
