"""
Command line front-end.

Usage:
    minefield play [--size N] [--mines M] [--seed S]
    minefield demo [--games G] [--size N] [--mines M] [--seed S] [--delay D]
"""
import argparse
import os
import time
from typing import Callable, List, Optional

from .agents import RandomAgent
from .game import BoardConfig, Game, MinesweeperEnv, random_source
from .game.render import render_board, status_text


HELP_TEXT = "Enter 'row col' to open a cell, 'r' to reset, 'q' to quit."


def clear_screen() -> None:
    os.system("cls" if os.name == "nt" else "clear")


def build_config(
    parser: argparse.ArgumentParser, args: argparse.Namespace
) -> BoardConfig:
    """Turn --size/--mines into a validated config, or exit with usage."""
    # Default mines to ~20% of cells
    mines = args.mines if args.mines is not None else int(args.size * args.size * 0.2)
    try:
        return BoardConfig(size=args.size, num_mines=mines)
    except ValueError as exc:
        parser.error(str(exc))


def parse_move(text: str, size: int) -> Optional[int]:
    """
    Parse a 'row col' move into a flat index.

    Returns:
        Cell index, or None if the text is not a move on this board.
    """
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        row, col = int(parts[0]), int(parts[1])
    except ValueError:
        return None
    if not (0 <= row < size and 0 <= col < size):
        return None
    return row * size + col


def print_game(game: Game) -> None:
    """Print the board with coordinates and any status label."""
    print(render_board(game.board, show_coords=True))
    label = status_text(game.state)
    if label:
        print(label)


def play(
    config: BoardConfig,
    seed: Optional[int] = None,
    input_fn: Callable[[str], str] = input,
) -> Game:
    """
    Run an interactive game on the terminal.

    Returns:
        The game as it stood when the player quit.
    """
    game = Game(config, source=random_source(seed))
    print(HELP_TEXT)
    print_game(game)

    while True:
        try:
            text = input_fn("> ").strip().lower()
        except EOFError:
            break

        if text in ("q", "quit"):
            break
        if text in ("r", "reset"):
            game.reset()
            print_game(game)
            continue

        index = parse_move(text, config.size)
        if index is None:
            print(f"Invalid move: {text!r}. {HELP_TEXT}")
            continue

        if not game.select(index):
            print("Round is over, 'r' to play again.")
            continue
        print_game(game)

    return game


def demo(
    config: BoardConfig,
    games: int = 5,
    seed: Optional[int] = None,
    delay: float = 0.0,
) -> int:
    """
    Let the random agent play a number of games.

    Args:
        config: Board configuration.
        games: Number of games to play.
        seed: Seed for both the boards and the agent.
        delay: Seconds between moves; 0 disables drawing.

    Returns:
        Number of games won.
    """
    env = MinesweeperEnv(config=config, render_mode="ansi")
    agent = RandomAgent(config.size, seed=seed)
    print(
        f"Board: {config.size}x{config.size} with {config.num_mines} mines "
        f"({100 * config.num_mines / config.total_cells:.1f}% density)"
    )

    wins = 0
    for game_number in range(games):
        observation, _ = env.reset(seed=None if seed is None else seed + game_number)
        agent.reset()
        done = False
        info = {}
        step = 0

        while not done:
            action = agent.select_action(observation, env.get_action_mask())
            observation, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            if delay > 0:
                clear_screen()
                row, col = agent.action_to_position(action)
                print(f"=== Game {game_number + 1}/{games} | Step {step} ===")
                print(f"Last move: ({row}, {col})\n")
                print(env.render())
                time.sleep(delay)

        if info.get("game_state") == "WON":
            wins += 1
        print(
            f"Game {game_number + 1}/{games} | {info.get('game_state')} | "
            f"Steps: {step} | Opened: {info.get('opened')}"
        )

    print(f"\n=== Final: {wins}/{games} wins ({100 * wins / games:.0f}%) ===")
    return wins


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser with play and demo subcommands."""
    parser = argparse.ArgumentParser(
        prog="minefield", description="Minefield - a Minesweeper-style puzzle"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    demo_parser = subparsers.add_parser("demo", help="Watch a random agent play")

    for sub in (play_parser, demo_parser):
        sub.add_argument("--size", type=int, default=10, help="Board size (NxN)")
        sub.add_argument(
            "--mines",
            type=int,
            default=None,
            help="Number of mines (default: ~20%% of cells)",
        )
        sub.add_argument("--seed", type=int, default=None, help="Random seed")

    demo_parser.add_argument("--games", type=int, default=5, help="Number of games")
    demo_parser.add_argument(
        "--delay", type=float, default=0.0, help="Delay between moves"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments and run the appropriate command."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command == "play":
        play(build_config(parser, args), seed=args.seed)
    elif args.command == "demo":
        if args.games < 1:
            parser.error("--games must be at least 1")
        demo(
            build_config(parser, args),
            games=args.games,
            seed=args.seed,
            delay=args.delay,
        )
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
