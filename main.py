"""
Main entry point for the TicTacToe game.

This script ties together:
- Logic (board, game state, move validation, win checking)
- Render (window settings, board drawing)
- Controls (mouse input)

Run this script to play TicTacToe with two players at one mouse!
"""

import sys
from typing import Optional, TextIO, Tuple

from logic.board import CELL_WIDTH, CELL_HEIGHT
from logic.game_state import GameState, ClickResult
from render.config import RenderConfig


def parse_cell(line: str) -> Optional[Tuple[int, int]]:
    """
    Parse a "row col" console command.

    Returns:
        (row, col) tuple, or None if the line is not two integers.
    """
    parts = line.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def cell_to_pixel(row: int, col: int) -> Tuple[int, int]:
    """Pixel position at the center of a cell."""
    return col * CELL_WIDTH + CELL_WIDTH // 2, row * CELL_HEIGHT + CELL_HEIGHT // 2


def run_console(game_state: GameState, stdin: Optional[TextIO] = None, debug: bool = False):
    """
    Play in the terminal.

    Each line "row col" acts as a click on that cell. 'q' quits.
    With debug on, the click position and the move number are printed too.
    """
    stdin = stdin or sys.stdin
    print("Enter moves as 'row col' (0-2), 'q' to quit.")
    game_state.print_board()

    for line in stdin:
        line = line.strip()
        if line.lower() in ("q", "quit", "exit"):
            break

        cell = parse_cell(line)
        if cell is None:
            print(f"Invalid input: '{line}'")
            continue

        x, y = cell_to_pixel(*cell)
        if debug:
            print(f"Click at ({x}, {y})")

        result = game_state.apply_click(x, y)

        if result == ClickResult.IGNORED:
            print(f"Cell ({cell[0]}, {cell[1]}) is not available!")
            continue
        if result == ClickResult.RESET:
            print("Resetting game...")
        elif debug:
            print(f"Move #{game_state.moves[-1].move_number}")

        game_state.print_board()
        if game_state.is_game_over:
            print("Enter any move to play again.")


def main(argv=None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print clicks and the board after every move (window and console)"
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=RenderConfig.FPS,
        help="Update loop rate of the game window (default: %(default)s)"
    )
    parser.add_argument(
        "--no-caption",
        action="store_true",
        help="Do not draw the result caption in the game window"
    )
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )

    args = parser.parse_args(argv)

    if args.fps <= 0:
        parser.error("--fps must be positive")

    # Console mode (--no-ui)
    if args.no_ui:
        try:
            run_console(GameState(), debug=args.debug)
        except KeyboardInterrupt:
            print("\n\nGame interrupted by user.")
        print("Goodbye!")
        return 0

    config = RenderConfig()
    config.set_fps(args.fps)
    config.DEBUG_MODE = args.debug
    config.SHOW_CAPTION = not args.no_caption

    print("\n" + "="*60)
    print("   TicTacToe")
    print("="*60)
    print(f"   Board: {config.BOARD_SIZE}x{config.BOARD_SIZE}, "
          f"window {config.SCREEN_WIDTH}x{config.SCREEN_HEIGHT}")
    print(f"   Debug: {'on' if config.DEBUG_MODE else 'off'}")
    print("="*60 + "\n")

    import tkinter as tk
    from ui import TicTacToeUI

    try:
        ui = TicTacToeUI(config)
    except tk.TclError as e:
        print(f"ERROR: Could not open game window: {e}")
        return 1

    try:
        ui.run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
