"""
TTY Sokoban Simple Example

This script demonstrates basic usage of the game engine without a terminal.
It loads the first bundled level, plays a few moves and prints the board.

Usage:
    python examples/sokoban_simple.py
"""

import logging
import sys
from pathlib import Path

# Add src directory to Python path
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from tty_sokoban import Feedback, GameController, Intent, LevelCatalog
from tty_sokoban.render import render_text, status_lines


def print_board(game):
    """Print a visual representation of the Sokoban board."""
    view = game.view()
    width = view.board_shape[1]

    print("\nCurrent Board:")
    print("─" * width)
    print(render_text(view))
    print("─" * width)
    for line in status_lines(view):
        print(line)


def main():
    logging.basicConfig(level=logging.INFO, format='%(name)s - %(levelname)s - %(message)s')

    print("TTY Sokoban Example")
    print("=" * 50)

    game = GameController(LevelCatalog.bundled(), ascii_borders=True)
    print_board(game)

    # Solves the first bundled level: two pushes to the right
    example_moves = [Intent.MOVE_UP, Intent.MOVE_RIGHT, Intent.MOVE_RIGHT, Intent.MOVE_RIGHT]

    for i, intent in enumerate(example_moves, 1):
        print(f"\n--- Move {i}: {intent.name} ---")
        feedback = game.handle(intent)
        print(f"Result: {feedback.value}")

        if feedback is not Feedback.BLOCKED:
            print_board(game)

        if game.level_complete:
            print("\n" + "=" * 50)
            print("CONGRATULATIONS! Puzzle solved!")
            print("=" * 50)
            break
    else:
        view = game.view()
        print(f"\nCurrent progress: {view.boxes_on_goal}/{view.boxes_total} boxes on goals")

    if game.handle(Intent.NEXT_LEVEL) is Feedback.LEVEL_CHANGED:
        print("\nOn to the next level:")
        print_board(game)


if __name__ == "__main__":
    main()
