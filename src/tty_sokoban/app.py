# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Command line entry point for TTY Sokoban.

Usage:
    # Play the bundled levels:
    tty-sokoban

    # ASCII walls, no colours, starting at the third level:
    tty-sokoban --ascii --bw --level 3

    # Or run directly:
    python -m tty_sokoban --levels-dir ./levels
"""

import argparse
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .catalog import LevelCatalog
from .exceptions import SokobanError
from .game import GameController

logger = logging.getLogger(__name__)

CONTROLS = """\
Controls:
  Arrow keys, WASD, or HJKL    Move player
  R                            Restart current level
  N                            Next level
  P                            Previous level
  C                            Force screen redraw
  Q                            Quit game
"""


@dataclass(kw_only=True)
class GameConfig:
    """
    Runtime settings.

    Attributes:
        ascii_borders: Draw walls with ASCII characters instead of line drawing
        use_colors: Colour the board (disabled by black and white mode)
        levels_dir: Directory of .sok files; None plays the bundled levels
        start_level: One-based number of the first level to play
        log_dir: Directory for the log file
        log_level: Logging level name
    """

    ascii_borders: bool = False
    use_colors: bool = True
    levels_dir: Optional[Path] = None
    start_level: int = 1
    log_dir: Path = Path("logs")
    log_level: str = "INFO"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tty-sokoban",
        description="TTY Sokoban - a terminal-based Sokoban game",
        epilog=CONTROLS,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-a", "--ascii", dest="ascii_borders", action="store_true",
        help="Use ASCII characters for walls instead of box drawing characters",
    )
    parser.add_argument(
        "-b", "--bw", "-bw", dest="use_colors", action="store_false",
        help="Black and white mode (disable colors)",
    )
    parser.add_argument(
        "-l", "--level", dest="start_level", type=int, default=1,
        help="Level number to start from (default: 1)",
    )
    parser.add_argument(
        "--levels-dir", type=Path, default=None,
        help="Directory of .sok level files (default: bundled levels)",
    )
    parser.add_argument(
        "--log-dir", type=Path, default=Path(os.environ.get("TTY_SOKOBAN_LOG_DIR", "logs")),
        help="Directory for tty_sokoban.log (default: $TTY_SOKOBAN_LOG_DIR or ./logs)",
    )
    parser.add_argument(
        "--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    return parser


def parse_config(argv: Optional[List[str]] = None) -> GameConfig:
    args = build_parser().parse_args(argv)
    return GameConfig(
        ascii_borders=args.ascii_borders,
        use_colors=args.use_colors,
        levels_dir=args.levels_dir,
        start_level=args.start_level,
        log_dir=args.log_dir,
        log_level=args.log_level,
    )


def setup_logging(config: GameConfig, console: bool = False) -> Path:
    """
    Log to a file in ``config.log_dir``.

    The console handler is only added when the curses screen is not in use,
    since anything written to the terminal would corrupt the board.
    """
    os.makedirs(config.log_dir, exist_ok=True)
    log_file = config.log_dir / "tty_sokoban.log"

    handlers: List[logging.Handler] = [logging.FileHandler(log_file)]
    if console:
        handlers.append(logging.StreamHandler())
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True,
    )
    return log_file


def load_catalog(config: GameConfig) -> LevelCatalog:
    if config.levels_dir is not None:
        return LevelCatalog.from_directory(config.levels_dir)
    return LevelCatalog.bundled()


def create_game(config: GameConfig) -> GameController:
    """
    Build the controller for ``config``.

    Raises:
        SokobanError: if there are no levels or the start level is unusable
        FileNotFoundError: if the levels directory does not exist
    """
    catalog = load_catalog(config)
    return GameController(
        catalog,
        start_level=config.start_level - 1,
        ascii_borders=config.ascii_borders,
        use_colors=config.use_colors,
    )


def main(argv: Optional[List[str]] = None) -> int:
    config = parse_config(argv)
    try:
        setup_logging(config)
    except OSError as e:
        print(f"Cannot write log file: {e}", file=sys.stderr)
        return 1
    logger.info("TTY Sokoban starting up.")

    try:
        game = create_game(config)
    except (SokobanError, FileNotFoundError) as e:
        logger.error(f"Startup failed: {e}")
        print(e, file=sys.stderr)
        return 1

    # Imported here so the rest of the package works where curses is missing.
    from .terminal import play

    play(game)
    logger.info("TTY Sokoban shutting down.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
