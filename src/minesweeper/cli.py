"""
Minesweeper - Command Line Entry Point
Parses options, configures logging and opens the game window
"""

import argparse
import logging
import random
import sys
from typing import List, Optional

from .config import PRESETS, configure_logging
from .game.board import validate_dimensions
from .game.errors import InvalidConfiguration

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='minesweeper',
        description='Classic minesweeper with a tkinter interface'
    )
    parser.add_argument('--preset', choices=sorted(PRESETS),
                        help='Skip the start screen and play a preset board')
    parser.add_argument('--rows', type=int, help='Rows of a custom board')
    parser.add_argument('--cols', type=int, help='Columns of a custom board')
    parser.add_argument('--mines', type=int, help='Mines on a custom board')
    parser.add_argument('--seed', type=int,
                        help='Seed mine placement for reproducible boards')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging verbosity (default: WARNING)')
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse and validate command line options"""
    parser = build_parser()
    args = parser.parse_args(argv)

    custom = (args.rows, args.cols, args.mines)
    if any(value is not None for value in custom):
        if any(value is None for value in custom):
            parser.error('--rows, --cols and --mines must be given together')
        if args.preset:
            parser.error('--preset cannot be combined with a custom board')
        try:
            validate_dimensions(*custom)
        except InvalidConfiguration as e:
            parser.error(str(e))
    return args


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the minesweeper game"""
    args = parse_args(argv)
    configure_logging(args.log_level)
    logger.debug("Starting with options %s", vars(args))

    # tkinter is only needed once we actually open a window
    from .ui import GameWindow

    rng = random.Random(args.seed) if args.seed is not None else None
    try:
        window = GameWindow(rng=rng)
        if args.preset:
            preset = PRESETS[args.preset]
            window.start_new_game(preset.rows, preset.cols, preset.mines)
        elif args.rows is not None:
            window.start_new_game(args.rows, args.cols, args.mines)
        window.run()
    except KeyboardInterrupt:
        print("\nGame interrupted by user")
    return 0


if __name__ == '__main__':
    sys.exit(main())
