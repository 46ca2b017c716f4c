"""
Minesweeper Game - Main Entry Point
Run from a source checkout without installing the package
"""

import os
import sys

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from minesweeper.cli import main


if __name__ == "__main__":
    sys.exit(main())
