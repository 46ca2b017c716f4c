"""
Minesweeper
Classic single-player minesweeper with a tkinter interface
"""

__version__ = "1.0.0"
