"""
UI package initialization
"""

from .window import GameWindow

__all__ = ['GameWindow']
