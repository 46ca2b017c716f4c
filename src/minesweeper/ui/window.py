"""
Minesweeper GUI - Main Window
Holds the start, game and menu panels and switches between them
"""

import logging
import random
import tkinter as tk
from typing import Dict, Optional

from ..config import TITLE, WINDOW_HEIGHT, WINDOW_WIDTH
from .panels import GamePanel, MenuPanel, StartPanel

logger = logging.getLogger(__name__)


class GameWindow:
    """Main GUI class for the minesweeper game"""

    def __init__(self, rng: Optional[random.Random] = None, root: Optional[tk.Tk] = None):
        self.root = root if root is not None else tk.Tk()
        self.root.title(TITLE)
        self.root.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}")
        self.root.resizable(False, False)
        self.rng = rng

        self.container = tk.Frame(self.root)
        self.container.pack(fill='both', expand=True)
        self.container.grid_rowconfigure(0, weight=1)
        self.container.grid_columnconfigure(0, weight=1)

        self.panels: Dict[str, tk.Frame] = {}
        self.current_panel: Optional[str] = None
        self._add_panel('start', StartPanel(self.container, self))
        self.show_panel('start')

    def _add_panel(self, name: str, panel: tk.Frame):
        """Replace the panel registered under name"""
        old = self.panels.pop(name, None)
        if old is not None:
            old.destroy()
        panel.grid(row=0, column=0, sticky='nsew')
        self.panels[name] = panel

    @property
    def game_panel(self) -> Optional[GamePanel]:
        return self.panels.get('game')

    def show_panel(self, name: str):
        """Bring a panel to the front"""
        panel = self.panels.get(name)
        if panel is None:
            logger.debug("No %s panel to show", name)
            return
        panel.tkraise()
        self.current_panel = name

    def start_new_game(self, rows: int, cols: int, mines: int):
        """Build a fresh board and show it; raises InvalidConfiguration"""
        panel = GamePanel(self.container, self, rows, cols, mines, self.rng)
        self._add_panel('game', panel)
        self.show_panel('game')

    def open_menu(self):
        """Show the pause menu for the game in progress"""
        if self.game_panel is None:
            return
        rows, cols, mines = self.game_panel.dimensions
        self._add_panel('menu', MenuPanel(self.container, self, rows, cols, mines))
        self.show_panel('menu')

    def quit(self):
        self.root.destroy()

    def run(self):
        """Start the GUI main loop"""
        self.root.mainloop()
