"""
Minesweeper GUI - Panels
Start, game and menu screens shown inside the main window
"""

import logging
import tkinter as tk
from tkinter import messagebox
from typing import TYPE_CHECKING, Dict, List

from PIL import ImageTk

from ..config import PRESETS, WINDOW_HEIGHT, tile_size
from ..game import api
from ..game.board import GameState
from ..game.cell import Annotation
from ..game.controller import RevealResult
from ..game.errors import InvalidConfiguration
from .icons import TILE_NAMES, logo, render_tile, tile_name

if TYPE_CHECKING:
    from .window import GameWindow

logger = logging.getLogger(__name__)

ANNOTATION_TILES = {
    Annotation.NONE: 'uncovered',
    Annotation.FLAGGED: 'flag',
    Annotation.QUESTIONED: 'question mark',
}

STATUS_TEXT = {
    GameState.ACTIVE: '',
    GameState.WON: 'You won!',
    GameState.LOST: 'Game over',
}


class TileImages:
    """PhotoImage versions of every tile at one size, kept alive for tkinter"""

    def __init__(self, master, size: int):
        self.size = size
        self._images: Dict[str, ImageTk.PhotoImage] = {
            name: ImageTk.PhotoImage(render_tile(name, size), master=master)
            for name in TILE_NAMES
        }

    def __getitem__(self, name: str) -> ImageTk.PhotoImage:
        return self._images[name]


class PlaceholderEntry(tk.Entry):
    """Entry showing a hint that clears on focus and returns when left empty"""

    def __init__(self, parent, placeholder: str, **kwargs):
        super().__init__(parent, width=8, **kwargs)
        self.placeholder = placeholder
        self.insert(0, placeholder)
        self.bind('<FocusIn>', self._on_focus_in)
        self.bind('<FocusOut>', self._on_focus_out)

    def _on_focus_in(self, event=None):
        if self.get() == self.placeholder:
            self.delete(0, tk.END)

    def _on_focus_out(self, event=None):
        if not self.get():
            self.insert(0, self.placeholder)


class StartPanel(tk.Frame):
    """Title screen with difficulty presets and a custom size form"""

    LOGO_SIZE = WINDOW_HEIGHT // 2

    def __init__(self, parent, window: 'GameWindow'):
        super().__init__(parent)
        self.window = window

        tk.Label(self, text='Minesweeper', font=('Arial', 40)).pack(pady=(20, 10))

        self._logo = ImageTk.PhotoImage(logo(self.LOGO_SIZE), master=self)
        tk.Label(self, image=self._logo).pack()

        presets_row = tk.Frame(self)
        presets_row.pack(pady=5)
        for preset in PRESETS.values():
            tk.Button(
                presets_row,
                text=preset.label,
                command=lambda p=preset: window.start_new_game(p.rows, p.cols, p.mines)
            ).pack(side='left', padx=5)

        tk.Button(self, text='Custom', command=self.start_custom_game).pack(pady=5)

        fields_row = tk.Frame(self)
        fields_row.pack()
        self.rows_field = PlaceholderEntry(fields_row, 'Rows')
        self.cols_field = PlaceholderEntry(fields_row, 'Cols')
        self.mines_field = PlaceholderEntry(fields_row, 'Mines')
        for field in (self.rows_field, self.cols_field, self.mines_field):
            field.pack(side='left', padx=3)

    def start_custom_game(self):
        """Validate the custom form and start a game, or tell the player why not"""
        try:
            rows, cols, mines = api.parse_custom_config(
                self.rows_field.get(), self.cols_field.get(), self.mines_field.get()
            )
        except InvalidConfiguration as e:
            logger.debug("Custom game rejected: %s", e)
            messagebox.showerror('Invalid input', str(e), parent=self)
            return
        self.window.start_new_game(rows, cols, mines)


class GamePanel(tk.Frame):
    """The board: one image label per cell"""

    def __init__(self, parent, window: 'GameWindow', rows: int, cols: int,
                 mines: int, rng=None):
        board = api.new_game(rows, cols, mines, rng)
        super().__init__(parent)
        self.window = window
        self.board = board
        self.images = TileImages(self, tile_size(rows, cols))

        self.status_label = tk.Label(self, text='', font=('Arial', 16))
        self.status_label.pack(pady=(10, 5))

        grid_frame = tk.Frame(self)
        grid_frame.pack(expand=True)
        self.tiles: List[List[tk.Label]] = []
        for row in range(rows):
            tile_row = []
            for col in range(cols):
                label = tk.Label(grid_frame, image=self.images['uncovered'],
                                 bd=0, highlightthickness=0, padx=0, pady=0)
                label.grid(row=row, column=col)
                label.bind('<Button-1>', lambda e, r=row, c=col: self.on_left_click(r, c))
                label.bind('<Button-2>', lambda e, r=row, c=col: self.on_middle_click(r, c))
                label.bind('<Button-3>', lambda e, r=row, c=col: self.on_right_click(r, c))
                tile_row.append(label)
            self.tiles.append(tile_row)

        tk.Button(self, text='Menu', command=window.open_menu).pack(pady=10)

    def on_left_click(self, row: int, col: int):
        self.apply_result(api.reveal(self.board, row, col))

    def on_middle_click(self, row: int, col: int):
        self.apply_result(api.chord(self.board, row, col))

    def on_right_click(self, row: int, col: int):
        if not self.board.active:
            return
        annotation = api.toggle_flag(self.board, row, col)
        if not self.board.cell_at(row, col).is_revealed:
            self.set_tile(row, col, ANNOTATION_TILES[annotation])

    def apply_result(self, result: RevealResult):
        """Re-render only the tiles the last action revealed"""
        if not result.state_changed:
            return
        for row, col, count in result.newly_revealed:
            if (row, col) == self.board.detonated:
                self.set_tile(row, col, 'explosion')
            else:
                self.set_tile(row, col, tile_name(self.board.cell_at(row, col).is_mine, count))
        self.status_label.config(text=STATUS_TEXT[result.state])

    def set_tile(self, row: int, col: int, name: str):
        self.tiles[row][col].config(image=self.images[name])

    @property
    def dimensions(self):
        return self.board.rows, self.board.cols, self.board.mine_count


class MenuPanel(tk.Frame):
    """Pause menu for the current game"""

    def __init__(self, parent, window: 'GameWindow', rows: int, cols: int, mines: int):
        super().__init__(parent, padx=50, pady=50)

        tk.Label(self, text=f"{rows} x {cols} | {mines} mines").pack(pady=(0, 20))

        buttons = [
            ('Restart', lambda: window.start_new_game(rows, cols, mines)),
            ('Resume', lambda: window.show_panel('game')),
            ('New Game', lambda: window.show_panel('start')),
            ('Quit', window.quit),
        ]
        self.buttons: Dict[str, tk.Button] = {}
        for text, command in buttons:
            button = tk.Button(self, text=text, width=20, command=command)
            button.pack(pady=5)
            self.buttons[text] = button

