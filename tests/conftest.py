"""
Shared fixtures
"""

import pytest


@pytest.fixture
def tk_root():
    """A hidden Tk root, or a skip when no display is available"""
    tk = pytest.importorskip("tkinter")
    try:
        root = tk.Tk()
    except tk.TclError as e:
        pytest.skip(f"GUI tests require a display: {e}")
    root.withdraw()
    yield root
    root.destroy()
