"""
Minesweeper Tile Icons
Draws the tile artwork with Pillow and scales it to the board's tile size
"""

from functools import lru_cache

from PIL import Image, ImageDraw

BASE_SIZE = 32  # Tiles are drawn at this size, then resampled

FACE_COLOR = (192, 192, 192)
LIGHT_COLOR = (255, 255, 255)
SHADOW_COLOR = (128, 128, 128)
BLACK = (0, 0, 0)
RED = (255, 0, 0)

NUMBER_COLORS = {
    1: (0, 0, 255),
    2: (0, 128, 0),
    3: (255, 0, 0),
    4: (0, 0, 128),
    5: (128, 0, 0),
    6: (0, 128, 128),
    7: (0, 0, 0),
    8: (128, 128, 128),
}

# Segments are: [top, top-right, bottom-right, bottom, bottom-left, top-left, middle]
DIGIT_SEGMENTS = {
    1: [0, 1, 1, 0, 0, 0, 0],
    2: [1, 1, 0, 1, 1, 0, 1],
    3: [1, 1, 1, 1, 0, 0, 1],
    4: [0, 1, 1, 0, 0, 1, 1],
    5: [1, 0, 1, 1, 0, 1, 1],
    6: [1, 0, 1, 1, 1, 1, 1],
    7: [1, 1, 1, 0, 0, 0, 0],
    8: [1, 1, 1, 1, 1, 1, 1],
}

TILE_NAMES = (
    'uncovered', 'empty', 'flag', 'question mark', 'mine', 'explosion',
) + tuple(str(n) for n in range(1, 9))


def _draw_raised(draw):
    """Unrevealed tile with a 3D bevel"""
    last = BASE_SIZE - 1
    draw.rectangle([0, 0, last, last], fill=FACE_COLOR)
    for i in range(3):
        draw.line([(i, i), (last - i, i)], fill=LIGHT_COLOR)
        draw.line([(i, i), (i, last - i)], fill=LIGHT_COLOR)
        draw.line([(i, last - i), (last - i, last - i)], fill=SHADOW_COLOR)
        draw.line([(last - i, i), (last - i, last - i)], fill=SHADOW_COLOR)


def _draw_sunken(draw, fill=FACE_COLOR):
    """Revealed tile: flat face with a thin shadow on the top and left edges"""
    last = BASE_SIZE - 1
    draw.rectangle([0, 0, last, last], fill=fill)
    draw.line([(0, 0), (last, 0)], fill=SHADOW_COLOR)
    draw.line([(0, 0), (0, last)], fill=SHADOW_COLOR)


def _draw_digit(draw, digit: int):
    """Seven-segment number in the classic minesweeper colours"""
    x0, y0, width, height, thick = 9, 5, 14, 22, 3
    half = height // 2
    rects = [
        (x0, y0, x0 + width, y0 + thick),
        (x0 + width - thick, y0, x0 + width, y0 + half),
        (x0 + width - thick, y0 + half, x0 + width, y0 + height),
        (x0, y0 + height - thick, x0 + width, y0 + height),
        (x0, y0 + half, x0 + thick, y0 + height),
        (x0, y0, x0 + thick, y0 + half),
        (x0, y0 + half - thick // 2, x0 + width, y0 + half - thick // 2 + thick),
    ]
    color = NUMBER_COLORS[digit]
    for lit, (left, top, right, bottom) in zip(DIGIT_SEGMENTS[digit], rects):
        if lit:
            draw.rectangle([left, top, right - 1, bottom - 1], fill=color)


def _draw_flag(draw):
    draw.polygon([(17, 6), (17, 17), (8, 12)], fill=RED)
    draw.line([(17, 6), (17, 23)], fill=BLACK, width=2)
    draw.rectangle([12, 22, 22, 23], fill=BLACK)
    draw.rectangle([9, 24, 25, 26], fill=BLACK)


def _draw_question_mark(draw):
    draw.arc([10, 5, 22, 17], start=180, end=90, fill=BLACK, width=3)
    draw.line([(16, 16), (16, 21)], fill=BLACK, width=3)
    draw.rectangle([15, 24, 17, 26], fill=BLACK)


def _draw_mine(draw):
    centre = BASE_SIZE // 2
    draw.line([(centre, 4), (centre, BASE_SIZE - 5)], fill=BLACK, width=2)
    draw.line([(4, centre), (BASE_SIZE - 5, centre)], fill=BLACK, width=2)
    draw.line([(8, 8), (BASE_SIZE - 9, BASE_SIZE - 9)], fill=BLACK, width=2)
    draw.line([(8, BASE_SIZE - 9), (BASE_SIZE - 9, 8)], fill=BLACK, width=2)
    draw.ellipse([8, 8, BASE_SIZE - 9, BASE_SIZE - 9], fill=BLACK)
    draw.rectangle([12, 12, 14, 14], fill=LIGHT_COLOR)


def _draw_tile(name: str) -> Image.Image:
    image = Image.new('RGB', (BASE_SIZE, BASE_SIZE), FACE_COLOR)
    draw = ImageDraw.Draw(image)

    if name == 'uncovered':
        _draw_raised(draw)
    elif name == 'flag':
        _draw_raised(draw)
        _draw_flag(draw)
    elif name == 'question mark':
        _draw_raised(draw)
        _draw_question_mark(draw)
    elif name == 'empty':
        _draw_sunken(draw)
    elif name == 'mine':
        _draw_sunken(draw)
        _draw_mine(draw)
    elif name == 'explosion':
        _draw_sunken(draw, fill=RED)
        _draw_mine(draw)
    elif name.isdigit() and int(name) in DIGIT_SEGMENTS:
        _draw_sunken(draw)
        _draw_digit(draw, int(name))
    else:
        raise ValueError(f"Unknown tile {name!r}")
    return image


@lru_cache(maxsize=None)
def render_tile(name: str, size: int) -> Image.Image:
    """
    Tile artwork at the requested edge length

    Args:
        name: One of TILE_NAMES
        size: Edge length in pixels

    Returns:
        A square RGB image, shared between callers; copy before mutating
    """
    if size <= 0:
        raise ValueError(f"Tile size must be positive, got {size}")
    image = _draw_tile(name)
    if size == BASE_SIZE:
        return image
    return image.resize((size, size), Image.Resampling.LANCZOS)


def tile_name(is_mine: bool, adjacent: int) -> str:
    """Name of the artwork for a revealed cell"""
    if is_mine:
        return 'mine'
    return str(adjacent) if adjacent else 'empty'


def logo(size: int) -> Image.Image:
    """Start screen artwork: a large flag"""
    image = Image.new('RGB', (BASE_SIZE, BASE_SIZE), FACE_COLOR)
    _draw_flag(ImageDraw.Draw(image))
    return image.resize((size, size), Image.Resampling.LANCZOS)
