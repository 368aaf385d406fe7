import logging
from collections.abc import Callable
from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from asciirender.errors import FontLoadError
from asciirender.tone import ColorScheme

FONT_DIR = Path(__file__).resolve().parent / "fonts"
BUNDLED_FONT = FONT_DIR / "DejaVuSansMono-Bold.ttf"

log = logging.getLogger(__name__)

RowObserver = Callable[[int, int], None]


def load_font(path: str | Path | None = None, size: int = 20) -> ImageFont.FreeTypeFont:
    """Load a TrueType font, defaulting to the bundled bold monospace face."""
    path = Path(path) if path is not None else BUNDLED_FONT
    try:
        font = ImageFont.truetype(str(path), size)
    except (OSError, ValueError) as e:
        raise FontLoadError(f"Cannot load font {path}: {e}") from e
    log.debug("loaded font %s at size %d", path, size)
    return font


def canvas_size(grid_shape: tuple[int, int], cell_width: int, cell_height: int) -> tuple[int, int]:
    """(width, height) of the canvas for a (rows, cols) grid."""
    rows, cols = grid_shape
    return cols * cell_width, rows * cell_height


def composite(
    indices: np.ndarray,
    palette: str,
    scheme: ColorScheme,
    font: ImageFont.FreeTypeFont,
    cell_width: int = 17,
    cell_height: int = 17,
    glyph_offset: tuple[int, int] = (3, 1),
    on_row: RowObserver | None = None,
) -> Image.Image:
    """Draw one palette glyph per grid cell onto a fresh canvas.

    `indices` is a (rows, cols) array of palette indices. Each glyph is placed
    at its cell's top-left corner shifted by `glyph_offset`; Pillow's default
    "la" anchor puts the ascender line at that point.
    """
    rows, cols = indices.shape
    background = (scheme.background,) * 3
    fill = (scheme.glyph,) * 3
    canvas = Image.new("RGB", canvas_size(indices.shape, cell_width, cell_height), background)
    draw = ImageDraw.Draw(canvas)
    dx, dy = glyph_offset

    for r in range(rows):
        y = r * cell_height + dy
        for c in range(cols):
            char = palette[indices[r, c]]
            if char.isspace():
                continue
            draw.text((c * cell_width + dx, y), char, fill=fill, font=font)
        if on_row is not None:
            on_row(r + 1, rows)

    return canvas
