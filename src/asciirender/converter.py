import logging
from dataclasses import dataclass
from pathlib import Path

import numpy as np
from PIL import Image, ImageFont

from asciirender.compositor import RowObserver, composite
from asciirender.config import RenderConfig
from asciirender.correction import correct
from asciirender.sampling import downscale, luma_grid, sample_brightness
from asciirender.tone import ColorScheme, glyph_indices

log = logging.getLogger(__name__)


@dataclass
class RenderResult:
    image: Image.Image  # final, corrected output
    downscaled: Image.Image
    indices: np.ndarray  # (rows, cols) palette indices
    scheme: ColorScheme
    original_brightness: int
    canvas_brightness: int
    delta: int


def render(
    image: Image.Image,
    font: ImageFont.FreeTypeFont,
    scale: float | None = None,
    config: RenderConfig = RenderConfig(),
    on_row: RowObserver | None = None,
) -> RenderResult:
    if scale is None:
        scale = config.default_scale
    small = downscale(image, scale)

    original_brightness = sample_brightness(small)
    scheme = ColorScheme.for_brightness(original_brightness, config.dark_threshold)
    log.info("original image brightness: %d", original_brightness)
    log.info("colour scheme: background=%d glyph=%d", scheme.background, scheme.glyph)
    log.info(
        "image width, height after resize: %d*%d, %d*%d",
        small.width,
        config.cell_width,
        small.height,
        config.cell_height,
    )

    indices = glyph_indices(luma_grid(small), len(config.palette), invert=scheme.inverted)
    canvas = composite(
        indices,
        config.palette,
        scheme,
        font,
        cell_width=config.cell_width,
        cell_height=config.cell_height,
        glyph_offset=config.glyph_offset,
        on_row=on_row,
    )

    output, canvas_brightness, delta = correct(
        canvas, original_brightness, damping=config.damping, monochrome=config.monochrome
    )
    log.info("output image brightness: %d (adjusted by %+d)", canvas_brightness, delta)

    return RenderResult(
        image=output,
        downscaled=small,
        indices=indices,
        scheme=scheme,
        original_brightness=original_brightness,
        canvas_brightness=canvas_brightness,
        delta=delta,
    )


def render_file(
    path: str | Path,
    font: ImageFont.FreeTypeFont,
    scale: float | None = None,
    config: RenderConfig = RenderConfig(),
    on_row: RowObserver | None = None,
) -> RenderResult:
    with Image.open(path) as image:
        image.load()
        return render(image, font, scale=scale, config=config, on_row=on_row)
