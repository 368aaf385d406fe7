import math

import numpy as np
from PIL import Image

from asciirender.sampling import sample_brightness


def brightness_delta(original: int, current: int, damping: float = 1.5) -> int:
    """Uniform intensity shift that moves `current` part of the way to `original`.

    Dividing by `damping` under-corrects on purpose, since a single 1x1 sample
    is only a coarse proxy for perceived brightness.
    """
    return math.floor((original - current) / damping)


def brighten(image: Image.Image, delta: int) -> Image.Image:
    """Add delta to every channel of every pixel, clamped to 0-255."""
    arr = np.asarray(image, dtype=np.int16)
    out = np.clip(arr + delta, 0, 255).astype(np.uint8)
    return Image.fromarray(out)


def correct(
    canvas: Image.Image,
    original_brightness: int,
    damping: float = 1.5,
    monochrome: bool = True,
) -> tuple[Image.Image, int, int]:
    """Re-centre the canvas brightness on the original's.

    Returns (image, canvas_brightness, delta). The canvas itself is not modified.
    """
    canvas_brightness = sample_brightness(canvas)
    delta = brightness_delta(original_brightness, canvas_brightness, damping)
    image = brighten(canvas, delta)
    if monochrome:
        image = image.convert("L")
    return image, canvas_brightness, delta
