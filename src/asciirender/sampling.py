import math

import numpy as np
from PIL import Image, ImageOps

from asciirender.errors import ScaleOutOfBound

RESAMPLE = Image.LANCZOS

# Single-channel integer modes holding 16-bit samples
HIGH_BIT_MODES = ("I", "I;16", "I;16L", "I;16B", "I;16N")


def to_8bit(image: Image.Image) -> Image.Image:
    """Scale 16-bit samples down to 8 bits; Pillow's convert() would clip them."""
    if image.mode not in HIGH_BIT_MODES:
        return image
    arr = np.clip(np.asarray(image, dtype=np.int64), 0, 65535) >> 8
    return Image.fromarray(arr.astype(np.uint8))


def check_scale(scale: float) -> float:
    """Return scale unchanged if it lies in (0, 1], else raise ScaleOutOfBound."""
    # NaN fails both comparisons
    if not (0.0 < scale <= 1.0):
        raise ScaleOutOfBound()
    return scale


def target_size(width: int, height: int, scale: float) -> int:
    """Side length of the square box the downscaled image must fit inside."""
    check_scale(scale)
    return max(1, math.floor(scale * max(width, height) + 0.5))


def downscale(image: Image.Image, scale: float) -> Image.Image:
    """Resize to fit a (target, target) box, keeping the aspect ratio.

    The larger axis becomes exactly `target`; Pillow picks the other one.
    """
    image = to_8bit(image).convert("RGB")
    target = target_size(image.width, image.height, scale)
    return ImageOps.contain(image, (target, target), method=RESAMPLE)


def sample_brightness(image: Image.Image) -> int:
    """Reduce the whole image to one pixel and return its luma (0-255)."""
    pixel = to_8bit(image).resize((1, 1), RESAMPLE).convert("L")
    return int(pixel.getpixel((0, 0)))


def luma_grid(image: Image.Image) -> np.ndarray:
    """Per-pixel luma as a (height, width) uint8 array."""
    return np.asarray(to_8bit(image).convert("L"), dtype=np.uint8)
