from dataclasses import dataclass

import numpy as np

LIGHT = 255
DARK = 0


def map_range(value, from_range: tuple[float, float], to_range: tuple[float, float]):
    """Linearly map value from one interval onto another. Works on scalars and arrays."""
    (a, b), (c, d) = from_range, to_range
    return c + (value - a) * (d - c) / (b - a)


@dataclass(frozen=True)
class ColorScheme:
    background: int
    glyph: int

    def __post_init__(self):
        if {self.background, self.glyph} != {DARK, LIGHT}:
            raise ValueError(f"Colour scheme needs opposite extremes, got {self.background}/{self.glyph}")

    @property
    def inverted(self) -> bool:
        """True for light glyphs on a dark background."""
        return self.background == DARK

    @classmethod
    def for_brightness(cls, brightness: int, threshold: int = 110) -> "ColorScheme":
        if brightness < threshold:
            return cls(background=DARK, glyph=LIGHT)
        return cls(background=LIGHT, glyph=DARK)


def glyph_indices(grid: np.ndarray, palette_length: int, invert: bool = False) -> np.ndarray:
    """Map a grid of luma values to palette indices.

    Palettes run densest-first, which suits dark glyphs on a light canvas.
    With `invert`, the mapping is flipped so dense glyphs still land on the
    prominent regions once the canvas is dark.
    """
    last = palette_length - 1
    mapped = map_range(np.asarray(grid, dtype=np.float64), (0.0, 255.0), (0.0, float(last)))
    indices = np.clip(np.floor(mapped + 0.5), 0, last).astype(np.intp)
    if invert:
        indices = last - indices
    return indices


def glyph_index(value: int, palette_length: int, invert: bool = False) -> int:
    return int(glyph_indices(np.array(value), palette_length, invert))
