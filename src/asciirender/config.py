from dataclasses import dataclass

from asciirender.charsets import DEFAULT


@dataclass(frozen=True)
class RenderConfig:
    """Tuned constants for one render run.

    The defaults reproduce the reference look: 17x17 cells holding a bold
    monospace glyph at size 20, drawn 3px right and 1px down from the cell
    corner. Threshold and damping are empirical and have no derivation.
    """

    cell_width: int = 17
    cell_height: int = 17
    font_size: int = 20
    glyph_offset: tuple[int, int] = (3, 1)
    dark_threshold: int = 110
    damping: float = 1.5
    default_scale: float = 0.33
    palette: str = DEFAULT
    monochrome: bool = True

    def __post_init__(self):
        if self.cell_width <= 0 or self.cell_height <= 0:
            raise ValueError(f"Cell size must be positive: {self.cell_width}x{self.cell_height}")
        if len(self.palette) < 2:
            raise ValueError(f"Palette needs at least two glyphs: {self.palette!r}")
        if self.damping <= 0:
            raise ValueError(f"Damping must be positive: {self.damping}")
