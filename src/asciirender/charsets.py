# Glyph ramps ordered from densest (index 0) to sparsest (index N-1)
DEFAULT = "@%#?+=:-. "

LONG = "$@#W9876543210?!abc;:+=-,_."

PALETTES = {
    "default": DEFAULT,
    "long": LONG,
}
