import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from asciirender.charsets import PALETTES
from asciirender.compositor import load_font
from asciirender.config import RenderConfig
from asciirender.converter import render_file
from asciirender.errors import MissingArgument, RenderError
from asciirender.sampling import check_scale

DEFAULT_OUTPUT = Path("output") / "output.png"

log = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {value}")
    return number


def positive_float(value: str) -> float:
    number = float(value)
    # NaN fails the comparison
    if not number > 0:
        raise argparse.ArgumentTypeError(f"must be a positive number: {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    defaults = RenderConfig()
    parser = argparse.ArgumentParser(description="Render an image as ASCII art, saved as a PNG")
    parser.add_argument("image", nargs="?", help="Path to input image")
    parser.add_argument(
        "scale",
        nargs="?",
        type=float,
        default=None,
        help=f"Scale factor in (0, 1] applied to the larger side (default: {defaults.default_scale})",
    )
    parser.add_argument(
        "-o", "--output", type=Path, default=DEFAULT_OUTPUT, help=f"Output PNG path (default: {DEFAULT_OUTPUT})"
    )
    parser.add_argument("--original", type=Path, default=None, help="Also save the downscaled source here")
    parser.add_argument("--font", default=None, help="Path to a .ttf font (default: bundled DejaVu Sans Mono Bold)")
    parser.add_argument(
        "--font-size",
        type=positive_int,
        default=defaults.font_size,
        help=f"Glyph font size (default: {defaults.font_size})",
    )
    parser.add_argument(
        "-p", "--palette", default="default", choices=sorted(PALETTES), help="Glyph ramp to use (default: default)"
    )
    parser.add_argument(
        "--threshold",
        type=int,
        default=defaults.dark_threshold,
        help=f"Brightness below which the canvas goes dark (default: {defaults.dark_threshold})",
    )
    parser.add_argument(
        "--damping",
        type=positive_float,
        default=defaults.damping,
        help=f"Divisor applied to the brightness correction (default: {defaults.damping})",
    )
    parser.add_argument("--rgb", action="store_true", default=False, help="Keep RGB output instead of greyscale")
    parser.add_argument("-q", "--quiet", action="store_true", default=False, help="Suppress progress output")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging level (default: WARNING)",
    )
    return parser


def _print_progress(row: int, rows: int) -> None:
    print(f"\r{row * 100 // rows}%", end="", file=sys.stderr, flush=True)


def run(args: argparse.Namespace) -> None:
    if args.image is None:
        raise MissingArgument()

    config = dataclasses.replace(
        RenderConfig(),
        font_size=args.font_size,
        palette=PALETTES[args.palette],
        dark_threshold=args.threshold,
        damping=args.damping,
        monochrome=not args.rgb,
    )
    scale = check_scale(args.scale if args.scale is not None else config.default_scale)
    font = load_font(args.font, config.font_size)

    image_path = Path(args.image)
    if not image_path.exists():
        print(f"File not found: {image_path}", file=sys.stderr)
        sys.exit(1)

    on_row = None if args.quiet else _print_progress
    result = render_file(image_path, font, scale=scale, config=config, on_row=on_row)
    if on_row is not None:
        print(file=sys.stderr)

    log.info("saving image to %s", args.output)
    args.output.parent.mkdir(parents=True, exist_ok=True)
    result.image.save(args.output, format="PNG")
    if args.original is not None:
        args.original.parent.mkdir(parents=True, exist_ok=True)
        result.downscaled.save(args.original, format="PNG")


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(stream=sys.stderr, level=getattr(logging, args.log_level), format="%(levelname)s: %(message)s")

    try:
        run(args)
    except RenderError as e:
        print(e, file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
