import argparse
import logging
import sys
from pathlib import Path

from PIL import Image

from symbolize.charsets import DEFAULT_SYMBOLS, PRESETS
from symbolize.config import Config
from symbolize.converter import image_to_text
from symbolize.errors import SymbolizeError
from symbolize.sampling import FilterType
from symbolize.terminal import fit_scale, get_terminal_size

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="symbolize", description="Convert a raster image into its symbolic view")
    parser.add_argument("path", help="Path to the original picture")
    parser.add_argument(
        "--scale", type=float, default=1.0, help="Size of the output relative to the original (default: 1.0)"
    )
    symbol_source = parser.add_mutually_exclusive_group()
    symbol_source.add_argument(
        "-s",
        "--symbols",
        default=None,
        help=f"Symbols used to fill the picture, most frequent colour takes the last one (default: {DEFAULT_SYMBOLS!r})",
    )
    symbol_source.add_argument(
        "-p", "--preset", choices=sorted(PRESETS), default=None, help="Use a named symbol set instead of --symbols"
    )
    parser.add_argument(
        "-f",
        "--filter",
        default=FilterType.TRIANGLE.value,
        choices=[f.value for f in FilterType],
        help="Resampling filter used when scaling (default: triangle)",
    )
    parser.add_argument(
        "-c", "--colorize", action="store_true", default=False, help="Colour the output for truecolor terminals"
    )
    parser.add_argument("--fit", action="store_true", default=False, help="Pick the scale that fits the terminal width")
    parser.add_argument("-o", "--output", default=None, help="Write the result to a file instead of stdout")
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log conversion details to stderr")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    symbols = PRESETS[args.preset] if args.preset else args.symbols
    if symbols is None:
        symbols = DEFAULT_SYMBOLS

    image_path = Path(args.path)
    if not image_path.exists():
        print(f"File not found: {image_path}", file=sys.stderr)
        sys.exit(1)

    config = Config(scale=args.scale, symbols=symbols, filter_type=args.filter, colorize=args.colorize)
    try:
        with Image.open(image_path) as image:
            if args.fit:
                config.scale = fit_scale(image.width, get_terminal_size()[0])
                logger.debug("fitting to terminal with scale %.4f", config.scale)
            result = image_to_text(image, config)
    except OSError as e:
        # Covers unidentified formats, directories and truncated files
        logger.debug("reading %s failed: %s", image_path, e)
        print(f"Cannot read image: {image_path}", file=sys.stderr)
        sys.exit(1)
    except (SymbolizeError, ValueError) as e:
        print(e, file=sys.stderr)
        sys.exit(1)

    if args.output:
        Path(args.output).write_bytes(bytes(result))
        return
    for line in result:
        print(line)
