import logging
from collections.abc import Iterable
from pathlib import Path

from PIL import Image

from symbolize.charsets import DEFAULT_SYMBOLS
from symbolize.config import Config, validate_scale, validate_symbols
from symbolize.engine import SymbolGrid
from symbolize.model import SymbolPalette
from symbolize.render import render_rows
from symbolize.sampling import FilterType, resize_image

logger = logging.getLogger(__name__)


def symbolize(
    image: Image.Image | str | Path,
    scale: float = 1.0,
    palette: Iterable[str] = DEFAULT_SYMBOLS,
    filter_type: FilterType | str = FilterType.TRIANGLE,
    colorize: bool = False,
) -> SymbolGrid:
    """Convert an image to text art.

    The image is scaled by ``scale`` with ``filter_type``. The most frequent
    colours of the scaled image are paired with ``palette`` symbols (the
    most frequent colour takes the last symbol) and every pixel is drawn
    as two copies of its nearest colour's symbol. With ``colorize`` each
    glyph is wrapped in a truecolor escape of that colour.

    Arguments are validated before the image is opened or resized.
    """
    symbols = validate_symbols(palette)
    scale = validate_scale(scale)
    filter_type = FilterType.from_name(filter_type)

    if isinstance(image, Image.Image):
        pixels = resize_image(image, scale, filter_type)
    else:
        with Image.open(image) as opened:
            pixels = resize_image(opened, scale, filter_type)

    working_palette = SymbolPalette.from_image(pixels, symbols)
    indices = working_palette.find_nearest_grid(pixels)
    grid = SymbolGrid(render_rows(indices, working_palette, colorize))
    logger.debug("rendered %d rows from a %d-symbol working palette", grid.height, len(working_palette))
    return grid


def image_to_text(image: Image.Image | str | Path, config: Config | None = None) -> SymbolGrid:
    config = config or Config()
    config.validate()
    return symbolize(
        image,
        scale=config.scale,
        palette=config.symbols,
        filter_type=config.filter_type,
        colorize=config.colorize,
    )
