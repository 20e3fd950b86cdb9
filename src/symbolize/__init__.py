"""Convert raster images into text art, optionally coloured for truecolor terminals.

Example::

    from symbolize import symbolize

    grid = symbolize("picture.png", scale=0.1, palette=" .:#@", filter_type="nearest")
    print(grid)

Debug logging is silent unless enabled::

    import logging
    logging.basicConfig(level=logging.DEBUG)
"""

import logging

logger = logging.getLogger("symbolize")
logger.addHandler(logging.NullHandler())

from symbolize.charsets import DEFAULT_SYMBOLS, PRESETS  # noqa: E402
from symbolize.config import Config  # noqa: E402
from symbolize.converter import image_to_text, symbolize  # noqa: E402
from symbolize.engine import SymbolGrid  # noqa: E402
from symbolize.errors import InvalidInputError, PaletteLookupError, SymbolizeError  # noqa: E402
from symbolize.model import AssignedColour, SymbolPalette, colour_distance  # noqa: E402
from symbolize.sampling import FilterType, count_colours  # noqa: E402

__all__ = [
    "DEFAULT_SYMBOLS",
    "PRESETS",
    "AssignedColour",
    "Config",
    "FilterType",
    "InvalidInputError",
    "PaletteLookupError",
    "SymbolGrid",
    "SymbolPalette",
    "SymbolizeError",
    "colour_distance",
    "count_colours",
    "image_to_text",
    "symbolize",
]

__version__ = "0.1.0"
