import numpy as np

from symbolize.model import SymbolPalette
from symbolize.sampling import Colour

RESET = "\033[0m"


def _foreground(colour: Colour) -> str:
    r, g, b = colour
    return f"\033[38;2;{r};{g};{b}m"


def format_cell(symbol: str, colour: Colour, colorize: bool = False) -> str:
    """Render one pixel as its symbol twice, optionally in truecolor.

    Terminal cells are roughly twice as tall as wide, so doubling keeps the
    picture's aspect ratio. Each glyph carries its own colour and reset.
    """
    glyph = f"{_foreground(colour)}{symbol}{RESET}" if colorize else symbol
    return glyph * 2


def render_rows(indices: np.ndarray, palette: SymbolPalette, colorize: bool = False) -> list[str]:
    """Turn an (H, W) array of palette indices into H row strings."""
    cells = [format_cell(entry.symbol, entry.colour, colorize) for entry in palette]
    return ["".join(cells[i] for i in row) for row in np.asarray(indices).tolist()]
