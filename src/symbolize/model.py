import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

import numpy as np

from symbolize.errors import InvalidInputError, PaletteLookupError
from symbolize.sampling import Colour, count_colours

logger = logging.getLogger(__name__)

# Upper bound on pixel-to-palette distances held in memory at once
CHUNK_CELLS = 1 << 20


def colour_distance(a: Colour, b: Colour) -> int:
    """Manhattan distance between two RGB colours."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) + abs(a[2] - b[2])


@dataclass(frozen=True)
class AssignedColour:
    colour: Colour
    symbol: str


@dataclass(frozen=True)
class SymbolPalette:
    """The working palette: the image's most frequent colours, each paired with a symbol.

    Entries are kept in ascending order of frequency. Lookups scan them in
    that order and the first entry at the minimum distance wins.
    """

    entries: tuple[AssignedColour, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    @classmethod
    def from_counts(cls, counts: Mapping[Colour, int], symbols: Iterable[str]) -> "SymbolPalette":
        """Assign symbols to the most frequent colours in ``counts``.

        The most frequent colour gets the last symbol, the next one the
        second-to-last, and so on. Colours with equal counts rank darker
        (lower RGB value) as more frequent. Leading symbols go unused when
        there are fewer colours than symbols.
        """
        symbols = list(symbols)
        if not symbols:
            raise InvalidInputError("palette must contain at least one symbol")

        ranked = sorted(counts.items(), key=lambda item: (item[1], tuple(-c for c in item[0])))
        selected = ranked[len(ranked) - min(len(ranked), len(symbols)) :]

        # Pair from the most frequent end so the last symbol goes to the top colour
        pairs = [AssignedColour(colour, symbol) for (colour, _), symbol in zip(reversed(selected), reversed(symbols))]
        palette = cls(entries=tuple(reversed(pairs)))
        logger.debug(
            "working palette: %s", ", ".join(f"{e.symbol!r}={e.colour}" for e in palette.entries) or "<empty>"
        )
        return palette

    @classmethod
    def from_image(cls, pixels: np.ndarray, symbols: Iterable[str]) -> "SymbolPalette":
        return cls.from_counts(count_colours(pixels), symbols)

    def colours(self) -> np.ndarray:
        """Palette colours as an (N, 3) int32 array in scan order."""
        return np.array([e.colour for e in self.entries], dtype=np.int32).reshape(-1, 3)

    def find_nearest(self, colour: Colour) -> AssignedColour:
        best = None
        best_dist = None
        for entry in self.entries:
            dist = colour_distance(colour, entry.colour)
            if best_dist is None or dist < best_dist:
                best = entry
                best_dist = dist
        if best is None:
            raise PaletteLookupError(f"no palette entry to match colour {tuple(colour)}")
        return best

    def find_nearest_grid(self, pixels: np.ndarray, chunk_rows: int | None = None) -> np.ndarray:
        """Resolve every pixel of an (H, W, 3) array to a palette index.

        Rows are resolved in chunks of ``chunk_rows`` so that the per-chunk
        distance table stays near ``CHUNK_CELLS`` entries; by default the
        chunk size is derived from the image width and palette size.

        Returns an (H, W) array of indices into ``entries``.
        """
        pixels = np.asarray(pixels)
        rows, cols = pixels.shape[:2]
        indices = np.zeros((rows, cols), dtype=np.intp)
        if rows * cols == 0:
            return indices
        if not self.entries:
            raise PaletteLookupError("working palette is empty, cannot match any pixel")

        colours = self.colours()
        if chunk_rows is None:
            chunk_rows = max(1, CHUNK_CELLS // (cols * len(colours)))
        for start in range(0, rows, chunk_rows):
            chunk = pixels[start : start + chunk_rows].astype(np.int32)
            # (h, W, 1) - (N,) per channel -> (h, W, N)
            distances = np.abs(chunk[:, :, 0, None] - colours[:, 0])
            for channel in (1, 2):
                distances += np.abs(chunk[:, :, channel, None] - colours[:, channel])
            # argmin returns the first index on ties
            indices[start : start + chunk_rows] = distances.argmin(axis=2)
        return indices
