import math
from collections.abc import Iterable
from dataclasses import dataclass

from symbolize.charsets import DEFAULT_SYMBOLS
from symbolize.errors import InvalidInputError
from symbolize.sampling import FilterType


def validate_symbols(symbols: Iterable[str]) -> str:
    """Return ``symbols`` as a string, rejecting empty or multi-character entries."""
    symbols = list(symbols)
    if not symbols:
        raise InvalidInputError("palette must contain at least one symbol")
    for symbol in symbols:
        if not isinstance(symbol, str) or len(symbol) != 1:
            raise InvalidInputError(f"palette symbols must be single characters, got {symbol!r}")
    return "".join(symbols)


def validate_scale(scale: float) -> float:
    try:
        scale = float(scale)
    except (TypeError, ValueError):
        raise InvalidInputError(f"scale must be a number, got {scale!r}") from None
    if not math.isfinite(scale) or scale <= 0:
        raise InvalidInputError(f"scale must be a positive number, got {scale}")
    return scale


@dataclass
class Config:
    scale: float = 1.0
    symbols: str = DEFAULT_SYMBOLS
    filter_type: FilterType | str = FilterType.TRIANGLE
    colorize: bool = False

    def validate(self) -> None:
        """Normalise fields in place, raising InvalidInputError on the first bad one."""
        self.symbols = validate_symbols(self.symbols)
        self.scale = validate_scale(self.scale)
        self.filter_type = FilterType.from_name(self.filter_type)
