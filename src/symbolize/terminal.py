import os
import sys


def get_terminal_size(stream=None, fallback: tuple[int, int] = (80, 24)) -> tuple[int, int]:
    """Return (columns, rows) of the terminal behind ``stream`` (stdout by default).

    Falls back to ``fallback`` when the stream is not a tty.
    """
    stream = stream if stream is not None else sys.stdout
    if not stream.isatty():
        return fallback
    size = os.get_terminal_size(stream.fileno())
    return (size.columns, size.lines)


def fit_scale(image_width: int, columns: int) -> float:
    """Largest scale at which every pixel, drawn two characters wide, fits in ``columns``."""
    if image_width <= 0 or columns < 2:
        raise ValueError(f"cannot fit a {image_width}px wide image into {columns} columns")
    return (columns // 2) / image_width
