import numpy as np
import pytest
from PIL import Image


def image_from_rows(rows):
    """Build an RGB image from a list of rows of (r, g, b) tuples."""
    arr = np.array(rows, dtype=np.uint8).reshape(len(rows), len(rows[0]) if rows else 0, 3)
    return Image.fromarray(arr)


@pytest.fixture
def make_image():
    return image_from_rows
