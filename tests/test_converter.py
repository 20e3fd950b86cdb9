import re
from unittest import mock

import pytest
from PIL import Image

from symbolize.config import Config
from symbolize.converter import image_to_text, symbolize
from symbolize.errors import InvalidInputError
from symbolize.sampling import FilterType

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (255, 0, 0)

ANSI = re.compile(r"\033\[[0-9;]*m")


def test_two_pixel_example():
    img = Image.new("RGB", (2, 1))
    img.putpixel((0, 0), BLACK)
    img.putpixel((1, 0), WHITE)
    result = symbolize(img, 1.0, [" ", "@"], FilterType.NEAREST, False)
    assert result.to_rows() == ["@@  "]


def test_dominant_colour_gets_last_symbol(make_image):
    img = make_image([[BLACK, BLACK, WHITE], [BLACK, WHITE, BLACK]])
    result = symbolize(img, palette="ab", filter_type="nearest")
    assert result.to_rows() == ["bbbbaa", "bbaabb"]


def test_nearest_colour_used_for_unassigned_pixels(make_image):
    near_black = (20, 10, 0)
    img = make_image([[BLACK, BLACK, BLACK, WHITE, WHITE, near_black]])
    result = symbolize(img, palette=" @", filter_type="nearest")
    assert str(result) == "@@@@@@    @@"


def test_output_shape(make_image):
    colours = [BLACK, WHITE, RED, (0, 255, 0), (0, 0, 255)]
    rows = [[colours[(x * y + x) % 5] for x in range(7)] for y in range(4)]
    result = symbolize(make_image(rows), palette=" .:#@", filter_type="nearest")
    assert result.height == 4
    assert all(len(row) == 14 for row in result)


def test_output_shape_colorized_ignoring_escapes(make_image):
    rows = [[BLACK, RED, WHITE], [RED, RED, BLACK]]
    result = symbolize(make_image(rows), palette=".#@", filter_type="nearest", colorize=True)
    assert result.height == 2
    assert all(len(ANSI.sub("", row)) == 6 for row in result)


def test_scaling_changes_shape():
    img = Image.new("RGB", (40, 20), WHITE)
    result = symbolize(img, scale=0.25, filter_type="triangle")
    assert result.height == 5
    assert all(len(row) == 20 for row in result)


def test_colour_output_uses_representative_colour(make_image):
    img = make_image([[RED, RED, (250, 5, 5)]])
    result = symbolize(img, palette="x", filter_type="nearest", colorize=True)
    assert result.to_string() == "\033[38;2;255;0;0mx\033[0m" * 6


def test_no_colour_has_no_escapes(make_image):
    img = make_image([[RED, WHITE]])
    result = symbolize(img, palette=" @", colorize=False)
    assert "\033" not in str(result)


def test_deterministic(make_image):
    rows = [[(x * 37 % 256, y * 91 % 256, (x + y) * 13 % 256) for x in range(12)] for y in range(9)]
    img = make_image(rows)
    first = symbolize(img, scale=0.7, palette=" .:-=+*#%@", colorize=True)
    second = symbolize(img, scale=0.7, palette=" .:-=+*#%@", colorize=True)
    assert bytes(first) == bytes(second)


def test_tiny_scale_gives_empty_output():
    img = Image.new("RGB", (3, 3), WHITE)
    result = symbolize(img, scale=0.1)
    assert result.to_rows() == []
    assert str(result) == ""


def test_zero_width_keeps_rows():
    img = Image.new("RGB", (2, 20), WHITE)
    result = symbolize(img, scale=0.25)
    assert result.to_rows() == [""] * 5


def test_accepts_file_path(tmp_path, make_image):
    path = tmp_path / "picture.png"
    make_image([[BLACK, BLACK, WHITE]]).save(path)
    assert symbolize(path, palette=" @", filter_type="nearest").to_rows() == ["@@@@  "]
    assert symbolize(str(path), palette=" @", filter_type="nearest").to_rows() == ["@@@@  "]


def test_accepts_greyscale_image():
    img = Image.new("L", (2, 2), 0)
    assert symbolize(img, palette="#").to_rows() == ["####", "####"]


def test_empty_palette_rejected_before_processing():
    img = mock.Mock(spec=Image.Image)
    with pytest.raises(InvalidInputError, match="at least one symbol"):
        symbolize(img, palette="")
    img.convert.assert_not_called()


def test_empty_palette_rejected_before_opening(tmp_path):
    with pytest.raises(InvalidInputError):
        symbolize(tmp_path / "missing.png", palette=[])


def test_multi_character_symbol_rejected():
    with pytest.raises(InvalidInputError, match="single characters"):
        symbolize(Image.new("RGB", (1, 1)), palette=["ab", "c"])


@pytest.mark.parametrize("scale", [-1.0, 0.0, float("nan"), float("inf")])
def test_bad_scale_rejected_before_resizing(scale):
    img = mock.Mock(spec=Image.Image)
    with mock.patch("symbolize.converter.resize_image") as resize:
        with pytest.raises(InvalidInputError, match="scale"):
            symbolize(img, scale=scale)
    resize.assert_not_called()


def test_unknown_filter_rejected():
    with pytest.raises(InvalidInputError, match="unknown filter type"):
        symbolize(Image.new("RGB", (1, 1)), filter_type="bogus")


def test_image_to_text_uses_config(make_image):
    img = make_image([[BLACK, BLACK, WHITE]])
    config = Config(scale=1.0, symbols=" @", filter_type="nearest")
    assert image_to_text(img, config).to_rows() == ["@@@@  "]
    assert config.filter_type is FilterType.NEAREST


def test_image_to_text_defaults():
    img = Image.new("RGB", (2, 1), BLACK)
    assert image_to_text(img).to_rows() == ["&&&&"]


def test_image_opened_from_path_is_closed(tmp_path, make_image):
    path = tmp_path / "picture.png"
    make_image([[BLACK, WHITE]]).save(path)
    opened = mock.MagicMock()
    opened.__enter__.return_value = Image.open(path)
    with mock.patch("symbolize.converter.Image.open", return_value=opened) as image_open:
        assert symbolize(path, palette=" @", filter_type="nearest").to_rows() == ["@@  "]
    image_open.assert_called_once_with(path)
    opened.__exit__.assert_called_once()


def test_caller_image_is_left_open(make_image):
    img = make_image([[BLACK, WHITE]])
    symbolize(img, palette=" @")
    assert img.getpixel((1, 0)) == WHITE
