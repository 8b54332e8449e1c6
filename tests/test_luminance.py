import itertools

import numpy as np
import pytest
from PIL import Image

from i2a.luminance import aa_colors, invert_aa_color, to_aa_color, to_gray

LEVELS = [0.0, 0.1, 0.25, 0.5, 0.75, 0.9, 1.0]


def test_white_is_full_intensity():
    assert to_aa_color(1, 1, 1, 1) == 255
    assert to_aa_color(1, 1, 1, 1, invert=True) == 0


def test_black_is_zero():
    assert to_aa_color(0, 0, 0, 1) == 0
    assert to_aa_color(0, 0, 0, 1, invert=True) == 255


def test_transparent_is_black():
    for r, g, b in itertools.product(LEVELS, repeat=3):
        assert to_gray(r, g, b, 0.0) == 0.0


def test_luminosity_weights():
    assert to_gray(1, 0, 0, 1) == pytest.approx(0.21)
    assert to_gray(0, 1, 0, 1) == pytest.approx(0.72)
    assert to_gray(0, 0, 1, 1) == pytest.approx(0.07)


def test_alpha_scales_gray():
    assert to_gray(1, 1, 1, 0.5) == pytest.approx(0.5)


def test_clamped_to_unit_range():
    assert to_gray(2, 2, 2, 1) == 1.0
    assert to_gray(-1, -1, -1, 1) == 0.0


def test_truncates_instead_of_rounding():
    # 0.72 * 255 = 183.6
    assert to_aa_color(0, 1, 0, 1) == 183


@pytest.mark.parametrize("channel", range(3))
def test_monotonic_in_each_channel(channel):
    for others in itertools.product(LEVELS, repeat=2):
        previous = -1.0
        for level in LEVELS:
            rgb = list(others)
            rgb.insert(channel, level)
            gray = to_gray(*rgb, 1.0)
            assert gray >= previous
            previous = gray


def test_double_inversion_is_identity():
    for value in range(256):
        assert invert_aa_color(invert_aa_color(value)) == value


def test_vectorised_matches_scalar():
    rng = np.random.default_rng(7)
    pixels = rng.integers(0, 256, size=(6, 9, 4), dtype=np.uint8)
    image = Image.fromarray(pixels)
    result = aa_colors(image)
    assert result.shape == (6, 9)
    assert result.dtype == np.uint8
    for y in range(6):
        for x in range(9):
            r, g, b, a = (int(v) / 255.0 for v in pixels[y, x])
            assert result[y, x] == to_aa_color(r, g, b, a)


def test_vectorised_invert():
    image = Image.new("RGB", (3, 2), (255, 255, 255))
    np.testing.assert_array_equal(aa_colors(image), 255)
    np.testing.assert_array_equal(aa_colors(image, invert=True), 0)


def test_vectorised_handles_grayscale_and_transparency():
    gray = Image.new("L", (2, 2), 255)
    np.testing.assert_array_equal(aa_colors(gray), 255)
    clear = Image.new("RGBA", (2, 2), (255, 255, 255, 0))
    np.testing.assert_array_equal(aa_colors(clear), 0)
