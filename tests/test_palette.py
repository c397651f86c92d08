"""Tests for dominant color extraction."""

import numpy as np
import pytest
from PIL import Image

from gradient_carousel.palette import (
    PaletteParams, build_histogram, build_palette, extract_colors, fallback_from_index,
    hsl_to_rgb, hue_distance, rgb_to_hsl, rgb_to_hsl_array, sample_pixels, thumbnail_size,
)
from gradient_carousel.types import ColorPair

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)


def two_block_image(a_cols, b_cols, a=RED, b=BLUE, height=48):
    """Image already at sampling size so no resampling blurs the blocks."""
    img = Image.new("RGBA", (a_cols + b_cols, height), a)
    img.paste(Image.new("RGBA", (b_cols, height), b), (a_cols, 0))
    return img


def striped_image():
    img = Image.new("RGBA", (48, 48))
    for x in range(48):
        for y in range(48):
            img.putpixel((x, y), ((x * 5) % 256, (y * 7) % 256, ((x + y) * 3) % 256, 255))
    return img


def test_rgb_to_hsl_primaries():
    assert rgb_to_hsl(255, 0, 0) == (0.0, 1.0, 0.5)
    h, s, l = rgb_to_hsl(0, 0, 255)
    assert h == pytest.approx(240.0)
    assert rgb_to_hsl(128, 128, 128)[1] == 0.0


def test_hsl_to_rgb_known_values():
    assert hsl_to_rgb(0, 1.0, 0.5) == (255, 0, 0)
    assert hsl_to_rgb(120, 1.0, 0.5) == (0, 255, 0)
    assert hsl_to_rgb(240, 1.0, 0.72) == (112, 112, 255)
    assert hsl_to_rgb(0, 0.0, 0.5) == (128, 128, 128)
    assert hsl_to_rgb(-120, 1.0, 0.5) == hsl_to_rgb(240, 1.0, 0.5)


def test_hue_distance_uses_shortest_arc():
    assert hue_distance(350, 10) == pytest.approx(20)
    assert hue_distance(0, 180) == pytest.approx(180)
    assert hue_distance(30, 90) == pytest.approx(60)


def test_thumbnail_size_preserves_aspect():
    assert thumbnail_size(1000, 500) == (48, 24)
    assert thumbnail_size(500, 1000) == (24, 48)
    assert thumbnail_size(48, 48) == (48, 48)


def test_thumbnail_size_short_side_floor():
    assert thumbnail_size(1000, 100) == (48, 16)
    assert thumbnail_size(100, 1000) == (16, 48)
    assert thumbnail_size(0, 0) == (48, 48)


def test_fallback_pair_from_index():
    pair = fallback_from_index(0)
    assert pair.primary == hsl_to_rgb(0, 0.65, 0.52)
    assert pair.secondary == hsl_to_rgb(0, 0.65, 0.72)
    assert fallback_from_index(1).primary == hsl_to_rgb(37, 0.65, 0.52)


def test_transparent_image_falls_back():
    img = Image.new("RGBA", (64, 64), (255, 0, 0, 0))
    assert extract_colors(img, 3) == fallback_from_index(3)


def test_gray_image_falls_back_with_distinct_hues():
    img = Image.new("RGB", (80, 60), (120, 120, 120))
    a = extract_colors(img, 1)
    b = extract_colors(img, 2)
    assert a == fallback_from_index(1)
    assert b == fallback_from_index(2)
    assert abs(rgb_to_hsl(*a.primary)[0] - rgb_to_hsl(*b.primary)[0]) > 10


def test_near_black_and_near_white_are_ignored():
    img = two_block_image(24, 24, a=(5, 0, 0, 255), b=(255, 250, 250, 255))
    assert extract_colors(img, 4) == fallback_from_index(4)


def test_faint_alpha_is_ignored():
    img = Image.new("RGBA", (48, 48), (255, 0, 0, 12))
    assert extract_colors(img, 5) == fallback_from_index(5)


def test_missing_or_empty_image_falls_back():
    assert extract_colors(None, 6) == fallback_from_index(6)
    assert extract_colors(Image.new("RGBA", (0, 0)), 7) == fallback_from_index(7)


def test_unreadable_image_falls_back():
    class Broken:
        size = (10, 10)

        def convert(self, mode):
            raise OSError("truncated")

    assert extract_colors(Broken(), 8) == fallback_from_index(8)


def test_solid_color_gives_boosted_primary_and_light_secondary():
    img = Image.new("RGB", (200, 100), (0, 200, 0))
    pair = extract_colors(img, 0)
    assert pair.primary == (0, 255, 0)
    assert pair.secondary == hsl_to_rgb(120, 1.0, 0.72)


def test_secondary_uses_distinct_hue_above_threshold():
    """Blue block at ~71% of the red block's weight becomes the secondary."""
    pair = extract_colors(two_block_image(28, 20), 0)
    assert pair.primary == (255, 0, 0)
    h, s, l = rgb_to_hsl(*pair.secondary)
    assert h == pytest.approx(240.0, abs=1.0)
    assert l == pytest.approx(0.72, abs=0.01)


def test_secondary_degenerates_below_threshold():
    """Blue block at 50% weight is too weak: secondary is a lighter red."""
    pair = extract_colors(two_block_image(32, 16), 0)
    assert pair.primary == (255, 0, 0)
    assert pair.secondary == hsl_to_rgb(0, 1.0, 0.72)


def test_secondary_ratio_is_configurable():
    params = PaletteParams(secondary_ratio=0.4)
    pair = extract_colors(two_block_image(32, 16), 0, params)
    assert rgb_to_hsl(*pair.secondary)[0] == pytest.approx(240.0, abs=1.0)


def test_close_hues_do_not_count_as_secondary():
    """Orange-red next to red is within the hue gap, so it is not a second family."""
    img = two_block_image(26, 22, b=(255, 60, 0, 255))
    pair = extract_colors(img, 0)
    h2 = rgb_to_hsl(*pair.secondary)[0]
    h1 = rgb_to_hsl(*pair.primary)[0]
    assert h2 == pytest.approx(h1, abs=1.0)


def test_extraction_is_deterministic():
    img = striped_image()
    first = extract_colors(img, 0)
    second = extract_colors(img.copy(), 0)
    assert first == second
    assert isinstance(first, ColorPair)


def test_outputs_are_valid_rgb():
    pair = extract_colors(striped_image(), 0)
    for c in (pair.primary, pair.secondary):
        assert len(c) == 3
        assert all(isinstance(v, int) and 0 <= v <= 255 for v in c)


def test_build_palette_keeps_index_order():
    images = [None, Image.new("RGB", (30, 30), (0, 200, 0)), None]
    palette = build_palette(images)
    assert len(palette) == 3
    assert palette[0] == fallback_from_index(0)
    assert palette[1].primary == (0, 255, 0)
    assert palette[2] == fallback_from_index(2)


def test_array_hsl_matches_scalar():
    """Vectorised conversion agrees with rgb_to_hsl pixel by pixel."""
    colors = [(255, 0, 0), (0, 200, 0), (12, 34, 250), (255, 60, 0),
              (128, 128, 128), (250, 240, 10), (90, 0, 45), (0, 0, 0)]
    h, s, l = rgb_to_hsl_array(np.array(colors, dtype=np.float64))
    for i, c in enumerate(colors):
        assert (h[i], s[i], l[i]) == pytest.approx(rgb_to_hsl(*c))


def test_sample_pixels_shape_and_dtype():
    pixels = sample_pixels(Image.new("RGB", (200, 100), (0, 200, 0)))
    assert pixels.shape == (48 * 24, 4)
    assert pixels.dtype == np.uint8


def test_histogram_weights_and_filters():
    """Only colored opaque pixels land in bins, weighted by alpha and saturation."""
    pixels = np.array([
        (255, 0, 0, 255),
        (255, 0, 0, 255),
        (255, 0, 0, 0),
        (128, 128, 128, 255),
        (0, 0, 255, 255),
    ], dtype=np.uint8)
    hist = build_histogram(pixels)
    idx, w = hist.heaviest()
    assert hist.bin_hue(idx) == 0.0
    assert w == pytest.approx(2.0)
    assert hist.weight.sum() == pytest.approx(3.0)
    assert hist.average_rgb(idx) == (255, 0, 0)
    apart, apart_w = hist.heaviest_apart(0.0, 25.0)
    assert hist.bin_hue(apart) == pytest.approx(240.0)
    assert apart_w == pytest.approx(1.0)


def test_empty_histogram_has_no_heaviest_bin():
    hist = build_histogram(np.zeros((0, 4), dtype=np.uint8))
    assert hist.heaviest() == (-1, 0.0)
