"""Dominant color extraction - reduces an image to a two-color palette.

The image is shrunk to a small thumbnail, near-black, near-white and gray
pixels are dropped, and the rest are binned into a hue x saturation
histogram weighted toward saturated mid-tones. The heaviest bin gives the
primary color; the heaviest bin of a clearly different hue gives the
secondary one, if it is strong enough.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np
from PIL import Image

from .types import ColorPair, RGB
from .math_utils import round_half_up
from .config import (
    PALETTE_THUMB_MAX, PALETTE_THUMB_MIN,
    PALETTE_MIN_ALPHA, PALETTE_MIN_LIGHTNESS, PALETTE_MAX_LIGHTNESS, PALETTE_MIN_SATURATION,
    PALETTE_HUE_BINS, PALETTE_SAT_BINS, PALETTE_MIDTONE_BIAS,
    PALETTE_MIN_HUE_GAP, PALETTE_SECONDARY_RATIO,
    PALETTE_PRIMARY_LIGHTNESS, PALETTE_SECONDARY_LIGHTNESS,
    PALETTE_SAT_FLOOR, PALETTE_PRIMARY_SAT_BOOST, PALETTE_SECONDARY_SAT_BOOST,
    FALLBACK_HUE_STEP, FALLBACK_SATURATION, FALLBACK_LIGHTNESS,
)
from .logging import log


@dataclass(frozen=True)
class PaletteParams:
    """Extraction thresholds and color treatment."""
    thumb_max: int = PALETTE_THUMB_MAX
    thumb_min: int = PALETTE_THUMB_MIN
    min_alpha: float = PALETTE_MIN_ALPHA
    min_lightness: float = PALETTE_MIN_LIGHTNESS
    max_lightness: float = PALETTE_MAX_LIGHTNESS
    min_saturation: float = PALETTE_MIN_SATURATION
    hue_bins: int = PALETTE_HUE_BINS
    sat_bins: int = PALETTE_SAT_BINS
    midtone_bias: float = PALETTE_MIDTONE_BIAS
    min_hue_gap: float = PALETTE_MIN_HUE_GAP
    secondary_ratio: float = PALETTE_SECONDARY_RATIO
    primary_lightness: float = PALETTE_PRIMARY_LIGHTNESS
    secondary_lightness: float = PALETTE_SECONDARY_LIGHTNESS
    sat_floor: float = PALETTE_SAT_FLOOR
    primary_sat_boost: float = PALETTE_PRIMARY_SAT_BOOST
    secondary_sat_boost: float = PALETTE_SECONDARY_SAT_BOOST


DEFAULT_PARAMS = PaletteParams()


# ═══════════════════════════════════════════════════════════════════════════
# Color space helpers
# ═══════════════════════════════════════════════════════════════════════════

def rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert 0-255 RGB to (hue 0-360, saturation 0-1, lightness 0-1)."""
    r /= 255.0
    g /= 255.0
    b /= 255.0
    mx = max(r, g, b)
    mn = min(r, g, b)
    l = (mx + mn) / 2.0

    if mx == mn:
        return (0.0, 0.0, l)

    d = mx - mn
    s = d / (2.0 - mx - mn) if l > 0.5 else d / (mx + mn)
    if mx == r:
        h = (g - b) / d + (6.0 if g < b else 0.0)
    elif mx == g:
        h = (b - r) / d + 2.0
    else:
        h = (r - g) / d + 4.0
    return (h / 6.0 * 360.0, s, l)


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """Convert (hue degrees, saturation 0-1, lightness 0-1) to 0-255 RGB."""
    h = (h % 360.0) / 360.0
    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)
    return (round_half_up(r * 255), round_half_up(g * 255), round_half_up(b * 255))


def hue_distance(a: float, b: float) -> float:
    """Shortest arc between two hues in degrees."""
    d = abs(a - b) % 360.0
    return min(d, 360.0 - d)


# ═══════════════════════════════════════════════════════════════════════════
# Extraction
# ═══════════════════════════════════════════════════════════════════════════

def fallback_from_index(index: int) -> ColorPair:
    """Deterministic synthetic palette for items whose image yields nothing."""
    h = (index * FALLBACK_HUE_STEP) % 360
    light1, light2 = FALLBACK_LIGHTNESS
    return ColorPair(
        primary=hsl_to_rgb(h, FALLBACK_SATURATION, light1),
        secondary=hsl_to_rgb(h, FALLBACK_SATURATION, light2),
    )


def thumbnail_size(width: int, height: int, params: PaletteParams = DEFAULT_PARAMS) -> Tuple[int, int]:
    """Sampling size: longest side thumb_max, short side at least thumb_min."""
    ratio = width / height if width and height else 1.0
    if ratio >= 1:
        return (params.thumb_max, max(params.thumb_min, round_half_up(params.thumb_max / ratio)))
    return (max(params.thumb_min, round_half_up(params.thumb_max * ratio)), params.thumb_max)


@dataclass
class HueHistogram:
    """Weighted hue x saturation histogram with per-bin RGB sums."""
    hue_bins: int
    sat_bins: int

    def __post_init__(self):
        self.weight = np.zeros(self.size)
        self.rgb_sum = np.zeros((self.size, 3))

    @property
    def size(self) -> int:
        return self.hue_bins * self.sat_bins

    def bin_index(self, h: np.ndarray, s: np.ndarray) -> np.ndarray:
        hi = np.clip((h / 360.0 * self.hue_bins).astype(np.int64), 0, self.hue_bins - 1)
        si = np.clip((s * self.sat_bins).astype(np.int64), 0, self.sat_bins - 1)
        return hi * self.sat_bins + si

    def bin_hue(self, idx):
        """Lower edge hue of the bin(s), degrees."""
        return (idx // self.sat_bins) * (360.0 / self.hue_bins)

    def add(self, idx: np.ndarray, rgb: np.ndarray, w: np.ndarray) -> None:
        """Accumulate weighted pixels into their bins."""
        self.weight += np.bincount(idx, weights=w, minlength=self.size)
        for c in range(3):
            self.rgb_sum[:, c] += np.bincount(idx, weights=rgb[:, c] * w, minlength=self.size)

    def average_rgb(self, idx: int) -> RGB:
        w = self.weight[idx] or 1e-6
        r, g, b = self.rgb_sum[idx] / w
        return (round_half_up(r), round_half_up(g), round_half_up(b))

    @staticmethod
    def _first_max(weights: np.ndarray) -> Tuple[int, float]:
        i = int(np.argmax(weights))
        w = float(weights[i])
        return (i, w) if w > 0 else (-1, 0.0)

    def heaviest(self) -> Tuple[int, float]:
        """(bin, weight) of the heaviest bin; (-1, 0.0) if all empty."""
        return self._first_max(self.weight)

    def heaviest_apart(self, hue: float, min_gap: float) -> Tuple[int, float]:
        """Heaviest bin whose hue is at least min_gap degrees from ``hue``."""
        d = np.abs(self.bin_hue(np.arange(self.size)) - hue) % 360.0
        d = np.minimum(d, 360.0 - d)
        return self._first_max(np.where(d >= min_gap, self.weight, 0.0))


def rgb_to_hsl_array(rgb: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Vectorised rgb_to_hsl over an (N, 3) array of 0-255 channels."""
    c = rgb / 255.0
    r, g, b = c[:, 0], c[:, 1], c[:, 2]
    mx = c.max(axis=1)
    mn = c.min(axis=1)
    l = (mx + mn) / 2.0
    d = mx - mn
    chromatic = d > 0
    dd = np.where(chromatic, d, 1.0)
    denom = np.where(l > 0.5, 2.0 - mx - mn, mx + mn)
    s = np.where(chromatic, d / np.where(chromatic, denom, 1.0), 0.0)
    h = np.where(
        mx == r, (g - b) / dd + np.where(g < b, 6.0, 0.0),
        np.where(mx == g, (b - r) / dd + 2.0, (r - g) / dd + 4.0),
    )
    h = np.where(chromatic, h / 6.0 * 360.0, 0.0)
    return h, s, l


def build_histogram(pixels: np.ndarray, params: PaletteParams = DEFAULT_PARAMS) -> HueHistogram:
    """Bin RGBA pixels, skipping transparent, gray, near-black and near-white ones."""
    hist = HueHistogram(params.hue_bins, params.sat_bins)
    px = np.asarray(pixels, dtype=np.float64).reshape(-1, 4)
    if not len(px):
        return hist
    rgb = px[:, :3]
    a = px[:, 3] / 255.0
    h, s, l = rgb_to_hsl_array(rgb)
    keep = (
        (a >= params.min_alpha)
        & (l >= params.min_lightness) & (l <= params.max_lightness)
        & (s >= params.min_saturation)
    )
    w = a * s * s * (1.0 - np.abs(l - 0.5) * params.midtone_bias)
    hist.add(hist.bin_index(h[keep], s[keep]), rgb[keep], w[keep])
    return hist


def _boost(s: float, factor: float, params: PaletteParams) -> float:
    return max(params.sat_floor, min(1.0, s * factor))


def palette_from_histogram(hist: HueHistogram, index: int,
                           params: PaletteParams = DEFAULT_PARAMS) -> ColorPair:
    """Pick primary and secondary colors from a filled histogram."""
    p_idx, p_w = hist.heaviest()
    if p_idx < 0 or p_w <= 0:
        return fallback_from_index(index)

    s_idx, s_w = hist.heaviest_apart(hist.bin_hue(p_idx), params.min_hue_gap)

    h1, s1, _ = rgb_to_hsl(*hist.average_rgb(p_idx))
    s1 = _boost(s1, params.primary_sat_boost, params)
    primary = hsl_to_rgb(h1, s1, params.primary_lightness)

    if s_idx >= 0 and s_w >= p_w * params.secondary_ratio:
        h2, s2, _ = rgb_to_hsl(*hist.average_rgb(s_idx))
        s2 = _boost(s2, params.secondary_sat_boost, params)
        secondary = hsl_to_rgb(h2, s2, params.secondary_lightness)
    else:
        # No strong second color family: lighter primary
        secondary = hsl_to_rgb(h1, s1, params.secondary_lightness)

    return ColorPair(primary=primary, secondary=secondary)


def sample_pixels(img: Image.Image, params: PaletteParams = DEFAULT_PARAMS) -> np.ndarray:
    """Downsample to the thumbnail size and return an (N, 4) uint8 RGBA array."""
    w, h = img.size
    if w <= 0 or h <= 0:
        raise ValueError(f"zero-size image {w}x{h}")
    size = thumbnail_size(w, h, params)
    thumb = img.convert("RGBA")
    if thumb.size != size:
        thumb = thumb.resize(size, Image.Resampling.BILINEAR)
    return np.asarray(thumb, dtype=np.uint8).reshape(-1, 4)


def extract_colors(img: Optional[Image.Image], index: int,
                   params: PaletteParams = DEFAULT_PARAMS) -> ColorPair:
    """Extract the two dominant colors of an image.

    Never raises: a missing, empty or unreadable image, or one without any
    usable colored pixel, yields the index-derived fallback pair.

    Args:
        img: Decoded image (any mode Pillow can convert to RGBA).
        index: Item index, used only for the fallback.
        params: Extraction thresholds.

    Returns:
        ColorPair of primary and secondary RGB colors.
    """
    if img is None:
        log(f"[PALETTE] #{index}: no image, using fallback")
        return fallback_from_index(index)
    try:
        pixels = sample_pixels(img, params)
        return palette_from_histogram(build_histogram(pixels, params), index, params)
    except Exception as e:
        log(f"[PALETTE][ERR] #{index}: extraction failed: {e!r}, using fallback")
        return fallback_from_index(index)


def build_palette(images: Sequence[Optional[Image.Image]],
                  params: PaletteParams = DEFAULT_PARAMS) -> List[ColorPair]:
    """Extract a ColorPair for every image, in index order."""
    palette = [extract_colors(img, i, params) for i, img in enumerate(images)]
    log(f"[PALETTE] Built {len(palette)} color pairs")
    return palette
