"""Ring layout - pure mapping from scroll offset to per-card placement.

Items sit on a looped track of length ``count * pitch``. Every frame each
item is placed at the periodic image of its base offset closest to the
viewport center, which makes a finite ring look infinite.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .types import CardTransform, LayoutFrame, Item
from .math_utils import clamp, wrap, wrap_to_nearest
from .config import (
    MAX_ROTATION, MAX_DEPTH, MIN_SCALE, SCALE_RANGE,
    MAX_BLUR, BLUR_EXPONENT, GAP, ENTRY_VISIBLE_FRAC,
)
from .logging import log


@dataclass(frozen=True)
class LayoutParams:
    """Depth-cue tuning for card transforms."""
    max_rotation: float = MAX_ROTATION
    max_depth: float = MAX_DEPTH
    min_scale: float = MIN_SCALE
    scale_range: float = SCALE_RANGE
    max_blur: float = MAX_BLUR
    blur_exponent: float = BLUR_EXPONENT


DEFAULT_PARAMS = LayoutParams()


def normalize_position(position: float, viewport_half_width: float) -> float:
    """Position as a fraction of the half viewport, clamped to [-1, 1]."""
    if viewport_half_width <= 0:
        if position == 0:
            return 0.0
        return 1.0 if position > 0 else -1.0
    return clamp(position / viewport_half_width, -1.0, 1.0)


def card_transform(
    index: int,
    position: float,
    viewport_half_width: float,
    params: LayoutParams = DEFAULT_PARAMS,
    core: bool = True,
) -> CardTransform:
    """Derive rotation, depth and scale for a card at a signed screen position.

    Cards right of center get a negative rotation and cards left of center a
    positive one, so the leftmost visible cards turn toward the viewer.
    """
    norm = normalize_position(position, viewport_half_width)
    inv = 1.0 - abs(norm)
    blur = 0.0 if core else params.max_blur * abs(norm) ** params.blur_exponent
    return CardTransform(
        index=index,
        position=position,
        normalized=norm,
        rotation=-norm * params.max_rotation,
        depth=inv * params.max_depth,
        scale=params.min_scale + inv * params.scale_range,
        core=core,
        blur=blur,
    )


def wrapped_positions(bases: Sequence[float], offset: float, track: float) -> List[float]:
    """Signed distance of each base from ``offset``, each in (-track/2, track/2]."""
    offset = wrap(offset, track)
    return [wrap_to_nearest(b - offset, track) for b in bases]


def nearest_index(positions: Sequence[float]) -> int:
    """Index with the smallest |position|; the lowest index wins ties."""
    best = -1
    best_dist = float("inf")
    for i, pos in enumerate(positions):
        d = abs(pos)
        if d < best_dist:
            best_dist = d
            best = i
    return best


def core_indices(nearest: int, count: int) -> frozenset:
    """The centered index and its neighbors on the ring."""
    if nearest < 0 or count <= 0:
        return frozenset()
    return frozenset({nearest, (nearest - 1) % count, (nearest + 1) % count})


def compute_layout(
    bases: Sequence[float],
    offset: float,
    track: float,
    viewport_half_width: float,
    params: LayoutParams = DEFAULT_PARAMS,
) -> LayoutFrame:
    """Place every card for one frame.

    Args:
        bases: Base offset of each item along the track, in index order.
        offset: Current scroll offset.
        track: Track length; zero or less means "not measured yet".
        viewport_half_width: Half the viewport width in pixels.
        params: Depth-cue tuning.

    Returns:
        LayoutFrame with one CardTransform per item, or an empty frame
        (nearest_index -1) when the track is unmeasured or there are no items.
    """
    if track <= 0 or not bases:
        return LayoutFrame()

    positions = wrapped_positions(bases, offset, track)
    nearest = nearest_index(positions)
    core = core_indices(nearest, len(positions))

    cards = [
        card_transform(i, pos, viewport_half_width, params, core=i in core)
        for i, pos in enumerate(positions)
    ]
    return LayoutFrame(cards=cards, nearest_index=nearest)


def visible_cards(frame: LayoutFrame, viewport_width: float,
                  frac: float = ENTRY_VISIBLE_FRAC) -> List[CardTransform]:
    """Cards within ``viewport_width * frac`` of center, sorted left to right."""
    limit = viewport_width * frac
    cards = [c for c in frame.cards if abs(c.position) < limit]
    cards.sort(key=lambda c: c.position)
    return cards


@dataclass
class RingLayout:
    """Track geometry for a fixed item list.

    Pitch, track and base offsets are only recomputed when the item count or
    the measured item size changes.
    """
    count: int = 0
    gap: float = GAP
    params: LayoutParams = field(default_factory=LayoutParams)
    _item_size: Optional[float] = field(default=None, repr=False)
    _pitch: float = field(default=0.0, repr=False)
    _bases: List[float] = field(default_factory=list, repr=False)

    @property
    def pitch(self) -> float:
        return self._pitch

    @property
    def track(self) -> float:
        """Total loop length; 0.0 until measured."""
        return self.count * self._pitch

    @property
    def bases(self) -> List[float]:
        return self._bases

    @property
    def item_size(self) -> Optional[float]:
        return self._item_size

    def measure(self, item_size: float, count: Optional[int] = None) -> bool:
        """Update geometry from a measured item width.

        Returns True if anything changed.
        """
        if count is None:
            count = self.count
        if count == self.count and item_size == self._item_size:
            return False

        pitch = item_size + self.gap
        if count <= 0 or pitch <= 0:
            log(f"[LAYOUT] Unusable geometry count={count} size={item_size}, track unmeasured")
            self.count = max(0, count)
            self._item_size = item_size
            self._pitch = 0.0
            self._bases = []
            return True

        self.count = count
        self._item_size = item_size
        self._pitch = pitch
        self._bases = [i * pitch for i in range(count)]
        log(f"[LAYOUT] Measured count={count} pitch={pitch:.1f} track={self.track:.1f}")
        return True

    def items(self, sources: Optional[Sequence] = None) -> List[Item]:
        """Build Item records for the current geometry."""
        return [
            Item(index=i, base=b, source=sources[i] if sources is not None else None)
            for i, b in enumerate(self._bases)
        ]

    def compute(self, offset: float, viewport_half_width: float) -> LayoutFrame:
        return compute_layout(self._bases, offset, self.track, viewport_half_width, self.params)
