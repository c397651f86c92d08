"""Core data types for the carousel."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple, List, Any

from .config import GRADIENT_DEFAULT, Z_ORDER_BASE

RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class Item:
    """One carousel item: stable index, base offset along the track, image handle."""
    index: int
    base: float
    source: Any = None  # Opaque image handle (path, PIL image, texture...)


@dataclass(frozen=True)
class ColorPair:
    """Two representative colors of an item's image."""
    primary: RGB
    secondary: RGB

    def as_sextet(self) -> "GradientColors":
        return GradientColors(
            float(self.primary[0]), float(self.primary[1]), float(self.primary[2]),
            float(self.secondary[0]), float(self.secondary[1]), float(self.secondary[2]),
        )


@dataclass
class GradientColors:
    """Displayed backdrop colors (two RGB triples, float channels)."""
    r1: float = GRADIENT_DEFAULT[0]
    g1: float = GRADIENT_DEFAULT[1]
    b1: float = GRADIENT_DEFAULT[2]
    r2: float = GRADIENT_DEFAULT[3]
    g2: float = GRADIENT_DEFAULT[4]
    b2: float = GRADIENT_DEFAULT[5]

    def as_tuple(self) -> Tuple[float, float, float, float, float, float]:
        return (self.r1, self.g1, self.b1, self.r2, self.g2, self.b2)

    @classmethod
    def from_tuple(cls, values) -> GradientColors:
        return cls(*(float(v) for v in values))

    def copy(self) -> GradientColors:
        return GradientColors(*self.as_tuple())

    @property
    def primary(self) -> RGB:
        """First color rounded to 8-bit channels."""
        return (int(round(self.r1)), int(round(self.g1)), int(round(self.b1)))

    @property
    def secondary(self) -> RGB:
        """Second color rounded to 8-bit channels."""
        return (int(round(self.r2)), int(round(self.g2)), int(round(self.b2)))


@dataclass(frozen=True)
class CardTransform:
    """Per-item screen placement for one frame."""
    index: int
    position: float     # Signed distance from viewport center, pixels
    normalized: float   # position / viewport half width, clamped to [-1, 1]
    rotation: float     # Degrees around the vertical axis
    depth: float        # Forward translation, pixels
    scale: float
    core: bool = False  # Centered item or one of its neighbors
    blur: float = 0.0   # De-emphasis hint for non-core items, pixels

    @property
    def z_order(self) -> int:
        """Painter order: larger draws later (in front)."""
        return Z_ORDER_BASE + int(round(self.depth))


@dataclass
class LayoutFrame:
    """Result of one layout pass."""
    cards: List[CardTransform] = field(default_factory=list)
    nearest_index: int = -1

    @property
    def measured(self) -> bool:
        """False while the track length is still unknown."""
        return self.nearest_index >= 0

    def draw_order(self) -> List[CardTransform]:
        """Cards sorted back to front."""
        return sorted(self.cards, key=lambda c: c.z_order)
