"""Background - drifting focal points and redraw throttling for the backdrop."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple
import math

from .types import GradientColors
from .config import (
    BG_TIME_SCALE, BG_FAST_INTERVAL_S, BG_SLOW_INTERVAL_S,
    BG_ALPHA_PRIMARY, BG_ALPHA_SECONDARY,
)


@dataclass(frozen=True)
class RadialGradient:
    """One radial blob: center, radius and inner RGBA color (fades to transparent)."""
    x: float
    y: float
    radius: float
    color: Tuple[int, int, int]
    alpha: float


def focal_points(t: float, width: float, height: float) -> Tuple[Tuple[float, float], Tuple[float, float]]:
    """Centers of the two gradients at time t (seconds).

    Both wander on slow Lissajous-like paths around the screen center.
    """
    time = t * BG_TIME_SCALE
    cx = width * 0.5
    cy = height * 0.5
    a1 = min(width, height) * 0.35
    a2 = min(width, height) * 0.28
    p1 = (cx + math.cos(time) * a1, cy + math.sin(time * 0.8) * a1 * 0.4)
    p2 = (cx + math.cos(-time * 0.9 + 1.2) * a2, cy + math.sin(-time * 0.7 + 0.7) * a2 * 0.5)
    return p1, p2


def backdrop(colors: GradientColors, t: float, width: float, height: float) -> Tuple[RadialGradient, RadialGradient]:
    """Both gradients to paint, back to front."""
    (x1, y1), (x2, y2) = focal_points(t, width, height)
    big = max(width, height)
    return (
        RadialGradient(x1, y1, big * 0.75, colors.primary, BG_ALPHA_PRIMARY),
        RadialGradient(x2, y2, big * 0.65, colors.secondary, BG_ALPHA_SECONDARY),
    )


@dataclass
class BackgroundClock:
    """Throttles backdrop redraws: ~60 fps while fast, ~30 fps otherwise."""
    fast_interval: float = BG_FAST_INTERVAL_S
    slow_interval: float = BG_SLOW_INTERVAL_S
    running: bool = False
    last_draw: Optional[float] = None

    def start(self) -> None:
        self.running = True
        self.last_draw = None

    def stop(self) -> None:
        self.running = False

    def should_draw(self, t: float, fast: bool = False) -> bool:
        """True if a redraw is due at time t; records the draw when it is."""
        if not self.running:
            return False
        interval = self.fast_interval if fast else self.slow_interval
        if self.last_draw is not None and t - self.last_draw < interval:
            return False
        self.last_draw = t
        return True
