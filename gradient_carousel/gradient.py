"""Gradient state - backdrop colors following the centered card."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from .types import ColorPair, GradientColors
from .tween import Tween, EasedTween
from .config import GRADIENT_FAST_WINDOW_S, GRADIENT_DEFAULT
from .logging import log


@dataclass
class GradientTracker:
    """Retargets the displayed color sextet when the active item changes."""
    palette: List[ColorPair] = field(default_factory=list)
    tween: Tween = field(default_factory=EasedTween)
    fast_window: float = GRADIENT_FAST_WINDOW_S
    current: GradientColors = field(default_factory=GradientColors)
    active_index: int = -1
    fast_until: float = 0.0

    def target_for(self, index: int) -> GradientColors:
        """Color sextet for an item, or the neutral default if it has no palette."""
        if 0 <= index < len(self.palette):
            return self.palette[index].as_sextet()
        return GradientColors.from_tuple(GRADIENT_DEFAULT)

    def set_active(self, index: int, t: float, count: Optional[int] = None) -> bool:
        """Start moving toward the palette of ``index``.

        Args:
            index: Newly centered item.
            t: Current time in seconds.
            count: Number of items; defaults to the palette length.

        Returns:
            True if a new transition was started.
        """
        n = len(self.palette) if count is None else count
        if index < 0 or index >= n or index == self.active_index:
            return False

        self.active_index = index
        target = self.target_for(index)
        self.tween.start(self.current.as_tuple(), target.as_tuple(), t)
        if self.tween.active:
            self.fast_until = t + self.fast_window
        else:
            self.current = GradientColors.from_tuple(self.tween.sample(t))
        log(f"[GRADIENT] Active #{index} -> {target.primary} / {target.secondary}")
        return True

    def update(self, t: float) -> GradientColors:
        """Advance the transition and return the displayed colors."""
        if self.tween.active:
            self.current = GradientColors.from_tuple(self.tween.sample(t))
        return self.current

    def is_fast(self, t: float) -> bool:
        """Rendering-rate hint: redraw at the high rate until this returns False."""
        return t < self.fast_until
