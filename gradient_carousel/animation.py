"""Animation system - time-based, non-blocking animations."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Tuple

from .math_utils import clamp, lerp, ease_out_quart
from .config import (
    ENTRY_CARD_S, ENTRY_STAGGER_S, ENTRY_START_SCALE, ENTRY_START_Y,
)


@dataclass
class Animation:
    """Base class: a duration (seconds) starting at start_time."""
    start_time: float = 0.0
    duration: float = 0.0
    finished: bool = False

    def progress(self, t: float) -> float:
        """Animation progress (0.0 to 1.0) at time t."""
        if self.duration <= 0:
            return 1.0
        return clamp((t - self.start_time) / self.duration, 0.0, 1.0)

    def is_complete(self, t: float) -> bool:
        return self.finished or self.progress(t) >= 1.0

    def finish(self) -> None:
        self.finished = True


@dataclass
class CardEntry:
    """Fade-in state of one card at a given instant."""
    alpha: float
    scale: float
    y_offset: float


@dataclass
class EntryAnimation(Animation):
    """Staggered fade/rise-in of the cards visible at startup.

    ``order`` lists card indices left to right; each one starts ``stagger``
    seconds after its left neighbour and takes ``card_duration`` seconds.
    """
    order: List[int] = field(default_factory=list)
    card_duration: float = ENTRY_CARD_S
    stagger: float = ENTRY_STAGGER_S
    start_scale: float = ENTRY_START_SCALE
    start_y: float = ENTRY_START_Y

    def __post_init__(self):
        n = len(self.order)
        self.duration = self.card_duration + self.stagger * max(0, n - 1) if n else 0.0

    def card_progress(self, index: int, t: float) -> float:
        """Eased progress of one card; cards not in ``order`` are complete."""
        if self.finished or index not in self.order:
            return 1.0
        if self.card_duration <= 0:
            return 1.0
        t0 = self.start_time + self.order.index(index) * self.stagger
        return ease_out_quart(clamp((t - t0) / self.card_duration, 0.0, 1.0))

    def card_state(self, index: int, target_scale: float, t: float) -> CardEntry:
        p = self.card_progress(index, t)
        return CardEntry(
            alpha=p,
            scale=lerp(self.start_scale, target_scale, p),
            y_offset=self.start_y * (1.0 - p),
        )

    def span(self) -> Tuple[float, float]:
        """(start, end) times of the whole animation."""
        return (self.start_time, self.start_time + self.duration)
