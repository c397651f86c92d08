"""Scroll state - offset along the track and coasting velocity."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class ScrollState:
    """Offset in [0, track) and signed velocity in pixels per second."""
    offset: float = 0.0
    velocity: float = 0.0

    @property
    def at_rest(self) -> bool:
        return self.velocity == 0.0
