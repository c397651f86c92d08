"""Input state - pointer drag tracking."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class DragState:
    """State for an in-progress drag."""
    dragging: bool = False
    last_x: float = 0.0
    last_t: float = 0.0
    last_velocity: float = 0.0  # dx / dt of the latest move, px/s

    def start(self, x: float, t: float) -> None:
        """Start dragging from (x, t)."""
        self.dragging = True
        self.last_x = x
        self.last_t = t
        self.last_velocity = 0.0

    def end(self) -> bool:
        """End dragging. Returns True if was dragging."""
        was_dragging = self.dragging
        self.dragging = False
        return was_dragging
