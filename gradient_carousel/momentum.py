"""Momentum controller - scroll offset, drag, wheel impulses and friction.

Drag is direct manipulation: the offset follows the pointer immediately and
the last measured pointer speed becomes coasting velocity on release. Wheel
input only adds velocity. Every frame the velocity is integrated into the
offset and decays exponentially until it snaps to exactly zero.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto

from .state.scroll import ScrollState
from .state.input import DragState
from .math_utils import wrap
from .config import (
    FRICTION, FRICTION_RATE, VELOCITY_EPSILON,
    WHEEL_SENS, WHEEL_IMPULSE_SCALE, DRAG_SENS, DRAG_MIN_DT_S,
)
from .logging import log


class MomentumMode(Enum):
    """Effective input mode."""
    IDLE = auto()      # Coasting or at rest
    DRAGGING = auto()  # Pointer held down


@dataclass(frozen=True)
class MomentumParams:
    """Physics tuning."""
    friction: float = FRICTION
    friction_rate: float = FRICTION_RATE
    epsilon: float = VELOCITY_EPSILON
    wheel_sensitivity: float = WHEEL_SENS
    impulse_scale: float = WHEEL_IMPULSE_SCALE
    drag_sensitivity: float = DRAG_SENS
    min_drag_dt: float = DRAG_MIN_DT_S


@dataclass
class MomentumController:
    """Owns scroll offset and velocity for a looped track."""
    track: float = 0.0
    params: MomentumParams = field(default_factory=MomentumParams)
    scroll: ScrollState = field(default_factory=ScrollState)
    drag: DragState = field(default_factory=DragState)
    entering: bool = True

    @property
    def offset(self) -> float:
        return self.scroll.offset

    @offset.setter
    def offset(self, value: float) -> None:
        self.scroll.offset = wrap(value, self.track)

    @property
    def velocity(self) -> float:
        return self.scroll.velocity

    @velocity.setter
    def velocity(self, value: float) -> None:
        self.scroll.velocity = value

    @property
    def mode(self) -> MomentumMode:
        return MomentumMode.DRAGGING if self.drag.dragging else MomentumMode.IDLE

    def finish_entry(self) -> None:
        """Lift the entry lockout so drag and wheel input take effect."""
        if self.entering:
            self.entering = False
            log("[MOMENTUM] Input unlocked")

    # ═══════════════════════════════════════════════════════════════════════
    # Input
    # ═══════════════════════════════════════════════════════════════════════

    def drag_start(self, x: float, t: float) -> bool:
        """Begin a drag at pointer x, time t (seconds). Returns True if accepted."""
        if self.entering:
            return False
        self.drag.start(x, t)
        return True

    def drag_move(self, x: float, t: float) -> bool:
        """Follow the pointer and sample its speed for the release."""
        if self.entering or not self.drag.dragging:
            return False
        dx = x - self.drag.last_x
        dt = max(self.params.min_drag_dt, t - self.drag.last_t)
        self.offset = self.scroll.offset - dx * self.params.drag_sensitivity
        self.drag.last_velocity = dx / dt
        self.drag.last_x = x
        self.drag.last_t = t
        return True

    def drag_end(self) -> bool:
        """Release the drag; the last pointer speed becomes momentum."""
        if self.entering or not self.drag.end():
            return False
        self.scroll.velocity = -self.drag.last_velocity * self.params.drag_sensitivity
        return True

    def wheel(self, delta: float) -> bool:
        """Add a wheel impulse to the velocity."""
        if self.entering:
            return False
        p = self.params
        self.scroll.velocity += delta * p.wheel_sensitivity * p.impulse_scale
        return True

    # ═══════════════════════════════════════════════════════════════════════
    # Per-frame
    # ═══════════════════════════════════════════════════════════════════════

    def integrate(self, dt: float) -> None:
        """Advance the offset by velocity and apply friction over dt seconds.

        A zero dt moves nothing but still snaps a residual velocity to zero.
        """
        s = self.scroll
        p = self.params
        if dt > 0:
            s.offset = wrap(s.offset + s.velocity * dt, self.track)
            s.velocity *= p.friction ** (dt * p.friction_rate)
        if abs(s.velocity) < p.epsilon:
            s.velocity = 0.0

    def set_track(self, track: float) -> None:
        """Change the track length, keeping the same fraction of the loop."""
        old = self.track
        if old > 0 and track > 0:
            ratio = self.scroll.offset / old
            self.scroll.offset = wrap(ratio * track, track)
        else:
            self.scroll.offset = wrap(self.scroll.offset, track)
        self.track = track
