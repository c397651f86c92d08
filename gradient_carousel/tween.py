"""Tweening - interpolate a tuple of values toward a target over time.

Consumers depend only on the Tween interface; EasedTween animates and
InstantTween jumps straight to the target where smooth interpolation is
unavailable or unwanted.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Callable, Sequence, Tuple

from .math_utils import clamp, ease_out_cubic
from .config import GRADIENT_TWEEN_S

Values = Tuple[float, ...]


class Tween(ABC):
    """Interpolates a fixed-length tuple of floats."""

    @abstractmethod
    def start(self, from_values: Sequence[float], to_values: Sequence[float], t: float) -> None:
        """Begin a transition at time t, replacing any transition in flight."""

    @abstractmethod
    def sample(self, t: float) -> Values:
        """Current values at time t."""

    @property
    @abstractmethod
    def active(self) -> bool:
        """True while a transition is still running."""


class InstantTween(Tween):
    """Applies the target immediately."""

    def __init__(self):
        self._values: Values = ()

    def start(self, from_values: Sequence[float], to_values: Sequence[float], t: float) -> None:
        self._values = tuple(float(v) for v in to_values)

    def sample(self, t: float) -> Values:
        return self._values

    @property
    def active(self) -> bool:
        return False


class EasedTween(Tween):
    """Eased interpolation over a fixed duration (seconds)."""

    def __init__(self, duration: float = GRADIENT_TWEEN_S,
                 ease: Callable[[float], float] = ease_out_cubic):
        self.duration = duration
        self.ease = ease
        self._from: Values = ()
        self._to: Values = ()
        self._t0: float = 0.0
        self._progress: float = 1.0

    def start(self, from_values: Sequence[float], to_values: Sequence[float], t: float) -> None:
        self._from = tuple(float(v) for v in from_values)
        self._to = tuple(float(v) for v in to_values)
        self._t0 = t
        self._progress = 0.0 if self.duration > 0 else 1.0

    def progress(self, t: float) -> float:
        """Linear progress 0..1; never moves backwards within a transition."""
        if self.duration > 0:
            p = clamp((t - self._t0) / self.duration, 0.0, 1.0)
            self._progress = max(self._progress, p)
        return self._progress

    def sample(self, t: float) -> Values:
        p = self.progress(t)
        if p >= 1.0:
            return self._to
        e = self.ease(p)
        return tuple(a + (b - a) * e for a, b in zip(self._from, self._to))

    @property
    def active(self) -> bool:
        return self._progress < 1.0
