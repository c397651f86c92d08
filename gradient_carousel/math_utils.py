"""Pure math utilities - no external dependencies."""

from __future__ import annotations


def clamp(v: float, a: float, b: float) -> float:
    """Clamp value v to range [a, b]."""
    return a if v < a else b if v > b else v


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation from a to b by factor t (clamped to [0, 1])."""
    t = clamp(t, 0.0, 1.0)
    return a + (b - a) * t


def ease_out_cubic(t: float) -> float:
    """Cubic ease-out, a.k.a. "power2.out"."""
    if t <= 0.0:
        return 0.0
    if t >= 1.0:
        return 1.0
    p = 1.0 - t
    return 1.0 - p * p * p


def ease_out_quart(t: float) -> float:
    """Quartic ease-out, a.k.a. "power3.out"."""
    if t <= 0.0:
        return 0.0
    if t >= 1.0:
        return 1.0
    p = 1.0 - t
    return 1.0 - p * p * p * p


def wrap(v: float, m: float) -> float:
    """Positive modulo: result in [0, m) for m > 0.

    Returns 0.0 when m is not positive (nothing measured yet).
    """
    if m <= 0:
        return 0.0
    r = v % m
    # Float modulo can round up to exactly m for tiny negative inputs
    return 0.0 if r >= m else r


def wrap_to_nearest(v: float, m: float) -> float:
    """Shift v by at most one period m into (-m/2, m/2]."""
    if m <= 0:
        return v
    half = m / 2.0
    if v <= -half:
        v += m
    elif v > half:
        v -= m
    return v


def round_half_up(v: float) -> int:
    """Round non-negative values the way Math.round does (0.5 goes up)."""
    return int(v + 0.5)


def dominant_axis(dx: float, dy: float) -> float:
    """The component with the larger magnitude (dy on ties)."""
    return dx if abs(dx) > abs(dy) else dy
