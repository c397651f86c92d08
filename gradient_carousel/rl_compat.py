"""Raylib compatibility layer - abstracts differences between raylibpy and python-raylib."""

from __future__ import annotations
from typing import Any, Tuple

try:
    import raylibpy as rl
    RL_VERSION = "raylibpy"
except ImportError:
    import raylib as rl
    RL_VERSION = "python-raylib"


def _as_bytes(text: str) -> bytes:
    return text.encode('utf-8')


def make_rect(x: float, y: float, w: float, h: float) -> Any:
    """Create a raylib Rectangle compatible with the current binding."""
    if hasattr(rl, 'Rectangle'):
        return rl.Rectangle(x, y, w, h)
    r = rl.ffi.new("Rectangle *")
    r[0].x = float(x)
    r[0].y = float(y)
    r[0].width = float(w)
    r[0].height = float(h)
    return r[0]


def make_vec2(x: float, y: float) -> Any:
    """Create a raylib Vector2 compatible with the current binding."""
    if hasattr(rl, 'Vector2'):
        return rl.Vector2(x, y)
    v = rl.ffi.new("Vector2 *")
    v[0].x = float(x)
    v[0].y = float(y)
    return v[0]


def make_color(r: float, g: float, b: float, a: float) -> Any:
    """Create a raylib Color from (possibly float) channels, clamped to 0-255."""
    def ch(v: float) -> int:
        return max(0, min(255, int(round(v))))
    ctor = getattr(rl, "Color", None)
    if ctor:
        return ctor(ch(r), ch(g), ch(b), ch(a))
    c = rl.ffi.new("Color *")
    c[0].r, c[0].g, c[0].b, c[0].a = ch(r), ch(g), ch(b), ch(a)
    return c[0]


def init_window(w: int, h: int, title: str) -> None:
    """Open a window with encoding fallback for the title."""
    try:
        rl.InitWindow(w, h, title)
    except TypeError:
        rl.InitWindow(w, h, _as_bytes(title))


def draw_text(text: str, x: int, y: int, size: int, color: Any) -> None:
    """Draw text with encoding fallback."""
    try:
        rl.DrawText(text, x, y, size, color)
    except TypeError:
        rl.DrawText(_as_bytes(text), x, y, size, color)


def load_texture(path: str) -> Any:
    """Load texture with encoding fallback."""
    try:
        return rl.LoadTexture(path)
    except TypeError:
        return rl.LoadTexture(_as_bytes(path))


def get_texture_id(tex: Any) -> int:
    """Safely get texture ID."""
    return getattr(tex, 'id', 0) or 0


def is_texture_valid(tex: Any) -> bool:
    return get_texture_id(tex) > 0


def texture_size(tex: Any) -> Tuple[int, int]:
    return (int(getattr(tex, 'width', 0)), int(getattr(tex, 'height', 0)))


__all__ = [
    'rl',
    'RL_VERSION',
    'make_rect',
    'make_vec2',
    'make_color',
    'init_window',
    'draw_text',
    'load_texture',
    'get_texture_id',
    'is_texture_valid',
    'texture_size',
]
