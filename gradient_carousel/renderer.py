"""Renderer - handles all drawing operations.

The Renderer is a pure drawing layer that only reads state and draws to screen.
It does not modify state - all state changes happen in the controller.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional, Sequence
import math

if TYPE_CHECKING:
    from .app import Application

from .rl_compat import (
    rl, make_rect as RL_Rect, make_vec2 as RL_V2, make_color as RL_Color,
    draw_text as RL_DrawText, is_texture_valid, texture_size,
)
from .types import CardTransform, GradientColors
from .background import backdrop
from .animation import EntryAnimation
from .math_utils import clamp
from .config import BG_BASE_COLOR, PERSPECTIVE, FONT_SIZE


@dataclass
class Renderer:
    """
    Handles all drawing operations.

    Usage:
        renderer = Renderer()
        renderer.draw_frame(app, t)
    """
    blur_dim: float = 0.12  # Brightness lost per pixel of blur hint

    def begin_frame(self) -> None:
        rl.BeginDrawing()

    def end_frame(self) -> None:
        rl.EndDrawing()

    # ═══════════════════════════════════════════════════════════════════════
    # Background
    # ═══════════════════════════════════════════════════════════════════════

    def draw_background(self, colors: GradientColors, t: float, w: int, h: int) -> None:
        """Base fill plus the two drifting radial gradients."""
        base = BG_BASE_COLOR
        rl.ClearBackground(RL_Color(base[0], base[1], base[2], 255))
        clear = RL_Color(255, 255, 255, 0)
        for g in backdrop(colors, t, w, h):
            inner = RL_Color(g.color[0], g.color[1], g.color[2], 255 * g.alpha)
            rl.DrawCircleGradient(int(g.x), int(g.y), float(g.radius), inner, clear)

    # ═══════════════════════════════════════════════════════════════════════
    # Cards
    # ═══════════════════════════════════════════════════════════════════════

    def draw_card(self, tex: Any, card: CardTransform, cx: float, cy: float,
                  card_w: float, card_h: float, entry: Optional[EntryAnimation], t: float) -> None:
        """Draw one card with perspective scale and rotation foreshortening."""
        if not is_texture_valid(tex):
            return

        persp = PERSPECTIVE / max(1.0, PERSPECTIVE - card.depth)
        scale = card.scale
        alpha = 1.0
        y_off = 0.0
        if entry is not None:
            st = entry.card_state(card.index, card.scale, t)
            scale, alpha, y_off = st.scale, st.alpha, st.y_offset
        if alpha <= 0.0:
            return

        w = card_w * scale * persp * abs(math.cos(math.radians(card.rotation)))
        h = card_h * scale * persp
        x = cx + card.position * persp - w / 2
        y = cy + y_off - h / 2

        # Crop the texture to the card aspect (cover)
        tw, th = texture_size(tex)
        if tw <= 0 or th <= 0:
            return
        aspect = card_w / card_h
        if tw / th > aspect:
            sw, sh = th * aspect, float(th)
        else:
            sw, sh = float(tw), tw / aspect
        src = RL_Rect((tw - sw) / 2, (th - sh) / 2, sw, sh)

        dim = clamp(1.0 - card.blur * self.blur_dim, 0.0, 1.0)
        tint = RL_Color(255 * dim, 255 * dim, 255 * dim, 255 * alpha)
        rl.DrawTexturePro(tex, src, RL_Rect(x, y, w, h), RL_V2(0, 0), 0.0, tint)

    def draw_cards(self, app: "Application", t: float) -> None:
        """Draw all cards back to front."""
        vp = app.viewport
        cx, cy = vp.center
        textures: Sequence[Any] = app.textures
        entry = app.carousel.entry
        for card in app.carousel.frame.draw_order():
            if card.index < len(textures):
                self.draw_card(textures[card.index], card, cx, cy, vp.card_w, vp.card_h, entry, t)

    # ═══════════════════════════════════════════════════════════════════════
    # HUD
    # ═══════════════════════════════════════════════════════════════════════

    def draw_hud(self, app: "Application") -> None:
        if not app.ui.show_hud:
            return
        c = app.carousel
        lines = [
            f"fps {rl.GetFPS()}",
            f"offset {c.offset:8.1f} / {c.track:.0f}",
            f"velocity {c.velocity:8.1f}",
            f"active {c.active_index + 1}/{c.count}",
        ]
        col = RL_Color(30, 30, 30, 220)
        for i, line in enumerate(lines):
            RL_DrawText(line, 16, 16 + i * (FONT_SIZE + 4), FONT_SIZE, col)

    # ═══════════════════════════════════════════════════════════════════════
    # Convenience methods
    # ═══════════════════════════════════════════════════════════════════════

    def draw_all(self, app: "Application", t: float) -> None:
        w, h = app.viewport.size
        self.draw_background(app.bg_colors, app.bg_time, w, h)
        self.draw_cards(app, t)
        self.draw_hud(app)

    def draw_frame(self, app: "Application", t: float) -> None:
        """Complete frame: begin, draw all, end."""
        self.begin_frame()
        self.draw_all(app, t)
        self.end_frame()


_default_renderer: Optional[Renderer] = None


def get_renderer() -> Renderer:
    """Get the default renderer instance."""
    global _default_renderer
    if _default_renderer is None:
        _default_renderer = Renderer()
    return _default_renderer
