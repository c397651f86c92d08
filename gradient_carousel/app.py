"""Application - main loop orchestrator.

The Application class coordinates:
- Input handling (via InputHandler)
- Command execution
- State updates (carousel tick, backdrop cadence)
- Rendering (via Renderer)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence
import traceback

from .carousel import CarouselController
from .commands import Command
from .state import ViewportState, UIState
from .types import GradientColors
from .renderer import Renderer, get_renderer
from .input_handler import InputHandler, get_input_handler
from .image_utils import load_all
from .palette import build_palette
from .rl_compat import rl, RL_VERSION, init_window, load_texture, texture_size
from .config import (
    TARGET_FPS, WINDOW_TITLE, WINDOW_W, WINDOW_H,
    CARD_HEIGHT_FRAC, CARD_W, CARD_H, RESIZE_DEBOUNCE_S,
)
from .logging import log, now, increment_frame


def card_size_for(screen_h: int, card_w: float = CARD_W, card_h: float = CARD_H) -> tuple:
    """Card size scaled to the window height, keeping the card aspect."""
    h = max(1.0, screen_h * CARD_HEIGHT_FRAC)
    return (h * card_w / card_h, h)


@dataclass
class Application:
    """
    Main application orchestrator.

    Usage:
        app = Application(paths)
        if app.initialize():
            app.run()
    """

    paths: List[str] = field(default_factory=list)
    carousel: CarouselController = field(default_factory=CarouselController)
    viewport: ViewportState = field(default_factory=ViewportState)
    ui: UIState = field(default_factory=UIState)
    renderer: Renderer = field(default_factory=get_renderer)
    input_handler: InputHandler = field(default_factory=get_input_handler)
    textures: List[Any] = field(default_factory=list)
    running: bool = False

    # Backdrop snapshot, refreshed at the background cadence
    bg_time: float = 0.0
    bg_colors: GradientColors = field(default_factory=GradientColors)

    def initialize(self, smooth: bool = True) -> bool:
        """Open the window, load textures, build the palette and start the entry."""
        try:
            rl.SetConfigFlags(rl.FLAG_WINDOW_RESIZABLE | rl.FLAG_MSAA_4X_HINT)
            init_window(WINDOW_W, WINDOW_H, WINDOW_TITLE)
            rl.SetTargetFPS(TARGET_FPS)
            rl.SetExitKey(0)
        except Exception as e:
            log(f"[INIT][CRITICAL] Failed to initialize window: {e!r}")
            log(f"[INIT][CRITICAL] Traceback:\n{traceback.format_exc()}")
            return False

        self.viewport.screen_w = rl.GetScreenWidth()
        self.viewport.screen_h = rl.GetScreenHeight()
        self.viewport.card_w, self.viewport.card_h = card_size_for(self.viewport.screen_h)

        self.textures = [self._load_texture(p) for p in self.paths]
        images = load_all(self.paths)
        palette = build_palette(images)

        self.carousel = CarouselController.create(
            count=len(self.paths),
            item_size=self.viewport.card_w,
            viewport_half_width=self.viewport.half_width,
            palette=palette,
            smooth=smooth,
        )

        t = now()
        self.carousel.refresh(t)
        self.carousel.begin_entry(t, self.viewport.screen_w)
        self.carousel.start()
        self.carousel.background.start()
        self._sample_backdrop(t)
        log(f"[APP] Application initialized with {len(self.paths)} items ({RL_VERSION})")
        return True

    def _load_texture(self, path: str) -> Any:
        try:
            tex = load_texture(path)
            rl.SetTextureFilter(tex, rl.TEXTURE_FILTER_BILINEAR)
            w, h = texture_size(tex)
            log(f"[LOAD] Texture {w}x{h} {path}")
            return tex
        except Exception as e:
            log(f"[LOAD][ERR] Texture failed for {path}: {e!r}")
            return None

    def run(self) -> None:
        """Run the main loop."""
        self.running = True
        log("[APP] Starting main loop")

        try:
            while self.running:
                self._frame()
        except Exception as e:
            log(f"[APP][CRITICAL] Unhandled exception: {e!r}")
            log(f"[APP][CRITICAL] Traceback:\n{traceback.format_exc()}")
        finally:
            self._cleanup()

    def _frame(self) -> None:
        """Execute a single frame."""
        if rl.WindowShouldClose():
            self.running = False
            return

        # 1. Poll input and generate commands
        commands = self.input_handler.poll(self.carousel.momentum.drag.dragging)

        # 2. Execute commands
        for cmd in commands:
            self._execute_command(cmd)
            if not self.running:
                return

        t = now()
        self._apply_pending_resize(t)

        # 3. Update state
        self.carousel.tick(t)
        bg = self.carousel.background
        if bg.should_draw(t, fast=self.carousel.gradient.is_fast(t)):
            self._sample_backdrop(t)

        # 4. Render
        self.renderer.draw_frame(self, t)

        # 5. Frame bookkeeping
        increment_frame()

    def _execute_command(self, cmd: Command) -> None:
        if cmd.can_execute(self):
            cmd.execute(self)

    def _sample_backdrop(self, t: float) -> None:
        self.bg_time = t
        self.bg_colors = self.carousel.colors.copy()

    # ═══════════════════════════════════════════════════════════════════════
    # Window events
    # ═══════════════════════════════════════════════════════════════════════

    def resize(self, screen_w: int, screen_h: int) -> None:
        """Record the new size; the layout is re-measured after a short debounce."""
        self.viewport.screen_w = screen_w
        self.viewport.screen_h = screen_h
        self.ui.pending_resize = True
        self.ui.last_resize_time = now()

    def _apply_pending_resize(self, t: float) -> None:
        if not self.ui.pending_resize or t - self.ui.last_resize_time < RESIZE_DEBOUNCE_S:
            return
        self.ui.pending_resize = False
        self.viewport.card_w, self.viewport.card_h = card_size_for(self.viewport.screen_h)
        self.carousel.on_resize(self.viewport.half_width, self.viewport.card_w, t)

    @property
    def visible(self) -> bool:
        """Whether the animation loops should run."""
        return self.ui.visible and not self.ui.paused

    def sync_loops(self) -> None:
        """Stop both loops while hidden or paused, restart them otherwise."""
        c = self.carousel
        if self.visible:
            if not c.running:
                c.start()
            if not c.background.running:
                c.background.start()
        else:
            if c.running:
                c.stop()
            if c.background.running:
                c.background.stop()

    # ═══════════════════════════════════════════════════════════════════════
    # Lifecycle
    # ═══════════════════════════════════════════════════════════════════════

    def _cleanup(self) -> None:
        log("[APP] Starting cleanup")
        for tex in self.textures:
            if tex is None:
                continue
            try:
                rl.UnloadTexture(tex)
            except Exception as e:
                log(f"[APP][ERR] UnloadTexture failed: {e!r}")
        self.textures = []
        try:
            log("[APP] Closing window")
            rl.CloseWindow()
        except Exception as e:
            log(f"[APP][ERR] CloseWindow failed: {e!r}")
        log("[APP] Cleanup complete")

    def stop(self) -> None:
        """Stop the main loop."""
        self.running = False


def create_app(paths: Sequence[str]) -> Application:
    """Create an application for the given image paths."""
    return Application(paths=list(paths))
