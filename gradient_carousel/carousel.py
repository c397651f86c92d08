"""Carousel controller - owns all carousel state and runs the frame sequence.

The host calls the ``on_*`` input methods synchronously as events arrive and
``tick(t)`` once per animation frame with a monotonic timestamp in seconds.
Each tick integrates momentum, recomputes the layout and, when the centered
card changes, retargets the backdrop gradient.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .types import ColorPair, GradientColors, LayoutFrame
from .layout import RingLayout, LayoutParams, visible_cards
from .momentum import MomentumController, MomentumParams
from .gradient import GradientTracker
from .tween import Tween, EasedTween, InstantTween
from .background import BackgroundClock
from .animation import EntryAnimation
from .config import GAP, CARD_W, WINDOW_W
from .logging import log


@dataclass
class CarouselController:
    """Scroll physics, ring layout and backdrop colors for one item list."""
    layout: RingLayout = field(default_factory=RingLayout)
    momentum: MomentumController = field(default_factory=MomentumController)
    gradient: GradientTracker = field(default_factory=GradientTracker)
    background: BackgroundClock = field(default_factory=BackgroundClock)
    viewport_half_width: float = WINDOW_W * 0.5
    frame: LayoutFrame = field(default_factory=LayoutFrame)
    entry: Optional[EntryAnimation] = None
    running: bool = False
    last_time: Optional[float] = None

    @classmethod
    def create(
        cls,
        count: int,
        item_size: float = CARD_W,
        viewport_half_width: float = WINDOW_W * 0.5,
        palette: Optional[Sequence[ColorPair]] = None,
        smooth: bool = True,
        gap: float = GAP,
        layout_params: Optional[LayoutParams] = None,
        momentum_params: Optional[MomentumParams] = None,
        tween: Optional[Tween] = None,
    ) -> CarouselController:
        """Build a controller for ``count`` items and measure the track.

        ``smooth=False`` (or an explicit InstantTween) makes color changes
        instant instead of eased.
        """
        if tween is None:
            tween = EasedTween() if smooth else InstantTween()
        ctl = cls(
            layout=RingLayout(gap=gap, params=layout_params or LayoutParams()),
            momentum=MomentumController(params=momentum_params or MomentumParams()),
            gradient=GradientTracker(palette=list(palette or []), tween=tween),
            viewport_half_width=viewport_half_width,
        )
        ctl.layout.measure(item_size, count)
        ctl.momentum.set_track(ctl.layout.track)
        return ctl

    # ═══════════════════════════════════════════════════════════════════════
    # Properties
    # ═══════════════════════════════════════════════════════════════════════

    @property
    def count(self) -> int:
        return self.layout.count

    @property
    def offset(self) -> float:
        return self.momentum.offset

    @offset.setter
    def offset(self, value: float) -> None:
        self.momentum.offset = value

    @property
    def velocity(self) -> float:
        return self.momentum.velocity

    @property
    def track(self) -> float:
        return self.layout.track

    @property
    def active_index(self) -> int:
        return self.frame.nearest_index

    @property
    def colors(self) -> GradientColors:
        return self.gradient.current

    @property
    def entering(self) -> bool:
        return self.momentum.entering

    def set_palette(self, palette: Sequence[ColorPair]) -> None:
        self.gradient.palette = list(palette)

    # ═══════════════════════════════════════════════════════════════════════
    # Input
    # ═══════════════════════════════════════════════════════════════════════

    def on_drag_start(self, x: float, t: float) -> bool:
        return self.momentum.drag_start(x, t)

    def on_drag_move(self, x: float, t: float) -> bool:
        return self.momentum.drag_move(x, t)

    def on_drag_end(self) -> bool:
        return self.momentum.drag_end()

    def on_wheel(self, delta: float) -> bool:
        return self.momentum.wheel(delta)

    def on_resize(self, viewport_half_width: float, item_size: float, t: float = 0.0) -> LayoutFrame:
        """Re-measure after a resize, keeping the visual scroll position."""
        self.viewport_half_width = viewport_half_width
        if self.layout.measure(item_size):
            self.momentum.set_track(self.layout.track)
        return self.refresh(t)

    # ═══════════════════════════════════════════════════════════════════════
    # Frame loop
    # ═══════════════════════════════════════════════════════════════════════

    def start(self) -> None:
        """(Re)start the frame loop; the next tick integrates no motion."""
        self.running = True
        self.last_time = None
        log("[CAROUSEL] Frame loop started")

    def stop(self) -> None:
        """Pause the frame loop; offset, velocity and colors are kept."""
        self.running = False
        log("[CAROUSEL] Frame loop stopped")

    def tick(self, t: float) -> LayoutFrame:
        """Run one frame at timestamp t (seconds)."""
        if not self.running:
            return self.frame
        dt = 0.0 if self.last_time is None else max(0.0, t - self.last_time)
        self.last_time = t
        self.momentum.integrate(dt)
        self.update_entry(t)
        return self.refresh(t)

    def refresh(self, t: float) -> LayoutFrame:
        """Recompute the layout for the current offset and follow the centered card."""
        self.frame = self.layout.compute(self.momentum.offset, self.viewport_half_width)
        idx = self.frame.nearest_index
        if idx >= 0 and idx != self.gradient.active_index:
            self.gradient.set_active(idx, t, count=self.count)
        self.gradient.update(t)
        return self.frame

    # ═══════════════════════════════════════════════════════════════════════
    # Entry
    # ═══════════════════════════════════════════════════════════════════════

    def begin_entry(self, t: float, viewport_width: float) -> EntryAnimation:
        """Start the intro fade for cards currently on screen; input stays locked."""
        frame = self.refresh(t)
        order = [c.index for c in visible_cards(frame, viewport_width)]
        self.entry = EntryAnimation(start_time=t, order=order)
        log(f"[CAROUSEL] Entry animation over {len(order)} cards, {self.entry.duration:.2f}s")
        return self.entry

    def update_entry(self, t: float) -> None:
        """Unlock input once the entry animation is over."""
        if self.entry is not None and self.entry.is_complete(t):
            self.entry = None
            self.momentum.finish_entry()

    def skip_entry(self) -> None:
        if self.entry is not None:
            self.entry.finish()
        self.entry = None
        self.momentum.finish_entry()
