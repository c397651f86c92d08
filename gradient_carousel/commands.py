"""Command Pattern for input handling.

Commands encapsulate actions produced by the input layer. Each command has
an execute() method and optional can_execute() for guards.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .app import Application

from .logging import log


class Command(ABC):
    """Base class for all commands."""

    @abstractmethod
    def execute(self, app: "Application") -> bool:
        """Execute the command. Returns True if action was taken."""

    def can_execute(self, app: "Application") -> bool:
        """Check if command can be executed. Override for guards."""
        return True


# ═══════════════════════════════════════════════════════════════════════════
# Scrolling
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class DragStart(Command):
    """Pointer pressed on the stage."""
    x: float
    t: float

    def can_execute(self, app: "Application") -> bool:
        return not app.carousel.entering

    def execute(self, app: "Application") -> bool:
        return app.carousel.on_drag_start(self.x, self.t)


@dataclass
class DragMove(Command):
    """Pointer moved while held."""
    x: float
    t: float

    def can_execute(self, app: "Application") -> bool:
        return app.carousel.momentum.drag.dragging

    def execute(self, app: "Application") -> bool:
        return app.carousel.on_drag_move(self.x, self.t)


@dataclass
class DragEnd(Command):
    """Pointer released."""

    def can_execute(self, app: "Application") -> bool:
        return app.carousel.momentum.drag.dragging

    def execute(self, app: "Application") -> bool:
        ok = app.carousel.on_drag_end()
        if ok:
            log(f"[CMD] DragEnd: velocity={app.carousel.velocity:.1f}")
        return ok


@dataclass
class Wheel(Command):
    """Wheel or key impulse (signed)."""
    delta: float

    def can_execute(self, app: "Application") -> bool:
        return not app.carousel.entering and self.delta != 0

    def execute(self, app: "Application") -> bool:
        if not self.can_execute(app):
            return False
        return app.carousel.on_wheel(self.delta)


# ═══════════════════════════════════════════════════════════════════════════
# Window
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class Resize(Command):
    """Window size changed."""
    screen_w: int
    screen_h: int

    def can_execute(self, app: "Application") -> bool:
        return self.screen_w > 0 and self.screen_h > 0

    def execute(self, app: "Application") -> bool:
        if not self.can_execute(app):
            return False
        app.resize(self.screen_w, self.screen_h)
        log(f"[CMD] Resize: {self.screen_w}x{self.screen_h}")
        return True


@dataclass
class SetVisible(Command):
    """Window shown/restored (True) or hidden/minimized (False)."""
    visible: bool

    def can_execute(self, app: "Application") -> bool:
        return self.visible != app.ui.visible

    def execute(self, app: "Application") -> bool:
        if not self.can_execute(app):
            return False
        app.ui.visible = self.visible
        log(f"[CMD] SetVisible: {self.visible}")
        app.sync_loops()
        return True


@dataclass
class TogglePause(Command):
    """Pause or resume both animation loops."""

    def execute(self, app: "Application") -> bool:
        app.ui.paused = not app.ui.paused
        log(f"[CMD] TogglePause: paused={app.ui.paused}")
        app.sync_loops()
        return True


@dataclass
class ToggleHUD(Command):
    """Toggle HUD visibility."""

    def execute(self, app: "Application") -> bool:
        app.ui.show_hud = not app.ui.show_hud
        log(f"[CMD] ToggleHUD: {app.ui.show_hud}")
        return True


@dataclass
class CloseApp(Command):
    """Close the application."""

    def execute(self, app: "Application") -> bool:
        log("[CMD] CloseApp")
        app.stop()
        return True
