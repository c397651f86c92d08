"""UI state - HUD and window visibility flags."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class UIState:
    """State for UI overlays."""
    show_hud: bool = False
    visible: bool = True   # Window not minimized
    paused: bool = False   # User pause
    last_resize_time: float = 0.0
    pending_resize: bool = False
