"""Input Handler - maps raylib input events to commands.

Polls raylib once per frame and returns the commands to execute. The
carousel itself never registers listeners; it only sees these commands.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

from .rl_compat import rl
from .commands import (
    Command, DragStart, DragMove, DragEnd, Wheel,
    Resize, SetVisible, TogglePause, ToggleHUD, CloseApp,
)
from .config import (
    KEY_IMPULSE, WHEEL_NOTCH_PX,
    KEY_NEXT, KEY_PREV, KEY_TOGGLE_HUD, KEY_TOGGLE_PAUSE, KEY_CLOSE,
)
from .math_utils import dominant_axis
from .logging import now


@dataclass
class MouseState:
    """Current mouse state snapshot."""
    x: float = 0.0
    y: float = 0.0
    left_pressed: bool = False
    left_released: bool = False
    left_down: bool = False
    wheel_x: float = 0.0
    wheel_y: float = 0.0


@dataclass
class InputHandler:
    """Handles input polling and command generation."""
    key_next: int = KEY_NEXT
    key_prev: int = KEY_PREV
    key_toggle_hud: int = KEY_TOGGLE_HUD
    key_toggle_pause: int = KEY_TOGGLE_PAUSE
    key_close: int = KEY_CLOSE

    _last_x: Optional[float] = None

    def poll_mouse(self) -> MouseState:
        """Get current mouse state."""
        pos = rl.GetMousePosition()
        wheel = rl.GetMouseWheelMoveV()
        return MouseState(
            x=pos.x,
            y=pos.y,
            left_pressed=rl.IsMouseButtonPressed(rl.MOUSE_BUTTON_LEFT),
            left_released=rl.IsMouseButtonReleased(rl.MOUSE_BUTTON_LEFT),
            left_down=rl.IsMouseButtonDown(rl.MOUSE_BUTTON_LEFT),
            wheel_x=wheel.x,
            wheel_y=wheel.y,
        )

    def poll(self, dragging: bool) -> List[Command]:
        """Collect this frame's commands.

        Args:
            dragging: Whether the carousel currently holds a drag.
        """
        commands: List[Command] = []
        t = now()

        if rl.IsWindowResized():
            commands.append(Resize(rl.GetScreenWidth(), rl.GetScreenHeight()))
        commands.append(SetVisible(rl.IsWindowFocused() and not rl.IsWindowMinimized()))

        mouse = self.poll_mouse()
        if mouse.left_pressed:
            commands.append(DragStart(mouse.x, t))
            self._last_x = mouse.x
        elif dragging and mouse.left_down and mouse.x != self._last_x:
            commands.append(DragMove(mouse.x, t))
            self._last_x = mouse.x
        if mouse.left_released and dragging:
            commands.append(DragEnd())
            self._last_x = None

        # Wheel down scrolls forward: raylib reports it as negative
        delta = -dominant_axis(mouse.wheel_x, mouse.wheel_y) * WHEEL_NOTCH_PX
        if delta:
            commands.append(Wheel(delta))

        if rl.IsKeyPressed(self.key_next):
            commands.append(Wheel(KEY_IMPULSE))
        if rl.IsKeyPressed(self.key_prev):
            commands.append(Wheel(-KEY_IMPULSE))
        if rl.IsKeyPressed(self.key_toggle_hud):
            commands.append(ToggleHUD())
        if rl.IsKeyPressed(self.key_toggle_pause):
            commands.append(TogglePause())
        if rl.IsKeyPressed(self.key_close):
            commands.append(CloseApp())

        return commands


_input_handler: Optional[InputHandler] = None


def get_input_handler() -> InputHandler:
    """Get the default input handler instance."""
    global _input_handler
    if _input_handler is None:
        _input_handler = InputHandler()
    return _input_handler
