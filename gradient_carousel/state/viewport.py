"""Viewport state - screen size and measured card size."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from ..config import CARD_W, CARD_H, WINDOW_W, WINDOW_H


@dataclass
class ViewportState:
    """Window and card dimensions."""
    screen_w: int = WINDOW_W
    screen_h: int = WINDOW_H
    card_w: float = CARD_W
    card_h: float = CARD_H

    @property
    def half_width(self) -> float:
        return self.screen_w * 0.5

    @property
    def size(self) -> Tuple[int, int]:
        return (self.screen_w, self.screen_h)

    @property
    def center(self) -> Tuple[int, int]:
        return (self.screen_w // 2, self.screen_h // 2)
