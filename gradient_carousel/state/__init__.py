"""State management submodules for the carousel."""

from .scroll import ScrollState
from .input import DragState
from .viewport import ViewportState
from .ui import UIState

__all__ = [
    'ScrollState',
    'DragState',
    'ViewportState',
    'UIState',
]
