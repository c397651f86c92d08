"""Infinite 3D-style carousel with a backdrop that follows the centered image."""

from .types import Item, ColorPair, GradientColors, CardTransform, LayoutFrame
from .layout import RingLayout, LayoutParams, compute_layout, wrap_to_nearest
from .momentum import MomentumController, MomentumParams, MomentumMode
from .palette import PaletteParams, extract_colors, build_palette, fallback_from_index
from .tween import Tween, EasedTween, InstantTween
from .gradient import GradientTracker
from .background import BackgroundClock, focal_points
from .carousel import CarouselController

__version__ = "0.1.0"

__all__ = [
    'Item',
    'ColorPair',
    'GradientColors',
    'CardTransform',
    'LayoutFrame',
    'RingLayout',
    'LayoutParams',
    'compute_layout',
    'wrap_to_nearest',
    'MomentumController',
    'MomentumParams',
    'MomentumMode',
    'PaletteParams',
    'extract_colors',
    'build_palette',
    'fallback_from_index',
    'Tween',
    'EasedTween',
    'InstantTween',
    'GradientTracker',
    'BackgroundClock',
    'focal_points',
    'CarouselController',
]
