"""
Rect Resizer - Data Models

Value types shared by the resizer and its host adapters.
"""

from .rect import Vec2, Rect, ModifierKeys
from .events import PointerEvent, KeyEvent
from .options import ResizerOptions

__all__ = ['Vec2', 'Rect', 'ModifierKeys', 'PointerEvent', 'KeyEvent', 'ResizerOptions']
