"""
Rect Resizer - drag one of eight handles to resize a rectangular target.

The core (Resizer, compute_rectangle, HandleDirectory) does not depend on a
GUI toolkit. The PyQt5 adapter lives in rect_resizer.components.qt_resizer.
"""

from rect_resizer.components.event_scope import EventScope
from rect_resizer.components.resize_handles import DragSession, Edge, HandleDirection, HandleDirectory
from rect_resizer.components.resizer import CommitInfo, Resizer, ResizerState
from rect_resizer.models import KeyEvent, ModifierKeys, PointerEvent, Rect, ResizerOptions, Vec2
from rect_resizer.utils.resize_math import apply_offsets, compute_rectangle

__version__ = '1.0.0'

__all__ = [
    'EventScope',
    'DragSession', 'Edge', 'HandleDirection', 'HandleDirectory',
    'CommitInfo', 'Resizer', 'ResizerState',
    'KeyEvent', 'ModifierKeys', 'PointerEvent', 'Rect', 'ResizerOptions', 'Vec2',
    'apply_offsets', 'compute_rectangle',
]
