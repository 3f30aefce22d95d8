"""
Rect Resizer - Resize Handle Components

- directions.py: HandleDirection catalogue and the edges each direction moves
- directory.py: HandleDirectory, the enabled handle set with press lookups
- drag_session.py: DragSession, the state of one active drag
"""

from .directions import HandleDirection, Edge, CORNER_DIRECTIONS, DIRECTION_ANCHORS
from .directory import Handle, HandleDirectory
from .drag_session import DragSession

__all__ = [
	'HandleDirection', 'Edge', 'CORNER_DIRECTIONS', 'DIRECTION_ANCHORS',
	'Handle', 'HandleDirectory',
	'DragSession',
]
