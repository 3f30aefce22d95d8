"""Drag session dataclass for the resizer.

Holds everything one drag needs. Created when a drag starts and dropped
when it stops, so nothing outlives the drag it belongs to.
"""

from dataclasses import dataclass, field
from typing import Any

from rect_resizer.models.rect import ModifierKeys, Rect, Vec2
from .directions import HandleDirection


@dataclass
class DragSession:
	"""State of one active resize drag."""
	direction: HandleDirection
	start_rect: Rect     # snapshot at press time, never modified
	start_pointer: Vec2
	current_rect: Rect = None  # absolute rectangle handed to the commit sink
	box: Rect = None           # last relative result from compute_rectangle()
	delta: Vec2 = field(default_factory=lambda: Vec2(0, 0))
	keys: ModifierKeys = field(default_factory=ModifierKeys)
	handle: Any = None   # host object that received the press
	started: bool = False  # True once on_start has fired

	def __post_init__(self):
		self.start_rect = self.start_rect.copy()
		if self.current_rect is None:
			self.current_rect = self.start_rect.copy()

	def rollback(self):
		"""Restore the start snapshot (Escape)."""
		self.current_rect = self.start_rect.copy()
		self.box = Rect(0, 0, self.start_rect.width, self.start_rect.height)
