"""Resize handle catalogue - the eight directions and the edges they move.

The catalogue is plain data: each direction tag maps to the set of edges it
drags. Behaviour that depends on the direction (which sizes change, whether
the aspect lock may apply, which edge stays anchored) is looked up here
instead of being spread across per-handle classes.
"""

from enum import Enum, Flag


class Edge(Flag):
	"""Edges of the target rectangle a handle can move."""
	NONE = 0
	TOP = 1
	BOTTOM = 2
	LEFT = 4
	RIGHT = 8


class HandleDirection(Enum):
	"""One of the eight handle positions around the target."""
	TOP_LEFT = 'tl'
	TOP_CENTER = 'tc'
	TOP_RIGHT = 'tr'
	CENTER_LEFT = 'cl'
	CENTER_RIGHT = 'cr'
	BOTTOM_LEFT = 'bl'
	BOTTOM_CENTER = 'bc'
	BOTTOM_RIGHT = 'br'

	@property
	def tag(self):
		return self.value

	@property
	def edges(self):
		return DIRECTION_EDGES[self]

	@property
	def is_corner(self):
		"""Corners move two edges; edge handles (tc/bc/cl/cr) move one."""
		return self in CORNER_DIRECTIONS

	def affects(self, edge):
		return bool(self.edges & edge)

	@classmethod
	def from_tag(cls, tag):
		"""Return the direction for a tag, or None for anything unknown."""
		try:
			return cls(tag)
		except ValueError:
			return None


DIRECTION_EDGES = {
	HandleDirection.TOP_LEFT: Edge.TOP | Edge.LEFT,
	HandleDirection.TOP_CENTER: Edge.TOP,
	HandleDirection.TOP_RIGHT: Edge.TOP | Edge.RIGHT,
	HandleDirection.CENTER_LEFT: Edge.LEFT,
	HandleDirection.CENTER_RIGHT: Edge.RIGHT,
	HandleDirection.BOTTOM_LEFT: Edge.BOTTOM | Edge.LEFT,
	HandleDirection.BOTTOM_CENTER: Edge.BOTTOM,
	HandleDirection.BOTTOM_RIGHT: Edge.BOTTOM | Edge.RIGHT,
}

CORNER_DIRECTIONS = frozenset({
	HandleDirection.TOP_LEFT,
	HandleDirection.TOP_RIGHT,
	HandleDirection.BOTTOM_LEFT,
	HandleDirection.BOTTOM_RIGHT,
})

# Normalized position of each handle on the target box (0 = left/top, 1 = right/bottom)
DIRECTION_ANCHORS = {
	HandleDirection.TOP_LEFT: (0.0, 0.0),
	HandleDirection.TOP_CENTER: (0.5, 0.0),
	HandleDirection.TOP_RIGHT: (1.0, 0.0),
	HandleDirection.CENTER_LEFT: (0.0, 0.5),
	HandleDirection.CENTER_RIGHT: (1.0, 0.5),
	HandleDirection.BOTTOM_LEFT: (0.0, 1.0),
	HandleDirection.BOTTOM_CENTER: (0.5, 1.0),
	HandleDirection.BOTTOM_RIGHT: (1.0, 1.0),
}
