"""Handle directory - the set of handles a resizer currently offers.

Built from ResizerOptions: disabled directions are simply absent, so they
are neither rendered by the host nor matched when a press comes in.
"""

from dataclasses import dataclass

from rect_resizer.constants import (
	HANDLE_ATTR_TEMPLATE, HANDLE_BASE_NAME_TEMPLATE, HANDLE_NAME_TEMPLATE
)
from .directions import HandleDirection


@dataclass(frozen=True)
class Handle:
	"""One enabled handle: its direction and generated names."""
	direction: HandleDirection
	identifier: str     # direction tag, e.g. 'tl'
	object_name: str    # e.g. 'gjs-resizer-h-tl'
	base_name: str      # e.g. 'gjs-resizer-h'


class HandleDirectory:
	"""Catalogue of enabled handles with lookups for the press handler."""

	def __init__(self, options):
		prefix = options.prefix
		self.prefix = prefix
		self.attr_name = HANDLE_ATTR_TEMPLATE.format(prefix=prefix)
		self.handles = {}  # direction -> Handle
		self._bound = {}   # id(host object) -> (host object, direction)

		for direction in options.enabled_directions():
			self.handles[direction] = Handle(
				direction=direction,
				identifier=direction.tag,
				object_name=HANDLE_NAME_TEMPLATE.format(prefix=prefix, tag=direction.tag),
				base_name=HANDLE_BASE_NAME_TEMPLATE.format(prefix=prefix),
			)

	def __iter__(self):
		return iter(self.handles.values())

	def __len__(self):
		return len(self.handles)

	def __contains__(self, direction):
		return direction in self.handles

	def get(self, direction):
		return self.handles.get(direction)

	def bind(self, direction, host_object):
		"""Register the host's visual object (e.g. a widget) for a handle."""
		if direction not in self.handles:
			raise KeyError(f"Handle '{direction.tag}' is not enabled")
		self._bound[id(host_object)] = (host_object, direction)

	def unbind_all(self):
		self._bound.clear()

	def bound_objects(self):
		return [obj for obj, _ in self._bound.values()]

	def classify(self, identifier):
		"""Decide whether `identifier` names an enabled handle.

		Args:
			identifier: Direction tag, HandleDirection, Handle, or an object
				carrying the handler attribute/property (e.g. a handle widget)

		Returns:
			HandleDirection or None
		"""
		if identifier is None:
			return None
		if isinstance(identifier, Handle):
			direction = identifier.direction
		elif isinstance(identifier, HandleDirection):
			direction = identifier
		elif isinstance(identifier, str):
			direction = HandleDirection.from_tag(identifier)
		else:
			direction = self._direction_of_object(identifier)
		if direction is None or direction not in self.handles:
			return None
		return direction

	def resolve_label(self, handle_ref):
		"""Map the exact handle object back to its direction.

		Only objects built by this directory (or bound into it) resolve;
		anything else returns None.
		"""
		if isinstance(handle_ref, Handle):
			return handle_ref.direction if self.handles.get(handle_ref.direction) is handle_ref else None
		entry = self._bound.get(id(handle_ref))
		if entry is not None and entry[0] is handle_ref:
			return entry[1]
		return None

	def is_handle(self, obj):
		return self.resolve_label(obj) is not None

	def _direction_of_object(self, obj):
		bound = self.resolve_label(obj)
		if bound is not None:
			return bound
		tag = None
		read_property = getattr(obj, 'property', None)
		if callable(read_property):
			try:
				tag = read_property(self.attr_name)
			except TypeError:
				tag = None
		if not isinstance(tag, str):
			return None
		return HandleDirection.from_tag(tag)
