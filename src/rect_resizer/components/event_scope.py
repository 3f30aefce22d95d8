"""
Event scope - where the resizer attaches its input listeners.

A plain listener registry keyed by event type. Hosts feed it with
toolkit-neutral events through emit(); the Qt adapter (qt_event_scope.py)
is the same registry fed by a Qt event filter.
"""

from collections import defaultdict


class EventScope:
	"""Listener registry keyed by event type."""

	def __init__(self):
		self._listeners = defaultdict(list)

	def on(self, event_type, callback):
		if callback not in self._listeners[event_type]:
			self._listeners[event_type].append(callback)

	def off(self, event_type, callback):
		listeners = self._listeners.get(event_type)
		if listeners and callback in listeners:
			listeners.remove(callback)

	def listeners(self, event_type):
		return list(self._listeners.get(event_type, ()))

	def has_listeners(self, event_type=None):
		if event_type is None:
			return any(self._listeners.values())
		return bool(self._listeners.get(event_type))

	def emit(self, event_type, event):
		"""Deliver an event to every listener registered for its type.

		Listeners may attach or detach others while the event is being
		delivered; the snapshot taken here is what receives this event.
		"""
		for callback in self.listeners(event_type):
			callback(event)
		return event
