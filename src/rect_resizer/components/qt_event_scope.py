"""
Qt event scope - feeds an EventScope from a Qt event filter.

Translates Qt mouse/key events into PointerEvent/KeyEvent and dispatches
them to whoever is listening on the scope.
"""

import logging

from PyQt5.QtCore import QEvent, QObject, Qt
from PyQt5.QtWidgets import QApplication

from rect_resizer.constants import (
	BUTTON_MIDDLE, BUTTON_PRIMARY, BUTTON_SECONDARY,
	EVENT_KEYDOWN, EVENT_MOVE, EVENT_PRESS, EVENT_RELEASE, KEY_ESCAPE
)
from rect_resizer.models.events import KeyEvent, PointerEvent
from rect_resizer.models.rect import ModifierKeys
from rect_resizer.utils.logger import log_contained
from .event_scope import EventScope

logger = logging.getLogger(__name__)


_QT_EVENT_TYPES = {
	QEvent.MouseButtonPress: EVENT_PRESS,
	QEvent.MouseMove: EVENT_MOVE,
	QEvent.MouseButtonRelease: EVENT_RELEASE,
	QEvent.KeyPress: EVENT_KEYDOWN,
}

_QT_BUTTONS = {
	Qt.LeftButton: BUTTON_PRIMARY,
	Qt.MiddleButton: BUTTON_MIDDLE,
	Qt.RightButton: BUTTON_SECONDARY,
}


def modifier_keys_from_qt(modifiers):
	return ModifierKeys(
		shift=bool(modifiers & Qt.ShiftModifier),
		ctrl=bool(modifiers & Qt.ControlModifier),
		alt=bool(modifiers & Qt.AltModifier),
	)


def pointer_event_from_qt(target, event):
	"""Translate a QMouseEvent into a PointerEvent (global coordinates)."""
	pos = event.globalPos()
	if event.type() == QEvent.MouseButtonRelease:
		buttons_held = False
	else:
		buttons_held = bool(event.buttons() & Qt.LeftButton)
	return PointerEvent(
		x=pos.x(),
		y=pos.y(),
		target=target,
		button=_QT_BUTTONS.get(event.button(), -1),
		buttons_held=buttons_held,
		keys=modifier_keys_from_qt(event.modifiers()),
		native=event,
	)


def key_event_from_qt(target, event):
	"""Translate a QKeyEvent into a KeyEvent."""
	if event.key() == Qt.Key_Escape:
		key = KEY_ESCAPE
	else:
		key = event.text() or str(event.key())
	return KeyEvent(key=key, target=target, keys=modifier_keys_from_qt(event.modifiers()), native=event)


class QtEventScope(QObject, EventScope):
	"""EventScope fed by a Qt event filter.

	Installed on the QApplication by default, so presses anywhere in the
	application reach the resizer. Qt re-delivers an ignored mouse event to
	each parent widget in turn; only the first (deepest) receiver of a
	delivery is dispatched, so listeners see the widget that was actually
	clicked as the event target.
	"""

	def __init__(self, watched=None, parent=None):
		QObject.__init__(self, parent)
		EventScope.__init__(self)
		self._watched = []
		self._last_delivery = None
		for obj in (watched if watched is not None else [QApplication.instance()]):
			self.watch(obj)

	def watch(self, obj):
		if obj is None or obj in self._watched:
			return
		obj.installEventFilter(self)
		self._watched.append(obj)

	def unwatch_all(self):
		for obj in self._watched:
			obj.removeEventFilter(self)
		self._watched = []

	def _delivery_key(self, event):
		if event.type() == QEvent.KeyPress:
			return (event.type(), event.timestamp(), event.key())
		pos = event.globalPos()
		return (event.type(), event.timestamp(), pos.x(), pos.y())

	def eventFilter(self, obj, event):
		event_type = _QT_EVENT_TYPES.get(event.type())
		if event_type is None or not self.has_listeners(event_type):
			return False
		# Window handles see the event before the widget does
		if not obj.isWidgetType():
			return False
		key = self._delivery_key(event)
		if key == self._last_delivery:
			return False
		self._last_delivery = key

		if event_type == EVENT_KEYDOWN:
			translated = key_event_from_qt(obj, event)
		else:
			translated = pointer_event_from_qt(obj, event)

		try:
			self.emit(event_type, translated)
		except Exception as e:
			# Exceptions must not escape a Qt virtual override
			log_contained(e, f"Listener for '{event_type}' failed", logger)
			return False
		return bool(getattr(translated, 'default_prevented', False))
