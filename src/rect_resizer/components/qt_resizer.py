"""
Qt host adapter - default collaborators for driving a Resizer with QWidgets

- widget_rect: position source (global geometry of a widget)
- widget_pointer_pos: pointer source (global cursor position of a mouse event)
- resize_widget: commit sink (width/height only, position left to the host)
- create_qt_resizer: builds a Resizer with an overlay and a Qt event scope
"""

from PyQt5.QtCore import QPoint

from rect_resizer.models.options import ResizerOptions
from rect_resizer.models.rect import Rect, Vec2
from rect_resizer.utils.logger import loggerRaise
from .qt_event_scope import QtEventScope
from .resize_overlay import ResizeOverlay
from .resizer import Resizer


def widget_rect(widget):
	"""Rectangle of `widget` in global (screen) coordinates."""
	top_left = widget.mapToGlobal(QPoint(0, 0))
	return Rect(top=top_left.y(), left=top_left.x(), width=widget.width(), height=widget.height())


def widget_pointer_pos(event):
	"""Global pointer position of a translated Qt event."""
	native = getattr(event, 'native', None)
	if native is not None and hasattr(native, 'globalPos'):
		pos = native.globalPos()
		return Vec2(pos.x(), pos.y())
	return Vec2(event.x, event.y)


def resize_widget(target, rect, info):
	"""Apply the new size to the target widget; the overlay follows on its own."""
	target.resize(int(round(rect.width)), int(round(rect.height)))


def create_qt_resizer(mount=None, options=None, watched=None):
	"""Build a Resizer wired to Qt.

	Args:
		mount: Widget the overlay is placed in (defaults to options.append_to)
		options: ResizerOptions or mapping
		watched: Objects the event filter is installed on (default: the QApplication)

	Returns:
		Resizer
	"""
	if isinstance(options, ResizerOptions) or options is None:
		opts = options or ResizerOptions()
	else:
		opts = ResizerOptions.from_mapping(options)
	mount = mount if mount is not None else opts.append_to
	if mount is None:
		loggerRaise(ValueError("create_qt_resizer needs a mount widget (mount= or append_to)"),
		            "Resizer has nowhere to draw its handles")

	overlay = ResizeOverlay(mount)
	scope = QtEventScope(watched, parent=mount)
	return Resizer(
		opts,
		scope=scope,
		overlay=overlay,
		default_pos_fetcher=widget_rect,
		default_mouse_pos_fetcher=widget_pointer_pos,
		default_update_target=resize_widget,
	)
