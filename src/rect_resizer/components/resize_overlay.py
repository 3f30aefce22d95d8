"""
Resize Overlay - bounding box and handle widgets drawn around the target

The overlay is a child of the mount widget. It paints the target's
bounding box and owns one small HandleWidget per enabled direction; the
handle widgets are what the user presses, and the resizer recognises them
through the HandleDirectory they are bound into.
"""

from PyQt5.QtWidgets import QWidget
from PyQt5.QtCore import Qt, QPoint, QRect
from PyQt5.QtGui import QPainter, QPen, QBrush, QColor, QRegion

from rect_resizer.constants import (
	CONTAINER_NAME_TEMPLATE, RESIZER_BORDER_WIDTH, RESIZER_BOX_COLOR,
	RESIZER_HANDLE_FILL, RESIZER_HANDLE_OUTLINE, RESIZER_HANDLE_SIZE
)
from .resize_handles import DIRECTION_ANCHORS, HandleDirection


def cursor_for_direction(direction):
	"""Resize cursor matching the handle orientation."""
	if direction in (HandleDirection.TOP_LEFT, HandleDirection.BOTTOM_RIGHT):
		return Qt.SizeFDiagCursor
	if direction in (HandleDirection.TOP_RIGHT, HandleDirection.BOTTOM_LEFT):
		return Qt.SizeBDiagCursor
	if direction in (HandleDirection.TOP_CENTER, HandleDirection.BOTTOM_CENTER):
		return Qt.SizeVerCursor
	return Qt.SizeHorCursor


class HandleWidget(QWidget):
	"""Small square the user grabs to resize in one direction."""

	def __init__(self, handle, attr_name, parent=None, size=RESIZER_HANDLE_SIZE):
		super().__init__(parent)
		self.handle = handle
		self.direction = handle.direction
		self.setObjectName(handle.object_name)
		# Same lookup the resizer uses for hosts that tag their own widgets
		self.setProperty(attr_name, handle.identifier)
		self.setFixedSize(size, size)
		self.setCursor(cursor_for_direction(handle.direction))

	def paintEvent(self, event):
		painter = QPainter(self)
		painter.setPen(QPen(QColor(*RESIZER_HANDLE_OUTLINE), 1))
		painter.setBrush(QBrush(QColor(*RESIZER_HANDLE_FILL)))
		painter.drawRect(0, 0, self.width() - 1, self.height() - 1)


class ResizeOverlay(QWidget):
	"""Overlay container positioned over the focused target."""

	def __init__(self, mount, prefix='', handle_size=RESIZER_HANDLE_SIZE):
		super().__init__(mount)
		self.mount = mount
		self.handle_size = handle_size
		self.margin = handle_size // 2
		self.handle_widgets = {}  # direction -> HandleWidget
		self.setObjectName(CONTAINER_NAME_TEMPLATE.format(prefix=prefix))
		self.setAttribute(Qt.WA_TranslucentBackground)
		self.hide()

	# ------------------------------------------------------------------
	# Overlay protocol used by the Resizer
	# ------------------------------------------------------------------

	def rebuild(self, directory):
		"""Recreate the handle widgets for the enabled directions."""
		for widget in self.handle_widgets.values():
			widget.hide()
			widget.setParent(None)
			widget.deleteLater()
		self.handle_widgets = {}
		directory.unbind_all()
		self.setObjectName(CONTAINER_NAME_TEMPLATE.format(prefix=directory.prefix))

		for handle in directory:
			widget = HandleWidget(handle, directory.attr_name, self, self.handle_size)
			directory.bind(handle.direction, widget)
			self.handle_widgets[handle.direction] = widget
		self._layout_handles()

	def show_rect(self, rect):
		"""Place the overlay over `rect` (global coordinates) and show it."""
		top_left = self.mount.mapFromGlobal(QPoint(int(round(rect.left)), int(round(rect.top))))
		self.setGeometry(
			top_left.x() - self.margin,
			top_left.y() - self.margin,
			int(round(rect.width)) + 2 * self.margin,
			int(round(rect.height)) + 2 * self.margin,
		)
		self.show()
		self.raise_()

	def hide_overlay(self):
		self.hide()

	# ------------------------------------------------------------------
	# Qt
	# ------------------------------------------------------------------

	def box_rect(self):
		"""Target box in overlay coordinates."""
		return QRect(self.margin, self.margin,
		             self.width() - 2 * self.margin, self.height() - 2 * self.margin)

	def resizeEvent(self, event):
		self._layout_handles()
		super().resizeEvent(event)

	def _layout_handles(self):
		box = self.box_rect()
		for direction, widget in self.handle_widgets.items():
			nx, ny = DIRECTION_ANCHORS[direction]
			cx = box.x() + int(round(nx * box.width()))
			cy = box.y() + int(round(ny * box.height()))
			widget.move(cx - self.handle_size // 2, cy - self.handle_size // 2)
		self._update_mask()

	def _update_mask(self):
		"""Only the handles and the outline take mouse input; the inside stays clickable."""
		box = self.box_rect()
		border = max(RESIZER_BORDER_WIDTH, 1)
		region = QRegion(box).subtracted(QRegion(box.adjusted(border, border, -border, -border)))
		for widget in self.handle_widgets.values():
			region = region.united(QRegion(widget.geometry()))
		self.setMask(region)

	def paintEvent(self, event):
		painter = QPainter(self)
		painter.setPen(QPen(QColor(*RESIZER_BOX_COLOR), RESIZER_BORDER_WIDTH))
		painter.setBrush(Qt.NoBrush)
		box = self.box_rect()
		painter.drawRect(box.adjusted(0, 0, -1, -1))
