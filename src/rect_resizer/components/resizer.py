"""
Resizer - interaction controller for eight-handle resizing

Drives one target through three states:
- IDLE: nothing focused
- FOCUSED: overlay shown around the target, listening for a press on a handle
- RESIZING: a drag is active; every move recomputes the rectangle and
  previews it, the release commits it

The resizer never draws or moves anything itself. It reads positions
through a position source, writes results through a commit sink, shows the
overlay through an Overlay object and receives input from an EventScope.
Host adapters (see qt_resizer.py) supply defaults for all of them.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from rect_resizer.constants import (
	BUTTON_PRIMARY, EVENT_KEYDOWN, EVENT_MOVE, EVENT_PRESS, EVENT_RELEASE, KEY_ESCAPE
)
from rect_resizer.models.options import ResizerOptions
from rect_resizer.models.rect import Rect, Vec2
from rect_resizer.utils.logger import log_contained
from rect_resizer.utils.resize_math import apply_offsets, compute_rectangle
from .event_scope import EventScope
from .resize_handles import DragSession, HandleDirection, HandleDirectory

logger = logging.getLogger(__name__)


class ResizerState(Enum):
	IDLE = 'idle'
	FOCUSED = 'focused'
	RESIZING = 'resizing'


@dataclass(frozen=True)
class CommitInfo:
	"""Extra data passed to the commit sink with every rectangle."""
	store: bool  # False while previewing a move, True for the final commit
	selected_handler: Optional[HandleDirection] = None


class NullOverlay:
	"""Overlay used when the host draws nothing."""

	def show_rect(self, rect):
		pass

	def hide_overlay(self):
		pass

	def rebuild(self, directory):
		pass


def resize_target(target, rect, info):
	"""Fallback commit: apply width/height only, leave the position alone."""
	target.resize(rect.width, rect.height)


class _ListenerLease:
	"""A group of listeners attached together and released together.

	release() is idempotent so every exit path may call it.
	"""

	def __init__(self, scope, listeners):
		self.scope = scope
		self.listeners = listeners
		self.active = False

	def acquire(self):
		for event_type, callback in self.listeners:
			self.scope.on(event_type, callback)
		self.active = True
		return self

	def release(self):
		if not self.active:
			return
		self.active = False
		for event_type, callback in self.listeners:
			self.scope.off(event_type, callback)


class Resizer:
	"""Resize interaction state machine."""

	def __init__(self, options=None, scope=None, overlay=None,
	             default_pos_fetcher=None, default_mouse_pos_fetcher=None,
	             default_update_target=resize_target):
		"""
		Args:
			options: ResizerOptions or a mapping accepted by ResizerOptions.from_mapping
			scope: EventScope the listeners are attached to
			overlay: Object with show_rect(rect), hide_overlay(), rebuild(directory)
			default_pos_fetcher: Host position source used when options have none
			default_mouse_pos_fetcher: Host pointer source used when options have none
			default_update_target: Host commit sink used when options have none
		"""
		self.scope = scope if scope is not None else EventScope()
		self.overlay = overlay if overlay is not None else NullOverlay()
		self._default_pos_fetcher = default_pos_fetcher
		self._default_mouse_pos_fetcher = default_mouse_pos_fetcher
		self._default_update_target = default_update_target

		self._state = ResizerState.IDLE
		self._target = None
		self._session = None
		self._selected_handle = None
		self._press_lease = None
		self._drag_lease = None

		self.opts = None
		self.directory = None
		self.set_options(options)

	# ------------------------------------------------------------------
	# Configuration
	# ------------------------------------------------------------------

	def set_options(self, options=None):
		"""Replace the options and rebuild the handle set."""
		if isinstance(options, Mapping):
			options = ResizerOptions.from_mapping(options)
		if self.is_resizing:
			self.cancel()
		self.opts = options if options is not None else ResizerOptions()
		self.setup()

	def setup(self):
		# Handle objects from the previous directory are discarded by the overlay
		self._selected_handle = None
		self.directory = HandleDirectory(self.opts)
		self.overlay.rebuild(self.directory)
		logger.debug("Resizer set up with handles: %s",
		             ', '.join(handle.identifier for handle in self.directory))

	# ------------------------------------------------------------------
	# Introspection
	# ------------------------------------------------------------------

	@property
	def state(self):
		return self._state

	@property
	def is_resizing(self):
		return self._state is ResizerState.RESIZING

	@property
	def session(self):
		"""Active DragSession, or None outside a drag."""
		return self._session

	def get_focused_target(self):
		return self._target

	def is_handle(self, obj):
		return self.directory.is_handle(obj)

	def get_selected_handler(self):
		"""Direction of the last pressed handle, or None."""
		if self._selected_handle is None:
			return None
		return self.directory.classify(self._selected_handle)

	def get_element_pos(self, target):
		"""Current absolute rectangle of `target` from the position source."""
		fetcher = self.opts.pos_fetcher or self._default_pos_fetcher
		if fetcher is None:
			raise LookupError("No position source configured for the resizer")
		return Rect.coerce(fetcher(target))

	def _pointer_pos(self, event):
		fetcher = self.opts.mouse_pos_fetcher or self._default_mouse_pos_fetcher
		if fetcher is None:
			return Vec2(event.x, event.y)
		return Vec2.coerce(fetcher(event))

	# ------------------------------------------------------------------
	# Focus
	# ------------------------------------------------------------------

	def focus(self, target):
		"""Show the overlay around `target` and wait for a handle press."""
		if target is None:
			self.blur()
			return
		if target is self._target:
			return
		if self.is_resizing:
			self.cancel()
		if self._press_lease is not None:
			self._press_lease.release()
			self._press_lease = None

		try:
			rect = self.get_element_pos(target)
		except Exception as e:
			log_contained(e, "Could not read target position; focus dropped", logger)
			self._clear_focus()
			return

		self._target = target
		self._state = ResizerState.FOCUSED
		self.overlay.show_rect(rect)
		self._press_lease = _ListenerLease(self.scope, [(EVENT_PRESS, self.handle_press)]).acquire()
		logger.debug("Focused %r at %s", target, rect)

	def blur(self):
		"""Hide the overlay and forget the target."""
		if self._state is ResizerState.IDLE:
			return
		if self.is_resizing:
			self.cancel()
		self._clear_focus()
		logger.debug("Resizer blurred")

	def _clear_focus(self):
		try:
			self.overlay.hide_overlay()
		finally:
			if self._press_lease is not None:
				self._press_lease.release()
				self._press_lease = None
			self._target = None
			self._selected_handle = None
			self._state = ResizerState.IDLE

	# ------------------------------------------------------------------
	# Event handlers
	# ------------------------------------------------------------------

	def handle_press(self, event):
		"""Start a drag on a handle press, blur on a press elsewhere."""
		if self._state is not ResizerState.FOCUSED or self._target is None:
			logger.debug("Ignoring press while %s", self._state.value)
			return
		direction = self.directory.classify(event.target)
		if direction is not None:
			self._selected_handle = event.target
			self.start(event, direction)
		elif event.target is not self._target:
			self._selected_handle = None
			self.blur()

	def start(self, event, direction=None):
		"""Begin resizing from a press on a handle."""
		if self._state is not ResizerState.FOCUSED or self._target is None:
			return
		if event.button != BUTTON_PRIMARY:
			return
		if direction is None:
			direction = self.directory.classify(event.target)
			if direction is None:
				return

		event.prevent_default()
		event.stop_propagation()

		try:
			start_rect = self.get_element_pos(self._target)
			start_pointer = self._pointer_pos(event)
		except Exception as e:
			log_contained(e, "Could not read start geometry; resize not started", logger)
			return
		if start_rect is None or start_rect.is_empty():
			logger.warning("Refusing to resize %r from empty rectangle %s", self._target, start_rect)
			return

		self._session = DragSession(
			direction=direction,
			start_rect=start_rect,
			start_pointer=start_pointer,
			handle=event.target,
		)
		self._state = ResizerState.RESIZING
		self._drag_lease = _ListenerLease(self.scope, [
			(EVENT_MOVE, self.move),
			(EVENT_KEYDOWN, self.handle_key_down),
			(EVENT_RELEASE, self.stop),
		]).acquire()
		logger.debug("Resize started: %s from %s", direction.tag, start_rect)

		# First frame from the press itself
		self.move(event)

		if self.is_resizing:
			self._session.started = True
			self._notify('on_start', event, self.scope)

	def move(self, event):
		"""Recompute the rectangle for the current pointer position."""
		session = self._session
		if not self.is_resizing or session is None:
			logger.debug("Ignoring move outside a drag")
			return

		try:
			pointer = self._pointer_pos(event)
			session.delta = pointer - session.start_pointer
			session.keys = event.keys
			session.box = compute_rectangle(
				session.start_rect, session.direction, session.delta,
				session.keys, self.opts.ratio_default,
			)
			session.current_rect = apply_offsets(session.start_rect, session.box)
			self.update_rect(store=False)
			if self.opts.on_move is not None:
				self.opts.on_move(event)
		except Exception as e:
			log_contained(e, "Resize move failed; ending drag", logger)
			self.stop(event)
			return

		# Button released outside the capture surface
		if not event.buttons_held:
			self.stop(event)

	def handle_key_down(self, event):
		"""Escape rolls back to the start rectangle and ends the drag."""
		if not self.is_resizing or self._session is None:
			return
		if event.key == KEY_ESCAPE:
			self._session.rollback()
			self.stop(event)

	def stop(self, event=None):
		"""End the drag: detach listeners, commit, notify."""
		if not self.is_resizing:
			logger.debug("Ignoring stop outside a drag")
			return

		lease = self._drag_lease
		session = self._session
		# Leave RESIZING first so re-entrant calls from the sink or hooks are no-ops
		self._state = ResizerState.FOCUSED if self._target is not None else ResizerState.IDLE
		try:
			lease.release()
			self._commit(store=True)
			# on_end only pairs with an on_start that was fired
			if session is not None and session.started:
				self._notify('on_end', event, self.scope)
		finally:
			lease.release()
			self._drag_lease = None
			self._session = None
		logger.debug("Resize stopped")

	def cancel(self):
		"""Roll back to the start rectangle and end the drag."""
		if not self.is_resizing or self._session is None:
			return
		self._session.rollback()
		self.stop(None)

	# ------------------------------------------------------------------
	# Commit
	# ------------------------------------------------------------------

	def update_rect(self, store):
		"""Hand the current rectangle to the commit sink and follow it with the overlay."""
		session = self._session
		target = self._target
		if session is None or target is None:
			return
		info = CommitInfo(store=bool(store), selected_handler=self.get_selected_handler())
		update_target = self.opts.update_target or self._default_update_target
		update_target(target, session.current_rect.copy(), info)
		self.overlay.show_rect(self.get_element_pos(target))

	def _commit(self, store):
		try:
			self.update_rect(store)
		except Exception as e:
			log_contained(e, "Commit of resized rectangle failed", logger)

	def _notify(self, hook_name, *args):
		hook = getattr(self.opts, hook_name)
		if hook is None:
			return
		try:
			hook(*args)
		except Exception as e:
			log_contained(e, f"Resizer hook '{hook_name}' failed", logger)
