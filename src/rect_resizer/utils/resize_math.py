"""Resize geometry - maps a handle drag to a new rectangle.

Pure functions only: no state, no I/O. The result of compute_rectangle()
carries top/left as offsets relative to the start rectangle's top-left
corner; apply_offsets() turns it into an absolute rectangle.
"""
import math

from rect_resizer.components.resize_handles.directions import Edge
from rect_resizer.constants import MIN_RESIZE_SIZE
from rect_resizer.models.rect import ModifierKeys, Rect, Vec2


def round_half_up(value):
    """Round .5 away from zero for positive sizes (Python's round() is banker's)."""
    return math.floor(value + 0.5)


def is_ratio_locked(direction, keys, ratio_default):
    """Aspect lock applies to corners only; shift inverts the default."""
    if not direction.is_corner:
        return False
    shift = bool(keys.shift) if keys else False
    return bool(ratio_default) != shift


def compute_rectangle(start_rect, direction, delta, keys=None, ratio_default=False):
    """Compute the resized box for a drag on one handle.

    Args:
        start_rect: Rect snapshot taken when the drag started
        direction: HandleDirection being dragged
        delta: Vec2 (or (x, y)) pointer offset since the drag started
        keys: ModifierKeys held during the move
        ratio_default: True if the aspect lock is on unless shift is held

    Returns:
        Rect: top/left are offsets from the start corner, width/height are final sizes
    """
    delta = Vec2.coerce(delta)
    keys = keys or ModifierKeys()
    start_w, start_h = start_rect.width, start_rect.height

    width, height = start_w, start_h
    if direction.affects(Edge.RIGHT):
        width = max(MIN_RESIZE_SIZE, start_w + delta.x)
    if direction.affects(Edge.BOTTOM):
        height = max(MIN_RESIZE_SIZE, start_h + delta.y)
    if direction.affects(Edge.LEFT):
        width = max(MIN_RESIZE_SIZE, start_w - delta.x)
    if direction.affects(Edge.TOP):
        height = max(MIN_RESIZE_SIZE, start_h - delta.y)

    # A degenerate start box has no ratio to keep
    if start_w > 0 and start_h > 0 and is_ratio_locked(direction, keys, ratio_default):
        ratio = start_w / start_h
        if width / height > ratio:
            height = round_half_up(width / ratio)
        else:
            width = round_half_up(height * ratio)

    offset_top = 0
    offset_left = 0
    if direction.affects(Edge.LEFT):
        offset_left = start_w - width
    if direction.affects(Edge.TOP):
        offset_top = start_h - height

    return Rect(top=offset_top, left=offset_left, width=width, height=height)


def apply_offsets(reference, box):
    """Turn a relative box from compute_rectangle() into an absolute Rect."""
    return box.translated(reference.left, reference.top)
