"""Resizer configuration.

ResizerOptions is resolved once when a resizer is built (or re-configured)
and never mutated afterwards; replace() returns a new instance.
"""
from dataclasses import dataclass, fields, replace as dc_replace
from typing import Any, Callable, Optional

from rect_resizer.components.resize_handles.directions import HandleDirection
from rect_resizer.utils.logger import loggerRaise

CALLBACK_KEYS = (
    'mouse_pos_fetcher', 'update_target', 'pos_fetcher',
    'on_start', 'on_move', 'on_end',
)

# Keys used by hosts ported from the browser version of this widget
CAMEL_CASE_KEYS = {
    'mousePosFetcher': 'mouse_pos_fetcher',
    'updateTarget': 'update_target',
    'ratioDefault': 'ratio_default',
    'posFetcher': 'pos_fetcher',
    'onStart': 'on_start',
    'onMove': 'on_move',
    'onEnd': 'on_end',
    'appendTo': 'append_to',
}


@dataclass(frozen=True)
class ResizerOptions:
    """Immutable resizer configuration.

    Attributes:
        mouse_pos_fetcher: event -> Vec2, (x, y) or {'x', 'y'} mapping; overrides the event's own coordinates
        update_target: (target, rect, CommitInfo) -> None; replaces the default commit
        ratio_default: True if corner drags keep the aspect ratio unless shift is held
        pos_fetcher: target -> Rect; overrides the host's default position query
        on_start: (event, scope) hook fired when a drag starts
        on_move: (event) hook fired after every move
        on_end: (event, scope) hook fired when a drag ends or is cancelled
        prefix: Prefix for generated handle names
        append_to: Mount point for the overlay (host specific, e.g. a QWidget)
        tl..br: Enable flag per handle direction
    """
    mouse_pos_fetcher: Optional[Callable] = None
    update_target: Optional[Callable] = None
    ratio_default: bool = False
    pos_fetcher: Optional[Callable] = None
    on_start: Optional[Callable] = None
    on_move: Optional[Callable] = None
    on_end: Optional[Callable] = None
    prefix: str = ''
    append_to: Any = None
    tl: bool = True
    tc: bool = True
    tr: bool = True
    cl: bool = True
    cr: bool = True
    bl: bool = True
    bc: bool = True
    br: bool = True

    def __post_init__(self):
        for key in CALLBACK_KEYS:
            value = getattr(self, key)
            if value is not None and not callable(value):
                loggerRaise(ValueError(f"Option '{key}' must be callable, got {type(value).__name__}"),
                            f"Invalid resizer option: {key}")
        # Accept the 0/1 flags older configurations use
        object.__setattr__(self, 'ratio_default', bool(self.ratio_default))
        for direction in HandleDirection:
            object.__setattr__(self, direction.tag, bool(getattr(self, direction.tag)))
        object.__setattr__(self, 'prefix', self.prefix or '')

    @classmethod
    def from_mapping(cls, mapping=None, **overrides):
        """Build options from a dict, accepting snake_case or camelCase keys."""
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in dict(mapping or {}, **overrides).items():
            name = CAMEL_CASE_KEYS.get(key, key)
            if name not in known:
                loggerRaise(ValueError(f"Unknown resizer option: {key}"),
                            f"Unknown resizer option: {key}")
            values[name] = value
        return cls(**values)

    def replace(self, **changes):
        return dc_replace(self, **changes)

    def is_enabled(self, direction):
        return getattr(self, direction.tag)

    def enabled_directions(self):
        """Enabled directions in catalogue order."""
        return [d for d in HandleDirection if self.is_enabled(d)]
