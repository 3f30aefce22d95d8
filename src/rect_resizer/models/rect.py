"""Rectangle and pointer data structures shared by the resizer."""
from collections.abc import Mapping
from dataclasses import dataclass


@dataclass
class Vec2:
    """2D vector for coordinate pairs.

    Used for pointer positions and pointer deltas, always in the same
    coordinate space as the rectangles returned by the position source.
    """
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking: x, y = vec2"""
        return iter((self.x, self.y))

    def __sub__(self, other):
        return Vec2(self.x - other.x, self.y - other.y)

    @classmethod
    def coerce(cls, value):
        """Accept a Vec2, a mapping with x/y keys or any (x, y) pair."""
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls(value['x'], value['y'])
        x, y = value
        return cls(x, y)


@dataclass
class Rect:
    """Absolute position and size of a target.

    While a drag is active the geometry calculator also uses Rect for its
    relative result, where top/left are offsets from the start corner.
    """
    top: float
    left: float
    width: float
    height: float

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Rect size must be non-negative, got {self.width}x{self.height}")

    @property
    def right(self):
        return self.left + self.width

    @property
    def bottom(self):
        return self.top + self.height

    def is_empty(self):
        """True when the rectangle has no area."""
        return self.width <= 0 or self.height <= 0

    def translated(self, dx, dy):
        return Rect(self.top + dy, self.left + dx, self.width, self.height)

    def copy(self):
        return Rect(self.top, self.left, self.width, self.height)

    def __iter__(self):
        """Allow tuple unpacking: top, left, width, height = rect"""
        return iter((self.top, self.left, self.width, self.height))

    @classmethod
    def coerce(cls, value):
        """Accept a Rect or a mapping with top/left/width/height (or t/l/w/h) keys."""
        if value is None or isinstance(value, cls):
            return value
        if 'width' in value:
            return cls(value['top'], value['left'], value['width'], value['height'])
        return cls(value['t'], value['l'], value['w'], value['h'])


@dataclass(frozen=True)
class ModifierKeys:
    """Keyboard modifiers held during a pointer event."""
    shift: bool = False
    ctrl: bool = False
    alt: bool = False
