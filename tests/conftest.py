"""
Shared fixtures for Rect Resizer tests.

Provides plain-Python collaborators (target, commit sink, overlay) so the
state machine can be driven without a GUI, plus event builders.
"""
import sys
import os
import pytest

# Run Qt headless unless the environment says otherwise
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Ensure src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from rect_resizer.components.event_scope import EventScope
from rect_resizer.components.resizer import Resizer
from rect_resizer.constants import EVENT_KEYDOWN, EVENT_MOVE, EVENT_PRESS, EVENT_RELEASE
from rect_resizer.models.events import KeyEvent, PointerEvent
from rect_resizer.models.options import ResizerOptions
from rect_resizer.models.rect import ModifierKeys, Rect


# ── Plain collaborators ─────────────────────────────────────────────────

class FakeTarget:
    """Stands in for a widget: an absolute rect that the sink rewrites."""

    def __init__(self, rect, name="target"):
        self.rect = rect
        self.name = name

    def resize(self, width, height):
        self.rect = Rect(self.rect.top, self.rect.left, width, height)

    def __repr__(self):
        return f"FakeTarget({self.name})"


class RecordingSink:
    """Commit sink that records every call and applies the rect to the target."""

    def __init__(self):
        self.calls = []

    def __call__(self, target, rect, info):
        self.calls.append((target, rect, info))
        target.rect = rect

    @property
    def stored(self):
        return [call for call in self.calls if call[2].store]

    @property
    def previews(self):
        return [call for call in self.calls if not call[2].store]

    @property
    def last_rect(self):
        return self.calls[-1][1]


class FakeOverlay:
    """Overlay that remembers what it was asked to do."""

    def __init__(self):
        self.visible = False
        self.shown = []
        self.rebuilds = 0
        self.directory = None

    def show_rect(self, rect):
        self.visible = True
        self.shown.append(rect)

    def hide_overlay(self):
        self.visible = False

    def rebuild(self, directory):
        self.rebuilds += 1
        self.directory = directory


def pos_of(target):
    return target.rect.copy()


# ── Event builders ──────────────────────────────────────────────────────

def pointer(x, y, target=None, button=0, held=True, shift=False, ctrl=False, alt=False):
    return PointerEvent(x=x, y=y, target=target, button=button, buttons_held=held,
                        keys=ModifierKeys(shift=shift, ctrl=ctrl, alt=alt))


@pytest.fixture
def start_rect():
    """The 100x50 box used by the end-to-end scenarios"""
    return Rect(top=0, left=0, width=100, height=50)


@pytest.fixture
def target(start_rect):
    return FakeTarget(start_rect.copy())


@pytest.fixture
def other_target():
    return FakeTarget(Rect(top=200, left=200, width=60, height=40), name="other")


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def overlay():
    return FakeOverlay()


@pytest.fixture
def scope():
    return EventScope()


@pytest.fixture
def make_resizer(scope, overlay, sink):
    """Factory: build a Resizer on the shared scope/overlay/sink with option overrides."""
    def _make(**overrides):
        values = dict(pos_fetcher=pos_of, update_target=sink)
        values.update(overrides)
        return Resizer(ResizerOptions(**values), scope=scope, overlay=overlay)
    return _make


@pytest.fixture
def resizer(make_resizer):
    return make_resizer()


@pytest.fixture
def drive(scope):
    """Helpers that emit events through the scope like a host would."""
    class Driver:
        def press(self, x, y, target=None, **kw):
            return scope.emit(EVENT_PRESS, pointer(x, y, target, **kw))

        def move(self, x, y, **kw):
            return scope.emit(EVENT_MOVE, pointer(x, y, **kw))

        def release(self, x, y, **kw):
            return scope.emit(EVENT_RELEASE, pointer(x, y, held=False, **kw))

        def key(self, key):
            return scope.emit(EVENT_KEYDOWN, KeyEvent(key=key))

    return Driver()
