"""Toolkit-neutral input events consumed by the resizer.

Host adapters translate their native events into these objects before
handing them to listeners. The native event stays reachable through
``native`` so custom pointer fetchers can read toolkit-specific data.
"""
from dataclasses import dataclass, field
from typing import Any, Optional

from rect_resizer.constants import BUTTON_PRIMARY
from rect_resizer.models.rect import ModifierKeys


@dataclass
class PointerEvent:
    """Press, move or release of the pointer."""
    x: float
    y: float
    target: Any = None
    button: int = BUTTON_PRIMARY
    buttons_held: bool = True  # False once the primary button is no longer down
    keys: ModifierKeys = field(default_factory=ModifierKeys)
    native: Any = None
    default_prevented: bool = False
    propagation_stopped: bool = False

    def prevent_default(self):
        self.default_prevented = True

    def stop_propagation(self):
        self.propagation_stopped = True


@dataclass
class KeyEvent:
    """Key press delivered while a drag is active."""
    key: str
    target: Any = None
    keys: ModifierKeys = field(default_factory=ModifierKeys)
    native: Optional[Any] = None
