"""
Rect Resizer - Constants and Configuration

This module contains all constant values used throughout the resizer:
- Size constraints applied while a drag is active
- Handle catalogue order and naming templates
- Overlay rendering constants
- Event type names shared by the event scopes
"""

# ======================================================================
# SIZE CONSTRAINTS
# ======================================================================
# Width/height never drop below this while resizing
MIN_RESIZE_SIZE = 32

# ======================================================================
# HANDLE CATALOGUE
# ======================================================================
# Direction tags in catalogue order (also the handle creation order)
HANDLE_TAGS = ('tl', 'tc', 'tr', 'cl', 'cr', 'bl', 'bc', 'br')

# Object name given to each handle widget: "<prefix>resizer-h-<tag>"
HANDLE_NAME_TEMPLATE = '{prefix}resizer-h-{tag}'
# Shared class-like name for every handle: "<prefix>resizer-h"
HANDLE_BASE_NAME_TEMPLATE = '{prefix}resizer-h'
# Property carrying the direction tag: "<prefix>handler"
HANDLE_ATTR_TEMPLATE = '{prefix}handler'
# Object name of the overlay container: "<prefix>resizer-c"
CONTAINER_NAME_TEMPLATE = '{prefix}resizer-c'

# ======================================================================
# OVERLAY RENDERING
# ======================================================================
RESIZER_HANDLE_SIZE = 8            # Visual size of a handle in pixels
RESIZER_BORDER_WIDTH = 1           # Bounding box outline width
RESIZER_BOX_COLOR = (90, 141, 191, 200)
RESIZER_HANDLE_FILL = (90, 141, 191, 255)
RESIZER_HANDLE_OUTLINE = (255, 255, 255, 255)

# ======================================================================
# INPUT EVENTS
# ======================================================================
EVENT_PRESS = 'press'
EVENT_MOVE = 'move'
EVENT_RELEASE = 'release'
EVENT_KEYDOWN = 'keydown'

EVENT_TYPES = (EVENT_PRESS, EVENT_MOVE, EVENT_RELEASE, EVENT_KEYDOWN)

BUTTON_PRIMARY = 0
BUTTON_MIDDLE = 1
BUTTON_SECONDARY = 2

KEY_ESCAPE = 'Escape'
