"""Interaction components for Rect Resizer

- resize_handles: handle catalogue, handle directory and drag session
- resizer: the toolkit-independent resize state machine
- event_scope: plain listener registry the resizer attaches to

Qt host adapter (imports PyQt5):
- qt_event_scope: event filter feeding an EventScope
- resize_overlay: overlay widget drawing the box and handles
- qt_resizer: default Qt collaborators and create_qt_resizer()
"""
