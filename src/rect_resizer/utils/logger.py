"""Global logging and error handling utilities"""
import logging
import sys

# Detect debug mode - True if running from source, False if packaged
DEBUG_MODE = not getattr(sys, 'frozen', False)

_logger = logging.getLogger('rect_resizer')
_main_window = None


def set_main_window(window):
    """Set the main window reference for showing popups"""
    global _main_window
    _main_window = window


def _show_popup(title, message):
    if _main_window is None:
        _logger.error("ERROR POPUP (no window): %s - %s", title, message)
        return
    from PyQt5.QtWidgets import QMessageBox
    QMessageBox.critical(_main_window, title, message)


def loggerRaise(e: Exception, user_message: str = None, title: str = "Error"):
    """Handle exceptions with optional popup in release mode

    Args:
        e: The exception to handle
        user_message: User-friendly message to show in popup (optional)
        title: Title for the popup dialog

    In DEBUG_MODE:
        - Just raises the exception (shows full traceback)

    In RELEASE_MODE:
        - Logs the full traceback
        - Shows popup with user message or exception string
        - Then raises the exception
    """
    if DEBUG_MODE:
        raise e

    _logger.error(user_message or str(e), exc_info=e)
    _show_popup(title, user_message if user_message else str(e))
    raise e


def log_contained(e: Exception, user_message: str, logger: logging.Logger = None):
    """Log an exception raised by a host callback without propagating it.

    Used on input-event paths: the event loop must keep running and the
    resizer must be left without dangling listeners, so the failure is
    recorded and the caller carries on with its teardown.
    """
    (logger or _logger).error("%s: %s", user_message, e, exc_info=e)
