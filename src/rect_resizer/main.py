"""Demo window for the resizer.

Click a box to focus it, drag a handle to resize it, hold shift on a
corner to toggle the aspect lock and press Escape mid-drag to cancel.
"""
import argparse
import logging
import sys

from PyQt5.QtWidgets import QApplication, QLabel, QMainWindow, QStatusBar, QWidget
from PyQt5.QtCore import Qt, QPoint

from rect_resizer.components.qt_resizer import create_qt_resizer
from rect_resizer.constants import HANDLE_TAGS
from rect_resizer.utils.logger import set_main_window

logger = logging.getLogger(__name__)

DEMO_BOXES = [
    ("Box A", 40, 40, 160, 80, "#5a8dbf"),
    ("Box B", 260, 60, 120, 120, "#bf8630"),
    ("Box C", 120, 220, 200, 100, "#336638"),
]


class DemoWindow(QMainWindow):
    """Canvas with a few boxes that can be focused and resized."""

    def __init__(self, ratio_default=False, disabled=()):
        super().__init__()
        self.setWindowTitle("Rect Resizer Demo")
        self.resize(640, 480)

        self.canvas = QWidget(self)
        self.setCentralWidget(self.canvas)
        self.setStatusBar(QStatusBar(self))

        self.boxes = []
        for text, x, y, w, h, color in DEMO_BOXES:
            box = QLabel(text, self.canvas)
            box.setAlignment(Qt.AlignCenter)
            box.setStyleSheet(f"background-color: {color}; color: white;")
            box.setGeometry(x, y, w, h)
            box.mousePressEvent = lambda event, b=box: self.resizer.focus(b)
            self.boxes.append(box)

        options = {tag: tag not in disabled for tag in HANDLE_TAGS}
        options.update(
            ratio_default=ratio_default,
            update_target=self._update_target,
            on_end=self._on_end,
        )
        self.resizer = create_qt_resizer(self.canvas, options)

    def _update_target(self, target, rect, info):
        # Move as well as resize so the anchored edge stays in place
        start = self.resizer.session.start_rect if self.resizer.session else rect
        parent_origin = target.parentWidget().mapToGlobal(QPoint(0, 0))
        target.setGeometry(
            int(round(rect.left - parent_origin.x())),
            int(round(rect.top - parent_origin.y())),
            int(round(rect.width)),
            int(round(rect.height)),
        )
        if info.store:
            handler = info.selected_handler.tag if info.selected_handler else '-'
            self.statusBar().showMessage(
                f"{target.text()}: {int(rect.width)} x {int(rect.height)} "
                f"(handle {handler}, started at {int(start.width)} x {int(start.height)})")

    def _on_end(self, event, scope):
        logger.info("Resize finished on %s", self.resizer.get_focused_target().text())


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Interactive demo of the eight-handle resizer.")
    parser.add_argument(
        '--ratio-default', action='store_true',
        help='Keep the aspect ratio on corner drags unless shift is held.',
    )
    parser.add_argument(
        '--disable', action='append', default=[], choices=HANDLE_TAGS, metavar='TAG',
        help='Disable a handle (tl, tc, tr, cl, cr, bl, bc, br). Repeatable.',
    )
    parser.add_argument(
        '-v', '--verbose', action='store_true',
        help='Enable verbose logging.',
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    app = QApplication(sys.argv[:1])
    window = DemoWindow(ratio_default=args.ratio_default, disabled=set(args.disable))
    set_main_window(window)
    window.show()
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
