# -*- coding: utf-8 -*-
import argparse
import logging
import sys
from typing import Mapping, NoReturn, Optional, Sequence


def _handle_qt_import_error(exc: ImportError) -> NoReturn:
    """Exit with a helpful message when the Qt bindings cannot be imported."""

    details = str(exc)
    message_lines = [
        "Cannot start circle-chords: importing PyQt5 failed.",
        "Check that PyQt5 is installed and that the system Qt libraries are available.",
    ]
    if "libGL.so.1" in details:
        message_lines.append(
            "Hint: the system library libGL.so.1 is missing. Install the Mesa/OpenGL packages."
        )
    message_lines.append(f"Original error: {details}")
    raise SystemExit("\n".join(message_lines)) from exc


try:
    from PyQt5 import QtCore, QtGui, QtWidgets
    from PyQt5.QtCore import Qt
except ImportError as exc:  # pragma: no cover - environment dependent
    _handle_qt_import_error(exc)

from circlechords.control.config import ConfigError, initial_state, load_settings
from circlechords.control.help_overlay import HelpOverlay
from circlechords.control.shortcuts import ShortcutController
from circlechords.control.state import ViewStateStore
from circlechords.logging_config import setup_logging
from circlechords.view.view_widget import CircleChordsViewWidget, key_identifier

logger = logging.getLogger(__name__)


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self, settings: Mapping[str, object], parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Circle chords")
        self.settings = settings
        self.store = ViewStateStore(initial_state(settings), parent=self)
        self.controller = ShortcutController(self.store, parent=self)
        self.view = CircleChordsViewWidget(self.store, settings, self)
        self.view.setFocusPolicy(Qt.NoFocus)
        self.setCentralWidget(self.view)
        self.setFocusPolicy(Qt.StrongFocus)

        self.help_overlay = HelpOverlay(self)
        self.controller.helpShown.connect(self.help_overlay.show_shortcuts)
        self.controller.helpHidden.connect(self.help_overlay.hide_shortcuts)

        QtWidgets.QShortcut(Qt.Key_Escape, self, activated=self.close)

    def keyPressEvent(self, event: QtGui.QKeyEvent) -> None:  # type: ignore[override]
        if self.controller.handle_key(key_identifier(event)):
            event.accept()
            return
        super().keyPressEvent(event)

    def resizeEvent(self, event: QtGui.QResizeEvent) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        if not self.help_overlay.isHidden():
            self.help_overlay.reposition()

    def closeEvent(self, event: QtGui.QCloseEvent) -> None:  # type: ignore[override]
        self.view.shutdown()
        super().closeEvent(event)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="circle-chords",
        description="Draw every chord between points on a circle and count the regions.",
    )
    parser.add_argument("--points", type=int, help="initial number of points (minimum 2)")
    parser.add_argument("--even", action="store_true", help="start with evenly spaced points")
    parser.add_argument("--paused", action="store_true", help="start paused")
    parser.add_argument("--no-help", action="store_true", help="do not open the shortcut overlay on start-up")
    parser.add_argument("--config", help="JSON settings file merged over the defaults")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    )
    parser.add_argument("--log-file", help="also write the log to this file")
    return parser


def settings_from_args(args: argparse.Namespace) -> dict:
    overrides: dict = {"state": {}, "view": {}}
    if args.points is not None:
        overrides["state"]["points"] = args.points
    if args.even:
        overrides["state"]["randomDistribution"] = False
    if args.paused:
        overrides["state"]["paused"] = True
    if args.no_help:
        overrides["view"]["showHelpOnStartup"] = False
    return load_settings(args.config, overrides)


def _install_excepthook() -> None:
    def _log_unhandled(exc_type, exc_value, exc_tb):
        logger.critical("Unhandled exception", exc_info=(exc_type, exc_value, exc_tb))
        sys.__excepthook__(exc_type, exc_value, exc_tb)

    sys.excepthook = _log_unhandled


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the application and return the exit code."""

    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)
    try:
        settings = settings_from_args(args)
    except ConfigError as exc:
        logger.error("%s", exc)
        return 2

    _install_excepthook()
    QtWidgets.QApplication.setAttribute(QtCore.Qt.AA_EnableHighDpiScaling, True)
    QtWidgets.QApplication.setAttribute(QtCore.Qt.AA_UseHighDpiPixmaps, True)
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv[:1])

    window = MainWindow(settings)
    screen = QtGui.QGuiApplication.primaryScreen()
    if screen is not None:
        geometry = screen.availableGeometry()
        window.resize(int(geometry.width() * 0.8), int(geometry.height() * 0.8))
    window.show()

    view_cfg = settings.get("view", {})
    if isinstance(view_cfg, Mapping) and view_cfg.get("showHelpOnStartup", True):
        QtCore.QTimer.singleShot(0, lambda: window.controller.handle_key("h"))

    logger.info("Window opened with %d points", window.store.state.point_count)
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
