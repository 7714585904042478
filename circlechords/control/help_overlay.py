from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from PyQt5 import QtCore, QtWidgets


class HelpOverlay(QtWidgets.QFrame):
    """Translucent panel listing the keyboard shortcuts."""

    TITLE = "Keyboard shortcuts"

    def __init__(self, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("helpOverlay")
        self.setAttribute(QtCore.Qt.WA_TransparentForMouseEvents, True)
        self.setFocusPolicy(QtCore.Qt.NoFocus)
        self.setStyleSheet(
            "#helpOverlay { background: rgba(0, 0, 0, 180); border: 1px solid rgba(255, 255, 255, 60);"
            " border-radius: 6px; }"
            "QLabel { color: rgba(255, 255, 255, 220); font-family: monospace; }"
        )
        self._layout = QtWidgets.QVBoxLayout(self)
        self._layout.setContentsMargins(16, 12, 16, 12)
        self._title = QtWidgets.QLabel(self.TITLE, self)
        font = self._title.font()
        font.setBold(True)
        font.setPointSizeF(font.pointSizeF() * 1.3)
        self._title.setFont(font)
        self._layout.addWidget(self._title)
        self._lines: List[QtWidgets.QLabel] = []
        self.hide()

    def lines(self) -> List[str]:
        return [label.text() for label in self._lines]

    def show_shortcuts(self, pairs: Sequence[Tuple[str, str]]) -> None:
        for label in self._lines:
            self._layout.removeWidget(label)
            label.deleteLater()
        self._lines = []
        for key, description in pairs:
            label = QtWidgets.QLabel(f"{key}: {description}", self)
            self._layout.addWidget(label)
            self._lines.append(label)
        self.adjustSize()
        self.reposition()
        self.show()
        self.raise_()

    def hide_shortcuts(self) -> None:
        self.hide()

    def reposition(self) -> None:
        parent = self.parentWidget()
        if parent is None:
            return
        x = max(0, parent.width() - self.width() - 16)
        self.move(x, 16)
