"""Qt widget hosting the chord animation.

The widget owns at most one live :class:`QImageSurface`. Every resize marks the
current surface destroyed, which stops its loop at the next tick, and starts a
fresh loop on a new surface sized to the window.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from PyQt5 import QtCore, QtGui, QtWidgets

from circlechords.control.config import DEFAULTS
from circlechords.control.state import ViewState, ViewStateStore
from circlechords.view.animation import AnimationLoop, FrameScheduler, QtFrameScheduler
from circlechords.view.surface import QImageSurface

logger = logging.getLogger(__name__)

__all__ = ["CircleChordsViewWidget", "key_identifier"]

_NAMED_KEYS = {
    QtCore.Qt.Key_Up: "ArrowUp",
    QtCore.Qt.Key_Down: "ArrowDown",
}


def key_identifier(event: QtGui.QKeyEvent) -> str:
    """Return a browser-style key name for ``event``."""

    named = _NAMED_KEYS.get(event.key())
    if named is not None:
        return named
    return event.text()


def _coerce_float(value: object, default: float) -> float:
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return default


class CircleChordsViewWidget(QtWidgets.QWidget):
    def __init__(
        self,
        store: ViewStateStore,
        settings: Optional[Mapping[str, object]] = None,
        parent: Optional[QtWidgets.QWidget] = None,
        *,
        scheduler: Optional[FrameScheduler] = None,
    ) -> None:
        super().__init__(parent)
        self.store = store
        self.settings = settings if settings is not None else DEFAULTS
        view_cfg = self.settings.get("view", {})
        if not isinstance(view_cfg, Mapping):
            view_cfg = {}
        self._canvas_ratio = _coerce_float(view_cfg.get("canvasRatio"), 0.9)
        interval = int(_coerce_float(view_cfg.get("frameIntervalMs"), 16))
        self.scheduler = scheduler if scheduler is not None else QtFrameScheduler(interval)
        appearance = self.settings.get("appearance", {})
        background = appearance.get("background", "#000000") if isinstance(appearance, Mapping) else "#000000"
        self._background = QtGui.QColor(str(background))
        self.surface: Optional[QImageSurface] = None
        self.loop: Optional[AnimationLoop] = None
        self.setAttribute(QtCore.Qt.WA_OpaquePaintEvent, True)
        self.setMinimumSize(64, 64)
        self.store.stateChanged.connect(self._on_state_changed)

    def surface_side(self) -> int:
        return int(min(self.width(), self.height()) * self._canvas_ratio)

    def rebuild_surface(self) -> Optional[QImageSurface]:
        """Retire the current surface and start a loop on a new one."""

        if self.surface is not None:
            self.surface.destroy()
        side = self.surface_side()
        if side <= 0:
            self.surface = None
            self.loop = None
            return None
        surface = QImageSurface(side)
        loop = AnimationLoop(
            surface,
            lambda: self.store.state,
            self.scheduler,
            self.settings,
            on_frame=self.update,
        )
        self.surface = surface
        self.loop = loop
        logger.debug("surface rebuilt at %dpx for a %dx%d widget", side, self.width(), self.height())
        loop.start()
        return surface

    def _on_state_changed(self, state: ViewState) -> None:
        del state
        self.update()

    def shutdown(self) -> None:
        if self.surface is not None:
            self.surface.destroy()

    # ------------------------------------------------------------------ Qt events
    def resizeEvent(self, event: QtGui.QResizeEvent) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        self.rebuild_surface()

    def paintEvent(self, event: QtGui.QPaintEvent) -> None:  # type: ignore[override]
        del event
        painter = QtGui.QPainter(self)
        try:
            painter.fillRect(self.rect(), self._background)
            surface = self.surface
            if surface is not None:
                left = (self.width() - surface.width) // 2
                top = (self.height() - surface.height) // 2
                painter.drawImage(QtCore.QPoint(left, top), surface.image)
        finally:
            painter.end()

    def closeEvent(self, event: QtGui.QCloseEvent) -> None:  # type: ignore[override]
        self.shutdown()
        super().closeEvent(event)
