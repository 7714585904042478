"""Drawing surface used by the renderer.

The renderer only talks to :class:`DrawingSurface`; the Qt implementation keeps
the pixels in a transparent ``QImage`` so a paused frame can draw its indicator
on top of the last full frame, the same way an HTML canvas keeps its content
between animation callbacks.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional, Protocol, Sequence, Tuple, Union

from PyQt5 import QtCore, QtGui

Color = Union[Tuple[int, int, int, float], Sequence[float], str]

__all__ = ["Color", "DrawingSurface", "QImageSurface", "to_qcolor"]


class DrawingSurface(Protocol):
    width: int
    height: int

    @property
    def destroyed(self) -> bool: ...

    def destroy(self) -> None: ...

    def frame(self): ...

    def set_stroke_color(self, color: Color) -> None: ...

    def set_fill_color(self, color: Color) -> None: ...

    def set_font(self, pixel_size: float, family: str = "monospace") -> None: ...

    def clear_area(self, x: float, y: float, width: float, height: float) -> None: ...

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None: ...

    def circle(self, cx: float, cy: float, radius: float, stroke: bool = True, fill: bool = False) -> None: ...

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None: ...

    def text(self, value: str, x: float, y: float) -> None: ...


def to_qcolor(color: Color) -> QtGui.QColor:
    """Convert an ``(r, g, b, alpha)`` tuple or a Qt colour name to ``QColor``."""

    if isinstance(color, str):
        return QtGui.QColor(color)
    channels = list(color)
    if len(channels) not in (3, 4):
        raise ValueError(f"expected 3 or 4 colour channels, got {len(channels)}")
    qcolor = QtGui.QColor(int(channels[0]), int(channels[1]), int(channels[2]))
    alpha = float(channels[3]) if len(channels) == 4 else 1.0
    qcolor.setAlphaF(max(0.0, min(1.0, alpha)))
    return qcolor


class QImageSurface:
    """Square raster surface backed by a premultiplied ARGB ``QImage``."""

    def __init__(self, side: int) -> None:
        side = max(1, int(side))
        self.width = side
        self.height = side
        self.image = QtGui.QImage(side, side, QtGui.QImage.Format_ARGB32_Premultiplied)
        self.image.fill(QtCore.Qt.transparent)
        self._destroyed = False
        self._painter: Optional[QtGui.QPainter] = None
        self._pen = QtGui.QPen(QtGui.QColor(0, 0, 0), 1.0)
        self._pen.setCapStyle(QtCore.Qt.FlatCap)
        self._fill = QtGui.QColor(0, 0, 0)
        self._font = QtGui.QFont("monospace")
        self._font.setStyleHint(QtGui.QFont.Monospace)

    # ------------------------------------------------------------------ lifecycle
    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def destroy(self) -> None:
        self._destroyed = True

    @contextmanager
    def frame(self) -> Iterator[QtGui.QPainter]:
        """Keep one painter open on the image for a batch of draw calls."""

        if self._painter is not None:
            yield self._painter
            return
        painter = QtGui.QPainter(self.image)
        painter.setRenderHint(QtGui.QPainter.Antialiasing, True)
        painter.setRenderHint(QtGui.QPainter.TextAntialiasing, True)
        self._painter = painter
        try:
            yield painter
        finally:
            self._painter = None
            painter.end()

    # ------------------------------------------------------------------ properties
    def set_stroke_color(self, color: Color) -> None:
        self._pen.setColor(to_qcolor(color))

    def set_fill_color(self, color: Color) -> None:
        self._fill = to_qcolor(color)

    def set_font(self, pixel_size: float, family: str = "monospace") -> None:
        font = QtGui.QFont(family)
        font.setStyleHint(QtGui.QFont.Monospace)
        font.setPixelSize(max(1, int(round(pixel_size))))
        self._font = font

    # ------------------------------------------------------------------ primitives
    def clear_area(self, x: float, y: float, width: float, height: float) -> None:
        with self.frame() as painter:
            painter.setCompositionMode(QtGui.QPainter.CompositionMode_Source)
            painter.fillRect(QtCore.QRectF(x, y, width, height), QtCore.Qt.transparent)
            painter.setCompositionMode(QtGui.QPainter.CompositionMode_SourceOver)

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        with self.frame() as painter:
            painter.fillRect(QtCore.QRectF(x, y, width, height), self._fill)

    def circle(self, cx: float, cy: float, radius: float, stroke: bool = True, fill: bool = False) -> None:
        center = QtCore.QPointF(cx, cy)
        with self.frame() as painter:
            if stroke:
                painter.setPen(self._pen)
                painter.setBrush(QtCore.Qt.NoBrush)
                painter.drawEllipse(center, radius, radius)
            if fill:
                painter.setPen(QtCore.Qt.NoPen)
                painter.setBrush(self._fill)
                painter.drawEllipse(center, radius, radius)

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        with self.frame() as painter:
            painter.setPen(self._pen)
            painter.drawLine(QtCore.QLineF(x1, y1, x2, y2))

    def text(self, value: str, x: float, y: float) -> None:
        with self.frame() as painter:
            painter.setPen(self._fill)
            painter.setFont(self._font)
            rect = QtCore.QRectF(x, y, max(1.0, self.width - x), max(1.0, self.height - y))
            painter.drawText(rect, int(QtCore.Qt.AlignLeft | QtCore.Qt.AlignTop), value)
