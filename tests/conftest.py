from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Callable, List, Tuple

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt5 import QtWidgets


class RecordingSurface:
    """Drawing surface that records every call instead of drawing."""

    def __init__(self, side: int = 200) -> None:
        self.width = side
        self.height = side
        self.calls: List[Tuple] = []
        self._destroyed = False
        self.frames_opened = 0

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def destroy(self) -> None:
        self._destroyed = True

    @contextmanager
    def frame(self):
        self.frames_opened += 1
        yield self

    def set_stroke_color(self, color) -> None:
        self.calls.append(("stroke_color", tuple(color)))

    def set_fill_color(self, color) -> None:
        self.calls.append(("fill_color", tuple(color)))

    def set_font(self, pixel_size, family="monospace") -> None:
        self.calls.append(("font", pixel_size, family))

    def clear_area(self, x, y, width, height) -> None:
        self.calls.append(("clear", x, y, width, height))

    def fill_rect(self, x, y, width, height) -> None:
        self.calls.append(("fill_rect", x, y, width, height))

    def circle(self, cx, cy, radius, stroke=True, fill=False) -> None:
        self.calls.append(("circle", cx, cy, radius, stroke, fill))

    def line(self, x1, y1, x2, y2) -> None:
        self.calls.append(("line", x1, y1, x2, y2))

    def text(self, value, x, y) -> None:
        self.calls.append(("text", value, x, y))

    def named(self, name: str) -> List[Tuple]:
        return [call for call in self.calls if call[0] == name]


class ManualScheduler:
    """Frame scheduler that queues callbacks until the test runs them."""

    def __init__(self) -> None:
        self.pending: List[Callable[[], None]] = []
        self.requests = 0

    def request_frame(self, callback: Callable[[], None]) -> None:
        self.requests += 1
        self.pending.append(callback)

    def run_next(self) -> None:
        callback = self.pending.pop(0)
        callback()


@pytest.fixture(scope="session")
def qapp():
    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication([])
    yield app


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def make_surface() -> Callable[..., RecordingSurface]:
    return RecordingSurface
