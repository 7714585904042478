"""Self-rescheduling frame loop bound to one drawing surface."""

from __future__ import annotations

import logging
import random
from typing import Callable, Mapping, Optional, Protocol

from PyQt5 import QtCore

from circlechords.control.config import DEFAULTS
from circlechords.control.state import ViewState
from circlechords.geometry import generate_points
from circlechords.view.renderer import render_paused, render_scene
from circlechords.view.surface import DrawingSurface

logger = logging.getLogger(__name__)

__all__ = ["FrameScheduler", "QtFrameScheduler", "AnimationLoop"]


class FrameScheduler(Protocol):
    def request_frame(self, callback: Callable[[], None]) -> None: ...


class QtFrameScheduler:
    """Run the callback on the Qt event loop after ``interval_ms``."""

    def __init__(self, interval_ms: int = 16) -> None:
        self.interval_ms = max(0, int(interval_ms))

    def request_frame(self, callback: Callable[[], None]) -> None:
        QtCore.QTimer.singleShot(self.interval_ms, callback)


class AnimationLoop:
    """Draw one frame per tick until the surface is destroyed.

    The state is fetched through ``state_provider`` at the top of every tick so
    key presses handled between two ticks show up on the next frame.
    """

    def __init__(
        self,
        surface: DrawingSurface,
        state_provider: Callable[[], ViewState],
        scheduler: FrameScheduler,
        settings: Optional[Mapping[str, object]] = None,
        *,
        on_frame: Optional[Callable[[], None]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.surface = surface
        self.state_provider = state_provider
        self.scheduler = scheduler
        self.settings = settings if settings is not None else DEFAULTS
        self.on_frame = on_frame
        self.rng = rng
        self.radius = surface.width / 2
        self.frames = 0
        self.running = False
        self._started = False

    def start(self) -> None:
        if self._started:
            return
        self._started = True
        self.running = True
        logger.debug("animation loop started on a %dpx surface", self.surface.width)
        self.tick()

    def tick(self) -> None:
        if self.surface.destroyed:
            if self.running:
                logger.debug("surface destroyed after %d frames, loop stopped", self.frames)
            self.running = False
            return

        state = self.state_provider()
        with self.surface.frame():
            if state.is_paused:
                render_paused(self.surface, self.radius, self.settings)
            else:
                points = generate_points(
                    self.radius,
                    state.point_count,
                    state.random_distribution,
                    rng=self.rng,
                )
                render_scene(self.surface, self.radius, points, self.settings)
        self.frames += 1
        if self.on_frame is not None:
            self.on_frame()
        self.scheduler.request_frame(self.tick)
