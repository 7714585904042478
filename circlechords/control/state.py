from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum

from PyQt5.QtCore import QObject, pyqtSignal

logger = logging.getLogger(__name__)

MIN_POINTS = 2


class Action(Enum):
    """Every change the keyboard can make to the view."""

    INCREASE_POINTS = "increase-points"
    DECREASE_POINTS = "decrease-points"
    TOGGLE_RANDOM = "toggle-random"
    TOGGLE_PAUSE = "toggle-pause"
    TOGGLE_HELP = "toggle-help"


@dataclass(frozen=True)
class ViewState:
    """What the animation loop reads at the start of every tick."""

    point_count: int = MIN_POINTS
    random_distribution: bool = True
    is_paused: bool = False
    help_visible: bool = False


def apply_action(state: ViewState, action: Action) -> ViewState:
    """Return the state that follows ``state`` once ``action`` fires.

    Changing the point count or the distribution resumes a paused animation.
    Decreasing at the floor of two points leaves the state untouched.
    """

    if action is Action.INCREASE_POINTS:
        return replace(state, point_count=state.point_count + 1, is_paused=False)
    if action is Action.DECREASE_POINTS:
        if state.point_count <= MIN_POINTS:
            return state
        return replace(state, point_count=state.point_count - 1, is_paused=False)
    if action is Action.TOGGLE_RANDOM:
        return replace(state, random_distribution=not state.random_distribution, is_paused=False)
    if action is Action.TOGGLE_PAUSE:
        return replace(state, is_paused=not state.is_paused)
    if action is Action.TOGGLE_HELP:
        return replace(state, help_visible=not state.help_visible)
    raise ValueError(f"unknown action: {action!r}")


class ViewStateStore(QObject):
    """Holds the latest :class:`ViewState` and notifies listeners on change."""

    stateChanged = pyqtSignal(object)

    def __init__(self, initial: ViewState | None = None, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._state = initial if initial is not None else ViewState()

    @property
    def state(self) -> ViewState:
        return self._state

    def dispatch(self, action: Action) -> ViewState:
        previous = self._state
        current = apply_action(previous, action)
        if current != previous:
            self._state = current
            logger.debug("%s: %s -> %s", action.value, previous, current)
            self.stateChanged.emit(current)
        return current
