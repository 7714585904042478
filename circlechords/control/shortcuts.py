"""Keyboard shortcut table and the controller that interprets key presses."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Tuple

from PyQt5.QtCore import QObject, pyqtSignal

from circlechords.control.state import Action, ViewStateStore

logger = logging.getLogger(__name__)

__all__ = ["ShortcutBinding", "SHORTCUTS", "ShortcutController"]


@dataclass(frozen=True)
class ShortcutBinding:
    key: str
    description: str
    action: Action


def _build_keymap(*bindings: ShortcutBinding) -> Dict[str, ShortcutBinding]:
    return {binding.key: binding for binding in bindings}


SHORTCUTS: Mapping[str, ShortcutBinding] = _build_keymap(
    ShortcutBinding("h", "Show/hide help (keyboard shortcuts)", Action.TOGGLE_HELP),
    ShortcutBinding("ArrowUp", "Increase number of points", Action.INCREASE_POINTS),
    ShortcutBinding("ArrowDown", "Decrease number of points", Action.DECREASE_POINTS),
    ShortcutBinding("r", "Toggle random distribution", Action.TOGGLE_RANDOM),
    ShortcutBinding("p", "Pause/unpause", Action.TOGGLE_PAUSE),
)


class ShortcutController(QObject):
    """Route key identifiers to store actions and drive the help overlay."""

    helpShown = pyqtSignal(object)
    helpHidden = pyqtSignal()

    def __init__(
        self,
        store: ViewStateStore,
        keymap: Optional[Mapping[str, ShortcutBinding]] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self.store = store
        self.keymap = dict(keymap if keymap is not None else SHORTCUTS)

    def shortcut_listing(self) -> List[Tuple[str, str]]:
        return [(binding.key, binding.description) for binding in self.keymap.values()]

    def handle_key(self, identifier: str) -> bool:
        """Fire the binding for ``identifier``; return False when none matches."""

        binding = self.keymap.get(identifier)
        if binding is None:
            return False
        logger.debug("key %r -> %s", identifier, binding.action.value)
        state = self.store.dispatch(binding.action)
        if binding.action is Action.TOGGLE_HELP:
            if state.help_visible:
                self.helpShown.emit(self.shortcut_listing())
            else:
                self.helpHidden.emit()
        return True
