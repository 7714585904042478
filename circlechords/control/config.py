import copy
import json
import logging
from pathlib import Path
from typing import Mapping, Optional, Union

from circlechords.control.state import MIN_POINTS, ViewState

logger = logging.getLogger(__name__)

DEFAULTS = dict(
    state=dict(points=2, randomDistribution=True, paused=False),
    view=dict(canvasRatio=0.9, frameIntervalMs=16, showHelpOnStartup=True),
    appearance=dict(
        chordColor=[255, 255, 255, 0.2],
        labelColor=[255, 255, 255, 0.7],
        pointColor=[255, 255, 255, 1.0],
        pauseColor=[255, 255, 255, 0.1],
        pointRadius=5.0,
        fontDivisor=40.0,
        labelLineDivisor=29.0,
        fontFamily="monospace",
        background="#000000",
    ),
)


class ConfigError(ValueError):
    """Raised when a settings file cannot be read or parsed."""


def _merge(target: dict, payload: Mapping[str, object]) -> None:
    for key, value in payload.items():
        if isinstance(target.get(key), dict) and isinstance(value, Mapping):
            _merge(target[key], value)
        else:
            target[key] = copy.deepcopy(value)


def load_settings(
    path: Optional[Union[str, Path]] = None,
    overrides: Optional[Mapping[str, object]] = None,
) -> dict:
    """Return a copy of :data:`DEFAULTS` with a JSON file and ``overrides`` merged in."""

    settings = copy.deepcopy(DEFAULTS)
    if path is not None:
        source = Path(path)
        try:
            payload = json.loads(source.read_text(encoding="utf-8"))
        except OSError as exc:
            raise ConfigError(f"cannot read settings file {source}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise ConfigError(f"invalid JSON in {source}: {exc}") from exc
        if not isinstance(payload, dict):
            raise ConfigError(f"settings file {source} must contain a JSON object")
        _merge(settings, payload)
    if overrides:
        _merge(settings, overrides)
    return settings


def _flag(section: Mapping[str, object], key: str, default: bool) -> bool:
    value = section.get(key, default)
    if isinstance(value, bool):
        return value
    logger.warning("state.%s must be true or false, got %r; using %s", key, value, default)
    return default


def initial_state(settings: Mapping[str, object]) -> ViewState:
    """Build the starting view state from the ``state`` section."""

    section = settings.get("state", {})
    if not isinstance(section, Mapping):
        section = {}
    try:
        points = int(section.get("points", MIN_POINTS))
    except (TypeError, ValueError):
        points = MIN_POINTS
    return ViewState(
        point_count=max(MIN_POINTS, points),
        random_distribution=_flag(section, "randomDistribution", True),
        is_paused=_flag(section, "paused", False),
        help_visible=False,
    )
