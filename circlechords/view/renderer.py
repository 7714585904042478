from __future__ import annotations

import math
from typing import Mapping, Sequence

from circlechords.control.config import DEFAULTS
from circlechords.geometry import Point, rounded_regions
from circlechords.view.surface import DrawingSurface

__all__ = ["render_scene", "render_paused"]


def _appearance(settings: Mapping[str, object] | None) -> Mapping[str, object]:
    section = (settings or DEFAULTS).get("appearance")
    if not isinstance(section, Mapping):
        return DEFAULTS["appearance"]
    return section


def _value(section: Mapping[str, object], key: str):
    return section.get(key, DEFAULTS["appearance"][key])


def render_scene(
    surface: DrawingSurface,
    radius: float,
    points: Sequence[Point],
    settings: Mapping[str, object] | None = None,
) -> None:
    """Draw the counters, the bounding circle, the points and every chord."""

    appearance = _appearance(settings)
    side = surface.width
    n = len(points)

    surface.clear_area(0, 0, side, side)

    surface.set_font(side / float(_value(appearance, "fontDivisor")), str(_value(appearance, "fontFamily")))
    surface.set_fill_color(_value(appearance, "labelColor"))
    surface.text(f"Points: {n}", 0, 0)
    surface.text(f"Regions: {rounded_regions(n)}", 0, side / float(_value(appearance, "labelLineDivisor")))

    surface.set_stroke_color(_value(appearance, "chordColor"))
    surface.circle(radius, radius, math.floor(side / 2), stroke=True, fill=False)

    point_radius = float(_value(appearance, "pointRadius"))
    surface.set_fill_color(_value(appearance, "pointColor"))
    # Every ordered pair, the point itself included, so each chord is stroked twice.
    for point in points:
        surface.circle(point.x, point.y, point_radius, stroke=True, fill=True)
        for other in points:
            surface.line(point.x, point.y, other.x, other.y)


def render_paused(
    surface: DrawingSurface,
    radius: float,
    settings: Mapping[str, object] | None = None,
) -> None:
    """Cut two bars out of the last frame and shade them."""

    appearance = _appearance(settings)
    x1 = radius - (radius / 4) - (radius / 30)
    y1 = radius - (radius / 5)
    x2 = radius + (radius / 30)
    w = radius / 4
    h = radius / 2.5
    surface.clear_area(x1, y1, w, h)
    surface.clear_area(x2, y1, w, h)
    surface.set_fill_color(_value(appearance, "pauseColor"))
    surface.fill_rect(x1, y1, w, h)
    surface.fill_rect(x2, y1, w, h)
