from __future__ import annotations

import math

import pytest

from circlechords.geometry import generate_points
from circlechords.view.renderer import render_paused, render_scene


def test_scene_starts_by_clearing_then_labels(surface) -> None:
    points = generate_points(100, 4, False)
    render_scene(surface, 100, points)

    assert surface.calls[0] == ("clear", 0, 0, 200, 200)
    texts = surface.named("text")
    assert texts[0] == ("text", "Points: 4", 0, 0)
    assert texts[1][1] == "Regions: 8"
    assert texts[1][3] == pytest.approx(200 / 29)
    assert ("font", 200 / 40.0, "monospace") in surface.calls


def test_scene_draws_bounding_circle_unfilled(surface) -> None:
    render_scene(surface, 100, generate_points(100, 3, False))
    circles = surface.named("circle")
    assert circles[0] == ("circle", 100, 100, math.floor(200 / 2), True, False)


def test_scene_draws_every_ordered_pair_including_self(surface) -> None:
    n = 6
    points = generate_points(100, n, True)
    render_scene(surface, 100, points)

    disks = surface.named("circle")[1:]
    assert len(disks) == n
    assert all(call[3] == 5.0 and call[4] and call[5] for call in disks)

    lines = surface.named("line")
    assert len(lines) == n * n
    self_lines = [call for call in lines if (call[1], call[2]) == (call[3], call[4])]
    assert len(self_lines) >= n


def test_scene_colours(surface) -> None:
    render_scene(surface, 100, generate_points(100, 2, False))
    assert ("fill_color", (255, 255, 255, 0.7)) in surface.calls
    assert ("stroke_color", (255, 255, 255, 0.2)) in surface.calls
    assert ("fill_color", (255, 255, 255, 1.0)) in surface.calls


def test_scene_with_no_points_still_draws_circle_and_counters(surface) -> None:
    render_scene(surface, 100, [])
    assert surface.named("line") == []
    assert len(surface.named("circle")) == 1
    assert surface.named("text")[1][1] == "Regions: 1"


def test_scene_honours_appearance_overrides(surface) -> None:
    settings = {"appearance": {"pointRadius": 2.5, "chordColor": [0, 255, 0, 0.5]}}
    render_scene(surface, 100, generate_points(100, 2, False), settings)
    assert ("stroke_color", (0, 255, 0, 0.5)) in surface.calls
    assert surface.named("circle")[1][3] == 2.5


def test_paused_indicator_cuts_and_shades_two_bars(surface) -> None:
    r = 100.0
    render_paused(surface, r)

    x1 = r - r / 4 - r / 30
    y1 = r - r / 5
    x2 = r + r / 30
    w, h = r / 4, r / 2.5
    assert surface.named("clear") == [("clear", x1, y1, w, h), ("clear", x2, y1, w, h)]
    assert surface.named("fill_rect") == [("fill_rect", x1, y1, w, h), ("fill_rect", x2, y1, w, h)]
    assert ("fill_color", (255, 255, 255, 0.1)) in surface.calls
    assert surface.named("line") == []
    assert surface.named("text") == []
