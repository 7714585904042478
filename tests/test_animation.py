from __future__ import annotations

import random

from circlechords.control.state import Action, ViewState, ViewStateStore
from circlechords.view.animation import AnimationLoop, QtFrameScheduler


def _loop(surface, scheduler, state_box, **kwargs) -> AnimationLoop:
    return AnimationLoop(surface, lambda: state_box[0], scheduler, **kwargs)


def test_running_tick_renders_scene_and_reschedules(surface, scheduler) -> None:
    state = [ViewState(point_count=3, random_distribution=False)]
    loop = _loop(surface, scheduler, state)
    loop.start()

    assert scheduler.requests == 1
    assert loop.frames == 1
    assert surface.frames_opened == 1
    assert len(surface.named("line")) == 9
    assert surface.named("text")[0][1] == "Points: 3"


def test_start_only_once(surface, scheduler) -> None:
    loop = _loop(surface, scheduler, [ViewState()])
    loop.start()
    loop.start()
    assert scheduler.requests == 1


def test_paused_tick_draws_indicator_only(surface, scheduler) -> None:
    state = [ViewState(point_count=4, is_paused=True)]
    loop = _loop(surface, scheduler, state)
    loop.start()

    assert surface.named("line") == []
    assert len(surface.named("fill_rect")) == 2
    assert scheduler.requests == 1


def test_loop_reads_latest_state_each_tick(qapp, surface, scheduler) -> None:
    store = ViewStateStore(ViewState(point_count=2, random_distribution=False))
    loop = AnimationLoop(surface, lambda: store.state, scheduler)
    loop.start()
    assert surface.named("text")[0][1] == "Points: 2"

    store.dispatch(Action.INCREASE_POINTS)
    surface.calls.clear()
    scheduler.run_next()
    assert surface.named("text")[0][1] == "Points: 3"

    store.dispatch(Action.TOGGLE_PAUSE)
    surface.calls.clear()
    scheduler.run_next()
    assert surface.named("text") == []
    assert len(surface.named("fill_rect")) == 2


def test_even_frames_repeat_geometry(surface, scheduler) -> None:
    loop = _loop(surface, scheduler, [ViewState(point_count=5, random_distribution=False)])
    loop.start()
    first = surface.named("line")
    surface.calls.clear()
    scheduler.run_next()
    assert surface.named("line") == first


def test_random_frames_use_injected_rng(surface, scheduler, make_surface) -> None:
    state = [ViewState(point_count=5, random_distribution=True)]
    _loop(surface, scheduler, state, rng=random.Random(7)).start()
    first = surface.named("line")

    other = make_surface()
    _loop(other, scheduler, state, rng=random.Random(7)).start()
    assert other.named("line") == first


def test_destroyed_surface_stops_loop_without_drawing(surface, scheduler) -> None:
    loop = _loop(surface, scheduler, [ViewState(point_count=3)])
    loop.start()
    scheduler.run_next()
    assert scheduler.requests == 2

    surface.destroy()
    surface.calls.clear()
    scheduler.run_next()

    assert surface.calls == []
    assert scheduler.requests == 2
    assert scheduler.pending == []
    assert loop.running is False
    assert loop.frames == 2


def test_on_frame_called_after_each_drawn_tick(surface, scheduler) -> None:
    presented = []
    loop = _loop(surface, scheduler, [ViewState()], on_frame=lambda: presented.append(loop.frames))
    loop.start()
    scheduler.run_next()
    assert presented == [1, 2]


def test_qt_scheduler_defers_callback_to_event_loop(qapp) -> None:
    from PyQt5.QtTest import QTest

    fired = []
    QtFrameScheduler(0).request_frame(lambda: fired.append(True))
    assert fired == []
    QTest.qWait(50)
    assert fired == [True]
