from unittest.mock import MagicMock

import pygame
import pytest

from gridsnake.scheduler import ManualScheduler, PygameScheduler


def test_manual_scheduler_fires_once_per_period():
    sched = ManualScheduler()
    callback = MagicMock()
    sched.schedule(callback, 100)
    assert sched.advance(250) == 2
    assert sched.advance(50) == 1
    assert callback.call_count == 3


def test_manual_scheduler_cancel():
    sched = ManualScheduler()
    callback = MagicMock()
    handle = sched.schedule(callback, 100)
    sched.cancel(handle)
    assert sched.advance(1000) == 0
    assert sched.fire() == 0
    callback.assert_not_called()
    sched.cancel(handle)  # cancelling twice is harmless


def test_callback_cancelling_itself_stops_further_calls():
    sched = ManualScheduler()
    calls = []

    def tick():
        calls.append(1)
        sched.cancel(handle)

    handle = sched.schedule(tick, 10)
    sched.advance(100)
    assert calls == [1]
    assert sched.active == 0


def test_manual_scheduler_rejects_non_positive_period():
    with pytest.raises(ValueError):
        ManualScheduler().schedule(MagicMock(), 0)


def test_pygame_scheduler_dispatches_timer_events(monkeypatch):
    set_timer = MagicMock()
    monkeypatch.setattr(pygame.time, "set_timer", set_timer)
    sched = PygameScheduler()
    callback = MagicMock()

    handle = sched.schedule(callback, 100)
    set_timer.assert_called_once_with(handle, 100)

    assert sched.dispatch(pygame.event.Event(handle))
    callback.assert_called_once()
    assert not sched.dispatch(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP))

    sched.cancel(handle)
    set_timer.assert_called_with(handle, 0)
    # a stale event still in the queue after cancel is ignored
    assert not sched.dispatch(pygame.event.Event(handle))
    assert callback.call_count == 1
