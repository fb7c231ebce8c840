"""
Periodic tick schedulers.

The session only sees ``schedule(callback, period_ms) -> handle`` and
``cancel(handle)``. ``PygameScheduler`` drives real play through pygame
timer events; ``ManualScheduler`` is stepped by hand (tests, headless runs).
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Protocol

import pygame  # type: ignore

logger = logging.getLogger(__name__)

Callback = Callable[[], object]


class Scheduler(Protocol):
    def schedule(self, callback: Callback, period_ms: int) -> int: ...
    def cancel(self, handle: int) -> None: ...


class PygameScheduler:
    """
    Each schedule() gets its own custom pygame event type fired by
    ``pygame.time.set_timer``. The main loop hands every event to
    :meth:`dispatch`, which runs the matching callback.
    """

    def __init__(self) -> None:
        self._callbacks: Dict[int, Callback] = {}

    def schedule(self, callback: Callback, period_ms: int) -> int:
        event_type = pygame.event.custom_type()
        self._callbacks[event_type] = callback
        pygame.time.set_timer(event_type, period_ms)
        logger.debug("Timer %d every %d ms", event_type, period_ms)
        return event_type

    def cancel(self, handle: int) -> None:
        pygame.time.set_timer(handle, 0)
        self._callbacks.pop(handle, None)
        logger.debug("Timer %d cancelled", handle)

    def dispatch(self, event: pygame.event.Event) -> bool:
        """Run the callback for a timer event. False if the event is not ours."""
        callback = self._callbacks.get(event.type)
        if callback is None:
            return False
        callback()
        return True


class ManualScheduler:
    """
    Fires callbacks only when told to.

    Example:
        sched = ManualScheduler()
        handle = sched.schedule(session.tick, 100)
        sched.advance(250)   # two ticks, 50 ms carried over
    """

    def __init__(self) -> None:
        self._next_handle = 1
        self._timers: Dict[int, list] = {}  # handle -> [callback, period_ms, elapsed_ms]

    @property
    def active(self) -> int:
        return len(self._timers)

    def schedule(self, callback: Callback, period_ms: int) -> int:
        if period_ms <= 0:
            raise ValueError(f"period_ms must be positive, got {period_ms}")
        handle = self._next_handle
        self._next_handle += 1
        self._timers[handle] = [callback, period_ms, 0]
        return handle

    def cancel(self, handle: int) -> None:
        self._timers.pop(handle, None)

    def fire(self) -> int:
        """Run every live callback once. Returns how many ran."""
        fired = 0
        for handle in list(self._timers):
            timer = self._timers.get(handle)
            if timer is None:
                continue  # cancelled by an earlier callback
            timer[0]()
            fired += 1
        return fired

    def advance(self, ms: int) -> int:
        """Let ``ms`` of time pass, firing each timer once per elapsed period."""
        fired = 0
        for handle in list(self._timers):
            timer = self._timers.get(handle)
            if timer is None:
                continue
            timer[2] += ms
            while handle in self._timers and timer[2] >= timer[1]:
                timer[2] -= timer[1]
                timer[0]()
                fired += 1
        return fired
