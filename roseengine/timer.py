"""Millisecond timers driven by the frame delta time."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator


@dataclass
class Timer:
    """One timer. Times are whole milliseconds and never go below zero."""

    callback: Callable[[], object]
    ms: int
    remaining_time: int
    repeat: bool
    active: bool = False


class TimerManager:
    """Owns timers by id and advances the active ones each frame."""

    def __init__(self) -> None:
        self._next_id = 0
        self._timers: dict[int, Timer] = {}

    def __contains__(self, timer_id: object) -> bool:
        return timer_id in self._timers

    def __len__(self) -> int:
        return len(self._timers)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._timers))

    def __getitem__(self, timer_id: int) -> Timer:
        return self._timers[timer_id]

    def create_timer(self, milliseconds: int, func: Callable[[], object], repeat: bool) -> int:
        """Create an inactive timer and return its id."""
        if milliseconds < 0:
            raise ValueError("timer duration must not be negative")
        ms = int(milliseconds)
        timer_id = self._next_id
        self._next_id += 1
        self._timers[timer_id] = Timer(callback=func, ms=ms, remaining_time=ms, repeat=bool(repeat))
        return timer_id

    def start_timer(self, timer_id: int) -> None:
        timer = self._timers.get(timer_id)
        if timer is not None:
            timer.active = True

    def pause_timer(self, timer_id: int) -> None:
        """Pause a timer; raises KeyError if there is no such timer."""
        try:
            self._timers[timer_id].active = False
        except KeyError:
            raise KeyError(f"no timer with id {timer_id}") from None

    def delete_timer(self, timer_id: int) -> None:
        self._timers.pop(timer_id, None)

    def on_update(self, delta_time: float) -> None:
        """Advance active timers by ``delta_time`` seconds, firing those that run out."""
        for timer_id, timer in list(self._timers.items()):
            if self._timers.get(timer_id) is not timer or not timer.active:
                continue
            timer.remaining_time = max(0, int(timer.remaining_time - delta_time * 1000))
            if timer.remaining_time > 0:
                continue
            if timer.repeat:
                timer.remaining_time = timer.ms
                timer.callback()
            else:
                timer.active = False
                timer.callback()
                if self._timers.get(timer_id) is timer:
                    del self._timers[timer_id]