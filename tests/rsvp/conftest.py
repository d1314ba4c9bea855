"""Fixtures for driving the RSVP scheduler deterministically."""

from typing import Callable, List

import pytest

from speedlearn.services.rsvp import SchedulerCallbacks


class FakeTimer:
    """A scheduled callback that only runs when a test fires it."""

    def __init__(self, delay_seconds: float, callback: Callable[[], None]) -> None:
        self.delay_seconds = delay_seconds
        self.callback = callback
        self.cancelled = False
        self.fired = False

    @property
    def delay_ms(self) -> int:
        return round(self.delay_seconds * 1000)

    def cancel(self) -> None:
        self.cancelled = True

    def fire(self) -> None:
        """Run the callback, even if cancelled (simulates a lost cancel race)."""
        self.fired = True
        self.callback()


class FakeTimerFactory:
    """Records every scheduled timer so tests can fire them by hand."""

    def __init__(self) -> None:
        self.timers: List[FakeTimer] = []

    def schedule(self, delay_seconds: float, callback: Callable[[], None]) -> FakeTimer:
        timer = FakeTimer(delay_seconds, callback)
        self.timers.append(timer)
        return timer

    @property
    def pending(self) -> List[FakeTimer]:
        return [t for t in self.timers if not t.cancelled and not t.fired]

    @property
    def delays_ms(self) -> List[int]:
        return [t.delay_ms for t in self.timers]

    def fire_next(self) -> None:
        self.pending[0].fire()

    def run_until_idle(self, limit: int = 10_000) -> None:
        for _ in range(limit):
            if not self.pending:
                return
            self.fire_next()
        raise AssertionError("Timers still pending after limit")


class CallbackRecorder:
    """Collects observer calls made by a scheduler."""

    def __init__(self) -> None:
        self.words: List[tuple] = []
        self.play_states: List[bool] = []
        self.completions = 0

    @property
    def indices(self) -> List[int]:
        return [index for _, index, _ in self.words]

    @property
    def texts(self) -> List[str]:
        return [text for text, _, _ in self.words]

    def on_word_change(self, unit, index, total) -> None:
        self.words.append((unit.text, index, total))

    def on_complete(self) -> None:
        self.completions += 1

    def on_play_state_change(self, playing: bool) -> None:
        self.play_states.append(playing)

    def callbacks(self) -> SchedulerCallbacks:
        return SchedulerCallbacks(
            on_word_change=self.on_word_change,
            on_complete=self.on_complete,
            on_play_state_change=self.on_play_state_change,
        )


@pytest.fixture
def timers() -> FakeTimerFactory:
    return FakeTimerFactory()


@pytest.fixture
def recorder() -> CallbackRecorder:
    return CallbackRecorder()
