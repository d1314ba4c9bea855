"""
RSVP playback scheduler.

An RSVPScheduler owns one reading session: the immutable unit sequence, the
index of the next unit to show, the run mode and at most one pending timer.
Units are presented one at a time; after each unit a single-shot timer is
scheduled for that unit's delay, and the fired timer presents the next unit.

Every fired timer checks, at fire time, that it is still the live timer and
that the session is still playing. A timer whose cancel() lost a race with
its own firing is therefore a no-op, so pause() and stop() never let a stale
callback advance the index.

Example usage:
    >>> async def read(text):
    ...     done = asyncio.Event()
    ...     session = create_session(
    ...         text, 300, SchedulerCallbacks(on_complete=done.set)
    ...     )
    ...     session.start()
    ...     await done.wait()
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Sequence, Tuple

from speedlearn.models.enums import RunMode

from .timing import compute_word_delay
from .tokenizer import DisplayUnit, tokenize

logger = logging.getLogger(__name__)

WordChangeCallback = Callable[[DisplayUnit, int, int], None]
CompleteCallback = Callable[[], None]
PlayStateCallback = Callable[[bool], None]


class TimerHandle(Protocol):
    """A scheduled callback that can be cancelled."""

    def cancel(self) -> None:
        ...


class TimerFactory(Protocol):
    """Source of single-shot delayed callbacks."""

    def schedule(self, delay_seconds: float, callback: Callable[[], None]) -> TimerHandle:
        ...


class AsyncioTimerFactory:
    """
    Schedule callbacks on an asyncio event loop with ``call_later``.

    Without an explicit loop, the loop running at schedule time is used, so
    sessions must be started from inside a running event loop.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop

    def schedule(self, delay_seconds: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay_seconds, callback)


@dataclass
class SchedulerCallbacks:
    """Observer hooks for a reading session. All are optional.

    Attributes:
        on_word_change: Called with (unit, index, total) as each unit is shown.
        on_complete: Called once the last unit's delay has elapsed.
        on_play_state_change: Called with True when playback starts or
            resumes and False when it pauses, stops or completes.
    """

    on_word_change: Optional[WordChangeCallback] = None
    on_complete: Optional[CompleteCallback] = None
    on_play_state_change: Optional[PlayStateCallback] = None


def _validate_wpm(wpm: float) -> float:
    if wpm <= 0:
        raise ValueError(f"Target speed must be a positive WPM, got {wpm}")
    return wpm


class RSVPScheduler:
    """
    State machine driving timed presentation of display units.

    Modes: IDLE -> PLAYING <-> PAUSED, PLAYING -> COMPLETED, and stop()
    returns any mode to IDLE at index 0. Control methods called in a mode
    that does not allow them are no-ops.
    """

    def __init__(
        self,
        words: Sequence[DisplayUnit],
        wpm: float,
        callbacks: Optional[SchedulerCallbacks] = None,
        timer_factory: Optional[TimerFactory] = None,
    ) -> None:
        """
        Initialize the scheduler.

        Args:
            words: Display units for the session, in reading order.
            wpm: Initial target speed in words per minute.
            callbacks: Observer hooks; defaults to no observers.
            timer_factory: Source of delayed callbacks; defaults to the
                running asyncio event loop.

        Raises:
            ValueError: If wpm is not positive.
        """
        self._words: Tuple[DisplayUnit, ...] = tuple(words)
        self._target_wpm = _validate_wpm(wpm)
        self._callbacks = callbacks or SchedulerCallbacks()
        self._timers: TimerFactory = timer_factory or AsyncioTimerFactory()

        self._current_index = 0
        self._mode = RunMode.IDLE
        self._pending_timer: Optional[TimerHandle] = None
        # Identifies the live timer; bumped whenever a timer is scheduled or cancelled
        self._timer_generation = 0
        self._stop_count = 0

    # ------------------------------------------------------------------
    # Controls
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Begin playback from the current index. No-op while playing."""
        if self._mode is RunMode.PLAYING:
            return

        logger.debug("Starting playback at index %d/%d", self._current_index, len(self._words))
        self._mode = RunMode.PLAYING
        self._notify_play_state(True)
        self._advance()

    def pause(self) -> None:
        """Suspend playback, keeping the current index. No-op unless playing."""
        if self._mode is not RunMode.PLAYING:
            return

        self._cancel_pending_timer()
        self._mode = RunMode.PAUSED
        logger.debug("Paused at index %d/%d", self._current_index, len(self._words))
        self._notify_play_state(False)

    def resume(self) -> None:
        """Continue playback after pause(). No-op unless paused."""
        if self._mode is not RunMode.PAUSED:
            return

        logger.debug("Resuming at index %d/%d", self._current_index, len(self._words))
        self._mode = RunMode.PLAYING
        self._notify_play_state(True)
        self._advance()

    def stop(self) -> None:
        """Pause, then rewind to the first unit so start() begins afresh."""
        self.pause()
        self._cancel_pending_timer()
        self._current_index = 0
        self._mode = RunMode.IDLE
        self._stop_count += 1
        logger.debug("Stopped; index reset to 0")

    def set_speed(self, wpm: float) -> None:
        """
        Change the target speed.

        Takes effect for the next unit scheduled; a timer already pending
        keeps the delay it was scheduled with.

        Raises:
            ValueError: If wpm is not positive.
        """
        self._target_wpm = _validate_wpm(wpm)
        logger.debug("Target speed set to %s WPM", wpm)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def words(self) -> Tuple[DisplayUnit, ...]:
        return self._words

    @property
    def target_wpm(self) -> float:
        return self._target_wpm

    @property
    def run_mode(self) -> RunMode:
        return self._mode

    def get_progress(self) -> float:
        """Percentage of units already presented, in [0, 100]."""
        if not self._words:
            return 0
        return self._current_index / len(self._words) * 100

    def get_current_index(self) -> int:
        return self._current_index

    def get_total_words(self) -> int:
        return len(self._words)

    def is_running(self) -> bool:
        return self._mode is RunMode.PLAYING

    def current_unit(self) -> Optional[DisplayUnit]:
        """The unit most recently presented, or None before the first one."""
        if self._current_index == 0:
            return None
        return self._words[self._current_index - 1]

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _advance(self) -> None:
        if self._current_index >= len(self._words):
            self._complete()
            return

        index = self._current_index
        unit = self._words[index]
        stop_count = self._stop_count

        if self._callbacks.on_word_change is not None:
            self._callbacks.on_word_change(unit, index, len(self._words))

        delay_ms = compute_word_delay(self._target_wpm, unit)

        # An observer that called stop() has already rewound the index
        if self._stop_count == stop_count:
            self._current_index = index + 1

        if self._mode is RunMode.PLAYING:
            self._schedule_next(delay_ms)

    def _schedule_next(self, delay_ms: int) -> None:
        self._cancel_pending_timer()
        generation = self._timer_generation

        def fire() -> None:
            if generation != self._timer_generation:
                return
            self._pending_timer = None
            if self._mode is RunMode.PLAYING:
                self._advance()

        self._pending_timer = self._timers.schedule(delay_ms / 1000, fire)

    def _cancel_pending_timer(self) -> None:
        self._timer_generation += 1
        if self._pending_timer is not None:
            self._pending_timer.cancel()
            self._pending_timer = None

    def _complete(self) -> None:
        self._cancel_pending_timer()
        self._mode = RunMode.COMPLETED
        logger.debug("Playback completed after %d units", len(self._words))
        self._notify_play_state(False)
        if self._callbacks.on_complete is not None:
            self._callbacks.on_complete()

    def _notify_play_state(self, playing: bool) -> None:
        if self._callbacks.on_play_state_change is not None:
            self._callbacks.on_play_state_change(playing)


def create_session(
    passage_text: str,
    initial_wpm: float,
    callbacks: Optional[SchedulerCallbacks] = None,
    timer_factory: Optional[TimerFactory] = None,
) -> RSVPScheduler:
    """
    Tokenize a passage and wrap it in a new scheduler.

    Args:
        passage_text: Raw passage text.
        initial_wpm: Starting target speed.
        callbacks: Observer hooks for the session.
        timer_factory: Source of delayed callbacks; defaults to asyncio.

    Returns:
        An idle RSVPScheduler positioned at the first unit.
    """
    return RSVPScheduler(
        tokenize(passage_text),
        initial_wpm,
        callbacks=callbacks,
        timer_factory=timer_factory,
    )
