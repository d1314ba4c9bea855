"""
RSVP package: tokenization, focus-point placement, timing and playback.

This package contains modules for presenting a passage one word at a time,
including:
- tokenizer: Splitting passage text into annotated DisplayUnits
- orp: Optimal Reading Position and focus splitting
- timing: Per-unit display delays derived from WPM
- scheduler: RSVPScheduler state machine and create_session()
- constants: Punctuation sets, ORP tiers and timing multipliers

Primary usage:
    >>> from speedlearn.services.rsvp import create_session, SchedulerCallbacks
    >>> session = create_session("Hello world.", 300, SchedulerCallbacks())
    >>> session.get_total_words()
    2
"""

from .constants import (
    LONG_WORD_BONUS,
    LONG_WORD_THRESHOLD,
    PUNCTUATION_ONLY_CHARS,
    PUNCTUATION_ONLY_MULTIPLIER,
    RSVP_ENGINE_VERSION,
    SENTENCE_END_BONUS,
    SENTENCE_ENDERS,
    VERY_LONG_WORD_BONUS,
    VERY_LONG_WORD_THRESHOLD,
)
from .orp import FocusSplit, optimal_reading_position, split_at_orp
from .scheduler import (
    AsyncioTimerFactory,
    RSVPScheduler,
    SchedulerCallbacks,
    TimerFactory,
    TimerHandle,
    create_session,
)
from .timing import (
    calculate_base_duration_ms,
    calculate_delay_multiplier,
    compute_word_delay,
    estimate_reading_time_formatted,
    estimate_reading_time_ms,
)
from .tokenizer import (
    DisplayUnit,
    count_words,
    is_punctuation_only,
    is_sentence_final,
    normalize_whitespace,
    tokenize,
)

__all__ = [
    # Tokenizer
    "DisplayUnit",
    "tokenize",
    "count_words",
    "normalize_whitespace",
    "is_sentence_final",
    "is_punctuation_only",
    # ORP
    "FocusSplit",
    "optimal_reading_position",
    "split_at_orp",
    # Timing
    "calculate_base_duration_ms",
    "calculate_delay_multiplier",
    "compute_word_delay",
    "estimate_reading_time_ms",
    "estimate_reading_time_formatted",
    # Scheduler
    "RSVPScheduler",
    "SchedulerCallbacks",
    "TimerFactory",
    "TimerHandle",
    "AsyncioTimerFactory",
    "create_session",
    # Constants
    "RSVP_ENGINE_VERSION",
    "SENTENCE_ENDERS",
    "PUNCTUATION_ONLY_CHARS",
    "LONG_WORD_THRESHOLD",
    "LONG_WORD_BONUS",
    "VERY_LONG_WORD_THRESHOLD",
    "VERY_LONG_WORD_BONUS",
    "SENTENCE_END_BONUS",
    "PUNCTUATION_ONLY_MULTIPLIER",
]
