"""
Word display timing for RSVP playback.

The delay for a unit is the base duration for the target WPM scaled by a
multiplier derived from the unit's length and punctuation:

- longer than 8 chars: +0.3
- longer than 12 chars: +0.5 (in addition to the +0.3)
- sentence-final: +0.5
- punctuation-only: multiplier set to 0.5, discarding the adjustments above

Delays are whole milliseconds, rounded half-up.
"""

from typing import Iterable

from speedlearn.utils.math import round_half_up

from .constants import (
    BASE_MULTIPLIER,
    LONG_WORD_BONUS,
    LONG_WORD_THRESHOLD,
    MS_PER_MINUTE,
    PUNCTUATION_ONLY_MULTIPLIER,
    SENTENCE_END_BONUS,
    VERY_LONG_WORD_BONUS,
    VERY_LONG_WORD_THRESHOLD,
)
from .tokenizer import DisplayUnit


def calculate_base_duration_ms(wpm: float) -> float:
    """
    Milliseconds one plain word gets at a target speed, before any multiplier.

    The scheduler and the token preview route both start from this slot;
    at 300 WPM it is 200ms.

    Raises:
        ValueError: If the target speed is zero or negative.
    """
    if wpm <= 0:
        raise ValueError(f"Target speed must be a positive WPM, got {wpm}")

    return MS_PER_MINUTE / wpm


def calculate_delay_multiplier(unit: DisplayUnit) -> float:
    """
    Calculate the delay multiplier for a display unit.

    Args:
        unit: The unit to calculate the multiplier for.

    Returns:
        Delay multiplier (1.0 = normal, >1.0 = longer display time).

    Examples:
        >>> calculate_delay_multiplier(DisplayUnit("hello", 0))
        1.0
        >>> calculate_delay_multiplier(DisplayUnit("extraordinary", 0))
        1.8
    """
    multiplier = BASE_MULTIPLIER
    length = len(unit.text)

    if length > LONG_WORD_THRESHOLD:
        multiplier += LONG_WORD_BONUS
    if length > VERY_LONG_WORD_THRESHOLD:
        multiplier += VERY_LONG_WORD_BONUS

    if unit.is_sentence_final:
        multiplier += SENTENCE_END_BONUS

    if unit.is_punctuation_only:
        multiplier = PUNCTUATION_ONLY_MULTIPLIER

    return multiplier


def compute_word_delay(base_wpm: float, unit: DisplayUnit) -> int:
    """
    Calculate how long a unit stays on screen.

    Args:
        base_wpm: Target reading speed in words per minute.
        unit: The unit about to be displayed.

    Returns:
        Display duration in whole milliseconds.

    Examples:
        >>> compute_word_delay(300, DisplayUnit("word", 0))
        200
        >>> compute_word_delay(300, DisplayUnit("end.", 0, is_sentence_final=True))
        300
    """
    base_delay = calculate_base_duration_ms(base_wpm)
    return round_half_up(base_delay * calculate_delay_multiplier(unit))


def estimate_reading_time_ms(units: Iterable[DisplayUnit], wpm: float) -> int:
    """
    Estimate total playback time for a sequence of units at a fixed speed.

    Args:
        units: Display units in reading order.
        wpm: Target reading speed in words per minute.

    Returns:
        Sum of the per-unit delays in milliseconds.
    """
    return sum(compute_word_delay(wpm, unit) for unit in units)


def estimate_reading_time_formatted(units: Iterable[DisplayUnit], wpm: float) -> str:
    """
    Estimate total playback time and return as formatted string.

    Args:
        units: Display units in reading order.
        wpm: Target reading speed in words per minute.

    Returns:
        Formatted string like "5 min" or "1 hr 23 min".
    """
    total_ms = estimate_reading_time_ms(units, wpm)
    total_minutes = int(total_ms / 1000 / 60)

    if total_minutes < 60:
        return f"{max(1, total_minutes)} min"

    hours = total_minutes // 60
    minutes = total_minutes % 60

    if minutes == 0:
        return f"{hours} hr"

    return f"{hours} hr {minutes} min"
