"""ORP (Optimal Reading Position) calculation for RSVP display."""

import math
from typing import NamedTuple

from .constants import (
    ORP_LONG_RATIO,
    ORP_MEDIUM_RATIO,
    ORP_MEDIUM_WORD_MAX,
    ORP_SHORT_WORD_MAX,
)


class FocusSplit(NamedTuple):
    """A word split around its focus character for highlighted display."""

    before: str
    focus: str
    after: str


def optimal_reading_position(word: str) -> int:
    """
    Calculate the ORP index for a word.

    Short words are fixated near the centre; longer words shift the
    fixation point left. The tiers are:

    - 0 or 1 chars: 0
    - 2..5 chars: n // 2
    - 6..9 chars: floor(n * 0.4)
    - 10+ chars: floor(n * 0.35)

    Args:
        word: The word to calculate ORP for.

    Returns:
        The 0-indexed position of the focus character.

    Examples:
        >>> optimal_reading_position("hello")
        2
        >>> optimal_reading_position("extraordinary")
        4
    """
    length = len(word)

    if length <= 1:
        return 0

    if length <= ORP_SHORT_WORD_MAX:
        return length // 2

    if length <= ORP_MEDIUM_WORD_MAX:
        return math.floor(length * ORP_MEDIUM_RATIO)

    return math.floor(length * ORP_LONG_RATIO)


def split_at_orp(word: str) -> FocusSplit:
    """
    Split a word into (before, focus, after) around its ORP.

    Args:
        word: The word to split.

    Returns:
        FocusSplit; ``focus`` is a single character, or empty for an
        empty word.

    Example:
        >>> split_at_orp("reading")
        FocusSplit(before='re', focus='a', after='ding')
    """
    offset = optimal_reading_position(word)

    before = word[:offset]
    focus = word[offset] if offset < len(word) else ""
    after = word[offset + 1:]

    return FocusSplit(before, focus, after)
