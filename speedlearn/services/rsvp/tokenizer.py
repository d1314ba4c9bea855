"""
Tokenization of passage text into RSVP display units.

Each whitespace-separated token becomes one DisplayUnit, annotated with the
two properties the timing model needs: whether it closes a sentence and
whether it is punctuation only.

Example usage:
    >>> units = tokenize("Hello world. Bye!")
    >>> [u.text for u in units]
    ['Hello', 'world.', 'Bye!']
    >>> units[1].is_sentence_final
    True
"""

import re
from dataclasses import dataclass
from typing import List

from .constants import PUNCTUATION_ONLY_PATTERN, SENTENCE_FINAL_PATTERN

_WHITESPACE = re.compile(r'\s+')
_SENTENCE_FINAL = re.compile(SENTENCE_FINAL_PATTERN)
_PUNCTUATION_ONLY = re.compile(PUNCTUATION_ONLY_PATTERN)


@dataclass(frozen=True)
class DisplayUnit:
    """One token shown during RSVP playback.

    Attributes:
        text: The literal token, including any attached punctuation.
        sequence_index: 0-based position in the passage's token stream.
        is_sentence_final: Whether the token ends with '.', '!' or '?'.
        is_punctuation_only: Whether every character is in the
            punctuation-only set.
    """

    text: str
    sequence_index: int
    is_sentence_final: bool = False
    is_punctuation_only: bool = False


def is_sentence_final(token: str) -> bool:
    """Return True if the token ends a sentence."""
    return _SENTENCE_FINAL.search(token) is not None


def is_punctuation_only(token: str) -> bool:
    """Return True if the token is non-empty and made only of punctuation."""
    return _PUNCTUATION_ONLY.match(token) is not None


def split_tokens(text: str) -> List[str]:
    """Split text on runs of whitespace, dropping empty tokens."""
    return [token for token in _WHITESPACE.split(text) if token]


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim the ends."""
    return " ".join(split_tokens(text))


def tokenize(text: str) -> List[DisplayUnit]:
    """
    Convert passage text into an ordered list of display units.

    Joining the units' text with single spaces reconstructs
    ``normalize_whitespace(text)``.

    Args:
        text: Raw passage text.

    Returns:
        List of DisplayUnit objects in reading order.
    """
    return [
        DisplayUnit(
            text=token,
            sequence_index=index,
            is_sentence_final=is_sentence_final(token),
            is_punctuation_only=is_punctuation_only(token),
        )
        for index, token in enumerate(split_tokens(text))
    ]


def count_words(text: str) -> int:
    """Count the display units text would produce."""
    return len(split_tokens(text))
