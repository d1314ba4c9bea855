"""Math utilities."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves rounded towards +infinity.

    Python's built-in ``round`` uses banker's rounding (``round(0.5) == 0``).
    Scores and delays must stay comparable with values produced by browser
    clients, which round ``x.5`` up, so every rounding in the engine goes
    through this helper.

    Args:
        value: Finite number to round.

    Returns:
        The rounded integer.

    Examples:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(-2.5)
        -2
    """
    return math.floor(value + 0.5)
