"""
RSVP constants for tokenization, focus-point placement and word timing.

Values here feed score and pacing comparisons across sessions, so a change
to any of them changes every delay the engine produces.
"""

# Engine version - increment when timing or tokenization logic changes
RSVP_ENGINE_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# Token Classification
# -----------------------------------------------------------------------------

# A token ending in one of these closes a sentence
SENTENCE_ENDERS = {'.', '!', '?'}

# A token made only of these characters is punctuation-only
PUNCTUATION_ONLY_CHARS = {'.', ',', ';', ':', '!', '?', '(', ')', '"', '-'}

# Regex sources mirroring the two sets above
SENTENCE_FINAL_PATTERN = r'[.!?]$'
PUNCTUATION_ONLY_PATTERN = r'^[.,;:!?()"-]+$'

# -----------------------------------------------------------------------------
# Optimal Reading Position tiers (inclusive upper bounds)
# -----------------------------------------------------------------------------

ORP_SHORT_WORD_MAX = 5     # 2..5 chars: centre
ORP_MEDIUM_WORD_MAX = 9    # 6..9 chars: 40% in
ORP_MEDIUM_RATIO = 0.4
ORP_LONG_RATIO = 0.35      # 10+ chars: 35% in

# -----------------------------------------------------------------------------
# Timing Multipliers
# -----------------------------------------------------------------------------

MS_PER_MINUTE = 60 * 1000

BASE_MULTIPLIER = 1.0

# Length adjustments are applied independently: a word longer than
# VERY_LONG_WORD_THRESHOLD also receives the LONG_WORD bonus.
LONG_WORD_THRESHOLD = 8
LONG_WORD_BONUS = 0.3
VERY_LONG_WORD_THRESHOLD = 12
VERY_LONG_WORD_BONUS = 0.5

SENTENCE_END_BONUS = 0.5

# Overwrites every other adjustment
PUNCTUATION_ONLY_MULTIPLIER = 0.5
