"""Business logic services for speedlearn."""

from speedlearn.services.passages import PassageCatalog, PassageCatalogError
from speedlearn.services.rsvp import (
    DisplayUnit,
    RSVPScheduler,
    SchedulerCallbacks,
    compute_word_delay,
    create_session,
    optimal_reading_position,
    split_at_orp,
    tokenize,
)
from speedlearn.services.scoring import (
    AssessmentResult,
    Metrics,
    ScoringInputError,
    assess,
    compute_metrics,
    feedback_for,
)

__all__ = [
    # RSVP engine
    "DisplayUnit",
    "tokenize",
    "optimal_reading_position",
    "split_at_orp",
    "compute_word_delay",
    "RSVPScheduler",
    "SchedulerCallbacks",
    "create_session",
    # Scoring
    "Metrics",
    "AssessmentResult",
    "ScoringInputError",
    "compute_metrics",
    "feedback_for",
    "assess",
    # Passages
    "PassageCatalog",
    "PassageCatalogError",
]
