"""Enums shared by the engine, scoring model and API."""

from enum import Enum


class RunMode(str, Enum):
    """Run state of an RSVP session."""

    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"
    COMPLETED = "completed"


class Difficulty(str, Enum):
    """Enum for passage difficulty."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class PerformanceLevel(str, Enum):
    """Qualitative band for a speed learning score."""

    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    NEEDS_IMPROVEMENT = "Needs Improvement"
