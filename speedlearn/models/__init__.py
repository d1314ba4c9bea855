"""Domain enums for speedlearn."""

from speedlearn.models.enums import Difficulty, PerformanceLevel, RunMode

__all__ = [
    "RunMode",
    "Difficulty",
    "PerformanceLevel",
]
