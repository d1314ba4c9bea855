"""
Reading performance scoring.

Turns a reading time, a passage's word count and ideal speed, and quiz
correctness into four metrics:

- wpm: measured reading speed
- accuracy: percentage of questions answered correctly
- retention: accuracy scaled down when reading slower than the ideal speed
- speed_learning_score: 60% accuracy + 40% speed (capped at the ideal)

All values are rounded half-up so scores from different sessions and
clients compare exactly. The functions here are pure; they assume valid
inputs (see validate_score_inputs) and keep no state between calls.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Sequence

from speedlearn.models.enums import PerformanceLevel
from speedlearn.utils.math import round_half_up

logger = logging.getLogger(__name__)

ACCURACY_WEIGHT = 0.6
SPEED_WEIGHT = 0.4

FEEDBACK_EXCELLENT = "Excellent work! You have great reading speed and comprehension."
FEEDBACK_IMPROVE_COMPREHENSION = (
    "Good pace, but focus more on key details to improve comprehension."
)
FEEDBACK_INCREASE_SPEED = "Great comprehension! Try to increase your reading speed gradually."
FEEDBACK_GOOD_EFFORT = "Good effort! Practice regularly to improve both speed and accuracy."
FEEDBACK_TAKE_YOUR_TIME = (
    "Take your time to understand the content. Speed will improve with practice."
)
FEEDBACK_KEEP_PRACTICING = "Keep practicing to improve your reading skills!"


class ScoringInputError(ValueError):
    """Raised when scoring inputs would make the metrics undefined."""


@dataclass(frozen=True)
class Metrics:
    """Derived reading performance metrics for one submission."""

    wpm: int
    accuracy: int
    retention: int
    speed_learning_score: int


@dataclass(frozen=True)
class AnswerReview:
    """How one submitted answer compares with the expected answer."""

    question_id: str
    selected_option: str
    correct_answer: Optional[str]
    is_correct: bool


@dataclass(frozen=True)
class GradedAnswers:
    correct: int
    review: List[AnswerReview] = field(default_factory=list)


@dataclass(frozen=True)
class AssessmentResult:
    """Everything reported back to the reader after a quiz."""

    metrics: Metrics
    feedback: str
    level: PerformanceLevel
    review: List[AnswerReview]


class _QuestionLike(Protocol):
    id: str
    answer: str


class _AnswerLike(Protocol):
    question_id: str
    selected_option: str


class _PassageLike(Protocol):
    word_count: int
    ideal_wpm: float
    questions: Sequence[_QuestionLike]


def compute_metrics(
    word_count: int,
    ideal_wpm: float,
    reading_time_seconds: float,
    correct_answers: int,
    total_questions: int,
) -> Metrics:
    """
    Compute reading metrics for one submission.

    Args:
        word_count: Words in the passage (>= 1).
        ideal_wpm: The passage's target reading speed (> 0).
        reading_time_seconds: Time spent reading (> 0).
        correct_answers: Questions answered correctly.
        total_questions: Questions asked (>= 1).

    Returns:
        Metrics for the submission.

    Raises:
        ZeroDivisionError: If reading_time_seconds, ideal_wpm or
            total_questions is zero. Callers validate first.

    Example:
        >>> compute_metrics(300, 300, 60, 8, 10)
        Metrics(wpm=300, accuracy=80, retention=80, speed_learning_score=88)
    """
    wpm = round_half_up(word_count / (reading_time_seconds / 60))
    accuracy = round_half_up((correct_answers / total_questions) * 100)

    speed_factor = min(1, wpm / ideal_wpm)
    retention = round_half_up((accuracy / 100) * speed_factor * 100)

    speed_component = min(100, (wpm / ideal_wpm) * 100)
    speed_learning_score = round_half_up(
        ACCURACY_WEIGHT * accuracy + SPEED_WEIGHT * speed_component
    )

    metrics = Metrics(
        wpm=wpm,
        accuracy=accuracy,
        retention=retention,
        speed_learning_score=speed_learning_score,
    )
    logger.debug("Computed metrics %s (ideal %s WPM)", metrics, ideal_wpm)
    return metrics


def feedback_for(metrics: Metrics, ideal_wpm: float, actual_wpm: float) -> str:
    """
    Pick the feedback message for a set of metrics.

    Rules are checked in order and the first match wins.

    Args:
        metrics: Metrics from compute_metrics().
        ideal_wpm: The passage's target reading speed.
        actual_wpm: The reader's measured speed.

    Returns:
        A feedback sentence for the reader.
    """
    accuracy = metrics.accuracy
    score = metrics.speed_learning_score

    if score >= 85 and accuracy >= 80:
        return FEEDBACK_EXCELLENT

    if actual_wpm >= ideal_wpm and accuracy < 70:
        return FEEDBACK_IMPROVE_COMPREHENSION

    if accuracy >= 80 and actual_wpm < ideal_wpm * 0.8:
        return FEEDBACK_INCREASE_SPEED

    if 60 <= score < 85:
        return FEEDBACK_GOOD_EFFORT

    if score < 60:
        return FEEDBACK_TAKE_YOUR_TIME

    return FEEDBACK_KEEP_PRACTICING


def performance_level(score: int) -> PerformanceLevel:
    """Map a speed learning score to its qualitative band."""
    if score >= 85:
        return PerformanceLevel.EXCELLENT
    if score >= 70:
        return PerformanceLevel.GOOD
    if score >= 60:
        return PerformanceLevel.FAIR
    return PerformanceLevel.NEEDS_IMPROVEMENT


def grade_answers(
    questions: Sequence[_QuestionLike],
    answers: Sequence[_AnswerLike],
) -> GradedAnswers:
    """
    Mark submitted answers against a passage's questions.

    Answers for unknown question ids are reviewed as incorrect with no
    correct answer. Each submitted answer is counted on its own.

    Args:
        questions: Questions with ``id`` and ``answer``.
        answers: Answers with ``question_id`` and ``selected_option``.

    Returns:
        GradedAnswers with the correct count and a per-answer review.
    """
    expected = {question.id: question.answer for question in questions}

    review = []
    for answer in answers:
        correct_answer = expected.get(answer.question_id)
        review.append(
            AnswerReview(
                question_id=answer.question_id,
                selected_option=answer.selected_option,
                correct_answer=correct_answer,
                is_correct=correct_answer is not None
                and correct_answer == answer.selected_option,
            )
        )

    return GradedAnswers(
        correct=sum(1 for item in review if item.is_correct),
        review=review,
    )


def validate_score_inputs(
    word_count: int,
    ideal_wpm: float,
    reading_time_seconds: float,
    correct_answers: int,
    total_questions: int,
) -> None:
    """
    Check the preconditions of compute_metrics().

    Raises:
        ScoringInputError: Describing the first violated precondition.
    """
    if word_count < 1:
        raise ScoringInputError(f"word_count must be at least 1, got {word_count}")
    if not ideal_wpm > 0:
        raise ScoringInputError(f"ideal_wpm must be positive, got {ideal_wpm}")
    if not (reading_time_seconds > 0 and math.isfinite(reading_time_seconds)):
        raise ScoringInputError(
            f"reading_time_seconds must be a positive number, got {reading_time_seconds}"
        )
    if total_questions < 1:
        raise ScoringInputError("Passage has no questions to score")
    if not 0 <= correct_answers <= total_questions:
        raise ScoringInputError(
            f"correct_answers must be between 0 and {total_questions}, got {correct_answers}"
        )


def assess(
    passage: _PassageLike,
    reading_time_seconds: float,
    answers: Sequence[_AnswerLike],
) -> AssessmentResult:
    """
    Grade a quiz and score the reading session for a passage.

    Args:
        passage: Passage with ``word_count``, ``ideal_wpm`` and ``questions``.
        reading_time_seconds: Time spent reading the passage.
        answers: The reader's answers.

    Returns:
        AssessmentResult with metrics, feedback, level and answer review.

    Raises:
        ScoringInputError: If the inputs cannot be scored.
    """
    graded = grade_answers(passage.questions, answers)
    total_questions = len(passage.questions)

    validate_score_inputs(
        passage.word_count,
        passage.ideal_wpm,
        reading_time_seconds,
        graded.correct,
        total_questions,
    )

    metrics = compute_metrics(
        passage.word_count,
        passage.ideal_wpm,
        reading_time_seconds,
        graded.correct,
        total_questions,
    )

    return AssessmentResult(
        metrics=metrics,
        feedback=feedback_for(metrics, passage.ideal_wpm, metrics.wpm),
        level=performance_level(metrics.speed_learning_score),
        review=graded.review,
    )
