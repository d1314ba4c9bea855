"""Pydantic schemas for speedlearn API."""

from speedlearn.schemas.assessment import (
    AnswerReviewOut,
    MetricsOut,
    PassageInfo,
    SubmitAnswer,
    SubmitRequest,
    SubmitResponse,
)
from speedlearn.schemas.passage import (
    Module,
    ModuleListResponse,
    ModuleOut,
    Passage,
    PassageListItem,
    PassageOut,
    Question,
    QuestionOut,
)
from speedlearn.schemas.rsvp import DisplayUnitDTO, TokenizeRequest, TokenizeResponse

__all__ = [
    # Passage schemas
    "Question",
    "Passage",
    "QuestionOut",
    "PassageOut",
    "PassageListItem",
    "Module",
    "ModuleOut",
    "ModuleListResponse",
    # Assessment schemas
    "SubmitAnswer",
    "SubmitRequest",
    "MetricsOut",
    "AnswerReviewOut",
    "PassageInfo",
    "SubmitResponse",
    # RSVP schemas
    "TokenizeRequest",
    "DisplayUnitDTO",
    "TokenizeResponse",
]
