"""Pydantic schemas for assessment submission endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from speedlearn.models.enums import Difficulty, PerformanceLevel


class SchemaBase(BaseModel):
    """Base schema with ORM attribute support."""

    model_config = ConfigDict(from_attributes=True)


class SubmitAnswer(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    question_id: str = Field(..., alias="questionId")
    selected_option: str = Field(..., alias="selectedOption")


class SubmitRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    passage_id: str = Field(..., alias="passageId")
    reading_time_seconds: float = Field(..., alias="readingTimeSeconds")
    answers: list[SubmitAnswer] = Field(default_factory=list)


class MetricsOut(SchemaBase):
    wpm: int
    accuracy: int
    retention: int
    speed_learning_score: int


class AnswerReviewOut(SchemaBase):
    question_id: str
    selected_option: str
    correct_answer: str | None
    is_correct: bool


class PassageInfo(BaseModel):
    id: str
    title: str
    difficulty: Difficulty


class SubmitResponse(BaseModel):
    metrics: MetricsOut
    feedback: str
    level: PerformanceLevel
    answer_review: list[AnswerReviewOut]
    passage_info: PassageInfo
