"""Pydantic schemas for RSVP tokenization preview endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class SchemaBase(BaseModel):
    """Base schema with ORM attribute support."""

    model_config = ConfigDict(from_attributes=True)


class TokenizeRequest(BaseModel):
    text: str = Field(..., min_length=1)
    wpm: int | None = Field(None, ge=100, le=1500)


class DisplayUnitDTO(SchemaBase):
    sequence_index: int
    text: str
    is_sentence_final: bool
    is_punctuation_only: bool
    orp_index: int
    before: str
    focus: str
    after: str
    delay_ms: int


class TokenizeResponse(BaseModel):
    wpm: int
    total_words: int
    estimated_ms: int
    estimated_time: str
    units: list[DisplayUnitDTO]
