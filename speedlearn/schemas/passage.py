"""Pydantic schemas for reading passages and their quiz questions."""

from pydantic import BaseModel, ConfigDict, Field

from speedlearn.models.enums import Difficulty


class SchemaBase(BaseModel):
    """Base schema accepting both snake_case and camelCase field names."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class Question(SchemaBase):
    id: str
    stem: str
    options: list[str] = Field(default_factory=list)
    answer: str


class Passage(SchemaBase):
    id: str
    title: str
    category: str = "general"
    difficulty: Difficulty = Difficulty.MEDIUM
    text: str = Field(..., min_length=1)
    word_count: int = Field(..., ge=1, alias="wordCount")
    ideal_wpm: float = Field(..., gt=0, alias="idealWPM")
    estimated_reading_time: int | None = Field(None, alias="estimatedReadingTime")
    questions: list[Question] = Field(default_factory=list)


class QuestionOut(SchemaBase):
    """A question as shown to the reader, without its answer."""

    id: str
    stem: str
    options: list[str]


class PassageOut(SchemaBase):
    id: str
    title: str
    category: str
    difficulty: Difficulty
    text: str
    word_count: int
    ideal_wpm: float
    estimated_reading_time: int | None
    questions: list[QuestionOut]


class PassageListItem(SchemaBase):
    id: str
    title: str
    category: str
    difficulty: Difficulty
    word_count: int


class Module(SchemaBase):
    """A themed group of passages a reader can choose from."""

    id: str
    name: str
    description: str = ""
    passage_ids: list[str] = Field(default_factory=list, alias="passageIds")
    difficulties: list[Difficulty] = Field(default_factory=list)


class ModuleOut(SchemaBase):
    id: str
    name: str
    description: str
    difficulties: list[Difficulty]


class ModuleListResponse(BaseModel):
    modules: list[ModuleOut]
    total: int
