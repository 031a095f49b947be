# Data models for generation requests and generated questions
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Any, List, Optional

from exam_generator.models.enums import Difficulty, Language, QuestionType


class QuestionCounts(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    open_ended: int = Field(0, ge=0, alias="open-ended")
    multiple_choice: int = Field(0, ge=0, alias="multiple-choice")
    true_false: int = Field(0, ge=0, alias="true-false")

    def for_type(self, question_type: QuestionType) -> int:
        return {
            QuestionType.OPEN_ENDED: self.open_ended,
            QuestionType.MULTIPLE_CHOICE: self.multiple_choice,
            QuestionType.TRUE_FALSE: self.true_false,
        }[question_type]

    def total(self) -> int:
        return self.open_ended + self.multiple_choice + self.true_false


class RegenerationTarget(BaseModel):
    index: int
    question_type: QuestionType


class GenerationRequest(BaseModel):
    """
    Body of POST /api/generate. A request carrying both regenerateIndex and
    regenerateQuestionType asks for a single replacement question.
    """
    model_config = ConfigDict(populate_by_name=True)

    subject: str
    topics: List[str] = Field(..., min_length=1)
    difficulty: Difficulty = Difficulty.MEDIUM
    language: Language = Language.EN
    question_counts: QuestionCounts = Field(default_factory=QuestionCounts, alias="questionCounts")
    regenerate_index: Optional[int] = Field(None, ge=0, alias="regenerateIndex")
    regenerate_question_type: Optional[QuestionType] = Field(None, alias="regenerateQuestionType")

    @model_validator(mode="after")
    def _check_regeneration_pair(self):
        if (self.regenerate_index is None) != (self.regenerate_question_type is None):
            raise ValueError("regenerateIndex and regenerateQuestionType must be given together")
        return self

    @property
    def regeneration_target(self) -> Optional[RegenerationTarget]:
        if self.regenerate_question_type is None:
            return None
        return RegenerationTarget(index=self.regenerate_index, question_type=self.regenerate_question_type)


class Question(BaseModel):
    """
    A generated question as rendered by the view and exporter.

    Built leniently from model output: missing text becomes "", extra keys
    are dropped and non-string answers are stringified.
    """
    model_config = ConfigDict(extra="ignore")

    type: str = QuestionType.OPEN_ENDED.value
    question: str = ""
    options: Optional[List[str]] = None  # multiple-choice only
    answer: str = ""

    @field_validator("question", "answer", mode="before")
    @classmethod
    def _to_text(cls, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, bool):
            return "True" if value else "False"
        return str(value)

    @field_validator("type", mode="before")
    @classmethod
    def _to_type(cls, value: Any) -> str:
        if value is None:
            return QuestionType.OPEN_ENDED.value
        if isinstance(value, QuestionType):
            return value.value
        return str(value)

    @field_validator("options", mode="before")
    @classmethod
    def _to_option_list(cls, value: Any) -> Optional[List[str]]:
        if value is None:
            return None
        if not isinstance(value, list):
            return [str(value)]
        return [str(option) for option in value]

    @classmethod
    def from_record(cls, record: Any) -> "Question":
        if not isinstance(record, dict):
            return cls(question=str(record))
        return cls.model_validate(record)


class GenerationResponse(BaseModel):
    # Records are passed through as parsed; see Question.from_record for rendering.
    questions: List[Any]


class ErrorResponse(BaseModel):
    error: str
