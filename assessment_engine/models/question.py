"""
Question and generation option models for the assessment engine.
"""

from enum import Enum
from typing import Annotated, Any

from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field

from assessment_engine.models.scoring import (
    Rating,
    StringList,
    TimeLimitMinutes,
    normalize_label,
)


class Difficulty(str, Enum):
    """Requested interview difficulty."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"

    @property
    def score(self) -> int:
        """Numeric difficulty (1-10) used on generated questions."""
        return {
            Difficulty.BEGINNER: 3,
            Difficulty.INTERMEDIATE: 5,
            Difficulty.ADVANCED: 7,
            Difficulty.EXPERT: 9,
        }[self]


class QuestionType(str, Enum):
    """Question type as stored on a Question."""

    TECHNICAL = "technical"
    BEHAVIORAL = "behavioral"


class RequestedQuestionType(str, Enum):
    """Question mix requested by the caller."""

    TECHNICAL = "technical"
    BEHAVIORAL = "behavioral"
    MIXED = "mixed"


class ExperienceLevel(str, Enum):
    """Candidate experience bracket in years."""

    FRESHER = "fresher"
    JUNIOR = "1-3"
    MID = "3-5"
    SENIOR = "5-10"
    VETERAN = "10+"


class InterviewMode(str, Enum):
    """How the interview is conducted."""

    ONLINE = "online"
    IN_PERSON = "in-person"


def _question_type(value: Any) -> Any:
    # Anything that is not clearly behavioral is asked as technical
    label = normalize_label(value)
    if label in ("behavioral", "behavioural"):
        return QuestionType.BEHAVIORAL
    return QuestionType.TECHNICAL


def _optional_text(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


def _skill(value: Any) -> Any:
    if value is None or (isinstance(value, str) and not value.strip()):
        return "general"
    return value


class GenerationOptions(BaseModel):
    """Caller configuration for question generation."""

    skills: list[str] = Field(
        default_factory=list,
        description="Skills to focus on (empty yields generic questions)"
    )
    resume_text: str | None = Field(
        default=None,
        description="Resume excerpt to tailor questions to"
    )
    difficulty: Difficulty = Difficulty.INTERMEDIATE
    question_count: int = Field(default=5, ge=1)
    question_type: RequestedQuestionType = RequestedQuestionType.TECHNICAL
    experience: ExperienceLevel = ExperienceLevel.FRESHER
    interview_mode: InterviewMode = InterviewMode.ONLINE
    duration_minutes: int = Field(default=30, ge=1)


class Question(BaseModel):
    """A single interview question. Immutable once generated."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    id: str = Field(..., description="Question ID")
    text: str = Field(..., min_length=1, description="The question text")
    type: Annotated[QuestionType, BeforeValidator(_question_type)] = QuestionType.TECHNICAL
    skill: Annotated[str, BeforeValidator(_skill)] = "general"
    difficulty_score: Rating = 5
    expected_keywords: StringList = Field(default_factory=list)
    time_limit_minutes: TimeLimitMinutes = 3.0
    assessment_criteria: StringList = Field(default_factory=list)
    expected_answer: str = Field(
        default="",
        description="Outline of a good answer, when the model supplied one"
    )


class OnlineQuestionPayload(BaseModel):
    """One element of the JSON array returned for online interview questions."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    id: Annotated[str | None, BeforeValidator(_optional_text)] = None
    question: str = Field(
        ..., min_length=1,
        validation_alias=AliasChoices("question", "text"),
    )
    type: Annotated[QuestionType, BeforeValidator(_question_type)] = QuestionType.TECHNICAL
    skill: Annotated[str, BeforeValidator(_skill)] = "general"
    difficulty: Rating = Field(
        default=5,
        validation_alias=AliasChoices("difficulty", "difficultyScore", "difficulty_score"),
    )
    expected_keywords: StringList = Field(
        default_factory=list,
        validation_alias=AliasChoices("expectedKeywords", "expected_keywords", "keywords"),
    )
    time_limit: TimeLimitMinutes = Field(
        default=3.0,
        validation_alias=AliasChoices("timeLimit", "time_limit", "timeLimitMinutes"),
    )
    assessment_criteria: StringList = Field(
        default_factory=list,
        validation_alias=AliasChoices("assessmentCriteria", "assessment_criteria", "criteria"),
    )

    def to_question(self, position: int) -> Question:
        """Convert to a Question, numbering it when the model gave no id."""
        return Question(
            id=self.id or f"q{position}",
            text=self.question,
            type=self.type,
            skill=self.skill,
            difficulty_score=self.difficulty,
            expected_keywords=self.expected_keywords,
            time_limit_minutes=self.time_limit,
            assessment_criteria=self.assessment_criteria,
        )
