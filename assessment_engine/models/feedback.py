"""
Session-level feedback models for the assessment engine
"""

from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from assessment_engine.models.question import ExperienceLevel
from assessment_engine.models.scoring import (
    StringList,
    TopThree,
    normalize_label,
    require_known_field,
)


class Recommendation(str, Enum):
    """Hiring recommendation for a completed session."""

    STRONGLY_RECOMMEND = "strongly_recommend"
    RECOMMEND = "recommend"
    NEUTRAL = "neutral"
    NOT_RECOMMEND = "not_recommend"
    STRONGLY_NOT_RECOMMEND = "strongly_not_recommend"


class QuestionRecord(BaseModel):
    """One asked question with the candidate's answer and its evaluation."""

    question: str
    answer: str = ""
    score: float | None = Field(default=None, ge=0, le=10)
    feedback: str = ""


class OverallFeedback(BaseModel):
    """Whole-session assessment and hiring recommendation."""

    overall_assessment: str = Field(..., min_length=1)
    strengths: TopThree = Field(default_factory=list)
    improvements: TopThree = Field(default_factory=list)
    recommendation: Annotated[Recommendation, BeforeValidator(normalize_label)]
    technical_feedback: str = ""


class CandidateProfile(BaseModel):
    """What the interviewer knows about the candidate in a live session."""

    name: str = "Candidate"
    skills: list[str] = Field(default_factory=list)
    experience: ExperienceLevel | None = None
    target_role: str | None = None
    interview_type: str = "technical"
    notes: str = ""


class InterviewerSuggestion(BaseModel):
    """Live guidance for an interviewer during a session."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    follow_up_questions: StringList = Field(default_factory=list)
    assessment_points: StringList = Field(default_factory=list)
    red_flags: StringList = Field(default_factory=list)
    strengths: StringList = Field(default_factory=list)
    next_topics: StringList = Field(default_factory=list)
    time_management_note: str = ""

    @model_validator(mode="before")
    @classmethod
    def _has_known_field(cls, data: Any) -> Any:
        return require_known_field(cls, data)
