"""
Evaluation models for the assessment engine

Defines the scoring structures returned for single answers: line-tagged
evaluations, criteria-based assessments and communication analysis.
"""

from enum import Enum
from typing import Annotated, Any

from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from assessment_engine.models.scoring import (
    Percent,
    Rating,
    Score,
    StringList,
    normalize_label,
    require_known_field,
)


class Sentiment(str, Enum):
    """Overall tone of a response."""

    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class ConfidenceLevel(str, Enum):
    """How confident the candidate sounded."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class CommunicationQuality(str, Enum):
    """Qualitative communication rating."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class SubScores(BaseModel):
    """Per-dimension scores for an evaluated answer (each 0-10)."""

    technical_accuracy: Score = 5
    communication: Score = 5
    problem_solving: Score = 5
    confidence: Score = 5


class EvaluationResult(BaseModel):
    """Score and feedback for a single answer."""

    overall_score: Score = 5
    sub_scores: SubScores = Field(default_factory=SubScores)
    feedback: str = ""
    strengths: StringList = Field(default_factory=list)
    improvements: StringList = Field(default_factory=list)


def _criteria_map(value: Any) -> Any:
    if value is None:
        return {}
    return value


class AnswerAssessment(BaseModel):
    """Criteria-based assessment of an online interview answer."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    overall_score: Score = 5
    criteria_scores: Annotated[dict[str, Score], BeforeValidator(_criteria_map)] = Field(
        default_factory=dict
    )
    strengths: StringList = Field(default_factory=list)
    improvements: StringList = Field(default_factory=list)
    feedback: str = ""
    keyword_match_percent: Percent = Field(
        default=50,
        validation_alias=AliasChoices(
            "keywordMatch", "keywordMatchPercent", "keyword_match", "keyword_match_percent"
        ),
    )

    @model_validator(mode="before")
    @classmethod
    def _has_known_field(cls, data: Any) -> Any:
        return require_known_field(cls, data)


class ResponseAnalysis(BaseModel):
    """Sentiment, confidence and clarity analysis of an answer."""

    sentiment: Annotated[Sentiment, BeforeValidator(normalize_label)]
    confidence_level: Annotated[ConfidenceLevel, BeforeValidator(normalize_label)]
    clarity_score: Rating = 5
    keywords: StringList = Field(default_factory=list)
    communication_quality: Annotated[CommunicationQuality, BeforeValidator(normalize_label)]
