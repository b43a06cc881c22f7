"""
Data models and schemas for the assessment engine

Contains Pydantic models for:
- Generation options and questions
- Answer evaluations and assessments
- Response analysis
- Session feedback and interviewer suggestions
"""

from assessment_engine.models.question import (
    Difficulty,
    ExperienceLevel,
    GenerationOptions,
    InterviewMode,
    OnlineQuestionPayload,
    Question,
    QuestionType,
    RequestedQuestionType,
)
from assessment_engine.models.evaluation import (
    AnswerAssessment,
    CommunicationQuality,
    ConfidenceLevel,
    EvaluationResult,
    ResponseAnalysis,
    Sentiment,
    SubScores,
)
from assessment_engine.models.feedback import (
    CandidateProfile,
    InterviewerSuggestion,
    OverallFeedback,
    QuestionRecord,
    Recommendation,
)

__all__ = [
    # Question
    "Difficulty",
    "ExperienceLevel",
    "GenerationOptions",
    "InterviewMode",
    "OnlineQuestionPayload",
    "Question",
    "QuestionType",
    "RequestedQuestionType",
    # Evaluation
    "AnswerAssessment",
    "CommunicationQuality",
    "ConfidenceLevel",
    "EvaluationResult",
    "ResponseAnalysis",
    "Sentiment",
    "SubScores",
    # Feedback
    "CandidateProfile",
    "InterviewerSuggestion",
    "OverallFeedback",
    "QuestionRecord",
    "Recommendation",
]
