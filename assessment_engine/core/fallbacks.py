"""
Fallback results for the assessment engine

Deterministic substitutes returned when the completion service fails or
its output cannot be decoded. Every function is pure: the same inputs
always produce equal results, and every result is a complete, valid model.
"""

import re

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
    InterviewerSuggestion,
    OverallFeedback,
    Recommendation,
)
from assessment_engine.models.question import Difficulty, Question, QuestionType
from assessment_engine.models.scoring import MIDPOINT_SCORE

DEFAULT_ASSESSMENT_CRITERIA = (
    "technical_accuracy",
    "completeness",
    "communication",
    "problem_solving",
)

# Skill-specific questions used to pad the generic pair up to the requested count
SKILL_QUESTION_TEMPLATES = (
    "How have you applied {skill} in a recent project, and what trade-offs did you face?",
    "What are common pitfalls when working with {skill}, and how do you avoid them?",
)

EXTRA_GENERIC_QUESTIONS = (
    (QuestionType.BEHAVIORAL, "learning", "Tell me about a time you had to learn a new technology quickly."),
    (QuestionType.TECHNICAL, "debugging", "Walk me through your approach to debugging a complex issue you had not seen before."),
    (QuestionType.BEHAVIORAL, "teamwork", "Describe how you handle disagreements about technical decisions within a team."),
)


# =============================================================================
# QUESTIONS
# =============================================================================

def fallback_questions(skills: list[str], difficulty: Difficulty, count: int) -> list[Question]:
    """
    Canonical question set for a skill list.

    Starts with a generic behavioral and a generic technical question, then
    pads with skill-specific and extra generic questions. The result holds
    at most ``count`` questions.
    """
    if count < 1:
        return []

    questions = [
        Question(
            id="fallback1",
            text="Tell me about your experience with the technologies in your profile.",
            type=QuestionType.BEHAVIORAL,
            skill="general",
            difficulty_score=3,
            expected_keywords=list(skills),
            time_limit_minutes=3,
            assessment_criteria=["communication", "relevance"],
        ),
        Question(
            id="fallback2",
            text="Describe a challenging technical problem you solved recently.",
            type=QuestionType.TECHNICAL,
            skill="problem_solving",
            difficulty_score=5,
            expected_keywords=["problem", "solution", "approach"],
            time_limit_minutes=4,
            assessment_criteria=["problem_solving", "technical_accuracy"],
        ),
    ]

    for template in SKILL_QUESTION_TEMPLATES:
        for skill in skills:
            if len(questions) >= count:
                break
            questions.append(Question(
                id=f"fallback{len(questions) + 1}",
                text=template.format(skill=skill),
                type=QuestionType.TECHNICAL,
                skill=skill,
                difficulty_score=difficulty.score,
                expected_keywords=[skill],
                time_limit_minutes=3,
                assessment_criteria=["technical_accuracy", "problem_solving"],
            ))

    for question_type, skill, text in EXTRA_GENERIC_QUESTIONS:
        if len(questions) >= count:
            break
        questions.append(Question(
            id=f"fallback{len(questions) + 1}",
            text=text,
            type=question_type,
            skill=skill,
            difficulty_score=difficulty.score,
            time_limit_minutes=3,
            assessment_criteria=["communication", "problem_solving"],
        ))

    return questions[:count]


# =============================================================================
# ANSWER SCORING
# =============================================================================

def fallback_evaluation() -> EvaluationResult:
    """Neutral evaluation used when an answer could not be scored."""
    return EvaluationResult(
        overall_score=MIDPOINT_SCORE,
        sub_scores=SubScores(),
        feedback="Automatic evaluation is unavailable right now. Please review this answer manually.",
        strengths=["Attempted to answer the question"],
        improvements=["Could provide more specific examples"],
    )


def _criterion_key(criterion: str) -> str:
    return re.sub(r"[^a-z0-9]+", "_", criterion.strip().lower()).strip("_")


def keyword_match_percent(answer: str, expected_keywords: list[str]) -> int:
    """Share of expected keywords present in the answer, as 0-100."""
    keywords = [k.strip().lower() for k in expected_keywords if k and k.strip()]
    if not keywords:
        return 50
    text = (answer or "").lower()
    matched = sum(1 for keyword in keywords if keyword in text)
    return round(matched * 100 / len(keywords))


def fallback_assessment(
    criteria: list[str] | None = None,
    answer: str = "",
    expected_keywords: list[str] | None = None,
) -> AnswerAssessment:
    """
    Neutral assessment scoring every criterion at the midpoint.

    The default criteria are always present; caller criteria are added
    under snake_case keys.
    """
    scores = {name: float(MIDPOINT_SCORE) for name in DEFAULT_ASSESSMENT_CRITERIA}
    for criterion in criteria or []:
        key = _criterion_key(criterion)
        if key:
            scores.setdefault(key, float(MIDPOINT_SCORE))

    return AnswerAssessment(
        overall_score=MIDPOINT_SCORE,
        criteria_scores=scores,
        strengths=["Attempted to answer the question"],
        improvements=["Could provide more specific examples"],
        feedback="Please provide more detailed responses with specific examples.",
        keyword_match_percent=keyword_match_percent(answer, expected_keywords or []),
    )


def fallback_analysis() -> ResponseAnalysis:
    """Neutral communication analysis."""
    return ResponseAnalysis(
        sentiment=Sentiment.NEUTRAL,
        confidence_level=ConfidenceLevel.MEDIUM,
        clarity_score=MIDPOINT_SCORE,
        keywords=[],
        communication_quality=CommunicationQuality.FAIR,
    )


# =============================================================================
# SESSION
# =============================================================================

def fallback_overall_feedback() -> OverallFeedback:
    """Neutral session feedback pointing at per-question results."""
    return OverallFeedback(
        overall_assessment="Unable to generate comprehensive feedback due to system error.",
        strengths=["Participated in the interview"],
        improvements=["Review technical concepts"],
        recommendation=Recommendation.NEUTRAL,
        technical_feedback="Please review individual question feedback.",
    )


def fallback_suggestions() -> InterviewerSuggestion:
    """Generic guidance for an interviewer in a live session."""
    return InterviewerSuggestion(
        follow_up_questions=[
            "Can you walk me through a specific example from your experience?",
            "What challenges did you face and how did you overcome them?",
            "How would you approach this differently today?",
        ],
        assessment_points=[
            "Evaluate the candidate's problem-solving approach and technical depth.",
            "Observe the candidate's communication style and confidence level.",
        ],
        red_flags=[],
        strengths=[],
        next_topics=[
            "Practical problem-solving",
            "Teamwork and collaboration",
        ],
        time_management_note="Keep an eye on the clock and leave a few minutes for the candidate's questions.",
    )
