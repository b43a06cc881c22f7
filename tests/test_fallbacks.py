import pytest

from assessment_engine.core.fallbacks import (
    DEFAULT_ASSESSMENT_CRITERIA,
    fallback_analysis,
    fallback_assessment,
    fallback_evaluation,
    fallback_overall_feedback,
    fallback_questions,
    fallback_suggestions,
    keyword_match_percent,
)
from assessment_engine.models.evaluation import CommunicationQuality, ConfidenceLevel, Sentiment
from assessment_engine.models.feedback import Recommendation
from assessment_engine.models.question import Difficulty, QuestionType


class TestFallbackQuestions:
    def test_generic_pair_covers_both_types(self):
        questions = fallback_questions([], Difficulty.INTERMEDIATE, 2)

        assert [q.id for q in questions] == ["fallback1", "fallback2"]
        assert {q.type for q in questions} == {QuestionType.BEHAVIORAL, QuestionType.TECHNICAL}

    def test_truncated_to_count(self):
        assert len(fallback_questions(["Python"], Difficulty.BEGINNER, 1)) == 1

    def test_padded_with_skill_questions(self):
        questions = fallback_questions(["Python", "SQL"], Difficulty.ADVANCED, 5)

        assert len(questions) == 5
        assert len({q.text for q in questions}) == 5
        assert questions[2].skill == "Python"
        assert questions[3].skill == "SQL"
        assert questions[2].difficulty_score == Difficulty.ADVANCED.score

    @pytest.mark.parametrize("skills, count", [
        ([], 1), ([], 20), (["Go"], 3), (["Go", "Rust", "Kotlin"], 50),
    ])
    def test_never_exceeds_count_and_stays_valid(self, skills, count):
        questions = fallback_questions(skills, Difficulty.EXPERT, count)

        assert 1 <= len(questions) <= count
        for q in questions:
            assert q.text
            assert 1 <= q.difficulty_score <= 10
            assert q.time_limit_minutes > 0

    def test_zero_count(self):
        assert fallback_questions(["Go"], Difficulty.EXPERT, 0) == []

    def test_first_question_expects_profile_skills(self):
        questions = fallback_questions(["Docker", "AWS"], Difficulty.INTERMEDIATE, 2)
        assert questions[0].expected_keywords == ["Docker", "AWS"]

    def test_deterministic(self):
        first = fallback_questions(["Java"], Difficulty.ADVANCED, 4)
        second = fallback_questions(["Java"], Difficulty.ADVANCED, 4)
        assert first == second


class TestFallbackScoring:
    def test_evaluation_is_pure(self):
        assert fallback_evaluation() == fallback_evaluation()
        assert fallback_evaluation().model_dump() == fallback_evaluation().model_dump()

    def test_evaluation_midpoints(self):
        result = fallback_evaluation()
        assert result.overall_score == 5
        assert result.sub_scores.model_dump() == {
            "technical_accuracy": 5,
            "communication": 5,
            "problem_solving": 5,
            "confidence": 5,
        }

    def test_assessment_has_default_and_caller_criteria(self):
        result = fallback_assessment(["Code Quality", "communication"])

        for name in DEFAULT_ASSESSMENT_CRITERIA:
            assert result.criteria_scores[name] == 5
        assert result.criteria_scores["code_quality"] == 5
        assert result.overall_score == 5
        assert result.keyword_match_percent == 50

    def test_assessment_keyword_match_from_answer(self):
        result = fallback_assessment([], "I used Python and Docker", ["python", "docker", "kubernetes", "aws"])
        assert result.keyword_match_percent == 50
        assert isinstance(result.keyword_match_percent, int)

    def test_keyword_match_percent(self):
        assert keyword_match_percent("Spark and Kafka", ["spark", "kafka", "flink"]) == 67
        assert keyword_match_percent("anything", []) == 50
        assert keyword_match_percent("", ["sql"]) == 0

    def test_analysis(self):
        result = fallback_analysis()
        assert result.sentiment == Sentiment.NEUTRAL
        assert result.confidence_level == ConfidenceLevel.MEDIUM
        assert result.clarity_score == 5
        assert result.keywords == []
        assert result.communication_quality == CommunicationQuality.FAIR


class TestFallbackSession:
    def test_overall_feedback(self):
        result = fallback_overall_feedback()
        assert result.recommendation == Recommendation.NEUTRAL
        assert len(result.strengths) <= 3
        assert result.overall_assessment

    def test_suggestions(self):
        result = fallback_suggestions()
        assert len(result.follow_up_questions) == 3
        assert len(result.assessment_points) == 2
        assert result.red_flags == []
        assert result.time_management_note
        assert fallback_suggestions() == result
