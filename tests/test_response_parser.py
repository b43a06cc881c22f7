import pytest

from assessment_engine.core.errors import ResponseParseError
from assessment_engine.core.response_parser import (
    EVALUATION_DECODER,
    decode_json,
    match_tag,
    parse_evaluation,
    parse_followup_questions,
    parse_int,
    parse_question_blocks,
    split_items,
)
from assessment_engine.models.evaluation import ResponseAnalysis, Sentiment
from assessment_engine.models.question import OnlineQuestionPayload


EVALUATION_TEXT = """Score: 8
Technical Accuracy: 7
Communication: 9
Problem Solving: 6
Confidence: 8
Feedback: Good answer. Consider edge cases."""


class TestLineTaggedEvaluation:
    def test_round_trip_example(self):
        result = parse_evaluation(EVALUATION_TEXT)

        assert result.overall_score == 8
        assert result.sub_scores.technical_accuracy == 7
        assert result.sub_scores.communication == 9
        assert result.sub_scores.problem_solving == 6
        assert result.sub_scores.confidence == 8
        assert result.feedback == "Good answer. Consider edge cases."

    def test_missing_score_line_defaults_to_midpoint(self):
        result = parse_evaluation("The answer was fine overall.")

        assert result.overall_score == 5
        assert result.sub_scores.technical_accuracy == 5
        assert result.sub_scores.communication == 5
        assert result.sub_scores.problem_solving == 5
        assert result.sub_scores.confidence == 5
        assert result.feedback == ""

    def test_empty_text(self):
        result = parse_evaluation("")
        assert result.overall_score == 5

    def test_unparseable_score_defaults_to_midpoint(self):
        result = parse_evaluation("Score: excellent\nCommunication: n/a")
        assert result.overall_score == 5
        assert result.sub_scores.communication == 5

    def test_zero_is_kept(self):
        result = parse_evaluation("Score: 0")
        assert result.overall_score == 0

    @pytest.mark.parametrize("raw, expected", [
        ("Score: 8/10", 8),
        ("Score: 7.5", 7),
        ("Score: 14", 10),
        ("Score: -3", 0),
    ])
    def test_scores_are_parsed_and_clamped(self, raw, expected):
        assert parse_evaluation(raw).overall_score == expected

    def test_multi_line_feedback_is_joined(self):
        text = "Score: 6\nFeedback: Solid start.\nNeeds more depth on indexing.\n\nMention trade-offs."
        result = parse_evaluation(text)
        assert result.feedback == "Solid start. Needs more depth on indexing. Mention trade-offs."

    def test_feedback_before_scores_still_reads_scores(self):
        text = "Feedback: Clear explanation.\nScore: 9\nConfidence: 7"
        result = parse_evaluation(text)
        assert result.feedback == "Clear explanation."
        assert result.overall_score == 9
        assert result.sub_scores.confidence == 7

    def test_markdown_decorated_tags(self):
        text = "**Score:** 7\n- **Technical Accuracy**: 6\n## Feedback: Fine."
        result = parse_evaluation(text)
        assert result.overall_score == 7
        assert result.sub_scores.technical_accuracy == 6
        assert result.feedback == "Fine."

    def test_strengths_and_improvements(self):
        text = "Score: 7\nStrengths: Clear structure; Good examples\nImprovements: Discuss complexity"
        result = parse_evaluation(text)
        assert result.strengths == ["Clear structure", "Good examples"]
        assert result.improvements == ["Discuss complexity"]


class TestTagMatching:
    @pytest.mark.parametrize("line, tag, value", [
        ("Score: 8", "Score", "8"),
        ("score: 8", "Score", "8"),
        ("Technical Accuracy: 7", "Technical Accuracy", "7"),
        ("Communication: 9", "Communication", "9"),
        ("Problem Solving: 6", "Problem Solving", "6"),
        ("Confidence: 8", "Confidence", "8"),
        ("Feedback: Great", "Feedback", "Great"),
    ])
    def test_each_evaluation_tag(self, line, tag, value):
        assert match_tag(line, EVALUATION_DECODER.handlers) == (tag, value)

    def test_untagged_line(self):
        assert match_tag("  just prose  ", EVALUATION_DECODER.handlers) == (None, "just prose")

    def test_parse_int(self):
        assert parse_int(" 9 out of 10") == 9
        assert parse_int("") == 5
        assert parse_int("high", default=3) == 3

    def test_split_items(self):
        assert split_items("[a, b, c]") == ["a", "b", "c"]
        assert split_items("x, y; z") == ["x, y", "z"]
        assert split_items("") == []


class TestQuestionBlocks:
    def test_blocks_are_split_and_noise_dropped(self):
        text = """Here are your questions.

Q: What is a Python generator?
Expected: Lazy iteration with yield
Criteria: accuracy, examples
---
Some stray commentary without a question
---
Q: How do you index a SQL table?
Expected: B-tree indexes, selectivity
---
"""
        blocks = parse_question_blocks(text)

        assert len(blocks) == 2
        assert blocks[0] == {
            "text": "What is a Python generator?",
            "expected": "Lazy iteration with yield",
            "criteria": ["accuracy", "examples"],
            "type": "",
        }
        assert blocks[1]["text"] == "How do you index a SQL table?"
        assert blocks[1]["criteria"] == []

    def test_optional_type_tag(self):
        blocks = parse_question_blocks("Q: Tell me about a conflict.\nType: Behavioral\n---\nQ: What is a mutex?")
        assert [block["type"] for block in blocks] == ["Behavioral", ""]

    def test_empty_question_tag_is_dropped(self):
        assert parse_question_blocks("Q:   \nExpected: something") == []

    def test_no_blocks(self):
        assert parse_question_blocks("") == []


class TestFollowUps:
    def test_lines_are_cleaned(self):
        text = "1. How would this scale?\n\n- What about failures?\n   \nQ3: Why that design?"
        assert parse_followup_questions(text) == [
            "How would this scale?",
            "What about failures?",
            "Why that design?",
        ]

    def test_lead_in_lines_are_dropped(self):
        text = "Here are some follow-up questions:\n\n**Follow-ups:**\n1. How would you roll this back?\n2. Walk me through the failure modes."
        assert parse_followup_questions(text) == [
            "How would you roll this back?",
            "Walk me through the failure modes.",
        ]

    def test_empty(self):
        assert parse_followup_questions("") == []


class TestJsonDecoding:
    def test_valid_analysis(self):
        text = (
            '{"sentiment": "Positive", "confidence_level": "high", "clarity_score": 8, '
            '"keywords": ["python"], "communication_quality": "good"}'
        )
        analysis = decode_json(text, ResponseAnalysis)
        assert analysis.sentiment == Sentiment.POSITIVE
        assert analysis.clarity_score == 8

    def test_truncated_json_raises(self):
        with pytest.raises(ResponseParseError):
            decode_json('{"sentiment": "positive"', ResponseAnalysis)

    def test_prose_around_json_raises(self):
        text = 'Sure! Here you go: {"sentiment": "neutral"}'
        with pytest.raises(ResponseParseError):
            decode_json(text, ResponseAnalysis)

    def test_wrong_shape_raises(self):
        with pytest.raises(ResponseParseError):
            decode_json('["not", "an", "object"]', ResponseAnalysis)

    def test_invalid_enum_raises(self):
        text = (
            '{"sentiment": "ecstatic", "confidence_level": "high", "clarity_score": 8, '
            '"keywords": [], "communication_quality": "good"}'
        )
        with pytest.raises(ResponseParseError):
            decode_json(text, ResponseAnalysis)

    def test_list_schema(self):
        payloads = decode_json('[{"question": "Why?"}]', list[OnlineQuestionPayload])
        assert payloads[0].question == "Why?"

    def test_none_input_raises(self):
        with pytest.raises(ResponseParseError):
            decode_json(None, ResponseAnalysis)
