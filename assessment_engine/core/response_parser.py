"""
Response Parser for the assessment engine

Decodes raw completion text into engine models:
- Line-tagged text (Q:, Expected:, Score:, Feedback: ...) via a
  table-driven tokenizer, for questions and single-answer evaluations
- Whole-text JSON validated against a pydantic schema, for analysis,
  assessments, session feedback, online questions and suggestions

Decoders are pure. Shape problems raise ResponseParseError so the caller
can substitute a fallback.
"""

import json
import re
from functools import lru_cache
from typing import Any, Callable, TypeVar

from pydantic import TypeAdapter, ValidationError

from assessment_engine.core.errors import ResponseParseError
from assessment_engine.models.evaluation import EvaluationResult, SubScores
from assessment_engine.models.scoring import MIDPOINT_SCORE

T = TypeVar("T")

TagHandler = Callable[[dict[str, Any], str], None]

BLOCK_DELIMITER = re.compile(r"^\s*-{3,}\s*$", re.MULTILINE)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LIST_MARKER = re.compile(r"^\s*(?:[-*•]+|\d+[.)]|Q\d*[:.)])\s*")


# =============================================================================
# FIELD HELPERS
# =============================================================================

def parse_int(value: str, default: int = MIDPOINT_SCORE) -> int:
    """Parse the leading base-10 integer of a field value ("8/10" -> 8)."""
    match = _LEADING_INT.match(value or "")
    if not match:
        return default
    return int(match.group(1))


def split_items(value: str) -> list[str]:
    """Split a tagged list value on semicolons, or commas when there are none."""
    value = value.strip().strip("[]")
    separator = ";" if ";" in value else ","
    return [item.strip() for item in value.split(separator) if item.strip()]


def match_tag(line: str, tags) -> tuple[str | None, str]:
    """
    Match a line against a tag vocabulary.

    Tags match case-insensitively after list bullets and markdown bold are
    removed, so "- **Score:** 8" is read as Score with value "8".

    Returns:
        (tag, value) for a tagged line, (None, stripped line) otherwise
    """
    cleaned = line.strip().replace("**", "").lstrip("-*#> ").strip()
    lowered = cleaned.lower()
    for tag in tags:
        prefix = f"{tag.lower()}:"
        if lowered.startswith(prefix):
            return tag, cleaned[len(prefix):].strip()
    return None, line.strip()


# =============================================================================
# LINE-TAGGED DECODING
# =============================================================================

class LineTaggedDecoder:
    """
    Extracts named fields from semi-structured text with a known tag vocabulary.

    Each tag maps to a handler that writes into a field dict. Once a
    multi-line tag has been seen, untagged non-empty lines are passed to
    that tag's handler as continuation text.
    """

    def __init__(self, handlers: dict[str, TagHandler], multiline_tags: tuple[str, ...] = ()):
        self.handlers = handlers
        self.multiline_tags = multiline_tags

    def decode(self, text: str) -> dict[str, Any]:
        fields: dict[str, Any] = {}
        open_tag = None

        for line in text.splitlines():
            tag, value = match_tag(line, self.handlers)
            if tag is not None:
                self.handlers[tag](fields, value)
                if tag in self.multiline_tags:
                    open_tag = tag
            elif open_tag is not None and value:
                self.handlers[open_tag](fields, value)

        return fields


def _set_text(name: str) -> TagHandler:
    def handler(fields: dict[str, Any], value: str) -> None:
        fields[name] = value
    return handler


def _set_int(name: str) -> TagHandler:
    def handler(fields: dict[str, Any], value: str) -> None:
        fields[name] = parse_int(value)
    return handler


def _set_items(name: str) -> TagHandler:
    def handler(fields: dict[str, Any], value: str) -> None:
        fields[name] = split_items(value)
    return handler


def _append_text(name: str) -> TagHandler:
    def handler(fields: dict[str, Any], value: str) -> None:
        if value:
            fields.setdefault(name, []).append(value)
    return handler


QUESTION_DECODER = LineTaggedDecoder({
    "Q": _set_text("text"),
    "Expected": _set_text("expected"),
    "Criteria": _set_items("criteria"),
    "Type": _set_text("type"),
})

EVALUATION_DECODER = LineTaggedDecoder(
    {
        "Score": _set_int("overall_score"),
        "Technical Accuracy": _set_int("technical_accuracy"),
        "Communication": _set_int("communication"),
        "Problem Solving": _set_int("problem_solving"),
        "Confidence": _set_int("confidence"),
        "Strengths": _set_items("strengths"),
        "Improvements": _set_items("improvements"),
        "Feedback": _append_text("feedback"),
    },
    multiline_tags=("Feedback",),
)


def parse_question_blocks(text: str) -> list[dict[str, Any]]:
    """
    Parse line-tagged question blocks separated by --- lines.

    Blocks without a Q: line are formatting noise and are dropped.

    Returns:
        Dicts with "text", "expected", "criteria" and "type" keys
    """
    blocks = []
    for block in BLOCK_DELIMITER.split(text or ""):
        if not block.strip():
            continue
        fields = QUESTION_DECODER.decode(block)
        if not fields.get("text"):
            continue
        blocks.append({
            "text": fields["text"],
            "expected": fields.get("expected", ""),
            "criteria": fields.get("criteria", []),
            "type": fields.get("type", ""),
        })
    return blocks


def parse_evaluation(text: str) -> EvaluationResult:
    """Parse a line-tagged evaluation; missing scores default to the midpoint."""
    fields = EVALUATION_DECODER.decode(text or "")

    return EvaluationResult(
        overall_score=fields.get("overall_score", MIDPOINT_SCORE),
        sub_scores=SubScores(
            technical_accuracy=fields.get("technical_accuracy", MIDPOINT_SCORE),
            communication=fields.get("communication", MIDPOINT_SCORE),
            problem_solving=fields.get("problem_solving", MIDPOINT_SCORE),
            confidence=fields.get("confidence", MIDPOINT_SCORE),
        ),
        feedback=" ".join(fields.get("feedback", [])).strip(),
        strengths=fields.get("strengths", []),
        improvements=fields.get("improvements", []),
    )


def parse_followup_questions(text: str) -> list[str]:
    """
    One follow-up question per non-empty line, list markers removed.

    Lead-in lines ending in a colon ("Here are some follow-ups:") are
    dropped. Lines without a question mark are kept, since prompts such
    as "Walk me through the rollback." are valid follow-ups.
    """
    questions = []
    for line in (text or "").splitlines():
        question = _LIST_MARKER.sub("", line).strip().replace("**", "").strip()
        if question and not question.endswith(":"):
            questions.append(question)
    return questions


# =============================================================================
# EMBEDDED-JSON DECODING
# =============================================================================

@lru_cache(maxsize=None)
def _adapter(schema: Any) -> TypeAdapter:
    return TypeAdapter(schema)


def decode_json(text: str, schema: type[T]) -> T:
    """
    Parse the whole completion text as JSON and validate it against schema.

    No attempt is made to recover JSON embedded in prose or truncated.

    Raises:
        ResponseParseError: If the text is not JSON or has the wrong shape
    """
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as e:
        raise ResponseParseError(f"Completion is not valid JSON: {e}") from e

    try:
        return _adapter(schema).validate_python(data)
    except ValidationError as e:
        raise ResponseParseError(
            f"Completion JSON does not match {getattr(schema, '__name__', schema)}: "
            f"{e.error_count()} error(s)"
        ) from e
