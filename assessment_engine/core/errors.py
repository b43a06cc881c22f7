"""
Exception types raised inside the assessment engine.

Only QuestionGenerationError ever reaches callers of the orchestrator;
the others are caught and converted into fallback results.
"""


class AssessmentEngineError(Exception):
    """Base class for engine errors."""


class CompletionError(AssessmentEngineError):
    """The completion service could not be reached or returned an error."""


class ResponseParseError(AssessmentEngineError):
    """Completion text did not decode into the expected structure."""


class QuestionGenerationError(AssessmentEngineError):
    """Question generation failed and no substitute question set applies."""
