"""
Core business logic modules for the assessment engine

Contains:
- Completion Client: Contract and HTTP client for the completion service
- Response Parser: Line-tagged and JSON decoders
- Fallbacks: Deterministic substitute results
- Assessment Orchestrator: Public question/evaluation/feedback operations
"""

from assessment_engine.core.assessment_orchestrator import AssessmentOrchestrator
from assessment_engine.core.completion_client import ChatCompletionClient, CompletionClient
from assessment_engine.core.errors import (
    AssessmentEngineError,
    CompletionError,
    QuestionGenerationError,
    ResponseParseError,
)

__all__ = [
    "AssessmentOrchestrator",
    "ChatCompletionClient",
    "CompletionClient",
    "AssessmentEngineError",
    "CompletionError",
    "QuestionGenerationError",
    "ResponseParseError",
]
