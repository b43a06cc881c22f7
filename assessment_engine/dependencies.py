"""
Engine Dependencies

Builds the shared orchestrator for the host application.
Manages singleton instances of core components.
"""

import logging

from langfuse import Langfuse

from assessment_engine.config.settings import Settings, get_settings
from assessment_engine.core.assessment_orchestrator import AssessmentOrchestrator
from assessment_engine.core.completion_client import ChatCompletionClient

logger = logging.getLogger(__name__)


# ============================================================================
# SINGLETON INSTANCES
# ============================================================================

_completion_client: ChatCompletionClient | None = None
_orchestrator: AssessmentOrchestrator | None = None


def build_langfuse(settings: Settings) -> Langfuse | None:
    """Create a Langfuse client when tracing is enabled and keyed."""
    if not settings.langfuse_enabled:
        return None
    if not (settings.langfuse_secret_key and settings.langfuse_public_key):
        logger.info("Langfuse keys not configured, tracing disabled")
        return None

    langfuse = Langfuse(
        secret_key=settings.langfuse_secret_key,
        public_key=settings.langfuse_public_key,
        host=settings.langfuse_base_url,
    )
    logger.info("Langfuse initialized for LLM observability")
    return langfuse


def get_assessment_orchestrator() -> AssessmentOrchestrator:
    """
    Get the assessment orchestrator singleton.

    Lazily initializes the completion client from settings.
    """
    global _completion_client, _orchestrator

    if _orchestrator is None:
        settings = get_settings()
        _completion_client = ChatCompletionClient(
            settings=settings,
            langfuse=build_langfuse(settings),
        )
        _orchestrator = AssessmentOrchestrator(
            completion_client=_completion_client,
            model=settings.completion_model,
        )

    return _orchestrator


async def cleanup():
    """Cleanup resources on shutdown."""
    global _completion_client, _orchestrator

    if _completion_client:
        await _completion_client.close()
        _completion_client = None

    _orchestrator = None
