"""
Completion Client for the assessment engine

Defines the narrow contract the orchestrator consumes (system role, user
prompt, temperature, max tokens in; completion text out) and a concrete
client for OpenAI-compatible chat completion endpoints.

Integrated with Langfuse for observability and tracing.
"""

import logging
from typing import Any, Protocol

import httpx
from langfuse import Langfuse

from assessment_engine.config.settings import Settings, get_settings
from assessment_engine.core.errors import CompletionError

logger = logging.getLogger(__name__)


class CompletionClient(Protocol):
    """Anything that can turn a prompt into completion text."""

    async def complete(
        self,
        system_role: str,
        user_prompt: str,
        temperature: float,
        max_output_tokens: int,
        *,
        model: str | None = None,
    ) -> str:
        """Return completion text or raise CompletionError."""
        ...


class ChatCompletionClient:
    """
    Chat completions over HTTP.

    Does not retry, rate-limit or cache: one call to complete() is
    exactly one POST to the completion service.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        model: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        langfuse: Langfuse | None = None,
    ):
        """
        Initialize the client.

        Args:
            settings: Engine settings (defaults to environment settings)
            model: Default model identifier for requests
            http_client: Pre-built HTTP client, mainly for tests
            langfuse: Langfuse client for tracing, or None to disable
        """
        self.settings = settings or get_settings()
        self.model = model or self.settings.completion_model

        self.client = http_client or httpx.AsyncClient(
            base_url=self.settings.completion_base_url.rstrip("/"),
            headers={
                "Authorization": f"Bearer {self.settings.completion_api_key}",
                "Content-Type": "application/json",
            },
            timeout=self.settings.completion_timeout_seconds,
        )
        self.langfuse = langfuse

    async def close(self):
        """Close the HTTP client and flush Langfuse."""
        await self.client.aclose()
        if self.langfuse:
            try:
                self.langfuse.flush()
            except Exception as e:
                logger.warning(f"Failed to flush Langfuse: {e}")

    # =========================================================================
    # COMPLETION
    # =========================================================================

    async def complete(
        self,
        system_role: str,
        user_prompt: str,
        temperature: float,
        max_output_tokens: int,
        *,
        model: str | None = None,
    ) -> str:
        """
        Send one chat completion request.

        Args:
            system_role: System instruction for the model
            user_prompt: The prompt to send
            temperature: Sampling temperature (0-1)
            max_output_tokens: Maximum tokens in response
            model: Override for the default model

        Returns:
            Model response text

        Raises:
            CompletionError: On transport failure, error status or a
                response body without completion text
        """
        model_name = model or self.model
        payload = {
            "model": model_name,
            "messages": [
                {"role": "system", "content": system_role},
                {"role": "user", "content": user_prompt},
            ],
            "temperature": temperature,
            "max_tokens": max_output_tokens,
        }

        generation = self._start_generation(payload)

        try:
            response = await self.client.post("/chat/completions", json=payload)
            response.raise_for_status()
            result = response.json()
        except httpx.HTTPError as e:
            logger.error(f"Completion API error: {e}")
            self._end_generation(generation, error=str(e))
            raise CompletionError(f"Completion request failed: {e}") from e
        except ValueError as e:
            logger.error(f"Completion API returned a non-JSON body: {e}")
            self._end_generation(generation, error=str(e))
            raise CompletionError("Completion response was not JSON") from e

        try:
            content = self._extract_content(result)
        except CompletionError as e:
            self._end_generation(generation, error=str(e))
            raise

        self._end_generation(generation, output=content)
        return content

    def _extract_content(self, result: Any) -> str:
        """Extract text content from API response, handling list/dict formats."""
        if not isinstance(result, dict):
            raise CompletionError("Completion response is not an object")

        choices = result.get("choices")
        if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
            raise CompletionError("Completion response has no choices")

        message = choices[0].get("message") or {}
        content = message.get("content") if isinstance(message, dict) else None

        # Handle case where content is a list (multi-part response)
        if isinstance(content, list):
            text_parts = []
            for part in content:
                if isinstance(part, str):
                    text_parts.append(part)
                elif isinstance(part, dict) and "text" in part:
                    text_parts.append(part["text"])
            content = "".join(text_parts)

        if content is None:
            return ""
        return content if isinstance(content, str) else str(content)

    # =========================================================================
    # TRACING
    # =========================================================================

    def _start_generation(self, payload: dict[str, Any]):
        """Open a Langfuse generation for one request, if tracing is on."""
        if not self.langfuse:
            return None
        try:
            return self.langfuse.start_generation(
                name="chat_completion",
                model=payload["model"],
                input=payload["messages"],
                model_parameters={
                    "temperature": payload["temperature"],
                    "max_tokens": payload["max_tokens"],
                },
            )
        except Exception as e:
            logger.warning(f"Langfuse generation start failed: {e}")
            return None

    def _end_generation(self, generation, output: str | None = None, error: str | None = None):
        """Record the outcome on a Langfuse generation and close it."""
        if generation is None:
            return
        try:
            if error is not None:
                generation.update(level="ERROR", status_message=error)
            else:
                generation.update(output=output)
            generation.end()
        except Exception as e:
            logger.warning(f"Langfuse generation end failed: {e}")
