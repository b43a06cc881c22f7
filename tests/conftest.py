"""Shared fixtures: a scripted completion client and an orchestrator using it."""

import pytest

from assessment_engine.core.assessment_orchestrator import AssessmentOrchestrator


class StubCompletionClient:
    """Returns a canned completion (or raises) and records every request."""

    def __init__(self, response: str = "", error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls = []

    async def complete(self, system_role, user_prompt, temperature, max_output_tokens, *, model=None):
        self.calls.append({
            "system_role": system_role,
            "user_prompt": user_prompt,
            "temperature": temperature,
            "max_output_tokens": max_output_tokens,
            "model": model,
        })
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def stub_client():
    return StubCompletionClient()


@pytest.fixture
def orchestrator(stub_client):
    return AssessmentOrchestrator(completion_client=stub_client, model="test-model")
