import logging

from assessment_engine import dependencies
from assessment_engine.config.logging_config import configure_logging
from assessment_engine.config.settings import Settings
from assessment_engine.core.assessment_orchestrator import AssessmentOrchestrator


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.completion_model == "gpt-3.5-turbo"
        assert settings.completion_base_url == "https://api.openai.com/v1"
        assert settings.langfuse_enabled is False

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("COMPLETION_MODEL", "gpt-4o-mini")
        monkeypatch.setenv("LANGFUSE_ENABLED", "true")

        settings = Settings(_env_file=None)

        assert settings.completion_model == "gpt-4o-mini"
        assert settings.langfuse_enabled is True


class TestLogging:
    def test_debug_mode_wins(self):
        assert configure_logging(Settings(_env_file=None, debug=True, log_level="ERROR")) == logging.DEBUG

    def test_named_level(self):
        assert configure_logging(Settings(_env_file=None, log_level="warning")) == logging.WARNING
        assert logging.getLogger("assessment_engine").level == logging.WARNING

    def test_unknown_level_uses_info(self):
        assert configure_logging(Settings(_env_file=None, log_level="chatty")) == logging.INFO


class TestDependencies:
    def test_langfuse_disabled(self):
        assert dependencies.build_langfuse(Settings(_env_file=None)) is None

    def test_langfuse_without_keys(self):
        settings = Settings(_env_file=None, langfuse_enabled=True)
        assert dependencies.build_langfuse(settings) is None

    async def test_singleton_and_cleanup(self, monkeypatch):
        settings = Settings(_env_file=None, completion_api_key="key", completion_model="injected-model")
        monkeypatch.setattr(dependencies, "get_settings", lambda: settings)

        first = dependencies.get_assessment_orchestrator()
        second = dependencies.get_assessment_orchestrator()

        assert first is second
        assert isinstance(first, AssessmentOrchestrator)
        assert first.model == "injected-model"
        assert first.completion_client.model == "injected-model"

        await dependencies.cleanup()
        assert dependencies._orchestrator is None
        assert dependencies.get_assessment_orchestrator() is not first
        await dependencies.cleanup()
