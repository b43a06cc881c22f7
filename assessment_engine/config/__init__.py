"""Configuration and logging setup for the assessment engine."""

from assessment_engine.config.settings import Settings, get_settings
from assessment_engine.config.logging_config import configure_logging

__all__ = ["Settings", "get_settings", "configure_logging"]
