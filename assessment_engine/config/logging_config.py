"""
Logging setup for applications embedding the engine.

The engine modules only create module loggers; the host application
decides whether to call configure_logging at startup.
"""

import logging

from assessment_engine.config.settings import Settings, get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: Settings | None = None) -> int:
    """
    Configure root logging from settings.

    Debug mode always logs at DEBUG regardless of log_level.

    Returns:
        The numeric level that was applied
    """
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("assessment_engine").setLevel(level)
    return level
