"""
lexhook logger: console (plain or JSON) + optional rotating JSON file.

Usage:
    from lexhook.core.logger import LoggerConfig, configure, get_logger

    # Configure once at startup (the Lambda adapter does this for you)
    configure(LoggerConfig(level="DEBUG"))

    # Or from env: LEXHOOK_LOG_LEVEL, LEXHOOK_LOG_DIR, LEXHOOK_LOG_CONSOLE_JSON, ...
    configure()

    logger = get_logger(__name__)
    logger.info("Started")
"""
from lexhook.core.logger.config import LoggerConfig
from lexhook.core.logger.formatters import JsonFormatter, PlainConsoleFormatter
from lexhook.core.logger.setup import configure, get_logger, is_configured

__all__ = [
    "LoggerConfig",
    "JsonFormatter",
    "PlainConsoleFormatter",
    "configure",
    "get_logger",
    "is_configured",
]
