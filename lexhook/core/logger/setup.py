"""
Logger setup: attach console and rotating file (JSON) handlers from config.
"""
from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from lexhook.core.logger.config import LoggerConfig
from lexhook.core.logger.formatters import JsonFormatter, PlainConsoleFormatter

# Set by configure(); get_logger() configures from env on first use otherwise
_default_config: Optional[LoggerConfig] = None


def configure(config: Optional[LoggerConfig] = None) -> None:
    """
    Configure the lexhook root logger with the given config.
    If config is None, uses LoggerConfig.from_env().
    Safe to call again (e.g. on every Lambda cold start or in tests).
    """
    global _default_config
    if config is None:
        config = LoggerConfig.from_env()
    _default_config = config

    level = getattr(logging, config.level.upper(), logging.INFO)
    root = logging.getLogger(config.root_name or "lexhook")
    root.setLevel(level)

    # Avoid duplicate handlers when reconfigured
    for handler in root.handlers:
        handler.close()
    root.handlers.clear()

    if config.console:
        console = logging.StreamHandler()
        console.setLevel(level)
        console.setFormatter(JsonFormatter() if config.console_json else PlainConsoleFormatter())
        root.addHandler(console)

    if config.file_rotating and config.log_dir and config.log_dir.strip():
        try:
            os.makedirs(config.log_dir, exist_ok=True)
        except OSError:
            root.warning("Could not create log dir %s, skipping file handler", config.log_dir)
        else:
            path = os.path.join(config.log_dir, f"{config.log_file_basename}.log")
            file_handler = RotatingFileHandler(
                path,
                maxBytes=config.max_bytes,
                backupCount=config.backup_count,
                encoding="utf-8",
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(JsonFormatter())
            root.addHandler(file_handler)

    root.propagate = False


def is_configured() -> bool:
    return _default_config is not None


def get_logger(name: str, config: Optional[LoggerConfig] = None) -> logging.Logger:
    """
    Return a logger for the given name, configuring the root on first use.
    Pass ``__name__`` from lexhook modules so names stay under the configured root.
    """
    if _default_config is None:
        configure(config)
    return logging.getLogger(name)
