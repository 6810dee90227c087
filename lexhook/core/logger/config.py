"""
Logger configuration, built in code or from the Lambda function's environment.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

_TRUTHY = ("1", "true", "yes")


@dataclass(frozen=True)
class LoggerConfig:
    """
    Configuration for the lexhook logger.

    Use LoggerConfig.from_env() for env-based config, or build explicitly.
    """

    # Level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    level: str = "INFO"
    # Log directory for rotating file (if None, file handler is skipped)
    log_dir: Optional[str] = None
    # Basename for log file (e.g. "lexhook" -> lexhook.log)
    log_file_basename: str = "lexhook"
    # Max bytes per file before rotation
    max_bytes: int = 5 * 1024 * 1024  # 5 MB
    # Number of backup files to keep
    backup_count: int = 5
    # Root logger name (handlers attached here; children inherit)
    root_name: str = "lexhook"
    # Console handler; CloudWatch picks up stderr
    console: bool = True
    # Console records as JSON lines instead of plain text
    console_json: bool = False
    # Rotating file handler (only if log_dir is set)
    file_rotating: bool = True

    @classmethod
    def from_env(cls, prefix: str = "LEXHOOK_") -> "LoggerConfig":
        """Build config from ``<prefix>LOG_*`` environment variables."""

        def env(name: str, default: str) -> str:
            return os.environ.get(f"{prefix}{name}", default)

        return cls(
            level=env("LOG_LEVEL", "INFO").upper(),
            log_dir=env("LOG_DIR", "") or None,
            log_file_basename=env("LOG_FILE_BASENAME", "lexhook"),
            max_bytes=int(env("LOG_MAX_BYTES", "5242880")),
            backup_count=int(env("LOG_BACKUP_COUNT", "5")),
            root_name=env("LOG_ROOT_NAME", "lexhook"),
            console=env("LOG_CONSOLE", "true").lower() in _TRUTHY,
            console_json=env("LOG_CONSOLE_JSON", "false").lower() in _TRUTHY,
            file_rotating=env("LOG_FILE_ROTATING", "true").lower() in _TRUTHY,
        )
