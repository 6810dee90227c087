"""Unit tests for env-driven configuration: router config and logger setup."""
from __future__ import annotations

import json
import logging
import os
import sys
import tempfile
import unittest
from unittest.mock import patch

from lexhook.config import RouterConfig, load_router_config
from lexhook.core.exceptions import ConfigurationError, LexHookError
from lexhook.core.logger import JsonFormatter, LoggerConfig, configure, get_logger


class TestRouterConfig(unittest.TestCase):
    def test_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            cfg = load_router_config()
        self.assertEqual(cfg.failure_message, "Unexpected error occurred")
        self.assertTrue(cfg.log_events)

    def test_from_env(self) -> None:
        env = {"LEXHOOK_FAILURE_MESSAGE": "  Try again later ", "LEXHOOK_LOG_EVENTS": "no"}
        with patch.dict(os.environ, env, clear=True):
            cfg = load_router_config()
        self.assertEqual(cfg.failure_message, "Try again later")
        self.assertFalse(cfg.log_events)

    def test_overrides_win_over_env(self) -> None:
        with patch.dict(os.environ, {"LEXHOOK_LOG_EVENTS": "true"}, clear=True):
            cfg = load_router_config(failure_message="Oops", log_events=False)
        self.assertEqual(cfg.failure_message, "Oops")
        self.assertFalse(cfg.log_events)

    def test_blank_failure_message_rejected(self) -> None:
        with self.assertRaises(ValueError):
            RouterConfig(failure_message="   ")


class TestLoggerConfig(unittest.TestCase):
    def test_from_env(self) -> None:
        env = {
            "LEXHOOK_LOG_LEVEL": "debug",
            "LEXHOOK_LOG_DIR": "/tmp/lexhook-logs",
            "LEXHOOK_LOG_CONSOLE": "0",
            "LEXHOOK_LOG_CONSOLE_JSON": "yes",
        }
        with patch.dict(os.environ, env, clear=True):
            cfg = LoggerConfig.from_env()
        self.assertEqual(cfg.level, "DEBUG")
        self.assertEqual(cfg.log_dir, "/tmp/lexhook-logs")
        self.assertFalse(cfg.console)
        self.assertTrue(cfg.console_json)
        self.assertEqual(cfg.root_name, "lexhook")

    def test_configure_writes_json_lines_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            configure(LoggerConfig(level="INFO", log_dir=tmp, console=False, root_name="lexhook"))
            try:
                log = get_logger("lexhook.tests.config")
                log.info("hello %s", "file", extra={"extra": {"slot": "PickupDate"}})
                for handler in logging.getLogger("lexhook").handlers:
                    handler.flush()
                with open(os.path.join(tmp, "lexhook.log"), encoding="utf-8") as fh:
                    line = fh.readline()
            finally:
                configure(LoggerConfig(console=False))
        record = json.loads(line)
        self.assertEqual(record["message"], "hello file")
        self.assertEqual(record["level"], "INFO")
        self.assertEqual(record["logger"], "lexhook.tests.config")
        self.assertEqual(record["extra"], {"slot": "PickupDate"})

    def test_reconfigure_replaces_handlers(self) -> None:
        configure(LoggerConfig(console=True))
        configure(LoggerConfig(console=True))
        self.assertEqual(len(logging.getLogger("lexhook").handlers), 1)
        configure(LoggerConfig(console=False))
        self.assertEqual(logging.getLogger("lexhook").handlers, [])


class TestJsonFormatter(unittest.TestCase):
    def test_exception_included(self) -> None:
        try:
            raise ConfigurationError("bad slot", details={"slot": "A"})
        except ConfigurationError:
            record = logging.getLogger("lexhook").makeRecord(
                "lexhook", logging.ERROR, __file__, 1, "failed", (), exc_info=sys.exc_info(),
            )
        out = json.loads(JsonFormatter().format(record))
        self.assertIn("ConfigurationError: bad slot", out["exception"])


class TestLexHookError(unittest.TestCase):
    def test_to_dict_includes_cause(self) -> None:
        cause = ValueError("inner")
        err = LexHookError("outer", details={"k": 1}, cause=cause)
        out = err.to_dict()
        self.assertEqual(out["code"], "ERROR")
        self.assertEqual(out["details"], {"k": 1})
        self.assertEqual(out["cause"], "inner")

    def test_subclass_code(self) -> None:
        self.assertEqual(ConfigurationError("x").code, "CONFIGURATION_ERROR")
        self.assertEqual(str(ConfigurationError("x")), "x")
