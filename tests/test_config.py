from __future__ import annotations

import os
import tempfile
import unittest
from unittest import mock

import pathlib
import sys

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from liblog.ports.types import LogLevel
from liblog.shared.config import LibLogConfig, load_config

_ENV_KEYS = (
    "LIBLOG_CONFIG",
    "LIBLOG_CONSOLE_ENABLED",
    "LIBLOG_CONSOLE_STREAM",
    "LIBLOG_CONSOLE_COLORS",
    "LIBLOG_LOGURU_ENABLED",
)


def _clean_env() -> dict[str, str]:
    return {k: v for k, v in os.environ.items() if k not in _ENV_KEYS}


class TestLoadConfig(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.path = pathlib.Path(self._tmp.name) / "liblog.yaml"

    def test_defaults_without_file(self) -> None:
        with mock.patch.dict(os.environ, _clean_env(), clear=True):
            cfg = load_config()

        self.assertEqual(LibLogConfig(), cfg)
        self.assertFalse(cfg.console.enabled)
        self.assertTrue(cfg.loguru.enabled)

    def test_reads_yaml(self) -> None:
        self.path.write_text(
            "console:\n"
            "  enabled: true\n"
            "  stream: stderr\n"
            "  timestamp_format: '%H:%M:%S'\n"
            "loguru:\n"
            "  enabled: false\n"
            "  scope_key: logger_name\n",
            encoding="utf-8",
        )

        with mock.patch.dict(os.environ, _clean_env(), clear=True):
            cfg = load_config(str(self.path))

        self.assertTrue(cfg.console.enabled)
        self.assertEqual("stderr", cfg.console.stream)
        self.assertEqual("%H:%M:%S", cfg.console.timestamp_format)
        self.assertIsNone(cfg.console.colors)
        self.assertFalse(cfg.loguru.enabled)
        self.assertEqual("logger_name", cfg.loguru.scope_key)

    def test_environment_fills_unset_values(self) -> None:
        self.path.write_text("console:\n  stream: stderr\n", encoding="utf-8")
        env = _clean_env()
        env.update(
            {
                "LIBLOG_CONFIG": str(self.path),
                "LIBLOG_CONSOLE_ENABLED": "true",
                "LIBLOG_CONSOLE_STREAM": "stdout",
                "LIBLOG_CONSOLE_COLORS": "false",
                "LIBLOG_LOGURU_ENABLED": "0",
            }
        )

        with mock.patch.dict(os.environ, env, clear=True):
            cfg = load_config()

        self.assertTrue(cfg.console.enabled)
        self.assertEqual("stderr", cfg.console.stream)
        self.assertFalse(cfg.console.colors)
        self.assertFalse(cfg.loguru.enabled)

    def test_missing_file_raises(self) -> None:
        with self.assertRaises(FileNotFoundError):
            load_config(str(self.path))


class TestLogLevel(unittest.TestCase):
    def test_levels_are_totally_ordered(self) -> None:
        levels = list(LogLevel)

        self.assertEqual(sorted(levels), levels)
        self.assertLess(LogLevel.TRACE, LogLevel.FATAL)
        self.assertGreaterEqual(LogLevel.WARN, LogLevel.WARN)

    def test_coerce(self) -> None:
        self.assertIs(LogLevel.WARN, LogLevel.coerce("warn"))
        self.assertIs(LogLevel.INFO, LogLevel.coerce(" Info "))
        self.assertIs(LogLevel.ERROR, LogLevel.coerce(LogLevel.ERROR))
        with self.assertRaises(ValueError):
            LogLevel.coerce("verbose")


if __name__ == "__main__":
    unittest.main()
