# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Tests for the structured JSON logger.

  - output is valid JSON with ts, level, module, msg
  - log levels filter correctly
  - extra context fields get merged, secret-looking ones masked
"""

import json
import logging
from pathlib import Path

import pytest

from buildsign.logging.logger import REDACTED, add_file_handler, get_logger


@pytest.fixture(autouse=True)
def _reset_loggers() -> None:
    """Drop handlers between tests so each test gets a fresh stdout binding."""
    yield  # type: ignore[misc]
    for name in list(logging.Logger.manager.loggerDict):
        if name.startswith("buildsign.test"):
            logging.getLogger(name).handlers.clear()


class TestJsonOutput:
    def test_mandatory_fields_are_present(self, capsys: pytest.CaptureFixture[str]) -> None:
        logger = get_logger("buildsign.test.fields", log_level="INFO")
        logger.info("test message")

        parsed = json.loads(capsys.readouterr().out.strip())
        assert set(parsed) >= {"ts", "level", "module", "msg"}
        assert parsed["level"] == "INFO"
        assert parsed["module"] == "buildsign.test.fields"
        assert parsed["msg"] == "test message"

    def test_extra_fields_are_included(self, capsys: pytest.CaptureFixture[str]) -> None:
        logger = get_logger("buildsign.test.extra", log_level="INFO")
        logger.info("resolved", extra={"variant": "release", "signed": True})

        parsed = json.loads(capsys.readouterr().out.strip())
        assert parsed["variant"] == "release"
        assert parsed["signed"] is True

    def test_secret_fields_are_redacted(self, capsys: pytest.CaptureFixture[str]) -> None:
        logger = get_logger("buildsign.test.secret", log_level="INFO")
        logger.info("oops", extra={"storePassword": "hunter2", "key_password": "x"})

        out = capsys.readouterr().out
        assert "hunter2" not in out
        parsed = json.loads(out.strip())
        assert parsed["storePassword"] == REDACTED
        assert parsed["key_password"] == REDACTED

    def test_exception_is_rendered(self, capsys: pytest.CaptureFixture[str]) -> None:
        logger = get_logger("buildsign.test.exc", log_level="INFO")
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            logger.error("failed", exc_info=True)

        parsed = json.loads(capsys.readouterr().out.strip())
        assert "RuntimeError: boom" in parsed["exc"]


class TestLogLevelFiltering:
    def test_debug_hidden_at_info(self, capsys: pytest.CaptureFixture[str]) -> None:
        logger = get_logger("buildsign.test.level_filter", log_level="INFO")
        logger.debug("this should not appear")
        assert capsys.readouterr().out.strip() == ""

    def test_repeat_call_updates_level(self, capsys: pytest.CaptureFixture[str]) -> None:
        get_logger("buildsign.test.relevel", log_level="INFO")
        logger = get_logger("buildsign.test.relevel", log_level="DEBUG")
        logger.debug("now visible")
        assert "now visible" in capsys.readouterr().out

    def test_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Invalid log level"):
            get_logger("buildsign.test.invalid", log_level="LOUD")


class TestFileOutput:
    def test_logs_are_written_to_file(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "build.log"
        logger = get_logger("buildsign.test.file_output", log_level="INFO", log_file=log_file)
        logger.info("file log test")

        parsed = json.loads(log_file.read_text(encoding="utf-8").strip())
        assert parsed["msg"] == "file log test"

    def test_same_file_is_attached_once(self, tmp_path: Path) -> None:
        log_file = tmp_path / "build.log"
        logger = get_logger("buildsign.test.attach_once", log_level="INFO", log_file=log_file)
        add_file_handler(logger, log_file)
        try:
            logger.info("written once")
            assert len(log_file.read_text(encoding="utf-8").splitlines()) == 1
        finally:
            for handler in logger.handlers:
                handler.close()
