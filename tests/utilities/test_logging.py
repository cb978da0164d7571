import logging
from pathlib import Path

import pytest

from talkbox.utilities.logging import _sanitize_logger_name, get_logger


def _reset(name: str) -> None:
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_get_logger_streams_without_file_by_default() -> None:
    """Loggers only write to stderr unless a log directory is configured."""
    name = "talkbox.tests.stream_only"
    _reset(name)

    logger = get_logger(name)

    assert [type(handler) for handler in logger.handlers] == [logging.StreamHandler]
    assert logger.propagate is False


def test_get_logger_adds_rotating_file_when_dir_set(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    name = "talkbox.tests.with_file"
    _reset(name)
    monkeypatch.setenv("TALKBOX_LOG_DIR", str(tmp_path))

    logger = get_logger(name)
    logger.info("hello")

    assert (tmp_path / "talkbox_tests_with_file.log").exists()
    _reset(name)


def test_get_logger_respects_level(monkeypatch: pytest.MonkeyPatch) -> None:
    name = "talkbox.tests.level"
    _reset(name)
    monkeypatch.setenv("LOG_LEVEL", "debug")

    assert get_logger(name).level == logging.DEBUG


def test_sanitize_logger_name() -> None:
    assert _sanitize_logger_name("talkbox.box/dialogue") == "talkbox_box_dialogue"
