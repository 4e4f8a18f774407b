import logging

from lightrig.utils import _set_log_level, logger


def test_log_level_default(monkeypatch):
    monkeypatch.delenv("LIGHTRIG_LOG_LEVEL", raising=False)
    level = logger.level
    try:
        _set_log_level()
        assert logger.level == logging.WARNING
    finally:
        logger.setLevel(level)


def test_log_level_from_env(monkeypatch):
    level = logger.level
    try:
        monkeypatch.setenv("LIGHTRIG_LOG_LEVEL", "debug")
        _set_log_level()
        assert logger.level == logging.DEBUG

        monkeypatch.setenv("LIGHTRIG_LOG_LEVEL", "20")
        _set_log_level()
        assert logger.level == logging.INFO
    finally:
        logger.setLevel(level)


def test_log_level_invalid(monkeypatch, caplog):
    level = logger.level
    try:
        monkeypatch.setenv("LIGHTRIG_LOG_LEVEL", "notalevel")
        _set_log_level()
        assert logger.level == logging.WARNING
        assert "Invalid lightrig log level" in caplog.text
    finally:
        logger.setLevel(level)
