"""
Tests for exprlang.config.logging_config.
"""
import logging

from exprlang.config.logging_config import get_logger, setup_logging


def test_setup_logging_creates_log_directory(tmp_path):
    log_file = tmp_path / "logs" / "exprlang.log"
    setup_logging("DEBUG", log_file=str(log_file))
    assert (tmp_path / "logs").is_dir()

def test_setup_logging_reads_level_from_env(monkeypatch):
    captured = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))
    monkeypatch.setenv("EXPRLANG_LOG_LEVEL", "error")
    setup_logging()
    assert captured["level"] == logging.ERROR
    assert "filename" not in captured

def test_setup_logging_explicit_level_wins(monkeypatch, tmp_path):
    captured = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))
    monkeypatch.setenv("EXPRLANG_LOG_LEVEL", "error")
    log_file = str(tmp_path / "exprlang.log")
    setup_logging("debug", log_file=log_file)
    assert captured["level"] == logging.DEBUG
    assert captured["filename"] == log_file

def test_get_logger():
    logger = get_logger("exprlang.test")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "exprlang.test"
