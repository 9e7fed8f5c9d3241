"""
Unit tests for the Pydantic models defined in exprlang.system.models.
"""
import pytest
from pydantic import ValidationError

from exprlang.system.models import (
    EvaluationErrorDetails, EvaluationResult, EvaluatorConfig, LOG_LEVEL_ENV_VAR, MAX_DEPTH_ENV_VAR,
)


# --- Test EvaluatorConfig ---

def test_config_defaults():
    config = EvaluatorConfig()
    assert config.max_depth == 200
    assert config.log_level == "WARNING"

def test_config_valid():
    config = EvaluatorConfig(max_depth=10, log_level="DEBUG")
    assert config.max_depth == 10
    assert config.log_level == "DEBUG"

def test_config_invalid():
    with pytest.raises(ValidationError):
        EvaluatorConfig(max_depth=0) # must be positive
    with pytest.raises(ValidationError):
        EvaluatorConfig(max_depth=-5)

def test_config_from_env(monkeypatch):
    monkeypatch.setenv(MAX_DEPTH_ENV_VAR, "42")
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "debug")
    config = EvaluatorConfig.from_env()
    assert config.max_depth == 42
    assert config.log_level == "DEBUG"

def test_config_from_env_defaults(monkeypatch):
    monkeypatch.delenv(MAX_DEPTH_ENV_VAR, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    assert EvaluatorConfig.from_env() == EvaluatorConfig()

def test_config_from_env_invalid(monkeypatch):
    monkeypatch.setenv(MAX_DEPTH_ENV_VAR, "not-a-number")
    with pytest.raises(ValidationError):
        EvaluatorConfig.from_env()

def test_config_rejects_unknown_log_level():
    with pytest.raises(ValidationError):
        EvaluatorConfig(log_level="VERBOSE")

def test_config_from_env_invalid_log_level(monkeypatch):
    monkeypatch.delenv(MAX_DEPTH_ENV_VAR, raising=False)
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "banana")
    with pytest.raises(ValidationError):
        EvaluatorConfig.from_env()

# --- Test result models ---

def test_evaluation_result_success():
    result = EvaluationResult(status="SUCCESS", value=3)
    assert result.ok
    assert result.error is None

def test_evaluation_result_failed():
    details = EvaluationErrorDetails(kind="UNBOUND_VARIABLE", message="unbound variable: x", name="x")
    result = EvaluationResult(status="FAILED", error=details)
    assert not result.ok
    assert result.value is None
    assert result.error.name == "x"
    assert result.error.operator is None

def test_evaluation_result_invalid_status():
    with pytest.raises(ValidationError):
        EvaluationResult(status="PENDING")

def test_error_details_invalid_kind():
    with pytest.raises(ValidationError):
        EvaluationErrorDetails(kind="SYNTAX_ERROR", message="nope")
