"""
Pydantic models for evaluator configuration and structured evaluation results.
"""

import logging
import os
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field, PositiveInt

logger = logging.getLogger(__name__)

# --- Configuration ---

MAX_DEPTH_ENV_VAR = "EXPRLANG_MAX_DEPTH"
LOG_LEVEL_ENV_VAR = "EXPRLANG_LOG_LEVEL"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
"""
Level names accepted by setup_logging
"""


class EvaluatorConfig(BaseModel):
    """
    Evaluator configuration.

    max_depth bounds how deeply evaluation may nest (sub-expressions plus
    function calls). A level costs up to four Python frames (strict binary
    operators go through _eval, _eval_binary_op, the operator method and
    _eval_numeric_operands), so the default times four, plus the embedding
    caller's own frames, must stay below CPython's default recursion limit
    of 1000.
    """
    max_depth: PositiveInt = Field(200, description="Maximum nesting of evaluation steps before ResourceExhaustedError.")
    log_level: LogLevel = Field("WARNING", description="Level used by setup_logging when none is given explicitly.")

    @classmethod
    def from_env(cls) -> "EvaluatorConfig":
        """Builds a config from EXPRLANG_* environment variables, falling back to defaults."""
        values: Dict[str, Any] = {}
        max_depth = os.environ.get(MAX_DEPTH_ENV_VAR)
        if max_depth:
            values["max_depth"] = max_depth
        log_level = os.environ.get(LOG_LEVEL_ENV_VAR)
        if log_level:
            values["log_level"] = log_level.upper()
        logger.debug(f"EvaluatorConfig.from_env: overrides={values}")
        return cls(**values)


# --- Result Types ---

ErrorKind = Literal[
    'UNBOUND_VARIABLE',
    'TYPE_ERROR',
    'NOT_CALLABLE',
    'RESOURCE_EXHAUSTED',
]
"""
Categories of evaluation failure
"""

EvaluationStatus = Literal["SUCCESS", "FAILED"]


class EvaluationErrorDetails(BaseModel):
    """Structured description of why an evaluation failed."""
    kind: ErrorKind
    message: str
    name: Optional[str] = None # Set for UNBOUND_VARIABLE
    operator: Optional[str] = None # Set for TYPE_ERROR / NOT_CALLABLE
    expression: Optional[str] = None


class EvaluationResult(BaseModel):
    """
    Outcome of Evaluator.try_evaluate.

    value holds the computed number, boolean or Closure on success and is None
    on failure.
    """
    status: EvaluationStatus
    value: Any = None
    error: Optional[EvaluationErrorDetails] = None

    @property
    def ok(self) -> bool:
        return self.status == "SUCCESS"
