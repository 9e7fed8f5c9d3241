"""
exprlang: a tree-walking evaluator for a small, expression-only subset of
JavaScript (numbers, booleans, + < || && ! -, ternaries, one-argument
functions and calls).

Build trees with exprlang.builders (or validate them from dicts/JSON with
exprlang.ast_nodes) and run them with evaluate().
"""

from exprlang.ast_nodes import Expr, expr_from_dict, expr_from_json, expr_to_dict
from exprlang.evaluator import Closure, Environment, Evaluator, evaluate, is_truthy
from exprlang.system.errors import (
    EvaluationError,
    NotCallableError,
    OperandTypeError,
    ResourceExhaustedError,
    UnboundVariableError,
)
from exprlang.system.models import EvaluationResult, EvaluatorConfig

__all__ = [
    "Expr",
    "expr_from_dict",
    "expr_from_json",
    "expr_to_dict",
    "Closure",
    "Environment",
    "Evaluator",
    "evaluate",
    "is_truthy",
    "EvaluationError",
    "NotCallableError",
    "OperandTypeError",
    "ResourceExhaustedError",
    "UnboundVariableError",
    "EvaluationResult",
    "EvaluatorConfig",
]
