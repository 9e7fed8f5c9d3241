"""Evaluator component: values, environments, closures and the tree-walking evaluator."""

from .environment import Environment
from .closure import Closure
from .values import Value, is_boolean, is_closure, is_number, is_truthy, kind_of
from .evaluator import Evaluator, evaluate

__all__ = [
    "Environment",
    "Closure",
    "Value",
    "is_boolean",
    "is_closure",
    "is_number",
    "is_truthy",
    "kind_of",
    "Evaluator",
    "evaluate",
]
