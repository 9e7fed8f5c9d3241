"""
Defines the Closure class, the runtime value of a function literal.
"""
import logging
from typing import Any

from exprlang.ast_nodes import Expr
from exprlang.printer import format_expr
from .environment import Environment

logger = logging.getLogger(__name__)

class Closure:
    def __init__(self, parameter_name: str, body: Expr, environment: Environment):
        """
        Represents a single-parameter function together with its defining scope.

        Args:
            parameter_name: Name bound to the argument when the closure is called.
            body: The unevaluated body expression (the original AST node).
            environment: The Environment in effect where the function literal was
                         evaluated. Calls extend this, never the caller's scope.
        """
        self._parameter_name = parameter_name
        self._body = body
        self._environment = environment
        logger.debug(f"Closure created: param={parameter_name}, def_env_id={id(environment)}")

    @property
    def parameter_name(self) -> str:
        return self._parameter_name

    @property
    def body(self) -> Expr:
        return self._body

    @property
    def environment(self) -> Environment:
        return self._environment

    def __eq__(self, other: Any) -> bool:
        # Structural: same parameter, same body, same effective captured bindings.
        if not isinstance(other, Closure):
            return NotImplemented
        return (
            self._parameter_name == other._parameter_name
            and self._body == other._body
            and self._environment.to_dict() == other._environment.to_dict()
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self):
        return f"<Closure {self._parameter_name} => {format_expr(self._body)} def_env_id={id(self._environment)}>"
