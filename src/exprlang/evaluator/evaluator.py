"""
Evaluator implementation.
Walks an expression tree recursively and computes its value in an explicit
environment. There is no global state: the same (expression, environment) pair
always produces the same value or the same error.
"""

import logging
from typing import Any, Callable, Dict, Mapping, Optional, Union

from exprlang.ast_nodes import BinaryOp, Call, Expr, FunctionLiteral, UnaryOp, Variable
from exprlang.printer import format_expr, format_value
from exprlang.system.errors import (
    EvaluationError,
    NotCallableError,
    OperandTypeError,
    ResourceExhaustedError,
    UnboundVariableError,
)
from exprlang.system.models import EvaluationErrorDetails, EvaluationResult, EvaluatorConfig
from .closure import Closure
from .environment import Environment
from .operators import OperatorProcessor
from .special_forms import SpecialFormProcessor
from .values import Value, is_closure, kind_of

logger = logging.getLogger(__name__)

EnvironmentLike = Union[Environment, Mapping[str, Any], None]


class Evaluator:
    """
    Evaluates expression trees.

    Dispatch happens on the node's ``type`` tag. Strict operators are delegated
    to an OperatorProcessor and the short-circuiting forms to a
    SpecialFormProcessor; both recurse back through ``_eval``.
    """

    def __init__(self, config: Optional[EvaluatorConfig] = None):
        """
        Initializes the evaluator.

        Args:
            config: Limits for evaluation. Defaults to EvaluatorConfig().
        """
        self.config = config if config is not None else EvaluatorConfig()

        self.operator_processor = OperatorProcessor(self)
        self.special_form_processor = SpecialFormProcessor(self)

        self.NODE_HANDLERS: Dict[str, Callable[[Any, Environment, int], Value]] = {
            "variable": self._eval_variable,
            "number": self._eval_literal,
            "boolean": self._eval_literal,
            "binop": self._eval_binary_op,
            "unop": self._eval_unary_op,
            "if": self.special_form_processor.handle_conditional,
            "function": self._eval_function_literal,
            "function-call": self._eval_call,
        }
        self.BINARY_OPERATORS: Dict[str, Callable[[BinaryOp, Environment, int], Value]] = {
            "+": self.operator_processor.apply_add_operator,
            "<": self.operator_processor.apply_less_than_operator,
            "||": self.special_form_processor.handle_or_form,
            "&&": self.special_form_processor.handle_and_form,
        }
        self.UNARY_OPERATORS: Dict[str, Callable[[UnaryOp, Environment, int], Value]] = {
            "!": self.operator_processor.apply_not_operator,
            "-": self.operator_processor.apply_negate_operator,
        }
        logger.debug(f"Evaluator initialized with max_depth={self.config.max_depth}")

    def evaluate(self, expr: Expr, env: EnvironmentLike = None) -> Value:
        """
        Evaluates an expression in the given environment.
        Main entry point for embedders.

        Args:
            expr: The expression tree to evaluate.
            env: An Environment, a plain mapping of predefined names, or None
                 for the empty environment.

        Returns:
            A number, a boolean or a Closure.

        Raises:
            EvaluationError: The first language-level error met along the
                evaluation path (UnboundVariableError, OperandTypeError,
                NotCallableError).
            ResourceExhaustedError: Evaluation nested deeper than
                config.max_depth, or the host stack ran out.
        """
        environment = self._coerce_environment(env)
        try:
            if logger.isEnabledFor(logging.INFO):
                logger.info(f"Evaluating expression: {format_expr(expr)[:100]}")
            result = self._eval(expr, environment, 0)
        except EvaluationError as e:
            logger.error(f"Evaluation error: {e.message}")
            raise
        except ResourceExhaustedError as e:
            logger.error(f"Evaluation aborted: {e}")
            raise
        except RecursionError as e:
            logger.error("Evaluation aborted: host recursion limit reached")
            raise ResourceExhaustedError(self.config.max_depth) from e
        if logger.isEnabledFor(logging.INFO):
            logger.info(f"Finished evaluating expression. Result: {format_value(result)}")
        return result

    def try_evaluate(self, expr: Expr, env: EnvironmentLike = None) -> EvaluationResult:
        """
        Evaluates like ``evaluate`` but reports failures as data.

        Returns:
            EvaluationResult with status SUCCESS and the value, or status FAILED
            and EvaluationErrorDetails describing the error.
        """
        try:
            value = self.evaluate(expr, env)
        except UnboundVariableError as e:
            details = EvaluationErrorDetails(
                kind="UNBOUND_VARIABLE", message=e.message, name=e.name, expression=e.expression or None
            )
        except NotCallableError as e:
            details = EvaluationErrorDetails(
                kind="NOT_CALLABLE", message=e.message, operator=e.operator, expression=e.expression or None
            )
        except OperandTypeError as e:
            details = EvaluationErrorDetails(
                kind="TYPE_ERROR", message=e.message, operator=e.operator, expression=e.expression or None
            )
        except ResourceExhaustedError as e:
            details = EvaluationErrorDetails(kind="RESOURCE_EXHAUSTED", message=str(e))
        else:
            return EvaluationResult(status="SUCCESS", value=value)
        return EvaluationResult(status="FAILED", error=details)

    @staticmethod
    def _coerce_environment(env: EnvironmentLike) -> Environment:
        if env is None:
            return Environment()
        if isinstance(env, Environment):
            return env
        if isinstance(env, Mapping):
            return Environment.from_mapping(env)
        raise TypeError(f"Expected an Environment or a mapping, got {type(env).__name__}")

    def _eval(self, node: Expr, env: Environment, depth: int) -> Value:
        """
        Internal recursive evaluation step.

        ``depth`` counts nested evaluation steps from the top-level call. It is an
        argument, never evaluator state.
        """
        if depth > self.config.max_depth:
            raise ResourceExhaustedError(self.config.max_depth, depth)
        handler = self.NODE_HANDLERS.get(node.type)
        if handler is None:
            raise TypeError(f"Not an expression node: {node!r}")
        return handler(node, env, depth)

    def _eval_variable(self, node: Variable, env: Environment, depth: int) -> Value:
        try:
            return env.lookup(node.name)
        except NameError as e:
            raise UnboundVariableError(node.name, expression=format_expr(node)) from e

    def _eval_literal(self, node: Expr, env: Environment, depth: int) -> Value:
        return node.value

    def _eval_binary_op(self, node: BinaryOp, env: Environment, depth: int) -> Value:
        return self.BINARY_OPERATORS[node.operator](node, env, depth)

    def _eval_unary_op(self, node: UnaryOp, env: Environment, depth: int) -> Value:
        return self.UNARY_OPERATORS[node.operator](node, env, depth)

    def _eval_function_literal(self, node: FunctionLiteral, env: Environment, depth: int) -> Value:
        # The body is not evaluated here; the defining environment is captured as-is.
        return Closure(node.parameter_name, node.body, env)

    def _eval_call(self, node: Call, env: Environment, depth: int) -> Value:
        callee_value = self._eval(node.callee, env, depth + 1)
        if not is_closure(callee_value):
            raise NotCallableError(kind_of(callee_value), expression=format_expr(node))

        argument_value = self._eval(node.argument, env, depth + 1)

        # The call frame extends the closure's defining environment, not the caller's.
        call_env = callee_value.environment.extend(callee_value.parameter_name, argument_value)
        logger.debug(
            f"Calling closure '{callee_value.parameter_name}' (def_env_id={id(callee_value.environment)}) "
            f"at depth {depth}"
        )
        return self._eval(callee_value.body, call_env, depth + 1)


_default_evaluator = Evaluator()


def evaluate(expr: Expr, env: EnvironmentLike = None) -> Value:
    """Evaluates ``expr`` with a default-configured Evaluator. See Evaluator.evaluate."""
    return _default_evaluator.evaluate(expr, env)
