"""
Processor for strict operators.
Strict operators evaluate all of their operands before doing anything else:
binary ``+`` and ``<`` (left operand first) and unary ``!`` and ``-``.
"""
import logging
from typing import TYPE_CHECKING, Tuple

from exprlang.ast_nodes import BinaryOp, UnaryOp
from exprlang.printer import format_expr
from exprlang.system.errors import OperandTypeError
from .environment import Environment
from .values import Value, is_number, is_truthy, kind_of

if TYPE_CHECKING:
    from .evaluator import Evaluator # Forward reference for type hinting

logger = logging.getLogger(__name__)

class OperatorProcessor:
    """
    Applies the strict operators for the Evaluator.

    No implicit coercion happens here: ``+``, ``<`` and ``-`` reject anything
    that is not a number, while ``!`` accepts any value and always yields a
    boolean.
    """
    def __init__(self, evaluator_instance: 'Evaluator'):
        """
        Args:
            evaluator_instance: The Evaluator used for recursive evaluation of operands.
        """
        self.evaluator = evaluator_instance

    def _eval_numeric_operands(
        self, node: BinaryOp, env: Environment, depth: int, message: str
    ) -> Tuple[float, float]:
        left_value = self.evaluator._eval(node.left, env, depth + 1)
        right_value = self.evaluator._eval(node.right, env, depth + 1)
        if not (is_number(left_value) and is_number(right_value)):
            logger.debug(f"  '{node.operator}' rejected operands of kind {kind_of(left_value)}, {kind_of(right_value)}")
            raise OperandTypeError(
                message,
                operator=node.operator,
                expected_kind="number",
                actual_kinds=(kind_of(left_value), kind_of(right_value)),
                expression=format_expr(node)
            )
        return left_value, right_value

    def apply_add_operator(self, node: BinaryOp, env: Environment, depth: int) -> Value:
        left_value, right_value = self._eval_numeric_operands(node, env, depth, "+ expects two numbers")
        return left_value + right_value

    def apply_less_than_operator(self, node: BinaryOp, env: Environment, depth: int) -> Value:
        left_value, right_value = self._eval_numeric_operands(node, env, depth, "< expects two numbers")
        return left_value < right_value

    def apply_not_operator(self, node: UnaryOp, env: Environment, depth: int) -> Value:
        argument_value = self.evaluator._eval(node.argument, env, depth + 1)
        return not is_truthy(argument_value)

    def apply_negate_operator(self, node: UnaryOp, env: Environment, depth: int) -> Value:
        argument_value = self.evaluator._eval(node.argument, env, depth + 1)
        if not is_number(argument_value):
            raise OperandTypeError(
                "- expects a number",
                operator="-",
                expected_kind="number",
                actual_kinds=(kind_of(argument_value),),
                expression=format_expr(node)
            )
        return -argument_value
