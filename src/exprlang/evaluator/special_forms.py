"""
Processor for the lazy forms: ``||``, ``&&`` and the conditional.
Each of these evaluates only as many sub-expressions as it needs. A
sub-expression that is skipped is never evaluated, so any error it would
raise never surfaces.
"""
import logging
from typing import TYPE_CHECKING

from exprlang.ast_nodes import BinaryOp, Conditional
from .environment import Environment
from .values import Value, is_truthy

if TYPE_CHECKING:
    from .evaluator import Evaluator # Forward reference for type hinting

logger = logging.getLogger(__name__)

class SpecialFormProcessor:
    """
    Handles the short-circuiting forms for the Evaluator.

    ``||`` and ``&&`` return the deciding operand's value as-is, without
    converting it to a boolean: ``3 || true`` is ``3`` and ``0 && 1`` is ``0``.
    """
    def __init__(self, evaluator_instance: 'Evaluator'):
        """
        Args:
            evaluator_instance: The Evaluator used for recursive evaluation of sub-expressions.
        """
        self.evaluator = evaluator_instance

    def handle_or_form(self, node: BinaryOp, env: Environment, depth: int) -> Value:
        """Handles ``left || right``: left if it is truthy, otherwise right."""
        left_value = self.evaluator._eval(node.left, env, depth + 1)
        if is_truthy(left_value):
            logger.debug(f"  '||' short-circuiting on truthy value: {left_value!r}")
            return left_value
        return self.evaluator._eval(node.right, env, depth + 1)

    def handle_and_form(self, node: BinaryOp, env: Environment, depth: int) -> Value:
        """Handles ``left && right``: left if it is falsy, otherwise right."""
        left_value = self.evaluator._eval(node.left, env, depth + 1)
        if not is_truthy(left_value):
            logger.debug(f"  '&&' short-circuiting on falsy value: {left_value!r}")
            return left_value
        return self.evaluator._eval(node.right, env, depth + 1)

    def handle_conditional(self, node: Conditional, env: Environment, depth: int) -> Value:
        """Handles ``condition ? then : else``."""
        condition_value = self.evaluator._eval(node.condition, env, depth + 1)
        chosen_branch = node.then_branch if is_truthy(condition_value) else node.else_branch
        return self.evaluator._eval(chosen_branch, env, depth + 1)
