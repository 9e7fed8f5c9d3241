"""
Error types raised while evaluating expressions.

EvaluationError and its subclasses are language-level failures. They abort the
whole evaluate() call and reach the caller unchanged. ResourceExhaustedError is
a host limit, not a language error, and is not part of that hierarchy.
"""
from typing import Optional, Tuple


class EvaluationError(Exception):
    """
    Base class for runtime failures of the expression language.
    Indicates unbound variables, operand type mismatches or calls of non-functions.
    """
    def __init__(self, message: str, expression: str = "", error_details: str = ""):
        """
        Initializes the EvaluationError.

        Args:
            message: A high-level error message describing the evaluation failure.
            expression: The rendered expression being evaluated when the error occurred.
            error_details: Specific details about the error (e.g., offending operand kinds).
        """
        full_message = f"{message}"
        if expression:
            full_message += f"\nExpression: '{expression}'"
        if error_details:
            full_message += f"\nDetails: {error_details}"
        super().__init__(full_message)
        self.message = message
        self.expression = expression
        self.error_details = error_details


class UnboundVariableError(EvaluationError):
    """A variable was referenced that no enclosing scope binds."""
    def __init__(self, name: str, expression: str = ""):
        super().__init__(f"unbound variable: {name}", expression=expression)
        self.name = name


class OperandTypeError(EvaluationError):
    """
    An operator received an operand of the wrong runtime kind.

    Attributes:
        operator: The operator symbol ("+", "<", "-") or "call".
        expected_kind: The kind the operator requires, e.g. "number".
        actual_kinds: The kinds that were actually supplied, left to right.
    """
    def __init__(
        self,
        message: str,
        operator: str,
        expected_kind: str,
        actual_kinds: Tuple[str, ...] = (),
        expression: str = ""
    ):
        details = f"got {', '.join(actual_kinds)}" if actual_kinds else ""
        super().__init__(message, expression=expression, error_details=details)
        self.operator = operator
        self.expected_kind = expected_kind
        self.actual_kinds = actual_kinds


class NotCallableError(OperandTypeError):
    """The callee of a function call did not evaluate to a function."""
    def __init__(self, actual_kind: str, expression: str = ""):
        super().__init__(
            "cannot call a value that is not a function",
            operator="call",
            expected_kind="function",
            actual_kinds=(actual_kind,),
            expression=expression
        )


class ResourceExhaustedError(Exception):
    """
    Raised when evaluation nests deeper than the configured limit, or when the
    host interpreter runs out of stack. Typical for non-terminating programs
    such as self-application.
    """
    def __init__(self, limit: int, depth: Optional[int] = None):
        if depth is None:
            message = f"evaluation exhausted the host stack (max_depth={limit})"
        else:
            message = f"maximum evaluation depth exceeded: {depth} > {limit}"
        super().__init__(message)
        self.limit = limit
        self.depth = depth
