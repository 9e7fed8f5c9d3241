"""
Renders expressions and runtime values in the language's JavaScript-like
surface syntax. Used for diagnostics; there is no parser for this output.
"""
import math
from typing import Any

from exprlang.ast_nodes import (
    BinaryOp,
    BooleanLiteral,
    Call,
    Conditional,
    Expr,
    FunctionLiteral,
    NumberLiteral,
    UnaryOp,
    Variable,
)


def format_number(value: float) -> str:
    """Formats a number the way JavaScript prints it: integral floats lose the '.0'."""
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return repr(value)


def format_expr(expr: Expr) -> str:
    """
    Renders an expression tree.

    Binary operators, conditionals and function literals are parenthesised so
    the output is unambiguous without precedence rules.
    """
    if isinstance(expr, Variable):
        return expr.name
    if isinstance(expr, NumberLiteral):
        return format_number(expr.value)
    if isinstance(expr, BooleanLiteral):
        return "true" if expr.value else "false"
    if isinstance(expr, BinaryOp):
        return f"({format_expr(expr.left)} {expr.operator} {format_expr(expr.right)})"
    if isinstance(expr, UnaryOp):
        return f"{expr.operator}{_format_prefixed(expr.argument)}"
    if isinstance(expr, Conditional):
        return (
            f"({format_expr(expr.condition)} ? {format_expr(expr.then_branch)}"
            f" : {format_expr(expr.else_branch)})"
        )
    if isinstance(expr, FunctionLiteral):
        return f"({expr.parameter_name} => {format_expr(expr.body)})"
    if isinstance(expr, Call):
        return f"{_format_prefixed(expr.callee)}({format_expr(expr.argument)})"
    raise TypeError(f"Not an expression node: {expr!r}")


def _format_prefixed(expr: Expr) -> str:
    # Unary operators and signed literals bind loosely next to a prefix or a call.
    rendered = format_expr(expr)
    if isinstance(expr, UnaryOp) or rendered.startswith("-"):
        return f"({rendered})"
    return rendered


def format_value(value: Any) -> str:
    """Renders a runtime value: number, boolean or closure."""
    # bool first: bool is a subclass of int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    parameter_name = getattr(value, "parameter_name", None)
    body = getattr(value, "body", None)
    if parameter_name is not None and body is not None:
        return f"<function {parameter_name} => {format_expr(body)}>"
    return repr(value)
