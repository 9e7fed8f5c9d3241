"""Positional helpers for building expression trees in code.

    call(function("x", plus(variable("x"), number(1))), number(2))   # (x => x + 1)(2)
"""
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


def variable(name: str) -> Expr:
    return Variable(name=name)


def number(value: float) -> Expr:
    return NumberLiteral(value=value)


def boolean(value: bool) -> Expr:
    return BooleanLiteral(value=value)


def plus(left: Expr, right: Expr) -> Expr:
    return BinaryOp(left=left, operator="+", right=right)


def less_than(left: Expr, right: Expr) -> Expr:
    return BinaryOp(left=left, operator="<", right=right)


def or_(left: Expr, right: Expr) -> Expr:
    return BinaryOp(left=left, operator="||", right=right)


def and_(left: Expr, right: Expr) -> Expr:
    return BinaryOp(left=left, operator="&&", right=right)


def not_(argument: Expr) -> Expr:
    return UnaryOp(operator="!", argument=argument)


def negate(argument: Expr) -> Expr:
    return UnaryOp(operator="-", argument=argument)


def conditional(condition: Expr, then_branch: Expr, else_branch: Expr) -> Expr:
    return Conditional(condition=condition, then_branch=then_branch, else_branch=else_branch)


def function(parameter_name: str, body: Expr) -> Expr:
    return FunctionLiteral(parameter_name=parameter_name, body=body)


def call(callee: Expr, argument: Expr) -> Expr:
    return Call(callee=callee, argument=argument)


def let(name: str, value: Expr, body: Expr) -> Expr:
    """
    Binds ``name`` to ``value`` while evaluating ``body``.

    There is no let node in the language; this expands to the immediately
    applied function ``(name => body)(value)``, so ``value`` is evaluated in the
    enclosing scope and cannot refer to ``name`` itself.
    """
    return call(function(name, body), value)
