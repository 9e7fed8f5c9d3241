"""
Runtime value predicates.

A value is a number (int or float), a boolean or a Closure. Python treats bool
as a subclass of int; the language does not, so every number check excludes
bool explicitly.
"""
from typing import Any, Union

from .closure import Closure

Value = Union[float, bool, Closure]


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_closure(value: Any) -> bool:
    return isinstance(value, Closure)


def is_truthy(value: Value) -> bool:
    """
    Is the value truthy? Used by ||, &&, ! and conditionals.

    Exactly two values are falsy: the number 0 and false. Every other number
    (negative numbers and NaN included), true, and every closure is truthy.
    """
    if is_boolean(value):
        return value
    if is_number(value):
        return value != 0
    return True


def kind_of(value: Any) -> str:
    """Names the runtime kind of a value for error messages."""
    if is_boolean(value):
        return "boolean"
    if is_number(value):
        return "number"
    if is_closure(value):
        return "function"
    return type(value).__name__
