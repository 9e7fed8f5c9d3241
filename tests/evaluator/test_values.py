"""
Tests for truthiness and the runtime kind predicates.
"""
import math

import pytest

from exprlang.builders import conditional, number, variable
from exprlang.evaluator import (
    Closure, Environment, evaluate, is_boolean, is_closure, is_number, is_truthy, kind_of,
)


@pytest.fixture
def identity():
    return Closure("x", variable("x"), Environment())


@pytest.mark.parametrize("value", [0, 0.0, -0.0, False])
def test_falsy_values(value):
    assert is_truthy(value) is False

@pytest.mark.parametrize("value", [1, -1, 0.5, -3.25, math.inf, True])
def test_truthy_values(value):
    assert is_truthy(value) is True

def test_nan_is_truthy():
    assert is_truthy(math.nan) is True
    env = Environment({"nan": math.nan})
    assert evaluate(conditional(variable("nan"), number(1), number(2)), env) == 1

def test_closures_are_truthy(identity):
    assert is_truthy(identity) is True

def test_bool_is_not_a_number():
    assert is_number(True) is False
    assert is_number(0) is True
    assert is_number(1.5) is True
    assert is_boolean(False) is True
    assert is_boolean(0) is False

def test_is_closure(identity):
    assert is_closure(identity) is True
    assert is_closure(1) is False

def test_kind_of(identity):
    assert kind_of(1) == "number"
    assert kind_of(2.5) == "number"
    assert kind_of(True) == "boolean"
    assert kind_of(identity) == "function"
