import pytest

from exprlang.evaluator import Environment, Evaluator
from exprlang.system.models import EvaluatorConfig

# --- Environments ---

@pytest.fixture
def empty_env():
    """Provides the empty environment (no predefined names)."""
    return Environment()

@pytest.fixture
def initial_env():
    """
    Provides an environment with predefined constants, the way an embedder
    supplies a small standard library.
    """
    return Environment.from_mapping({"pi": 3.14, "four": 4})

# --- Evaluators ---

@pytest.fixture
def evaluator():
    """Provides an Evaluator with the default configuration."""
    return Evaluator()

@pytest.fixture
def shallow_evaluator():
    """Provides an Evaluator with a small depth limit for runaway-recursion tests."""
    return Evaluator(EvaluatorConfig(max_depth=50))
