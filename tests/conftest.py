import pytest

from wisp.config import EvalOptions
from wisp.interpreter import Interpreter
from wisp.types.environment import Environment


@pytest.fixture
def env():
    """Fresh environment holding only the global scope."""
    return Environment()


@pytest.fixture
def interp():
    """Interpreter with default options, independent of WISP_* variables."""
    return Interpreter(EvalOptions())
