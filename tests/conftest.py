import pytest

from sprig.builtin.env_builtin import register
from sprig.interpreter import Interpreter
from sprig.types.environment import Environment


@pytest.fixture
def env():
    """Fresh global environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    """Interpreter without a user prelude, closed after the test."""
    with Interpreter(prelude=None) as i:
        yield i
