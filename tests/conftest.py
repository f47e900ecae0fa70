import pytest

from lis.builtin.env_builtin import standard_env
from lis.interpreter import Interpreter


@pytest.fixture
def env():
    """Fresh global environment with builtins loaded."""
    return standard_env()


@pytest.fixture
def interp():
    """Fresh interpreter session."""
    return Interpreter()
