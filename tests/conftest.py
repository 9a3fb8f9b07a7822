import pytest

from symbolic_calculus.config import reset_config
from symbolic_calculus.logging_system import LogLevel, configure_logging


@pytest.fixture(autouse=True)
def default_engine_state():
    """Every test starts from the default configuration and a quiet logger."""
    reset_config()
    configure_logging(LogLevel.SILENT)
    yield
    reset_config()
    configure_logging(LogLevel.SILENT)


@pytest.fixture
def x():
    from symbolic_calculus import Expression
    return Expression("x")


@pytest.fixture
def y():
    from symbolic_calculus import Expression
    return Expression("y")


@pytest.fixture
def z():
    from symbolic_calculus import Expression
    return Expression("z", dtype=complex)
