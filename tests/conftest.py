import pytest

from expression_calculator import Environment, RecordingSink, LogLevel, configure_logging


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def env(sink):
    return Environment(sink=sink)


@pytest.fixture(autouse=True)
def quiet_logging():
    configure_logging(LogLevel.MINIMAL)
    yield
    configure_logging(LogLevel.MINIMAL)
