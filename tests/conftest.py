import logging
from itertools import count

import pytest

from log_tester.core import tester
from log_tester.infra.facade import RecordingHandler
from log_tester.pytest_plugin import log_tester  # noqa: F401
from tests.settings import get_test_settings

_ENV_VARS = (
    "LOG_TESTER_LOGGER_BACKEND",
    "LOG_TESTER_LOGGER_NAME",
    "LOG_TESTER_LOGFIRE_TOKEN",
    "LOG_TESTER_CAPTURE_TARGET",
)
_names = count()


@pytest.fixture
def test_settings():
    return get_test_settings()


@pytest.fixture
def clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def logger_name():
    """Unique stdlib logger name, stripped of recording handlers afterwards."""
    name = f"tests.logger{next(_names)}"
    yield name
    stdlib_logger = logging.getLogger(name)
    for handler in list(stdlib_logger.handlers):
        stdlib_logger.removeHandler(handler)
    stdlib_logger.setLevel(logging.NOTSET)


@pytest.fixture
def fresh_tester(clean_env):
    """Run a test as if no recorder had been started in this process."""
    root = logging.getLogger()
    previous_level = root.level
    previous = [h for h in root.handlers if isinstance(h, RecordingHandler)]
    for handler in previous:
        root.removeHandler(handler)
    clean_env.setattr(tester, "_recorder", None)
    clean_env.setattr(tester, "_target", "")
    yield
    for handler in [h for h in root.handlers if isinstance(h, RecordingHandler)]:
        root.removeHandler(handler)
    for handler in previous:
        root.addHandler(handler)
    root.setLevel(previous_level)
