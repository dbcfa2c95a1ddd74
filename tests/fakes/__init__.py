from tests.fakes.logfire import FakeLogfire
from tests.fakes.logger import FakeLogger
from tests.fakes.sink import FakeSink

__all__ = [
    "FakeLogfire",
    "FakeLogger",
    "FakeSink",
]
