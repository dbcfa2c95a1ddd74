from typing import Iterator

import pytest

from log_tester.core.recorder import Recorder
from log_tester.core.tester import LogTester


@pytest.fixture
def log_tester() -> Iterator[Recorder]:
    """Shared recorder, emptied before the test runs."""
    recorder = LogTester.start()
    recorder.clear()
    yield recorder
