from log_tester.core.exceptions import (
    ConfigurationError,
    InvalidLevelError,
    LoggerAlreadySetError,
    LogTesterError,
)
from log_tester.core.recorder import Recorder
from log_tester.core.schema import CapturedLog, Level
from log_tester.core.tester import LogTester

start = LogTester.start
contains = LogTester.contains
records = LogTester.records
count = LogTester.count
clear = LogTester.clear

__all__ = [
    "LogTester",
    "Recorder",
    "Level",
    "CapturedLog",
    "LogTesterError",
    "LoggerAlreadySetError",
    "InvalidLevelError",
    "ConfigurationError",
    "start",
    "contains",
    "records",
    "count",
    "clear",
]
