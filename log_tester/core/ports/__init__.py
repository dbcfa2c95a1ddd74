from log_tester.core.ports.logger import Logger
from log_tester.core.ports.sink import LogSink

__all__ = [
    "Logger",
    "LogSink",
]
