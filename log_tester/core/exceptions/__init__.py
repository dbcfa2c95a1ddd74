from log_tester.core.exceptions.errors import (
    ConfigurationError,
    InvalidLevelError,
    LoggerAlreadySetError,
    LogTesterError,
)

__all__ = [
    "LogTesterError",
    "LoggerAlreadySetError",
    "InvalidLevelError",
    "ConfigurationError",
]
