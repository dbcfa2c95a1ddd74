from log_tester.infra.facade import RecordingHandler, install
from log_tester.infra.logging import (
    ConsoleLogger,
    LogfireLogger,
    build_logger,
    configure_logfire,
)

__all__ = [
    'RecordingHandler',
    'install',
    'ConsoleLogger',
    'LogfireLogger',
    'build_logger',
    'configure_logfire',
]
