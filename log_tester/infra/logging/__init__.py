from log_tester.infra.logging.console import ConsoleLogger
from log_tester.infra.logging.factory import build_logger
from log_tester.infra.logging.logfire import LogfireLogger, configure_logfire

__all__ = ["ConsoleLogger", "LogfireLogger", "build_logger", "configure_logfire"]
