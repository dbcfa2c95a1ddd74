from log_tester.config import LoggingSettings
from log_tester.core.exceptions import ConfigurationError
from log_tester.core.ports.logger import Logger
from log_tester.infra.logging.console import ConsoleLogger
from log_tester.infra.logging.logfire import LogfireLogger, configure_logfire


def build_logger(settings: LoggingSettings) -> Logger:
    if settings.backend == 'console':
        return ConsoleLogger(settings.name, level=settings.level)
    if settings.backend == 'logfire':
        if not settings.logfire_token:
            raise ConfigurationError(
                'Logfire backend selected but LOG_TESTER_LOGFIRE_TOKEN is not set'
            )
        configure_logfire(settings.logfire_token)
        return LogfireLogger(settings.name)
    raise ConfigurationError(f'Unknown logging backend {settings.backend}')
