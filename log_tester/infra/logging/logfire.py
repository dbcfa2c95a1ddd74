from typing import Any

from log_tester.core.ports.logger import Logger


def _load_logfire():
    try:
        import logfire
    except ImportError as error:
        raise RuntimeError('logfire library is not installed') from error
    return logfire


def configure_logfire(api_token: str) -> None:
    logfire = _load_logfire()
    logfire.configure(token=api_token, console=False)


class LogfireLogger(Logger):
    def __init__(self, name: str) -> None:
        logfire = _load_logfire()
        self._logger = logfire.with_tags(name)

    def debug(self, message: str, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, **context: Any) -> None:
        self._logger.warn(message, **context)

    def error(self, message: str, **context: Any) -> None:
        self._logger.error(message, **context)

    def exception(self, message: str, **context: Any) -> None:
        self._logger.exception(message, **context)
