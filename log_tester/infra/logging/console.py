import logging
from typing import Any

from log_tester.core.ports.logger import Logger


class _ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        context = getattr(record, 'context', None)
        if not context:
            return base
        pairs = ' '.join(f'{key}={value!r}' for key, value in context.items())
        return f'{base} | {pairs}'


class ConsoleLogger(Logger):
    # Does not propagate, so the tool's own output never lands in a recorder
    # attached to the root logger.
    def __init__(self, name: str, level: int = logging.WARNING) -> None:
        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)
        if not self._logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(
                _ContextFormatter('%(levelname)s %(name)s: %(message)s')
            )
            self._logger.addHandler(handler)
        self._logger.propagate = False

    @property
    def name(self) -> str:
        return self._logger.name

    def debug(self, message: str, **context: Any) -> None:
        self._log(logging.DEBUG, message, context)

    def info(self, message: str, **context: Any) -> None:
        self._log(logging.INFO, message, context)

    def warning(self, message: str, **context: Any) -> None:
        self._log(logging.WARNING, message, context)

    def error(self, message: str, **context: Any) -> None:
        self._log(logging.ERROR, message, context)

    def exception(self, message: str, **context: Any) -> None:
        self._logger.exception(message, extra={'context': context})

    def _log(self, level: int, message: str, context: dict[str, Any]) -> None:
        self._logger.log(level, message, extra={'context': context})
