import logging
from typing import Optional

from log_tester.core.exceptions import LoggerAlreadySetError
from log_tester.core.ports.logger import Logger
from log_tester.core.ports.sink import LogSink
from log_tester.core.schema.level import Level


class RecordingHandler(logging.Handler):
    """Forwards records from the standard library to a ``LogSink``."""

    def __init__(self, sink: LogSink, logger: Optional[Logger] = None) -> None:
        super().__init__(level=sink.max_level())
        self.sink = sink
        self._logger = logger

    def emit(self, record: logging.LogRecord) -> None:
        level = Level.from_levelno(record.levelno)
        if not self.sink.enabled(level):
            return
        try:
            message = record.getMessage()
        except Exception:
            if self._logger is None:
                self.handleError(record)
            else:
                self._logger.exception(
                    'Failed to render log record',
                    target=record.name,
                    template=str(record.msg),
                )
            return
        self.sink.handle(level, message, record.name)

    def flush(self) -> None:
        self.sink.flush()


def install(
    sink: LogSink,
    target: str = '',
    logger: Optional[Logger] = None,
) -> RecordingHandler:
    """Attach ``sink`` to the stdlib logger named ``target`` (root if empty).

    Lowers the logger's threshold to the sink's ``max_level`` and lifts any
    ``logging.disable`` so nothing is filtered before it reaches the sink.
    Installing the same sink twice returns the existing handler.
    """
    stdlib_logger = logging.getLogger(target or None)
    existing = find_handler(stdlib_logger)
    if existing is not None and existing.sink is not sink:
        raise LoggerAlreadySetError(
            'A different recording sink is already installed',
            target=target,
        )

    handler = existing
    if handler is None:
        handler = RecordingHandler(sink, logger=logger)
        stdlib_logger.addHandler(handler)
        if logger is not None:
            logger.info(
                'Recording sink installed',
                target=target or 'root',
                sink=type(sink).__name__,
            )

    stdlib_logger.setLevel(sink.max_level())
    logging.disable(logging.NOTSET)
    return handler


def find_handler(stdlib_logger: logging.Logger) -> Optional[RecordingHandler]:
    for handler in stdlib_logger.handlers:
        if isinstance(handler, RecordingHandler):
            return handler
    return None
