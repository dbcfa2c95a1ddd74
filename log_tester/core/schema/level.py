import logging
from enum import IntEnum

from log_tester.core.exceptions import InvalidLevelError

_TRACE_LEVELNO = 5

logging.addLevelName(_TRACE_LEVELNO, 'TRACE')


class Level(IntEnum):
    """Severity of a captured record, ordered from least to most severe.

    Values line up with the standard library so a ``Level`` can be passed
    anywhere ``logging`` expects a numeric level.
    """

    TRACE = _TRACE_LEVELNO
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR

    @classmethod
    def from_levelno(cls, levelno: int) -> 'Level':
        for level in sorted(cls, reverse=True):
            if levelno >= level:
                return level
        return cls.TRACE

    @classmethod
    def parse(cls, name: str) -> 'Level':
        key = str(name).strip().upper()
        if key in _ALIASES:
            return _ALIASES[key]
        try:
            return cls[key]
        except KeyError as error:
            raise InvalidLevelError(
                f'Unknown log level {name!r}', value=name
            ) from error

    def __str__(self) -> str:
        return self.name


_ALIASES = {
    'WARNING': Level.WARN,
    'CRITICAL': Level.ERROR,
    'FATAL': Level.ERROR,
}
