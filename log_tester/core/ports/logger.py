from typing import Protocol, runtime_checkable


@runtime_checkable
class Logger(Protocol):
    """Diagnostics emitted by the tool itself, never by the code under test."""

    def debug(self, message: str, **context: object) -> None:
        ...

    def info(self, message: str, **context: object) -> None:
        ...

    def warning(self, message: str, **context: object) -> None:
        ...

    def error(self, message: str, **context: object) -> None:
        ...

    def exception(self, message: str, **context: object) -> None:
        ...
