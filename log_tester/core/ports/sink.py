from typing import Protocol, runtime_checkable

from log_tester.core.schema.level import Level


@runtime_checkable
class LogSink(Protocol):
    def enabled(self, level: Level) -> bool:
        ...

    def max_level(self) -> Level:
        ...

    def handle(self, level: Level, message: str, target: str = '') -> None:
        ...

    def flush(self) -> None:
        ...
