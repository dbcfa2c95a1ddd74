from dataclasses import dataclass

from log_tester.core.schema.level import Level


@dataclass(frozen=True, slots=True)
class CapturedLog:
    level: Level
    message: str
    target: str = ''

    def __str__(self) -> str:
        return self.message
