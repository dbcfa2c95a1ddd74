from log_tester.core.schema.level import Level
from log_tester.core.schema.record import CapturedLog

__all__ = [
    "Level",
    "CapturedLog",
]
