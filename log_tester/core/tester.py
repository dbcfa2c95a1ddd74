import threading
from typing import Optional

from log_tester.config import load_settings
from log_tester.core.recorder import Recorder
from log_tester.core.schema.level import Level
from log_tester.core.schema.record import CapturedLog
from log_tester.infra.facade import install
from log_tester.infra.logging import build_logger

_lock = threading.Lock()
_recorder: Optional[Recorder] = None
_target = ''


class LogTester:
    """Process-wide access to the shared recorder.

    The recorder is installed on the first ``start()`` and lives until the
    process exits. Records left by earlier tests stay visible unless a test
    calls ``clear()``. Queries before ``start()`` behave as an empty store.
    """

    @staticmethod
    def start() -> Recorder:
        global _recorder

        with _lock:
            if _recorder is None:
                _recorder = _install()
            else:
                install(_recorder, _target)
            return _recorder

    @staticmethod
    def recorder() -> Optional[Recorder]:
        return _recorder

    @staticmethod
    def contains(level: Level, content: str, *, exact: bool = True) -> bool:
        recorder = _recorder
        if recorder is None:
            return False
        return recorder.contains(level, content, exact=exact)

    @staticmethod
    def records(level: Optional[Level] = None) -> tuple[CapturedLog, ...]:
        recorder = _recorder
        if recorder is None:
            return ()
        return recorder.records(level)

    @staticmethod
    def count() -> int:
        recorder = _recorder
        if recorder is None:
            return 0
        return recorder.count()

    @staticmethod
    def clear() -> None:
        recorder = _recorder
        if recorder is not None:
            recorder.clear()


def _install() -> Recorder:
    global _target

    settings = load_settings()
    logger = build_logger(settings.logging)
    recorder = Recorder(logger=logger)
    install(recorder, settings.capture.target, logger=logger)
    _target = settings.capture.target
    return recorder
