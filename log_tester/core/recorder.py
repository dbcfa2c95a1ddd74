import threading
from typing import Optional

from log_tester.core.ports.logger import Logger
from log_tester.core.ports.sink import LogSink
from log_tester.core.schema.level import Level
from log_tester.core.schema.record import CapturedLog


class Recorder(LogSink):
    """In-memory sink that keeps every record it is handed.

    Appends are serialized by a single lock. Queries scan a snapshot taken
    under the same lock, so readers only ever see whole records and a store
    that grows monotonically between ``clear()`` calls.
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self._logger = logger
        self._lock = threading.Lock()
        self._records: list[CapturedLog] = []

    def enabled(self, level: Level) -> bool:
        return True

    def max_level(self) -> Level:
        return Level.TRACE

    def handle(self, level: Level, message: str, target: str = '') -> None:
        if not isinstance(message, str):
            message = str(message)
        record = CapturedLog(level=level, message=message, target=target)
        with self._lock:
            self._records.append(record)

    def flush(self) -> None:
        pass

    def contains(self, level: Level, content: str, *, exact: bool = True) -> bool:
        """Return True if a record with ``level`` carries ``content``.

        Matching is on the full rendered message unless ``exact`` is False,
        in which case ``content`` only has to appear inside it.
        """
        for record in self._snapshot():
            if record.level != level:
                continue
            if exact and record.message == content:
                return True
            if not exact and content in record.message:
                return True
        return False

    def records(self, level: Optional[Level] = None) -> tuple[CapturedLog, ...]:
        snapshot = self._snapshot()
        if level is None:
            return snapshot
        return tuple(record for record in snapshot if record.level == level)

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def clear(self) -> None:
        with self._lock:
            dropped = len(self._records)
            self._records.clear()
        if self._logger is not None:
            self._logger.debug('Captured logs cleared', dropped=dropped)

    def _snapshot(self) -> tuple[CapturedLog, ...]:
        with self._lock:
            return tuple(self._records)

    def __len__(self) -> int:
        return self.count()

    def __str__(self) -> str:
        return ''.join(f'{record}\n' for record in self._snapshot())

    def __repr__(self) -> str:
        return f'Recorder(records={list(self._snapshot())!r})'
