from __future__ import annotations

import threading
from contextlib import AbstractContextManager
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, List, Optional, Sequence

from liblog.ports.providers import LogProviderPort
from liblog.ports.types import LogFunc, LogLevel, MessageThunk


@dataclass
class MemoryLogRecord:
    ts: str
    name: str
    level: LogLevel
    message: str
    exception: Optional[BaseException]


class MemoryLogProvider(LogProviderPort):
    """Test-friendly provider.

    Keeps formatted records in memory so tests can assert on them without
    touching stdout.
    """

    def __init__(self, min_level: LogLevel = LogLevel.TRACE) -> None:
        self._min_level = min_level
        self._lock = threading.Lock()
        self.records: List[MemoryLogRecord] = []

    def is_enabled(self, level: LogLevel) -> bool:
        return level >= self._min_level

    def _write_message(
        self,
        name: str,
        level: LogLevel,
        message: MessageThunk = None,
        exception: BaseException | None = None,
        args: Sequence[Any] = (),
    ) -> bool:
        if not self.is_enabled(level):
            return False
        if message is None:
            return True
        record = MemoryLogRecord(
            ts=datetime.now(timezone.utc).isoformat(),
            name=name,
            level=level,
            message=message().format(*args),
            exception=exception,
        )
        with self._lock:
            self.records.append(record)
        return True

    def get_logger(self, name: str) -> LogFunc:
        def log(
            level: LogLevel,
            message: MessageThunk = None,
            exception: BaseException | None = None,
            args: Sequence[Any] = (),
        ) -> bool:
            return self._write_message(name, level, message, exception, args)

        return log

    def open_nested_context(self, message: str) -> AbstractContextManager[None]:
        raise NotImplementedError("Not Implemented")

    def open_mapped_context(
        self, key: str, value: object, destructure: bool = False
    ) -> AbstractContextManager[None]:
        raise NotImplementedError("Not Implemented")
