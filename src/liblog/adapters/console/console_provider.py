from __future__ import annotations

import traceback
from contextlib import AbstractContextManager
from datetime import datetime, timezone
from typing import Any, Callable, Sequence

from colorama import Fore

from liblog.adapters.console.writer import ConsoleWriter
from liblog.ports.providers import LogProviderPort
from liblog.ports.types import LogFunc, LogLevel, MessageThunk

_LEVEL_COLORS: dict[LogLevel, str] = {
    LogLevel.FATAL: Fore.RED,
    LogLevel.ERROR: Fore.LIGHTRED_EX,
    LogLevel.WARN: Fore.LIGHTYELLOW_EX,
    LogLevel.INFO: Fore.LIGHTWHITE_EX,
    LogLevel.DEBUG: Fore.WHITE,
    LogLevel.TRACE: Fore.LIGHTBLACK_EX,
}


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def describe_exception(exc: BaseException) -> str:
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)).rstrip("\n")


def is_available() -> bool:
    return True


class ConsoleLogProvider(LogProviderPort):
    """Colored console backend. Every non-probe call is written, whatever the level."""

    def __init__(
        self,
        writer: ConsoleWriter | None = None,
        *,
        clock: Callable[[], datetime] | None = None,
        timestamp_format: str | None = None,
    ) -> None:
        self._writer = writer if writer is not None else ConsoleWriter()
        self._clock = clock or _utc_now
        self._timestamp_format = timestamp_format

    @property
    def writer(self) -> ConsoleWriter:
        return self._writer

    def _timestamp(self) -> str:
        ts = self._clock()
        if self._timestamp_format:
            return ts.strftime(self._timestamp_format)
        return ts.isoformat()

    def format_line(
        self,
        name: str,
        level: LogLevel,
        template: str,
        exception: BaseException | None,
        args: Sequence[Any],
    ) -> str:
        msg = template.format(*args)
        if exception is not None:
            msg = f"{msg} | {describe_exception(exception)}"
        level_text = level.value if isinstance(level, LogLevel) else str(level)
        return f"{self._timestamp()} | {level_text} | {name} | {msg}"

    def _write_message(
        self,
        name: str,
        level: LogLevel,
        message: MessageThunk = None,
        exception: BaseException | None = None,
        args: Sequence[Any] = (),
    ) -> bool:
        if message is None:
            return True
        color = _LEVEL_COLORS.get(level)
        line = self.format_line(name, level, message(), exception, args)
        self._writer.post(color, line)
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


def create(
    writer: ConsoleWriter | None = None,
    *,
    timestamp_format: str | None = None,
) -> ConsoleLogProvider:
    return ConsoleLogProvider(writer, timestamp_format=timestamp_format)
