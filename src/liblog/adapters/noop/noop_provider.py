from __future__ import annotations

from contextlib import AbstractContextManager, nullcontext
from typing import Any, Sequence

from liblog.ports.providers import LogProviderPort
from liblog.ports.types import LogFunc, LogLevel, MessageThunk


def noop_logger(
    level: LogLevel,
    message: MessageThunk = None,
    exception: BaseException | None = None,
    args: Sequence[Any] = (),
) -> bool:
    return False


class NoopLogProvider(LogProviderPort):
    def get_logger(self, name: str) -> LogFunc:
        return noop_logger

    def open_nested_context(self, message: str) -> AbstractContextManager[None]:
        return nullcontext()

    def open_mapped_context(
        self, key: str, value: object, destructure: bool = False
    ) -> AbstractContextManager[None]:
        return nullcontext()
