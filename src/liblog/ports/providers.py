from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Protocol, runtime_checkable

from .types import LogFunc


@runtime_checkable
class LogProviderPort(Protocol):
    """A concrete logging backend (console, loguru, ...)."""

    def get_logger(self, name: str) -> LogFunc: ...

    def open_nested_context(self, message: str) -> AbstractContextManager[None]: ...

    def open_mapped_context(
        self, key: str, value: object, destructure: bool = False
    ) -> AbstractContextManager[None]: ...
