from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Any, Sequence

from liblog.adapters.dynamic import binding
from liblog.adapters.dynamic.binding import LOGURU_TARGET, BindingTarget, Gateway
from liblog.ports.providers import LogProviderPort
from liblog.ports.types import LogFunc, LogLevel, MessageThunk
from liblog.shared.lazy import Lazy


class DynamicLogProvider(LogProviderPort):
    """Backend reached through bindings built from a ``BindingTarget``.

    The per-name scoping binding is built here, eagerly. The gateway is
    built on the first log call and shared by every logger of this provider.
    """

    def __init__(self, target: BindingTarget = LOGURU_TARGET) -> None:
        self._target = target
        self._for_context = binding.scoped_logger_factory(target)
        self._gateway: Lazy[Gateway] = Lazy(lambda: Gateway.create(target))

    @property
    def target(self) -> BindingTarget:
        return self._target

    def _write_message(
        self,
        logger: Any,
        level: LogLevel,
        message: MessageThunk = None,
        exception: BaseException | None = None,
        args: Sequence[Any] = (),
    ) -> bool:
        gateway = self._gateway.value
        translated = gateway.translate_level(level)
        if message is None:
            return gateway.is_enabled(logger, translated)
        if not gateway.is_enabled(logger, translated):
            return False
        if exception is not None:
            gateway.write_exception(logger, translated, exception, message(), args)
        else:
            gateway.write(logger, translated, message(), args)
        return True

    def get_logger(self, name: str) -> LogFunc:
        logger = self._for_context(name)

        def log(
            level: LogLevel,
            message: MessageThunk = None,
            exception: BaseException | None = None,
            args: Sequence[Any] = (),
        ) -> bool:
            return self._write_message(logger, level, message, exception, args)

        return log

    def open_nested_context(self, message: str) -> AbstractContextManager[None]:
        raise NotImplementedError("Not Implemented")

    def open_mapped_context(
        self, key: str, value: object, destructure: bool = False
    ) -> AbstractContextManager[None]:
        raise NotImplementedError("Not Implemented")


def is_available(target: BindingTarget = LOGURU_TARGET) -> bool:
    return binding.is_available(target)


def create(target: BindingTarget = LOGURU_TARGET) -> DynamicLogProvider:
    return DynamicLogProvider(target)
