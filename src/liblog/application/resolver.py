from __future__ import annotations

import logging
import sys
import threading
from dataclasses import dataclass, replace
from typing import Callable, Sequence

from liblog.adapters.console import console_provider
from liblog.adapters.console.writer import ConsoleWriter
from liblog.adapters.dynamic import dynamic_provider
from liblog.adapters.dynamic.binding import LOGURU_TARGET
from liblog.adapters.noop.noop_provider import noop_logger
from liblog.ports.providers import LogProviderPort
from liblog.ports.types import Log
from liblog.shared.callsite import caller_name, type_name
from liblog.shared.config import LibLogConfig
from liblog.shared.lazy import Lazy

_log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ProviderEntry:
    is_available: Callable[[], bool]
    create: Callable[[], LogProviderPort]


class ResolverContext:
    """Decides which provider serves ``get_logger``.

    Resolution order: the explicit override, then the first available entry
    of ``known_providers`` (computed once, never revisited), then no-op.
    """

    def __init__(self, known_providers: Sequence[ProviderEntry]) -> None:
        self._known_providers = tuple(known_providers)
        self._override: LogProviderPort | None = None
        self._lock = threading.Lock()
        self._resolved: Lazy[LogProviderPort | None] = Lazy(self._resolve)

    @property
    def known_providers(self) -> tuple[ProviderEntry, ...]:
        return self._known_providers

    def _resolve(self) -> LogProviderPort | None:
        # Greedy: order of known providers is priority.
        for entry in self._known_providers:
            if entry.is_available():
                provider = entry.create()
                _log.debug("resolved log provider %s", type(provider).__name__)
                return provider
        _log.debug("no log provider available, logging disabled")
        return None

    @property
    def resolved_provider(self) -> LogProviderPort | None:
        return self._resolved.value

    def set_provider(self, provider: LogProviderPort) -> None:
        with self._lock:
            self._override = provider
        _log.debug("log provider overridden with %s", type(provider).__name__)

    def current_provider(self) -> LogProviderPort | None:
        override = self._override
        if override is not None:
            return override
        return self.resolved_provider

    def get_logger(self, name: str | type) -> Log:
        if isinstance(name, type):
            name = type_name(name)
        provider = self.current_provider()
        if provider is None:
            return Log(noop_logger)
        return Log(provider.get_logger(name))

    def get_current_logger(self, depth: int = 0) -> Log:
        return self.get_logger(caller_name(depth))


def default_providers(config: LibLogConfig | None = None) -> list[ProviderEntry]:
    cfg = config or LibLogConfig()
    entries: list[ProviderEntry] = []

    if cfg.loguru.enabled:
        target = LOGURU_TARGET
        if cfg.loguru.scope_key != target.scope_key:
            target = replace(target, scope_key=cfg.loguru.scope_key)
        entries.append(
            ProviderEntry(
                is_available=lambda: dynamic_provider.is_available(target),
                create=lambda: dynamic_provider.create(target),
            )
        )

    if cfg.console.enabled:
        console_cfg = cfg.console

        def create_console() -> LogProviderPort:
            stream = sys.stderr if console_cfg.stream == "stderr" else sys.stdout
            writer = ConsoleWriter(stream, colorize=console_cfg.colors)
            return console_provider.create(writer, timestamp_format=console_cfg.timestamp_format)

        entries.append(ProviderEntry(is_available=console_provider.is_available, create=create_console))

    return entries


def new_resolver_context(config: LibLogConfig | None = None) -> ResolverContext:
    return ResolverContext(default_providers(config))
