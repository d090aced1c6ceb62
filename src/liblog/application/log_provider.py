"""Process-wide entry points backed by one default ``ResolverContext``."""

from __future__ import annotations

from liblog.application.resolver import ResolverContext, new_resolver_context
from liblog.ports.providers import LogProviderPort
from liblog.ports.types import Log
from liblog.shared.config import load_config
from liblog.shared.lazy import Lazy

_default_context: Lazy[ResolverContext] = Lazy(lambda: new_resolver_context(load_config()))


def default_context() -> ResolverContext:
    return _default_context.value


def set_logger_provider(provider: LogProviderPort) -> None:
    """Route every later ``get_logger`` call through ``provider``, whatever auto-detection finds."""
    default_context().set_provider(provider)


def get_logger(name: str | type) -> Log:
    """Logger for ``name``; a type is named ``module.QualName``."""
    return default_context().get_logger(name)


def get_current_logger() -> Log:
    """Logger named after the calling class or module."""
    return default_context().get_current_logger(depth=1)
