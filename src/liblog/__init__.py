from .application.log_provider import (
    default_context,
    get_current_logger,
    get_logger,
    set_logger_provider,
)
from .application.resolver import ProviderEntry, ResolverContext, new_resolver_context
from .ports.providers import LogProviderPort
from .ports.types import Log, LogFunc, LogLevel, MessageThunk
from .shared.errors import BackendBindingError, LibLogError

__all__ = [
    "default_context",
    "get_current_logger",
    "get_logger",
    "set_logger_provider",
    "ProviderEntry",
    "ResolverContext",
    "new_resolver_context",
    "LogProviderPort",
    "Log",
    "LogFunc",
    "LogLevel",
    "MessageThunk",
    "BackendBindingError",
    "LibLogError",
]
