"""Bindings into an external logging library located purely by name.

Nothing here imports the backend. Every type and member is looked up once
from the qualified names in a ``BindingTarget`` and wrapped in plain
callables, so the per-call path is a dict lookup plus a direct call.
"""

from __future__ import annotations

import logging
import operator
import pkgutil
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Mapping, Sequence

from liblog.ports.types import LogLevel
from liblog.shared.errors import BackendBindingError

_log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BindingTarget:
    """Where to find each piece of a backend's API.

    Qualified names use the ``package.module:attr.path`` form understood by
    ``pkgutil.resolve_name``.
    """

    log_manager: str
    level_registry: str
    logger_type: str
    level_names: Mapping[LogLevel, str] = field(default_factory=dict)
    default_level_name: str = "DEBUG"
    scope_method: str = "bind"
    scope_key: str = "source_context"
    write_method: str = "log"
    exception_method: str = "opt"
    min_level_attr: str = "_core.min_level"
    # Frames between the backend call and the code that called the LogFunc:
    # write -> DynamicLogProvider._write_message -> per-name closure -> caller.
    caller_depth: int = 3


LOGURU_TARGET = BindingTarget(
    log_manager="loguru:logger",
    level_registry="loguru:logger.level",
    logger_type="loguru._logger:Logger",
    level_names={
        LogLevel.FATAL: "CRITICAL",
        LogLevel.ERROR: "ERROR",
        LogLevel.WARN: "WARNING",
        LogLevel.INFO: "INFO",
        LogLevel.DEBUG: "DEBUG",
        LogLevel.TRACE: "TRACE",
    },
)


def resolve(qualified_name: str) -> Any | None:
    try:
        return pkgutil.resolve_name(qualified_name)
    except (ImportError, AttributeError, ValueError):
        return None


def is_available(target: BindingTarget) -> bool:
    return resolve(target.log_manager) is not None


def _lookup_level(registry: Any, registry_name: str, level_name: str) -> Any:
    try:
        if isinstance(registry, type) and issubclass(registry, Enum):
            return registry[level_name]
        return registry(level_name)
    except (KeyError, ValueError, TypeError) as e:
        raise BackendBindingError(f"Level {level_name!r} was not found in {registry_name}.") from e


def _require_member(owner: Any, owner_name: str, member: str) -> Callable[..., Any]:
    fn = getattr(owner, member, None)
    if fn is None or not callable(fn):
        raise BackendBindingError(f"Member {owner_name}.{member} was not found.")
    return fn


@dataclass(frozen=True, slots=True)
class Gateway:
    """Pre-bound entry points into one backend's logger type."""

    is_enabled: Callable[[Any, Any], bool]
    write: Callable[[Any, Any, str, Sequence[Any]], None]
    write_exception: Callable[[Any, Any, BaseException, str, Sequence[Any]], None]
    translate_level: Callable[[LogLevel], Any]

    @classmethod
    def create(cls, target: BindingTarget) -> "Gateway":
        registry = resolve(target.level_registry)
        if registry is None:
            raise BackendBindingError(f"Type {target.level_registry} was not found.")

        translated = {
            level: _lookup_level(
                registry,
                target.level_registry,
                target.level_names.get(level, target.default_level_name),
            )
            for level in LogLevel
        }
        fallback = _lookup_level(registry, target.level_registry, target.default_level_name)

        def translate_level(level: LogLevel) -> Any:
            return translated.get(level, fallback)

        logger_type = resolve(target.logger_type)
        if logger_type is None:
            raise BackendBindingError(f"Type {target.logger_type} was not found.")

        write_fn = _require_member(logger_type, target.logger_type, target.write_method)
        exception_fn = _require_member(logger_type, target.logger_type, target.exception_method)
        min_level = operator.attrgetter(target.min_level_attr)
        depth = target.caller_depth

        def is_enabled(logger: Any, level: Any) -> bool:
            return level.no >= min_level(logger)

        def write(logger: Any, level: Any, template: str, args: Sequence[Any]) -> None:
            write_fn(exception_fn(logger, depth=depth), level.name, template, *args)

        def write_exception(
            logger: Any, level: Any, exc: BaseException, template: str, args: Sequence[Any]
        ) -> None:
            write_fn(exception_fn(logger, exception=exc, depth=depth), level.name, template, *args)

        _log.debug("bound logging backend %s", target.logger_type)
        return cls(
            is_enabled=is_enabled,
            write=write,
            write_exception=write_exception,
            translate_level=translate_level,
        )


def scoped_logger_factory(target: BindingTarget) -> Callable[[str], Any]:
    """Return ``name -> backend logger`` carrying ``name`` under ``target.scope_key``."""
    manager = resolve(target.log_manager)
    if manager is None:
        raise BackendBindingError(f"Type {target.log_manager} was not found.")
    scope_fn = _require_member(manager, target.log_manager, target.scope_method)
    key = target.scope_key

    def for_context(name: str) -> Any:
        return scope_fn(**{key: name})

    return for_context
