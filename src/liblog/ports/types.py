from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Protocol, Sequence


class LogLevel(str, Enum):
    TRACE = "Trace"
    DEBUG = "Debug"
    INFO = "Info"
    WARN = "Warn"
    ERROR = "Error"
    FATAL = "Fatal"

    @classmethod
    def coerce(cls, value: str | "LogLevel") -> "LogLevel":
        if isinstance(value, LogLevel):
            return value
        v = (value or "").strip().lower()
        for member in cls:
            if member.value.lower() == v or member.name.lower() == v:
                return member
        raise ValueError(f"Unknown log level: {value!r}")

    def rank(self) -> int:
        order = {
            LogLevel.TRACE: 0,
            LogLevel.DEBUG: 1,
            LogLevel.INFO: 2,
            LogLevel.WARN: 3,
            LogLevel.ERROR: 4,
            LogLevel.FATAL: 5,
        }
        return order[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.rank() < other.rank()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.rank() <= other.rank()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.rank() > other.rank()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.rank() >= other.rank()


# None asks the backend whether the level is enabled without logging anything.
# A callable asks it to log; the callable returns the unformatted template.
MessageThunk = Optional[Callable[[], str]]


class LogFunc(Protocol):
    """Signature every backend logger satisfies.

    Returns whether the message was (or, for a probe, would be) emitted at
    ``level``. It says nothing about the success of the underlying I/O.
    """

    def __call__(
        self,
        level: LogLevel,
        message: MessageThunk = None,
        exception: BaseException | None = None,
        args: Sequence[Any] = (),
    ) -> bool: ...


@dataclass(frozen=True, slots=True)
class Log:
    """Handle given to application code. Useful with dependency injection."""

    log: LogFunc
