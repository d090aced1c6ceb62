from __future__ import annotations

import threading
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class Lazy(Generic[T]):
    """Run-once value shared by every thread.

    The factory runs at most once successfully. If it raises, nothing is
    cached and the next access tries again.
    """

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory
        self._lock = threading.Lock()
        self._created = False
        self._value: T | None = None

    @property
    def is_value_created(self) -> bool:
        return self._created

    @property
    def value(self) -> T:
        if self._created:
            return self._value  # type: ignore[return-value]
        with self._lock:
            if not self._created:
                self._value = self._factory()
                self._created = True
        return self._value  # type: ignore[return-value]
