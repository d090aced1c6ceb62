from __future__ import annotations

import queue
import sys
import threading
from contextlib import contextmanager
from typing import Any, Iterator

from colorama import Fore, just_fix_windows_console

_STOP = object()


class ConsoleWriter:
    """Single-consumer console sink.

    Producers call ``post`` from any thread. One daemon thread drains the
    queue in submission order, so a color change and the text it applies to
    are never split by another producer's line.
    """

    def __init__(self, stream: Any = None, *, colorize: bool | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout
        if colorize is None:
            isatty = getattr(self._stream, "isatty", None)
            colorize = bool(isatty()) if callable(isatty) else False
        self._colorize = colorize
        if self._colorize:
            just_fix_windows_console()
        self._queue: queue.Queue[Any] = queue.Queue()
        self._closed = False
        self._lock = threading.Lock()
        self._thread = threading.Thread(target=self._drain, name="liblog-console-writer", daemon=True)
        self._thread.start()

    @property
    def colorize(self) -> bool:
        return self._colorize

    def post(self, color: str | None, text: str) -> None:
        # Nothing may follow the stop marker, or flush() would wait forever.
        with self._lock:
            if self._closed:
                return
            self._queue.put((color, text))

    def flush(self) -> None:
        """Block until every item posted so far has been written (or dropped)."""
        self._queue.join()

    def close(self) -> None:
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._queue.put(_STOP)
        self._thread.join()

    @contextmanager
    def _foreground(self, color: str | None) -> Iterator[None]:
        if not self._colorize or color is None:
            yield
            return
        self._stream.write(color)
        try:
            yield
        finally:
            self._stream.write(Fore.RESET)

    def _drain(self) -> None:
        while True:
            item = self._queue.get()
            try:
                if item is _STOP:
                    return
                color, text = item
                try:
                    with self._foreground(color):
                        self._stream.write(text + "\n")
                    self._stream.flush()
                except Exception:
                    # Dropped. Reporting through the facade could loop back here.
                    continue
            finally:
                self._queue.task_done()
