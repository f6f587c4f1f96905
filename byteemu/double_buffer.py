"""Two buffers: one is written while the other is read, then they swap."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class DoubleBuffer(Generic[T]):
    """A writer fills the back buffer and publishes it; readers see the front one."""

    def __init__(self, a: T, b: T) -> None:
        self._buffers: list[T] = [a, b]
        self._active = 0
        self._write_lock = threading.Lock()

    def write(self, func: Callable[[T], T | None]) -> None:
        """Let ``func`` fill the back buffer, then make it the front one.

        ``func`` may change the buffer in place or return a replacement.
        """
        with self._write_lock:
            back = self._active ^ 1
            replacement = func(self._buffers[back])
            if replacement is not None:
                self._buffers[back] = replacement
            self._active = back

    def read(self) -> T:
        """The buffer most recently published."""
        return self._buffers[self._active]