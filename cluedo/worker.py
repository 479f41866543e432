"""A background thread with a split/join life cycle, and a locked FIFO queue."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class Worker(ABC):
    """Runs `run` on its own named thread between `split` and `join`."""

    def __init__(self, name: str = "Unnamed Thread") -> None:
        self.name = name
        self._thread: threading.Thread | None = None
        self._running = False

    def split(self) -> bool:
        """Start the thread; return False if one was already started and not joined."""
        if self._thread is not None:
            return False
        self._running = True
        self._thread = threading.Thread(target=self._main, name=self.name, daemon=True)
        self._thread.start()
        return True

    def join(self) -> bool:
        """Wait for the thread to finish; return False if none was started."""
        if self._thread is None:
            return False
        self._thread.join()
        self._thread = None
        return True

    def is_running(self) -> bool:
        return self._running

    def _main(self) -> None:
        try:
            self.run()
        finally:
            self._running = False

    @abstractmethod
    def run(self) -> None:
        """Do the work of the thread."""


class ThreadSafeQueue(Generic[T]):
    """A first-in first-out queue safe to share between threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._items: deque[T] = deque()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def add(self, value: T) -> None:
        with self._lock:
            self._items.append(value)

    def remove(self) -> T:
        """Remove and return the oldest value; raise IndexError when empty."""
        with self._lock:
            if not self._items:
                raise IndexError("remove from an empty queue")
            return self._items.popleft()

    def clear(self) -> None:
        with self._lock:
            self._items.clear()