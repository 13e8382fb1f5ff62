"""A bounded single-producer, single-consumer queue with separate handles for each end."""

from __future__ import annotations

import threading
from collections import deque
from typing import Any


class _Ring:
    """Shared state behind a producer and consumer pair."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self.items: deque[Any] = deque()
        self.lock = threading.Lock()
        self.not_empty = threading.Condition(self.lock)
        self.not_full = threading.Condition(self.lock)

    def try_push(self, value: Any) -> bool:
        with self.lock:
            if len(self.items) >= self.capacity:
                return False
            self.items.append(value)
            self.not_empty.notify()
            return True

    def push(self, value: Any) -> None:
        with self.not_full:
            while len(self.items) >= self.capacity:
                self.not_full.wait()
            self.items.append(value)
            self.not_empty.notify()

    def try_pop(self) -> Any:
        with self.lock:
            if not self.items:
                return None
            value = self.items.popleft()
            self.not_full.notify()
            return value

    def pop(self) -> Any:
        with self.not_empty:
            while not self.items:
                self.not_empty.wait()
            value = self.items.popleft()
            self.not_full.notify()
            return value

    def skip_n(self, n: int) -> int:
        with self.lock:
            skipped = min(n, len(self.items))
            for _ in range(skipped):
                self.items.popleft()
            if skipped:
                self.not_full.notify()
            return skipped

    def size(self) -> int:
        with self.lock:
            return len(self.items)


class Producer:
    """The handle that adds values to the queue."""

    def __init__(self, ring: _Ring) -> None:
        self._ring = ring

    def push(self, value: Any) -> None:
        """Add a value, blocking while the queue is full."""
        self._ring.push(value)

    def try_push(self, value: Any) -> bool:
        """Add a value without blocking; False if the queue was full and nothing was added."""
        return self._ring.try_push(value)

    def capacity(self) -> int:
        """The number of values the queue holds when full."""
        return self._ring.capacity

    def size(self) -> int:
        """The number of values currently queued."""
        return self._ring.size()

    def free_space(self) -> int:
        """How many more values can be pushed before the queue is full."""
        return self.capacity() - self.size()


class Consumer:
    """The handle that takes values off the queue."""

    def __init__(self, ring: _Ring) -> None:
        self._ring = ring

    def pop(self) -> Any:
        """Take the oldest value, blocking while the queue is empty."""
        return self._ring.pop()

    def try_pop(self) -> Any:
        """Take the oldest value without blocking; None if the queue is empty."""
        return self._ring.try_pop()

    def skip_n(self, n: int) -> int:
        """Discard at most ``n`` of the oldest values; returns how many were discarded."""
        if n < 0:
            raise ValueError("n must not be negative")
        return self._ring.skip_n(n)

    def capacity(self) -> int:
        """The number of values the queue holds when full."""
        return self._ring.capacity

    def size(self) -> int:
        """The number of values currently queued."""
        return self._ring.size()


def make(capacity: int) -> tuple[Producer, Consumer]:
    """Create a queue bounded to ``capacity`` values and return its two handles."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    ring = _Ring(capacity)
    return Producer(ring), Consumer(ring)