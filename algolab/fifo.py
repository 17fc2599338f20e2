"""A first-in, first-out queue of integers."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator


class Queue:
    """FIFO queue: values leave in the order they were put in."""

    def __init__(self) -> None:
        self._items: deque[int] = deque()

    def put(self, value: int) -> None:
        """Add a value at the back of the queue."""
        self._items.append(value)

    def get(self) -> int:
        """Remove and return the value at the front of the queue."""
        if not self._items:
            raise IndexError("get from an empty queue")
        return self._items.popleft()

    def peek(self) -> int:
        """Return the value at the front without removing it."""
        if not self._items:
            raise IndexError("peek into an empty queue")
        return self._items[0]

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def render(self) -> str:
        """Return one ' Item : <value>' line per queued value, front first."""
        return "".join(f" Item : {value}\n" for value in self._items)