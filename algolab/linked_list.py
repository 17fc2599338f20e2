"""A singly linked list of integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: int, next_node: _Node | None = None) -> None:
        self.value = value
        self.next = next_node


class LinkedList:
    """Singly linked list that supports adding at either end."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: _Node | None = None
        self._length = 0
        for value in values:
            self.append(value)

    def push_front(self, value: int) -> None:
        """Insert a value before the first item."""
        self._head = _Node(value, self._head)
        self._length += 1

    def append(self, value: int) -> None:
        """Insert a value after the last item."""
        node = _Node(value)
        if self._head is None:
            self._head = node
        else:
            last = self._head
            while last.next is not None:
                last = last.next
            last.next = node
        self._length += 1

    def find(self, value: int) -> int | None:
        """Return the position of the first item equal to value, or None."""
        for position, item in enumerate(self):
            if item == value:
                return position
        return None

    def remove(self, value: int) -> bool:
        """Remove the first item equal to value; return whether one was found."""
        previous: _Node | None = None
        current = self._head
        while current is not None and current.value != value:
            previous = current
            current = current.next
        if current is None:
            return False
        if previous is None:
            self._head = current.next
        else:
            previous.next = current.next
        current.next = None
        self._length -= 1
        return True

    def clear(self) -> None:
        """Remove every item."""
        self._head = None
        self._length = 0

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        return reversed(list(self))

    def __len__(self) -> int:
        return self._length

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def render(self) -> str:
        """Return the items front to back, each followed by a space."""
        return "".join(f"{value} " for value in self)