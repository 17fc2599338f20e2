"""Hash table of integer keys using separate chaining."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from algolab.linked_list import LinkedList

HASH_TABLE_SIZE = 11
EXAMPLE_DATA = (44, 666, 27, 102, 58, 90, 30, 63, 24, 11, 2)


def hash_func(table_size: int, key: int) -> int:
    """Return the bucket index of key in a table of table_size buckets."""
    if table_size <= 0:
        raise ValueError("table size must be positive")
    return key % table_size


class HashTable:
    """Fixed-size hash table; colliding keys share a linked-list bucket."""

    def __init__(self, size: int = HASH_TABLE_SIZE) -> None:
        if size <= 0:
            raise ValueError("table size must be positive")
        self.size = size
        self._buckets = [LinkedList() for _ in range(size)]
        self._count = 0

    def index_of(self, key: int) -> int:
        """Return the bucket index that key belongs to."""
        return hash_func(self.size, key)

    def insert(self, key: int) -> None:
        """Add key at the front of its bucket."""
        self._buckets[self.index_of(key)].push_front(key)
        self._count += 1

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        return key in self._buckets[self.index_of(key)]

    def __len__(self) -> int:
        return self._count

    def bucket(self, index: int) -> list[int]:
        """Return the keys in the bucket at index, front first."""
        if not 0 <= index < self.size:
            raise IndexError(f"bucket {index} out of range 0..{self.size - 1}")
        return list(self._buckets[index])

    def clear(self) -> None:
        """Remove every key."""
        for bucket in self._buckets:
            bucket.clear()
        self._count = 0

    def render(self) -> str:
        """Return one 'HashTable[i] --> keys' line per bucket."""
        return "".join(
            f"HashTable[{index}] --> {bucket.render()}\n"
            for index, bucket in enumerate(self._buckets)
        )


def main(argv: Sequence[str] | None = None) -> int:
    """Insert keys into a hash table and print its buckets."""
    parser = argparse.ArgumentParser(
        description="Show how keys are chained in a separate-chaining hash table."
    )
    parser.add_argument(
        "keys", nargs="*", type=int, help="keys to insert (default: demonstration data)"
    )
    parser.add_argument(
        "--size", type=int, default=HASH_TABLE_SIZE, help="number of buckets"
    )
    args = parser.parse_args(argv)
    if args.size <= 0:
        parser.error("--size must be positive")
    table = HashTable(args.size)
    for key in args.keys or EXAMPLE_DATA:
        table.insert(key)
    sys.stdout.write(table.render())
    table.clear()
    return 0