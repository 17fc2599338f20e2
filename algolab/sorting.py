"""Classic in-place sorting algorithms on lists of integers."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import MutableSequence, Sequence

from algolab.random_data import random_int_array

ARR_SIZE = 100
ARR_MAX_VALUE = 10000


def is_in_order(values: Sequence[int]) -> bool:
    """Return True if every value is no larger than the one after it."""
    return all(a <= b for a, b in zip(values, values[1:]))


def selection_sort(values: MutableSequence[int]) -> None:
    """Sort in place by repeated selection, largest value first."""
    size = len(values)
    for i in range(size - 1):
        chosen = max(range(i, size), key=lambda k: (values[k], -k))
        values[i], values[chosen] = values[chosen], values[i]


def bubble_sort(values: MutableSequence[int]) -> None:
    """Sort in place into ascending order, stopping once a pass makes no swap."""
    size = len(values)
    for done in range(size - 1):
        swapped = False
        for i in range(size - done - 1):
            if values[i] > values[i + 1]:
                values[i], values[i + 1] = values[i + 1], values[i]
                swapped = True
        if not swapped:
            break


def insertion_sort(values: MutableSequence[int]) -> None:
    """Sort in place into ascending order by insertion."""
    for i in range(1, len(values)):
        current = values[i]
        j = i - 1
        while j >= 0 and values[j] > current:
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = current


def _partition(values: MutableSequence[int], start: int, end: int) -> int:
    pivot = values[end]
    i, j = start, end - 1
    while True:
        while values[i] < pivot:
            i += 1
        while j >= start and pivot <= values[j]:
            j -= 1
        if j <= i:
            break
        values[i], values[j] = values[j], values[i]
    values[end], values[i] = values[i], values[end]
    return i


def quick_sort(values: MutableSequence[int]) -> None:
    """Sort in place into ascending order by quicksort, last element as pivot."""
    pending = [(0, len(values) - 1)]
    while pending:
        start, end = pending.pop()
        if start < end:
            middle = _partition(values, start, end)
            pending.append((start, middle - 1))
            pending.append((middle + 1, end))


def render_array(values: Sequence[int]) -> str:
    """Return one 'Array[n] ....: value' line per element, numbered from 1."""
    return "".join(
        f"Array[{number}] ....: {value} \n"
        for number, value in enumerate(values, start=1)
    )


_ALGORITHMS = {
    "selection": selection_sort,
    "bubble": bubble_sort,
    "insertion": insertion_sort,
    "quick": quick_sort,
}


def _status(values: Sequence[int]) -> str:
    if is_in_order(values):
        return "Random Array is SORTED :)"
    return "Random Array is NOT SORTED :("


def main(argv: Sequence[str] | None = None) -> int:
    """Sort a random array and print it before and after."""
    parser = argparse.ArgumentParser(description="Sort an array of random integers.")
    parser.add_argument("--size", type=int, default=ARR_SIZE, help="number of values")
    parser.add_argument(
        "--max-value", type=int, default=ARR_MAX_VALUE, help="largest possible value"
    )
    parser.add_argument(
        "--algorithm", choices=sorted(_ALGORITHMS), default="quick", help="sort to use"
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    if args.size < 0:
        parser.error("--size must not be negative")
    if args.max_value < 0:
        parser.error("--max-value must not be negative")

    values = random_int_array(args.size, args.max_value, random.Random(args.seed))
    out = sys.stdout
    out.write("******Random Array - BEFORE SORT******\n")
    out.write(render_array(values))
    out.write(_status(values))
    _ALGORITHMS[args.algorithm](values)
    out.write("\n******Random Array - AFTER SORT******\n")
    out.write(render_array(values))
    out.write(_status(values))
    return 0