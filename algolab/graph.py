"""Directed graphs on an adjacency matrix and breadth-first topological sort."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import TextIO

from algolab.fifo import Queue

DEFAULT_VERTICES = 10
DONE = -1

_MATRIX_HEADER = "Updated Adjacent Matrix\n"
_STEP_RULE = "\n------------\n"

EXAMPLE_EDGES = (
    (0, 1), (0, 5), (1, 7), (3, 2), (3, 4), (3, 7), (3, 8), (4, 8),
    (6, 0), (6, 1), (6, 2), (3, 7), (8, 2), (8, 7), (9, 4),
)


@dataclass(frozen=True)
class SortStep:
    """State of the sort after one round of removing zero in-degree vertices.

    ``in_degrees`` holds -1 for vertices already placed in the order.
    """

    queued: tuple[int, ...]
    matrix: tuple[tuple[int, ...], ...]
    in_degrees: tuple[int, ...]
    order: tuple[int, ...]


def _render_rows(matrix: Sequence[Sequence[int]]) -> str:
    return "".join("".join(f"{cell} " for cell in row) + "\n" for row in matrix)


class Graph:
    """Directed graph stored as a square 0/1 adjacency matrix."""

    def __init__(self, vertices: int = DEFAULT_VERTICES) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self.vertices = vertices
        self.matrix = [[0] * vertices for _ in range(vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertices:
            raise IndexError(f"vertex {vertex} out of range 0..{self.vertices - 1}")

    def add_edge(self, row: int, column: int) -> None:
        """Add the edge row -> column."""
        self._check(row)
        self._check(column)
        self.matrix[row][column] = 1

    def in_degrees(self) -> list[int]:
        """Return the number of incoming edges of every vertex."""
        return [sum(row[v] for row in self.matrix) for v in range(self.vertices)]

    def render_matrix(self) -> str:
        """Return the adjacency matrix, one line per row."""
        return _render_rows(self.matrix)

    def topological_steps(self) -> Iterator[SortStep]:
        """Yield each round of a breadth-first (Kahn) topological sort.

        The graph itself is left unchanged. Raises ValueError on a cycle.
        """
        matrix = [row[:] for row in self.matrix]
        degrees = self.in_degrees()
        queue = Queue()
        while any(d != DONE for d in degrees):
            ready = [v for v, d in enumerate(degrees) if d == 0]
            if not ready:
                raise ValueError("graph contains a cycle")
            for vertex in ready:
                queue.put(vertex)
                degrees[vertex] = DONE
                matrix[vertex] = [cell - 1 if cell > 0 else cell for cell in matrix[vertex]]
            degrees = [
                DONE if d == DONE else sum(row[v] for row in matrix)
                for v, d in enumerate(degrees)
            ]
            yield SortStep(
                queued=tuple(ready),
                matrix=tuple(tuple(row) for row in matrix),
                in_degrees=tuple(degrees),
                order=tuple(queue),
            )


def bfs_topological_sort(graph: Graph, out: TextIO | None = None) -> list[int]:
    """Sort the graph, writing every step to ``out``; return the vertex order."""
    out = sys.stdout if out is None else out
    out.write("".join(f"{d} " for d in graph.in_degrees()))
    out.write("\n------\n")
    order: tuple[int, ...] = ()
    for step in graph.topological_steps():
        out.write(_MATRIX_HEADER)
        out.write(_render_rows(step.matrix))
        out.write(_STEP_RULE)
        out.write("Update in-degrees : ")
        out.write("".join(f"{d} " for d in step.in_degrees))
        out.write(_STEP_RULE)
        out.write("".join(f" Item : {v}\n" for v in step.order))
        order = step.order
    return list(order)


def example_graph() -> Graph:
    """Return the ten-vertex demonstration graph."""
    graph = Graph(DEFAULT_VERTICES)
    for row, column in EXAMPLE_EDGES:
        graph.add_edge(row, column)
    return graph


def main(argv: Sequence[str] | None = None) -> int:
    """Print the demonstration graph and its breadth-first topological sort."""
    parser = argparse.ArgumentParser(
        description="Breadth-first topological sort of a demonstration graph."
    )
    parser.parse_args(argv)
    graph = example_graph()
    out = sys.stdout
    out.write("First Adjacent Matrix\n")
    out.write(_MATRIX_HEADER)
    out.write(graph.render_matrix())
    out.write("\n-----------------------\n")
    bfs_topological_sort(graph, out)
    return 0