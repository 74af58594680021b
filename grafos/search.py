"""Depth-first and breadth-first searches over list and matrix graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, MutableMapping
from enum import IntEnum

from grafos.graph import Graph
from grafos.matrix import AdjacencyMatrix

_Successors = Callable[[int], list[int]]


class Flag(IntEnum):
    """Search state of a vertex."""

    UNDISCOVERED = 0
    DISCOVERED = 1
    DONE = 2


def _list_successors(graph: Graph) -> _Successors:
    return lambda i: [edge.target for edge in graph.neighbors(i)]


def _matrix_successors(matrix: AdjacencyMatrix) -> _Successors:
    return lambda i: [j for j in matrix.vertices if matrix.has_edge(i, j)]


def _depth(successors: _Successors, start: int, flags: MutableMapping[int, int]) -> list[int]:
    order: list[int] = []

    def visit(i: int) -> None:
        flags[i] = Flag.DISCOVERED
        order.append(i)
        for j in successors(i):
            if flags.get(j, Flag.UNDISCOVERED) == Flag.UNDISCOVERED:
                visit(j)
        flags[i] = Flag.DONE

    visit(start)
    return order


def _breadth(successors: _Successors, start: int, flags: MutableMapping[int, int]) -> list[int]:
    flags[start] = Flag.DISCOVERED
    queue = deque([start])
    order: list[int] = []
    while queue:
        i = queue.popleft()
        flags[i] = Flag.DONE
        order.append(i)
        for j in successors(i):
            if flags.get(j, Flag.UNDISCOVERED) == Flag.UNDISCOVERED:
                flags[j] = Flag.DISCOVERED
                queue.append(j)
    return order


def depth_first(graph: Graph, start: int) -> list[int]:
    """Depth-first search from start, marking the graph's flags.

    Flags are not reset first, so vertices already marked are skipped.
    Returns the vertices in the order they were discovered.
    """
    graph._check(start)
    return _depth(_list_successors(graph), start, graph.flags)


def depth_first_matrix(
    matrix: AdjacencyMatrix,
    start: int,
    flags: MutableMapping[int, int] | None = None,
) -> MutableMapping[int, int]:
    """Depth-first search on a matrix, marking and returning the given flags.

    When no flags are given, every vertex starts undiscovered.
    """
    matrix._check(start)
    if flags is None:
        flags = dict.fromkeys(matrix.vertices, Flag.UNDISCOVERED)
    _depth(_matrix_successors(matrix), start, flags)
    return flags


def breadth_first(graph: Graph, start: int) -> list[int]:
    """Breadth-first search from start after resetting the graph's flags.

    Returns the vertices in the order they were completed.
    """
    graph._check(start)
    graph.reset_flags()
    return _breadth(_list_successors(graph), start, graph.flags)


def breadth_first_matrix(matrix: AdjacencyMatrix, start: int) -> dict[int, int]:
    """Breadth-first search on a matrix; returns the flag of every vertex."""
    matrix._check(start)
    flags: dict[int, int] = dict.fromkeys(matrix.vertices, Flag.UNDISCOVERED)
    _breadth(_matrix_successors(matrix), start, flags)
    return flags