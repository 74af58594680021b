"""Paths between vertices and a rooted-tree check, built on breadth-first search."""

from __future__ import annotations

from collections import deque

from grafos.graph import NO_VIA, Graph
from grafos.matrix import AdjacencyMatrix
from grafos.search import Flag, breadth_first

PATH_START = 0


def _require(container: Graph | AdjacencyMatrix, vertex: int) -> None:
    if vertex not in container.vertices:
        raise ValueError(f"vertex {vertex} is outside 1..{container.vertex_count}")


def breadth_first_with_vias(graph: Graph, start: int) -> dict[int, int]:
    """Breadth-first search recording each vertex's predecessor.

    The start vertex gets via 0; unreachable vertices keep -1.
    Returns a copy of the recorded vias.
    """
    _require(graph, start)
    graph.reset_flags()
    graph.reset_vias()
    queue = deque([start])
    graph.flags[start] = Flag.DISCOVERED
    graph.vias[start] = PATH_START
    while queue:
        i = queue.popleft()
        graph.flags[i] = Flag.DONE
        for edge in graph.neighbors(i):
            if graph.flags[edge.target] == Flag.UNDISCOVERED:
                graph.flags[edge.target] = Flag.DISCOVERED
                graph.vias[edge.target] = i
                queue.append(edge.target)
    return dict(graph.vias)


def _walk_back(vias: dict[int, int], a: int, b: int) -> list[int]:
    path = deque([b])
    while b != a:
        b = vias[b]
        path.appendleft(b)
    return list(path)


def shortest_path(graph: Graph, i: int, j: int) -> list[int] | None:
    """Fewest-edge path from i to j, or None if i equals j or j is unreachable."""
    _require(graph, i)
    _require(graph, j)
    if i == j:
        return None
    vias = breadth_first_with_vias(graph, i)
    if vias[j] == NO_VIA:
        return None
    return _walk_back(vias, i, j)


def find_path(graph: Graph, a: int, b: int) -> list[int] | None:
    """Some path from a to b found by breadth-first search, or None."""
    _require(graph, a)
    _require(graph, b)
    if a == b:
        return None
    vias = breadth_first_with_vias(graph, a)
    if graph.flags[b] == Flag.UNDISCOVERED:
        return None
    return _walk_back(vias, a, b)


def find_path_matrix(matrix: AdjacencyMatrix, a: int, b: int) -> list[int] | None:
    """Some path from a to b in a matrix graph, or None."""
    _require(matrix, a)
    _require(matrix, b)
    if a == b:
        return None
    flags = dict.fromkeys(matrix.vertices, Flag.UNDISCOVERED)
    vias = dict.fromkeys(matrix.vertices, NO_VIA)
    flags[a] = Flag.DISCOVERED
    queue = deque([a])
    while queue:
        current = queue.popleft()
        for i in matrix.vertices:
            if matrix.has_edge(current, i) and flags[i] == Flag.UNDISCOVERED:
                flags[i] = Flag.DISCOVERED
                vias[i] = current
                queue.append(i)
        flags[current] = Flag.DONE
    if flags[b] == Flag.UNDISCOVERED:
        return None
    return _walk_back(vias, a, b)


def is_rooted_tree(graph: Graph) -> bool:
    """Whether some vertex reaches every vertex by breadth-first search."""
    for root in graph.vertices:
        breadth_first(graph, root)
        if all(graph.flags[j] == Flag.DONE for j in graph.vertices):
            return True
    return False