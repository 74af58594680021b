"""Cycle and self-loop detection and removal on list graphs."""

from __future__ import annotations

from collections.abc import Callable

from grafos.graph import NO_VIA, Graph
from grafos.search import Flag


def _search_back_edges(graph: Graph, start: int, on_back_edge: Callable[[int, int], None]) -> None:
    """Depth-first search from start after a reset, reporting edges to discovered vertices.

    An edge straight back to the vertex it came from is not reported.
    """
    graph._check(start)
    graph.reset_flags()
    graph.reset_vias()

    def visit(i: int) -> None:
        graph.flags[i] = Flag.DISCOVERED
        for edge in graph.adjacency[i]:
            target = edge.target
            if graph.flags[target] == Flag.UNDISCOVERED:
                graph.vias[target] = i
                visit(target)
            if graph.flags[target] == Flag.DISCOVERED and graph.vias[i] != target:
                on_back_edge(i, target)
        graph.flags[i] = Flag.DONE

    visit(start)


def has_cycle(graph: Graph, start: int) -> bool:
    """Whether a depth-first search from start meets a cycle.

    An edge straight back to the vertex it came from is not a cycle, so an
    undirected graph stored with both directions is handled.
    """
    found = False

    def mark(_source: int, _target: int) -> None:
        nonlocal found
        found = True

    _search_back_edges(graph, start, mark)
    return found


def remove_cycles(graph: Graph, start: int) -> int:
    """Remove edges that close cycles, searching depth-first from start.

    Vertices stay marked discovered once reached, so any edge to an already
    reached vertex other than the one it came from is removed.
    Returns the number of edges removed.
    """
    graph._check(start)
    graph.reset_flags()
    graph.reset_vias()
    removed = 0

    def visit(i: int) -> None:
        nonlocal removed
        graph.flags[i] = Flag.DISCOVERED
        kept = []
        for edge in list(graph.adjacency[i]):
            target = edge.target
            if graph.flags[target] == Flag.UNDISCOVERED:
                graph.vias[target] = i
                visit(target)
                kept.append(edge)
            elif graph.flags[target] == Flag.DISCOVERED and graph.vias[i] != target:
                removed += 1
            else:
                kept.append(edge)
        graph.adjacency[i] = kept

    visit(start)
    return removed


def _cycle_length(vias: dict[int, int], head: int, tail: int) -> int:
    length = 1
    while tail != head:
        length += 1
        tail = vias[tail]
        if tail == NO_VIA:
            raise RuntimeError("predecessor chain broke while measuring a cycle")
    return length


def longest_cycle(graph: Graph) -> int:
    """Edge count of the longest cycle met by depth-first searches from each vertex."""
    longest = 0

    def measure(source: int, target: int) -> None:
        nonlocal longest
        if graph.vias[target] != source:
            longest = max(longest, _cycle_length(graph.vias, target, source))

    for start in graph.vertices:
        _search_back_edges(graph, start, measure)
    return longest


def count_loops(graph: Graph) -> int:
    """Number of vertices with an edge to themselves."""
    return sum(1 for i in graph.vertices if graph.has_edge(i, i))


def remove_loops(graph: Graph) -> int:
    """Remove every self-loop; return how many there were."""
    removed = 0
    for i in graph.vertices:
        edges = graph.adjacency[i]
        kept = [edge for edge in edges if edge.target != i]
        removed += len(edges) - len(kept)
        graph.adjacency[i] = kept
    return removed