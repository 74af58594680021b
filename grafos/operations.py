"""Whole-graph operations: differences, complements, transposes and conversions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import product
from typing import TypeVar

from grafos.graph import Graph
from grafos.matrix import AdjacencyMatrix
from grafos.weighted import WeightedGraph

_Container = TypeVar("_Container", Graph, AdjacencyMatrix)


def _same_size(first: Graph | AdjacencyMatrix, second: Graph | AdjacencyMatrix) -> None:
    if first.vertex_count != second.vertex_count:
        raise ValueError(
            f"graphs differ in size: {first.vertex_count} and {second.vertex_count} vertices"
        )


def _filled(result: _Container, pairs: Iterable[tuple[int, int]]) -> _Container:
    for i, j in pairs:
        result.add_edge(i, j)
    return result


def _all_pairs(container: Graph | AdjacencyMatrix) -> Iterator[tuple[int, int]]:
    return product(container.vertices, repeat=2)


def _absent_pairs(container: Graph | AdjacencyMatrix) -> Iterator[tuple[int, int]]:
    return (
        (i, j) for i, j in _all_pairs(container) if i != j and not container.has_edge(i, j)
    )


def missing_edges(g1: Graph, g2: Graph) -> Graph:
    """A new graph holding the edges of g1 that are not in g2."""
    _same_size(g1, g2)
    return _filled(
        Graph(g1.vertex_count), ((i, j) for i, j in g1.edges() if not g2.has_edge(i, j))
    )


def complement(graph: Graph) -> Graph:
    """A new graph with every non-loop edge that the given graph lacks."""
    return _filled(Graph(graph.vertex_count), _absent_pairs(graph))


def complement_matrix(matrix: AdjacencyMatrix) -> AdjacencyMatrix:
    """A new matrix with every non-loop cell the given matrix leaves unset."""
    return _filled(AdjacencyMatrix(matrix.vertex_count), _absent_pairs(matrix))


def transpose(graph: Graph) -> Graph:
    """A new graph with every edge of the given graph reversed."""
    return _filled(Graph(graph.vertex_count), ((j, i) for i, j in graph.edges()))


def matrix_to_list(matrix: AdjacencyMatrix) -> Graph:
    """The same graph as the matrix, stored as adjacency lists."""
    return _filled(
        Graph(matrix.vertex_count),
        ((i, j) for i, j in _all_pairs(matrix) if matrix.has_edge(i, j)),
    )


def is_subgraph(matrix: AdjacencyMatrix, graph: Graph) -> bool:
    """Whether every edge of the list graph is also set in the matrix."""
    _same_size(matrix, graph)
    return all(matrix.has_edge(i, j) for i, j in graph.edges())


def min_cost_graph(graph: WeightedGraph, cost: int) -> WeightedGraph:
    """A copy of the graph keeping only edges whose weight exceeds cost."""
    result = WeightedGraph(graph.vertex_count)
    for i in graph.vertices:
        for edge in graph.adjacency[i]:
            if edge.weight > cost:
                result.add_edge(i, edge.target, edge.weight)
    return result