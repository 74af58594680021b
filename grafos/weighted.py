"""Directed graph with integer edge weights, stored as adjacency lists."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from grafos.graph import (
    DEFAULT_VERTICES,
    FLAGS_TITLE,
    NO_VIA,
    VIAS_TITLE,
    _render_adjacency,
    _render_listing,
    _VertexRange,
)


@dataclass(frozen=True)
class WeightedEdge:
    """An outgoing edge with the vertex it points to and its weight."""

    target: int
    weight: int


class WeightedGraph(_VertexRange):
    """A weighted directed graph over vertices numbered from 1.

    Each vertex keeps its outgoing edges with the most recently added first.
    """

    def __init__(self, vertices: int = DEFAULT_VERTICES) -> None:
        super().__init__(vertices)
        self.adjacency: dict[int, list[WeightedEdge]] = {i: [] for i in self.vertices}
        self.flags: dict[int, int] = dict.fromkeys(self.vertices, 0)
        self.vias: dict[int, int] = dict.fromkeys(self.vertices, NO_VIA)

    def add_edge(self, i: int, j: int, weight: int) -> bool:
        """Add the edge i -> j with a weight; return False if it is already present."""
        self._check(i)
        self._check(j)
        if self.has_edge(i, j):
            return False
        self.adjacency[i].insert(0, WeightedEdge(j, weight))
        return True

    def has_edge(self, i: int, j: int) -> bool:
        """Whether the edge i -> j exists."""
        self._check(i)
        return any(edge.target == j for edge in self.adjacency[i])

    def neighbors(self, i: int) -> tuple[WeightedEdge, ...]:
        """The outgoing edges of vertex i, newest first."""
        self._check(i)
        return tuple(self.adjacency[i])

    def edges(self) -> Iterator[tuple[int, int]]:
        """Yield every edge as a (source, target) pair, by ascending source."""
        for i in self.vertices:
            for edge in self.adjacency[i]:
                yield i, edge.target

    def reset_flags(self) -> None:
        """Mark every vertex as undiscovered."""
        self.flags.update(dict.fromkeys(self.vertices, 0))

    def reset_vias(self) -> None:
        """Forget every recorded predecessor."""
        self.vias.update(dict.fromkeys(self.vertices, NO_VIA))

    def render(self) -> str:
        """Text listing each vertex followed by its adjacency list."""
        return _render_adjacency(self.vertices, self.adjacency)

    def render_flags(self) -> str:
        """Text listing the flag of each vertex."""
        return _render_listing(FLAGS_TITLE, self.vertices, self.flags)

    def render_vias(self) -> str:
        """Text listing the recorded predecessor of each vertex."""
        return _render_listing(VIAS_TITLE, self.vertices, self.vias)