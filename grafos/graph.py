"""Directed graph stored as adjacency lists over vertices numbered from 1."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Protocol

DEFAULT_VERTICES = 5
NO_VIA = -1


class _Targeted(Protocol):
    @property
    def target(self) -> int: ...


@dataclass(frozen=True)
class Edge:
    """An outgoing edge: the vertex it points to and an optional message id."""

    target: int
    message: int | None = None


class _VertexRange:
    """Vertices numbered 1 through a fixed count."""

    def __init__(self, vertices: int) -> None:
        if vertices < 1:
            raise ValueError("a graph needs at least one vertex")
        self.vertex_count = vertices

    @property
    def vertices(self) -> range:
        """The vertex numbers, 1 through the vertex count."""
        return range(1, self.vertex_count + 1)

    def _check(self, vertex: int) -> None:
        if vertex not in self.vertices:
            raise ValueError(f"vertex {vertex} is outside 1..{self.vertex_count}")


def _render_adjacency(
    vertices: Iterable[int], adjacency: Mapping[int, Sequence[_Targeted]]
) -> str:
    return "".join(
        f"V{i} -> " + "".join(f"{edge.target} -> " for edge in adjacency[i]) + "\n"
        for i in vertices
    )


def _render_listing(title: str, vertices: Iterable[int], values: Mapping[int, int]) -> str:
    return title + "".join(f"V {i} -> {values[i]}\n" for i in vertices)


FLAGS_TITLE = "EXIBINDO FLAGS:\n"
VIAS_TITLE = "EXIBINDO VIAS:\n"


class Graph(_VertexRange):
    """A directed graph with per-vertex search flags and predecessor ("via") marks.

    Each vertex keeps its outgoing edges with the most recently added first.
    """

    def __init__(self, vertices: int = DEFAULT_VERTICES) -> None:
        super().__init__(vertices)
        self.adjacency: dict[int, list[Edge]] = {i: [] for i in self.vertices}
        self.flags: dict[int, int] = dict.fromkeys(self.vertices, 0)
        self.vias: dict[int, int] = dict.fromkeys(self.vertices, NO_VIA)

    def add_edge(self, i: int, j: int, message: int | None = None) -> bool:
        """Add the edge i -> j; return False if it is already present."""
        self._check(i)
        self._check(j)
        if self.has_edge(i, j):
            return False
        self.adjacency[i].insert(0, Edge(j, message))
        return True

    def has_edge(self, i: int, j: int) -> bool:
        """Whether the edge i -> j exists."""
        self._check(i)
        return any(edge.target == j for edge in self.adjacency[i])

    def neighbors(self, i: int) -> tuple[Edge, ...]:
        """The outgoing edges of vertex i, newest first."""
        self._check(i)
        return tuple(self.adjacency[i])

    def edges(self) -> Iterator[tuple[int, int]]:
        """Yield every edge as a (source, target) pair, by ascending source."""
        for i in self.vertices:
            for edge in self.adjacency[i]:
                yield i, edge.target

    def clear(self) -> None:
        """Remove every edge, keeping the vertices, flags and vias."""
        for edges in self.adjacency.values():
            edges.clear()

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