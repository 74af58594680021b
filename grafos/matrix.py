"""Directed graph stored as an adjacency matrix over vertices numbered from 1."""

from __future__ import annotations

from collections.abc import Mapping

from grafos.graph import DEFAULT_VERTICES, _VertexRange


class AdjacencyMatrix(_VertexRange):
    """A square 0/1 matrix; cell (i, j) is 1 when the edge i -> j exists."""

    def __init__(self, vertices: int = DEFAULT_VERTICES) -> None:
        super().__init__(vertices)
        self._rows = [[0] * vertices for _ in range(vertices)]

    def add_edge(self, i: int, j: int) -> None:
        """Set the edge i -> j."""
        self._check(i)
        self._check(j)
        self._rows[i - 1][j - 1] = 1

    def has_edge(self, i: int, j: int) -> bool:
        """Whether the edge i -> j is set."""
        self._check(i)
        self._check(j)
        return self._rows[i - 1][j - 1] == 1

    def render(self) -> str:
        """Text with one row per vertex, cells separated by spaces."""
        return "".join(
            f"V{i} " + "".join(f"{cell} " for cell in row) + "\n"
            for i, row in enumerate(self._rows, start=1)
        )


def render_flags(flags: Mapping[int, int]) -> str:
    """Text listing search flags kept separately from a matrix, by vertex."""
    return "EXIBINDO FLAGS:\n" + "".join(
        f"V{vertex} - {flag}\n" for vertex, flag in sorted(flags.items())
    )