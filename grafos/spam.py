"""Finding users who may have started spreading a message."""

from __future__ import annotations

from collections import Counter

from grafos.graph import Graph


def suspicious_users(graph: Graph, message: int) -> list[int]:
    """Vertices that never received an edge carrying the given message."""
    received = Counter(
        edge.target
        for i in graph.vertices
        for edge in graph.adjacency[i]
        if edge.message == message
    )
    return [i for i in graph.vertices if received[i] == 0]


def render_suspects(graph: Graph, message: int) -> str:
    """Text listing the suspicious users for the given message."""
    suspects = "".join(f" {i}" for i in suspicious_users(graph, message))
    return f"Lista de usuários suspeitos de mandar spam: \n {{{suspects} }}\n"