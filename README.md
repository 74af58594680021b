# grafos

Small directed graphs on vertices numbered `1..n` (five by default). A graph is
kept as adjacency lists (`Graph`, `WeightedGraph`) or as an `AdjacencyMatrix`.
The package also provides depth-first and breadth-first searches, path
finding, cycle and self-loop handling, and a handful of whole-graph
operations.

## Install

```
pip install .
pip install ".[test]"   # with pytest, to run the tests
```

## Building graphs

```python
from grafos.graph import Graph
from grafos.matrix import AdjacencyMatrix
from grafos.weighted import WeightedGraph

g = Graph(5)
g.add_edge(1, 5)        # True
g.add_edge(1, 3)
g.add_edge(3, 4)
g.add_edge(1, 3)        # False: the edge is already there
g.has_edge(1, 3)        # True
g.neighbors(1)          # (Edge(target=3, message=None), Edge(target=5, message=None))
list(g.edges())         # [(1, 3), (1, 5), (3, 4)]
print(g.render())       # one "V<i> -> ..." line per vertex

m = AdjacencyMatrix(5)
m.add_edge(1, 2)
m.has_edge(1, 2)        # True
print(m.render())       # one row of 0/1 cells per vertex

w = WeightedGraph(5)
w.add_edge(1, 2, 4)
```

New edges go to the front of a vertex's list, so a vertex's neighbours come
out most recent first. A vertex number outside `1..n` raises `ValueError`.
`Graph.add_edge` takes an optional `message` id stored on the `Edge`;
`Graph.clear()` removes every edge.

Each list graph also keeps a `flags` and a `vias` mapping per vertex, used by
the searches; `reset_flags()`, `reset_vias()`, `render_flags()` and
`render_vias()` reset and print them. For matrices, flags live in a separate
mapping, printed with `grafos.matrix.render_flags(flags)`.

## Searches

```python
from grafos.search import Flag, breadth_first, breadth_first_matrix, depth_first, depth_first_matrix

breadth_first(g, 1)          # resets flags, returns vertices in completion order
depth_first(g, 1)            # does not reset flags; returns discovery order
breadth_first_matrix(m, 1)   # {vertex: flag}
depth_first_matrix(m, 1)     # {vertex: flag}; an existing flags mapping may be passed
```

`Flag` has three states: `UNDISCOVERED`, `DISCOVERED` and `DONE`.

## Paths

```python
from grafos.paths import breadth_first_with_vias, find_path, find_path_matrix, is_rooted_tree, shortest_path

shortest_path(g, 1, 4)       # [1, 3, 4]
find_path(g, 1, 4)
find_path_matrix(m, 1, 2)    # [1, 2]
is_rooted_tree(g)            # does some vertex reach every vertex?
```

The path functions return `None` when both ends are the same vertex or there
is no path. `breadth_first_with_vias` returns each vertex's predecessor: `0`
for the start vertex, `-1` for vertices not reached.

## Operations

`grafos.operations`:

- `missing_edges(g1, g2)` – edges of `g1` not in `g2`
- `complement(graph)`, `complement_matrix(matrix)` – every non-loop edge that is absent
- `transpose(graph)` – every edge reversed
- `matrix_to_list(matrix)` – a matrix as a `Graph`
- `is_subgraph(matrix, graph)` – is every edge of the list graph set in the matrix?
- `min_cost_graph(graph, cost)` – a `WeightedGraph` copy keeping edges heavier than `cost`

Graphs of different sizes given to `missing_edges` or `is_subgraph` raise
`ValueError`.

## Cycles and loops

`grafos.cycles`:

- `has_cycle(graph, start)` – a depth-first search from `start` meets a cycle;
  an edge straight back to the vertex it came from does not count, so
  undirected graphs stored in both directions work
- `remove_cycles(graph, start)` – removes the edges that close cycles, returns how many
- `longest_cycle(graph)` – edge count of the longest cycle found from any start
- `count_loops(graph)`, `remove_loops(graph)` – self-loops

## Spam senders

`grafos.spam.suspicious_users(graph, message)` lists the vertices that never
received an edge carrying `message`; `render_suspects` formats that list as text.

## What it does not do

This is a library only: there is no command-line program, and graphs live in
memory with no way to save or load them.

## Tests

```
pytest
```