import pytest

from grafos.graph import NO_VIA, Edge, Graph


def _sample() -> Graph:
    g = Graph()
    for i, j in [(1, 5), (1, 3), (3, 4), (5, 3), (5, 2), (5, 4)]:
        g.add_edge(i, j)
    return g


def test_default_vertex_count():
    g = Graph()
    assert list(g.vertices) == [1, 2, 3, 4, 5]


def test_new_edges_come_first():
    g = Graph()
    g.add_edge(1, 5)
    g.add_edge(1, 3)
    assert [e.target for e in g.neighbors(1)] == [3, 5]


def test_duplicate_edge_rejected():
    g = Graph()
    assert g.add_edge(2, 4) is True
    assert g.add_edge(2, 4) is False
    assert len(g.neighbors(2)) == 1


def test_loop_allowed():
    g = Graph()
    assert g.add_edge(4, 4)
    assert g.has_edge(4, 4)


@pytest.mark.parametrize("i, j", [(0, 1), (1, 0), (6, 1), (1, 6)])
def test_out_of_range_vertex_raises(i, j):
    g = Graph()
    with pytest.raises(ValueError):
        g.add_edge(i, j)


def test_has_edge_is_directed():
    g = _sample()
    assert g.has_edge(1, 3)
    assert not g.has_edge(3, 1)


def test_edges_match_insertions():
    pairs = {(1, 5), (1, 3), (3, 4), (5, 3), (5, 2), (5, 4)}
    g = _sample()
    assert set(g.edges()) == pairs
    sources = [i for i, _ in g.edges()]
    assert sources == sorted(sources)


def test_message_is_kept():
    g = Graph()
    g.add_edge(1, 2, 7)
    assert g.neighbors(1) == (Edge(2, 7),)


def test_clear_removes_all_edges():
    g = _sample()
    g.flags[2] = 2
    g.clear()
    assert list(g.edges()) == []
    assert all(not g.neighbors(i) for i in g.vertices)
    assert g.flags[2] == 2


def test_clear_then_reuse():
    g = _sample()
    g.clear()
    assert g.add_edge(1, 5)
    assert list(g.edges()) == [(1, 5)]


def test_reset_flags_and_vias():
    g = _sample()
    for i in g.vertices:
        g.flags[i] = 2
        g.vias[i] = 1
    g.reset_flags()
    g.reset_vias()
    assert set(g.flags.values()) == {0}
    assert set(g.vias.values()) == {NO_VIA}


def test_render_lists_adjacency():
    g = Graph(3)
    g.add_edge(1, 2)
    g.add_edge(1, 3)
    assert g.render() == "V1 -> 3 -> 2 -> \nV2 -> \nV3 -> \n"


def test_render_flags_and_vias_have_line_per_vertex():
    g = _sample()
    g.flags[3] = 1
    g.vias[4] = 5
    flags = g.render_flags().splitlines()
    vias = g.render_vias().splitlines()
    assert flags[0] == "EXIBINDO FLAGS:"
    assert vias[0] == "EXIBINDO VIAS:"
    assert len(flags) == len(vias) == 6
    assert "V 3 -> 1" in flags
    assert "V 4 -> 5" in vias


def test_invalid_vertex_count():
    with pytest.raises(ValueError):
        Graph(0)