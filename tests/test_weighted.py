import pytest

from grafos.graph import NO_VIA
from grafos.weighted import WeightedEdge, WeightedGraph


def test_add_edge_keeps_weight():
    g = WeightedGraph()
    g.add_edge(1, 2, 4)
    g.add_edge(1, 3, 2)
    assert g.neighbors(1) == (WeightedEdge(3, 2), WeightedEdge(2, 4))


def test_duplicate_rejected_even_with_other_weight():
    g = WeightedGraph()
    assert g.add_edge(1, 2, 4) is True
    assert g.add_edge(1, 2, 9) is False
    assert g.neighbors(1) == (WeightedEdge(2, 4),)


@pytest.mark.parametrize("i, j", [(0, 2), (2, 0), (7, 1)])
def test_out_of_range_vertex_raises(i, j):
    g = WeightedGraph()
    with pytest.raises(ValueError):
        g.add_edge(i, j, 1)


def test_has_edge_is_directed():
    g = WeightedGraph()
    g.add_edge(2, 5, 3)
    assert g.has_edge(2, 5)
    assert not g.has_edge(5, 2)


def test_reset_flags_and_vias():
    g = WeightedGraph()
    for i in g.vertices:
        g.flags[i] = 1
        g.vias[i] = 3
    g.reset_flags()
    g.reset_vias()
    assert set(g.flags.values()) == {0}
    assert set(g.vias.values()) == {NO_VIA}


def test_render_omits_weights():
    g = WeightedGraph(2)
    g.add_edge(1, 2, 4)
    assert g.render() == "V1 -> 2 -> \nV2 -> \n"


def test_render_flags_and_vias():
    g = WeightedGraph()
    g.flags[2] = 2
    g.vias[5] = 1
    flags = g.render_flags().splitlines()
    vias = g.render_vias().splitlines()
    assert flags[0] == "EXIBINDO FLAGS:"
    assert vias[0] == "EXIBINDO VIAS:"
    assert "V 2 -> 2" in flags
    assert "V 5 -> 1" in vias
    assert len(flags) == len(vias) == 6