import pytest

from grafos.matrix import AdjacencyMatrix, render_flags


@pytest.fixture
def matrix():
    return AdjacencyMatrix()


def set_cells(m):
    return [(i, j) for i in m.vertices for j in m.vertices if m.has_edge(i, j)]


def test_new_matrix_is_empty(matrix):
    assert set_cells(matrix) == []


def test_add_edge_is_directed(matrix):
    matrix.add_edge(1, 2)
    assert set_cells(matrix) == [(1, 2)]


def test_add_edge_twice_is_harmless(matrix):
    matrix.add_edge(4, 5)
    matrix.add_edge(4, 5)
    assert set_cells(matrix) == [(4, 5)]


@pytest.mark.parametrize("i, j", [(0, 1), (1, 0), (6, 2), (2, 6)])
def test_add_edge_out_of_range_raises(matrix, i, j):
    with pytest.raises(ValueError):
        matrix.add_edge(i, j)
    assert set_cells(matrix) == []


@pytest.mark.parametrize("i, j", [(0, 1), (1, 0), (6, 2), (2, 6)])
def test_has_edge_out_of_range_raises(matrix, i, j):
    with pytest.raises(ValueError):
        matrix.has_edge(i, j)


def test_render_rows():
    m = AdjacencyMatrix(2)
    m.add_edge(1, 2)
    assert m.render() == "V1 0 1 \nV2 0 0 \n"


def test_render_has_row_per_vertex(matrix):
    lines = matrix.render().splitlines()
    assert [line.split()[0] for line in lines] == ["V1", "V2", "V3", "V4", "V5"]


def test_render_flags_sorted_by_vertex():
    assert render_flags({2: 0, 1: 2}) == "EXIBINDO FLAGS:\nV1 - 2\nV2 - 0\n"


def test_invalid_vertex_count():
    with pytest.raises(ValueError):
        AdjacencyMatrix(0)