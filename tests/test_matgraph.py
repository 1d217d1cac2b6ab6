import pytest

from dstructs.matgraph import MatrixGraph


@pytest.fixture
def labelled():
    g = MatrixGraph(4)
    nodes = [g.add_node() for _ in range(4)]
    for node, label in zip(nodes, "abcd"):
        g.write_label(node, label)
    a, b, c, d = nodes
    arcs = [
        (a, b, 10), (a, c, 20), (a, d, 22), (b, a, 23), (b, c, 33),
        (c, a, 49), (c, b, 44), (c, d, 39), (d, a, 45), (d, c, 46),
    ]
    for source, target, weight in arcs:
        g.add_arc(source, target, weight)
    return g, nodes, arcs


def test_invalid_dimension():
    with pytest.raises(ValueError):
        MatrixGraph(0)


def test_add_node_takes_lowest_free_slot():
    g = MatrixGraph(3)
    first = g.add_node()
    second = g.add_node()
    assert first == 0
    g.remove_node(first)
    assert g.add_node() == first
    assert g.nodes() == sorted([first, second])


def test_full_graph_raises():
    g = MatrixGraph(2)
    g.add_node()
    g.add_node()
    with pytest.raises(IndexError):
        g.add_node()


def test_counts_and_emptiness(labelled):
    g, nodes, arcs = labelled
    assert not g.is_empty()
    assert g.node_count() == len(nodes)
    assert g.arc_count() == len(arcs)
    assert MatrixGraph(3).is_empty()


def test_labels_and_weights(labelled):
    g, nodes, arcs = labelled
    assert [g.read_label(n) for n in nodes] == list("abcd")
    for source, target, weight in arcs:
        assert g.is_arc(source, target)
        assert g.read_weight(source, target) == weight
    a, _, _, d = nodes
    g.write_weight(d, a, 30)
    assert g.read_weight(d, a) == 30


def test_missing_arc_raises(labelled):
    g, (a, b, c, d), _ = labelled
    assert not g.is_arc(b, d)
    with pytest.raises(KeyError):
        g.read_weight(b, d)
    with pytest.raises(KeyError):
        g.remove_arc(b, d)


def test_unknown_node_raises():
    g = MatrixGraph(3)
    with pytest.raises(ValueError):
        g.read_label(1)
    with pytest.raises(ValueError):
        g.add_arc(0, 1, 5)


def test_adjacent_matches_arcs(labelled):
    g, nodes, arcs = labelled
    for node in nodes:
        expected = sorted(t for s, t, _ in arcs if s == node)
        assert g.adjacent(node) == expected


def test_adjacency_matrix_agrees_with_is_arc(labelled):
    g, nodes, _ = labelled
    matrix = g.adjacency_matrix()
    assert len(matrix) == 4
    for s in nodes:
        for t in nodes:
            assert matrix[s][t] == int(g.is_arc(s, t))


def test_degrees_invariants(labelled):
    g, nodes, arcs = labelled
    assert sum(g.in_degree(n) for n in nodes) == len(arcs)
    assert sum(g.out_degree(n) for n in nodes) == len(arcs)
    assert g.mean_out_degree() == len(arcs) / len(nodes)
    assert MatrixGraph(2).mean_out_degree() == 0.0


def test_remove_arc_and_node():
    g = MatrixGraph(3)
    a, b = g.add_node(), g.add_node()
    g.add_arc(a, b, 7)
    with pytest.raises(ValueError):
        g.remove_node(b)
    g.remove_arc(a, b)
    assert g.arc_count() == 0
    g.remove_node(b)
    assert not g.is_node(b)
    assert g.node_count() == 1


def test_readding_arc_does_not_double_count():
    g = MatrixGraph(2)
    a, b = g.add_node(), g.add_node()
    g.add_arc(a, b, 1)
    g.add_arc(a, b, 2)
    assert g.arc_count() == 1
    assert g.read_weight(a, b) == 2


def test_paths():
    g = MatrixGraph(5)
    a, b, c, d = (g.add_node() for _ in range(4))
    g.add_arc(a, b, 1)
    g.add_arc(a, c, 1)
    g.add_arc(c, d, 1)
    assert g.has_path(a, d)
    assert not g.has_path(d, a)
    assert not g.has_path(a, a)
    assert g.find_path(a, d) == [a, b, c, d]
    assert g.find_path(d, a) is None


def test_find_path_ends_at_target(labelled):
    g, nodes, _ = labelled
    for s in nodes:
        for t in nodes:
            walk = g.find_path(s, t)
            assert walk is not None
            assert walk[0] == s and walk[-1] == t