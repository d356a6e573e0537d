import networkx as nx
import numpy as np
import pytest

from shortest_path.pathfinding.errors import InvalidGraph
from shortest_path.pathfinding.graph import MAX_COST, Edge, Graph, Node


def test_construction():
    g = Graph(["A", "B", "C"], [[(1, 2), Edge(2, 5)], [], [(0, 1)]])
    assert g.node_count == 3
    assert len(g) == 3
    assert g.edges_from(0) == (Edge(1, 2), Edge(2, 5))
    assert g.edges_from(1) == ()
    assert g.node(2) == Node("C")
    assert g.value(1) == "B"
    assert g.index_of("C") == 2


def test_node_objects_are_kept():
    g = Graph([Node("a"), "b"], [[], []])
    assert g.nodes == (Node("a"), Node("b"))


def test_index_of_missing_value():
    g = Graph(["A"], [[]])
    with pytest.raises(KeyError):
        g.index_of("Z")


def test_edges_are_immutable():
    edges = [[(1, 1)], []]
    g = Graph(["A", "B"], edges)
    edges[0].append((0, 9))
    assert g.edges_from(0) == (Edge(1, 1),)
    with pytest.raises(AttributeError):
        g.edges_from(0).append(Edge(0, 9))


@pytest.mark.parametrize("nodes, edges", [
    (["A", "B"], [[]]),                 # adjacency shorter than nodes
    (["A"], [[], []]),                  # adjacency longer than nodes
    (["A", "B"], [[(2, 1)], []]),       # target out of bounds
    (["A", "B"], [[(-1, 1)], []]),      # negative target
    (["A", "B"], [[(1, -1)], []]),      # negative cost
    (["A", "B"], [[(1, 1.5)], []]),     # non-integer cost
    (["A", "B"], [[(1, True)], []]),    # bool cost
    (["A", "B"], [[("1", 1)], []]),     # non-integer target
    (["A", "B"], [[(1, MAX_COST + 1)], []]),
    (["A", "B"], [[(1,)], []]),         # not a pair
    (["A"], [None]),                    # adjacency entry not iterable
    (["A", "B"], [[(1, 1)], 5]),
])
def test_invalid_graph(nodes, edges):
    with pytest.raises(InvalidGraph):
        Graph(nodes, edges)


def test_invalid_graph_is_value_error():
    with pytest.raises(ValueError, match="adjacency has 1 entries"):
        Graph(["A", "B"], [[]])


def test_from_networkx_digraph():
    G = nx.DiGraph()
    G.add_edge("A", "B", weight=3)
    G.add_edge("B", "C", weight=4)
    G.add_node("Z")
    g = Graph.from_networkx(G)
    assert [n.value for n in g.nodes] == ["A", "B", "C", "Z"]
    assert g.edges_from(g.index_of("A")) == (Edge(g.index_of("B"), 3),)
    assert g.edges_from(g.index_of("Z")) == ()


def test_from_networkx_undirected_and_default_weight():
    G = nx.Graph()
    G.add_edge(1, 2)
    g = Graph.from_networkx(G, default_weight=7)
    assert g.edges_from(0) == (Edge(1, 7),)
    assert g.edges_from(1) == (Edge(0, 7),)


def test_from_networkx_multidigraph_keeps_parallel_edges():
    G = nx.MultiDiGraph()
    G.add_edge("A", "B", weight=4)
    G.add_edge("A", "B", weight=1)
    g = Graph.from_networkx(G)
    assert sorted(e.cost for e in g.edges_from(0)) == [1, 4]


def test_from_networkx_rejects_float_weights():
    G = nx.DiGraph()
    G.add_edge("A", "B", weight=0.5)
    with pytest.raises(InvalidGraph):
        Graph.from_networkx(G)


def test_to_networkx():
    g = Graph(["A", "B"], [[(1, 2), (1, 5)], []])
    G = g.to_networkx()
    assert isinstance(G, nx.MultiDiGraph)
    assert G.nodes[0]["value"] == "A"
    assert sorted(w for _, _, w in G.edges(data="weight")) == [2, 5]
    assert Graph.from_networkx(G).edges_from(0) == g.edges_from(0)


def test_from_networkx_numpy_weights():
    G = nx.DiGraph()
    G.add_edge("A", "B", weight=np.int64(3))
    G.add_edge("B", "C", weight=np.uint8(4))
    g = Graph.from_networkx(G)
    assert g.edges_from(0) == (Edge(1, 3),)
    assert g.edges_from(1) == (Edge(2, 4),)
    assert all(type(e.cost) is int for i in range(3) for e in g.edges_from(i))


def test_numpy_targets_stored_as_int():
    g = Graph(["A", "B"], [[(np.int32(1), np.int64(2))], []])
    edge = g.edges_from(0)[0]
    assert edge == Edge(1, 2)
    assert type(edge.target) is int


def test_numpy_float_cost_rejected():
    with pytest.raises(InvalidGraph):
        Graph(["A", "B"], [[(1, np.float64(2.0))], []])
