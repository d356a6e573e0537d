import numbers
from dataclasses import dataclass
from typing import Any

import networkx as nx

from shortest_path.pathfinding.errors import InvalidGraph

MAX_COST = 2**64 - 1  # widest cost a caller can rely on (unsigned 64-bit)


@dataclass(frozen=True)
class Node:
    value: Any


@dataclass(frozen=True)
class Edge:
    target: int
    cost: int


def is_integer(x):
    # numpy ints count; bool is Integral too, but True/False are never indices or costs
    return isinstance(x, numbers.Integral) and not isinstance(x, bool)


class Graph:
    """
    Immutable directed graph.
    - nodes[i] is the payload of node i; the index is the node's identity.
    - edges[i] is the ordered tuple of outgoing Edges of node i.
    """

    __slots__ = ("_nodes", "_edges")

    def __init__(self, nodes, edges):
        nodes = tuple(n if isinstance(n, Node) else Node(n) for n in nodes)
        edges = list(edges)
        if len(edges) != len(nodes):
            raise InvalidGraph(
                f"adjacency has {len(edges)} entries but graph has {len(nodes)} nodes"
            )

        adjacency = []
        for source, out_edges in enumerate(edges):
            row = []
            try:
                out_edges = list(out_edges)
            except TypeError:
                raise InvalidGraph(f"adjacency entry {out_edges!r} of node {source} is not a list of edges") from None
            for edge in out_edges:
                if isinstance(edge, Edge):
                    target, cost = edge.target, edge.cost
                else:
                    try:
                        target, cost = edge
                    except (TypeError, ValueError):
                        raise InvalidGraph(f"edge {edge!r} of node {source} is not a (target, cost) pair") from None
                if not is_integer(target) or not 0 <= target < len(nodes):
                    raise InvalidGraph(f"edge {source} -> {target!r}: target out of bounds")
                if not is_integer(cost):
                    raise InvalidGraph(f"edge {source} -> {target}: cost {cost!r} is not an integer")
                # negative costs break the relaxation invariant, reject instead of guessing
                if cost < 0:
                    raise InvalidGraph(f"edge {source} -> {target}: negative cost {cost}")
                if cost > MAX_COST:
                    raise InvalidGraph(f"edge {source} -> {target}: cost {cost} exceeds {MAX_COST}")
                row.append(Edge(int(target), int(cost)))
            adjacency.append(tuple(row))

        self._nodes = nodes
        self._edges = tuple(adjacency)

    def __len__(self):
        return len(self._nodes)

    def __repr__(self):
        n_edges = sum(len(row) for row in self._edges)
        return f"Graph(nodes={len(self._nodes)}, edges={n_edges})"

    @property
    def node_count(self):
        return len(self._nodes)

    @property
    def nodes(self):
        return self._nodes

    def edges_from(self, index):
        return self._edges[index]

    def node(self, index):
        return self._nodes[index]

    def value(self, index):
        return self._nodes[index].value

    def index_of(self, value):
        for i, node in enumerate(self._nodes):
            if node.value == value:
                return i
        raise KeyError(value)

    @classmethod
    def from_networkx(cls, G, weight="weight", default_weight=1):
        """
        Build a Graph from a networkx graph.
        Node order follows G.nodes and the networkx node key becomes the payload.
        Undirected graphs contribute one edge in each direction.
        """
        if not G.is_directed():
            G = G.to_directed()

        keys = list(G.nodes())
        position = {key: i for i, key in enumerate(keys)}
        edges = [[] for _ in keys]
        for u, v, w in G.edges(data=weight, default=default_weight):
            edges[position[u]].append((position[v], w))
        return cls(keys, edges)

    def to_networkx(self):
        """Export as a MultiDiGraph keyed by node index."""
        G = nx.MultiDiGraph()
        for i, node in enumerate(self._nodes):
            G.add_node(i, value=node.value)
        for source, row in enumerate(self._edges):
            for edge in row:
                G.add_edge(source, edge.target, weight=edge.cost)
        return G
