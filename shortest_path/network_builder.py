import random

import networkx as nx

from shortest_path.pathfinding.graph import Graph

DEFAULT_WEIGHT_RANGE = (0, 10)


def build_random_graph(n_nodes=10, edge_prob=0.3, weight_range=DEFAULT_WEIGHT_RANGE, parallel_prob=0.0, seed=None):
    """
    Random directed graph for experiments and cross-checks:
    - Erdos-Renyi skeleton from networkx (directed, no self loops).
    - Integer costs drawn uniformly from weight_range, both ends inclusive.
    - With probability parallel_prob an edge gets a second, independently
      weighted copy, so parallel edges are exercised too.
    Same seed -> same graph. Node payloads are "n0", "n1", ...
    """
    rng = random.Random(seed)

    G_temp = nx.gnp_random_graph(n=n_nodes, p=edge_prob, seed=seed, directed=True)

    edges = [[] for _ in range(n_nodes)]
    for u, v in sorted(G_temp.edges()):
        edges[u].append((v, rng.randint(*weight_range)))
        if parallel_prob and rng.random() < parallel_prob:
            edges[u].append((v, rng.randint(*weight_range)))

    return Graph([f"n{i}" for i in range(n_nodes)], edges)


def build_graph(edge_list, nodes=None):
    """
    Graph from (source, target, cost) triples keyed by payload value.
    nodes fixes the node order (and adds isolated nodes); otherwise nodes are
    numbered in order of first appearance in edge_list.
    """
    G = nx.MultiDiGraph()
    if nodes is not None:
        G.add_nodes_from(nodes)
    for u, v, w in edge_list:
        G.add_edge(u, v, weight=w)
    return Graph.from_networkx(G)


if __name__ == "__main__":
    graph = build_random_graph(n_nodes=8, seed=42)
    print(graph)
    for i in range(graph.node_count):
        print(graph.value(i), "->", [(graph.value(e.target), e.cost) for e in graph.edges_from(i)])
