import networkx as nx

from shortest_path.feature_extractor import path_cost
from shortest_path.pathfinding.dijkstra import Found, check_index

DEFAULT_K = 3

# Yen's algorithm

def _collapse(graph):
    # nx.shortest_simple_paths needs a simple DiGraph: keep the cheapest parallel edge
    G = nx.DiGraph()
    G.add_nodes_from(range(graph.node_count))
    for u in range(graph.node_count):
        for edge in graph.edges_from(u):
            v, w = edge.target, edge.cost
            if not G.has_edge(u, v) or G[u][v]["weight"] > w:
                G.add_edge(u, v, weight=w)
    return G


def top_k_shortest_paths(graph, start, end, k=DEFAULT_K, cutoff=None):
    """
    Up to k loopless paths from start to end, cheapest first, as Found results.
    cutoff: maximum number of nodes per path.
    """
    start = check_index(graph, "start", start)
    end = check_index(graph, "end", end)
    if k <= 0:
        return []

    G = _collapse(graph)

    try:
        # generate simple paths sorted by increasing total weight
        generator = nx.shortest_simple_paths(G, start, end, weight="weight")

        paths = []
        for path in generator:
            if cutoff is not None and len(path) > cutoff:
                continue
            paths.append(Found(tuple(path), path_cost(graph, path)))
            if len(paths) >= k:
                break
        return paths
    except (nx.NetworkXNoPath, nx.NodeNotFound):  # path doesnt exist
        return []


if __name__ == "__main__":
    from shortest_path.network_builder import build_graph

    graph = build_graph([
        ("A", "B", 2), ("A", "C", 5),
        ("B", "C", 1), ("B", "D", 4),
        ("C", "D", 2), ("C", "E", 3),
        ("D", "F", 1),
        ("E", "F", 5),
    ])
    paths = top_k_shortest_paths(graph, graph.index_of("A"), graph.index_of("F"), k=4)
    print("Top K paths from A to F:")
    for i, found in enumerate(paths, 1):
        print(f"{i}: {[graph.value(n) for n in found.path]} (cost {found.cost})")
