import numpy as np


def hop_costs(graph, path):
    # cheapest edge for each consecutive pair of path
    weights = []
    for u, v in zip(path[:-1], path[1:]):
        costs = [edge.cost for edge in graph.edges_from(u) if edge.target == v]
        if not costs:
            raise ValueError(f"no edge {u} -> {v} in graph")
        weights.append(min(costs))
    return weights


def path_cost(graph, path):
    """
    Total cost of walking path (node indices) through graph.
    Parallel edges count with their cheapest cost.
    """
    return sum(hop_costs(graph, path))


def extract_features(graph, path):
    """
    Cost features of one path, e.g. for reporting a Found result.
    """
    if not path or len(path) < 2:
        return {
            'path_length': len(path),
            'hops': 0,
            'total_cost': 0,
            'avg_cost': 0.0,
            'std_cost': 0.0,
            'max_hop_cost': 0,
        }

    weights = hop_costs(graph, path)
    total_cost = sum(weights)

    return {
        'path_length': len(path),
        'hops': len(weights),
        'total_cost': total_cost,
        'avg_cost': total_cost / len(weights),
        'std_cost': round(float(np.std(weights)), 3),
        'max_hop_cost': max(weights),
    }
