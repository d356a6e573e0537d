import heapq
from dataclasses import dataclass

from shortest_path.pathfinding.errors import CostOverflow, IndexOutOfRange
from shortest_path.pathfinding.graph import MAX_COST, Graph, is_integer


@dataclass(frozen=True)
class Found:
    path: tuple  # node indices, start ... end
    cost: int

    def __post_init__(self):
        # Found([0, 1], 3) == Found((0, 1), 3), and stays hashable
        object.__setattr__(self, "path", tuple(self.path))


@dataclass(frozen=True)
class NotFound:
    start: int
    end: int


def check_index(graph, name, index):
    if not is_integer(index) or not 0 <= index < graph.node_count:
        raise IndexOutOfRange(name, index, graph.node_count)
    return int(index)


def _relax(graph, node, cost, dist, prev, pq, max_cost, on_relax):
    for edge in graph.edges_from(node):
        new_dist = cost + edge.cost
        if new_dist > max_cost:
            raise CostOverflow(edge.target, new_dist, max_cost)
        old = dist.get(edge.target)
        if old is None or new_dist < old:  # dv > du + w
            dist[edge.target] = new_dist
            prev[edge.target] = node
            heapq.heappush(pq, (new_dist, edge.target))
            if on_relax is not None:
                on_relax(edge.target, old, new_dist)


def reconstruct_path(prev, start, end):
    path = [end]
    node = end
    while node != start:
        node = prev[node]
        path.append(node)
    path.reverse()
    return tuple(path)


def find_shortest_path(graph, start, end, max_cost=MAX_COST, on_relax=None):
    """
    Minimum-cost path from start to end.

    Returns Found(path, cost), or NotFound(start, end) when end is unreachable.
    Edge costs are non-negative (Graph rejects anything else).

    The frontier is a heap of (cost, node) tuples, so ties pop by ascending node
    index. A node may sit in the heap several times; entries costlier than the
    best known distance are skipped on pop instead of being decreased in place.

    on_relax(node, old_dist, new_dist) is called on every distance improvement,
    old_dist is None the first time a node is reached.
    """
    start = check_index(graph, "start", start)
    end = check_index(graph, "end", end)

    dist = {start: 0}  # missing key means INF
    prev = {}
    pq = [(0, start)]  # (distance, node)

    while pq:
        current_dist, node = heapq.heappop(pq)

        if node == end:
            return Found(reconstruct_path(prev, start, end), current_dist)

        # skip outdated elements
        if current_dist > dist[node]:
            continue

        _relax(graph, node, current_dist, dist, prev, pq, max_cost, on_relax)

    return NotFound(start, end)


def shortest_path_tree(graph, start, max_cost=MAX_COST):
    """
    Run the search from start to exhaustion.
    Returns (dist, prev) for every node reachable from start; feed prev to
    reconstruct_path to get the path to any of them.
    """
    start = check_index(graph, "start", start)

    dist = {start: 0}
    prev = {}
    pq = [(0, start)]

    while pq:
        current_dist, node = heapq.heappop(pq)
        if current_dist > dist[node]:
            continue
        _relax(graph, node, current_dist, dist, prev, pq, max_cost, None)

    return dist, prev


if __name__ == "__main__":
    # demo
    graph = Graph(
        ["A", "B", "C", "D"],
        [
            [(1, 1), (2, 4)],  # A
            [(3, 3)],          # B
            [(3, 2)],          # C
            [],                # D
        ],
    )
    result = find_shortest_path(graph, 0, 3)
    if isinstance(result, Found):
        print("Path found:", " ".join(graph.value(i) for i in result.path))
        print("Total cost:", result.cost)
    else:
        print(f"No path found from {graph.value(result.start)} to {graph.value(result.end)}.")
