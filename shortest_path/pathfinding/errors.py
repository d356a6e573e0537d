class InvalidGraph(ValueError):
    """Graph construction failed: bad adjacency length, edge target or cost."""


class IndexOutOfRange(IndexError):
    """A start/end index is not a valid node index of the graph."""

    def __init__(self, name, index, node_count):
        super().__init__(f"{name} index {index!r} out of range for graph with {node_count} nodes")
        self.name = name
        self.index = index
        self.node_count = node_count


class CostOverflow(OverflowError):
    """An accumulated path cost went past the representable maximum."""

    def __init__(self, node, cost, max_cost):
        super().__init__(f"cost {cost} to reach node {node} exceeds max cost {max_cost}")
        self.node = node
        self.cost = cost
        self.max_cost = max_cost
