from typing import Dict, List, Tuple
from edge import Edge

def add_edge(
    graph: List[List[Edge]],
    index: Dict[Tuple[int, int], Edge],
    u: int,
    v: int,
    cap: int,
) -> Edge:
    """
    Append arc u -> v to adjacency list (graph), or merge it into the
    existing u -> v arc by summing capacities.
    `graph` is 0-based (graph[u - 1] holds the arcs of vertex u).
    """
    if cap < 0:
        raise ValueError(f"edge ({u} -> {v}) has negative capacity {cap}")

    existing = index.get((u, v))
    if existing is not None:
        # parallel arcs are merged before any flow computation, never after
        if existing.flow != 0:
            raise RuntimeError(f"cannot merge capacity into {existing!r}: it already carries flow")
        existing.capacity += cap
        return existing

    edge = Edge(u, v, cap)
    graph[u - 1].append(edge)
    index[(u, v)] = edge
    return edge
