from collections import deque
from typing import List, Tuple

from flow_network import FlowNetwork


INF = 10**18  # "∞" large enough for all problem sizes

NO_PARENT = -1      # vertex not reached by the search
SOURCE_PARENT = 0   # parent of the source (vertex ids start at 1)


def get_augmenting_path(
    network: FlowNetwork,
    s: int,
    t: int,
) -> Tuple[int, List[int]]:
    """
    Breadth-first search over the residual network.

    Every dequeued vertex carries the bottleneck of its discovery path. The
    sink is never enqueued: each arc into it is scored as
    min(bottleneck, residual) and the best candidate wins, so arcs into the
    sink found from different vertices of the same search are compared.

    Returns (bottleneck, parent) where parent[v] is the predecessor of v
    (NO_PARENT if unreached, SOURCE_PARENT for s; index 0 is unused).
    A bottleneck of 0 means no augmenting path exists.
    """
    n = network.vertex_count
    parent = [NO_PARENT] * (n + 1)

    if s == t:
        return 0, parent

    parent[s] = SOURCE_PARENT
    best = 0

    queue = deque([(s, INF)])
    while queue:
        u, flow_in = queue.popleft()

        for e in network.edges_from(u):
            residual = e.remaining_capacity()

            if e.v == t:
                candidate = min(flow_in, residual)
                if candidate > best:
                    best = candidate
                    parent[t] = u
            elif parent[e.v] == NO_PARENT and residual > 0:
                parent[e.v] = u
                queue.append((e.v, min(flow_in, residual)))

    return best, parent


def trace_path(parent: List[int], s: int, t: int) -> List[int]:
    """
    Walk the predecessor chain back from t and return the path s ... t.
    """
    if parent[t] == NO_PARENT:
        raise ValueError(f"sink {t} was not reached from {s}")

    path = [t]
    v = t
    while v != s:
        v = parent[v]
        if v == NO_PARENT or v == SOURCE_PARENT:
            raise ValueError(f"broken predecessor chain from {t} to {s}")
        path.append(v)
    path.reverse()
    return path
