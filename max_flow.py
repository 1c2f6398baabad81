from flow_network import FlowNetwork
from get_augmenting_path import get_augmenting_path, trace_path
from log_utils import get_logger

logger = get_logger(__name__)


def compute_max_flow(network: FlowNetwork, s: int, t: int) -> int:
    """
    Edmonds-Karp max flow from `s` to `t`.

    Parameters
    ----------
    network : FlowNetwork
        Network to run on. Zero-capacity reverse edges are added first if
        missing; every edge's `flow` is updated in place.
    s, t : int
        Source and sink vertices (1..V).

    Returns
    -------
    Total flow pushed from s to t.

    Raises
    ------
    InvalidVertexError
        If s or t is outside 1..V. Nothing is mutated in that case.
    """
    network.validate_vertex(s)
    network.validate_vertex(t)

    # ---------------- residual network ----------------
    network.ensure_residual_edges()

    # ---------------- augment along BFS paths ----------------
    max_flow = 0
    rounds = 0
    while True:
        bottleneck, parent = get_augmenting_path(network, s, t)
        if bottleneck == 0:
            break

        path = trace_path(parent, s, t)
        for prev, cur in zip(path, path[1:]):
            # forward arc prev -> cur gains, companion cur -> prev loses
            network.get_edge(prev, cur).augment(bottleneck)

        max_flow += bottleneck
        rounds += 1
        logger.debug(f"augmenting path {path} carries {bottleneck}")

    logger.info(f"max flow {s} -> {t} = {max_flow} after {rounds} augmentations")
    return max_flow
