from dataclasses import dataclass
from typing import Optional

from flow_network import FlowNetwork
from log_utils import get_logger
from max_flow import compute_max_flow

logger = get_logger(__name__)


@dataclass
class NeedBasedFlowResult:
    """
    Outcome of the need-based reduction.

    Attributes
    ----------
    feasible : bool
        True iff every need is met by the computed flow.
    total_flow : Optional[int]
        Flow through the super-source when feasible, else None.
    network : FlowNetwork
        The network the flow was computed on.
    """

    feasible: bool
    total_flow: Optional[int]
    network: FlowNetwork


# ---------------------------------------------------------------------
# Max-flow *with* per-vertex needs
# ---------------------------------------------------------------------
def need_based_flow(network: FlowNetwork) -> NeedBasedFlowResult:
    """
    Decide whether a flow satisfying every vertex need exists, and compute it.

    Needs must sum to zero; otherwise the network is left untouched and the
    result is infeasible. Else a super-source (feeding every producer with
    capacity -need) and a super-sink (fed by every consumer with capacity
    need) are appended and max flow is computed between them.

    Raises
    ------
    RuntimeError
        If the reduction was already applied to this network.
    """
    if network.super_source is not None:
        raise RuntimeError("need-based reduction already applied to this network")

    net_need = network.total_need()
    if net_need != 0:
        logger.info(f"needs sum to {net_need} != 0, no need based flow")
        return NeedBasedFlowResult(feasible=False, total_flow=None, network=network)

    # (1) universal source & sink, both with need 0
    S = network.add_vertex(0)
    T = network.add_vertex(0)
    network.super_source, network.super_sink = S, T

    # (2) supply arcs  S -> v   and   demand arcs  v -> T
    total_supply = 0
    for vertex in network.vertices:
        if vertex.need < 0:                              # producer
            network.add_edge(S, vertex.id, -vertex.need)
            total_supply += -vertex.need
        elif vertex.need > 0:                            # consumer
            network.add_edge(vertex.id, T, vertex.need)
    logger.debug(f"added super-source {S} and super-sink {T}, total supply {total_supply}")

    # (3) run the *existing* max-flow engine on the augmented network
    flow = compute_max_flow(network, S, T)

    # (4) feasibility check
    if not check_feasibility(network):
        logger.info(f"need based flow infeasible: {flow} of {total_supply} units routed")
        return NeedBasedFlowResult(feasible=False, total_flow=None, network=network)

    logger.info(f"need based flow exists and is equal to {flow}")
    return NeedBasedFlowResult(feasible=True, total_flow=flow, network=network)


def check_feasibility(network: FlowNetwork) -> bool:
    """
    Read-only check of a network after `need_based_flow`.

    Feasible iff the needs sum to zero, every arc out of the super-source is
    saturated and every arc into the super-sink is saturated. The two
    saturation checks target the two synthetic vertices separately.

    Raises
    ------
    RuntimeError
        If the needs sum to zero but the reduction never ran.
    """
    # condition 1: sum of needs is zero
    if network.total_need() != 0:
        return False

    if network.super_source is None or network.super_sink is None:
        raise RuntimeError("need-based reduction has not been applied to this network")

    # condition 2: arcs from the super-source to producers are saturated
    for e in network.edges_from(network.super_source):
        if e.capacity > 0 and e.flow != e.capacity:
            return False

    # condition 3: arcs from consumers to the super-sink are saturated
    for e in network.edges_into(network.super_sink):
        if e.capacity > 0 and e.flow != e.capacity:
            return False

    return True
