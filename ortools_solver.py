from typing import Optional

import numpy as np
from ortools.graph.python import max_flow, min_cost_flow

from flow_network import FlowNetwork


def _arc_arrays(network: FlowNetwork):
    """Parallel arrays of the positive-capacity, non-synthetic arcs."""
    arcs = [
        (e.u, e.v, e.capacity)
        for e in network.edges()
        if e.capacity > 0 and not network.is_synthetic(e.u) and not network.is_synthetic(e.v)
    ]
    start_nodes = np.array([arc[0] for arc in arcs], dtype=np.int64)
    end_nodes = np.array([arc[1] for arc in arcs], dtype=np.int64)
    capacities = np.array([arc[2] for arc in arcs], dtype=np.int64)
    return start_nodes, end_nodes, capacities


def ortools_max_flow(network: FlowNetwork, s: int, t: int) -> int:
    """
    Max flow s -> t computed independently with OR-Tools' SimpleMaxFlow.
    Only capacities are read; flows stored on `network` are ignored.
    """
    network.validate_vertex(s)
    network.validate_vertex(t)
    if s == t:
        return 0

    smf = max_flow.SimpleMaxFlow()

    start_nodes, end_nodes, capacities = _arc_arrays(network)
    if start_nodes.size == 0:
        return 0
    smf.add_arcs_with_capacity(start_nodes, end_nodes, capacities)

    status = smf.solve(s, t)
    if status != smf.OPTIMAL:
        raise RuntimeError(f"OR-Tools max flow failed with status {status}")
    return int(smf.optimal_flow())


def ortools_need_based_flow(network: FlowNetwork) -> Optional[int]:
    """
    Need-based flow with OR-Tools' SimpleMinCostFlow (zero unit costs).

    Returns the total shipped supply when every need can be met, else None.
    """
    if network.total_need() != 0:
        return None

    real = [vertex for vertex in network.vertices if not network.is_synthetic(vertex.id)]
    total_supply = sum(-vertex.need for vertex in real if vertex.need < 0)
    if total_supply == 0:
        return 0

    smcf = min_cost_flow.SimpleMinCostFlow()

    start_nodes, end_nodes, capacities = _arc_arrays(network)
    if start_nodes.size == 0:
        return None
    smcf.add_arcs_with_capacity_and_unit_cost(
        start_nodes, end_nodes, capacities, np.zeros_like(capacities)
    )

    # OR-Tools supplies are positive at producers, our needs are negative there
    node_ids = np.array([vertex.id for vertex in real], dtype=np.int64)
    supplies = np.array([-vertex.need for vertex in real], dtype=np.int64)
    smcf.set_nodes_supplies(node_ids, supplies)

    status = smcf.solve()
    if status != smcf.OPTIMAL:
        return None
    return total_supply
