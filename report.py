import os
from typing import List, Optional

import pandas as pd

from config import CONFIG
from flow_network import FlowNetwork


def format_graph(network: FlowNetwork, show_zero_capacity: Optional[bool] = None) -> str:
    """
    Render the adjacency list, one vertex per line:

        V1 -> (V2,c2,f2)  -> (V3,c3,f3)

    i.e. arc V1 -> V2 with capacity c2 and flow f2. Zero-capacity arcs are
    hidden unless `show_zero_capacity` (default: CONFIG.show_zero_capacity).
    """
    if show_zero_capacity is None:
        show_zero_capacity = CONFIG.show_zero_capacity

    lines = ["", "The Graph is:- ", ""]
    for vertex in network.vertices:
        line = str(vertex.id)
        for e in vertex.edges:
            if e.capacity > 0 or show_zero_capacity:
                line += f" -> ({e.v},{e.capacity},{e.flow}) "
        lines.append(line)
    lines.append("")
    return "\n".join(lines)


def edge_flows_df(network: FlowNetwork) -> pd.DataFrame:
    """
    Generate a DataFrame of the positive-capacity arcs.

    Returns
    -------
    DataFrame with columns `from`, `to`, `capacity` and `flow`.
    """
    results: List[List[int]] = []
    for e in network.edges():
        if e.capacity > 0:
            results.append([e.u, e.v, e.capacity, e.flow])

    df = pd.DataFrame(results, columns=["from", "to", "capacity", "flow"])
    return df.astype(int)


def save_result(df: pd.DataFrame, filename: str) -> None:
    """
    Save the results to a CSV file, creating its directory if needed.
    """
    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)
    df.to_csv(filename, index=False)
