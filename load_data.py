import os
from typing import Optional

import numpy as np
import pandas as pd

from config import CONFIG
from flow_network import FlowNetwork
from log_utils import get_logger

logger = get_logger(__name__)


def resolve_path(file_path: str, input_dir: Optional[str] = None) -> str:
    """
    Return `file_path` if it exists, else the same name under `input_dir`
    (defaults to CONFIG.input_dir) if that exists.
    """
    if os.path.exists(file_path):
        return file_path
    input_dir = CONFIG.input_dir if input_dir is None else input_dir
    candidate = os.path.join(input_dir, file_path)
    if os.path.exists(candidate):
        return candidate
    raise FileNotFoundError(f"Could not open file {file_path}.")


def parse_graph(text: str) -> FlowNetwork:
    """
    Parse the whitespace separated graph format:

        V E
        n_1 ... n_V          (need of every vertex)
        x y c                (E times: arc x -> y with capacity c)

    Parallel arcs are merged by summing their capacities.
    """
    tokens = text.split()
    try:
        values = np.array(tokens, dtype=np.int64)
    except (ValueError, OverflowError) as e:
        # OverflowError: integers beyond the int64 range
        raise ValueError(f"graph data must be integers: {e}") from e

    if values.size < 2:
        raise ValueError("graph data must start with the vertex and edge counts")

    V, E = int(values[0]), int(values[1])
    if V < 0 or E < 0:
        raise ValueError(f"vertex and edge counts must be non-negative, got V={V}, E={E}")

    expected = 2 + V + 3 * E
    if values.size < expected:
        raise ValueError(
            f"graph data truncated: expected {expected} integers for V={V}, E={E}, got {values.size}"
        )
    if values.size > expected:
        logger.warning(f"ignoring {values.size - expected} trailing integers in graph data")

    needs = values[2:2 + V]
    edges = values[2 + V:expected].reshape(E, 3)

    return FlowNetwork.build(needs.tolist(), edges.tolist())


def read_graph(file_path: str) -> FlowNetwork:
    """
    Read a graph file in the format accepted by `parse_graph`.
    """
    path = resolve_path(file_path)
    with open(path, "r", encoding="utf-8") as fh:
        network = parse_graph(fh.read())
    logger.info(f"loaded {network} from {path}")
    return network


def load_csv(
    nodes_path: str,
    edges_path: str,
    *,
    id_colname: str = "id",
    need_colname: str = "need",
    from_colname: str = "from",
    to_colname: str = "to",
    capacity_colname: str = "capacity",
) -> FlowNetwork:
    """
    Build a network from a nodes CSV (vertex id, need) and an edges CSV
    (from, to, capacity). Rows with missing values are dropped.

    Parameters
    ----------
    nodes_path : str
        CSV with one row per vertex; ids must be exactly 1..V.
    edges_path : str
        CSV with one row per arc; duplicate rows are merged.

    Returns
    -------
    The loaded FlowNetwork.

    Raises
    ------
    ValueError
        On missing columns, non-integer values or ids other than 1..V.
    """
    nodes_df = pd.read_csv(resolve_path(nodes_path)).dropna()
    edges_df = pd.read_csv(resolve_path(edges_path)).dropna()

    _require_columns(nodes_df, [id_colname, need_colname], nodes_path)
    _require_columns(edges_df, [from_colname, to_colname, capacity_colname], edges_path)

    nodes_df = _integer_columns(nodes_df, [id_colname, need_colname], nodes_path).sort_values(id_colname)
    edges_df = _integer_columns(edges_df, [from_colname, to_colname, capacity_colname], edges_path)

    ids = nodes_df[id_colname].to_numpy()
    if not np.array_equal(ids, np.arange(1, len(ids) + 1)):
        raise ValueError(f"vertex ids in {nodes_path} must be exactly 1..{len(ids)}")

    dups = edges_df[edges_df.duplicated(subset=[from_colname, to_colname], keep=False)]
    if not dups.empty:
        logger.info(f"merging {len(dups)} parallel edge rows in {edges_path}")

    network = FlowNetwork.build(
        nodes_df[need_colname].tolist(),
        edges_df[[from_colname, to_colname, capacity_colname]].itertuples(index=False, name=None),
    )
    logger.info(f"loaded {network} from {nodes_path} and {edges_path}")
    return network


def _require_columns(df: pd.DataFrame, columns, file_path: str) -> None:
    missing = [col for col in columns if col not in df.columns]
    if missing:
        raise ValueError(f"{file_path} is missing columns: {missing}")


def _integer_columns(df: pd.DataFrame, columns, file_path: str) -> pd.DataFrame:
    """
    Cast `columns` to int64, refusing values that are not whole numbers
    instead of truncating them.
    """
    df = df.copy()
    for col in columns:
        values = pd.to_numeric(df[col], errors="coerce")
        if values.isna().any() or not (values % 1 == 0).all():
            bad = df[col][values.isna() | (values % 1 != 0)].tolist()
            raise ValueError(f"{file_path}: column '{col}' must hold integers, got {bad[:5]}")
        df[col] = values.astype(np.int64)
    return df
