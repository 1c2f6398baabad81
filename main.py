import argparse
import logging
import sys
from datetime import datetime
from typing import List, Optional

from config import CONFIG
from flow_network import FlowNetwork, InvalidVertexError
from load_data import load_csv, read_graph
from log_utils import get_logger, set_global_log_level
from max_flow import compute_max_flow
from need_based_flow import need_based_flow
from ortools_solver import ortools_max_flow, ortools_need_based_flow
from report import edge_flows_df, format_graph, save_result

logger = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="need-flow",
        description="Edmonds-Karp max flow and need based (supply/demand) flow.",
    )
    parser.add_argument("graph_file", nargs="?", help="graph file (edges CSV with --nodes)")
    parser.add_argument("--source", type=int, help="id of the source vertex")
    parser.add_argument("--sink", type=int, help="id of the sink vertex")
    parser.add_argument("--nodes", help="nodes CSV (id, need); graph_file is then an edges CSV")
    parser.add_argument("--save", action="store_true", help=f"write result CSVs to {CONFIG.output_dir}")
    parser.add_argument("--crosscheck", action="store_true", help="verify results with OR-Tools")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def _load(graph_file: str, nodes: Optional[str]) -> FlowNetwork:
    if nodes:
        return load_csv(nodes, graph_file)
    return read_graph(graph_file)


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    set_global_log_level(logging.DEBUG if args.verbose else CONFIG.log_level)

    graph_file = args.graph_file or input("Please Enter File Name: ").strip()

    # the max flow run and the need based run each get their own network
    try:
        network = _load(graph_file, args.nodes)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(format_graph(network))

    try:
        source = args.source if args.source is not None else int(input("Please Enter id of Source Node: "))
        sink = args.sink if args.sink is not None else int(input("Please Enter id of Sink Node: "))
    except ValueError as e:
        print(f"Error: vertex id must be an integer: {e}", file=sys.stderr)
        return 2

    print("\nPart 1 : Compute Max Flow ")
    try:
        flow = compute_max_flow(network, source, sink)
    except InvalidVertexError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    print(
        f"\nThe maximum amount of integral flow that can flow from Source (id -> {source}) "
        f"to Sink (id -> {sink}) is {flow}."
    )
    print(format_graph(network))

    print("\nPart 2 : Need Based Flow ")
    need_network = _load(graph_file, args.nodes)
    result = need_based_flow(need_network)
    if result.feasible:
        print(f"\nNeed Based Flow exists and is equal to {result.total_flow}.")
        print(format_graph(need_network))
    else:
        # graph is not printed: its flows are meaningless
        print("\nNo Need Based Flow Exists.\n")

    if args.save:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        max_flow_file = CONFIG.result_filename("max_flow", timestamp)
        save_result(edge_flows_df(network), max_flow_file)
        print(f"Results saved to {max_flow_file}")
        if result.feasible:
            need_file = CONFIG.result_filename("need_based", timestamp)
            save_result(edge_flows_df(need_network), need_file)
            print(f"Results saved to {need_file}")

    if args.crosscheck:
        # fresh network: OR-Tools only reads capacities and needs
        reference = _load(graph_file, args.nodes)
        expected_flow = ortools_max_flow(reference, source, sink)
        expected_need = ortools_need_based_flow(reference)
        if expected_flow != flow or expected_need != result.total_flow:
            logger.error(
                f"OR-Tools disagrees: max flow {expected_flow} vs {flow}, "
                f"need based flow {expected_need} vs {result.total_flow}"
            )
            return 3
        print("Cross-check with OR-Tools passed.")

    return 0


if __name__ == "__main__":
    sys.exit(main())
