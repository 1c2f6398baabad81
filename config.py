"""Configuration for the flow solvers and the command-line driver."""

import logging
from dataclasses import dataclass


@dataclass
class FlowConfig:
    """Defaults shared by the loaders, the renderer and `main.py`."""

    # where relative input files are looked up when not found as given
    input_dir: str = "data/"

    # where `--save` writes the result CSVs
    output_dir: str = "results/"

    log_level: int = logging.INFO

    # print zero-capacity (reverse) edges in the adjacency listing
    show_zero_capacity: bool = False

    # prefix of the timestamped result file names
    result_prefix: str = "flow_results"

    def result_filename(self, label: str, timestamp: str) -> str:
        """Build ``<output_dir><prefix>_<label>_<timestamp>.csv``."""
        return f"{self.output_dir}{self.result_prefix}_{label}_{timestamp}.csv"


# Global configuration instance
CONFIG = FlowConfig()
