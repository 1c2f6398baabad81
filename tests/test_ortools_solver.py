import random

import pytest

pytest.importorskip("ortools")

from flow_network import FlowNetwork  # noqa: E402
from max_flow import compute_max_flow  # noqa: E402
from need_based_flow import need_based_flow  # noqa: E402
from ortools_solver import ortools_max_flow, ortools_need_based_flow  # noqa: E402


class TestOrtoolsMaxFlow:
    def test_diamond(self, diamond):
        assert ortools_max_flow(diamond, 1, 4) == 4

    def test_crossing(self, crossing):
        assert ortools_max_flow(crossing, 1, 6) == 23

    def test_source_equals_sink(self, diamond):
        assert ortools_max_flow(diamond, 1, 1) == 0

    def test_no_edges(self):
        assert ortools_max_flow(FlowNetwork.build([0, 0], []), 1, 2) == 0

    @pytest.mark.parametrize("seed", range(10))
    def test_agrees_with_edmonds_karp(self, seed):
        rng = random.Random(seed)
        n = rng.randint(2, 7)
        edges = [
            (*rng.sample(range(1, n + 1), 2), rng.randint(0, 9))
            for _ in range(rng.randint(0, 3 * n))
        ]
        network = FlowNetwork.build([0] * n, edges)
        assert ortools_max_flow(network, 1, n) == compute_max_flow(network, 1, n)


class TestOrtoolsNeedBasedFlow:
    def test_feasible(self, supply_demand):
        assert ortools_need_based_flow(supply_demand) == 5

    def test_unbalanced(self):
        assert ortools_need_based_flow(FlowNetwork.build([-5, 3, 1], [(1, 2, 3)])) is None

    def test_disconnected(self):
        assert ortools_need_based_flow(FlowNetwork.build([-2, 0, 2], [(1, 2, 5)])) is None

    def test_ignores_synthetic_vertices(self, supply_demand):
        result = need_based_flow(supply_demand)
        assert ortools_need_based_flow(supply_demand) == result.total_flow
