import pytest

from flow_network import FlowNetwork
from get_augmenting_path import NO_PARENT, SOURCE_PARENT, get_augmenting_path, trace_path


class TestGetAugmentingPath:
    def test_diamond_first_path(self, diamond):
        diamond.ensure_residual_edges()
        bottleneck, parent = get_augmenting_path(diamond, 1, 4)
        assert bottleneck == 2
        assert parent[1] == SOURCE_PARENT
        assert parent[2] == 1
        assert parent[3] == 1
        assert parent[4] == 2
        assert trace_path(parent, 1, 4) == [1, 2, 4]

    def test_best_arc_into_sink_wins(self):
        network = FlowNetwork.build([0] * 4, [(1, 2, 5), (1, 3, 5), (2, 4, 1), (3, 4, 4)])
        network.ensure_residual_edges()
        bottleneck, parent = get_augmenting_path(network, 1, 4)
        assert bottleneck == 4
        assert trace_path(parent, 1, 4) == [1, 3, 4]

    def test_bottleneck_along_path(self):
        network = FlowNetwork.build([0] * 4, [(1, 2, 7), (2, 3, 2), (3, 4, 9)])
        network.ensure_residual_edges()
        bottleneck, parent = get_augmenting_path(network, 1, 4)
        assert bottleneck == 2
        assert trace_path(parent, 1, 4) == [1, 2, 3, 4]

    def test_source_equals_sink(self, single_edge):
        bottleneck, parent = get_augmenting_path(single_edge, 1, 1)
        assert bottleneck == 0
        assert all(p == NO_PARENT for p in parent)

    def test_sink_unreachable(self):
        network = FlowNetwork.build([0] * 3, [(1, 2, 3), (3, 2, 3)])
        network.ensure_residual_edges()
        bottleneck, parent = get_augmenting_path(network, 1, 3)
        assert bottleneck == 0
        assert parent[3] == NO_PARENT
        assert parent[2] == 1
        with pytest.raises(ValueError, match="not reached"):
            trace_path(parent, 1, 3)

    def test_saturated_arcs_are_skipped(self, single_edge):
        single_edge.ensure_residual_edges()
        single_edge.get_edge(1, 2).augment(5)
        bottleneck, parent = get_augmenting_path(single_edge, 1, 2)
        assert bottleneck == 0
        assert parent[2] == NO_PARENT

    def test_reverse_arc_is_usable(self):
        # after pushing 1 along 1-2-3-4, the only way to 5 from 1 undoes 2->3
        network = FlowNetwork.build(
            [0] * 5, [(1, 2, 1), (2, 3, 1), (3, 4, 1), (1, 3, 1), (2, 5, 1)]
        )
        network.ensure_residual_edges()
        for u, v in [(1, 2), (2, 3), (3, 4)]:
            network.get_edge(u, v).augment(1)
        bottleneck, parent = get_augmenting_path(network, 1, 5)
        assert bottleneck == 1
        assert trace_path(parent, 1, 5) == [1, 3, 2, 5]
