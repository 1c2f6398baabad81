import pytest

from flow_network import FlowNetwork


@pytest.fixture
def single_edge():
    """
    1 --5--> 2
    """
    return FlowNetwork.build([0, 0], [(1, 2, 5)])


@pytest.fixture
def diamond():
    """
        2
      /   \\
     1     4      1->2:3, 1->3:2, 2->4:2, 3->4:3
      \\   /
        3
    """
    return FlowNetwork.build([0, 0, 0, 0], [(1, 2, 3), (1, 3, 2), (2, 4, 2), (3, 4, 3)])


@pytest.fixture
def crossing():
    """
    Classic six-vertex network (CLRS figure 26.1), max flow 1 -> 6 is 23.
    """
    edges = [
        (1, 2, 16), (1, 3, 13), (3, 2, 4), (2, 4, 12), (4, 3, 9),
        (3, 5, 14), (5, 4, 7), (4, 6, 20), (5, 6, 4),
    ]
    return FlowNetwork.build([0] * 6, edges)


@pytest.fixture
def supply_demand():
    """
    Vertex 1 produces 5, vertices 2 and 3 consume 3 and 2.
    """
    return FlowNetwork.build([-5, 3, 2], [(1, 2, 3), (1, 3, 2)])


@pytest.fixture
def graph_text():
    return "\n".join(
        [
            "4 5",
            "-4 0 0 4",
            "1 2 3",
            "1 3 2",
            "2 4 2",
            "3 4 3",
            "1 2 1",
        ]
    )
