from numbers import Integral
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

import networkx as nx

from add_edge import add_edge
from edge import Edge
from log_utils import get_logger

logger = get_logger(__name__)


class InvalidVertexError(ValueError):
    """A vertex id outside 1..V was requested."""


class Vertex:
    """
    A vertex of the flow network.
    need < 0: producer (supply), need > 0: consumer (demand), 0: transshipment.
    """

    __slots__ = ("id", "need", "edges")

    def __init__(self, vertex_id: int, need: int = 0) -> None:
        self.id = vertex_id
        self.need = need
        self.edges: List[Edge] = []  # first-seen order

    def __repr__(self) -> str:
        return f"Vertex({self.id}, need={self.need}, edges={len(self.edges)})"


class FlowNetwork:
    """
    Vertices 1..V, each owning an ordered adjacency list, plus a
    (u, v) -> Edge side index used to find companion arcs in O(1).

    Attributes
    ----------
    super_source : Optional[int]
        Id of the synthetic super-source, set by the need-based reduction.
    super_sink : Optional[int]
        Id of the synthetic super-sink.
    """

    def __init__(self) -> None:
        self._vertices: List[Vertex] = []
        self._graph: List[List[Edge]] = []  # graph[u - 1] is vertex u's adjacency list
        self._index: Dict[Tuple[int, int], Edge] = {}
        self.super_source: Optional[int] = None
        self.super_sink: Optional[int] = None

    @classmethod
    def build(
        cls,
        needs: Sequence[int],
        edges: Iterable[Tuple[int, int, int]],
    ) -> "FlowNetwork":
        """
        Create a network from per-vertex needs (vertex i + 1 gets needs[i])
        and (u, v, capacity) triples. Parallel arcs are merged by summing
        their capacities; adjacency order is first-occurrence order.
        """
        network = cls()
        for need in needs:
            network.add_vertex(int(need))

        count = 0
        for u, v, cap in edges:
            network.add_edge(int(u), int(v), int(cap))
            count += 1

        logger.debug(
            f"built network: {network.vertex_count} vertices, "
            f"{count} input edges merged into {network.edge_count}"
        )
        return network

    # ------------------------------------------------------------------ topology

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def edge_count(self) -> int:
        return len(self._index)

    @property
    def vertices(self) -> List[Vertex]:
        return list(self._vertices)

    def add_vertex(self, need: int = 0) -> int:
        """Append a vertex and return its id."""
        vertex = Vertex(len(self._vertices) + 1, need)
        self._vertices.append(vertex)
        self._graph.append(vertex.edges)
        return vertex.id

    def add_edge(self, u: int, v: int, capacity: int) -> Edge:
        self.validate_vertex(u)
        self.validate_vertex(v)
        return add_edge(self._graph, self._index, u, v, capacity)

    def validate_vertex(self, v: int) -> None:
        if not isinstance(v, Integral) or isinstance(v, bool) or not 1 <= v <= self.vertex_count:
            raise InvalidVertexError(
                f"vertex {v!r} out of range, expected 1..{self.vertex_count}"
            )

    def vertex(self, v: int) -> Vertex:
        self.validate_vertex(v)
        return self._vertices[v - 1]

    def get_edge(self, u: int, v: int) -> Optional[Edge]:
        return self._index.get((u, v))

    def edges_from(self, v: int) -> List[Edge]:
        """Outgoing arcs of v (companions included), in adjacency order."""
        self.validate_vertex(v)
        return self._graph[v - 1]

    def edges_into(self, v: int) -> List[Edge]:
        """Arcs ending at v, in vertex then adjacency order."""
        self.validate_vertex(v)
        return [e for adjacency in self._graph for e in adjacency if e.v == v]

    def edges(self) -> Iterator[Edge]:
        for adjacency in self._graph:
            yield from adjacency

    # ------------------------------------------------------------------ residual network

    def ensure_residual_edges(self) -> int:
        """
        For every positive-capacity arc u -> v without a v -> u arc, insert a
        zero-capacity companion, and link every positive-capacity arc with its
        companion. An existing v -> u arc of any capacity is reused.
        Safe to call repeatedly. Returns the number of inserted arcs.
        """
        inserted = 0
        for u_idx in range(len(self._graph)):
            # snapshot: companions appended to this same list must not be revisited
            for e in list(self._graph[u_idx]):
                if e.capacity == 0:
                    continue
                rev = self._index.get((e.v, e.u))
                if rev is None:
                    rev = Edge(e.v, e.u, 0)
                    self._graph[e.v - 1].append(rev)
                    self._index[(e.v, e.u)] = rev
                    inserted += 1
                e.reverse_edge = rev
                rev.reverse_edge = e

        if inserted:
            logger.debug(f"inserted {inserted} zero-capacity reverse edges")
        return inserted

    @staticmethod
    def residual_capacity(edge: Edge) -> int:
        return edge.remaining_capacity()

    # ------------------------------------------------------------------ flow accounting

    def net_outflow(self, v: int) -> int:
        """
        Flow leaving v minus flow entering v. Companion arcs hold the negated
        flow of their partner, so summing v's own arcs is enough.
        """
        return sum(e.flow for e in self.edges_from(v))

    def total_need(self) -> int:
        return sum(vertex.need for vertex in self._vertices)

    def is_synthetic(self, v: int) -> bool:
        return v in (self.super_source, self.super_sink)

    # ------------------------------------------------------------------ interop

    def to_networkx(self) -> nx.DiGraph:
        """
        Export the positive-capacity arcs as a networkx DiGraph with
        `capacity`/`flow` edge attributes and a `demand` node attribute
        (networkx uses the same sign convention as `need`).
        Synthetic vertices and their arcs are left out.
        """
        G = nx.DiGraph()
        for vertex in self._vertices:
            if self.is_synthetic(vertex.id):
                continue
            G.add_node(vertex.id, demand=vertex.need)

        for e in self.edges():
            if e.capacity == 0 or self.is_synthetic(e.u) or self.is_synthetic(e.v):
                continue
            G.add_edge(e.u, e.v, capacity=e.capacity, flow=e.flow)
        return G

    def __repr__(self) -> str:
        return f"FlowNetwork(V={self.vertex_count}, E={self.edge_count})"
