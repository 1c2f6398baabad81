from typing import Optional


class Edge:
    """
    Directed arc u -> v of a FlowNetwork.

    An input arc keeps 0 <= flow <= capacity. Its companion v -> u is an arc
    of capacity 0 (or an input arc in the opposite direction) whose flow is
    always the negation of this one, so the residual of either side is
    `capacity - flow`.
    """

    __slots__ = ("u", "v", "capacity", "flow", "reverse_edge")

    def __init__(
        self,
        u: int,
        v: int,
        capacity: int,
        reverse_edge: Optional["Edge"] = None,
    ) -> None:
        self.u = u
        self.v = v
        self.capacity = capacity    # summed over parallel input arcs
        self.flow = 0
        self.reverse_edge = reverse_edge

    def is_reverse(self) -> bool:
        """Zero-capacity arcs exist only as companions."""
        return self.capacity == 0

    def remaining_capacity(self) -> int:
        return self.capacity - self.flow

    def augment(self, amount: int) -> None:
        """
        Move `amount` units along u -> v, keeping the pair antisymmetric.

        Raises
        ------
        RuntimeError
            If no companion has been linked yet.
        """
        companion = self.reverse_edge
        if companion is None:
            raise RuntimeError(f"{self!r} has no companion edge; call ensure_residual_edges() first")
        self.flow += amount
        companion.flow -= amount

    def __repr__(self) -> str:
        return f"Edge({self.u}->{self.v}, {self.flow}/{self.capacity})"
