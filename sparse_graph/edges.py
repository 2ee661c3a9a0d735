from dataclasses import dataclass
from typing import Generic, Hashable, Iterator, TypeVar

T = TypeVar("T", bound=Hashable)


@dataclass(frozen=True)
class DirectedEdge(Generic[T]):
    """
    An ordered pair of nodes (source -> target).

    Two directed edges are equal only if both endpoints match positionally,
    so DirectedEdge("A", "B") != DirectedEdge("B", "A").
    """
    source: T
    target: T

    def __iter__(self) -> Iterator[T]:
        # Allows `u, v = edge`
        yield self.source
        yield self.target

    def reversed(self) -> "DirectedEdge[T]":
        """Returns the edge pointing the other way (target -> source)."""
        return DirectedEdge(self.target, self.source)


@dataclass(frozen=True, eq=False)
class UndirectedEdge(Generic[T]):
    """
    An unordered pair of nodes {node1, node2}.

    Equality and hashing ignore orientation: UndirectedEdge("A", "B") and
    UndirectedEdge("B", "A") are the same edge and collapse to one entry in a set.
    """
    node1: T
    node2: T

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UndirectedEdge):
            return NotImplemented
        if self.node1 == other.node1 and self.node2 == other.node2:
            return True
        return self.node1 == other.node2 and self.node2 == other.node1

    def __hash__(self) -> int:
        # Sum is symmetric in its operands
        return hash(self.node1) + hash(self.node2)

    def __iter__(self) -> Iterator[T]:
        yield self.node1
        yield self.node2

    def other(self, node: T) -> T:
        """
        Returns the endpoint opposite to `node`.

        Args:
            node: One of the two endpoints of this edge.

        Raises:
            ValueError: If `node` is not an endpoint of this edge.
        """
        if node == self.node1:
            return self.node2
        if node == self.node2:
            return self.node1
        raise ValueError(f"Node {node} is not an endpoint of {self}.")
