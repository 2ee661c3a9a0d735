from abc import ABC, abstractmethod
from typing import Collection, Generic, Hashable, Iterator, Optional, TypeVar

from .algorithms import count_transitive_triples, count_triangles
from .edges import DirectedEdge, UndirectedEdge

T = TypeVar("T", bound=Hashable)


class DirectedGraph(ABC, Generic[T]):
    """
    Abstract directed graph without self-loops or parallel edges.

    Every query is total: asking about a node that is not in the graph never
    raises. Degrees of absent nodes are 0 and neighbor queries return None,
    which is distinct from the empty iterator of an isolated node.

    Node identifiers must be hashable and must not change their hash while
    stored in the graph.
    """

    @abstractmethod
    def add_node(self, v: T) -> None:
        """Adds node v. Does nothing if v is already present."""

    @abstractmethod
    def contains_node(self, v: T) -> bool:
        """Checks whether v is a node of the graph."""

    @abstractmethod
    def add_edge(self, u: T, v: T) -> None:
        """
        Adds the edge (u, v), adding u and v as nodes if needed.

        Does nothing if u == v or the edge already exists.
        """

    @abstractmethod
    def remove_node(self, v: T) -> None:
        """Removes v together with all edges entering or leaving it."""

    @abstractmethod
    def remove_edge(self, u: T, v: T) -> None:
        """Removes the edge (u, v) if present."""

    @abstractmethod
    def adjacent(self, u: T, v: T) -> bool:
        """Checks whether the edge (u, v) exists."""

    @abstractmethod
    def num_nodes(self) -> int:
        """Returns the number of nodes."""

    @abstractmethod
    def num_edges(self) -> int:
        """Returns the number of edges."""

    @abstractmethod
    def nodes(self) -> Iterator[T]:
        """Returns an iterator over all nodes."""

    @abstractmethod
    def edges(self) -> Collection[DirectedEdge[T]]:
        """Returns a snapshot of all edges, one entry per ordered pair."""

    @abstractmethod
    def in_degree(self, v: T) -> int:
        """Returns the number of edges entering v, or 0 if v is absent."""

    @abstractmethod
    def out_degree(self, v: T) -> int:
        """Returns the number of edges leaving v, or 0 if v is absent."""

    @abstractmethod
    def in_neighbors(self, v: T) -> Optional[Iterator[T]]:
        """Returns an iterator over the nodes u with an edge (u, v), or None if v is absent."""

    @abstractmethod
    def out_neighbors(self, v: T) -> Optional[Iterator[T]]:
        """Returns an iterator over the nodes u with an edge (v, u), or None if v is absent."""

    def count_transitive_triples(self) -> int:
        """Counts the ordered triples (u, v, w) with edges (u, v), (u, w) and (w, v)."""
        return count_transitive_triples(self)

    def __contains__(self, v: T) -> bool:
        return self.contains_node(v)

    def __len__(self) -> int:
        return self.num_nodes()

    def __iter__(self) -> Iterator[T]:
        return self.nodes()


class UndirectedGraph(ABC, Generic[T]):
    """
    Abstract undirected graph without self-loops or parallel edges.

    The same totality rules as for DirectedGraph apply. All edge operations
    are symmetric in their two node arguments.
    """

    @abstractmethod
    def add_node(self, v: T) -> None:
        """Adds node v. Does nothing if v is already present."""

    @abstractmethod
    def contains_node(self, v: T) -> bool:
        """Checks whether v is a node of the graph."""

    @abstractmethod
    def add_edge(self, u: T, v: T) -> None:
        """
        Adds the edge {u, v}, adding u and v as nodes if needed.

        Does nothing if u == v or the edge already exists.
        """

    @abstractmethod
    def remove_node(self, v: T) -> None:
        """Removes v together with all its incident edges."""

    @abstractmethod
    def remove_edge(self, u: T, v: T) -> None:
        """Removes the edge {u, v} if present."""

    @abstractmethod
    def adjacent(self, u: T, v: T) -> bool:
        """Checks whether the edge {u, v} exists."""

    @abstractmethod
    def num_nodes(self) -> int:
        """Returns the number of nodes."""

    @abstractmethod
    def num_edges(self) -> int:
        """Returns the number of edges."""

    @abstractmethod
    def nodes(self) -> Iterator[T]:
        """Returns an iterator over all nodes."""

    @abstractmethod
    def edges(self) -> Collection[UndirectedEdge[T]]:
        """Returns a snapshot of all edges, each undirected edge exactly once."""

    @abstractmethod
    def degree(self, v: T) -> int:
        """Returns the number of edges incident to v, or 0 if v is absent."""

    @abstractmethod
    def neighbors(self, v: T) -> Optional[Iterator[T]]:
        """Returns an iterator over the neighbors of v, or None if v is absent."""

    def count_triangles(self) -> int:
        """Counts the unordered node triples that are pairwise adjacent."""
        return count_triangles(self)

    def __contains__(self, v: T) -> bool:
        return self.contains_node(v)

    def __len__(self) -> int:
        return self.num_nodes()

    def __iter__(self) -> Iterator[T]:
        return self.nodes()
