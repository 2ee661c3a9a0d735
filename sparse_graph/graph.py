import logging
from typing import Dict, Hashable, Iterable, Iterator, List, Optional, Set, Tuple

from .base import DirectedGraph, UndirectedGraph
from .edges import DirectedEdge, UndirectedEdge

logger = logging.getLogger(__name__)


class DirectedGraphAS(DirectedGraph[Hashable]):
    """
    A directed graph stored as adjacency sets.

    Each node maps to the set of its out-neighbors and to the set of its
    in-neighbors, so adjacency tests, insertions and deletions are O(1) and
    neighbor iteration is O(degree).
    """

    def __init__(self) -> None:
        self._out: Dict[Hashable, Set[Hashable]] = {}  # node -> {v : (node, v) in E}
        self._in: Dict[Hashable, Set[Hashable]] = {}   # node -> {u : (u, node) in E}
        # Kept explicitly so num_edges() stays O(1)
        self._num_edges = 0

    def add_node(self, v: Hashable) -> None:
        if v in self._out:
            return
        self._out[v] = set()
        self._in[v] = set()

    def add_nodes_from(self, nodes: Iterable[Hashable]) -> None:
        """Adds every node of `nodes`; nodes already present are skipped."""
        for v in nodes:
            self.add_node(v)

    def contains_node(self, v: Hashable) -> bool:
        return v in self._out

    def add_edge(self, u: Hashable, v: Hashable) -> None:
        if u == v or self.adjacent(u, v):
            return
        self.add_node(u)
        self.add_node(v)
        self._out[u].add(v)
        self._in[v].add(u)
        self._num_edges += 1

    def add_edges_from(self, edges: Iterable[Tuple[Hashable, Hashable]]) -> None:
        """
        Adds every (u, v) pair of `edges`.

        Args:
            edges: Pairs of nodes; DirectedEdge instances unpack the same way.
                   Self-loops and existing edges are skipped as in add_edge().
        """
        for u, v in edges:
            self.add_edge(u, v)

    def remove_node(self, v: Hashable) -> None:
        if v not in self._out:
            return
        # v's own sets go with the map entries below, but v must also leave
        # the sets of every neighbor
        for u in self._out[v]:
            self._in[u].discard(v)
        for u in self._in[v]:
            self._out[u].discard(v)
        removed = len(self._out[v]) + len(self._in[v])
        self._num_edges -= removed
        del self._out[v]
        del self._in[v]
        logger.debug(f"Removed node {v!r} and {removed} incident edges")

    def remove_edge(self, u: Hashable, v: Hashable) -> None:
        if not self.adjacent(u, v):
            return
        self._out[u].remove(v)
        self._in[v].remove(u)
        self._num_edges -= 1

    def adjacent(self, u: Hashable, v: Hashable) -> bool:
        neighbors = self._out.get(u)
        return neighbors is not None and v in neighbors

    def num_nodes(self) -> int:
        return len(self._out)

    def num_edges(self) -> int:
        return self._num_edges

    def nodes(self) -> Iterator[Hashable]:
        return iter(self._out)

    def edges(self) -> List[DirectedEdge[Hashable]]:
        return [DirectedEdge(u, v) for u, targets in self._out.items() for v in targets]

    def in_degree(self, v: Hashable) -> int:
        neighbors = self._in.get(v)
        return len(neighbors) if neighbors is not None else 0

    def out_degree(self, v: Hashable) -> int:
        neighbors = self._out.get(v)
        return len(neighbors) if neighbors is not None else 0

    def in_neighbors(self, v: Hashable) -> Optional[Iterator[Hashable]]:
        neighbors = self._in.get(v)
        return iter(neighbors) if neighbors is not None else None

    def out_neighbors(self, v: Hashable) -> Optional[Iterator[Hashable]]:
        neighbors = self._out.get(v)
        return iter(neighbors) if neighbors is not None else None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(nodes={self.num_nodes()}, edges={self.num_edges()})"


class UndirectedGraphAS(UndirectedGraph[Hashable]):
    """
    An undirected graph stored as adjacency sets.

    Every edge {u, v} is recorded twice, as v in the set of u and as u in the
    set of v.
    """

    def __init__(self) -> None:
        self._adj: Dict[Hashable, Set[Hashable]] = {}
        self._num_edges = 0

    def add_node(self, v: Hashable) -> None:
        if v in self._adj:
            return
        self._adj[v] = set()

    def add_nodes_from(self, nodes: Iterable[Hashable]) -> None:
        """Adds every node of `nodes`; nodes already present are skipped."""
        for v in nodes:
            self.add_node(v)

    def contains_node(self, v: Hashable) -> bool:
        return v in self._adj

    def add_edge(self, u: Hashable, v: Hashable) -> None:
        if u == v or self.adjacent(u, v):
            return
        self.add_node(u)
        self.add_node(v)
        self._adj[u].add(v)
        self._adj[v].add(u)
        self._num_edges += 1

    def add_edges_from(self, edges: Iterable[Tuple[Hashable, Hashable]]) -> None:
        """Adds every {u, v} pair of `edges`, skipping self-loops and existing edges."""
        for u, v in edges:
            self.add_edge(u, v)

    def remove_node(self, v: Hashable) -> None:
        if v not in self._adj:
            return
        for u in self._adj[v]:
            self._adj[u].discard(v)
        removed = len(self._adj[v])
        self._num_edges -= removed
        del self._adj[v]
        logger.debug(f"Removed node {v!r} and {removed} incident edges")

    def remove_edge(self, u: Hashable, v: Hashable) -> None:
        if not self.adjacent(u, v):
            return
        self._adj[u].remove(v)
        self._adj[v].remove(u)
        self._num_edges -= 1

    def adjacent(self, u: Hashable, v: Hashable) -> bool:
        neighbors = self._adj.get(u)
        return neighbors is not None and v in neighbors

    def num_nodes(self) -> int:
        return len(self._adj)

    def num_edges(self) -> int:
        return self._num_edges

    def nodes(self) -> Iterator[Hashable]:
        return iter(self._adj)

    def edges(self) -> Set[UndirectedEdge[Hashable]]:
        """
        Returns a snapshot of all edges.

        Both stored orientations of an edge map to the same UndirectedEdge,
        so the set keeps each edge once.
        """
        return {UndirectedEdge(u, v) for u, neighbors in self._adj.items() for v in neighbors}

    def degree(self, v: Hashable) -> int:
        neighbors = self._adj.get(v)
        return len(neighbors) if neighbors is not None else 0

    def neighbors(self, v: Hashable) -> Optional[Iterator[Hashable]]:
        neighbors = self._adj.get(v)
        return iter(neighbors) if neighbors is not None else None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(nodes={self.num_nodes()}, edges={self.num_edges()})"
