import logging
from typing import TYPE_CHECKING, Hashable

if TYPE_CHECKING:
    from .base import DirectedGraph, UndirectedGraph

logger = logging.getLogger(__name__)


def count_transitive_triples(graph: "DirectedGraph") -> int:
    """
    Counts the transitive triples of a directed graph.

    A transitive triple is an ordered node triple (u, v, w) such that the edges
    (u, v), (u, w) and (w, v) all exist. Every triple is generated from exactly
    one edge (u, v), so nothing is counted twice.

    For each edge (u, v) the candidates w are taken from whichever of
    out_neighbors(u) and in_neighbors(v) is smaller, so the total work is
    O(sum over edges of min(out_degree(u), in_degree(v))). Only the public
    graph operations are used, so any representation with O(1) adjacency
    tests and O(degree) neighbor iteration keeps this bound.

    Args:
        graph: The directed graph to analyse.

    Returns:
        The number of transitive triples.
    """
    count = 0
    tests = 0
    edges = graph.edges()
    for u, v in edges:
        if graph.out_degree(u) <= graph.in_degree(v):
            for w in graph.out_neighbors(u):
                tests += 1
                if graph.adjacent(w, v):
                    count += 1
        else:
            for w in graph.in_neighbors(v):
                tests += 1
                if graph.adjacent(u, w):
                    count += 1

    logger.debug(f"Transitive triples: {count} ({len(edges)} edges, {tests} adjacency tests)")
    return count


def count_triangles(graph: "UndirectedGraph") -> int:
    """
    Counts the closed triangles of an undirected graph.

    For each edge {u, v} the neighbors of the endpoint with the smaller degree
    (u on ties) are tested for adjacency with the other endpoint. Each triangle
    is found once per edge, i.e. three times in total.

    Args:
        graph: The undirected graph to analyse.

    Returns:
        The number of unordered node triples {u, v, w} that are pairwise adjacent.
    """
    count = 0
    tests = 0
    edges = graph.edges()
    for u, v in edges:
        pivot: Hashable
        other: Hashable
        if graph.degree(u) <= graph.degree(v):
            pivot, other = u, v
        else:
            pivot, other = v, u
        for w in graph.neighbors(pivot):
            tests += 1
            if graph.adjacent(w, other):
                count += 1

    # Every triangle was seen once from each of its three edges
    logger.debug(f"Triangles: {count // 3} ({len(edges)} edges, {tests} adjacency tests)")
    return count // 3
