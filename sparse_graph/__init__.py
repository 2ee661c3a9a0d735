from .edges import DirectedEdge, UndirectedEdge
from .base import DirectedGraph, UndirectedGraph
from .graph import DirectedGraphAS, UndirectedGraphAS
from .algorithms import count_transitive_triples, count_triangles

__all__ = [
    "DirectedEdge", "UndirectedEdge",
    "DirectedGraph", "UndirectedGraph",
    "DirectedGraphAS", "UndirectedGraphAS",
    "count_transitive_triples", "count_triangles",
]
