import itertools
import random

import networkx as nx
import pytest
from sparse_graph.algorithms import count_transitive_triples, count_triangles
from sparse_graph.graph import DirectedGraphAS, UndirectedGraphAS


def directed_from(edges, nodes=()):
    g = DirectedGraphAS()
    g.add_nodes_from(nodes)
    g.add_edges_from(edges)
    return g


def undirected_from(edges, nodes=()):
    g = UndirectedGraphAS()
    g.add_nodes_from(nodes)
    g.add_edges_from(edges)
    return g


def brute_force_transitive_triples(g):
    nodes = list(g.nodes())
    return sum(
        1
        for u, v, w in itertools.permutations(nodes, 3)
        if g.adjacent(u, v) and g.adjacent(u, w) and g.adjacent(w, v)
    )


def random_edges(num_nodes, probability, seed, directed):
    rng = random.Random(seed)
    pairs = itertools.permutations(range(num_nodes), 2) if directed \
        else itertools.combinations(range(num_nodes), 2)
    return [(u, v) for u, v in pairs if rng.random() < probability]


class TestCountTransitiveTriples:
    def test_empty_graph(self):
        assert count_transitive_triples(DirectedGraphAS()) == 0

    def test_single_transitive_triple(self):
        # A -> B, A -> C, C -> B
        g = directed_from([("A", "B"), ("A", "C"), ("C", "B")])
        assert count_transitive_triples(g) == 1

    def test_directed_cycle_has_none(self):
        g = directed_from([("A", "B"), ("B", "C"), ("C", "A")])
        assert count_transitive_triples(g) == 0

    def test_complete_digraph_on_three_nodes(self):
        g = directed_from(itertools.permutations("ABC", 2))
        # Every edge (u, v) closes with the remaining node as w
        assert count_transitive_triples(g) == 6

    def test_complete_digraph_on_n_nodes(self):
        n = 6
        g = directed_from(itertools.permutations(range(n), 2))
        assert count_transitive_triples(g) == n * (n - 1) * (n - 2)

    def test_method_delegates(self):
        g = directed_from([("A", "B"), ("A", "C"), ("C", "B")])
        assert g.count_transitive_triples() == 1

    def test_skewed_degrees_use_both_branches(self):
        # Hub 0 points at everything; 1 -> k for k > 1 closes a triple through each k
        edges = [(0, k) for k in range(1, 20)] + [(1, k) for k in range(2, 20)]
        g = directed_from(edges)
        assert count_transitive_triples(g) == brute_force_transitive_triples(g) == 18

    @pytest.mark.parametrize("seed", range(5))
    def test_matches_brute_force_on_random_graphs(self, seed):
        g = directed_from(random_edges(12, 0.3, seed, directed=True))
        assert count_transitive_triples(g) == brute_force_transitive_triples(g)

    def test_removal_updates_count(self):
        g = directed_from(itertools.permutations("ABC", 2))
        g.remove_node("C")
        assert count_transitive_triples(g) == 0


class TestCountTriangles:
    def test_empty_graph(self):
        assert count_triangles(UndirectedGraphAS()) == 0

    def test_triangle(self):
        g = undirected_from([("A", "B"), ("B", "C"), ("C", "A")])
        assert count_triangles(g) == 1
        assert g.count_triangles() == 1

    def test_four_cycle_has_none(self):
        g = undirected_from([(1, 2), (2, 3), (3, 4), (4, 1)])
        assert count_triangles(g) == 0

    def test_complete_graph(self):
        g = undirected_from(itertools.combinations(range(5), 2))
        # C(5, 3)
        assert count_triangles(g) == 10

    def test_isolated_nodes_do_not_matter(self):
        g = undirected_from([("A", "B"), ("B", "C"), ("C", "A")], nodes=["D", "E"])
        assert count_triangles(g) == 1

    def test_star_with_hub_edges(self):
        # Hub 0 with leaves 1..9 and a path 1-2-3: triangles {0,1,2}, {0,2,3}
        edges = [(0, k) for k in range(1, 10)] + [(1, 2), (2, 3)]
        g = undirected_from(edges)
        assert count_triangles(g) == 2

    def test_removing_edge_breaks_triangle(self):
        g = undirected_from([("A", "B"), ("B", "C"), ("C", "A")])
        g.remove_edge("C", "A")
        assert count_triangles(g) == 0

    @pytest.mark.parametrize("seed", range(5))
    def test_matches_networkx(self, seed):
        edges = random_edges(30, 0.2, seed, directed=False)
        g = undirected_from(edges, nodes=range(30))
        reference = nx.Graph()
        reference.add_nodes_from(g.nodes())
        reference.add_edges_from(tuple(e) for e in g.edges())
        assert count_triangles(g) == sum(nx.triangles(reference).values()) // 3


class RecordingDirectedGraph(DirectedGraphAS):
    """Remembers which node every neighbor query was made for."""

    def __init__(self):
        super().__init__()
        self.calls = []

    def out_neighbors(self, v):
        self.calls.append(("out", v))
        return super().out_neighbors(v)

    def in_neighbors(self, v):
        self.calls.append(("in", v))
        return super().in_neighbors(v)


class RecordingUndirectedGraph(UndirectedGraphAS):
    def __init__(self):
        super().__init__()
        self.calls = []

    def neighbors(self, v):
        self.calls.append(v)
        return super().neighbors(v)


class TestSmallerSideIteration:
    def test_transitive_triples_skip_hub_out_neighbors(self):
        # Hub 0 -> 1..9 plus 1 -> 2 closes the single triple (0, 2, 1)
        g = RecordingDirectedGraph()
        g.add_edges_from([(0, k) for k in range(1, 10)] + [(1, 2)])
        assert count_transitive_triples(g) == 1
        assert ("out", 0) not in g.calls
        # out_degree(0) > in_degree(k): candidates come from in_neighbors(k)
        assert {v for side, v in g.calls if side == "in"} == set(range(1, 10))
        # out_degree(1) <= in_degree(2): candidates come from out_neighbors(1)
        assert ("out", 1) in g.calls
        assert len(g.calls) == g.num_edges()

    def test_transitive_triples_skip_hub_in_neighbors(self):
        # 1..9 -> hub 0 plus 1 -> 2 closes the single triple (1, 0, 2)
        g = RecordingDirectedGraph()
        g.add_edges_from([(k, 0) for k in range(1, 10)] + [(1, 2)])
        assert count_transitive_triples(g) == 1
        assert ("in", 0) not in g.calls
        assert {v for side, v in g.calls if side == "out"} == set(range(1, 10))

    def test_triangles_skip_hub(self):
        g = RecordingUndirectedGraph()
        g.add_edges_from([(0, k) for k in range(1, 10)] + [(1, 2)])
        assert count_triangles(g) == 1
        assert 0 not in g.calls
        assert set(g.calls) == set(range(1, 10))
        assert len(g.calls) == g.num_edges()
