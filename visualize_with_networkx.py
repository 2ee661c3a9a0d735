import logging

import matplotlib.pyplot as plt
import networkx as nx
from sparse_graph import UndirectedGraphAS

logging.basicConfig(level=logging.DEBUG)

# Build a small graph: two triangles sharing the edge 1-2, plus a tail
g = UndirectedGraphAS()
g.add_edge("0", "1")
g.add_edge("0", "2")
g.add_edge("1", "2")
g.add_edge("1", "3")
g.add_edge("2", "3")
g.add_edge("3", "4")

print(f"{g}: {g.count_triangles()} triangles")

# Convert to a networkx Graph through the public node/edge queries only
G = nx.Graph()
G.add_nodes_from(g.nodes())
for edge in g.edges():
    G.add_edge(edge.node1, edge.node2)

# Draw the graph using circular layout
plt.figure(figsize=(6, 6))
nx.draw_circular(
    G,
    with_labels=True,
    node_color="lightblue",
    edge_color="gray",
    node_size=800,
    font_size=10,
    font_weight="bold",
)
plt.title("Graph Visualization (networkx)")
plt.tight_layout()
plt.show()
