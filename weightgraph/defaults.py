"""Default sample graph and configuration file."""

from typing import List, Tuple

from weightgraph.graph import Graph


SAMPLE_VERTICES = ["A", "B", "C", "D"]

SAMPLE_EDGES: List[Tuple[str, str, float]] = [
    ("A", "B", 5.0),
    ("A", "C", 10.0),
    ("C", "B", 7.0),
    ("D", "A", 3.0),
    ("D", "C", 8.0),
]


def sample_graph() -> Graph[str]:
    """The graph walked through by `wg demo`."""
    graph: Graph[str] = Graph()
    for vertex in SAMPLE_VERTICES:
        graph.add_vertex(vertex)
    for src, dst, weight in SAMPLE_EDGES:
        graph.add_edge(src, dst, weight)
    return graph


CONFIG_FILENAME = "weightgraph.yml"

config_yml = """\
# Text written after each vertex in a traversal.
separator: " "

# Traversals to print: bft (breadth-first), dft (depth-first).
traversals: [bft, dft]

# Probes made by `wg demo`.
in_degree: [A, B, D]
out_degree: [B, C, D]
edges: [[A, B], [B, A]]
weights: [[A, C], [C, D]]
adjacent: [A, B]
remove_edge: [A, B]
remove_vertices: [C, A]
"""
