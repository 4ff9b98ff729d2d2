"""Text reports about a graph.

The walkthrough report reproduces the demonstration session: traverse the
graph, query degrees, edges and weights, then remove an edge and some
vertices and show what is left.
"""

import logging
from collections.abc import Hashable
from io import StringIO
from typing import Any, Dict, List, Optional, Tuple

from jinja2 import Environment, PackageLoader, select_autoescape

from weightgraph.config import Config
from weightgraph.graph import Graph, VertexNotFound
from weightgraph.traversal import TRAVERSALS, write_traversal
from weightgraph.utils import bracketed, or_na


class ReportConfig(Config):

    required: Dict[str, Any] = {}

    optional = {
        "separator": " ",
        "traversals": ["bft", "dft"],
        "in_degree": ["A", "B", "D"],
        "out_degree": ["B", "C", "D"],
        "edges": [["A", "B"], ["B", "A"]],
        "weights": [["A", "C"], ["C", "D"]],
        "adjacent": ["A", "B"],
        "remove_edge": ["A", "B"],
        "remove_vertices": ["C", "A"],
    }

    def validate(self, **defaults: Any):
        """Validate the configuration and drop entries the walkthrough cannot use.

        Each bad entry is logged as an error and removed, so with --keep-going
        the walkthrough still runs on what is left. A value that is not a list
        falls back to its default. A malformed remove_edge becomes None, which
        skips the edge removal step.
        """
        super().validate(**defaults)
        data = dict(self.data)
        for key in VERTEX_KEYS + PAIR_KEYS + ["traversals"]:
            if not isinstance(data[key], list):
                logging.error("%s: %s: expected a list, got %r", self.source, key, data[key])
                data[key] = self.optional[key]
        data["traversals"] = [n for n in data["traversals"] if self._check_traversal(n)]
        for key in VERTEX_KEYS:
            data[key] = [v for v in data[key] if self._check_vertex(key, v)]
        for key in PAIR_KEYS:
            data[key] = [p for p in data[key] if self._check_pair(key, p)]
        if data["remove_edge"] is not None and not self._check_pair(
            "remove_edge", data["remove_edge"]
        ):
            data["remove_edge"] = None
        self.data = data

    def _check_traversal(self, name: Any) -> bool:
        if not isinstance(name, str) or name not in TRAVERSALS:
            logging.error("%s: unknown traversal %r", self.source, name)
            return False
        return True

    def _check_vertex(self, key: str, vertex: Any) -> bool:
        if not isinstance(vertex, Hashable):
            logging.error("%s: %s: not a vertex: %r", self.source, key, vertex)
            return False
        return True

    def _check_pair(self, key: str, pair: Any) -> bool:
        if not isinstance(pair, list) or len(pair) != 2:
            logging.error("%s: %s: expected [src, dst], got %r", self.source, key, pair)
            return False
        return all(self._check_vertex(key, v) for v in pair)


# Config keys holding a list of vertices and a list of [src, dst] pairs.
VERTEX_KEYS = ["in_degree", "out_degree", "adjacent", "remove_vertices"]
PAIR_KEYS = ["edges", "weights"]


LABELS = {
    "bft": "Breadth-first search",
    "dft": "Depth-first search",
}


class Report:

    """Renders reports about graphs using the package's Jinja templates."""

    def __init__(self, cfg: ReportConfig):
        self.cfg = cfg
        self.env = Environment(
            loader=PackageLoader("weightgraph", "templates"),
            autoescape=select_autoescape(["html"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["bracketed"] = bracketed
        self.env.filters["na"] = or_na
        self.traversals_template = self.env.get_template("traversals.txt.jinja")
        self.walkthrough_template = self.env.get_template("walkthrough.txt.jinja")

    def traversal_lines(self, graph: Graph) -> List[Tuple[str, str]]:
        """Return (label, visited vertices) for each configured traversal."""
        lines = []
        for name in self.cfg["traversals"]:
            traverse = TRAVERSALS.get(name)
            if traverse is None:
                continue
            out = StringIO()
            write_traversal(traverse(graph), out, self.cfg["separator"])
            lines.append((LABELS[name], out.getvalue()))
        return lines

    def traversals(self, graph: Graph) -> str:
        return self.traversals_template.render(traversals=self.traversal_lines(graph))

    def walkthrough(self, graph: Graph) -> str:
        """Render the demonstration walkthrough for graph.

        The removals are made on a copy, so graph itself is not modified.
        """
        logging.info("walking through %r", graph)
        graph = graph.copy()
        cfg = self.cfg
        vals: Dict[str, Any] = {
            "traversals": self.traversal_lines(graph),
            "in_degrees": [(v, _degree(graph.in_degree, v)) for v in cfg["in_degree"]],
            "out_degrees": [(v, _degree(graph.out_degree, v)) for v in cfg["out_degree"]],
            "edges": [(s, d, graph.has_edge(s, d)) for s, d in cfg["edges"]],
            "weights": [(s, d, graph.weight_edge(s, d)) for s, d in cfg["weights"]],
            "initial": _state(graph),
            "adjacent": [(v, graph.adjacent_to(v)) for v in cfg["adjacent"]],
        }
        vals["removed_edge"] = None
        if cfg["remove_edge"] is not None:
            src, dst = cfg["remove_edge"]
            logging.info("removing edge %r -> %r", src, dst)
            if not graph.remove_edge(src, dst):
                logging.warning("no edge %r -> %r to remove", src, dst)
            vals["removed_edge"] = (src, dst, graph.has_edge(src, dst), graph.weight_edge(src, dst))
        vals["removed_vertices"] = []
        for vertex in cfg["remove_vertices"]:
            logging.info("removing vertex %r", vertex)
            if not graph.remove_vertex(vertex):
                logging.warning("no vertex %r to remove", vertex)
            vals["removed_vertices"].append((vertex, _state(graph)))
        return self.walkthrough_template.render(**vals)


def _degree(query, vertex: Any) -> Optional[int]:
    try:
        return query(vertex)
    except VertexNotFound as ex:
        logging.error("%s", ex)
        return None


def _state(graph: Graph) -> Dict[str, Any]:
    return {
        "num_vertices": graph.num_vertices(),
        "num_edges": graph.num_edges(),
        "vertices": graph.vertices(),
    }
