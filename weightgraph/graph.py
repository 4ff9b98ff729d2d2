"""Generic directed weighted graph structure."""

from __future__ import annotations

import logging
import sys
from typing import (
    Any,
    Dict,
    Generic,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    TextIO,
    Tuple,
    TypeVar,
)


T = TypeVar("T")


class VertexNotFound(KeyError):

    """Raised when a degree query names a vertex that is not in the graph."""

    def __init__(self, vertex: Any):
        super().__init__(vertex)
        self.vertex = vertex

    def __str__(self) -> str:
        return f"vertex not in graph: {self.vertex!r}"


class Graph(Generic[T]):

    """A directed graph with a float weight on every edge.

    Vertices are objects of type T. They must be hashable and comparable with
    each other, since everything the graph hands out (vertex lists, adjacency
    lists, the dump) is in ascending order. There is at most one edge per
    ordered pair of vertices. Adding an edge adds its endpoints as vertices,
    and removing a vertex removes every edge that touches it.
    """

    def __init__(self):
        self._adj: Dict[T, Dict[T, float]] = {}

    @classmethod
    def from_edges(cls, edges: Iterable[Tuple[T, T, float]]) -> Graph[T]:
        """Build a graph from (src, dst, weight) triples."""
        graph: Graph[T] = cls()
        for src, dst, weight in edges:
            graph.add_edge(src, dst, weight)
        return graph

    def __repr__(self) -> str:
        return f"Graph(V={self.num_vertices()}, E={self.num_edges()})"

    def __len__(self) -> int:
        return len(self._adj)

    def __iter__(self) -> Iterator[T]:
        return iter(self.vertices())

    def __contains__(self, vertex: object) -> bool:
        return self.has_vertex(vertex)  # type: ignore[arg-type]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._adj == other._adj

    def __copy__(self) -> Graph[T]:
        return self.copy()

    def copy(self) -> Graph[T]:
        """Return an independent copy of the graph.

        Every per-vertex edge mapping is copied as well, so mutating the copy
        never affects this graph.
        """
        other: Graph[T] = self.__class__()
        other._adj = {v: dict(edges) for v, edges in self._adj.items()}
        return other

    @property
    def adjacency(self) -> Dict[T, Dict[T, float]]:
        """Ordered snapshot of vertex -> (neighbor -> weight)."""
        return {
            v: {u: self._adj[v][u] for u in sorted(self._adj[v])}
            for v in sorted(self._adj)
        }

    def set_adjacency(self, adjacency: Mapping[T, Mapping[T, float]]):
        """Replace the whole graph with the given vertex -> (neighbor -> weight).

        Neighbors that are not keys of the mapping become vertices too.
        """
        adj: Dict[T, Dict[T, float]] = {}
        for vertex, edges in adjacency.items():
            _check_vertex(vertex)
            adj[vertex] = {}
            for neighbor, weight in edges.items():
                _check_vertex(neighbor)
                adj[vertex][neighbor] = float(weight)
        for edges in list(adj.values()):
            for neighbor in edges:
                adj.setdefault(neighbor, {})
        self._adj = adj
        logging.debug("replaced adjacency: %r", self)

    def dump(self, out: TextIO = sys.stdout):
        """Dump a textual representation of this graph to out."""
        for vertex in self.vertices():
            edges = self._adj[vertex]
            targets = ", ".join(f"{u} ({edges[u]})" for u in sorted(edges))
            line = f"{vertex} -> {targets}" if targets else f"{vertex} ->"
            print(line, file=out)

    # Queries

    def has_vertex(self, vertex: T) -> bool:
        if vertex is None:
            return False
        return vertex in self._adj

    def has_edge(self, src: T, dst: T) -> bool:
        if not self.has_vertex(src) or not self.has_vertex(dst):
            return False
        return dst in self._adj[src]

    def in_degree(self, vertex: T) -> int:
        """Return the number of edges pointing to vertex.

        Raises VertexNotFound if vertex is not in the graph. This scans every
        vertex, so it is linear in the size of the vertex set.
        """
        if not self.has_vertex(vertex):
            raise VertexNotFound(vertex)
        return sum(1 for edges in self._adj.values() if vertex in edges)

    def out_degree(self, vertex: T) -> int:
        """Return the number of edges leaving vertex.

        Raises VertexNotFound if vertex is not in the graph.
        """
        if not self.has_vertex(vertex):
            raise VertexNotFound(vertex)
        return len(self._adj[vertex])

    def weight_edge(self, src: T, dst: T) -> float:
        """Return the weight of the edge src -> dst, or 0.0 if there is none.

        Use find_weight to tell a zero weight apart from a missing edge.
        """
        weight = self.find_weight(src, dst)
        return 0.0 if weight is None else weight

    def find_weight(self, src: T, dst: T) -> Optional[float]:
        """Return the weight of the edge src -> dst, or None if there is none."""
        if not self.has_edge(src, dst):
            return None
        return self._adj[src][dst]

    def adjacent_to(self, vertex: T) -> List[T]:
        """Return the targets of edges leaving vertex, in ascending order.

        Returns an empty list if vertex is not in the graph.
        """
        if not self.has_vertex(vertex):
            return []
        return sorted(self._adj[vertex])

    def vertices(self) -> List[T]:
        return sorted(self._adj)

    def edges(self) -> List[Tuple[T, T, float]]:
        """Return all edges as (src, dst, weight), ordered by src then dst."""
        return [
            (src, dst, self._adj[src][dst])
            for src in self.vertices()
            for dst in sorted(self._adj[src])
        ]

    def num_vertices(self) -> int:
        return len(self._adj)

    def num_edges(self) -> int:
        return sum(len(edges) for edges in self._adj.values())

    # Mutation

    def add_vertex(self, vertex: T) -> bool:
        """Add vertex with no edges. Returns False if it was already present."""
        _check_vertex(vertex)
        if self.has_vertex(vertex):
            return False
        self._adj[vertex] = {}
        logging.debug("added vertex %r", vertex)
        return True

    def add_edge(self, src: T, dst: T, weight: float) -> bool:
        """Add the edge src -> dst, adding either endpoint if it is missing.

        Returns False if the edge already exists. In that case the stored
        weight is left as it was. Raises ValueError for a None endpoint or a
        weight that is not a number, without changing the graph.
        """
        if self.has_edge(src, dst):
            return False
        _check_vertex(src)
        _check_vertex(dst)
        w = float(weight)
        self.add_vertex(src)
        self.add_vertex(dst)
        self._adj[src][dst] = w
        logging.debug("added edge %r -> %r (%s)", src, dst, weight)
        return True

    def remove_vertex(self, vertex: T) -> bool:
        """Remove vertex along with its outgoing and incoming edges.

        Returns False if vertex is not in the graph.
        """
        if not self.has_vertex(vertex):
            return False
        del self._adj[vertex]
        for edges in self._adj.values():
            edges.pop(vertex, None)
        logging.debug("removed vertex %r", vertex)
        return True

    def remove_edge(self, src: T, dst: T) -> bool:
        if not self.has_edge(src, dst):
            return False
        del self._adj[src][dst]
        logging.debug("removed edge %r -> %r", src, dst)
        return True


def _check_vertex(vertex: Any):
    if vertex is None:
        raise ValueError("None cannot be a vertex")
