"""Breadth-first and depth-first traversal.

The traversals (bft, dft) cover every vertex of a graph, including vertices
in separate components, by starting a search (bfs, dfs) from each vertex in
ascending order that has not been visited yet. All four are generators that
yield vertices in visit order. A whole-graph traversal shares one visited set
across its searches, so every vertex is yielded exactly once.
"""

import sys
from collections import deque
from typing import Deque, Iterable, Iterator, List, Optional, Set, TextIO, TypeVar

from weightgraph.graph import Graph

T = TypeVar("T")


def bft(graph: Graph[T]) -> Iterator[T]:
    """Breadth-first traversal of the whole graph."""
    visited: Set[T] = set()
    for vertex in graph.vertices():
        if vertex not in visited:
            yield from bfs(graph, vertex, visited)


def bfs(graph: Graph[T], start: T, visited: Optional[Set[T]] = None) -> Iterator[T]:
    """Breadth-first search from start.

    Vertices in visited are skipped, and every vertex reached is added to it.
    Neighbors are queued in ascending order, so ties within a layer follow
    the order in which they were discovered.
    """
    if visited is None:
        visited = set()
    queue: Deque[T] = deque([start])
    visited.add(start)
    while queue:
        head = queue.popleft()
        yield head
        for adjacent in graph.adjacent_to(head):
            if adjacent not in visited:
                visited.add(adjacent)
                queue.append(adjacent)


def dft(graph: Graph[T]) -> Iterator[T]:
    """Depth-first traversal of the whole graph."""
    visited: Set[T] = set()
    for vertex in graph.vertices():
        if vertex not in visited:
            yield from dfs(graph, vertex, visited)


def dfs(graph: Graph[T], start: T, visited: Optional[Set[T]] = None) -> Iterator[T]:
    """Depth-first search from start, in pre-order.

    Uses a stack of neighbor iterators instead of recursion, so long paths
    cannot exhaust the call stack. The visit order is the same as a recursive
    search that explores neighbors in ascending order.
    """
    if visited is None:
        visited = set()
    visited.add(start)
    yield start
    stack: List[Iterator[T]] = [iter(graph.adjacent_to(start))]
    while stack:
        for adjacent in stack[-1]:
            if adjacent not in visited:
                visited.add(adjacent)
                yield adjacent
                stack.append(iter(graph.adjacent_to(adjacent)))
                break
        else:
            stack.pop()


TRAVERSALS = {
    "bft": bft,
    "dft": dft,
}


def write_traversal(vertices: Iterable[T], out: TextIO = sys.stdout, separator: str = " "):
    """Write each vertex to out, followed by separator."""
    for vertex in vertices:
        out.write(f"{vertex}{separator}")
