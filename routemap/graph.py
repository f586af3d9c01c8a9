"""Directed multigraph over integer vertices."""

from __future__ import annotations

from typing import Iterator, List, NamedTuple, Sequence

from routemap.errors import InvalidArgument


class Edge(NamedTuple):

    """A directed edge from src to dst."""

    src: int
    dst: int


class DirectedGraph:

    """A directed graph with vertices 0 through n-1.

    Each vertex has an ordered list of outgoing edges. Self-loops and parallel
    edges are allowed, and edges are kept in the order they were added. The
    number of vertices is fixed at construction.
    """

    def __init__(self, n: int):
        if isinstance(n, bool) or not isinstance(n, int):
            raise InvalidArgument(f"vertex count must be an integer, got {n!r}")
        if n < 0:
            raise InvalidArgument(f"vertex count must be nonnegative, got {n}")
        self.n = n
        self.adjacency: List[List[Edge]] = [[] for _ in range(n)]
        self.num_edges = 0

    def __repr__(self):
        return f"DirectedGraph(N={self.n}, E={self.num_edges})"

    def __len__(self) -> int:
        return self.n

    def check_vertex(self, v: int):
        """Raise InvalidArgument if v is not a vertex of this graph."""
        if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v < self.n:
            raise InvalidArgument(f"vertex {v!r} out of range [0, {self.n})")

    def add_edge(self, src: int, dst: int) -> Edge:
        """Append an edge from src to dst and return it."""
        self.check_vertex(src)
        self.check_vertex(dst)
        edge = Edge(src, dst)
        self.adjacency[src].append(edge)
        self.num_edges += 1
        return edge

    def outgoing_edges(self, v: int) -> Sequence[Edge]:
        """Return the edges leaving v in the order they were added.

        This is the graph's own list, not a copy. Callers must not modify it.
        """
        self.check_vertex(v)
        return self.adjacency[v]

    def vertex_count(self) -> int:
        return self.n

    def edge_count(self) -> int:
        return self.num_edges

    def vertices(self) -> range:
        return range(self.n)

    def edges(self) -> Iterator[Edge]:
        """Iterate over all edges, vertex by vertex."""
        for edges in self.adjacency:
            yield from edges
