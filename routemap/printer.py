"""Plain text listing of a route map's adjacency lists."""

import sys
from typing import Iterator, Sequence, TextIO

from routemap.errors import InvalidArgument
from routemap.graph import DirectedGraph


def check_labels(labels: Sequence[str], graph: DirectedGraph):
    if len(labels) != graph.vertex_count():
        raise InvalidArgument(
            f"{len(labels)} labels for a graph of {graph.vertex_count()} vertices"
        )


def render_lines(labels: Sequence[str], graph: DirectedGraph) -> Iterator[str]:
    """Yield the lines of the listing, without line terminators.

    Each city gets a header line "<city>: ", then one line "<destination> "
    per outgoing route in the order the routes were added, then a blank line.
    """
    check_labels(labels, graph)
    for v in graph.vertices():
        yield f"{labels[v]}: "
        for edge in graph.outgoing_edges(v):
            yield f"{labels[edge.dst]} "
        yield ""


def print_graph(labels: Sequence[str], graph: DirectedGraph, out: TextIO = None):
    """Write the listing to out (stdout by default)."""
    if out is None:
        out = sys.stdout
    for line in render_lines(labels, graph):
        out.write(line + "\n")


class GraphPrinter:

    """Writes listings to a fixed output stream."""

    def __init__(self, out: TextIO = None):
        self.out = out

    def print(self, labels: Sequence[str], graph: DirectedGraph):
        print_graph(labels, graph, self.out)
