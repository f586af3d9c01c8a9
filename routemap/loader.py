"""Parser for airline route files.

A route file looks like this:

    3
    Pittsburgh
    Philadelphia
    Erie
    1 2
    2 3
    3 1

The first line is the number of cities n, followed by exactly n lines of city
names, followed by routes given as pairs of 1-based city numbers. Anything
after the pair on a route line is ignored.
"""

import logging
from pathlib import Path
from typing import List, NamedTuple, Optional, TextIO, Union

from routemap.config import RouteMapConfig
from routemap.errors import MalformedInput, ResourceUnavailable
from routemap.graph import DirectedGraph
from routemap.scanner import Scanner, parse_int


class RouteMap(NamedTuple):

    """City labels paired with the graph of routes between them."""

    labels: List[str]
    graph: DirectedGraph


class LoaderOptions(NamedTuple):

    """Options for loading route files."""

    # Number used for the first city in route lines.
    index_base: int = 1
    # Reject route lines that name nonexistent cities.
    check_bounds: bool = True
    # Text encoding of route files.
    encoding: str = "utf-8"

    @staticmethod
    def from_config(cfg: RouteMapConfig) -> "LoaderOptions":
        return LoaderOptions(
            index_base=cfg["index_base"],
            check_bounds=cfg["check_bounds"],
            encoding=cfg["encoding"],
        )


class GraphLoader:

    """Builds a RouteMap from a route file."""

    def __init__(self, options: Optional[LoaderOptions] = None):
        self.options = options or LoaderOptions()

    def __repr__(self) -> str:
        return f"GraphLoader(options={self.options!r})"

    def load_file(self, path: Union[str, Path]) -> RouteMap:
        """Open and load the route file at path.

        The file is closed on every exit path. Failure to open or decode it is
        reported as ResourceUnavailable or MalformedInput.
        """
        source = str(path)
        try:
            f = open(path, encoding=self.options.encoding)
        except OSError as ex:
            raise ResourceUnavailable(
                f"cannot open: {ex.strerror or ex}", source
            ) from ex
        with f:
            try:
                return self.load(f, source)
            except UnicodeDecodeError as ex:
                raise MalformedInput(
                    f"not valid {self.options.encoding}: {ex.reason}", source
                ) from ex

    def load(self, stream: TextIO, source: Optional[str] = None) -> RouteMap:
        """Load a RouteMap from an open text stream.

        The caller owns the stream. Nothing is returned unless the whole
        stream was read successfully.
        """
        scanner = Scanner(stream, source)
        header = scanner.read_line()
        n = parse_int(header, source, scanner.line_number)
        graph = DirectedGraph(n)
        labels = [scanner.read_line() for _ in range(n)]
        logging.debug("%s: read %d city names", source or "<stream>", n)

        while scanner.has_next_token():
            line = scanner.line_number
            src = self.vertex(scanner.next_int(), n, scanner)
            dst = self.vertex(scanner.next_int(), n, scanner)
            scanner.skip_line()
            graph.add_edge(src, dst)
            logging.debug("line %d: route %d -> %d", line, src, dst)

        logging.debug(
            "%s: loaded %d cities and %d routes",
            source or "<stream>",
            graph.vertex_count(),
            graph.edge_count(),
        )
        return RouteMap(labels, graph)

    def vertex(self, number: int, n: int, scanner: Scanner) -> int:
        """Convert a city number from a route line to a vertex index."""
        base = self.options.index_base
        if self.options.check_bounds and not base <= number < base + n:
            raise MalformedInput(
                f"city number {number} out of range [{base}, {base + n - 1}]",
                scanner.source,
                scanner.line_number,
            )
        return number - base


def load_file(path: Union[str, Path], options: Optional[LoaderOptions] = None) -> RouteMap:
    """Load the route file at path."""
    return GraphLoader(options).load_file(path)
