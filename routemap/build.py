"""Output formats for route maps."""

import json
import logging
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, NamedTuple, Optional, Sequence, TextIO

from jinja2 import Environment, PackageLoader, select_autoescape
from slugify import slugify

from routemap.graph import DirectedGraph
from routemap.loader import RouteMap
from routemap.printer import GraphPrinter, check_labels


class Options(NamedTuple):

    """Options for building."""

    # Html: Page title.
    title: str = "Airline routes"


class Builder(ABC):

    """Abstract base class for all builders."""

    name: str

    def __init__(self, options: Optional[Options] = None):
        self.options = options or Options()

    def build(self, route_map: RouteMap, output: Optional[Path] = None):
        """Write route_map to the output file, or to stdout if it is None."""
        logging.info("building target %s", self.name)
        labels, graph = route_map
        check_labels(labels, graph)
        if output is None:
            self._build(labels, graph, sys.stdout)
            return
        output.parent.mkdir(parents=True, exist_ok=True)
        with open(output, "w", encoding="utf-8") as f:
            self._build(labels, graph, f)
        logging.info("wrote %s", output)

    @abstractmethod
    def _build(self, labels: Sequence[str], graph: DirectedGraph, out: TextIO):
        ...


class Text(Builder):

    """Builds the plain text adjacency listing."""

    name = "text"

    def _build(self, labels: Sequence[str], graph: DirectedGraph, out: TextIO):
        GraphPrinter(out).print(labels, graph)


class Json(Builder):

    """Builds a JSON document with one entry per city."""

    name = "json"

    def _build(self, labels: Sequence[str], graph: DirectedGraph, out: TextIO):
        json.dump(self.document(labels, graph), out, indent=2, ensure_ascii=False)
        out.write("\n")

    @staticmethod
    def document(labels: Sequence[str], graph: DirectedGraph) -> Dict[str, Any]:
        return {
            "vertices": [
                {
                    "id": v,
                    "label": labels[v],
                    "routes": [edge.dst for edge in graph.outgoing_edges(v)],
                }
                for v in graph.vertices()
            ],
            "edges": graph.edge_count(),
        }


def unique_slugs(labels: Sequence[str]) -> List[str]:
    """Return an HTML anchor for each label.

    Labels that slugify to the same string get "-2", "-3", etc. appended.
    """
    slugs: List[str] = []
    used = set()
    for v, label in enumerate(labels):
        base = slugify(label) or f"city-{v + 1}"
        slug = base
        count = 1
        while slug in used:
            count += 1
            slug = f"{base}-{count}"
        used.add(slug)
        slugs.append(slug)
    return slugs


class Html(Builder):

    """Builds a standalone HTML page with links between cities."""

    name = "html"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.env = Environment(
            loader=PackageLoader("routemap", "templates"),
            autoescape=select_autoescape(["html", "html.jinja"]),
        )
        self.template = self.env.get_template("routes.html.jinja")

    def _build(self, labels: Sequence[str], graph: DirectedGraph, out: TextIO):
        slugs = unique_slugs(labels)
        cities = [
            {
                "label": labels[v],
                "slug": slugs[v],
                "routes": [
                    {"label": labels[edge.dst], "slug": slugs[edge.dst]}
                    for edge in graph.outgoing_edges(v)
                ],
            }
            for v in graph.vertices()
        ]
        out.write(
            self.template.render(
                title=self.options.title,
                cities=cities,
                num_routes=graph.edge_count(),
            )
        )
        out.write("\n")


builders = {cls.name: cls for cls in [Text, Json, Html]}
