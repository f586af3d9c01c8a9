import io
import json
import os
import tempfile
import unittest
from pathlib import Path
from routemap.build import Html, Json, Options, Text, builders, unique_slugs
from routemap.graph import DirectedGraph
from routemap.loader import RouteMap

def sample():
    graph = DirectedGraph(3)
    graph.add_edge(0, 1)
    graph.add_edge(0, 1)
    graph.add_edge(2, 2)
    return RouteMap(["New York", "Erie", "<Pittsburgh>"], graph)

class TestBuilders(unittest.TestCase):
    def test_registry(self):
        self.assertEqual(sorted(builders), ["html", "json", "text"])

    def test_text(self):
        out = io.StringIO()
        labels, graph = sample()
        Text()._build(labels, graph, out)
        self.assertEqual(out.getvalue(),
                         "New York: \nErie \nErie \n\nErie: \n\n"
                         "<Pittsburgh>: \n<Pittsburgh> \n\n")

    def test_json(self):
        doc = Json.document(*sample())
        self.assertEqual(doc["edges"], 3)
        self.assertEqual(doc["vertices"][0],
                         {"id": 0, "label": "New York", "routes": [1, 1]})
        self.assertEqual(doc["vertices"][1]["routes"], [])

    def test_html(self):
        out = io.StringIO()
        labels, graph = sample()
        Html(Options(title="Test routes"))._build(labels, graph, out)
        page = out.getvalue()
        self.assertIn("<title>Test routes</title>", page)
        self.assertIn('<section id="new-york">', page)
        self.assertEqual(page.count('<a href="#erie">Erie</a>'), 2)
        self.assertIn("&lt;Pittsburgh&gt;", page)
        self.assertNotIn("<Pittsburgh>", page)
        self.assertIn("No outgoing routes", page)

    def test_unique_slugs(self):
        self.assertEqual(unique_slugs(["Erie", "erie", "ERIE!", "???"]),
                         ["erie", "erie-2", "erie-3", "city-4"])

    def test_build_to_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            output = Path(tmp) / "out" / "routes.json"
            Json().build(sample(), output)
            with open(output) as f:
                doc = json.load(f)
            self.assertEqual(len(doc["vertices"]), 3)

if __name__ == '__main__':
    unittest.main()
