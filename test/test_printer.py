import io
import unittest
from routemap.errors import InvalidArgument
from routemap.graph import DirectedGraph
from routemap.loader import GraphLoader
from routemap.printer import GraphPrinter, print_graph, render_lines

def printed(labels, graph):
    out = io.StringIO()
    print_graph(labels, graph, out)
    return out.getvalue()

class TestGraphPrinter(unittest.TestCase):
    def test_round_trip(self):
        labels, graph = GraphLoader().load(io.StringIO("3\nA\nB\nC\n1 2\n2 3\n3 1\n"))
        self.assertEqual(printed(labels, graph),
                         "A: \nB \n\nB: \nC \n\nC: \nA \n\n")

    def test_zero_neighbors(self):
        graph = DirectedGraph(2)
        graph.add_edge(1, 0)
        self.assertEqual(list(render_lines(["X", "Y"], graph)),
                         ["X: ", "", "Y: ", "X ", ""])

    def test_duplicates_and_self_loops(self):
        graph = DirectedGraph(2)
        graph.add_edge(0, 1)
        graph.add_edge(0, 0)
        graph.add_edge(0, 1)
        self.assertEqual(printed(["P", "Q"], graph),
                         "P: \nQ \nP \nQ \n\nQ: \n\n")

    def test_insertion_order(self):
        graph = DirectedGraph(3)
        graph.add_edge(0, 2)
        graph.add_edge(0, 1)
        self.assertEqual(list(render_lines(["a", "b", "c"], graph))[:3],
                         ["a: ", "c ", "b "])

    def test_empty(self):
        self.assertEqual(printed([], DirectedGraph(0)), "")

    def test_label_mismatch(self):
        out = io.StringIO()
        with self.assertRaises(InvalidArgument):
            print_graph(["A"], DirectedGraph(2), out)
        self.assertEqual(out.getvalue(), "")

    def test_printer_object(self):
        out = io.StringIO()
        GraphPrinter(out).print(["Solo"], DirectedGraph(1))
        self.assertEqual(out.getvalue(), "Solo: \n\n")

if __name__ == '__main__':
    unittest.main()
