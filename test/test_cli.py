import io
import logging
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock
from routemap.cli import PROMPT, main, statistics
from routemap.graph import DirectedGraph
from routemap.logs import ExitStreamHandler

TRIANGLE = "3\nA\nB\nC\n1 2\n2 3\n3 1\n"

class TestCli(unittest.TestCase):
    def setUp(self):
        self.dir = tempfile.TemporaryDirectory()
        self.cwd = os.getcwd()
        os.chdir(self.dir.name)

    def tearDown(self):
        os.chdir(self.cwd)
        self.dir.cleanup()
        root = logging.getLogger()
        for handler in list(root.handlers):
            if isinstance(handler, ExitStreamHandler):
                root.removeHandler(handler)

    def write(self, name, text):
        with open(name, "w") as f:
            f.write(text)
        return name

    def run_main(self, *argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            main(list(argv))
        return out.getvalue(), err.getvalue()

    def test_print(self):
        path = self.write("routes.txt", TRIANGLE)
        out, _ = self.run_main("print", path)
        self.assertEqual(out, "A: \nB \n\nB: \nC \n\nC: \nA \n\n")

    def test_print_prompts(self):
        path = self.write("routes.txt", "1\nSolo\n1 1\n")
        with mock.patch("builtins.input", return_value=path):
            out, _ = self.run_main("print")
        self.assertEqual(out, PROMPT + "\nSolo: \nSolo \n\n")

    def test_malformed_prints_nothing(self):
        path = self.write("routes.txt", "abc\nA\n")
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            with self.assertRaises(SystemExit) as cm:
                main(["print", path])
        self.assertEqual(cm.exception.code, 1)
        self.assertEqual(out.getvalue(), "")
        self.assertIn("expected an integer", err.getvalue())

    def test_missing_file(self):
        err = io.StringIO()
        with redirect_stdout(io.StringIO()), redirect_stderr(err):
            with self.assertRaises(SystemExit):
                main(["print", "nope.txt"])
        self.assertIn("nope.txt", err.getvalue())

    def test_config_file(self):
        path = self.write("routes.txt", "2\nA\nB\n0 1\n")
        self.write("routemap.yml", "index_base: 0\n")
        out, _ = self.run_main("print", path)
        self.assertEqual(out, "A: \nB \n\nB: \n\n")

    def test_build_json(self):
        path = self.write("routes.txt", TRIANGLE)
        self.run_main("build", "json", path, "-o", "out/routes.json")
        self.assertTrue(os.path.exists(os.path.join("out", "routes.json")))

    def test_build_unwritable_output(self):
        path = self.write("routes.txt", TRIANGLE)
        err = io.StringIO()
        with redirect_stdout(io.StringIO()), redirect_stderr(err):
            with self.assertRaises(SystemExit) as cm:
                main(["build", "json", path, "-o", "routes.txt/out.json"])
        self.assertEqual(cm.exception.code, 1)
        self.assertIn("cannot write", err.getvalue())

    def test_prompt_keeps_spaces(self):
        path = self.write(" spaced.txt ", "1\nSolo\n")
        with mock.patch("builtins.input", return_value=path):
            out, _ = self.run_main("print")
        self.assertEqual(out, PROMPT + "\nSolo: \n\n")

    def test_info(self):
        path = self.write("routes.txt", "3\nA\nB\nC\n1 2\n1 2\n2 2\n")
        out, _ = self.run_main("info", path)
        self.assertIn("cities: 3", out)
        self.assertIn("routes: 3", out)
        self.assertIn("self-loops: 1", out)
        self.assertIn("duplicate routes: 1", out)
        self.assertIn("No outgoing routes:\n    C", out)

    def test_statistics(self):
        graph = DirectedGraph(2)
        graph.add_edge(0, 0)
        self.assertEqual(statistics(graph), [
            ("cities", 2), ("routes", 1), ("self-loops", 1),
            ("duplicate routes", 0)])

if __name__ == '__main__':
    unittest.main()
