"""Command-line interface."""

import logging
import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence, Tuple

from routemap.build import Options, builders
from routemap.config import RouteMapConfig
from routemap.errors import RouteMapError
from routemap.graph import DirectedGraph
from routemap.loader import GraphLoader, LoaderOptions
from routemap.logs import fatal, setup_logging
from routemap.printer import GraphPrinter
from routemap.watch import Watcher

PROMPT = "Please enter graph filename:"


def main(argv: Optional[Sequence[str]] = None):
    parser, commands = get_parser()
    args = parser.parse_args(argv)
    if args.command == "help":
        if args.help_target:
            commands[args.help_target].print_help()
        else:
            parser.print_help()
        return

    log_level = logging.WARNING
    if args.verbose and args.verbose == 1:
        log_level = logging.INFO
    elif args.verbose and args.verbose >= 2:
        log_level = logging.DEBUG
    setup_logging(sys.stderr, log_level, logging.FATAL)

    command = globals()[f"command_{args.command}"]
    assert command, "unexpected command name"
    try:
        command(args)
    except RouteMapError as ex:
        fatal("%s", ex)


def get_parser() -> Tuple[ArgumentParser, Mapping[str, ArgumentParser]]:
    parser = ArgumentParser(
        prog="routemap", description="tool for listing airline route maps"
    )
    commands = parser.add_subparsers(metavar="command", dest="command", required=True)

    parser_help = commands.add_parser("help", help="show this help message and exit")
    parser_help.add_argument(
        metavar="command",
        dest="help_target",
        nargs="?",
        help="get help for a specific command",
    )

    parser_print = commands.add_parser("print", help="print the route listing")
    parser_print.add_argument(
        "file", nargs="?", help="route file (prompts for it if omitted)"
    )

    parser_build = commands.add_parser("build", help="write the routes in a format")
    parser_build.add_argument("builder", choices=builders.keys(), help="build target")
    parser_build.add_argument("file", help="route file")
    parser_build.add_argument(
        "-o", "--output", type=Path, help="output file (default: stdout)"
    )

    parser_info = commands.add_parser("info", help="show route map statistics")
    parser_info.add_argument("file", help="route file")

    parser_watch = commands.add_parser("watch", help="rebuild when the file changes")
    parser_watch.add_argument("file", help="route file")
    parser_watch.add_argument(
        "-b",
        "--builder",
        choices=builders.keys(),
        default="text",
        help="build target (default: text)",
    )
    parser_watch.add_argument(
        "-o", "--output", type=Path, help="output file (default: stdout)"
    )

    for subparser in [parser_print, parser_build, parser_info, parser_watch]:
        subparser.add_argument(
            "-c", "--config", type=Path, help="configuration file (routemap.yml)"
        )
        subparser.add_argument(
            "-v",
            "--verbose",
            action="count",
            help="increase logging (can use multiple times)",
        )

    return parser, commands.choices


def get_config(args: Namespace) -> RouteMapConfig:
    try:
        return RouteMapConfig.find(args.config)
    except OSError as ex:
        fatal("cannot read %s: %s", args.config, ex.strerror or ex)


def get_loader(cfg: RouteMapConfig) -> GraphLoader:
    return GraphLoader(LoaderOptions.from_config(cfg))


def prompt_filename() -> str:
    print(PROMPT)
    try:
        return input()
    except EOFError:
        fatal("no filename given")


def command_print(args: Namespace):
    loader = get_loader(get_config(args))
    path = args.file or prompt_filename()
    labels, graph = loader.load_file(path)
    logging.info("loaded %s", path)
    GraphPrinter(sys.stdout).print(labels, graph)


def command_build(args: Namespace):
    cfg = get_config(args)
    route_map = get_loader(cfg).load_file(args.file)
    logging.info("loaded %s", args.file)
    builder = builders[args.builder](Options(title=cfg["title"]))
    try:
        builder.build(route_map, args.output)
    except OSError as ex:
        fatal("cannot write %s: %s", args.output, ex.strerror or ex)


def command_watch(args: Namespace):
    cfg = get_config(args)
    builder = builders[args.builder](Options(title=cfg["title"]))
    Watcher(Path(args.file), get_loader(cfg), builder, args.output).run()


def command_info(args: Namespace):
    labels, graph = get_loader(get_config(args)).load_file(args.file)
    printer = InfoPrinter()
    printer.topic(args.file)
    for name, value in statistics(graph):
        printer.item(f"{name}: {value}")
    isolated = [labels[v] for v in graph.vertices() if not graph.outgoing_edges(v)]
    if isolated:
        printer.heading("No outgoing routes")
        for label in isolated:
            printer.item(label)


def statistics(graph: DirectedGraph) -> List[Tuple[str, int]]:
    """Return summary counts for a graph, in display order."""
    pairs = [(edge.src, edge.dst) for edge in graph.edges()]
    return [
        ("cities", graph.vertex_count()),
        ("routes", graph.edge_count()),
        ("self-loops", sum(1 for src, dst in pairs if src == dst)),
        ("duplicate routes", len(pairs) - len(set(pairs))),
    ]


class InfoPrinter:

    """Helper class for implementing command_info."""

    def __init__(self):
        self.first = True

    def topic(self, s: Any):
        if not self.first:
            print()
        self.first = False
        print(s)

    def heading(self, s: Any):
        print(f"\n    {s}:")

    def item(self, s: Any):
        print(f"    {s}")
