"""Command-line interface."""

import logging
import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import Mapping, Optional, Tuple

from weightgraph.defaults import sample_graph
from weightgraph.files import create_config, find_config
from weightgraph.graph import Graph
from weightgraph.logs import fatal, setup_logging, verbosity_level
from weightgraph.report import Report, ReportConfig
from weightgraph.traversal import TRAVERSALS
from weightgraph.utils import parse_weight


def main():
    parser, commands = get_parser()
    args = parser.parse_args()
    if args.command == "help":
        if args.help_target:
            commands[args.help_target].print_help()
        else:
            parser.print_help()
        return

    exit_level = logging.ERROR
    if args.keep_going:
        exit_level = logging.FATAL
    setup_logging(sys.stderr, verbosity_level(args.verbose), exit_level)

    command = globals()[f"command_{args.command}"]
    assert command, "unexpected command name"
    command(args)


def get_parser() -> Tuple[ArgumentParser, Mapping[str, ArgumentParser]]:
    parser = ArgumentParser(
        prog="wg", description="directed weighted graph demonstrations"
    )
    commands = parser.add_subparsers(metavar="command", dest="command", required=True)

    parser_help = commands.add_parser("help", help="show this help message and exit")
    parser_help.add_argument(
        metavar="command",
        dest="help_target",
        nargs="?",
        help="get help for a specific command",
    )

    parser_init = commands.add_parser(
        "init", help="write a default weightgraph.yml in the current directory"
    )
    parser_init.add_argument(
        "-c", "--config", type=Path, help="write the configuration to this path instead"
    )

    parser_demo = commands.add_parser("demo", help="walk through the sample graph")

    parser_traverse = commands.add_parser(
        "traverse", help="traverse a graph given on the command line"
    )
    parser_traverse.add_argument(
        "-e",
        "--edge",
        nargs=3,
        action="append",
        default=[],
        metavar=("SRC", "DST", "WEIGHT"),
        help="add an edge (can use multiple times)",
    )
    parser_traverse.add_argument(
        "-n",
        "--vertex",
        action="append",
        default=[],
        help="add a vertex with no edges (can use multiple times)",
    )
    parser_traverse.add_argument(
        "-o",
        "--order",
        action="append",
        choices=TRAVERSALS.keys(),
        help="traversal to print (default: from config)",
    )
    parser_traverse.add_argument(
        "-d", "--dump", action="store_true", help="also print the adjacency lists"
    )

    for subparser in [parser_demo, parser_traverse]:
        subparser.add_argument(
            "-c", "--config", type=Path, help="configuration file to use"
        )

    for subparser in [parser_init, parser_demo, parser_traverse]:
        subparser.add_argument(
            "-k",
            "--keep-going",
            action="store_true",
            help="keep going if there are errors",
        )
        subparser.add_argument(
            "-v",
            "--verbose",
            action="count",
            help="increase logging (can use multiple times)",
        )

    return parser, commands.choices


def load_config(explicit: Optional[Path]) -> ReportConfig:
    """Load and validate the configuration, falling back to defaults."""
    path = find_config(explicit)
    cfg = ReportConfig.load(path) if path else ReportConfig.empty()
    cfg.validate()
    return cfg


def command_init(args: Namespace):
    path = create_config(args.config)
    print(f"Wrote default configuration to {path}")


def command_demo(args: Namespace):
    report = Report(load_config(args.config))
    sys.stdout.write(report.walkthrough(sample_graph()))


def command_traverse(args: Namespace):
    cfg = load_config(args.config)
    if args.order:
        cfg.data = {**cfg.data, "traversals": args.order}
    graph: Graph[str] = Graph()
    for vertex in args.vertex:
        graph.add_vertex(vertex)
    for src, dst, text in args.edge:
        weight = parse_weight(text)
        if weight is None:
            fatal("invalid weight for edge %s -> %s: %r", src, dst, text)
        if not graph.add_edge(src, dst, weight):
            logging.warning("duplicate edge %s -> %s ignored", src, dst)
    logging.info("built %r", graph)
    report = Report(cfg)
    sys.stdout.write(report.traversals(graph))
    if args.dump:
        graph.dump(sys.stdout)
