from __future__ import annotations

import argparse
import logging
from typing import Any

from looseorder.graph import Graph
from looseorder.utils import data, timings

from .command import Command, Fail, register

log = logging.getLogger("edges")


@register
class Edges(Command):
    """
    Sort the nodes of a list of edges, like tsort(1) but tolerating cycles
    """

    @classmethod
    def add_subparser(cls, subparsers: "argparse._SubParsersAction[Any]") -> argparse.ArgumentParser:
        parser = super().add_subparser(subparsers)
        parser.add_argument("file", nargs="?", default="-",
                            help="file with the edges to sort (default: stdin)")
        parser.add_argument("-i", "--input-format", choices=("yaml", "json", "pairs"),
                            help="yaml or json lists of [from, to] pairs, or whitespace separated pairs"
                                 " of tokens (default: guessed from the extension, or pairs)")
        return parser

    def run(self) -> None:
        fmt = self.args.input_format or data.guess_format(self.args.file)
        if fmt == "toml":
            raise Fail(f"{self.args.file}: edges cannot be read from toml files")

        with self.open_input(self.args.file) as fd:
            try:
                edges = data.read_edges(fd, fmt)
            except ValueError as e:
                raise Fail(f"{self.args.file}: {e}")

        graph: Graph[Any] = Graph(diagnostics=self.diagnostics)
        for from_node, to_node in edges:
            # As in tsort(1), a pair of equal nodes only declares the node
            if from_node == to_node:
                graph.add_node(from_node)
            else:
                graph.add_edge(from_node, to_node)

        with timings("Sorted in %fs: %d nodes", len(graph)):
            nodes = graph.sort()
        for node in nodes:
            print(node)
        self.check_diagnostics()
