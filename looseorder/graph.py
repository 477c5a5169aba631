from __future__ import annotations

import logging
from typing import Dict, Generic, Hashable, Iterable, Iterator, List, Optional, Set, Tuple, TypeVar

from .diagnostics import Diagnostics, OrderConflict

__all__ = ["Graph", "sort_edges"]

log = logging.getLogger("graph")

N = TypeVar("N", bound=Hashable)


class Graph(Generic[N]):
    """
    Graph of "must come before" relations that can always be linearized.

    Each node maps to the list of nodes that must precede it. Nodes are
    iterated in the order they were first added.
    """
    def __init__(self, edges: Iterable[Tuple[N, N]] = (), diagnostics: Optional[Diagnostics] = None):
        # Where order conflicts are reported
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics(log)
        # Predecessors of each node, in the order edges were added
        self.graph: Dict[N, List[N]] = {}
        for from_node, to_node in edges:
            self.add_edge(from_node, to_node)

    @classmethod
    def from_edges(cls, edges: Iterable[Tuple[N, N]], diagnostics: Optional[Diagnostics] = None) -> "Graph[N]":
        """
        Build a graph from a sequence of (from_node, to_node) pairs
        """
        return cls(edges, diagnostics=diagnostics)

    def __len__(self) -> int:
        return len(self.graph)

    def __contains__(self, node: N) -> bool:
        return node in self.graph

    def __iter__(self) -> Iterator[N]:
        return iter(self.graph)

    def __repr__(self):
        return "{}({})".format(self.__class__.__name__, self.graph)

    def predecessors(self, node: N) -> List[N]:
        """
        Return the nodes that must come before ``node``
        """
        return list(self.graph[node])

    def add_node(self, node: N) -> None:
        """
        Make sure ``node`` is in the graph, even if no edge mentions it
        """
        if node not in self.graph:
            self.graph[node] = []

    def add_edge(self, from_node: N, to_node: N) -> None:
        """
        Record that ``from_node`` must come before ``to_node``.

        Duplicate edges are kept, and self-edges are accepted: sort() copes
        with both.
        """
        if from_node not in self.graph:
            self.graph[from_node] = []
        if to_node in self.graph:
            self.graph[to_node].append(from_node)
        else:
            self.graph[to_node] = [from_node]

    def sort(self) -> List[N]:
        """
        Linearize the graph, with each node after its predecessors.

        If a cycle is found, the edge that closes it is ignored and an
        OrderConflict is reported: the result is then only approximately
        sorted, but it still contains every node exactly once.
        """
        graph = self.graph
        result: List[N] = []
        visited: Set[N] = set()
        # Nodes whose visit has started and not finished yet
        active: Set[N] = set()

        for root in graph:
            if root in visited:
                continue
            visited.add(root)
            active.add(root)
            stack: List[Tuple[N, Iterator[N]]] = [(root, iter(graph[root]))]
            while stack:
                node, preds = stack[-1]
                for pred in preds:
                    if pred not in visited:
                        # Mark as visited before descending, so cycles end here
                        visited.add(pred)
                        active.add(pred)
                        stack.append((pred, iter(graph[pred])))
                        break
                    if pred in active:
                        self.diagnostics.report(OrderConflict(pred, node))
                else:
                    stack.pop()
                    active.discard(node)
                    result.append(node)

        return result


def sort_edges(edges: Iterable[Tuple[N, N]], diagnostics: Optional[Diagnostics] = None) -> List[N]:
    """
    Linearize a sequence of (from_node, to_node) pairs
    """
    return Graph(edges, diagnostics=diagnostics).sort()
