import random
from unittest import TestCase

from looseorder import graph
from looseorder.diagnostics import Diagnostics, OrderConflict


class TestGraph(TestCase):
    def setUp(self):
        self.diagnostics = Diagnostics()

    def sort(self, edges):
        return graph.sort_edges(edges, diagnostics=self.diagnostics)

    def test_simple(self):
        edges = [("a", "b"), ("b", "c"), ("c", "d"), ("d", "e")]
        self.assertEqual(self.sort(edges), ["a", "b", "c", "d", "e"])
        self.assertEqual(len(self.diagnostics), 0)

    def test_shuffled(self):
        edges = [("d", "e"), ("c", "d"), ("a", "b"), ("c", "e"), ("b", "c")]
        self.assertEqual(self.sort(edges), ["a", "b", "c", "d", "e"])
        self.assertEqual(len(self.diagnostics), 0)

    def test_cycle(self):
        edges = [("a", "b"), ("b", "c"), ("c", "d"), ("c", "b"), ("d", "e")]
        res = self.sort(edges)
        self.assertEqual(res[0], "a")
        self.assertEqual(res[4], "e")
        self.assertCountEqual(res[1:4], ["b", "c", "d"])

        conflicts = self.diagnostics.of_kind(OrderConflict)
        self.assertEqual(len(conflicts), 1)
        self.assertEqual(conflicts[0].node, "b")
        self.assertEqual(conflicts[0].dependent, "c")

    def test_underconstrained(self):
        edges = [("a", "b"), ("a", "c"), ("a", "d"), ("a", "e")]
        res = self.sort(edges)
        self.assertEqual(res[0], "a")
        self.assertCountEqual(res[1:], ["b", "c", "d", "e"])

    def test_two_node_cycle(self):
        res = self.sort([("a", "b"), ("b", "a")])
        self.assertEqual(res, ["b", "a"])
        conflicts = self.diagnostics.of_kind(OrderConflict)
        self.assertEqual([(c.node, c.dependent) for c in conflicts], [("a", "b")])

    def test_self_edge(self):
        self.assertEqual(self.sort([("a", "a")]), ["a"])
        self.assertEqual(len(self.diagnostics.of_kind(OrderConflict)), 1)

        self.diagnostics.clear()
        self.assertEqual(self.sort([("a", "b"), ("b", "b")]), ["a", "b"])
        self.assertEqual(len(self.diagnostics), 1)

    def test_duplicate_edges(self):
        g = graph.Graph([("a", "b"), ("a", "b"), ("b", "c")], diagnostics=self.diagnostics)
        self.assertEqual(g.predecessors("b"), ["a", "a"])
        self.assertEqual(g.sort(), ["a", "b", "c"])
        self.assertEqual(len(self.diagnostics), 0)

    def test_structure(self):
        g = graph.Graph(diagnostics=self.diagnostics)
        self.assertEqual(len(g), 0)
        self.assertEqual(g.sort(), [])

        g.add_edge("b", "c")
        g.add_edge("a", "c")
        g.add_node("d")
        g.add_node("a")
        self.assertEqual(list(g), ["b", "c", "a", "d"])
        self.assertEqual(len(g), 4)
        self.assertIn("d", g)
        self.assertNotIn("e", g)
        self.assertEqual(g.predecessors("b"), [])
        self.assertEqual(g.predecessors("c"), ["b", "a"])
        self.assertEqual(g.predecessors("d"), [])

        # predecessors returns a copy
        g.predecessors("c").append("x")
        self.assertEqual(g.predecessors("c"), ["b", "a"])

        self.assertEqual(g.sort(), ["b", "a", "c", "d"])

    def test_from_edges(self):
        g = graph.Graph.from_edges([(1, 2), (0, 1)], diagnostics=self.diagnostics)
        self.assertEqual(g.sort(), [0, 1, 2])

    def test_deterministic(self):
        edges = [("a", "b"), ("b", "c"), ("c", "a"), ("d", "a"), ("c", "e")]
        results = [self.sort(edges) for _ in range(20)]
        for res in results:
            self.assertEqual(res, results[0])

    def test_deep_chain(self):
        # Deeper than the default recursion limit
        size = 5000
        g = graph.Graph(diagnostics=self.diagnostics)
        for i in reversed(range(size)):
            g.add_edge(i, i + 1)
        self.assertEqual(g.sort(), list(range(size + 1)))

    def test_totality(self):
        rnd = random.Random(42)
        for _ in range(50):
            nodes = [f"n{i}" for i in range(rnd.randint(1, 20))]
            edges = [(rnd.choice(nodes), rnd.choice(nodes)) for _ in range(rnd.randint(1, 40))]
            res = self.sort(edges)
            expected = {node for edge in edges for node in edge}
            self.assertEqual(len(res), len(expected))
            self.assertEqual(set(res), expected)

    def test_acyclic_respected(self):
        rnd = random.Random(1)
        for _ in range(50):
            nodes = [f"n{i}" for i in range(rnd.randint(2, 20))]
            rnd.shuffle(nodes)
            edges = []
            for _ in range(rnd.randint(1, 40)):
                a, b = sorted(rnd.sample(range(len(nodes)), 2))
                edges.append((nodes[a], nodes[b]))
            rnd.shuffle(edges)
            res = self.sort(edges)
            pos = {node: idx for idx, node in enumerate(res)}
            for a, b in edges:
                self.assertLess(pos[a], pos[b])
        self.assertEqual(len(self.diagnostics), 0)

    def test_conflicts_logged(self):
        with self.assertLogs("graph", level="WARNING") as out:
            res = graph.sort_edges([("a", "b"), ("b", "a")])
        self.assertEqual(res, ["b", "a"])
        self.assertEqual(len(out.output), 1)
        self.assertIn("dependency loop found", out.output[0])
