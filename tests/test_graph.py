"""
Unit tests for the generic weighted graph and Dijkstra search.
"""

import unittest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from campus_nav.exceptions import NotFoundError
from campus_nav.graph import Graph
from campus_nav.shortest_path import dijkstra
from campus_nav.types import Edge


class TestGraphConstruction(unittest.TestCase):
    """Test node and edge insertion."""

    def setUp(self):
        self.graph = Graph()

    def test_add_node_is_idempotent(self):
        self.graph.add_node("A")
        self.graph.add_node("A")
        self.assertEqual(self.graph.node_count(), 1)
        self.assertTrue(self.graph.has_node("A"))

    def test_add_edge_inserts_endpoints(self):
        self.graph.add_edge("A", "B", 3.0)
        self.assertTrue(self.graph.has_node("A"))
        self.assertTrue(self.graph.has_node("B"))
        self.assertTrue(self.graph.has_edge("A", "B"))
        self.assertFalse(self.graph.has_edge("B", "A"))

    def test_undirected_edge_round_trip(self):
        """Both directions exist with the same weight."""
        self.graph.add_undirected_edge(1, 2, 42.5)
        self.assertTrue(self.graph.has_edge(1, 2))
        self.assertTrue(self.graph.has_edge(2, 1))
        self.assertEqual(self.graph.edge_weight(1, 2), 42.5)
        self.assertEqual(self.graph.edge_weight(2, 1), 42.5)

    def test_multi_edges_are_kept(self):
        """Parallel edges are not deduplicated; edge_weight returns the first."""
        self.graph.add_edge("A", "B", 7.0)
        self.graph.add_edge("A", "B", 3.0)
        self.assertEqual(len(self.graph.neighbors("A")), 2)
        self.assertEqual(self.graph.edge_weight("A", "B"), 7.0)
        self.assertEqual(self.graph.edge_count(), 2)

    def test_self_loop_allowed(self):
        self.graph.add_edge("A", "A", 1.0)
        self.assertTrue(self.graph.has_edge("A", "A"))

    def test_neighbors_in_insertion_order(self):
        self.graph.add_edge("A", "C", 2.0)
        self.graph.add_edge("A", "B", 1.0)
        self.assertEqual(self.graph.neighbors("A"), [Edge("C", 2.0), Edge("B", 1.0)])

    def test_neighbors_of_missing_node_is_empty(self):
        self.assertEqual(self.graph.neighbors("missing"), [])

    def test_neighbors_returns_copy(self):
        self.graph.add_edge("A", "B", 1.0)
        self.graph.neighbors("A").append(Edge("C", 9.0))
        self.assertEqual(len(self.graph.neighbors("A")), 1)

    def test_all_nodes_in_insertion_order(self):
        for node in (3, 1, 2):
            self.graph.add_node(node)
        self.assertEqual(self.graph.all_nodes(), [3, 1, 2])

    def test_dunder_helpers(self):
        self.graph.add_undirected_edge("A", "B", 1.0)
        self.assertIn("A", self.graph)
        self.assertEqual(len(self.graph), 2)
        self.assertEqual(sorted(self.graph), ["A", "B"])


class TestGraphLookupErrors(unittest.TestCase):
    """edge_weight distinguishes a missing source from a missing edge."""

    def setUp(self):
        self.graph = Graph()
        self.graph.add_edge("A", "B", 1.0)

    def test_missing_source(self):
        with self.assertRaises(NotFoundError) as ctx:
            self.graph.edge_weight("Z", "B")
        self.assertIn("Source node", str(ctx.exception))

    def test_missing_edge(self):
        with self.assertRaises(NotFoundError) as ctx:
            self.graph.edge_weight("B", "A")
        self.assertIn("Edge", str(ctx.exception))

    def test_not_found_is_lookup_error(self):
        with self.assertRaises(LookupError):
            self.graph.edge_weight("A", "C")

    def test_has_edge_missing_source(self):
        self.assertFalse(self.graph.has_edge("Z", "A"))


class TestGraphMutation(unittest.TestCase):
    """Test removal operations."""

    def setUp(self):
        self.graph = Graph()
        self.graph.add_undirected_edge("A", "B", 1.0)
        self.graph.add_undirected_edge("B", "C", 2.0)
        self.graph.add_undirected_edge("A", "C", 5.0)

    def test_remove_node_strips_incoming_edges(self):
        self.graph.remove_node("C")
        self.assertFalse(self.graph.has_node("C"))
        self.assertFalse(self.graph.has_edge("A", "C"))
        self.assertFalse(self.graph.has_edge("B", "C"))
        self.assertTrue(self.graph.has_edge("A", "B"))

    def test_remove_missing_node_is_noop(self):
        self.graph.remove_node("Z")
        self.assertEqual(self.graph.node_count(), 3)

    def test_remove_edge_is_directed(self):
        self.graph.remove_edge("A", "B")
        self.assertFalse(self.graph.has_edge("A", "B"))
        self.assertTrue(self.graph.has_edge("B", "A"))

    def test_remove_edge_drops_parallel_edges(self):
        self.graph.add_edge("A", "B", 9.0)
        self.graph.remove_edge("A", "B")
        self.assertFalse(self.graph.has_edge("A", "B"))

    def test_clear(self):
        self.graph.clear()
        self.assertEqual(self.graph.node_count(), 0)
        self.assertEqual(self.graph.all_nodes(), [])


class TestDijkstra(unittest.TestCase):
    """Test the shortest path search directly on a Graph."""

    def setUp(self):
        self.graph = Graph()
        self.graph.add_undirected_edge("A", "B", 10.0)
        self.graph.add_undirected_edge("B", "C", 5.0)
        self.graph.add_undirected_edge("A", "C", 20.0)
        self.graph.add_node("Island")

    def test_distances(self):
        distances, predecessors = dijkstra(self.graph, "A")
        self.assertEqual(distances["A"], 0.0)
        self.assertEqual(distances["B"], 10.0)
        self.assertEqual(distances["C"], 15.0)
        self.assertEqual(predecessors["C"], "B")
        self.assertNotIn("A", predecessors)

    def test_unreachable_is_infinite(self):
        distances, predecessors = dijkstra(self.graph, "A")
        self.assertEqual(distances["Island"], float("inf"))
        self.assertNotIn("Island", predecessors)

    def test_early_termination_keeps_target_final(self):
        distances, _ = dijkstra(self.graph, "A", target="B")
        self.assertEqual(distances["B"], 10.0)

    def test_uses_cheapest_parallel_edge(self):
        self.graph.add_edge("A", "C", 1.0)
        distances, predecessors = dijkstra(self.graph, "A")
        self.assertEqual(distances["C"], 1.0)
        self.assertEqual(predecessors["C"], "A")

    def test_unknown_source(self):
        with self.assertRaises(KeyError):
            dijkstra(self.graph, "Z")

    def test_directed_edges_respected(self):
        graph = Graph()
        graph.add_edge(1, 2, 1.0)
        distances, _ = dijkstra(graph, 2)
        self.assertEqual(distances[1], float("inf"))


if __name__ == '__main__':
    unittest.main()
