"""
Unit tests for path reconstruction module.

Tests predecessor walk-back, broken-chain detection and path validation.
"""

import unittest
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from campus_nav.exceptions import PathReconstructionError, RoutingError
from campus_nav.path_reconstruction import reconstruct_path


class TestPathReconstruction(unittest.TestCase):
    """Test cases for predecessor walk-back."""

    def test_simple_path(self):
        """Test basic path reconstruction."""
        # Path: 0 -> 2 -> 4
        predecessors = {2: 0, 4: 2}
        path = reconstruct_path(predecessors, source_id=0, target_id=4)
        self.assertEqual(path, [0, 2, 4])

    def test_source_equals_target(self):
        """Test path from node to itself."""
        path = reconstruct_path({}, source_id=2, target_id=2)
        self.assertEqual(path, [2])

    def test_direct_connection(self):
        """Test direct connection (one edge)."""
        path = reconstruct_path({1: 0}, source_id=0, target_id=1)
        self.assertEqual(path, [0, 1])

    def test_long_path(self):
        """Test longer path reconstruction."""
        # Path: 0 -> 1 -> 2 -> 3 -> 4 -> 5
        predecessors = {i: i - 1 for i in range(1, 6)}
        path = reconstruct_path(predecessors, source_id=0, target_id=5)
        self.assertEqual(path, [0, 1, 2, 3, 4, 5])

    def test_string_node_ids(self):
        """Node identities only need to be hashable."""
        predecessors = {"B": "A", "C": "B"}
        self.assertEqual(reconstruct_path(predecessors, "A", "C"), ["A", "B", "C"])

    def test_missing_predecessor_raises(self):
        """A chain that stops short of the source is an internal error."""
        predecessors = {4: 2}
        with self.assertRaises(PathReconstructionError) as ctx:
            reconstruct_path(predecessors, source_id=0, target_id=4)
        self.assertIn("no predecessor", str(ctx.exception))

    def test_cycle_detection(self):
        """Test cycle detection in predecessor map."""
        # Invalid cycle: 2 -> 3 -> 2
        predecessors = {4: 2, 2: 3, 3: 2}
        with self.assertRaises(PathReconstructionError):
            reconstruct_path(predecessors, source_id=0, target_id=4)

    def test_invalid_self_loop(self):
        """Test invalid self-loop at non-source node."""
        predecessors = {2: 2}
        with self.assertRaises(PathReconstructionError):
            reconstruct_path(predecessors, source_id=0, target_id=2)

    def test_max_iterations(self):
        """Test maximum iteration limit."""
        predecessors = {i: i - 1 for i in range(1, 1000)}
        with self.assertRaises(PathReconstructionError) as ctx:
            reconstruct_path(predecessors, source_id=0, target_id=500, max_iterations=10)
        self.assertIn("maximum iterations", str(ctx.exception))

    def test_error_is_routing_error(self):
        """Reconstruction failures sit in the routing error hierarchy."""
        with self.assertRaises(RoutingError):
            reconstruct_path({}, source_id=0, target_id=1)


if __name__ == '__main__':
    unittest.main()
