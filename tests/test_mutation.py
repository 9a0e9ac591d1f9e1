"""Tests for insert, delete, find, height and depth.

Each deletion case (leaf, single child on either side, two children) is
checked against the exact shape it should leave behind, followed by a
randomized comparison against a plain set.
"""

import random
import sys
import unittest
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from searchtreelib import NodeView, Tree, UnorderableValueError


SCENARIO = [1, 7, 4, 23, 8, 9, 4, 3, 5, 7, 9, 67, 6345, 324]


def assert_search_tree(test: unittest.TestCase, tree: Tree) -> None:
    """Inorder must be strictly increasing and agree with len()."""
    values = tree.inorder()
    test.assertEqual(len(values), len(tree))
    for smaller, larger in zip(values, values[1:]):
        test.assertLess(smaller, larger)


class TestInsert(unittest.TestCase):
    """Test insertion."""

    def test_insert_then_find(self):
        tree = Tree(SCENARIO)

        self.assertTrue(tree.insert(33))

        view = tree.find(33)
        self.assertIsNotNone(view)
        self.assertEqual(view.value, 33)
        self.assertTrue(view.is_leaf())
        # 33 lands to the right of 23
        self.assertEqual(tree.find(23).right, 33)
        assert_search_tree(self, tree)

    def test_insert_into_empty_tree(self):
        tree = Tree()

        self.assertTrue(tree.insert(5))

        self.assertEqual(tree.root, NodeView(5))
        self.assertEqual(len(tree), 1)
        self.assertEqual(tree.height(), 0)

    def test_duplicate_insert_is_noop(self):
        tree = Tree([1, 2, 3])
        before = tree.preorder()

        self.assertFalse(tree.insert(2))

        self.assertEqual(tree.preorder(), before)
        self.assertEqual(len(tree), 3)

    def test_insert_does_not_rebalance(self):
        tree = Tree()
        for value in range(1, 51):
            tree.insert(value)

        self.assertEqual(tree.height(), 49)
        self.assertFalse(tree.is_balanced())
        assert_search_tree(self, tree)

    def test_unorderable_insert_leaves_tree_unchanged(self):
        tree = Tree([1, 2, 3])

        with self.assertRaises(UnorderableValueError):
            tree.insert("x")

        self.assertEqual(tree.preorder(), [2, 1, 3])
        self.assertEqual(len(tree), 3)


class TestDelete(unittest.TestCase):
    """Test the deletion cases against a known shape.

    Tree(range(1, 8)):

            4
          /   \\
         2     6
        / \\   / \\
       1   3 5   7
    """

    def setUp(self):
        self.tree = Tree(range(1, 8))

    def test_delete_leaf(self):
        self.assertTrue(self.tree.delete(1))

        self.assertEqual(self.tree.preorder(), [4, 2, 3, 6, 5, 7])
        self.assertEqual(self.tree.find(2), NodeView(2, right=3))

    def test_delete_node_with_only_right_child(self):
        self.tree.delete(1)

        self.tree.delete(2)

        self.assertEqual(self.tree.preorder(), [4, 3, 6, 5, 7])
        self.assertEqual(self.tree.root.left, 3)

    def test_delete_node_with_only_left_child(self):
        tree = Tree([1, 2, 3, 4])  # 3 -> (2 -> 1), 4

        tree.delete(2)

        self.assertEqual(tree.preorder(), [3, 1, 4])

    def test_delete_root_with_two_children_promotes_successor(self):
        self.tree.delete(4)

        self.assertEqual(self.tree.root, NodeView(5, left=2, right=6))
        self.assertEqual(self.tree.preorder(), [5, 2, 1, 3, 6, 7])
        self.assertEqual(len(self.tree), 6)

    def test_delete_inner_node_with_two_children(self):
        self.tree.delete(6)

        self.assertEqual(self.tree.find(7), NodeView(7, left=5))
        self.assertEqual(self.tree.inorder(), [1, 2, 3, 4, 5, 7])

    def test_delete_missing_value_is_noop(self):
        before = self.tree.preorder()

        self.assertFalse(self.tree.delete(99))

        self.assertEqual(self.tree.preorder(), before)
        self.assertEqual(len(self.tree), 7)

    def test_delete_from_empty_tree(self):
        tree = Tree()

        self.assertFalse(tree.delete(1))
        self.assertIsNone(tree.root)

    def test_delete_last_node_empties_tree(self):
        tree = Tree([9])

        tree.delete(9)

        self.assertIsNone(tree.root)
        self.assertEqual(tree.height(), -1)
        self.assertEqual(len(tree), 0)

    def test_delete_everything(self):
        for value in [4, 1, 7, 2, 6, 3, 5]:
            self.assertTrue(self.tree.delete(value))
            self.assertNotIn(value, self.tree)
            assert_search_tree(self, self.tree)

        self.assertEqual(self.tree.inorder(), [])

    def test_scenario_delete_then_find(self):
        tree = Tree(SCENARIO)
        tree.insert(33)

        tree.delete(4)

        self.assertIsNone(tree.find(4))
        self.assertEqual(tree.find(5), NodeView(5, left=3, right=7))
        for value in [1, 3, 5, 7, 8, 9, 23, 33, 67, 324, 6345]:
            self.assertIsNotNone(tree.find(value), value)


class TestSearch(unittest.TestCase):
    """Test find, height, depth and friends."""

    def setUp(self):
        self.tree = Tree(SCENARIO)

    def test_find_missing_returns_none(self):
        self.assertIsNone(self.tree.find(2))
        self.assertIsNone(Tree().find(2))

    def test_find_returns_snapshot(self):
        self.assertEqual(self.tree.find(67), NodeView(67, left=23, right=6345))

    def test_height_of_located_node(self):
        self.assertEqual(self.tree.height(self.tree.find(67)), 2)
        self.assertEqual(self.tree.height(self.tree.find(23)), 1)
        self.assertEqual(self.tree.height(self.tree.find(324)), 0)
        self.assertEqual(self.tree.height(self.tree.find(8)), self.tree.height())

    def test_height_of_absent_node(self):
        self.assertEqual(self.tree.height(None), -1)
        self.assertEqual(self.tree.height(self.tree.find(2)), -1)

    def test_stale_snapshot_resolves_to_absent(self):
        view = self.tree.find(324)

        self.tree.delete(324)

        self.assertEqual(self.tree.height(view), -1)
        self.assertIsNone(self.tree.depth(view))

    def test_height_rejects_live_nodes_and_raw_values(self):
        with self.assertRaises(TypeError):
            self.tree.height(67)

    def test_depth(self):
        self.assertEqual(self.tree.depth(self.tree.root), 0)
        self.assertEqual(self.tree.depth(self.tree.find(67)), 1)
        self.assertEqual(self.tree.depth(self.tree.find(324)), 3)
        self.assertIsNone(self.tree.depth(None))

    def test_min_max(self):
        self.assertEqual(self.tree.min(), 1)
        self.assertEqual(self.tree.max(), 6345)
        self.assertIsNone(Tree().min())
        self.assertIsNone(Tree().max())

    def test_contains(self):
        self.assertIn(23, self.tree)
        self.assertNotIn(24, self.tree)

    def test_iter_is_ascending(self):
        self.assertEqual(list(self.tree), self.tree.inorder())

    def test_repr(self):
        self.assertEqual(repr(self.tree), "Tree(size=11, height=3)")


class TestRebalance(unittest.TestCase):
    """Test explicit rebalancing."""

    def test_rebalance_restores_balanced_shape(self):
        tree = Tree()
        for value in range(1, 64):
            tree.insert(value)

        tree.rebalance()

        self.assertTrue(tree.is_balanced())
        self.assertEqual(tree.height(), 5)
        self.assertEqual(tree.preorder(), Tree(range(1, 64)).preorder())
        self.assertEqual(len(tree), 63)

    def test_rebalance_empty_tree(self):
        tree = Tree()

        tree.rebalance()

        self.assertIsNone(tree.root)


class TestRandomizedOperations(unittest.TestCase):
    """Compare long random operation sequences against a set."""

    def test_matches_reference_set(self):
        rng = random.Random(1234)
        initial = [rng.randrange(200) for _ in range(60)]
        tree = Tree(initial)
        reference = set(initial)

        for _ in range(2000):
            value = rng.randrange(200)
            if rng.random() < 0.5:
                self.assertEqual(tree.insert(value), value not in reference)
                reference.add(value)
            else:
                self.assertEqual(tree.delete(value), value in reference)
                reference.discard(value)

            self.assertEqual(value in tree, value in reference)

        self.assertEqual(tree.inorder(), sorted(reference))
        self.assertEqual(sorted(tree.level_order()), sorted(reference))
        assert_search_tree(self, tree)


if __name__ == "__main__":
    unittest.main()
