"""Unit tests for the BSTree core.

Covers insertion with the no-duplicates policy, lookup, height, min/max
removal and the arena bookkeeping behind node handles.
"""

import unittest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from wordtreelib import (
    BSTree,
    BSTreeNode,
    EmptyTreeError,
    NullArgumentError,
    TreeError,
)


SAMPLE = [5, 3, 8, 1, 4, 7, 9]


class TestEmptyTree(unittest.TestCase):
    """Behaviour of a freshly created tree."""

    def setUp(self):
        self.tree = BSTree()

    def test_is_empty(self):
        self.assertTrue(self.tree.is_empty())
        self.assertEqual(self.tree.size(), 0)
        self.assertEqual(len(self.tree), 0)

    def test_height_is_zero(self):
        self.assertEqual(self.tree.get_height(), 0)

    def test_get_root_raises(self):
        with self.assertRaises(EmptyTreeError):
            self.tree.get_root()

    def test_empty_tree_error_is_lookup_error(self):
        """Callers catching LookupError also catch EmptyTreeError."""
        with self.assertRaises(LookupError):
            self.tree.get_root()

    def test_remove_on_empty_returns_none(self):
        """Removal on an empty tree is not an error, unlike get_root."""
        self.assertIsNone(self.tree.remove_min())
        self.assertIsNone(self.tree.remove_max())
        self.assertEqual(self.tree.size(), 0)

    def test_peek_on_empty_returns_none(self):
        self.assertIsNone(self.tree.min_value())
        self.assertIsNone(self.tree.max_value())

    def test_search_misses(self):
        self.assertIsNone(self.tree.search(1))
        self.assertFalse(self.tree.contains(1))


class TestInsertion(unittest.TestCase):
    """Test add() and the search-order invariant."""

    def test_first_value_becomes_root(self):
        tree = BSTree()
        self.assertTrue(tree.add(5))
        self.assertEqual(tree.size(), 1)
        self.assertEqual(tree.get_root().value, 5)
        self.assertTrue(tree.get_root().is_leaf())

    def test_children_are_placed_by_order(self):
        tree = BSTree.from_iterable(SAMPLE)
        root = tree.get_root()

        self.assertEqual(root.value, 5)
        self.assertEqual(root.left.value, 3)
        self.assertEqual(root.right.value, 8)
        self.assertEqual(root.left.left.value, 1)
        self.assertEqual(root.left.right.value, 4)
        self.assertEqual(root.right.left.value, 7)
        self.assertEqual(root.right.right.value, 9)
        self.assertIsNone(root.left.left.left)

    def test_duplicate_is_rejected(self):
        tree = BSTree.from_iterable(SAMPLE)
        before = list(tree)

        self.assertFalse(tree.add(4))
        self.assertFalse(tree.add(5))

        self.assertEqual(tree.size(), len(SAMPLE))
        self.assertEqual(list(tree), before)
        self.assertTrue(tree.contains(4))

    def test_add_none_raises(self):
        tree = BSTree()
        with self.assertRaises(NullArgumentError):
            tree.add(None)
        self.assertEqual(tree.size(), 0)

    def test_null_argument_error_hierarchy(self):
        self.assertTrue(issubclass(NullArgumentError, TreeError))
        self.assertTrue(issubclass(NullArgumentError, ValueError))

    def test_strings_are_ordered_lexicographically(self):
        tree = BSTree.from_iterable(["pear", "apple", "zebra", "mango"])
        self.assertEqual(list(tree), ["apple", "mango", "pear", "zebra"])


class TestLookup(unittest.TestCase):
    """Test search() and contains()."""

    def setUp(self):
        self.tree = BSTree.from_iterable(SAMPLE)

    def test_contains_every_inserted_value(self):
        for value in SAMPLE:
            self.assertTrue(self.tree.contains(value))
            self.assertIn(value, self.tree)

    def test_missing_values(self):
        for value in (0, 2, 6, 10):
            self.assertFalse(self.tree.contains(value))
            self.assertIsNone(self.tree.search(value))

    def test_search_returns_node_handle(self):
        node = self.tree.search(8)
        self.assertIsInstance(node, BSTreeNode)
        self.assertEqual(node.value, 8)
        self.assertEqual(node.left.value, 7)
        self.assertEqual(node.right.value, 9)

    def test_search_none_raises(self):
        with self.assertRaises(NullArgumentError):
            self.tree.search(None)
        with self.assertRaises(NullArgumentError):
            self.tree.contains(None)

    def test_handles_for_same_slot_are_equal(self):
        self.assertEqual(self.tree.search(3), self.tree.get_root().left)
        self.assertNotEqual(self.tree.search(3), self.tree.search(4))
        self.assertEqual(len({self.tree.search(3), self.tree.get_root().left}), 1)


class TestHeight(unittest.TestCase):
    """Test get_height() on balanced and degenerate shapes."""

    def test_single_node(self):
        self.assertEqual(BSTree.from_iterable([5]).get_height(), 1)

    def test_decreasing_chain(self):
        tree = BSTree()
        tree.add(5)
        tree.add(3)
        tree.add(1)
        self.assertEqual(tree.get_height(), 3)

    def test_balanced_sample(self):
        self.assertEqual(BSTree.from_iterable(SAMPLE).get_height(), 3)

    def test_long_chain_does_not_hit_recursion_limit(self):
        count = sys.getrecursionlimit() * 3
        tree = BSTree.from_iterable(range(count))

        self.assertEqual(tree.get_height(), count)
        self.assertTrue(tree.contains(count - 1))
        self.assertEqual(tree.max_value(), count - 1)
        self.assertEqual(sum(1 for _ in tree.postorder_iterator()), count)


class TestRemoval(unittest.TestCase):
    """Test remove_min() and remove_max()."""

    def test_remove_min_returns_smallest(self):
        tree = BSTree.from_iterable(SAMPLE)
        self.assertEqual(tree.remove_min(), 1)
        self.assertFalse(tree.contains(1))
        self.assertEqual(tree.size(), len(SAMPLE) - 1)

    def test_remove_max_returns_largest(self):
        tree = BSTree.from_iterable(SAMPLE)
        self.assertEqual(tree.remove_max(), 9)
        self.assertFalse(tree.contains(9))
        self.assertEqual(tree.size(), len(SAMPLE) - 1)

    def test_remove_min_drains_ascending(self):
        tree = BSTree.from_iterable(SAMPLE)
        drained = []
        while not tree.is_empty():
            drained.append(tree.remove_min())
        self.assertEqual(drained, sorted(SAMPLE))
        self.assertIsNone(tree.remove_min())

    def test_remove_max_drains_descending(self):
        tree = BSTree.from_iterable(SAMPLE)
        drained = [tree.remove_max() for _ in range(len(SAMPLE))]
        self.assertEqual(drained, sorted(SAMPLE, reverse=True))
        self.assertTrue(tree.is_empty())

    def test_removing_root_with_right_child_promotes_it(self):
        tree = BSTree.from_iterable([1, 3, 2, 4])
        self.assertEqual(tree.remove_min(), 1)
        self.assertEqual(tree.get_root().value, 3)
        self.assertEqual(list(tree), [2, 3, 4])

    def test_min_with_right_subtree_is_relinked(self):
        # 1 has a right child (2); removing 1 must hang 2 under 5
        tree = BSTree.from_iterable([5, 1, 2, 8])
        self.assertEqual(tree.remove_min(), 1)
        self.assertEqual(tree.get_root().left.value, 2)
        self.assertEqual(list(tree), [2, 5, 8])

    def test_max_with_left_subtree_is_relinked(self):
        tree = BSTree.from_iterable([5, 9, 7, 1])
        self.assertEqual(tree.remove_max(), 9)
        self.assertEqual(tree.get_root().right.value, 7)
        self.assertEqual(list(tree), [1, 5, 7])

    def test_freed_slots_are_reused(self):
        tree = BSTree.from_iterable(SAMPLE)
        tree.remove_min()
        tree.remove_max()
        arena_size = len(tree._values)

        tree.add(0)
        tree.add(10)

        self.assertEqual(len(tree._values), arena_size)
        self.assertEqual(list(tree), [0, 3, 4, 5, 7, 8, 10])

    def test_peek_does_not_remove(self):
        tree = BSTree.from_iterable(SAMPLE)
        self.assertEqual(tree.min_value(), 1)
        self.assertEqual(tree.max_value(), 9)
        self.assertEqual(tree.size(), len(SAMPLE))


class TestClear(unittest.TestCase):

    def test_clear_resets_everything(self):
        tree = BSTree.from_iterable(SAMPLE)
        tree.clear()

        self.assertTrue(tree.is_empty())
        self.assertEqual(tree.get_height(), 0)
        self.assertEqual(list(tree), [])
        with self.assertRaises(EmptyTreeError):
            tree.get_root()

    def test_tree_is_usable_after_clear(self):
        tree = BSTree.from_iterable(SAMPLE)
        tree.clear()
        self.assertTrue(tree.add(42))
        self.assertEqual(tree.get_root().value, 42)
        self.assertEqual(tree.size(), 1)


class TestNodeHandle(unittest.TestCase):

    def test_metadata(self):
        tree = BSTree.from_iterable([5, 3])
        meta = tree.get_root().metadata()
        self.assertEqual(meta["value"], 5)
        self.assertFalse(meta["leaf"])
        self.assertIsNotNone(meta["left"])
        self.assertIsNone(meta["right"])

    def test_identifier_and_repr(self):
        node = BSTree.from_iterable([5]).get_root()
        self.assertEqual(node.identifier(), f"slot:{node.slot}")
        self.assertIn("value=5", repr(node))
        self.assertEqual(str(node), "5")


if __name__ == "__main__":
    unittest.main()
