"""Unit tests for the traversal iterators.

Checks the three traversal orders, the has_next()/next() contract, the
Python iterator protocol and the create_iterator factory.
"""

import unittest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from wordtreelib import (
    BSTree,
    InorderIterator,
    PreorderIterator,
    PostorderIterator,
    IteratorExhaustedError,
    TraversalOrder,
    create_iterator,
)


SAMPLE = [5, 3, 8, 1, 4, 7, 9]


def drain(iterator):
    """Collect values using the explicit has_next()/next() protocol."""
    values = []
    while iterator.has_next():
        values.append(iterator.next())
    return values


class TestTraversalOrders(unittest.TestCase):
    """Test the order each iterator produces."""

    def setUp(self):
        self.tree = BSTree.from_iterable(SAMPLE)

    def test_inorder(self):
        self.assertEqual(drain(self.tree.inorder_iterator()), [1, 3, 4, 5, 7, 8, 9])

    def test_preorder(self):
        self.assertEqual(drain(self.tree.preorder_iterator()), [5, 3, 1, 4, 8, 7, 9])

    def test_postorder(self):
        self.assertEqual(drain(self.tree.postorder_iterator()), [1, 4, 3, 7, 9, 8, 5])

    def test_postorder_right_leaning_chain(self):
        """Every node has only a right child: children come out first."""
        tree = BSTree.from_iterable([1, 2, 3, 4])
        self.assertEqual(drain(tree.postorder_iterator()), [4, 3, 2, 1])

    def test_postorder_left_leaning_chain(self):
        tree = BSTree.from_iterable([4, 3, 2, 1])
        self.assertEqual(drain(tree.postorder_iterator()), [1, 2, 3, 4])

    def test_postorder_zigzag(self):
        # 10 -> left 2 -> right 6 -> left 4 -> right 5
        tree = BSTree.from_iterable([10, 2, 6, 4, 5])
        self.assertEqual(drain(tree.postorder_iterator()), [5, 4, 6, 2, 10])

    def test_preorder_chain(self):
        tree = BSTree.from_iterable([1, 2, 3])
        self.assertEqual(drain(tree.preorder_iterator()), [1, 2, 3])

    def test_single_node(self):
        tree = BSTree.from_iterable([42])
        for iterator in (tree.inorder_iterator(),
                         tree.preorder_iterator(),
                         tree.postorder_iterator()):
            self.assertEqual(drain(iterator), [42])

    def test_empty_tree(self):
        tree = BSTree()
        for iterator in (tree.inorder_iterator(),
                         tree.preorder_iterator(),
                         tree.postorder_iterator()):
            self.assertFalse(iterator.has_next())
            self.assertEqual(list(iterator), [])


class TestExhaustion(unittest.TestCase):
    """Test behaviour past the last element."""

    def test_next_after_last_raises(self):
        tree = BSTree.from_iterable([2, 1, 3])
        for factory in (tree.inorder_iterator,
                        tree.preorder_iterator,
                        tree.postorder_iterator):
            iterator = factory()
            drain(iterator)
            self.assertFalse(iterator.has_next())
            with self.assertRaises(IteratorExhaustedError):
                iterator.next()

    def test_exhausted_iterator_stays_exhausted(self):
        tree = BSTree.from_iterable([1])
        iterator = tree.inorder_iterator()
        iterator.next()
        for _ in range(3):
            self.assertFalse(iterator.has_next())
            with self.assertRaises(IteratorExhaustedError):
                iterator.next()

    def test_next_on_empty_tree_raises(self):
        with self.assertRaises(IteratorExhaustedError):
            BSTree().postorder_iterator().next()

    def test_python_protocol_raises_stop_iteration(self):
        iterator = BSTree().inorder_iterator()
        with self.assertRaises(StopIteration):
            next(iterator)


class TestIteratorIndependence(unittest.TestCase):

    def test_iterators_do_not_share_state(self):
        tree = BSTree.from_iterable(SAMPLE)
        first = tree.inorder_iterator()
        second = tree.inorder_iterator()

        self.assertEqual([first.next(), first.next()], [1, 3])
        self.assertEqual(second.next(), 1)
        self.assertEqual(first.next(), 4)

    def test_mixing_next_and_python_iteration(self):
        tree = BSTree.from_iterable(SAMPLE)
        iterator = tree.preorder_iterator()
        head = iterator.next()
        self.assertEqual([head] + list(iterator), [5, 3, 1, 4, 8, 7, 9])

    def test_tree_iter_is_inorder(self):
        tree = BSTree.from_iterable(SAMPLE)
        self.assertEqual(list(tree), sorted(SAMPLE))
        self.assertIsInstance(iter(tree), InorderIterator)


class TestCreateIterator(unittest.TestCase):
    """Test the create_iterator factory and BSTree.iterator()."""

    def setUp(self):
        self.tree = BSTree.from_iterable(SAMPLE)

    def test_by_enum(self):
        self.assertIsInstance(create_iterator(TraversalOrder.IN_ORDER, self.tree), InorderIterator)
        self.assertIsInstance(create_iterator(TraversalOrder.PRE_ORDER, self.tree), PreorderIterator)
        self.assertIsInstance(create_iterator(TraversalOrder.POST_ORDER, self.tree), PostorderIterator)

    def test_by_name(self):
        for name in ("postorder", "post_order", "POST-ORDER", "PostOrder"):
            self.assertEqual(list(self.tree.iterator(name)), [1, 4, 3, 7, 9, 8, 5])

    def test_unknown_name_raises(self):
        with self.assertRaises(ValueError) as ctx:
            create_iterator("levelorder", self.tree)
        self.assertIn("inorder", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
