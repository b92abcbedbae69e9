"""Traversal iterators for WordTreeLib.

Each iterator is an external cursor with ``has_next()`` / ``next()`` over
the structure a BSTree had when the iterator was created. State is an
explicit stack of pending arena slots, so traversal depth is bounded by
memory rather than the call stack.

Mutating the tree while one of its iterators is in use is unsupported;
the result is unspecified.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Union, TYPE_CHECKING

from .._common.config import TraversalOrder
from .errors import IteratorExhaustedError

if TYPE_CHECKING:
    from .tree import BSTree


class TreeIterator(ABC):
    """Abstract base class for forward-only, single-pass tree cursors.

    Subclasses prime ``_stack`` in ``__init__`` and implement ``_advance``.
    Once exhausted an iterator stays exhausted.

    Also usable as a regular Python iterator:

        >>> for value in tree.preorder_iterator():
        ...     print(value)
    """

    def __init__(self, tree: "BSTree"):
        """Bind the iterator to the tree's current arena.

        Args:
            tree: Tree to walk
        """
        self._values = tree._values
        self._left = tree._left
        self._right = tree._right
        self._stack: List[int] = []

    def has_next(self) -> bool:
        """Check whether another value is available."""
        return bool(self._stack)

    def next(self) -> Any:
        """Return the next value in traversal order.

        Raises:
            IteratorExhaustedError: If no elements remain
        """
        if not self._stack:
            raise IteratorExhaustedError(
                f"{self.__class__.__name__} has no remaining elements"
            )
        return self._values[self._advance()]

    @abstractmethod
    def _advance(self) -> int:
        """Consume and return the slot of the next node (stack is non-empty)."""
        pass

    def _push_left_spine(self, slot: Optional[int]) -> None:
        while slot is not None:
            self._stack.append(slot)
            slot = self._left[slot]

    def __iter__(self) -> "TreeIterator":
        return self

    def __next__(self) -> Any:
        if not self._stack:
            raise StopIteration
        return self._values[self._advance()]


class InorderIterator(TreeIterator):
    """In-order (left, root, right) traversal. Yields ascending values."""

    def __init__(self, tree: "BSTree"):
        super().__init__(tree)
        self._push_left_spine(tree._root)

    def _advance(self) -> int:
        slot = self._stack.pop()
        self._push_left_spine(self._right[slot])
        return slot


class PreorderIterator(TreeIterator):
    """Pre-order (root, left, right) traversal."""

    def __init__(self, tree: "BSTree"):
        super().__init__(tree)
        if tree._root is not None:
            self._stack.append(tree._root)

    def _advance(self) -> int:
        slot = self._stack.pop()
        # Right goes in first so left is popped first
        right, left = self._right[slot], self._left[slot]
        if right is not None:
            self._stack.append(right)
        if left is not None:
            self._stack.append(left)
        return slot


class PostorderIterator(TreeIterator):
    """Post-order (left, right, root) traversal.

    A node is only emitted once its right subtree has been emitted. That is
    detected by comparing the right child against ``_last_visited``: the
    last node emitted before returning to a parent is always the root of the
    parent's right subtree, so no per-node visited flag is needed.
    """

    def __init__(self, tree: "BSTree"):
        super().__init__(tree)
        self._last_visited: Optional[int] = None
        self._push_left_spine(tree._root)

    def _advance(self) -> int:
        while True:
            top = self._stack[-1]
            right = self._right[top]
            if right is not None and right != self._last_visited:
                self._push_left_spine(right)
                continue
            self._stack.pop()
            self._last_visited = top
            return top


_ITERATORS = {
    TraversalOrder.IN_ORDER: InorderIterator,
    TraversalOrder.PRE_ORDER: PreorderIterator,
    TraversalOrder.POST_ORDER: PostorderIterator,
}


# Factory function for creating iterators by name
def create_iterator(order: Union[TraversalOrder, str], tree: "BSTree") -> TreeIterator:
    """Create an iterator instance by traversal order.

    Args:
        order: TraversalOrder member or name (inorder, pre_order, POSTORDER...)
        tree: Tree to walk

    Returns:
        TreeIterator positioned before the first element

    Raises:
        ValueError: If the order name is not recognized
    """
    return _ITERATORS[TraversalOrder.parse(order)](tree)
