"""Unbalanced binary search tree for WordTreeLib.

Nodes are kept in an arena: three parallel lists (values, left, right)
addressed by integer slot, with child links stored as optional slot
indices. Slots released by removal are recycled through a free list, so
re-linking after removal never allocates.

Every operation is iterative. A degenerate (chain-shaped) tree therefore
never runs into the interpreter's recursion limit.

Ordering only relies on ``<``: ``a < b`` goes left, ``b < a`` goes right,
and neither means the values compare equal.
"""

from typing import Any, Iterable, Iterator, List, Optional, Tuple, Union

from .._common.config import TraversalOrder
from .errors import EmptyTreeError, NullArgumentError
from .node import BSTreeNode
from .traverser import (
    TreeIterator,
    InorderIterator,
    PreorderIterator,
    PostorderIterator,
    create_iterator,
)


class BSTree:
    """Plain binary search tree with a no-duplicates policy.

    Invariants:
        - every value in a node's left subtree compares less than the node,
          every value in its right subtree compares greater
        - compare-equal values are rejected, never merged
        - ``size()`` equals the number of nodes reachable from the root

    The tree is never rebalanced. Inserting sorted input yields a chain.

    Example:
        >>> tree = BSTree.from_iterable([5, 3, 8])
        >>> list(tree)
        [3, 5, 8]
    """

    def __init__(self):
        self._values: List[Any] = []
        self._left: List[Optional[int]] = []
        self._right: List[Optional[int]] = []
        self._free: List[int] = []
        self._root: Optional[int] = None
        self._size = 0

    @classmethod
    def from_iterable(cls, values: Iterable[Any]) -> "BSTree":
        """Build a tree by adding ``values`` one at a time, in order."""
        tree = cls()
        for value in values:
            tree.add(value)
        return tree

    # ─── Size and emptiness ─────────────────────────────────────────

    def is_empty(self) -> bool:
        return self._size == 0

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def clear(self) -> None:
        """Reset to an empty tree. Existing node handles become invalid."""
        self._values = []
        self._left = []
        self._right = []
        self._free = []
        self._root = None
        self._size = 0

    # ─── Structure ──────────────────────────────────────────────────

    def get_root(self) -> BSTreeNode:
        """Return the root node.

        Raises:
            EmptyTreeError: If the tree has no root
        """
        if self._root is None:
            raise EmptyTreeError("tree is empty; no root node")
        return BSTreeNode(self, self._root)

    def get_height(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 when empty)."""
        if self._root is None:
            return 0
        height = 0
        stack: List[Tuple[int, int]] = [(self._root, 1)]
        while stack:
            slot, depth = stack.pop()
            if depth > height:
                height = depth
            left, right = self._left[slot], self._right[slot]
            if left is not None:
                stack.append((left, depth + 1))
            if right is not None:
                stack.append((right, depth + 1))
        return height

    # ─── Lookup ─────────────────────────────────────────────────────

    def contains(self, value: Any) -> bool:
        """Check whether a compare-equal value is stored in the tree.

        Raises:
            NullArgumentError: If value is None
        """
        return self._find(value) is not None

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def search(self, value: Any) -> Optional[BSTreeNode]:
        """Return the node holding a compare-equal value, or None.

        Raises:
            NullArgumentError: If value is None
        """
        slot = self._find(value)
        return None if slot is None else BSTreeNode(self, slot)

    def _find(self, value: Any) -> Optional[int]:
        if value is None:
            raise NullArgumentError("cannot search for None")
        current = self._root
        while current is not None:
            stored = self._values[current]
            if value < stored:
                current = self._left[current]
            elif stored < value:
                current = self._right[current]
            else:
                return current
        return None

    # ─── Mutation ───────────────────────────────────────────────────

    def add(self, value: Any) -> bool:
        """Insert ``value`` at the first empty child slot on its search path.

        Returns:
            True if inserted, False if a compare-equal value already exists

        Raises:
            NullArgumentError: If value is None
        """
        if value is None:
            raise NullArgumentError("cannot add None to the tree")
        if self._root is None:
            self._root = self._allocate(value)
            self._size += 1
            return True

        current = self._root
        while True:
            stored = self._values[current]
            if value < stored:
                child = self._left[current]
                if child is None:
                    self._left[current] = self._allocate(value)
                    break
            elif stored < value:
                child = self._right[current]
                if child is None:
                    self._right[current] = self._allocate(value)
                    break
            else:
                return False  # no duplicates
            current = child

        self._size += 1
        return True

    def remove_min(self) -> Optional[Any]:
        """Detach the smallest value and return it (None on an empty tree)."""
        return self._remove_extreme(self._left, self._right)

    def remove_max(self) -> Optional[Any]:
        """Detach the largest value and return it (None on an empty tree)."""
        return self._remove_extreme(self._right, self._left)

    def _remove_extreme(self, toward: List[Optional[int]],
                        away: List[Optional[int]]) -> Optional[Any]:
        # The extreme node has no child in the ``toward`` direction, so at
        # most one child (on the ``away`` side) needs re-linking.
        if self._root is None:
            return None
        parent: Optional[int] = None
        current = self._root
        while toward[current] is not None:
            parent = current
            current = toward[current]

        replacement = away[current]
        if parent is None:
            self._root = replacement
        else:
            toward[parent] = replacement

        value = self._values[current]
        self._release(current)
        self._size -= 1
        return value

    def min_value(self) -> Optional[Any]:
        """Smallest value without removing it (None on an empty tree)."""
        return self._peek_extreme(self._left)

    def max_value(self) -> Optional[Any]:
        """Largest value without removing it (None on an empty tree)."""
        return self._peek_extreme(self._right)

    def _peek_extreme(self, toward: List[Optional[int]]) -> Optional[Any]:
        if self._root is None:
            return None
        current = self._root
        while toward[current] is not None:
            current = toward[current]
        return self._values[current]

    # ─── Arena management ───────────────────────────────────────────

    def _allocate(self, value: Any) -> int:
        if self._free:
            slot = self._free.pop()
            self._values[slot] = value
            self._left[slot] = None
            self._right[slot] = None
            return slot
        self._values.append(value)
        self._left.append(None)
        self._right.append(None)
        return len(self._values) - 1

    def _release(self, slot: int) -> None:
        self._values[slot] = None
        self._left[slot] = None
        self._right[slot] = None
        self._free.append(slot)

    def _node_at(self, slot: Optional[int]) -> Optional[BSTreeNode]:
        return None if slot is None else BSTreeNode(self, slot)

    # ─── Traversal ──────────────────────────────────────────────────

    def inorder_iterator(self) -> InorderIterator:
        """Values in ascending order (left, root, right)."""
        return InorderIterator(self)

    def preorder_iterator(self) -> PreorderIterator:
        """Values in root, left, right order."""
        return PreorderIterator(self)

    def postorder_iterator(self) -> PostorderIterator:
        """Values in left, right, root order."""
        return PostorderIterator(self)

    def iterator(self, order: Union[TraversalOrder, str]) -> TreeIterator:
        """Create an iterator by order name or TraversalOrder member."""
        return create_iterator(order, self)

    def __iter__(self) -> Iterator[Any]:
        return self.inorder_iterator()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={self._size}, height={self.get_height()})"
