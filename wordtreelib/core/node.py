"""BSTreeNode handle for WordTreeLib.

Nodes do not own their children directly. The tree stores every node in an
arena (parallel lists addressed by integer slot), and a BSTreeNode is just a
lightweight handle onto one slot. This keeps removal and re-linking down to
a couple of index assignments and avoids deep object chains.
"""

from typing import Any, Dict, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .tree import BSTree


class BSTreeNode:
    """Read-only view of a single vertex in a BSTree.

    A handle stays valid until the node it addresses is removed from the
    tree (or the tree is cleared). Using a handle after that point is
    unsupported: the slot may already hold a different value.
    """

    __slots__ = ("_tree", "_slot")

    def __init__(self, tree: "BSTree", slot: int):
        self._tree = tree
        self._slot = slot

    @property
    def slot(self) -> int:
        """Arena index of this node."""
        return self._slot

    @property
    def value(self) -> Any:
        """The element stored in this node."""
        return self._tree._values[self._slot]

    @property
    def left(self) -> Optional["BSTreeNode"]:
        """Left child, or None if absent."""
        return self._tree._node_at(self._tree._left[self._slot])

    @property
    def right(self) -> Optional["BSTreeNode"]:
        """Right child, or None if absent."""
        return self._tree._node_at(self._tree._right[self._slot])

    def has_left(self) -> bool:
        return self._tree._left[self._slot] is not None

    def has_right(self) -> bool:
        return self._tree._right[self._slot] is not None

    def is_leaf(self) -> bool:
        """Check if this node has no children.

        Returns:
            bool: True if both child slots are empty
        """
        return not self.has_left() and not self.has_right()

    def identifier(self) -> str:
        """Return a stable identifier for this node within its tree."""
        return f"slot:{self._slot}"

    def metadata(self) -> Dict[str, Any]:
        """Return lightweight structural information about this node.

        Returns:
            Dict[str, Any]: value, slot and child slot indices
        """
        return {
            "value": self.value,
            "slot": self._slot,
            "left": self._tree._left[self._slot],
            "right": self._tree._right[self._slot],
            "leaf": self.is_leaf(),
        }

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(slot={self._slot}, value={self.value!r})"

    def __eq__(self, other: object) -> bool:
        """Handles are equal if they address the same slot of the same tree."""
        if not isinstance(other, BSTreeNode):
            return NotImplemented
        return self._tree is other._tree and self._slot == other._slot

    def __hash__(self) -> int:
        return hash((id(self._tree), self._slot))
