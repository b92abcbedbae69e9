"""Core data structures for WordTreeLib.

This module contains the binary search tree, its node handle and the
traversal iterators.
"""

from .errors import (
    TreeError,
    NullArgumentError,
    EmptyTreeError,
    IteratorExhaustedError,
)
from .node import BSTreeNode
from .traverser import (
    TreeIterator,
    InorderIterator,
    PreorderIterator,
    PostorderIterator,
    create_iterator,
)
from .tree import BSTree

__all__ = [
    "TreeError",
    "NullArgumentError",
    "EmptyTreeError",
    "IteratorExhaustedError",
    "BSTreeNode",
    "BSTree",
    "TreeIterator",
    "InorderIterator",
    "PreorderIterator",
    "PostorderIterator",
    "create_iterator",
]
