#!/usr/bin/env python3
"""
Traversal orders and degenerate shapes of an unbalanced BST.

This example demonstrates:
- The three iterator orders on a small balanced tree
- How sorted input degrades the tree into a chain
- Draining a tree with remove_min()
- Indexing a text file and printing a by-occurrence report
"""

import sys
import tempfile
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from wordtreelib import BSTree, build_index, render_report


def show_orders() -> None:
    """Print every traversal order of the same tree."""
    tree = BSTree.from_iterable([5, 3, 8, 1, 4, 7, 9])

    print("Traversal orders for inserts [5, 3, 8, 1, 4, 7, 9]")
    print("-" * 50)
    print(f"  in-order:   {list(tree.inorder_iterator())}")
    print(f"  pre-order:  {list(tree.preorder_iterator())}")
    print(f"  post-order: {list(tree.postorder_iterator())}")
    print(f"  height:     {tree.get_height()}")


def show_degenerate_shape() -> None:
    """Sorted input produces a chain as tall as the tree is large."""
    shuffled = BSTree.from_iterable([50, 25, 75, 12, 37, 62, 87])
    chain = BSTree.from_iterable(sorted([50, 25, 75, 12, 37, 62, 87]))

    print("\nSame values, different insertion order")
    print("-" * 50)
    print(f"  mixed input height:  {shuffled.get_height()}")
    print(f"  sorted input height: {chain.get_height()}")

    drained = []
    while not chain.is_empty():
        drained.append(chain.remove_min())
    print(f"  drained with remove_min(): {drained}")


def show_word_index() -> None:
    """Index a throwaway text file and print a report."""
    with tempfile.TemporaryDirectory() as workdir:
        sample = Path(workdir) / "sample.txt"
        sample.write_text(
            "Hello kitty, hello world.\n"
            "The world is wide; the kitty is small.\n",
            encoding="utf-8",
        )
        index = build_index([str(sample)])

    print("\nWord index (by-occurrence)")
    print("-" * 50)
    print(render_report(index, "by-occurrence", header=True), end="")


def main() -> None:
    show_orders()
    show_degenerate_shape()
    show_word_index()


if __name__ == "__main__":
    main()
