#!/usr/bin/env python3
"""
Basic SearchTreeLib usage.

This example demonstrates:
- Building a balanced tree from unsorted values with duplicates
- Inserting, finding and deleting values
- The four traversal orders
- Drawing the tree before and after a skewing run of inserts
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from searchtreelib import RenderConfig, Tree, pretty_print


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    tree = Tree([1, 7, 4, 23, 8, 9, 4, 3, 5, 7, 9, 67, 6345, 324])
    pretty_print(tree)

    print(f"\nSize {len(tree)}, height {tree.height()}, balanced: {tree.is_balanced()}")
    print(f"  preorder:    {tree.preorder()}")
    print(f"  inorder:     {tree.inorder()}")
    print(f"  postorder:   {tree.postorder()}")
    print(f"  level order: {tree.level_order()}")

    tree.insert(33)
    print(f"\nfind(33) -> {tree.find(33)}")

    tree.delete(4)
    print(f"find(4)  -> {tree.find(4)}")
    print(f"find(5)  -> {tree.find(5)}")

    for value in range(100, 110):
        tree.insert(value)
    print(f"\nAfter ten ascending inserts: height {tree.height()}, "
          f"balanced: {tree.is_balanced()}")
    pretty_print(tree, RenderConfig.annotated())

    tree.rebalance()
    print(f"\nAfter rebalance: height {tree.height()}, balanced: {tree.is_balanced()}")
    pretty_print(tree)


if __name__ == "__main__":
    main()
