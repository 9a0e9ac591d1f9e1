"""High-level API for SearchTreeLib.

This module provides simple, functional interfaces over the Tree class
for callers who prefer ``insert(tree, 5)`` to ``tree.insert(5)``.
"""

from typing import Any, Callable, Iterable, List, Optional, Union

from .config import TraversalOrder
from .core.collector import NodeCollector
from .core.node import NodeView
from .core.tree import _ROOT, Tree

Visitor = Callable[[Any], Any]


def build(values: Iterable[Any]) -> Tree:
    """Build a balanced tree from values.

    Args:
        values: Orderable values; duplicates are dropped

    Returns:
        New Tree

    Example:
        >>> tree = build([1, 7, 4, 23, 8, 9, 4, 3, 5, 7, 9, 67, 6345, 324])
        >>> inorder(tree)
        [1, 3, 4, 5, 7, 8, 9, 23, 67, 324, 6345]
    """
    return Tree(values)


def insert(tree: Tree, value: Any) -> None:
    """Insert value into tree in place. Duplicates are ignored."""
    tree.insert(value)


def delete(tree: Tree, value: Any) -> None:
    """Delete value from tree in place. Missing values are ignored."""
    tree.delete(value)


def find(tree: Tree, value: Any) -> Optional[NodeView]:
    """Return a snapshot of the node holding value, or None."""
    return tree.find(value)


def height(tree: Tree, node: Union[NodeView, None, object] = _ROOT) -> int:
    """Height of tree, or of the subtree at node; -1 when absent.

    Example:
        >>> tree = build([1, 2, 3])
        >>> height(tree), height(tree, find(tree, 3)), height(tree, None)
        (1, 0, -1)
    """
    return tree.height(node)


def depth(tree: Tree, node: Optional[NodeView]) -> Optional[int]:
    """Edges from the root to node, or None if node's value is absent."""
    return tree.depth(node)


def preorder(tree: Tree, visitor: Optional[Visitor] = None) -> Optional[List[Any]]:
    """Values in pre-order, or call visitor(value) per node."""
    return tree.preorder(visitor)


def inorder(tree: Tree, visitor: Optional[Visitor] = None) -> Optional[List[Any]]:
    """Values in ascending order, or call visitor(value) per node."""
    return tree.inorder(visitor)


def postorder(tree: Tree, visitor: Optional[Visitor] = None) -> Optional[List[Any]]:
    """Values in post-order, or call visitor(value) per node."""
    return tree.postorder(visitor)


def level_order(tree: Tree, visitor: Optional[Visitor] = None) -> Optional[List[Any]]:
    """Values breadth-first, or call visitor(value) per node."""
    return tree.level_order(visitor)


def traverse(tree: Tree,
             order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER,
             collector: Optional[NodeCollector] = None) -> Optional[List[Any]]:
    """Traverse tree in any order with any collector.

    Args:
        tree: Tree to walk
        order: TraversalOrder or a name such as 'preorder' or 'bfs'
        collector: What to take from each node (default: its value)

    Returns:
        Collected items, or None for side-effect collectors

    Example:
        >>> from searchtreelib import DepthCollector
        >>> traverse(build([1, 2, 3]), "bfs", DepthCollector())
        [(2, 0), (1, 1), (3, 1)]
    """
    return tree.traverse(order, collector)
