"""Tree traversal strategies for SearchTreeLib.

Traversers implement the different orders for walking a binary search
tree. Each yields ``(node, depth)`` pairs with depth relative to the
starting node, holds no state between calls, and yields nothing for an
absent subtree.

All traversers walk with an explicit stack or queue, so a degenerate,
list-shaped tree is no deeper for them than a balanced one.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple, Union

from ..config import TraversalOrder, parse_order
from .node import Node


class TreeTraverser(ABC):
    """Abstract base class for traversal strategies.

    Traversers are independent of what is collected from each node;
    that is the job of a NodeCollector.
    """

    order: TraversalOrder

    @abstractmethod
    def traverse(self, root: Optional[Node]) -> Iterator[Tuple[Node, int]]:
        """Traverse the subtree rooted at root.

        Args:
            root: Starting node, or None for an empty subtree

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass


class PreOrderTraverser(TreeTraverser):
    """Depth-first pre-order: node, then left subtree, then right subtree.

    Replaying the yielded values through ``insert`` rebuilds the same shape.
    """

    order = TraversalOrder.PRE_ORDER

    def traverse(self, root: Optional[Node]) -> Iterator[Tuple[Node, int]]:
        if root is None:
            return

        stack: List[Tuple[Node, int]] = [(root, 0)]
        while stack:
            node, depth = stack.pop()
            yield (node, depth)

            # Right pushed first so the left subtree is walked first
            if node.right is not None:
                stack.append((node.right, depth + 1))
            if node.left is not None:
                stack.append((node.left, depth + 1))


class InOrderTraverser(TreeTraverser):
    """Depth-first in-order: left subtree, node, right subtree.

    On a valid BST this yields values in ascending order.
    """

    order = TraversalOrder.IN_ORDER

    def traverse(self, root: Optional[Node]) -> Iterator[Tuple[Node, int]]:
        stack: List[Tuple[Node, int]] = []
        node, depth = root, 0

        while stack or node is not None:
            # Run down the left spine, then take the deepest pending node
            while node is not None:
                stack.append((node, depth))
                node, depth = node.left, depth + 1
            current, current_depth = stack.pop()
            yield (current, current_depth)
            node, depth = current.right, current_depth + 1


class PostOrderTraverser(TreeTraverser):
    """Depth-first post-order: left subtree, right subtree, then node.

    Children are always yielded before their parent, which makes this the
    order for bottom-up aggregation such as subtree heights.
    """

    order = TraversalOrder.POST_ORDER

    def traverse(self, root: Optional[Node]) -> Iterator[Tuple[Node, int]]:
        if root is None:
            return

        # Each entry carries whether its children have been pushed yet
        stack: List[Tuple[Node, int, bool]] = [(root, 0, False)]
        while stack:
            node, depth, expanded = stack.pop()
            if expanded:
                yield (node, depth)
                continue

            stack.append((node, depth, True))
            if node.right is not None:
                stack.append((node.right, depth + 1, False))
            if node.left is not None:
                stack.append((node.left, depth + 1, False))


class LevelOrderTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal.

    Visits all nodes at depth N, left to right, before any node at
    depth N+1.
    """

    order = TraversalOrder.LEVEL_ORDER

    def traverse(self, root: Optional[Node]) -> Iterator[Tuple[Node, int]]:
        """Traverse tree breadth-first using a FIFO queue seeded with root."""
        if root is None:
            return

        queue: Deque[Tuple[Node, int]] = deque([(root, 0)])

        while queue:
            node, depth = queue.popleft()
            yield (node, depth)

            # Left before right keeps each level in ascending order
            if node.left is not None:
                queue.append((node.left, depth + 1))
            if node.right is not None:
                queue.append((node.right, depth + 1))


_TRAVERSERS = {
    TraversalOrder.PRE_ORDER: PreOrderTraverser,
    TraversalOrder.IN_ORDER: InOrderTraverser,
    TraversalOrder.POST_ORDER: PostOrderTraverser,
    TraversalOrder.LEVEL_ORDER: LevelOrderTraverser,
}


def create_traverser(order: Union[TraversalOrder, str]) -> TreeTraverser:
    """Create a traverser instance by order.

    Args:
        order: TraversalOrder member or name (preorder, inorder, postorder,
            level, or an alias such as bfs)

    Returns:
        TreeTraverser instance

    Raises:
        InvalidConfigError: If order name is not recognized
    """
    return _TRAVERSERS[parse_order(order)]()
