"""Binary search tree built by balanced construction.

The Tree owns its root Node and implements construction, search, mutation
and traversal over the Node graph. Nodes never leave the tree: lookups
hand back immutable NodeView snapshots, traversals hand back values or
whatever a NodeCollector extracts.

Insert and delete do not rebalance. A tree built from a static set has
O(log n) height, but a long run of mutations can degrade it towards a
list; ``rebalance()`` restores the balanced shape on request.
"""

import logging
from functools import cmp_to_key
from typing import Any, Callable, Iterable, Iterator, List, Optional, Union

from ..config import TraversalOrder
from .collector import NodeCollector, ValueCollector, VisitorCollector
from .node import Node, NodeView, compare
from .traverser import (
    InOrderTraverser,
    LevelOrderTraverser,
    PostOrderTraverser,
    create_traverser,
)

logger = logging.getLogger(__name__)

# Default for height(): measure from the root
_ROOT = object()

Visitor = Callable[[Any], Any]


def sorted_unique(values: Iterable[Any]) -> List[Any]:
    """Sort values and drop duplicates.

    Only a total order is required; values need not be hashable.

    Args:
        values: Any iterable of mutually orderable values

    Returns:
        Strictly increasing list of the distinct values

    Raises:
        UnorderableValueError: If two values cannot be compared
    """
    result: List[Any] = []
    for value in sorted(values, key=cmp_to_key(compare)):
        if not result or compare(result[-1], value) != 0:
            result.append(value)
    return result


class Tree:
    """A binary search tree of distinct, orderable values.

    Args:
        values: Initial values. Duplicates are dropped and the remainder is
            arranged into a balanced shape.

    Example:
        >>> tree = Tree([1, 7, 4, 23, 8, 9, 4, 3, 5, 7, 9, 67, 6345, 324])
        >>> tree.inorder()
        [1, 3, 4, 5, 7, 8, 9, 23, 67, 324, 6345]
        >>> tree.insert(33)
        True
        >>> tree.find(33).value
        33
    """

    def __init__(self, values: Iterable[Any] = ()):
        items = sorted_unique(values)
        self._root: Optional[Node] = self._build(items, 0, len(items))
        self._size = len(items)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Built tree of %d values (height %d)", self._size, self.height())

    @classmethod
    def build(cls, values: Iterable[Any]) -> 'Tree':
        """Create a balanced tree from values."""
        return cls(values)

    # Construction

    def _build(self, items: List[Any], start: int, end: int) -> Optional[Node]:
        """Link items[start:end] into a balanced subtree.

        The centre index (upper-middle for an even count) becomes the
        subtree root; everything before it goes left, everything after it
        goes right. Each item is used exactly once.
        """
        if start >= end:
            return None

        mid = start + (end - start) // 2
        node = Node(items[mid])
        node.left = self._build(items, start, mid)
        node.right = self._build(items, mid + 1, end)
        return node

    def rebalance(self) -> None:
        """Rebuild the tree into the balanced construction shape.

        Never called implicitly by insert or delete.
        """
        items = self.inorder()
        self._root = self._build(items, 0, len(items))
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Rebalanced tree of %d values (height %d)", self._size, self.height())

    # Mutation

    def insert(self, value: Any) -> bool:
        """Insert value, keeping the search-tree ordering.

        Args:
            value: Value to add

        Returns:
            True if a node was added, False if value was already present

        Raises:
            UnorderableValueError: If value cannot be compared with the
                tree's values. The tree is left unchanged.
        """
        size = self._size
        self._root = self._insert(self._root, value)
        added = self._size != size
        logger.debug("insert(%r): %s", value, "added" if added else "duplicate, ignored")
        return added

    def _insert(self, node: Optional[Node], value: Any) -> Node:
        """Link value under node and return the subtree root.

        Walks down iteratively; only the final absent child slot is
        rewritten, so every comparison happens before any link changes.
        """
        if node is None:
            self._size += 1
            return Node(value)

        current = node
        while True:
            order = compare(value, current.value)
            if order == 0:
                return node
            child = current.left if order < 0 else current.right
            if child is None:
                break
            current = child

        if order < 0:
            current.left = Node(value)
        else:
            current.right = Node(value)
        self._size += 1
        return node

    def delete(self, value: Any) -> bool:
        """Remove value from the tree.

        A node with two children takes over its in-order successor's value,
        and the successor is removed from the right subtree instead.

        Args:
            value: Value to remove

        Returns:
            True if a node was removed, False if value was not present

        Raises:
            UnorderableValueError: If value cannot be compared with the
                tree's values. The tree is left unchanged.
        """
        size = self._size
        self._root = self._delete(self._root, value)
        removed = self._size != size
        logger.debug("delete(%r): %s", value, "removed" if removed else "not present")
        return removed

    def _delete(self, node: Optional[Node], value: Any) -> Optional[Node]:
        """Unlink value from the subtree at node and return its new root.

        Keeps the parent of the current node while walking down so the
        parent's link can be rewritten in place of a recursive relink.
        """
        parent: Optional[Node] = None
        target = node
        while target is not None:
            order = compare(value, target.value)
            if order == 0:
                break
            parent = target
            target = target.left if order < 0 else target.right

        if target is None:
            return node

        if target.left is not None and target.right is not None:
            # Copy the in-order successor up, then unlink the successor.
            # It has no left child, so it splices out like the one-child case.
            parent = target
            successor = target.right
            while successor.left is not None:
                parent = successor
                successor = successor.left
            target.value = successor.value
            target = successor

        # Zero or one child: splice the node out
        replacement = target.left if target.left is not None else target.right
        self._size -= 1
        if parent is None:
            return replacement
        if parent.left is target:
            parent.left = replacement
        else:
            parent.right = replacement
        return node

    # Search

    def _locate(self, node: Optional[Node], value: Any) -> Optional[Node]:
        while node is not None:
            order = compare(value, node.value)
            if order == 0:
                return node
            node = node.left if order < 0 else node.right
        return None

    def _resolve(self, node: Union[NodeView, None, object]) -> Optional[Node]:
        """Map a height()/depth() argument onto live storage."""
        if node is _ROOT:
            return self._root
        if node is None:
            return None
        if isinstance(node, NodeView):
            return self._locate(self._root, node.value)
        raise TypeError(
            f"Expected a NodeView from find() or None, got {type(node).__name__}"
        )

    def find(self, value: Any) -> Optional[NodeView]:
        """Look up value.

        Args:
            value: Value to search for

        Returns:
            Snapshot of the matching node, or None if value is absent
        """
        node = self._locate(self._root, value)
        return node.snapshot() if node is not None else None

    def height(self, node: Union[NodeView, None, object] = _ROOT) -> int:
        """Height of a subtree, counted in edges.

        Args:
            node: Snapshot from find() marking the subtree root, or None.
                Defaults to the tree's root.

        Returns:
            -1 for an absent subtree (or a snapshot whose value has since
            been removed), 0 for a single node
        """
        return self._height(self._resolve(node))

    def _height(self, node: Optional[Node]) -> int:
        # Deepest level reached by a breadth-first walk from node
        height = -1
        for _, depth in LevelOrderTraverser().traverse(node):
            height = depth
        return height

    def depth(self, node: Optional[NodeView]) -> Optional[int]:
        """Number of edges from the root down to node.

        Args:
            node: Snapshot from find()

        Returns:
            Depth (0 for the root), or None if the value is not in the tree
        """
        if node is None:
            return None
        if not isinstance(node, NodeView):
            raise TypeError(
                f"Expected a NodeView from find(), got {type(node).__name__}"
            )

        depth = 0
        current = self._root
        while current is not None:
            order = compare(node.value, current.value)
            if order == 0:
                return depth
            current = current.left if order < 0 else current.right
            depth += 1
        return None

    def is_balanced(self) -> bool:
        """Check that no node's subtrees differ in height by more than one."""
        # Post-order guarantees both children are measured before the parent
        heights = {}
        for node, _ in PostOrderTraverser().traverse(self._root):
            left = heights.pop(id(node.left), -1)
            right = heights.pop(id(node.right), -1)
            if abs(left - right) > 1:
                return False
            heights[id(node)] = 1 + max(left, right)
        return True

    def min(self) -> Any:
        """Smallest value, or None for an empty tree."""
        node = self._root
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node.value

    def max(self) -> Any:
        """Largest value, or None for an empty tree."""
        node = self._root
        if node is None:
            return None
        while node.right is not None:
            node = node.right
        return node.value

    @property
    def root(self) -> Optional[NodeView]:
        """Snapshot of the root node, or None for an empty tree."""
        return self._root.snapshot() if self._root is not None else None

    # Traversal

    def traverse(self,
                 order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER,
                 collector: Optional[NodeCollector] = None) -> Optional[List[Any]]:
        """Visit every node once in the given order.

        Args:
            order: TraversalOrder or its name (preorder, inorder, postorder,
                level, or an alias such as bfs)
            collector: What to take from each node (default: its value)

        Returns:
            List of collected items, or None for side-effect collectors
            such as VisitorCollector

        Raises:
            InvalidConfigError: If order is not recognized
        """
        traverser = create_traverser(order)
        if collector is None:
            collector = ValueCollector()

        results = []
        for node, depth in traverser.traverse(self._root):
            item = collector.collect(node, depth)
            if collector.keeps_results():
                results.append(item)
        return results if collector.keeps_results() else None

    def _walk(self, order: TraversalOrder, visitor: Optional[Visitor]) -> Optional[List[Any]]:
        if visitor is None:
            return self.traverse(order)
        return self.traverse(order, VisitorCollector(visitor))

    def preorder(self, visitor: Optional[Visitor] = None) -> Optional[List[Any]]:
        """Node, left subtree, right subtree.

        Returns the values as a list, or calls visitor(value) per node and
        returns None.
        """
        return self._walk(TraversalOrder.PRE_ORDER, visitor)

    def inorder(self, visitor: Optional[Visitor] = None) -> Optional[List[Any]]:
        """Left subtree, node, right subtree - ascending order."""
        return self._walk(TraversalOrder.IN_ORDER, visitor)

    def postorder(self, visitor: Optional[Visitor] = None) -> Optional[List[Any]]:
        """Left subtree, right subtree, node."""
        return self._walk(TraversalOrder.POST_ORDER, visitor)

    def level_order(self, visitor: Optional[Visitor] = None) -> Optional[List[Any]]:
        """Breadth-first, each level left to right."""
        return self._walk(TraversalOrder.LEVEL_ORDER, visitor)

    # Container protocol

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: Any) -> bool:
        return self._locate(self._root, value) is not None

    def __iter__(self) -> Iterator[Any]:
        """Iterate values in ascending order.

        The tree must not be mutated while an iterator is in use.
        """
        for node, _ in InOrderTraverser().traverse(self._root):
            yield node.value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={self._size}, height={self.height()})"
