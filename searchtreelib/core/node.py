"""Node storage for SearchTreeLib.

The Node is intentionally kept simple - it's a value and two child links.
All ordering invariants are maintained by the Tree; a Node trusts its owner
and enforces nothing itself.
"""

from dataclasses import dataclass
from typing import Any, Optional

from ..errors import UnorderableValueError


def compare(left: Any, right: Any) -> int:
    """Three-way compare two values.

    Args:
        left: First value
        right: Second value

    Returns:
        -1 if left < right, 0 if equal, 1 if left > right

    Raises:
        UnorderableValueError: If the values have no total order between them,
            including values that neither precede nor equal each other
            (float nan, partially ordered sets)
    """
    try:
        if left < right:
            return -1
        if right < left:
            return 1
        equal = left == right
    except TypeError as e:
        raise UnorderableValueError(left, right) from e
    if not equal:
        raise UnorderableValueError(left, right)
    return 0


class Node:
    """A single node of a binary search tree.

    Value and both child links are deliberately mutable: the Tree rewrites
    links on insert/delete and overwrites ``value`` in place when promoting
    an in-order successor.
    """

    __slots__ = ("value", "left", "right")

    def __init__(self, value: Any):
        self.value = value
        self.left: Optional["Node"] = None
        self.right: Optional["Node"] = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def snapshot(self) -> "NodeView":
        """Return an immutable view of this node's current state."""
        return NodeView(
            value=self.value,
            left=self.left.value if self.left is not None else None,
            right=self.right.value if self.right is not None else None,
        )

    def __lt__(self, other: "Node") -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return compare(self.value, other.value) < 0

    def __eq__(self, other: object) -> bool:
        """Nodes compare equal when they hold equal values."""
        if not isinstance(other, Node):
            return NotImplemented
        return compare(self.value, other.value) == 0

    # Mutable, so not usable as a dict key
    __hash__ = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


@dataclass(frozen=True)
class NodeView:
    """Immutable snapshot of a node, as returned by ``Tree.find``.

    ``left`` and ``right`` hold the child *values* at the time the snapshot
    was taken (``None`` when the child is absent). A view never refers to
    live tree storage, so it stays valid data after the tree changes;
    operations that accept a view re-locate the node by ``value``.
    """

    value: Any
    left: Any = None
    right: Any = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None
