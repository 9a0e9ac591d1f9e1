"""Core building blocks of SearchTreeLib.

This module contains the node storage, the tree itself, and the
traversal and collection strategies it is built on.
"""

from .node import Node, NodeView, compare
from .traverser import (
    TreeTraverser,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .collector import (
    NodeCollector,
    ValueCollector,
    SnapshotCollector,
    DepthCollector,
    VisitorCollector,
    CustomCollector,
)
from .tree import Tree, sorted_unique

__all__ = [
    "Node",
    "NodeView",
    "compare",
    "TreeTraverser",
    "PreOrderTraverser",
    "InOrderTraverser",
    "PostOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    "NodeCollector",
    "ValueCollector",
    "SnapshotCollector",
    "DepthCollector",
    "VisitorCollector",
    "CustomCollector",
    "Tree",
    "sorted_unique",
]
