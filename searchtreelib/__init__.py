"""SearchTreeLib - Balanced Binary Search Tree Library.

SearchTreeLib builds a height-balanced binary search tree from any
collection of orderable values, then supports insert, delete, search,
height and the four classic traversals.

Two equivalent styles:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Object:
    tree = Tree([5, 3, 8]); tree.insert(4); tree.inorder()

Functional:
    tree = build([5, 3, 8]); insert(tree, 4); inorder(tree)
━━━━━━━━━━━━━━━━━━━━━━━━━━

The tree is not rebalanced on insert or delete; call ``rebalance()``
explicitly when a long run of mutations has skewed it.
"""

__version__ = "0.1.0"

from .errors import SearchTreeError, UnorderableValueError, InvalidConfigError
from .config import TraversalOrder, ConnectorStyle, RenderConfig, parse_order
from .core import (
    Node,
    NodeView,
    Tree,
    TreeTraverser,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
    NodeCollector,
    ValueCollector,
    SnapshotCollector,
    DepthCollector,
    VisitorCollector,
    CustomCollector,
)
from .api import (
    build,
    insert,
    delete,
    find,
    height,
    depth,
    preorder,
    inorder,
    postorder,
    level_order,
    traverse,
)
from .render import render, pretty_print

__all__ = [
    "__version__",
    # Errors
    "SearchTreeError",
    "UnorderableValueError",
    "InvalidConfigError",
    # Config
    "TraversalOrder",
    "ConnectorStyle",
    "RenderConfig",
    "parse_order",
    # Core
    "Node",
    "NodeView",
    "Tree",
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
    # API
    "build",
    "insert",
    "delete",
    "find",
    "height",
    "depth",
    "preorder",
    "inorder",
    "postorder",
    "level_order",
    "traverse",
    # Rendering
    "render",
    "pretty_print",
]
