"""Diagnostic pretty-printer for SearchTreeLib trees.

Draws a tree sideways: each node's right subtree above its line and its
left subtree below, joined by box-drawing connectors. Reading the output
top to bottom gives the values in descending order.

    │   ┌── 6
    │   │   └── 5
    └── 4
        │   ┌── 3
        └── 2
            └── 1

The tree's shape is captured in a single pre-order pass through a
collector, then drawn with an explicit stack, so rendering is linear in
the number of nodes and safe for degenerate trees.
"""

import sys
from typing import Dict, List, Optional, TextIO, Tuple

from .config import RenderConfig, TraversalOrder
from .core.collector import NodeCollector
from .core.node import Node
from .core.tree import Tree

# (node key, value, left child key, right child key)
_Shape = Tuple[int, object, Optional[int], Optional[int]]


class _ShapeCollector(NodeCollector):
    """Records each node's value and which nodes are its children.

    Nodes are keyed by identity, which is stable for the duration of a
    single traversal; values need not be hashable.
    """

    def collect(self, node: Node, depth: int) -> _Shape:
        return (
            id(node),
            node.value,
            id(node.left) if node.left is not None else None,
            id(node.right) if node.right is not None else None,
        )


def render(tree: Tree, config: Optional[RenderConfig] = None) -> str:
    """Render tree as multi-line text.

    Args:
        tree: Tree to draw
        config: Glyph style and annotations (default: unicode, no heights)

    Returns:
        The drawing, one node per line; empty string for an empty tree

    Raises:
        InvalidConfigError: If config fails validation
    """
    config = config or RenderConfig()
    config.check()

    shapes = tree.traverse(TraversalOrder.PRE_ORDER, _ShapeCollector())
    if not shapes:
        return ""

    nodes: Dict[int, _Shape] = {shape[0]: shape for shape in shapes}

    heights: Dict[int, int] = {}
    if config.show_heights:
        # Reversed pre-order puts every child before its parent
        for key, _, left, right in reversed(shapes):
            heights[key] = 1 + max(heights.get(left, -1), heights.get(right, -1))

    glyphs = config.glyphs
    pipe = glyphs.pipe + " " * (config.indent - 1)
    blank = " " * config.indent
    # Stretch or shrink each connector's dash run to fit the indent
    right_connector = glyphs.right[0] + glyphs.right[1] * (config.indent - 2) + " "
    left_connector = glyphs.left[0] + glyphs.left[1] * (config.indent - 2) + " "

    lines: List[str] = []
    # Entries: (node key, prefix, is_left, ready_to_emit)
    stack: List[Tuple[int, str, bool, bool]] = [(shapes[0][0], "", True, False)]
    while stack:
        key, prefix, is_left, ready = stack.pop()
        _, value, left, right = nodes[key]

        if ready:
            label = str(value)
            if config.show_heights:
                label += f" (h={heights[key]})"
            connector = left_connector if is_left else right_connector
            lines.append(prefix + connector + label)
            continue

        # Pushed in reverse: right subtree is drawn first, then the node, then left
        if left is not None:
            stack.append((left, prefix + (blank if is_left else pipe), True, False))
        stack.append((key, prefix, is_left, True))
        if right is not None:
            stack.append((right, prefix + (pipe if is_left else blank), False, False))

    return "\n".join(lines)


def pretty_print(tree: Tree,
                 config: Optional[RenderConfig] = None,
                 file: Optional[TextIO] = None) -> None:
    """Write the rendered tree to a stream.

    Args:
        tree: Tree to draw
        config: Glyph style and annotations
        file: Output stream (default: sys.stdout)
    """
    text = render(tree, config)
    if text:
        print(text, file=file or sys.stdout)
