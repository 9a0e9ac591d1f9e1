"""Configuration system for SearchTreeLib.

This module defines how users choose a traversal order and how the
diagnostic renderer draws a tree.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Union

from .errors import InvalidConfigError


class TraversalOrder(Enum):
    """Order in which a traversal visits nodes."""
    PRE_ORDER = "preorder"      # Node, then left, then right
    IN_ORDER = "inorder"        # Left, node, right (sorted output)
    POST_ORDER = "postorder"    # Left, right, then node
    LEVEL_ORDER = "level"       # Breadth-first, left to right


# Extra names accepted wherever a TraversalOrder is expected
_ORDER_ALIASES = {
    'pre': TraversalOrder.PRE_ORDER,
    'pre_order': TraversalOrder.PRE_ORDER,
    'dfs_pre': TraversalOrder.PRE_ORDER,
    'in': TraversalOrder.IN_ORDER,
    'in_order': TraversalOrder.IN_ORDER,
    'sorted': TraversalOrder.IN_ORDER,
    'post': TraversalOrder.POST_ORDER,
    'post_order': TraversalOrder.POST_ORDER,
    'dfs_post': TraversalOrder.POST_ORDER,
    'level_order': TraversalOrder.LEVEL_ORDER,
    'bfs': TraversalOrder.LEVEL_ORDER,
    'breadth_first': TraversalOrder.LEVEL_ORDER,
}


def parse_order(order: Union[TraversalOrder, str]) -> TraversalOrder:
    """Resolve a TraversalOrder or one of its string names.

    Args:
        order: TraversalOrder member, its value, or an alias like 'bfs'

    Returns:
        TraversalOrder member

    Raises:
        InvalidConfigError: If the name is not recognized
    """
    if isinstance(order, TraversalOrder):
        return order

    name = str(order).lower()
    for member in TraversalOrder:
        if member.value == name:
            return member
    if name in _ORDER_ALIASES:
        return _ORDER_ALIASES[name]

    choices = [m.value for m in TraversalOrder] + sorted(_ORDER_ALIASES)
    raise InvalidConfigError(
        f"Unknown traversal order: {order}. "
        f"Choose from: {', '.join(choices)}"
    )


class ConnectorStyle(Enum):
    """Glyph set used when drawing tree branches."""
    UNICODE = "unicode"
    ASCII = "ascii"


@dataclass(frozen=True)
class _Glyphs:
    right: str      # Connector for a right child (drawn above its parent)
    left: str       # Connector for a left child or the root
    pipe: str       # Continuation line


_GLYPHS = {
    ConnectorStyle.UNICODE: _Glyphs(right="┌──", left="└──", pipe="│"),
    ConnectorStyle.ASCII: _Glyphs(right="/--", left="\\--", pipe="|"),
}


@dataclass
class RenderConfig:
    """Configuration for the diagnostic tree renderer."""

    style: ConnectorStyle = ConnectorStyle.UNICODE
    indent: int = 4                 # Width of each nesting level
    show_heights: bool = False      # Append "(h=N)" to each node line

    @classmethod
    def ascii(cls) -> 'RenderConfig':
        """Create config drawing with plain ASCII connectors."""
        return cls(style=ConnectorStyle.ASCII)

    @classmethod
    def annotated(cls, style: ConnectorStyle = ConnectorStyle.UNICODE) -> 'RenderConfig':
        """Create config that labels every node with its subtree height.

        Args:
            style: Connector glyph set

        Returns:
            RenderConfig with heights shown
        """
        return cls(style=style, show_heights=True)

    @property
    def glyphs(self) -> _Glyphs:
        return _GLYPHS[self.style]

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.style, ConnectorStyle):
            errors.append(f"style must be a ConnectorStyle, got {self.style!r}")

        # bool is an int subclass but never a width
        if not isinstance(self.indent, int) or isinstance(self.indent, bool):
            errors.append(f"indent must be an int, got {self.indent!r}")
        elif self.indent < 2:
            # Connectors need a corner glyph plus a separating space
            errors.append("indent must be at least 2")

        return errors

    def check(self) -> None:
        """Raise if the configuration is invalid.

        Raises:
            InvalidConfigError: If validate() reports any errors
        """
        errors = self.validate()
        if errors:
            raise InvalidConfigError(
                f"Invalid render configuration: {'; '.join(errors)}"
            )
