"""Data collection strategies for SearchTreeLib.

NodeCollectors define what is taken from each node during a traversal.
The same traversal can therefore produce plain values, immutable
snapshots, depth-annotated values, or drive a caller-supplied visitor.
Collectors never hand out live Node references.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Tuple

from .node import Node, NodeView


class NodeCollector(ABC):
    """Abstract base class for data collection strategies."""

    @abstractmethod
    def collect(self, node: Node, depth: int) -> Any:
        """Collect data from a node.

        Args:
            node: The node being visited
            depth: Depth of the node relative to the traversal start

        Returns:
            Collected data (type depends on collector)
        """
        pass

    def keeps_results(self) -> bool:
        """Whether the traversal should gather what collect() returns.

        Returns:
            False for collectors that act by side effect
        """
        return True


class ValueCollector(NodeCollector):
    """Collects only node values. The default for every traversal."""

    def collect(self, node: Node, depth: int) -> Any:
        return node.value


class SnapshotCollector(NodeCollector):
    """Collects an immutable NodeView of each node."""

    def collect(self, node: Node, depth: int) -> NodeView:
        return node.snapshot()


class DepthCollector(NodeCollector):
    """Collects ``(value, depth)`` pairs.

    Useful for printing a tree level by level or checking its shape.
    """

    def collect(self, node: Node, depth: int) -> Tuple[Any, int]:
        return (node.value, depth)


class VisitorCollector(NodeCollector):
    """Invokes a visitor with each node's value instead of collecting.

    Args:
        visitor: Function(value) called once per node, in traversal order
    """

    def __init__(self, visitor: Callable[[Any], Any]):
        self.visitor = visitor

    def collect(self, node: Node, depth: int) -> None:
        self.visitor(node.value)

    def keeps_results(self) -> bool:
        return False


class CustomCollector(NodeCollector):
    """Collector that uses a user-provided function.

    Allows custom data collection logic without subclassing. The function
    receives a snapshot, never the live node.
    """

    def __init__(self, collect_func: Callable[[NodeView, int], Any]):
        """Initialize with custom collection function.

        Args:
            collect_func: Function(node_view, depth) -> Any
        """
        self.collect_func = collect_func

    def collect(self, node: Node, depth: int) -> Any:
        return self.collect_func(node.snapshot(), depth)
