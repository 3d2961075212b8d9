"""SumInLeavesVisitor: sums the values stored in leaf nodes."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tree_visitors.tree.nodes import TreeNode

__all__ = ["SumInLeavesVisitor"]


class SumInLeavesVisitor:
    """Accumulates ``value`` over leaf visits; internal nodes are ignored.

    ``result()`` is 0 before any leaf has been visited.
    """

    def __init__(self) -> None:
        self._total = 0

    def visit_internal(self, node: TreeNode) -> None:
        pass

    def visit_leaf(self, node: TreeNode) -> None:
        self._total += node.value

    def result(self) -> int:
        return self._total
