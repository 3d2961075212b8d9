"""Pre-order traversal engine that dispatches each node to a visitor.

The walk visits a node before its children and the children in attachment
order, depth-first.  It uses an explicit stack rather than recursion so a
chain of nodes deeper than the interpreter's recursion limit is walked in
exactly the same order.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from tree_visitors.protocols import TreeVisitor
    from tree_visitors.tree.nodes import TreeNode

__all__ = ["accept", "walk"]

logger = logging.getLogger(__name__)

V = TypeVar("V", bound="TreeVisitor")


def walk(root: TreeNode, visitor: V) -> V:
    """Drive ``visitor`` over every node reachable from ``root``.

    Args:
        root:    Root of a tree produced by TreeBuilder.
        visitor: Any TreeVisitor-conformant object.

    Returns:
        The same visitor, so ``walk(root, SumInLeavesVisitor()).result()``
        reads naturally.
    """
    visited = 0
    stack: list[TreeNode] = [root]
    while stack:
        node = stack.pop()
        if node.is_leaf:
            visitor.visit_leaf(node)
        else:
            visitor.visit_internal(node)
            stack.extend(reversed(node.children))
        visited += 1

    logger.debug("Visited %d nodes with %s", visited, type(visitor).__name__)
    return visitor


def accept(root: TreeNode, *visitors: TreeVisitor) -> list[int]:
    """Run one traversal per visitor and return their results in order."""
    return [walk(root, visitor).result() for visitor in visitors]
