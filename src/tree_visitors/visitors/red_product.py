"""ProductOfRedNodesVisitor: multiplies the values of RED internal nodes.

Python integers do not overflow, so the product is exact for any tree
size; no modulus is applied.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tree_visitors.tree.nodes import Color

if TYPE_CHECKING:
    from tree_visitors.tree.nodes import TreeNode

__all__ = ["ProductOfRedNodesVisitor"]


class ProductOfRedNodesVisitor:
    """Accumulates the product of ``value`` over internal nodes colored RED.

    Leaves are ignored regardless of color.  The accumulator starts at the
    multiplicative identity, so ``result()`` is 1 when no RED internal node
    exists.
    """

    def __init__(self) -> None:
        self._product = 1

    def visit_internal(self, node: TreeNode) -> None:
        if node.color == Color.RED:
            self._product *= node.value

    def visit_leaf(self, node: TreeNode) -> None:
        pass

    def result(self) -> int:
        return self._product
