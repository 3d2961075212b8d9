"""FancyVisitor: depth- and color-weighted difference of two partial sums.

Rule:
    result = | sum(value of internal nodes at even depth)
               - sum(value of GREEN leaves) |

This is a rule defined by this package.  The partial sums follow the
well-known form of this exercise, but depth here is the node's ``depth``
attribute as assigned by TreeBuilder, i.e. its creation index, not its
distance from the root.  Results therefore differ from any variant that
uses graph depth: for the sample below, graph depth would give
``|4 - 19| = 15``, while this visitor returns 13.

Example (nodes listed as value/color/depth)::

    4/RED/0 ─┬─ 7/GREEN/1
             └─ 2/RED/2 ─┬─ 5/RED/3
                         └─ 12/GREEN/4

    even-depth internal: 4 + 2 = 6
    green leaves:        7 + 12 = 19
    result:              |6 - 19| = 13
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tree_visitors.tree.nodes import Color

if TYPE_CHECKING:
    from tree_visitors.tree.nodes import TreeNode

__all__ = ["FancyVisitor"]


class FancyVisitor:
    """Keeps two partial sums and reduces them by absolute difference."""

    def __init__(self) -> None:
        self._even_depth_internal = 0
        self._green_leaves = 0

    def visit_internal(self, node: TreeNode) -> None:
        if node.depth % 2 == 0:
            self._even_depth_internal += node.value

    def visit_leaf(self, node: TreeNode) -> None:
        if node.color == Color.GREEN:
            self._green_leaves += node.value

    def result(self) -> int:
        return abs(self._even_depth_internal - self._green_leaves)
