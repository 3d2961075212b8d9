"""visitors subpackage: the aggregation visitors driven by the traversal engine.

Each visitor satisfies the ``TreeVisitor`` Protocol structurally and keeps its
own accumulator, so fresh instances never interfere with each other.

Example::

    from tree_visitors.traversal import walk
    from tree_visitors.visitors import SumInLeavesVisitor

    total = walk(root, SumInLeavesVisitor()).result()
"""

from __future__ import annotations

from tree_visitors.visitors.fancy import FancyVisitor
from tree_visitors.visitors.leaf_sum import SumInLeavesVisitor
from tree_visitors.visitors.red_product import ProductOfRedNodesVisitor

__all__ = ["FancyVisitor", "ProductOfRedNodesVisitor", "SumInLeavesVisitor"]
