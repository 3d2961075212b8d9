"""Public API functions for tree-visitors.

This module provides the three user-facing functions: build_tree, aggregate
and evaluate.  Each aggregate call creates fresh visitors to guarantee zero
shared accumulator state between calls.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from tree_visitors.config import BuildConfig
from tree_visitors.result import AggregationResult
from tree_visitors.traversal import accept
from tree_visitors.tree.builder import TreeBuilder
from tree_visitors.tree.nodes import Color, TreeNode
from tree_visitors.tree.reader import parse_description
from tree_visitors.visitors import (
    FancyVisitor,
    ProductOfRedNodesVisitor,
    SumInLeavesVisitor,
)

__all__ = ["aggregate", "build_tree", "evaluate"]


def build_tree(
    node_count: int,
    values: Sequence[int] | np.ndarray,
    colors: Sequence[str | Color],
    edges: Sequence[Sequence[int]],
    config: BuildConfig | None = None,
) -> TreeNode:
    """Build a tree from parallel arrays and an edge list.

    Args:
        node_count: Number of nodes (positive).
        values:     One integer per node.
        colors:     One color code per node ("0" = RED, else GREEN by default).
        edges:      ``node_count - 1`` 1-indexed (parent, child) pairs.
        config:     Decoding options.  Defaults to ``BuildConfig()`` when None.

    Returns:
        The root node (node 0).

    Raises:
        MalformedInput: On malformed or inconsistent input.
        OutOfRange: If an edge endpoint is outside ``[1, node_count]``.
    """
    builder = TreeBuilder(config=config if config is not None else BuildConfig())
    return builder.build(node_count, values, colors, edges)


def aggregate(root: TreeNode) -> AggregationResult:
    """Compute the three statistics over the tree rooted at ``root``.

    Each visitor gets its own traversal of the (read-only) tree.

    Args:
        root: A root returned by ``build_tree`` or ``TreeBuilder.build``.

    Returns:
        An ``AggregationResult`` with sum_of_leaves, product_of_red_nodes and
        fancy populated.
    """
    leaf_sum, red_product, fancy = accept(
        root,
        SumInLeavesVisitor(),
        ProductOfRedNodesVisitor(),
        FancyVisitor(),
    )
    return AggregationResult(
        sum_of_leaves=leaf_sum,
        product_of_red_nodes=red_product,
        fancy=fancy,
    )


def evaluate(text: str, config: BuildConfig | None = None) -> AggregationResult:
    """Parse a text description, build the tree and aggregate it.

    Args:
        text:   Description in the line format read by ``parse_description``.
        config: Decoding options.  Defaults to ``BuildConfig()`` when None.

    Returns:
        The ``AggregationResult`` for the described tree.
    """
    root = parse_description(text).build(config)
    return aggregate(root)
