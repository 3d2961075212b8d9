"""TreeBuilder: converts a flat tree description into a rooted TreeNode tree.

The description is four parallel pieces: a node count, one value per node,
one color code per node, and ``node_count - 1`` parent->child edges.

Depth convention:
    Every node's ``depth`` is its creation index (0 for the first node, 1 for
    the second, ...), NOT its distance from the root.  Downstream statistics
    that weight by depth rely on this numbering, so it is kept even though it
    differs from textbook tree depth.

Construction is all-or-nothing.  Every edge is validated against index lists
before any TreeNode is linked, so a single bad edge aborts the build and no
partially linked tree ever escapes.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from tree_visitors.config import BuildConfig
from tree_visitors.errors import MalformedInput, OutOfRange
from tree_visitors.tree.nodes import Color, TreeNode

__all__ = ["TreeBuilder"]

logger = logging.getLogger(__name__)

# Index of the node returned as root
ROOT_INDEX = 0


def _is_integer(item: Any) -> bool:
    # bool subclasses int but is not a node value or index
    return isinstance(item, (int, np.integer)) and not isinstance(item, (bool, np.bool_))


@dataclass
class TreeBuilder:
    """Builds a TreeNode tree rooted at node 0 from parallel arrays and edges.

    The builder holds only its configuration; nothing is retained between
    ``build`` calls, so one instance can be reused freely.

    Example::

        builder = TreeBuilder()
        root = builder.build(
            5,
            [4, 7, 2, 5, 12],
            ["0", "1", "0", "0", "1"],
            [(1, 2), (1, 3), (3, 4), (3, 5)],
        )
        # root: value=4, RED, depth=0 with children (7, GREEN, 1) and (2, RED, 2)
    """

    config: BuildConfig = field(default_factory=BuildConfig)

    def build(
        self,
        node_count: int,
        values: Sequence[int] | np.ndarray,
        colors: Sequence[str | Color],
        edges: Sequence[Sequence[int]],
    ) -> TreeNode:
        """Build the tree and return its root.

        Args:
            node_count: Number of nodes; must be a positive integer.
            values:     One integer per node, index i belongs to node i.  Any
                        integer sequence is accepted, including numpy arrays.
            colors:     One color code per node.  ``config.red_code`` means RED,
                        any other string GREEN.  ``Color`` members pass
                        through; any other type is rejected.
            edges:      ``node_count - 1`` (parent, child) pairs using
                        ``config.index_base`` numbering.  Edge order becomes
                        child order.

        Returns:
            The root TreeNode (node 0).

        Raises:
            MalformedInput: On count/length mismatches, non-integer values or
                endpoints, non-string color codes, edges that are not pairs,
                or an edge set that does not form a single tree rooted at
                node 0.
            OutOfRange: If an edge endpoint is outside the valid node range.
        """
        if not _is_integer(node_count) or node_count < 1:
            msg = f"node_count must be a positive integer, got {node_count!r}"
            raise MalformedInput(msg)
        node_count = int(node_count)

        node_values = self._normalize_values(values, node_count)
        node_colors = self._decode_colors(colors, node_count)
        child_lists = self._link(edges, node_count)

        nodes = [
            TreeNode(value=value, color=color, depth=index)
            for index, (value, color) in enumerate(
                zip(node_values, node_colors, strict=True)
            )
        ]
        for parent_index, child_indexes in enumerate(child_lists):
            for child_index in child_indexes:
                nodes[parent_index].add_child(nodes[child_index])

        leaf_count = sum(1 for node in nodes if node.is_leaf)
        logger.info(
            "Built tree: %d nodes, %d leaves, %d internal",
            node_count,
            leaf_count,
            node_count - leaf_count,
        )
        return nodes[ROOT_INDEX]

    def _normalize_values(
        self, values: Sequence[int] | np.ndarray, node_count: int
    ) -> list[int]:
        """Validate node values and return them as Python ints.

        Integer arrays convert through ``tolist()``.  Plain sequences and
        object arrays (Python ints too large for int64) are checked element
        by element, so a stray bool or float is never silently cast.
        """
        if len(values) != node_count:
            msg = f"expected {node_count} values, got {len(values)}"
            raise MalformedInput(msg)

        if isinstance(values, np.ndarray):
            if values.ndim != 1:
                msg = f"values must be one-dimensional, got shape {values.shape}"
                raise MalformedInput(msg)
            if np.issubdtype(values.dtype, np.integer):
                return values.tolist()
            if values.dtype != object:
                msg = f"values must be integers, got dtype {values.dtype}"
                raise MalformedInput(msg)

        for position, item in enumerate(values):
            if not _is_integer(item):
                msg = f"value at position {position} is not an integer: {item!r}"
                raise MalformedInput(msg)
        return [int(item) for item in values]

    def _decode_colors(
        self, colors: Sequence[str | Color], node_count: int
    ) -> list[Color]:
        if len(colors) != node_count:
            msg = f"expected {node_count} colors, got {len(colors)}"
            raise MalformedInput(msg)

        decoded: list[Color] = []
        for position, code in enumerate(colors):
            if isinstance(code, Color):
                decoded.append(code)
            elif not isinstance(code, str):
                msg = f"color at position {position} must be a string code, got {code!r}"
                raise MalformedInput(msg)
            elif code == self.config.red_code:
                decoded.append(Color.RED)
            else:
                decoded.append(Color.GREEN)
        return decoded

    def _link(
        self, edges: Sequence[Sequence[int]], node_count: int
    ) -> list[list[int]]:
        """Validate every edge and return per-node child index lists.

        Each non-root node must receive exactly one parent, and every node
        must be reachable from the root.  With ``node_count - 1`` edges that
        rules out cycles and disconnected pieces.
        """
        if len(edges) != node_count - 1:
            msg = f"expected {node_count - 1} edges, got {len(edges)}"
            raise MalformedInput(msg)

        child_lists: list[list[int]] = [[] for _ in range(node_count)]
        has_parent = [False] * node_count

        for position, edge in enumerate(edges):
            try:
                pair = tuple(edge)
            except TypeError:
                msg = f"edge {position} must have exactly two endpoints, got {edge!r}"
                raise MalformedInput(msg) from None
            if len(pair) != 2:
                msg = f"edge {position} must have exactly two endpoints, got {len(pair)}"
                raise MalformedInput(msg)

            parent_index, child_index = (
                self._resolve(endpoint, node_count, position) for endpoint in pair
            )
            if parent_index == child_index:
                msg = f"edge {position} is a self-loop on node {pair[0]}"
                raise MalformedInput(msg)
            if child_index == ROOT_INDEX:
                msg = f"edge {position} makes the root node {pair[1]} a child"
                raise MalformedInput(msg)
            if has_parent[child_index]:
                msg = f"edge {position} gives node {pair[1]} a second parent"
                raise MalformedInput(msg)

            has_parent[child_index] = True
            child_lists[parent_index].append(child_index)
            logger.debug("Edge %d: node %d -> node %d", position, parent_index, child_index)

        reached = self._count_reachable(child_lists)
        if reached != node_count:
            msg = f"only {reached} of {node_count} nodes are reachable from the root"
            raise MalformedInput(msg)

        return child_lists

    def _resolve(self, endpoint: Any, node_count: int, position: int) -> int:
        """Convert one edge endpoint into a 0-based node index."""
        if not _is_integer(endpoint):
            msg = f"edge {position} endpoint is not an integer: {endpoint!r}"
            raise MalformedInput(msg)

        index = int(endpoint) - self.config.index_base
        if not 0 <= index < node_count:
            raise OutOfRange(int(endpoint), node_count, self.config.index_base)
        return index

    @staticmethod
    def _count_reachable(child_lists: list[list[int]]) -> int:
        seen = {ROOT_INDEX}
        stack = [ROOT_INDEX]
        while stack:
            for child_index in child_lists[stack.pop()]:
                if child_index not in seen:
                    seen.add(child_index)
                    stack.append(child_index)
        return len(seen)
