"""tree-visitors - visitor-based statistics over a colored value tree."""

from __future__ import annotations

from tree_visitors.api import aggregate, build_tree, evaluate
from tree_visitors.config import BuildConfig
from tree_visitors.errors import MalformedInput, OutOfRange, TreeInputError
from tree_visitors.protocols import TreeVisitor
from tree_visitors.result import AggregationResult
from tree_visitors.traversal import accept, walk
from tree_visitors.tree import Color, TreeBuilder, TreeNode

__version__: str = "0.1.0"
__all__: list[str] = [
    "AggregationResult",
    "BuildConfig",
    "Color",
    "MalformedInput",
    "OutOfRange",
    "TreeBuilder",
    "TreeInputError",
    "TreeNode",
    "TreeVisitor",
    "accept",
    "aggregate",
    "build_tree",
    "evaluate",
    "walk",
]
