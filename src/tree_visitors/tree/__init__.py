"""Tree subpackage for the colored value tree.

Re-exports the public API for the tree module:
- TreeNode: slotted dataclass for a node; leaf/internal is derived from children
- Color: StrEnum of node colors (RED, GREEN)
- TreeBuilder: builds a rooted TreeNode tree from parallel arrays and edges
- TreeDescription / parse_description: line-oriented text reader
"""

from tree_visitors.tree.builder import TreeBuilder
from tree_visitors.tree.nodes import Color, TreeNode
from tree_visitors.tree.reader import TreeDescription, parse_description

__all__ = ["Color", "TreeBuilder", "TreeDescription", "TreeNode", "parse_description"]
