"""TreeNode dataclass and Color StrEnum for the colored value tree.

A single node type covers both roles in the tree: whether a node is a leaf
or an internal node is derived from its children at the moment it is asked,
so the classification can never disagree with the actual child count.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum, auto

__all__ = ["Color", "TreeNode"]


class Color(StrEnum):
    """Node color.

    - RED   -> "red"
    - GREEN -> "green"
    """

    RED = auto()
    GREEN = auto()


@dataclass(frozen=True, slots=True, eq=False)
class TreeNode:
    """A node in the colored value tree.

    Attributes:
        value:  Integer payload aggregated by the visitors.
        color:  RED or GREEN.
        depth:  Creation index assigned by TreeBuilder (root = 0).  This is
                NOT the graph distance from the root; see TreeBuilder.
        children: Read-only tuple of child nodes in attachment order, which is
                also traversal order.

    Two nodes compare equal (and hash equal) when their ``identity`` triple
    ``(value, color, depth)`` matches; children do not take part.  The three
    fields are frozen, so the identity (and hash) cannot change while the
    node sits in a set or dict.
    """

    value: int
    color: Color
    depth: int
    _children: list[TreeNode] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.depth < 0:
            msg = f"depth must be >= 0, got {self.depth}"
            raise ValueError(msg)

    @property
    def children(self) -> tuple[TreeNode, ...]:
        return tuple(self._children)

    @property
    def is_leaf(self) -> bool:
        """True iff the node has no children."""
        return not self._children

    @property
    def is_internal(self) -> bool:
        return bool(self._children)

    @property
    def identity(self) -> tuple[int, Color, int]:
        return (self.value, self.color, self.depth)

    def add_child(self, child: TreeNode) -> None:
        """Attach ``child`` after the existing children.

        Only TreeBuilder calls this; the tree is not mutated once built.

        Raises:
            ValueError: If ``child`` is this node.
        """
        if child is self:
            msg = f"node {self.identity!r} cannot be its own child"
            raise ValueError(msg)
        self._children.append(child)

    def iter_preorder(self) -> Iterator[TreeNode]:
        """Yield this node, then each child subtree in child order."""
        stack: list[TreeNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            # Reversed so the first child is popped first
            stack.extend(reversed(node._children))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TreeNode):
            return NotImplemented
        return self.identity == other.identity

    def __hash__(self) -> int:
        return hash(self.identity)
