"""Exception types raised while turning a flat description into a tree.

Both kinds are construction failures: the builder and the reader raise them
and never return a partially built tree.  Traversal has no error conditions
once a root has been returned.
"""

from __future__ import annotations

__all__ = ["MalformedInput", "OutOfRange", "TreeInputError"]


class TreeInputError(ValueError):
    """Base class for every rejected tree description."""


class MalformedInput(TreeInputError):
    """The description is structurally wrong.

    Raised for length mismatches between ``node_count`` and the value/color
    sequences, non-integer tokens, edges that are not exactly a pair, and
    edge lists that cannot form a tree rooted at node 0.
    """


class OutOfRange(TreeInputError):
    """An edge references a node index outside ``[1, node_count]``."""

    def __init__(self, index: int, node_count: int, index_base: int = 1) -> None:
        self.index = index
        self.node_count = node_count
        self.index_base = index_base
        high = node_count - 1 + index_base
        super().__init__(f"node index {index} is outside [{index_base}, {high}]")
