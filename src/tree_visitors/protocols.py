"""TreeVisitor Protocol for the traversal extension point.

Defines the structural interface every aggregation visitor must satisfy.
Users can plug in custom visitors without inheriting from any base class:
any class with conformant ``visit_internal``, ``visit_leaf`` and ``result``
methods passes ``isinstance`` checks.

Example::

    from tree_visitors.protocols import TreeVisitor
    from tree_visitors.tree import TreeNode

    class CountLeaves:
        def __init__(self) -> None:
            self._count = 0

        def visit_internal(self, node: TreeNode) -> None:
            pass

        def visit_leaf(self, node: TreeNode) -> None:
            self._count += 1

        def result(self) -> int:
            return self._count

    assert isinstance(CountLeaves(), TreeVisitor)  # structural conformance
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from tree_visitors.tree.nodes import TreeNode


@runtime_checkable
class TreeVisitor(Protocol):
    """Structural protocol for tree visitors.

    The traversal engine guarantees:
    - each node is visited exactly once per traversal;
    - exactly one of ``visit_internal`` / ``visit_leaf`` is called per node,
      chosen by the node's classification at traversal time;
    - nodes arrive in pre-order (parent before children, children in order).

    Each visitor keeps its own accumulator.  ``result`` is meaningful only
    after a traversal has visited every node, and must not change state.
    """

    def visit_internal(self, node: TreeNode) -> None: ...

    def visit_leaf(self, node: TreeNode) -> None: ...

    def result(self) -> int: ...
