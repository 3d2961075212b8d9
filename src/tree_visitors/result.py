"""AggregationResult dataclass for the three tree statistics.

This module provides the result type returned by aggregate() calls.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["AggregationResult"]


@dataclass(frozen=True, slots=True)
class AggregationResult:
    """Results of one aggregate() call.

    Attributes:
        sum_of_leaves: Sum of the values of all leaf nodes.
        product_of_red_nodes: Product of the values of RED internal nodes;
            1 when there are none.
        fancy: Absolute difference between the even-depth internal sum and
            the green-leaf sum (see FancyVisitor).
    """

    sum_of_leaves: int
    product_of_red_nodes: int
    fancy: int

    def as_lines(self) -> list[str]:
        """Return the results as output lines: sum, product, fancy."""
        return [str(self.sum_of_leaves), str(self.product_of_red_nodes), str(self.fancy)]
