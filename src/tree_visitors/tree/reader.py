"""Text reader for the line-oriented tree description format.

Format::

    5                  <- node count
    4 7 2 5 12         <- one integer value per node
    0 1 0 0 1          <- one color code per node
    1 2                <- node_count - 1 lines of "parent child"
    1 3
    3 4
    3 5

Blank lines are ignored.  Errors carry the 1-based line number of the
offending line.  Length checks against the node count are left to
TreeBuilder so both entry points report them identically.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from tree_visitors.config import BuildConfig
from tree_visitors.errors import MalformedInput
from tree_visitors.tree.builder import TreeBuilder
from tree_visitors.tree.nodes import TreeNode

__all__ = ["TreeDescription", "parse_description"]

logger = logging.getLogger(__name__)

# ASCII digits only; int() alone also accepts "1_0" and non-ASCII digits
_INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True, slots=True)
class TreeDescription:
    """Parsed, not yet validated, tree description.

    Attributes:
        node_count: Declared number of nodes.
        values:     Integer value per node.
        colors:     Raw color code per node.
        edges:      (parent, child) pairs exactly as written.
    """

    node_count: int
    values: tuple[int, ...]
    colors: tuple[str, ...]
    edges: tuple[tuple[int, int], ...]

    def build(self, config: BuildConfig | None = None) -> TreeNode:
        """Build the tree this description declares."""
        builder = TreeBuilder(config=config if config is not None else BuildConfig())
        return builder.build(self.node_count, self.values, self.colors, self.edges)


def _to_int(token: str, line_number: int) -> int:
    if _INTEGER_TOKEN.fullmatch(token) is None:
        msg = f"line {line_number}: expected an integer, got {token!r}"
        raise MalformedInput(msg)
    try:
        return int(token)
    except ValueError as exc:
        # digit-count limit on str -> int conversion
        msg = f"line {line_number}: integer token too long: {exc}"
        raise MalformedInput(msg) from None


def parse_description(text: str) -> TreeDescription:
    """Parse the text format into a TreeDescription.

    Args:
        text: The whole description, e.g. the contents of stdin.

    Returns:
        A TreeDescription ready for ``build()``.

    Raises:
        MalformedInput: If a header line is missing, a token is not an
            integer, or an edge line does not hold exactly two tokens.
    """
    lines = [
        (number, line.split())
        for number, line in enumerate(text.splitlines(), start=1)
        if line.strip()
    ]
    if len(lines) < 3:
        msg = (
            "description needs a node count, a values line and a colors line, "
            f"got {len(lines)} non-blank line(s)"
        )
        raise MalformedInput(msg)

    (count_line, count_tokens), (values_line, value_tokens), (_, color_tokens) = lines[:3]
    if len(count_tokens) != 1:
        msg = f"line {count_line}: expected a single node count, got {len(count_tokens)} tokens"
        raise MalformedInput(msg)

    node_count = _to_int(count_tokens[0], count_line)
    values = tuple(_to_int(token, values_line) for token in value_tokens)

    edges: list[tuple[int, int]] = []
    for number, tokens in lines[3:]:
        if len(tokens) != 2:
            msg = f"line {number}: an edge needs exactly two tokens, got {len(tokens)}"
            raise MalformedInput(msg)
        edges.append((_to_int(tokens[0], number), _to_int(tokens[1], number)))

    logger.debug(
        "Parsed description: node_count=%d, %d values, %d colors, %d edges",
        node_count,
        len(values),
        len(color_tokens),
        len(edges),
    )
    return TreeDescription(
        node_count=node_count,
        values=values,
        colors=tuple(color_tokens),
        edges=tuple(edges),
    )
