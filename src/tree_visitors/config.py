"""BuildConfig: immutable knobs for decoding a flat tree description.

The defaults reproduce the input convention of the data this package was
written for: color code ``"0"`` is RED (everything else is GREEN) and edge
endpoints are 1-indexed.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["BuildConfig"]


@dataclass(frozen=True, slots=True)
class BuildConfig:
    """Immutable configuration for TreeBuilder and the text reader.

    Attributes:
        red_code: Color code that maps to ``Color.RED``.  Any other code maps
            to ``Color.GREEN``.  Must be non-empty and contain no whitespace,
            since color lines are whitespace-separated.
        index_base: Index of the first node as written in edge pairs.  ``1``
            for the standard input format, ``0`` for callers that already
            hold 0-indexed pairs.
    """

    red_code: str = "0"
    index_base: int = 1

    def __post_init__(self) -> None:
        if not self.red_code or any(ch.isspace() for ch in self.red_code):
            msg = f"red_code must be a non-empty token, got {self.red_code!r}"
            raise ValueError(msg)
        if self.index_base not in (0, 1):
            msg = f"index_base must be 0 or 1, got {self.index_base}"
            raise ValueError(msg)
