"""
Module: matches

Purpose:
    Provides the BoundaryMatch row type returned by the boundary locators,
    and the "no boundaries" sentinel shared by missing input, empty
    strings and fully filtered word searches.

Key Functions:
    - missing_result(): Fresh sentinel result list
    - is_missing_result(matches): Check for the sentinel

Dependencies:
    - typing (std)

Used By:
    - boundaries.locate
    - boundaries.extract
"""

from __future__ import annotations

from typing import List, NamedTuple, Optional, Sequence


class BoundaryMatch(NamedTuple):
    """
    One located segment in 1-based code-point coordinates.

    The range is [start, end): start is the index of the first code point
    of the segment and end is the index of the first code point after it.
    Consecutive segments of a partition therefore share a coordinate
    (``m[k].end == m[k + 1].start``) and the last one ends at ``len + 1``.

    Attributes:
        start: 1-based index of the first code point, None for the sentinel
        end: 1-based index one past the last code point, None for the sentinel

    Example:
        >>> m = BoundaryMatch(1, 4)
        >>> m.length
        3
        >>> "abcdef"[m.as_slice()]
        'abc'
    """

    start: Optional[int]
    end: Optional[int]

    @property
    def is_missing(self) -> bool:
        """True for the (None, None) sentinel."""
        return self.start is None and self.end is None

    @property
    def length(self) -> Optional[int]:
        """Number of code points covered, or None for the sentinel."""
        if self.is_missing:
            return None
        return self.end - self.start

    def as_slice(self) -> slice:
        """Python slice selecting this segment from a ``str``."""
        if self.is_missing:
            raise ValueError("missing match has no slice")
        return slice(self.start - 1, self.end - 1)


MISSING_MATCH = BoundaryMatch(None, None)

# Column labels of a match table
MATCH_COLUMNS = BoundaryMatch._fields


def missing_result() -> List[BoundaryMatch]:
    """Return the sentinel result: a single missing match."""
    return [MISSING_MATCH]


def is_missing_result(matches: Sequence[BoundaryMatch]) -> bool:
    """True if ``matches`` is the "no boundaries" sentinel."""
    return len(matches) == 1 and matches[0].is_missing
