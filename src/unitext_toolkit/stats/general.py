"""
Module: stats.general

Purpose:
    General statistics for a vector of text lines: how many lines, how
    many of them contain something other than whitespace, and how many
    code points (total and non-whitespace) they hold.

Key Functions:
    - stats_general(): Aggregate GeneralStats over a vector
    - scan_line(): Statistics of a single line

Dependencies:
    - icu (via text.properties): White_Space property

Used By:
    - unitext_toolkit: Public API
"""

from __future__ import annotations

import logging

from ..core.errors import EmbeddedNewlineError
from ..core.models.stats import GeneralStats
from ..text.properties import LINE_FEED, is_white_space
from ..text.recycling import VectorLike, as_vector

logger = logging.getLogger(__name__)


def scan_line(line: str, index: int = 0) -> GeneralStats:
    """
    Scan one non-missing line.

    Raises:
        EmbeddedNewlineError: If the line contains a line feed.
    """
    chars = 0
    non_white = 0
    for c in line:
        if c == LINE_FEED:
            raise EmbeddedNewlineError(index)
        chars += 1
        if not is_white_space(c):
            non_white += 1
    return GeneralStats(
        lines=1,
        lines_non_empty=1 if non_white else 0,
        chars=chars,
        chars_non_white=non_white,
    )


def stats_general(strings: VectorLike) -> GeneralStats:
    """
    Compute general statistics over a vector of lines.

    Missing (None) elements are ignored. Whitespace follows the Unicode
    White_Space property, so e.g. NO-BREAK SPACE and IDEOGRAPHIC SPACE
    count as white.

    Args:
        strings: Lines of text; must not contain line feeds.

    Returns:
        GeneralStats summed over all non-missing elements.

    Raises:
        EmbeddedNewlineError: If any element contains a line feed.

    Example:
        >>> stats_general(["a b", None, "  "])
        GeneralStats(lines=2, lines_non_empty=1, chars=5, chars_non_white=2)
    """
    total = GeneralStats()
    for i, line in enumerate(as_vector(strings)):
        if line is None:
            continue
        total = total + scan_line(line, i)
    logger.debug(f"stats_general: {total.lines} line(s), {total.chars} char(s)")
    return total
