"""
Module: boundaries.locate

Purpose:
    Locate text boundaries (characters, line breaks, sentences, words)
    in every element of a string vector, reported as 1-based code-point
    ranges.

Key Functions:
    - locate_boundaries(): Full partition per element (optionally filtered)
    - locate_words(): Word segments only

Dependencies:
    - numpy (via text.indexable): Offset translation
    - icu (via boundaries.engine): Boundary detection

Used By:
    - boundaries.extract: split_boundaries(), extract_words(), count_words()
    - unitext_toolkit: Public API

Pipeline (per output position):
    1. Recycle (strings, boundary, locale) to a common length
    2. Missing / empty element -> sentinel [MISSING_MATCH]
    3. Configure the session for the element's boundary kind
    4. Bind text, walk the iterator, collect (start, end) UTF-16 offsets
    5. Translate to code points: start + 1 (1-based), end + 1 (exclusive)
"""

from __future__ import annotations

import logging
from typing import List, Optional

from ..core.models.matches import BoundaryMatch, missing_result
from ..text.indexable import IndexableText
from ..text.recycling import VectorLike, as_vector, recycle
from .config import BoundaryKind, RuleStatusFilter, match_boundary_kind
from .engine import ENGINE_ENCODING, EngineSession, collect_segments

logger = logging.getLogger(__name__)

MatchList = List[BoundaryMatch]


def _locate_element(
    session: EngineSession,
    text: str,
    kind: BoundaryKind,
    locale: Optional[str],
    rule_filter: Optional[RuleStatusFilter],
) -> MatchList:
    """Locate boundaries of one non-empty element."""
    session.configure(kind, locale)
    session.bind(text)

    skip_ranges = rule_filter.ranges_for(kind) if rule_filter is not None else []
    starts, ends = collect_segments(session, skip_ranges)
    if not starts:
        return missing_result()

    container = IndexableText(text, encoding=ENGINE_ENCODING)
    cp_starts, cp_ends = container.translate(starts, ends, start_bias=1, end_bias=1)
    return [BoundaryMatch(int(s), int(e)) for s, e in zip(cp_starts, cp_ends)]


def locate_boundaries(
    strings: VectorLike,
    boundary: VectorLike = "character",
    locale: VectorLike = None,
    *,
    rule_filter: Optional[RuleStatusFilter] = None,
) -> List[MatchList]:
    """
    Locate all text boundaries in each element.

    Args:
        strings: Strings to segment; None elements are missing.
        boundary: Boundary kinds ("character", "line-break", "sentence",
            "word", or unique prefixes), recycled against ``strings``.
        locale: Locale identifiers, recycled against ``strings``. A bare None
            selects the platform default and does not count toward the
            output length; a None *element* inside a sequence marks that
            position as missing.
        rule_filter: Optional rule-status filter; segments it rejects are
            dropped and an element left with none yields the sentinel.

    Returns:
        One list of BoundaryMatch per output position. Without a filter it
        is a contiguous partition: first start is 1, each end equals the
        next start, last end is ``len + 1``. Missing or empty elements
        give ``[MISSING_MATCH]``.

    Raises:
        RecyclingError: If argument lengths are incompatible.
        InvalidOptionError: If a boundary label is not recognised.
        EngineError: If ICU fails to create or bind an iterator.

    Example:
        >>> locate_boundaries("a😀b", "character")
        [[BoundaryMatch(start=1, end=2), BoundaryMatch(start=2, end=3), BoundaryMatch(start=3, end=4)]]
    """
    return _locate_all(as_vector(strings), as_vector(boundary), locale, rule_filter)


def _locate_all(
    values: List[Optional[str]],
    boundaries: List[Optional[str]],
    locale: VectorLike,
    rule_filter: Optional[RuleStatusFilter],
    boundary_is_fixed: bool = False,
) -> List[MatchList]:
    """Run the per-position pipeline; the output length follows ``values``."""
    locale_is_default = locale is None
    locales = as_vector(locale)
    # a default locale (and an implied boundary kind) never sets the length
    fixed = [j for j, is_fixed in ((1, boundary_is_fixed), (2, locale_is_default)) if is_fixed]

    results: List[MatchList] = []
    with EngineSession() as session:
        for _, (text, label, loc) in recycle(values, boundaries, locales, fixed=fixed):
            if text is None or label is None or len(text) == 0:
                results.append(missing_result())
                continue
            if loc is None and not locale_is_default:
                results.append(missing_result())
                continue
            kind = match_boundary_kind(label)
            results.append(_locate_element(session, text, kind, loc, rule_filter))
        logger.debug(
            f"locate_boundaries: {len(results)} results, {session.rebuilds} iterator build(s)"
        )
    return results


def locate_words(strings: VectorLike, locale: VectorLike = None) -> List[MatchList]:
    """
    Locate words in each element.

    Word segmentation with non-word segments (whitespace, punctuation)
    removed. An element with no words at all yields ``[MISSING_MATCH]``,
    exactly like a missing or empty element.

    Args:
        strings: Strings to search; None elements are missing.
        locale: Locale identifiers, recycled against ``strings``.

    Returns:
        One list of BoundaryMatch per output position.

    Example:
        >>> locate_words("  Hello, world!")
        [[BoundaryMatch(start=3, end=8), BoundaryMatch(start=10, end=15)]]
    """
    return _locate_all(
        as_vector(strings),
        [BoundaryKind.WORD.value],
        locale,
        RuleStatusFilter.words(),
        boundary_is_fixed=True,
    )
