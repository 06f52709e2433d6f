"""
Module: boundaries.extract

Purpose:
    Substring-level views built on the locators: split each element at
    its boundaries, extract its words, or count them.

Key Functions:
    - split_boundaries(): Segments of the boundary partition
    - extract_words(): Word substrings
    - count_words(): Number of words

Dependencies:
    - boundaries.locate: Match positions

Used By:
    - unitext_toolkit: Public API
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..core.models.matches import BoundaryMatch, is_missing_result
from ..text.recycling import VectorLike, as_vector, recycle
from .locate import locate_boundaries, locate_words


def _substrings(text: Optional[str], matches: Sequence[BoundaryMatch]) -> Optional[List[str]]:
    if text is None:
        return None
    if is_missing_result(matches):
        return []
    return [text[m.as_slice()] for m in matches]


def split_boundaries(
    strings: VectorLike,
    boundary: VectorLike = "word",
    locale: VectorLike = None,
) -> List[Optional[List[str]]]:
    """
    Split each element at its text boundaries.

    Joining the pieces of an element gives the element back.

    Returns:
        Per output position: list of segments; ``[]`` for an empty string;
        None when the element, its boundary kind or its locale is missing.

    Example:
        >>> split_boundaries("Hi there.", "word")
        [['Hi', ' ', 'there', '.']]
    """
    values = as_vector(strings)
    boundaries = as_vector(boundary)
    locales = as_vector(locale)
    located = locate_boundaries(values, boundaries, None if locale is None else locales)

    pieces: List[Optional[List[str]]] = []
    for i, (text, label, loc) in recycle(
        values, boundaries, locales, fixed=(2,) if locale is None else ()
    ):
        if label is None or (loc is None and locale is not None):
            pieces.append(None)
        else:
            pieces.append(_substrings(text, located[i]))
    return pieces


def extract_words(strings: VectorLike, locale: VectorLike = None) -> List[Optional[List[str]]]:
    """
    Extract the words of each element.

    Returns:
        Per output position: list of words (``[]`` if there are none), or
        None for a missing element.

    Example:
        >>> extract_words(["One, two!", "", None])
        [['One', 'two'], [], None]
    """
    values = as_vector(strings)
    locales = as_vector(locale)
    located = locate_words(values, None if locale is None else locales)

    words: List[Optional[List[str]]] = []
    for i, (text, loc) in recycle(values, locales, fixed=(1,) if locale is None else ()):
        if loc is None and locale is not None:
            words.append(None)
        else:
            words.append(_substrings(text, located[i]))
    return words


def count_words(strings: VectorLike, locale: VectorLike = None) -> List[Optional[int]]:
    """
    Count the words of each element.

    Example:
        >>> count_words(["One, two!", "", None])
        [2, 0, None]
    """
    return [None if w is None else len(w) for w in extract_words(strings, locale)]
