"""
Module: boundaries.engine

Purpose:
    Owns the ICU BreakIterator for the duration of one call. The iterator
    is rebuilt only when the boundary kind changes between elements and
    is released when the session scope exits, whether the call succeeds
    or fails.

Key Classes:
    - EngineSession: Context manager holding {current_kind, iterator}

Key Functions:
    - resolve_locale(): Locale identifier (or None) -> icu.Locale
    - create_break_iterator(): Pure constructor from (kind, locale)

Dependencies:
    - icu (PyICU): BreakIterator, Locale, ICUError

Used By:
    - boundaries.locate: locate_boundaries(), locate_words()

Design Notes:
    ICU works on UTF-16, so every offset produced here is a UTF-16 code
    unit offset (ENGINE_ENCODING). Translation to code points is done by
    text.indexable.IndexableText.
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Sequence, Tuple

from icu import BreakIterator, ICUError, Locale

from ..core.errors import EngineError
from .config import BoundaryKind

logger = logging.getLogger(__name__)

# Storage unit of the offsets reported by BreakIterator
ENGINE_ENCODING = "utf-16"

_FACTORIES = {
    BoundaryKind.CHARACTER: BreakIterator.createCharacterInstance,
    BoundaryKind.LINE_BREAK: BreakIterator.createLineInstance,
    BoundaryKind.SENTENCE: BreakIterator.createSentenceInstance,
    BoundaryKind.WORD: BreakIterator.createWordInstance,
}


def resolve_locale(locale: Optional[str]) -> Locale:
    """
    Build an ICU locale; None selects the platform default.

    The identifier is passed through unchanged; ICU falls back to root
    data for locales it does not know.
    """
    if locale is None:
        return Locale.getDefault()
    return Locale(locale)


def create_break_iterator(kind: BoundaryKind, locale: Optional[str]) -> BreakIterator:
    """
    Create a fresh BreakIterator for ``kind`` and ``locale``.

    Raises:
        EngineError: If ICU cannot create the iterator.
    """
    try:
        return _FACTORIES[kind](resolve_locale(locale))
    except ICUError as e:
        raise EngineError(e, f"creating {kind.value} iterator") from e


class EngineSession:
    """
    Per-call owner of the boundary engine.

    Attributes:
        current_kind: Kind the iterator is configured for (None before first use)
        iterator: The live BreakIterator (None before first use / after close)
        rebuilds: Number of iterators constructed in this session

    Example:
        >>> with EngineSession() as session:
        ...     _ = session.configure(BoundaryKind.WORD, "en_US")
        ...     session.bind("hello world")
        ...     list(session.segments())
        [(0, 5), (5, 6), (6, 11)]
    """

    def __init__(self) -> None:
        self.current_kind: Optional[BoundaryKind] = None
        self.iterator: Optional[BreakIterator] = None
        self.rebuilds = 0

    def __enter__(self) -> EngineSession:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Release the iterator (and the text bound to it)."""
        self.iterator = None
        self.current_kind = None

    def configure(self, kind: BoundaryKind, locale: Optional[str]) -> BreakIterator:
        """
        Make sure the iterator matches ``kind``, rebuilding it if needed.

        The locale is only applied when a new iterator is built; an
        iterator already configured for ``kind`` is reused as-is.
        """
        if self.iterator is None or kind is not self.current_kind:
            # drop the previous iterator before building its replacement
            self.iterator = None
            self.iterator = create_break_iterator(kind, locale)
            self.current_kind = kind
            self.rebuilds += 1
            logger.debug(f"Built {kind.value} iterator (locale={locale!r})")
        return self.iterator

    def bind(self, text: str) -> None:
        """
        Attach ``text`` to the current iterator.

        Raises:
            EngineError: If ICU rejects the text.
            RuntimeError: If called before configure().
        """
        if self.iterator is None:
            raise RuntimeError("EngineSession.bind() called before configure()")
        try:
            self.iterator.setText(text)
        except ICUError as e:
            raise EngineError(e, "binding text") from e

    def segments(
        self, skip_ranges: Sequence[Tuple[int, int]] = ()
    ) -> Iterator[Tuple[int, int]]:
        """
        Walk the bound text from the first boundary to the last.

        Yields consecutive (previous, next) boundary offsets in UTF-16
        units. Segments whose rule status lies in one of ``skip_ranges``
        are left out.
        """
        iterator = self.iterator
        if iterator is None:
            raise RuntimeError("EngineSession.segments() called before configure()")
        last = iterator.first()
        while True:
            boundary = iterator.nextBoundary()
            if boundary == BreakIterator.DONE:
                break
            if not skip_ranges or not _in_ranges(iterator.getRuleStatus(), skip_ranges):
                yield last, boundary
            last = boundary


def _in_ranges(status: int, ranges: Sequence[Tuple[int, int]]) -> bool:
    return any(first <= status < limit for first, limit in ranges)


def collect_segments(
    session: EngineSession, skip_ranges: Sequence[Tuple[int, int]] = ()
) -> Tuple[List[int], List[int]]:
    """Split the segments of the bound text into start and end lists."""
    starts: List[int] = []
    ends: List[int] = []
    for start, end in session.segments(skip_ranges):
        starts.append(start)
        ends.append(end)
    return starts, ends
