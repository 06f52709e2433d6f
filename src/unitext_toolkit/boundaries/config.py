"""
Module: boundaries.config

Purpose:
    Configuration for boundary location: the boundary kinds understood by
    the engine, option matching for user-supplied kind labels, and the
    rule-status filter used to drop segments (e.g. non-word segments).

Key Classes:
    - BoundaryKind: character / line-break / sentence / word
    - RuleStatusFilter: Which ICU rule-status ranges to skip

Key Functions:
    - match_boundary_kind(): Resolve a label (exact or unique prefix)

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - boundaries.engine: Builds iterators per BoundaryKind
    - boundaries.locate: Resolves labels, filters segments
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import List, Tuple

from ..core.errors import InvalidOptionError


class BoundaryKind(str, Enum):
    """Boundary rules supported by the engine."""

    CHARACTER = "character"
    LINE_BREAK = "line-break"
    SENTENCE = "sentence"
    WORD = "word"


BOUNDARY_LABELS: Tuple[str, ...] = tuple(k.value for k in BoundaryKind)


def match_boundary_kind(value: str, param: str = "boundary") -> BoundaryKind:
    """
    Resolve a boundary label to a BoundaryKind.

    An exact match wins; otherwise the label may be an unambiguous prefix
    of one of the allowed values (``"sent"`` -> SENTENCE).

    Raises:
        InvalidOptionError: If the label matches no value or several.

    Example:
        >>> match_boundary_kind("line")
        <BoundaryKind.LINE_BREAK: 'line-break'>
    """
    if isinstance(value, BoundaryKind):
        return value
    if not isinstance(value, str):
        raise InvalidOptionError(param, value, BOUNDARY_LABELS)
    if value in BOUNDARY_LABELS:
        return BoundaryKind(value)
    candidates = [label for label in BOUNDARY_LABELS if value and label.startswith(value)]
    if len(candidates) != 1:
        raise InvalidOptionError(param, value, BOUNDARY_LABELS)
    return BoundaryKind(candidates[0])


# ICU rule-status ranges: [first, limit)
WORD_NONE = (0, 100)
WORD_NUMBER = (100, 200)
WORD_LETTER = (200, 300)
WORD_KANA = (300, 400)
WORD_IDEO = (400, 500)
LINE_SOFT = (0, 100)
LINE_HARD = (100, 200)
SENTENCE_TERM = (0, 100)
SENTENCE_SEP = (100, 200)


@dataclass(frozen=True)
class RuleStatusFilter:
    """
    Rule-status ranges whose segments are dropped (immutable).

    ICU tags every boundary with the status of the rule that produced it;
    the meaning of a status depends on the boundary kind, so word flags
    only apply to word iterators, line flags to line-break iterators, and
    so on.

    Attributes:
        skip_word_none: Drop segments with no word content (spaces, punctuation)
        skip_word_number: Drop numbers
        skip_word_letter: Drop letter words
        skip_word_kana: Drop kana words
        skip_word_ideo: Drop ideographic words
        skip_line_soft: Drop soft line-break opportunities
        skip_line_hard: Drop hard (mandatory) line breaks
        skip_sentence_term: Drop sentences ended by a terminator (. ? !)
        skip_sentence_sep: Drop sentences ended by a separator (paragraph end)

    Example:
        >>> RuleStatusFilter.words().ranges_for(BoundaryKind.WORD)
        [(0, 100)]
    """

    skip_word_none: bool = False
    skip_word_number: bool = False
    skip_word_letter: bool = False
    skip_word_kana: bool = False
    skip_word_ideo: bool = False
    skip_line_soft: bool = False
    skip_line_hard: bool = False
    skip_sentence_term: bool = False
    skip_sentence_sep: bool = False

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, bool):
                raise ValueError(f"{f.name} must be a bool: {value!r}")

    @classmethod
    def words(cls) -> RuleStatusFilter:
        """Filter keeping only segments that contain word content."""
        return cls(skip_word_none=True)

    def ranges_for(self, kind: BoundaryKind) -> List[Tuple[int, int]]:
        """Half-open status ranges to skip for iterators of ``kind``."""
        if kind is BoundaryKind.WORD:
            flags = [
                (self.skip_word_none, WORD_NONE),
                (self.skip_word_number, WORD_NUMBER),
                (self.skip_word_letter, WORD_LETTER),
                (self.skip_word_kana, WORD_KANA),
                (self.skip_word_ideo, WORD_IDEO),
            ]
        elif kind is BoundaryKind.LINE_BREAK:
            flags = [(self.skip_line_soft, LINE_SOFT), (self.skip_line_hard, LINE_HARD)]
        elif kind is BoundaryKind.SENTENCE:
            flags = [
                (self.skip_sentence_term, SENTENCE_TERM),
                (self.skip_sentence_sep, SENTENCE_SEP),
            ]
        else:
            flags = []
        return [rng for enabled, rng in flags if enabled]

    def is_active(self, kind: BoundaryKind) -> bool:
        """True if anything would be skipped for ``kind``."""
        return bool(self.ranges_for(kind))
