"""
Module: boundaries

Purpose:
    ICU-based boundary location over string vectors, with results in
    1-based code-point coordinates.

Key Functions:
    - locate_boundaries(): Character / line-break / sentence / word partition
    - locate_words(): Word segments only
    - split_boundaries(), extract_words(), count_words(): Substring views

Key Classes:
    - BoundaryKind: Supported boundary rules
    - RuleStatusFilter: Rule-status based segment filtering
    - EngineSession: Per-call BreakIterator owner

Dependencies:
    - icu (PyICU): BreakIterator
    - numpy: Offset translation (via text.indexable)
"""

from .config import BoundaryKind, RuleStatusFilter, match_boundary_kind
from .engine import EngineSession, create_break_iterator, resolve_locale
from .extract import count_words, extract_words, split_boundaries
from .locate import locate_boundaries, locate_words

__all__ = [
    # Config
    "BoundaryKind",
    "RuleStatusFilter",
    "match_boundary_kind",
    # Engine
    "EngineSession",
    "create_break_iterator",
    "resolve_locale",
    # Locate
    "locate_boundaries",
    "locate_words",
    # Extract
    "split_boundaries",
    "extract_words",
    "count_words",
]
