"""
Core Models Package

Immutable result types shared by the locators and the scanners.

| Type | Produced by | Shape |
|------|-------------|-------|
| `BoundaryMatch` | `locate_boundaries`, `locate_words` | (start, end), 1-based |
| `GeneralStats` | `stats_general` | 4 counters |
| `LatexStats` | `stats_latex` | 6 counters |
"""

from .matches import BoundaryMatch, MISSING_MATCH, MATCH_COLUMNS, is_missing_result, missing_result
from .stats import GeneralStats, LatexStats

__all__ = [
    "BoundaryMatch",
    "MISSING_MATCH",
    "MATCH_COLUMNS",
    "is_missing_result",
    "missing_result",
    "GeneralStats",
    "LatexStats",
]
