"""
Unitext Core Package

Errors and immutable models used by every other subpackage. Nothing in
here depends on ICU, so the models can be imported and compared without
the engine being available.
"""

from .errors import (
    EmbeddedNewlineError,
    EngineError,
    InvalidOptionError,
    RecyclingError,
    UnitextError,
)
from .models import (
    BoundaryMatch,
    GeneralStats,
    LatexStats,
    MISSING_MATCH,
    is_missing_result,
    missing_result,
)

__all__ = [
    "UnitextError",
    "InvalidOptionError",
    "EngineError",
    "RecyclingError",
    "EmbeddedNewlineError",
    "BoundaryMatch",
    "MISSING_MATCH",
    "is_missing_result",
    "missing_result",
    "GeneralStats",
    "LatexStats",
]
