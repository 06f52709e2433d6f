"""Top-level package for the Unicode text toolkit.

Provides subpackages:
- unitext_toolkit.core – errors and immutable result models
- unitext_toolkit.text – indexable text container, recycling, character properties
- unitext_toolkit.boundaries – ICU boundary location (characters, lines, sentences, words)
- unitext_toolkit.stats – general and LaTeX statistics scanners
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            for line in pyproject.read_text(encoding="utf-8").splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.1.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    try:
        from importlib.metadata import PackageNotFoundError, version as pkg_version
        return pkg_version("unitext_toolkit")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()

from .core import (  # noqa: E402
    BoundaryMatch,
    EmbeddedNewlineError,
    EngineError,
    GeneralStats,
    InvalidOptionError,
    LatexStats,
    MISSING_MATCH,
    RecyclingError,
    UnitextError,
)
from .boundaries import (  # noqa: E402
    BoundaryKind,
    RuleStatusFilter,
    count_words,
    extract_words,
    locate_boundaries,
    locate_words,
    split_boundaries,
)
from .stats import stats_general, stats_latex  # noqa: E402
from .text import IndexableText  # noqa: E402

__all__: list[str] = [
    "__version__",
    # Models
    "BoundaryMatch",
    "MISSING_MATCH",
    "GeneralStats",
    "LatexStats",
    # Errors
    "UnitextError",
    "InvalidOptionError",
    "EngineError",
    "RecyclingError",
    "EmbeddedNewlineError",
    # Text
    "IndexableText",
    # Boundaries
    "BoundaryKind",
    "RuleStatusFilter",
    "locate_boundaries",
    "locate_words",
    "split_boundaries",
    "extract_words",
    "count_words",
    # Statistics
    "stats_general",
    "stats_latex",
]
