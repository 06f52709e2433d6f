"""
Module: stats

Purpose:
    Fixed-size named counters produced by the statistics scanners. One
    instance aggregates the counts of a whole input vector.

Key Classes:
    - GeneralStats: line/character counts for plain text
    - LatexStats: word/command/environment counts for LaTeX sources

Dependencies:
    - typing (std)

Used By:
    - stats.general
    - stats.latex
"""

from __future__ import annotations

from typing import Dict, NamedTuple


class GeneralStats(NamedTuple):
    """
    General statistics for a vector of lines.

    Attributes:
        lines: Number of non-missing elements
        lines_non_empty: Elements with at least one non-whitespace code point
        chars: Total number of code points
        chars_non_white: Code points that are not Unicode White_Space

    Example:
        >>> GeneralStats(1, 1, 3, 2) + GeneralStats(1, 0, 2, 0)
        GeneralStats(lines=2, lines_non_empty=1, chars=5, chars_non_white=2)
    """

    lines: int = 0
    lines_non_empty: int = 0
    chars: int = 0
    chars_non_white: int = 0

    def __add__(self, other: GeneralStats) -> GeneralStats:  # type: ignore[override]
        return GeneralStats(*(a + b for a, b in zip(self, other)))

    def as_dict(self) -> Dict[str, int]:
        """Counters keyed by their display labels."""
        return dict(zip(GENERAL_LABELS, self))


class LatexStats(NamedTuple):
    """
    LaTeX statistics for a vector of source lines.

    Attributes:
        chars_word: Letters and digits belonging to words
        chars_cmd_envir: Characters of commands and environment markup
        chars_white: Separator characters (spaces, punctuation, ...)
        words: Number of words
        cmds: Number of commands (``\\begin``/``\\end`` excluded)
        envirs: Number of environments (counted at ``\\begin``)
    """

    chars_word: int = 0
    chars_cmd_envir: int = 0
    chars_white: int = 0
    words: int = 0
    cmds: int = 0
    envirs: int = 0

    def __add__(self, other: LatexStats) -> LatexStats:  # type: ignore[override]
        return LatexStats(*(a + b for a, b in zip(self, other)))

    def as_dict(self) -> Dict[str, int]:
        """Counters keyed by their display labels."""
        return dict(zip(LATEX_LABELS, self))


GENERAL_LABELS = ("Lines", "LinesNEmpty", "Chars", "CharsNWhite")
LATEX_LABELS = ("CharsWord", "CharsCmdEnvir", "CharsWhite", "Words", "Cmds", "Envirs")
