"""
Module: stats.latex

Purpose:
    LaTeX source statistics: words, commands and environments, with the
    number of characters attributed to each. A modified version of the
    Kile 2.1.3 LaTeX word count algorithm.

Key Functions:
    - transition(): Pure state-machine step (state, char, lookahead) -> Transition
    - scan_latex_line(): Statistics of a single line
    - stats_latex(): Aggregate LatexStats over a vector

Key Classes:
    - ScanState: Scanner states
    - Transition: Result of one step

Dependencies:
    - icu (via text.properties): Alphabetic, Nd and punctuation properties

Used By:
    - unitext_toolkit: Public API

Design Notes:
    - A word starts only on a letter; digits continue a word but never
      start one ("42test" is one word, "42.2" is none).
    - ``\\begin`` counts an environment, ``\\end`` does not, and neither
      counts as a command.
    - When ``\\`` is followed by punctuation other than ``~``/``^`` the
      current word is kept open, so ``K\\"ahler`` is one word.
    - Scanner state never crosses element boundaries.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import NamedTuple

from ..core.errors import EmbeddedNewlineError
from ..core.models.stats import LatexStats
from ..text.properties import LINE_FEED, is_digit, is_letter, is_punct
from ..text.recycling import VectorLike, as_vector

logger = logging.getLogger(__name__)


class ScanState(Enum):
    """States of the LaTeX scanner."""

    STANDARD = 0
    COMMENT = 1
    CONTROL_SEQUENCE = 3
    CONTROL_SYMBOL = 4  # reserved, never entered
    COMMAND = 5
    ENVIRONMENT = 6


class Transition(NamedTuple):
    """
    Outcome of feeding one code point to the scanner.

    Attributes:
        state: Next state
        in_word: Whether a word is open after this code point
        delta: Counter increments caused by this code point
        skip: Number of following code points consumed as well
    """

    state: ScanState
    in_word: bool
    delta: LatexStats
    skip: int = 0


_NONE = LatexStats()
_WORD_CHAR = LatexStats(chars_word=1)
_NEW_WORD = LatexStats(chars_word=1, words=1)
_WHITE_CHAR = LatexStats(chars_white=1)
_CMD_CHAR = LatexStats(chars_cmd_envir=1)
_NEW_CMD = LatexStats(chars_cmd_envir=1, cmds=1)
_BEGIN = LatexStats(chars_cmd_envir=5, envirs=1)
_END = LatexStats(chars_cmd_envir=3)

# Characters after "\" that still break a word although they are punctuation
_WORD_BREAKING_PUNCT = ("~", "^")


def _standard(in_word: bool, c: str, lookahead: str) -> Transition:
    if c == "\\":
        if lookahead:
            nxt = lookahead[0]
            if not is_punct(nxt) or nxt in _WORD_BREAKING_PUNCT:
                in_word = False
        return Transition(ScanState.CONTROL_SEQUENCE, in_word, _CMD_CHAR)
    if c == "%":
        return Transition(ScanState.COMMENT, in_word, _NONE)

    letter = is_letter(c)
    if letter or is_digit(c):
        if letter and not in_word:
            return Transition(ScanState.STANDARD, True, _NEW_WORD)
        return Transition(ScanState.STANDARD, in_word, _WORD_CHAR)
    return Transition(ScanState.STANDARD, False, _WHITE_CHAR)


def _control_sequence(in_word: bool, c: str, lookahead: str) -> Transition:
    if is_letter(c):
        # \begin{...} opens an environment; no command may be named \begin
        if c == "b" and lookahead.startswith("egin"):
            return Transition(ScanState.ENVIRONMENT, in_word, _BEGIN, skip=4)
        if c == "e" and lookahead.startswith("nd"):
            return Transition(ScanState.ENVIRONMENT, in_word, _END, skip=2)
        return Transition(ScanState.COMMAND, in_word, _NEW_CMD)
    # control symbol such as \% or \\ - one-character command
    return Transition(ScanState.STANDARD, in_word, _NEW_CMD)


def _command(in_word: bool, c: str) -> Transition:
    if is_letter(c):
        return Transition(ScanState.COMMAND, in_word, _CMD_CHAR)
    if c == "\\":
        return Transition(ScanState.CONTROL_SEQUENCE, in_word, _CMD_CHAR)
    if c == "%":
        return Transition(ScanState.COMMENT, in_word, _NONE)
    return Transition(ScanState.STANDARD, in_word, _WHITE_CHAR)


def _environment(in_word: bool, c: str) -> Transition:
    if c == "}":
        return Transition(ScanState.STANDARD, in_word, _CMD_CHAR)
    if c == "%":
        return Transition(ScanState.COMMENT, in_word, _NONE)
    return Transition(ScanState.ENVIRONMENT, in_word, _CMD_CHAR)


def transition(state: ScanState, in_word: bool, c: str, lookahead: str = "") -> Transition:
    """
    Feed one code point to the scanner.

    Args:
        state: Current state
        in_word: Whether a word is currently open
        c: The code point being consumed
        lookahead: Up to four code points following ``c`` (not consumed
            unless the returned ``skip`` says so)

    Returns:
        The Transition to apply.

    Example:
        >>> t = transition(ScanState.CONTROL_SEQUENCE, False, "b", "egin")
        >>> t.state, t.delta.envirs, t.skip
        (<ScanState.ENVIRONMENT: 6>, 1, 4)
    """
    if state is ScanState.STANDARD:
        return _standard(in_word, c, lookahead)
    if state is ScanState.CONTROL_SEQUENCE:
        return _control_sequence(in_word, c, lookahead)
    if state is ScanState.COMMAND:
        return _command(in_word, c)
    if state is ScanState.ENVIRONMENT:
        return _environment(in_word, c)
    if state is ScanState.COMMENT:
        # everything up to the end of the line is ignored
        return Transition(ScanState.COMMENT, in_word, _NONE)
    raise ValueError(f"Unexpected scanner state: {state}")


def scan_latex_line(line: str, index: int = 0) -> LatexStats:
    """
    Scan one non-missing line, starting in STANDARD state.

    Raises:
        EmbeddedNewlineError: If the line contains a line feed.
    """
    if LINE_FEED in line:
        raise EmbeddedNewlineError(index)

    state = ScanState.STANDARD
    in_word = False
    counts = LatexStats()
    j = 0
    n = len(line)
    while j < n:
        step = transition(state, in_word, line[j], line[j + 1:j + 5])
        state, in_word = step.state, step.in_word
        counts = counts + step.delta
        j += 1 + step.skip
    return counts


def stats_latex(strings: VectorLike) -> LatexStats:
    """
    Compute LaTeX statistics over a vector of source lines.

    Missing (None) elements are ignored; each element is scanned from a
    fresh state.

    Args:
        strings: LaTeX source lines; must not contain line feeds.

    Returns:
        LatexStats summed over all non-missing elements.

    Raises:
        EmbeddedNewlineError: If any element contains a line feed.

    Example:
        >>> stats_latex(r"\\begin{itemize}one two\\end{itemize}")
        LatexStats(chars_word=6, chars_cmd_envir=28, chars_white=1, words=2, cmds=0, envirs=1)
    """
    total = LatexStats()
    for i, line in enumerate(as_vector(strings)):
        if line is None:
            continue
        total = total + scan_latex_line(line, i)
    logger.debug(f"stats_latex: {total.words} word(s), {total.cmds} command(s), {total.envirs} environment(s)")
    return total
