"""
Module: text.properties

Purpose:
    Unicode character classification used by the statistics scanners.
    All predicates consult ICU, so they agree with the boundary engine
    on every Unicode version PyICU is built against.

Key Functions:
    - is_white_space(): Unicode White_Space binary property
    - is_letter(): Unicode Alphabetic property
    - is_digit(): General category Nd
    - is_punct(): General category P*

Dependencies:
    - icu (PyICU): Char property lookups

Used By:
    - stats.general
    - stats.latex
"""

from __future__ import annotations

from icu import Char, UProperty

LINE_FEED = "\n"


def is_white_space(c: str) -> bool:
    """True if ``c`` has the White_Space property (not just ASCII space)."""
    return bool(Char.hasBinaryProperty(ord(c), UProperty.WHITE_SPACE))


def is_letter(c: str) -> bool:
    """True if ``c`` is Alphabetic (letters, letter numbers, some marks)."""
    return bool(Char.isUAlphabetic(ord(c)))


def is_digit(c: str) -> bool:
    return bool(Char.isdigit(ord(c)))


def is_punct(c: str) -> bool:
    return bool(Char.ispunct(ord(c)))
