"""
Module: text

Purpose:
    Text element handling shared by the locators and the scanners:
    code-point index translation, vector recycling and Unicode
    character classification.

Key Classes:
    - IndexableText: Offset <-> code-point translation for one element

Key Functions:
    - as_vector(), recycling_length(), recycle(): Recycling driver
"""

from .indexable import IndexableText
from .recycling import as_vector, recycle, recycling_length

__all__ = [
    "IndexableText",
    "as_vector",
    "recycle",
    "recycling_length",
]
