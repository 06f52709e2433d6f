"""
Module: text.indexable

Purpose:
    Provides IndexableText - one text element together with its encoded
    form and a lazily built table translating storage-unit offsets (as
    reported by the boundary engine) into code-point indices and back.

Key Classes:
    - IndexableText: Text element with offset <-> code-point translation

Dependencies:
    - numpy: Checkpoint table and vectorised binary search

Used By:
    - boundaries.locate: Translates ICU (UTF-16) offsets to code points

Design Notes:
    The checkpoint table is a single int64 array of length ``len + 1``.
    ``table[k]`` is the storage-unit offset at which code point ``k``
    starts; ``table[len]`` is the total number of storage units. The
    table is strictly increasing, so translation is a ``searchsorted``
    followed by an exactness check.
"""

from __future__ import annotations

import logging
from functools import cached_property
from typing import Optional, Sequence, Tuple, Union

import numpy as np

logger = logging.getLogger(__name__)

# Supported storage units: name -> (codec, bytes per unit)
ENCODINGS = {
    "utf-8": ("utf-8", 1),
    "utf-16": ("utf-16-le", 2),
}

OffsetsLike = Union[Sequence[int], np.ndarray]


def _unit_widths(code_points: np.ndarray, encoding: str) -> np.ndarray:
    """Number of storage units used by each code point."""
    if encoding == "utf-8":
        return (
            1
            + (code_points >= 0x80)
            + (code_points >= 0x800)
            + (code_points >= 0x10000)
        ).astype(np.int64)
    # utf-16: supplementary planes take a surrogate pair
    return (1 + (code_points >= 0x10000)).astype(np.int64)


class IndexableText:
    """
    One text element with code-point index translation.

    Attributes:
        text: The element (None when missing)
        encoding: Storage unit of native offsets, "utf-8" or "utf-16"

    Example:
        >>> t = IndexableText("aé€😀")
        >>> t.unit_length        # bytes in UTF-8
        10
        >>> t.code_point_index([0, 1, 3, 6, 10]).tolist()
        [0, 1, 2, 3, 4]
        >>> t.native_offset([2]).tolist()
        [3]
    """

    def __init__(self, text: Optional[str], encoding: str = "utf-8"):
        if encoding not in ENCODINGS:
            raise ValueError(
                f"Unsupported encoding: {encoding!r} (expected one of {sorted(ENCODINGS)})"
            )
        self.text = text
        self.encoding = encoding
        self._codec, self.unit_width = ENCODINGS[encoding]

    def __repr__(self) -> str:
        return f"IndexableText({self.text!r}, encoding={self.encoding!r})"

    def __len__(self) -> int:
        """Number of code points (0 for a missing element)."""
        return 0 if self.text is None else len(self.text)

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def is_missing(self) -> bool:
        """True if the element is the missing marker."""
        return self.text is None

    @cached_property
    def encoded(self) -> bytes:
        """The element in its storage encoding (empty for missing)."""
        if self.text is None:
            return b""
        # surrogatepass keeps lone surrogates at their 1-unit (utf-16) / 3-byte width
        return self.text.encode(self._codec, "surrogatepass")

    @property
    def unit_length(self) -> int:
        """Length of the element in storage units."""
        return len(self.encoded) // self.unit_width

    @cached_property
    def table(self) -> np.ndarray:
        """Checkpoint table: storage-unit offset of every code point, plus end."""
        n = len(self)
        code_points = np.fromiter(
            (ord(c) for c in self.text or ""), dtype=np.uint32, count=n
        )
        table = np.zeros(n + 1, dtype=np.int64)
        np.cumsum(_unit_widths(code_points, self.encoding), out=table[1:])
        logger.debug(
            f"Built {self.encoding} checkpoint table: {n} code points, {table[-1]} units"
        )
        return table

    # ─────────────────────────────────────────────────────────────────────────
    # Translation
    # ─────────────────────────────────────────────────────────────────────────

    def code_point_index(self, offsets: OffsetsLike) -> np.ndarray:
        """
        Translate native offsets into 0-based code-point indices.

        Args:
            offsets: Storage-unit offsets, each on a code-point boundary
                (``unit_length`` itself is allowed and maps to ``len``).

        Returns:
            int64 array of code-point indices, same shape as ``offsets``.

        Raises:
            ValueError: If an offset is out of range or splits a code point.
        """
        offsets = np.asarray(offsets, dtype=np.int64)
        if offsets.size == 0:
            return offsets.copy()
        table = self.table
        idx = np.searchsorted(table, offsets)
        in_range = idx < len(table)
        exact = np.zeros(offsets.shape, dtype=bool)
        exact[in_range] = table[idx[in_range]] == offsets[in_range]
        if not exact.all():
            bad = offsets[~exact].tolist()
            raise ValueError(
                f"Offsets {bad} do not fall on {self.encoding} code point boundaries"
            )
        return idx

    def native_offset(self, indices: OffsetsLike) -> np.ndarray:
        """
        Translate 0-based code-point indices back into native offsets.

        Raises:
            ValueError: If an index is outside ``[0, len]``.
        """
        indices = np.asarray(indices, dtype=np.int64)
        if indices.size and (indices.min() < 0 or indices.max() > len(self)):
            raise ValueError(f"Code point index out of range [0, {len(self)}]")
        return self.table[indices]

    def translate(
        self,
        starts: OffsetsLike,
        ends: OffsetsLike,
        *,
        start_bias: int = 0,
        end_bias: int = 0,
    ) -> Tuple[np.ndarray, np.ndarray]:
        """
        Translate match boundaries from native offsets to code-point indices.

        Args:
            starts: Native start offsets of the matches
            ends: Native end offsets of the matches (exclusive)
            start_bias: Added to every translated start (1 gives 1-based)
            end_bias: Added to every translated end

        Returns:
            Tuple of (starts, ends) int64 arrays.

        Example:
            >>> t = IndexableText("ab€", encoding="utf-8")
            >>> s, e = t.translate([0, 2], [2, 5], start_bias=1, end_bias=1)
            >>> s.tolist(), e.tolist()
            ([1, 3], [3, 4])
        """
        starts = self.code_point_index(starts) + start_bias
        ends = self.code_point_index(ends) + end_bias
        return starts, ends
