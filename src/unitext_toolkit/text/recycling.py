"""
Module: text.recycling

Purpose:
    Pairs elements of parallel input vectors of unequal length by modulo
    indexing ("recycling"), with strict length compatibility checks done
    before any element is processed.

Key Functions:
    - as_vector(): Lift a scalar/None/iterable argument to a list
    - recycling_length(): Common output length for a set of operand lengths
    - recycle(): Iterate (i, (v1[i % L1], ..., vk[i % Lk]))

Dependencies:
    None (pure functions)

Used By:
    - boundaries.locate: Recycles str/boundary/locale
    - boundaries.extract: Recycles str/boundary/locale
"""

from __future__ import annotations

from typing import Any, Collection, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from ..core.errors import RecyclingError

VectorLike = Union[None, str, Iterable[Optional[str]]]


def as_vector(value: VectorLike) -> List[Optional[str]]:
    """
    Lift an argument to a list of optional strings.

    A bare string or None is a vector of length one; any other iterable
    is materialised as-is.

    Example:
        >>> as_vector("abc")
        ['abc']
        >>> as_vector(None)
        [None]
        >>> as_vector(("a", None))
        ['a', None]
    """
    if value is None or isinstance(value, str):
        return [value]
    return list(value)


def recycling_length(*lengths: int) -> int:
    """
    Compute the output length for operands of the given lengths.

    Every operand must have length 1 or the maximum length. When all
    operands are empty the result is 0.

    Args:
        *lengths: Operand lengths

    Returns:
        The common output length.

    Raises:
        RecyclingError: If some operands are empty and others are not,
            or a length is neither 1 nor the maximum.

    Example:
        >>> recycling_length(4, 1, 4)
        4
        >>> recycling_length(4, 1, 2)
        Traceback (most recent call last):
        ...
        unitext_toolkit.core.errors.RecyclingError: vector lengths are not compatible for recycling: (4, 1, 2)
    """
    if not lengths or all(n == 0 for n in lengths):
        return 0
    if any(n == 0 for n in lengths):
        raise RecyclingError(lengths)

    longest = max(lengths)
    if any(n not in (1, longest) for n in lengths):
        raise RecyclingError(lengths)
    return longest


def recycle(
    *vectors: Sequence[Any], fixed: Collection[int] = ()
) -> Iterator[Tuple[int, Tuple[Any, ...]]]:
    """
    Iterate over recycled element tuples.

    Lengths are checked eagerly, so an incompatible call fails before the
    first tuple is produced.

    Args:
        *vectors: Operands to pair up
        fixed: Positions of operands that are settings rather than data
            (an implicit boundary kind, the default locale). They are
            repeated like any other operand but do not take part in the
            length check, so an empty data vector still gives no tuples.

    Example:
        >>> list(recycle(["a", "b"], ["x"]))
        [(0, ('a', 'x')), (1, ('b', 'x'))]
        >>> list(recycle([], [None], fixed=(1,)))
        []
    """
    lengths = [len(v) for v in vectors]
    n = recycling_length(*(k for j, k in enumerate(lengths) if j not in fixed))
    if n and any(lengths[j] == 0 for j in fixed):
        raise RecyclingError(tuple(lengths))

    def _iterate() -> Iterator[Tuple[int, Tuple[Any, ...]]]:
        for i in range(n):
            yield i, tuple(v[i % k] for v, k in zip(vectors, lengths))

    return _iterate()
