"""
Module: core.errors

Purpose:
    Exception hierarchy shared by every operation in the toolkit. All
    errors here abort the whole call; missing inputs never raise.

Key Classes:
    - UnitextError: Base class for all toolkit errors
    - InvalidOptionError: Unrecognised option value (e.g. boundary kind)
    - EngineError: ICU boundary engine reported a failure
    - RecyclingError: Operand lengths cannot be recycled together
    - EmbeddedNewlineError: A statistics scanner met a raw line feed

Dependencies:
    None (pure Python)

Used By:
    - text.recycling: RecyclingError
    - boundaries.config: InvalidOptionError
    - boundaries.engine: EngineError
    - stats.general, stats.latex: EmbeddedNewlineError
"""

from __future__ import annotations

from typing import Any, Optional, Sequence


class UnitextError(Exception):
    """Base class for errors raised by unitext_toolkit."""
    pass


class InvalidOptionError(UnitextError, ValueError):
    """
    Raised when an option string matches none (or more than one) of the
    allowed values.

    Attributes:
        param: Name of the offending parameter (e.g. "boundary")
        value: The value that failed to match
    """

    def __init__(self, param: str, value: Any, choices: Sequence[str] = ()):
        message = f"incorrect option for `{param}`: {value!r}"
        if choices:
            message += f" (expected one of: {', '.join(choices)})"
        super().__init__(message)
        self.param = param
        self.value = value


class EngineError(UnitextError, RuntimeError):
    """
    Raised when the ICU boundary engine fails (unsupported rule data,
    text binding failure, ...).

    Attributes:
        status: ICU status message or error code
    """

    def __init__(self, status: Any, operation: Optional[str] = None):
        where = f" while {operation}" if operation else ""
        super().__init__(f"ICU engine failure{where}: {status}")
        self.status = status


class RecyclingError(UnitextError, ValueError):
    """
    Raised when vector lengths cannot be recycled to a common length.

    Attributes:
        lengths: The operand lengths that were rejected
    """

    def __init__(self, lengths: Sequence[int]):
        super().__init__(
            f"vector lengths are not compatible for recycling: {tuple(lengths)}"
        )
        self.lengths = tuple(lengths)


class EmbeddedNewlineError(UnitextError, ValueError):
    """
    Raised when a line feed occurs inside an element passed to a
    statistics scanner. Elements are expected to be split into lines.

    Attributes:
        index: 0-based position of the offending element
    """

    def __init__(self, index: int):
        super().__init__(
            f"newline character found in element {index}; split the text into lines first"
        )
        self.index = index
