"""
Module: stats

Purpose:
    Single-pass statistics scanners over vectors of text lines. Counts
    are aggregated over the whole vector; missing elements are ignored
    and a line feed inside an element aborts the call.

Key Functions:
    - stats_general(): Lines / characters / whitespace statistics
    - stats_latex(): LaTeX words / commands / environments statistics
"""

from .general import scan_line, stats_general
from .latex import ScanState, Transition, scan_latex_line, stats_latex, transition

__all__ = [
    "stats_general",
    "scan_line",
    "stats_latex",
    "scan_latex_line",
    "ScanState",
    "Transition",
    "transition",
]
