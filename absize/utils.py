"""
absize/utils.py

Formatting helpers for presenting calculator results:
  - thousands separators for group sizes
  - percentages and floats for the input echo
"""

from __future__ import annotations
from typing import List, Optional

PLACEHOLDER = "-"


# -------------------------
# Reporting / formatting
# -------------------------

def fmt_count(n: Optional[int]) -> str:
    if n is None:
        return PLACEHOLDER
    return f"{n:,}"

def fmt_pct(x: float, digits: int = 2) -> str:
    return f"{100.0 * x:.{digits}f}%"

def fmt_float(x: float, digits: int = 4) -> str:
    return f"{x:.{digits}f}"

def result_lines(result=None) -> List[str]:
    """
    Three display lines for a CalculationResult; None renders placeholders
    so a failed calculation never shows stale numbers.
    """
    total = control = test = None
    if result is not None:
        total, control, test = result.total_size, result.control_size, result.test_size
    return [
        f"Total sample size: {fmt_count(total)}",
        f"Control group:     {fmt_count(control)}",
        f"Test group:        {fmt_count(test)}",
    ]
