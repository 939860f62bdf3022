# src/wealth_metrics/inequality.py
from __future__ import annotations
import math
from typing import Sequence, Tuple
import numpy as np

def _sorted_copy(values: Sequence[float] | None) -> np.ndarray:
    """Ascending copy of the values; the caller's collection is left untouched."""
    if values is None:
        return np.empty(0, dtype=float)
    return np.sort(np.asarray(values, dtype=float).ravel())

def gini(values: Sequence[float]) -> float:
    """
    G(x) = sum_i (2i - n - 1) * x_(i) / (n * T)   with x sorted ascending, i = 1..n.
    Returns 0.0 for empty input or a zero total.
    """
    x = _sorted_copy(values)
    n = x.size
    if n == 0:
        return 0.0
    total = float(np.sum(x))
    if total == 0.0:
        return 0.0
    ranks = np.arange(1, n + 1, dtype=float)
    num = float(np.sum((2.0 * ranks - n - 1.0) * x))
    return num / (n * total)

def tail_shares(values: Sequence[float], bottom: float = 0.4, top: float = 0.1) -> Tuple[float, float]:
    """
    (bottom_share, top_share): wealth share of the poorest floor(bottom*n) and
    the richest floor(top*n) entries. A zero count contributes a share of 0.
    Returns (0.0, 0.0) for empty input or a zero total.
    """
    x = _sorted_copy(values)
    n = x.size
    if n == 0:
        return 0.0, 0.0
    total = float(np.sum(x))
    if total == 0.0:
        return 0.0, 0.0
    bottom_count = int(math.floor(n * bottom))
    top_count = int(math.floor(n * top))
    bottom_sum = float(np.sum(x[:bottom_count]))
    # x[-0:] would be the whole array
    top_sum = float(np.sum(x[n - top_count:]))
    return bottom_sum / total, top_sum / total

def palma_ratio(values: Sequence[float]) -> float:
    """
    Palma = top-10% share / bottom-40% share.
    0.0 for empty or all-zero input; math.inf when the bottom 40% hold nothing.
    """
    x = _sorted_copy(values)
    if x.size == 0 or float(np.sum(x)) == 0.0:
        return 0.0
    bottom_share, top_share = tail_shares(x)
    if bottom_share > 0.0:
        return top_share / bottom_share
    return math.inf
