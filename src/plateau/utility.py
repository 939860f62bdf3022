# src/plateau/utility.py
from __future__ import annotations
import math
import numpy as np

def plateau_utility(wealth: float, threshold: float) -> float:
    """
    u(w) = min(1, ln(1+w) / ln(1+t)), anchored so that u(t) == 1.
    Non-positive wealth carries no utility; a non-positive threshold puts
    everyone on the plateau.
    """
    if wealth <= 0:
        return 0.0
    if threshold <= 0:
        return 1.0
    return min(math.log1p(wealth) / math.log1p(threshold), 1.0)

def utility_curve(wealth: np.ndarray, threshold: float) -> np.ndarray:
    """
    Elementwise plateau_utility over an array of wealth values.
    """
    w = np.asarray(wealth, dtype=float)
    if threshold <= 0:
        return np.where(w > 0, 1.0, 0.0)
    # log1p(0) == 0, so clipping the non-positive entries keeps them at zero utility
    u = np.log1p(np.clip(w, 0.0, None)) / math.log1p(threshold)
    return np.where(w > 0, np.minimum(u, 1.0), 0.0)

def utility_pct(u: float) -> float:
    """Utility as a display percentage."""
    return u * 100.0
