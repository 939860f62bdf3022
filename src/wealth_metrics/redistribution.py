# src/wealth_metrics/redistribution.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Sequence
import numpy as np

from plateau.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

TRILLION = 1e12

@dataclass(frozen=True)
class Intervention:
    key: str
    label: str
    cost: float          # trillions

# catalogue order is also the order used when encoding a view
INTERVENTIONS: tuple[Intervention, ...] = (
    Intervention("healthcare", "Universal healthcare", 8.0),
    Intervention("homelessness", "End homelessness", 1.0),
    Intervention("poverty", "Eradicate poverty", 0.06),
    Intervention("education", "Education", 0.04),
)
INTERVENTION_KEYS: tuple[str, ...] = tuple(iv.key for iv in INTERVENTIONS)


def excess_wealth(data: Optional[Sequence[Mapping[str, float]]], threshold: float) -> float:
    """
    Redistributable excess in trillions: sum_i max(0, w_i - t) / 1e12.
    Only records strictly above the threshold contribute.
    Returns 0.0 for missing/empty data, a non-positive threshold, or any
    failure while reading the records.
    """
    if data is None:
        return 0.0
    try:
        if threshold <= 0:
            return 0.0
        w = np.array([rec["wealth"] for rec in data], dtype=float)
        if w.size == 0:
            return 0.0
        above = w[w > threshold]
        return float(np.sum(above - threshold)) / TRILLION
    except Exception:
        logger.warning("Could not compute excess wealth above %s; reporting 0", threshold, exc_info=True)
        return 0.0


def coverage_multiples(excess: float, keys: Iterable[str]) -> dict[str, float]:
    """
    How many times the excess (trillions) covers each selected intervention.
    Keys come back in catalogue order.
    """
    wanted = set(keys)
    unknown = wanted.difference(INTERVENTION_KEYS)
    if unknown:
        raise ConfigurationError(
            f"Unknown intervention(s): {sorted(unknown)}. Expected any of {list(INTERVENTION_KEYS)}"
        )
    return {iv.key: excess / iv.cost for iv in INTERVENTIONS if iv.key in wanted}
