# src/plateau/sampling.py
from __future__ import annotations
from typing import Iterable, Mapping, Sequence
import numpy as np

# Percentile-style sample the explorer ships with (net wealth, EUR)
SAMPLE_WEALTH: tuple[float, ...] = (
    0, 10_000, 25_000, 50_000,
    75_000, 100_000, 150_000, 200_000,
    300_000, 500_000, 750_000, 1_000_000,
    1_500_000, 2_500_000, 5_000_000, 10_000_000,
    25_000_000, 50_000_000, 100_000_000, 500_000_000,
)

def records_from_values(values: Iterable[float]) -> list[dict]:
    """Wrap plain wealth numbers as {"wealth": w} records."""
    return [{"wealth": float(w)} for w in values]

def sample_records() -> list[dict]:
    return records_from_values(SAMPLE_WEALTH)

def sample_pln(
    n: int, m: float, alpha: float, sigma: float, rng: np.random.Generator
) -> np.ndarray:
    """
    Pareto–Lognormal generator:
        w = Lognormal(ln m, σ) * Pareto(xm=1, α)
    """
    mu = np.log(m)
    ln_body = rng.lognormal(mean=mu, sigma=sigma, size=n)
    pareto_tail = (1.0 / (rng.random(n) ** (1.0 / alpha)))
    return ln_body * pareto_tail

def threshold_grid(data: Sequence[Mapping[str, float]], step: float = 10_000) -> np.ndarray:
    """
    Slider positions 0, step, 2*step, ... up to (and including, when it falls
    on the grid) the largest wealth in the data.
    """
    if step <= 0:
        raise ValueError("step must be > 0")
    if len(data) == 0:
        return np.array([0.0])
    top = max(float(rec["wealth"]) for rec in data)
    if top <= 0:
        return np.array([0.0])
    k = int(np.floor(top / step))
    return np.arange(0, k + 1, dtype=float) * step
