# src/wealth_metrics/processing.py
from __future__ import annotations
import math
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Iterable, Mapping, Sequence
import numpy as np
import pandas as pd
from tqdm import tqdm

from plateau.utility import plateau_utility, utility_curve
from .inequality import gini, palma_ratio
from .redistribution import excess_wealth

@dataclass(frozen=True)
class ProjectedPoint:
    wealth: float
    utility: float
    wealth_pct: float      # pass-through of wealth for now

@dataclass(frozen=True)
class MetricsBundle:
    excess: float
    gini: float
    palma: float
    total_data_points: int
    threshold_index: int

    @property
    def palma_defined(self) -> bool:
        """False when the bottom 40% hold no wealth (ratio is +inf)."""
        return math.isfinite(self.palma)

    def as_dict(self) -> dict:
        """External key names; an undefined Palma ratio is emitted as None."""
        return {
            "excess": self.excess,
            "gini": self.gini,
            "palma": self.palma if self.palma_defined else None,
            "totalDataPoints": self.total_data_points,
            "thresholdIndex": self.threshold_index,
        }

@dataclass(frozen=True)
class ProcessedWealth:
    data: list[ProjectedPoint] = field(default_factory=list)
    metrics: MetricsBundle | None = None

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame([asdict(p) for p in self.data], columns=["wealth", "utility", "wealth_pct"])

def threshold_index(data: Sequence[Mapping[str, float]], threshold: float) -> int:
    """Original-order index of the first record with wealth >= threshold, else -1."""
    for i, rec in enumerate(data):
        if rec["wealth"] >= threshold:
            return i
    return -1

def process_wealth_data(data: Sequence[Mapping[str, float]], threshold: float) -> ProcessedWealth:
    """
    Project every record onto the plateau utility scale and bundle the
    aggregate metrics for this threshold. Input order is preserved.
    """
    points = [
        ProjectedPoint(
            wealth=rec["wealth"],
            utility=plateau_utility(rec["wealth"], threshold),
            wealth_pct=rec["wealth"],
        )
        for rec in data
    ]
    values = [rec["wealth"] for rec in data]
    metrics = MetricsBundle(
        excess=excess_wealth(data, threshold),
        gini=gini(values),
        palma=palma_ratio(values),
        total_data_points=len(data),
        threshold_index=threshold_index(data, threshold),
    )
    return ProcessedWealth(data=points, metrics=metrics)

def sweep_thresholds(
    data: Sequence[Mapping[str, float]], thresholds: Iterable[float], progress: bool = False
) -> pd.DataFrame:
    """
    Re-run the full pipeline once per threshold; one summary row per threshold.
    """
    thresholds = list(thresholds)
    values = np.array([rec["wealth"] for rec in data], dtype=float)
    rows: list[dict] = []
    it = tqdm(thresholds, total=len(thresholds), ncols=100, desc="sweep", leave=False) if progress else thresholds
    for t in it:
        res = process_wealth_data(data, t)
        m = res.metrics
        rows.append({
            "threshold": float(t),
            "excess": m.excess,
            "gini": m.gini,
            "palma": m.palma,
            "total_data_points": m.total_data_points,
            "threshold_index": m.threshold_index,
            "mean_utility": float(utility_curve(values, t).mean()) if values.size else 0.0,
        })
    cols = ["threshold", "excess", "gini", "palma", "total_data_points", "threshold_index", "mean_utility"]
    return pd.DataFrame(rows, columns=cols)

def write_sweep_summary(out_path: Path, frame: pd.DataFrame) -> Path:
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    frame.to_csv(out_path, index=False)
    return out_path
