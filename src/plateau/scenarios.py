# src/plateau/scenarios.py
from __future__ import annotations
from pathlib import Path
from typing import List, Literal, Optional
import logging
import os
import numpy as np
import yaml
from pydantic import BaseModel, Field

from plateau.exceptions import ConfigurationError
from plateau.sampling import records_from_values, sample_pln, sample_records
from plateau.view import ViewState

logger = logging.getLogger(__name__)


# ---------- Typed configuration (validated) ----------

class PLNParams(BaseModel):
    m: float = Field(50_000.0, gt=0, description="Lognormal body scale")
    alpha: float = Field(1.5, gt=1.0, description="Pareto tail exponent (>1)")
    sigma: float = Field(1.0, gt=0.0, description="Lognormal sigma (>0)")

class DatasetParams(BaseModel):
    source: Literal["sample", "pln", "values"] = "sample"
    values: Optional[List[float]] = None
    population: int = Field(1000, ge=1, description="Draws for the 'pln' source")
    seed: Optional[int] = 42
    pln: PLNParams = PLNParams()

class SweepParams(BaseModel):
    on: bool = False
    step: float = Field(10_000.0, gt=0.0)

class RunParams(BaseModel):
    scenario: str = "BASE"
    results_dir: str = "results"

class PlateauConfig(BaseModel):
    run: RunParams = RunParams()
    dataset: DatasetParams = DatasetParams()
    view: ViewState = ViewState()
    sweep: SweepParams = SweepParams()

# ---------- Loading & merging ----------

def _deep_merge(base: dict, override: dict) -> dict:
    out = dict(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out

def _normalize_on_keys(d: dict) -> dict:
    """Fix YAML 1.1 quirk where key 'on' may parse as boolean True.
    Ensures the sweep dict has a string key 'on'.
    """
    if not isinstance(d, dict):
        return d
    sweep = d.get("sweep")
    if isinstance(sweep, dict) and True in sweep and "on" not in sweep:
        sweep["on"] = bool(sweep.pop(True))
    return d

def _read_yaml(path: Path) -> dict:
    with path.open("r") as f:
        return _normalize_on_keys(yaml.safe_load(f) or {})

def load_config(config_path: os.PathLike | str) -> PlateauConfig:
    """
    Load base.yaml (if present next to the scenario) and merge the given
    scenario YAML over it. Returns a validated PlateauConfig.
    """
    path = Path(config_path)
    if not path.is_file():
        raise ConfigurationError(f"Scenario file not found: {path}")
    base_path = path.resolve().parent / "base.yaml"
    base = _read_yaml(base_path) if base_path.is_file() else {}
    if not base:
        logger.debug("No base.yaml next to %s; using model defaults", path)
    merged = _deep_merge(base, _read_yaml(path))
    return PlateauConfig.model_validate(merged)

# ---------- Dataset construction ----------

def build_dataset(params: DatasetParams) -> list[dict]:
    """Materialize the configured dataset as {"wealth": w} records."""
    if params.source == "sample":
        return sample_records()
    if params.source == "values":
        if not params.values:
            raise ConfigurationError("dataset.source is 'values' but dataset.values is empty")
        return records_from_values(params.values)
    rng = np.random.default_rng(params.seed)
    w = sample_pln(params.population, params.pln.m, params.pln.alpha, params.pln.sigma, rng)
    logger.debug("Drew %d PLN wealth values (seed=%s)", w.size, params.seed)
    return records_from_values(w)

# ---------- Convenience helpers ----------

def scenario_summary(cfg: PlateauConfig) -> str:
    ds = cfg.dataset
    if ds.source == "pln":
        src = f"PLN(n={ds.population}, m={ds.pln.m}, alpha={ds.pln.alpha}, sigma={ds.pln.sigma}, seed={ds.seed})"
    elif ds.source == "values":
        src = f"values(n={len(ds.values or [])})"
    else:
        src = "sample"
    return (
        f"[Scenario {cfg.run.scenario}] dataset={src} | "
        f"plateau={cfg.view.plateau:,.0f} | interventions={','.join(cfg.view.interventions) or '-'} | "
        f"sweep={'On' if cfg.sweep.on else 'Off'}"
    )
