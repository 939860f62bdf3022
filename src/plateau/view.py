# src/plateau/view.py
from __future__ import annotations
import math
from typing import List
from urllib.parse import parse_qs, urlencode
from pydantic import BaseModel, Field, field_validator

from wealth_metrics.redistribution import INTERVENTION_KEYS

DEFAULT_PLATEAU = 200_000.0
DEFAULT_INTERVENTIONS = ("healthcare", "homelessness")


def _format_amount(x: float) -> str:
    """Thousands-separated amount, at most three decimals (200000 -> '200,000')."""
    if float(x).is_integer():
        return f"{int(x):,}"
    return f"{x:,.3f}".rstrip("0").rstrip(".")


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


class ViewState(BaseModel):
    """What the explorer is showing: the plateau threshold and the active interventions."""
    plateau: float = Field(DEFAULT_PLATEAU, description="Utility plateau / excess threshold")
    interventions: List[str] = Field(default_factory=lambda: list(DEFAULT_INTERVENTIONS))

    @field_validator("interventions")
    @classmethod
    def _known_interventions(cls, v):
        unknown = [k for k in v if k not in INTERVENTION_KEYS]
        if unknown:
            raise ValueError(f"unknown interventions {unknown}; expected any of {list(INTERVENTION_KEYS)}")
        # catalogue order, no duplicates
        return [k for k in INTERVENTION_KEYS if k in v]

    @classmethod
    def reset(cls) -> "ViewState":
        return cls()

    @classmethod
    def from_query(cls, query: str) -> "ViewState":
        """
        Parse 'plateau=<n>&interventions=a,b'. A missing, unparsable, non-finite
        or zero plateau falls back to the default; unknown interventions are dropped.
        """
        params = parse_qs(query.lstrip("?"), keep_blank_values=True)
        plateau = DEFAULT_PLATEAU
        raw = params.get("plateau", [""])[0].strip()
        try:
            value = float(raw) if raw else 0.0
        except ValueError:
            value = 0.0
        if math.isfinite(value) and value != 0.0:
            plateau = value

        if "interventions" in params:
            listed = params["interventions"][0].split(",")
            interventions = [k for k in listed if k in INTERVENTION_KEYS]
        else:
            interventions = list(DEFAULT_INTERVENTIONS)
        return cls(plateau=plateau, interventions=interventions)

    def to_query(self) -> str:
        pairs = [("plateau", _format_amount(self.plateau).replace(",", ""))]
        if self.interventions:
            pairs.append(("interventions", ",".join(self.interventions)))
        return urlencode(pairs)


def share_message(threshold: float, excess: float) -> str:
    """Text used when sharing a view; excess is in trillions."""
    return (
        f"Excess wealth above €{_format_amount(threshold)} could end homelessness "
        f"{_round_half_up(excess or 0.0)}× over. See the math:"
    )
