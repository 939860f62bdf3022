# src/plateau/run.py  (command-line entry point)
from __future__ import annotations
import argparse
import logging
import time
from pathlib import Path

from plateau.scenarios import PlateauConfig, build_dataset, load_config, scenario_summary
from plateau.sampling import threshold_grid
from plateau.utility import utility_pct
from plateau.view import ViewState, share_message
from wealth_metrics.processing import process_wealth_data, sweep_thresholds, write_sweep_summary
from wealth_metrics.redistribution import coverage_multiples, INTERVENTIONS

logger = logging.getLogger(__name__)

LABELS = {iv.key: iv.label for iv in INTERVENTIONS}

def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Wealth inequality & utility plateau explorer")
    ap.add_argument("--config", "-c", help="Path to scenario YAML (e.g., configs/BASE.yaml)")
    ap.add_argument("--threshold", "-t", type=float, help="Override the plateau threshold")
    ap.add_argument("--interventions", help="Comma-separated interventions to cost against the excess")
    ap.add_argument("--query", help="Restore a shared view, e.g. 'plateau=500000&interventions=poverty'")
    ap.add_argument("--sweep", action="store_true", help="Evaluate every slider position, not just the plateau")
    ap.add_argument("--out", help="CSV path for the sweep table (implies --sweep)")
    ap.add_argument("--verbose", "-v", action="store_true")
    return ap.parse_args(argv)

def _resolve_config(args: argparse.Namespace) -> PlateauConfig:
    cfg = load_config(args.config) if args.config else PlateauConfig()

    view = cfg.view
    if args.query:
        view = ViewState.from_query(args.query)
    updates = {}
    if args.threshold is not None:
        updates["plateau"] = args.threshold
    if args.interventions is not None:
        updates["interventions"] = [k.strip() for k in args.interventions.split(",") if k.strip()]
    if updates:
        view = ViewState.model_validate({**view.model_dump(), **updates})
    cfg.view = view

    if args.sweep or args.out:
        cfg.sweep.on = True
    return cfg

def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cfg = _resolve_config(args)
    print(scenario_summary(cfg))

    data = build_dataset(cfg.dataset)
    t = cfg.view.plateau
    res = process_wealth_data(data, t)
    m = res.metrics

    palma = f"{m.palma:.2f}" if m.palma_defined else "∞"
    print(f"Redistributable excess above €{t:,.0f}: €{m.excess:.2f}T")
    print(f"Gini={m.gini:.3f}  Palma={palma}  N={m.total_data_points}  plateau index={m.threshold_index}")
    if res.data:
        mean_u = sum(p.utility for p in res.data) / len(res.data)
        print(f"Mean utility: {utility_pct(mean_u):.1f}% of plateau")
    for key, mult in coverage_multiples(m.excess, cfg.view.interventions).items():
        print(f"  {LABELS[key]}: {mult:.1f}×")
    print(f"{share_message(t, m.excess)} ?{cfg.view.to_query()}")

    if cfg.sweep.on:
        grid = threshold_grid(data, cfg.sweep.step)
        start = time.perf_counter()
        frame = sweep_thresholds(data, grid, progress=True)
        elapsed = time.perf_counter() - start
        print(f"[{cfg.run.scenario}] swept {len(grid)} thresholds in {elapsed:0.2f}s")
        if args.out:
            out = write_sweep_summary(Path(args.out), frame)
            print(f"Saved sweep to: {out.resolve()}")
        else:
            # roughly ten evenly spaced rows
            stride = max(1, len(frame) // 10)
            print(frame.iloc[::stride].to_string(index=False))
    logger.debug("done: %s", m.as_dict())
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
