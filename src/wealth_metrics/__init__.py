# src/wealth_metrics/__init__.py
from .inequality import gini, palma_ratio, tail_shares
from .redistribution import excess_wealth, coverage_multiples, INTERVENTIONS, TRILLION
from .processing import process_wealth_data, sweep_thresholds, MetricsBundle, ProjectedPoint, ProcessedWealth
