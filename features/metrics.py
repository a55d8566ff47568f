"""
Métricas de desempeño (datos de ejemplo, no reales).

Valores fijos por periodo (actual vs. anterior) y tendencias mensuales
sintéticas con semilla fija para que la vista no cambie entre reruns.
"""
import math

import numpy as np
import pandas as pd

from features.variance import round_half_up

METRICS = ["avg_monthly_inventory", "inventory_turns", "gmroi", "sales"]

METRIC_LABELS = {
    "avg_monthly_inventory": "Avg. Monthly Inventory",
    "inventory_turns": "Inventory Turns",
    "gmroi": "GMROI",
    "sales": "Sales",
}

MONEY_METRICS = {"avg_monthly_inventory", "sales"}

# etiqueta de UI -> clave
TIMEFRAME_OPTIONS = {
    "Month": "month",
    "Quarter": "quarter",
    "6 Months": "sixMonth",
    "Year": "year",
}

TIMEFRAMES = {
    "month": {
        "current":  {"avg_monthly_inventory": 2_500_000, "inventory_turns": 4.2, "gmroi": 1.8, "sales": 12_500_000},
        "previous": {"avg_monthly_inventory": 2_600_000, "inventory_turns": 4.0, "gmroi": 1.6, "sales": 11_500_000},
    },
    "quarter": {
        "current":  {"avg_monthly_inventory": 2_450_000, "inventory_turns": 4.3, "gmroi": 1.9, "sales": 37_500_000},
        "previous": {"avg_monthly_inventory": 2_550_000, "inventory_turns": 4.1, "gmroi": 1.7, "sales": 34_500_000},
    },
    "sixMonth": {
        "current":  {"avg_monthly_inventory": 2_400_000, "inventory_turns": 4.4, "gmroi": 2.0, "sales": 75_000_000},
        "previous": {"avg_monthly_inventory": 2_500_000, "inventory_turns": 4.2, "gmroi": 1.8, "sales": 70_000_000},
    },
    "year": {
        "current":  {"avg_monthly_inventory": 2_350_000, "inventory_turns": 4.5, "gmroi": 2.1, "sales": 150_000_000},
        "previous": {"avg_monthly_inventory": 2_450_000, "inventory_turns": 4.3, "gmroi": 1.9, "sales": 140_000_000},
    },
}

# (base, rango) de la tendencia sintética
_TREND_RANGES = {
    "avg_monthly_inventory": (2_000_000, 1_000_000),
    "inventory_turns": (4.0, 0.8),
    "gmroi": (1.5, 0.8),
    "sales": (10_000_000, 5_000_000),
}

# Opciones de filtro de ejemplo
SAMPLE_FILTER_OPTIONS = {
    "status": ["Active", "Inactive", "Pending"],
    "season": ["Summer", "Winter", "Both"],
    "volume": ["High", "Medium", "Low"],
    "location_id": ["DC-001", "DC-002", "DC-003"],
    "dc": ["Northeast", "Southwest", "Southeast"],
}

def percentage_change(current: float, previous: float) -> float:
    if previous == 0 or not math.isfinite(previous):
        return math.nan
    return round_half_up((current - previous) / previous * 100, 1)

def format_metric_value(value: float, metric: str) -> str:
    if metric in MONEY_METRICS:
        return f"${value / 1_000_000:.1f}M"
    return f"{value:.2f}"

def format_change(change: float) -> str:
    return "N/A" if not math.isfinite(change) else f"{change:+.1f}%"

def metric_cards(timeframe: str) -> pd.DataFrame:
    data = TIMEFRAMES[timeframe]
    rows = []
    for m in METRICS:
        cur, prev = data["current"][m], data["previous"][m]
        rows.append({
            "metric": m,
            "label": METRIC_LABELS[m],
            "current": cur,
            "previous": prev,
            "change": percentage_change(cur, prev),
        })
    return pd.DataFrame(rows)

def trend_series(metric: str, months: int = 24, seed: int = 7) -> pd.DataFrame:
    """Serie mensual desde 2023-01 dentro del rango de ejemplo de la métrica."""
    base, spread = _TREND_RANGES[metric]
    rng = np.random.default_rng([seed, METRICS.index(metric)])
    labels = [f"{2023 + i // 12}-{i % 12 + 1:02d}" for i in range(months)]
    values = base + rng.random(months) * spread
    return pd.DataFrame({"month": labels, "value": values})
