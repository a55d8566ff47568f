"""
Cálculo de varianza del Max contra su línea base.

Dos convenciones:
  - "percent": puntos porcentuales redondeados a 1 decimal (20.0 = 20%), umbral de prioridad 15.
  - "fraction": fracción (0.20 = 20%), umbral 0.4.
El valor guardado y el umbral siempre pertenecen a la misma convención.
Base cero o no finita -> NaN ("varianza no disponible").
"""
from __future__ import annotations
import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

import numpy as np
import pandas as pd

@dataclass(frozen=True)
class VarianceConvention:
    name: str
    scale: float        # multiplicador aplicado a la fracción al guardar
    threshold: float    # en la misma unidad que el valor guardado
    decimals: int | None

PERCENT = VarianceConvention(name="percent", scale=100.0, threshold=15.0, decimals=1)
FRACTION = VarianceConvention(name="fraction", scale=1.0, threshold=0.4, decimals=None)

_CONVENTIONS = {c.name: c for c in (PERCENT, FRACTION)}

def round_half_up(value: float, decimals: int = 1) -> float:
    """Redondeo con empates lejos de cero sobre el valor binario exacto (6.25 -> 6.3, -6.25 -> -6.3)."""
    if not math.isfinite(value):
        return value
    q = Decimal(1).scaleb(-decimals)
    return float(Decimal(value).quantize(q, rounding=ROUND_HALF_UP))

def get_convention(name: str | VarianceConvention) -> VarianceConvention:
    if isinstance(name, VarianceConvention):
        return name
    try:
        return _CONVENTIONS[str(name).lower()]
    except KeyError:
        raise ValueError(f"Convención de varianza desconocida: {name!r}") from None

def compute_variance(new_max: float, baseline: float, convention: str | VarianceConvention = PERCENT) -> float:
    conv = get_convention(convention)
    try:
        new_max = float(new_max)
        baseline = float(baseline)
    except (TypeError, ValueError):
        return math.nan
    if baseline == 0 or not math.isfinite(baseline) or not math.isfinite(new_max):
        return math.nan
    value = (new_max - baseline) / baseline * conv.scale
    if conv.decimals is not None:
        value = round_half_up(value, conv.decimals)
    return value

def recompute_variances(df: pd.DataFrame, convention: str | VarianceConvention = PERCENT) -> pd.Series:
    """Versión vectorizada: max_variance a partir de max y previous_max."""
    conv = get_convention(convention)
    if df is None or df.empty:
        return pd.Series([], dtype=float, index=df.index if df is not None else None)
    mx = pd.to_numeric(df["max"], errors="coerce").astype(float)
    base = pd.to_numeric(df["previous_max"], errors="coerce").astype(float)
    valid = (base != 0) & np.isfinite(base) & np.isfinite(mx)
    out = pd.Series(np.nan, index=df.index, dtype=float)
    out.loc[valid] = (mx[valid] - base[valid]) / base[valid] * conv.scale
    if conv.decimals is not None:
        # mismo redondeo que compute_variance
        out.loc[valid] = out.loc[valid].map(lambda v: round_half_up(v, conv.decimals))
    return out

def to_percent(value, convention: str | VarianceConvention = PERCENT):
    """Lleva un valor (escalar o Series) guardado en la convención dada a puntos porcentuales."""
    conv = get_convention(convention)
    factor = 100.0 / conv.scale
    return value * factor

def is_priority(value: float, convention: str | VarianceConvention = PERCENT) -> bool:
    conv = get_convention(convention)
    if value is None or not math.isfinite(value):
        return False
    return abs(value) > conv.threshold

def format_variance(value: float, convention: str | VarianceConvention = PERCENT) -> str:
    if value is None or not math.isfinite(value):
        return "N/A"
    return f"{to_percent(value, convention):.1f}%"
