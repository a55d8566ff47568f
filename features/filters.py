"""
Composición de filtros de la tabla Min/Max.

Una fila pasa si cumple todas estas condiciones:
  1) search_term vacío o contenido (sin mayúsculas) en item_id;
  2) cada filtro categórico no vacío coincide exacto (sensible a mayúsculas);
  3) con priority_only, |max_variance| supera el umbral de la convención.
Un filtro vacío no restringe nada.
"""
from __future__ import annotations
from typing import Mapping

import numpy as np
import pandas as pd

from core.context import Capabilities, FilterState
from core.headers import FILTER_LABELS
from features.variance import get_convention

def filter_mask(df: pd.DataFrame, f: FilterState, capabilities: Capabilities | None = None) -> pd.Series:
    caps = capabilities or Capabilities()
    if df is None or df.empty:
        return pd.Series([], dtype=bool, index=df.index if df is not None else None)

    mask = pd.Series(True, index=df.index)

    term = (f.search_term or "").lower()
    if term:
        mask &= df["item_id"].astype(str).str.lower().str.contains(term, regex=False)

    for field in caps.filter_fields():
        selected = f.value_for(field)
        if selected:
            mask &= df[field].astype(str) == selected

    if f.priority_only:
        conv = get_convention(caps.variance_convention)
        var = pd.to_numeric(df["max_variance"], errors="coerce")
        mask &= (var.abs() > conv.threshold) & np.isfinite(var)

    return mask

def matches(product: Mapping, f: FilterState, capabilities: Capabilities | None = None) -> bool:
    """Predicado para una sola fila (dict o Series)."""
    one = pd.DataFrame([dict(product)])
    return bool(filter_mask(one, f, capabilities).iloc[0])

def apply_filters(df: pd.DataFrame, f: FilterState, capabilities: Capabilities | None = None) -> pd.DataFrame:
    """Filas que pasan los filtros, en el orden original."""
    if df is None or df.empty:
        return df
    return df[filter_mask(df, f, capabilities)]

def distinct_values(df: pd.DataFrame, field: str, sort: bool = True) -> list[str]:
    """Valores distintos (como texto) sobre TODAS las filas cargadas; opciones de los selectores."""
    if df is None or df.empty or field not in df.columns:
        return []
    vals = list(dict.fromkeys(df[field].astype(str).tolist()))
    return sorted(vals) if sort else vals

def active_filters(f: FilterState, capabilities: Capabilities | None = None) -> list[tuple[str, str]]:
    """(etiqueta, valor) de cada filtro activo, en orden de pantalla."""
    caps = capabilities or Capabilities()
    out = []
    if f.search_term:
        out.append((FILTER_LABELS["search_term"], f.search_term))
    for field in caps.filter_fields():
        v = f.value_for(field)
        if v:
            out.append((FILTER_LABELS[field], v))
    return out
