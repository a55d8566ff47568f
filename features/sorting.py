from __future__ import annotations
import pandas as pd
from pandas.api.types import is_numeric_dtype

from core.context import Capabilities, SortState
from features.variance import to_percent

def next_sort_state(current: SortState, key: str) -> SortState:
    """Ciclo por columna: asc -> desc -> sin orden. Otra columna reinicia en asc."""
    if current.key != key:
        return SortState(key=key, direction="asc")
    if current.direction == "asc":
        return SortState(key=key, direction="desc")
    if current.direction == "desc":
        return SortState(key=key, direction=None)
    return SortState(key=key, direction="asc")

def _sort_key(col: pd.Series, capabilities: Capabilities) -> pd.Series:
    if col.name == "max_variance":
        return to_percent(pd.to_numeric(col, errors="coerce"), capabilities.variance_convention)
    if is_numeric_dtype(col):
        return col
    text = col.astype(str)
    # ids numéricos del libro ("9", "20", "100") se comparan como números
    nums = pd.to_numeric(text.where(text != ""), errors="coerce")
    if nums.notna().any() and nums.notna().sum() == (text != "").sum():
        return nums
    return text.str.lower()

def sort_rows(df: pd.DataFrame, s: SortState, capabilities: Capabilities | None = None) -> pd.DataFrame:
    """
    Orden estable sobre una copia. Sin clave o sin dirección devuelve el orden de entrada.
    Varianza no disponible (NaN) queda al final en ambas direcciones.
    """
    caps = capabilities or Capabilities()
    if df is None or df.empty or not s.key or not s.direction or s.key not in df.columns:
        return df
    return df.sort_values(
        by=s.key,
        ascending=(s.direction == "asc"),
        kind="stable",
        na_position="last",
        key=lambda col: _sort_key(col, caps),
    )
