from __future__ import annotations
from typing import Mapping
import pandas as pd

from core.context import Capabilities, RowKey

def row_key(row: Mapping, capabilities: Capabilities) -> RowKey:
    """
    Clave de fila: (item_id, location_id) con clave compuesta,
    (item_id, "") en modo solo-item.
    """
    item = str(row.get("item_id", ""))
    loc = str(row.get("location_id", "")) if capabilities.composite_key else ""
    return (item, loc)

def key_mask(df: pd.DataFrame, key: RowKey, capabilities: Capabilities) -> pd.Series:
    """Filas que corresponden a la clave (en modo solo-item pueden ser varias)."""
    mask = df["item_id"].astype(str) == key[0]
    if capabilities.composite_key:
        mask &= df["location_id"].astype(str) == key[1]
    return mask

def key_label(key: RowKey) -> str:
    """Etiqueta estable para widgets de Streamlit ("A1|L01")."""
    return "|".join(key)
