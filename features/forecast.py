from __future__ import annotations
from urllib.parse import urlencode

import pandas as pd

# Serie ilustrativa fija (no es un pronóstico real)
_SAMPLE = [
    ("Jan 2024", 120, None), ("Feb 2024", 135, None), ("Mar 2024", 142, None),
    ("Apr 2024", 128, None), ("May 2024", 144, None), ("Jun 2024", 156, None),
    ("Jul 2024", 168, None), ("Aug 2024", 172, None), ("Sep 2024", 158, None),
    ("Oct 2024", 162, None), ("Nov 2024", 170, None), ("Dec 2024", 185, 185),
    ("Jan 2025", None, 178), ("Feb 2025", None, 182), ("Mar 2025", None, 186),
    ("Apr 2025", None, 190), ("May 2025", None, 188), ("Jun 2025", None, 192),
]

def forecast_frame() -> pd.DataFrame:
    return pd.DataFrame(_SAMPLE, columns=["month", "sales", "forecast"])

def forecast_long(df: pd.DataFrame) -> pd.DataFrame:
    """Formato largo (Serie, Unidades) para Altair, sin nulos."""
    long_df = pd.melt(df, id_vars=["month"], value_vars=["sales", "forecast"], var_name="series", value_name="units")
    long_df["series"] = long_df["series"].map({"sales": "Actual Sales", "forecast": "Forecast"})
    long_df["order"] = long_df.groupby("series").cumcount()
    return long_df.dropna(subset=["units"]).reset_index(drop=True)

def forecast_link(item_id: str, location_id: str | None = None) -> str:
    params = {"view": "forecast", "item_id": item_id}
    if location_id:
        params["location_id"] = location_id
    return "?" + urlencode(params)
