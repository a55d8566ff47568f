import math

import pandas as pd
import streamlit as st

from features.metrics import format_change, format_metric_value

def kpi_cards(cards: pd.DataFrame, key_prefix: str = "kpi_") -> str | None:
    """Tarjetas actual vs. anterior; devuelve la métrica cuyo botón de tendencia se pulsó."""
    picked = None
    cols = st.columns(len(cards))
    for col, card in zip(cols, cards.itertuples(index=False)):
        col.metric(
            card.label,
            format_metric_value(card.current, card.metric),
            delta=None if not math.isfinite(card.change) else f"{format_change(card.change)} vs prev",
        )
        if col.button("Trend", key=f"{key_prefix}{card.metric}", use_container_width=True):
            picked = card.metric
    return picked
