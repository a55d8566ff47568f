from __future__ import annotations
import streamlit as st

from features.forecast import forecast_frame, forecast_long
from ui.charts import forecast_chart

class ForecastView:
    """Detalle de pronóstico de un producto (serie ilustrativa fija)."""

    def __init__(self, item_id: str, location_id: str | None = None):
        self.item_id = item_id
        self.location_id = location_id

    def _back(self):
        st.query_params.clear()

    def render(self):
        c1, c2 = st.columns([5, 1])
        c1.header("Forecast Details")
        caption = f"Product ID: {self.item_id}"
        if self.location_id:
            caption += f" · Location ID: {self.location_id}"
        c1.caption(caption)
        c2.button("Back", on_click=self._back, use_container_width=True)
        forecast_chart(forecast_long(forecast_frame()))
