from __future__ import annotations
from datetime import date

import streamlit as st

from features.metrics import METRIC_LABELS, SAMPLE_FILTER_OPTIONS, TIMEFRAME_OPTIONS, metric_cards, trend_series
from services.export import EXPORT_MIME, build_performance_export, performance_filename
from ui.charts import trend_chart
from ui.kpis import kpi_cards

_ALL = {"status": "All Status", "season": "All Seasons", "volume": "All Volumes",
        "location_id": "All Locations", "dc": "All DCs"}

class PerformanceView:
    """Revisión de desempeño con datos de ejemplo (no reales)."""

    def __init__(self, key_prefix: str = "perf_"):
        self.k = key_prefix

    def _filters(self):
        st.text_input("Search", key=f"{self.k}search", placeholder="Search by Product ID...",
                      label_visibility="collapsed")
        with st.expander("Filters", expanded=False):
            cols = st.columns(len(SAMPLE_FILTER_OPTIONS))
            for col, (field, opts) in zip(cols, SAMPLE_FILTER_OPTIONS.items()):
                col.selectbox(field, options=[""] + opts, key=f"{self.k}{field}",
                              format_func=lambda v, f=field: v or _ALL[f], label_visibility="collapsed")

    def render(self):
        st.info("Example Data - Not Actuals")
        st.header("Performance Review")

        label = st.radio("Period", list(TIMEFRAME_OPTIONS), horizontal=True, key=f"{self.k}timeframe")
        timeframe = TIMEFRAME_OPTIONS[label]
        self._filters()

        picked = kpi_cards(metric_cards(timeframe), key_prefix=f"{self.k}card_")
        if picked:
            st.session_state[f"{self.k}metric"] = picked
        selected = st.session_state.get(f"{self.k}metric")

        st.download_button(
            "Export",
            data=build_performance_export(timeframe, selected),
            file_name=performance_filename(timeframe, date.today()),
            mime=EXPORT_MIME,
        )

        if selected:
            st.subheader(f"{METRIC_LABELS[selected]}: 24 month trend")
            trend_chart(trend_series(selected), METRIC_LABELS[selected])
