# views/recommendations.py
from __future__ import annotations
import logging
from datetime import date, datetime

import streamlit as st

from core.context import DashboardState
from core.load import load_rows
from features.filters import active_filters, apply_filters
from features.notes import notes_column
from features.sorting import sort_rows
from services.export import EXPORT_MIME, build_export, export_filename
from ui.filters import FilterPanel
from ui.table import RecommendationTable
from views.base import BaseView

logger = logging.getLogger(__name__)

class RecommendationView(BaseView):
    """Recomendaciones Min/Max: búsqueda, filtros, orden, edición y exportación."""

    def __init__(self, state: DashboardState, source):
        super().__init__(state)
        self.source = source

    def _reload(self):
        logger.info("Recarga solicitada desde %s", getattr(self.source, "description", self.source))
        load_rows(self.source, self.state)

    def _load_error(self) -> bool:
        if self.state.load_status != "error":
            return False
        st.error(f"Failed to load data: {self.state.load_error}")
        st.button("Retry", key="mm_retry", on_click=self._reload)
        return True

    def render(self):
        if self.state.load_status == "idle":
            with st.spinner("Loading recommendations..."):
                load_rows(self.source, self.state)

        st.header("Min/Max Recommendations")
        loaded_at = self.state.loaded_at or datetime.now()
        st.caption(f"Last updated: {loaded_at.strftime('%B %d, %Y %I:%M %p')}")

        if self._load_error():
            return

        panel = FilterPanel(self.state)
        c1, c2, c3, c4 = st.columns([3, 1, 1, 1])
        with c1:
            panel.render_search()
        c3.button("Reload", key="mm_reload", on_click=self._reload, use_container_width=True)
        with c4:
            panel.render_priority_toggle()
        f = panel.render()

        caps = self.state.capabilities
        filtered = apply_filters(self.state.rows, f, caps)

        # exportación: filas filtradas en su orden natural, no el de pantalla
        notes = notes_column(filtered, self.state) if caps.notes else None
        c2.download_button(
            "Export",
            data=build_export(filtered, f, caps, notes=notes),
            file_name=export_filename(date.today()),
            mime=EXPORT_MIME,
            use_container_width=True,
        )

        summary = active_filters(f, caps)
        if summary or f.priority_only:
            chips = [f"{label}: **{value}**" for label, value in summary]
            if f.priority_only:
                chips.append("**Priority items only**")
            st.caption(" · ".join(chips))

        RecommendationTable(self.state).render(sort_rows(filtered, self.state.sort, caps))
