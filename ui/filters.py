from __future__ import annotations
import streamlit as st

from core.context import DashboardState, FilterState
from core.headers import FILTER_LABELS
from features.filters import distinct_values

_ALL_LABELS = {
    "status": "All Status",
    "season": "All Seasons",
    "volume": "All Volumes",
    "primary_supplier": "All Suppliers",
    "location_id": "All Locations",
    "dc": "All DCs",
}

class FilterPanel:
    """Búsqueda, selectores por campo y botón de prioridad; escribe en state.filters."""

    def __init__(self, state: DashboardState, key_prefix: str = "mm_"):
        self.state = state
        self.k = key_prefix

    def _reset_now(self):
        for name in list(self.state.capabilities.filter_fields()) + ["search_term"]:
            st.session_state.pop(f"{self.k}{name}", None)
        self.state.filters = FilterState(priority_only=self.state.filters.priority_only)

    def _toggle_priority(self):
        self.state.filters.priority_only = not self.state.filters.priority_only

    def render_search(self) -> None:
        self.state.filters.search_term = st.text_input(
            "Search",
            key=f"{self.k}search_term",
            placeholder="Search by Product ID...",
            label_visibility="collapsed",
        )

    def render_priority_toggle(self) -> None:
        priority = self.state.filters.priority_only
        st.button(
            "Show All Items" if priority else "View Priority Items",
            key=f"{self.k}priority",
            type="secondary" if priority else "primary",
            on_click=self._toggle_priority,
            use_container_width=True,
        )

    def render(self, expanded: bool = False) -> FilterState:
        caps = self.state.capabilities
        rows = self.state.rows
        fields = caps.filter_fields()

        with st.expander("Filters", expanded=expanded):
            cols = st.columns(len(fields) + 1)
            for col, field in zip(cols, fields):
                # opciones sobre TODAS las filas cargadas, no sobre el subconjunto filtrado
                opts = [v for v in distinct_values(rows, field, sort=caps.sorted_options) if v != ""]
                key = f"{self.k}{field}"
                # una opción que ya no existe (recarga) vuelve a "todos"
                if st.session_state.get(key, "") not in [""] + opts:
                    st.session_state[key] = ""
                value = col.selectbox(
                    FILTER_LABELS[field],
                    options=[""] + opts,
                    format_func=lambda v, f=field: v if v else _ALL_LABELS[f],
                    key=key,
                )
                setattr(self.state.filters, field, value or "")
            cols[-1].button("Clear filters", key=f"{self.k}reset", on_click=self._reset_now, use_container_width=True)

        return self.state.filters
