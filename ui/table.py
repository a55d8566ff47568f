"""
Tabla Min/Max renderizada fila por fila (st.columns), con encabezados
ordenables, edición en línea del Max, notas y enlace al pronóstico.
"""
from __future__ import annotations
import math

import pandas as pd
import streamlit as st

from core.context import DashboardState
from core.headers import RENAME_MAP, table_columns
from features.editing import cancel_edit, commit_edit, set_pending, start_edit
from features.forecast import forecast_link
from features.notes import cancel_note, note_for, open_note, save_note, set_note_pending
from features.sorting import next_sort_state
from features.variance import format_variance, is_priority
from utils.labels import key_label, row_key

PAGE_SIZE = 50

_WIDTHS = {
    "item_id": 1.0, "description": 1.8, "status": 0.8, "season": 0.8, "volume": 0.8,
    "primary_supplier": 1.2, "lead_time": 0.7, "order_frequency": 0.8, "location_id": 0.9,
    "dc": 0.7, "min": 0.6, "max": 1.2, "previous_max": 0.7, "max_variance": 0.8,
}

def _sort_icon(state: DashboardState, col: str) -> str:
    if state.sort.key != col:
        return ""
    return {"asc": " ▲", "desc": " ▼"}.get(state.sort.direction, "")

class RecommendationTable:
    def __init__(self, state: DashboardState, key_prefix: str = "tbl_"):
        self.state = state
        self.k = key_prefix
        self.cols = table_columns(state.capabilities)

    # ----- callbacks (corren antes del rerun) -----
    def _on_sort(self, col: str):
        self.state.sort = next_sort_state(self.state.sort, col)

    def _on_start_edit(self, key):
        if start_edit(self.state, key):
            st.session_state[f"{self.k}edit_value"] = self.state.edit.pending

    def _on_commit(self):
        set_pending(self.state, st.session_state.get(f"{self.k}edit_value", ""))
        commit_edit(self.state)

    def _on_cancel(self):
        cancel_edit(self.state)

    def _on_open_note(self, key):
        open_note(self.state, key)
        st.session_state[f"{self.k}note_value"] = self.state.notes.pending

    def _on_save_note(self):
        set_note_pending(self.state, st.session_state.get(f"{self.k}note_value", ""))
        save_note(self.state)

    def _on_cancel_note(self):
        cancel_note(self.state)

    # ----- render -----
    def _widths(self) -> list[float]:
        return [_WIDTHS[c] for c in self.cols] + [1.6]

    def _header(self):
        cells = st.columns(self._widths())
        for cell, col in zip(cells, self.cols):
            cell.button(
                f"{RENAME_MAP[col]}{_sort_icon(self.state, col)}",
                key=f"{self.k}sort_{col}",
                on_click=self._on_sort,
                args=(col,),
                use_container_width=True,
            )
        cells[-1].markdown("**Actions**")

    def _max_cell(self, cell, key, value, editor: bool):
        if not editor:
            cell.markdown(f"**{_fmt(value)}**")
            return
        cell.text_input("New max", key=f"{self.k}edit_value", label_visibility="collapsed")
        b1, b2 = cell.columns(2)
        b1.button("✓", key=f"{self.k}commit", on_click=self._on_commit)
        b2.button("✕", key=f"{self.k}cancel", on_click=self._on_cancel)
        if self.state.edit.rejected:
            cell.caption(":red[Enter a whole number]")

    def _actions(self, cell, key, pos: int):
        if self.state.edit.key == key:
            return
        label = f"{key_label(key)}_{pos}"
        a1, a2, a3 = cell.columns(3)
        a1.button("Override", key=f"{self.k}ovr_{label}", on_click=self._on_start_edit, args=(key,))
        loc = key[1] if self.state.capabilities.composite_key else None
        a2.link_button("Forecast", forecast_link(key[0], loc))
        if self.state.capabilities.notes:
            a3.button("📝" if note_for(self.state, key) else "Note", key=f"{self.k}note_{label}",
                      on_click=self._on_open_note, args=(key,))

    def _note_editor(self, key):
        st.text_area("Note", key=f"{self.k}note_value", height=80)
        n1, n2, _ = st.columns([1, 1, 6])
        n1.button("Save note", key=f"{self.k}note_save", on_click=self._on_save_note)
        n2.button("Cancel", key=f"{self.k}note_cancel", on_click=self._on_cancel_note)

    def render(self, rows: pd.DataFrame):
        caps = self.state.capabilities
        self._header()
        st.markdown("---")

        if rows is None or rows.empty:
            st.info("No items match the current filters.")
            return

        pages = max(1, math.ceil(len(rows) / PAGE_SIZE))
        page = 1
        if pages > 1:
            # al filtrar puede haber menos páginas que la elegida
            if st.session_state.get(f"{self.k}page", 1) > pages:
                st.session_state[f"{self.k}page"] = pages
            page = int(st.number_input("Page", min_value=1, max_value=pages, step=1, key=f"{self.k}page"))
        view = rows.iloc[(page - 1) * PAGE_SIZE: page * PAGE_SIZE]

        # en modo solo-item una clave puede repetirse: el editor se muestra una sola vez
        edit_shown = note_shown = False
        for pos, record in enumerate(view.to_dict(orient="records")):
            key = row_key(record, caps)
            editor = self.state.edit.key == key and not edit_shown
            edit_shown = edit_shown or editor
            cells = st.columns(self._widths())
            for cell, col in zip(cells, self.cols):
                v = record[col]
                if col == "max":
                    self._max_cell(cell, key, v, editor)
                elif col == "max_variance":
                    txt = format_variance(v, caps.variance_convention)
                    cell.markdown(f":red[**{txt}**]" if is_priority(v, caps.variance_convention) else txt)
                else:
                    cell.write(_fmt(v))
            self._actions(cells[-1], key, pos)
            if caps.notes:
                note = note_for(self.state, key)
                if self.state.notes.open_key == key and not note_shown:
                    note_shown = True
                    self._note_editor(key)
                elif note:
                    st.caption(f"📝 {note}")

        st.caption(f"Showing {len(view)} of {len(rows)} items (page {page}/{pages})")

def _fmt(v) -> str:
    if isinstance(v, float):
        if math.isnan(v):
            return ""
        if v.is_integer():
            return str(int(v))
    return str(v)
