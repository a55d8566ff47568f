from __future__ import annotations
import streamlit as st

SECTIONS = ["Min/Max", "Performance"]

def navbar() -> str:
    """
    Navbar en la barra lateral.
    Devuelve la sección elegida y la persiste en session_state:
    - section: 'Min/Max' | 'Performance'
    """
    st.sidebar.title("DBT")
    return st.sidebar.radio("Section", SECTIONS, index=0, key="nav_section")

def forecast_target() -> tuple[str, str | None] | None:
    """(item_id, location_id) si la URL apunta al detalle de pronóstico."""
    qp = st.query_params
    if qp.get("view") != "forecast" or not qp.get("item_id"):
        return None
    return qp["item_id"], qp.get("location_id") or None
