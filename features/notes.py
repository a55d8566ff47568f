from __future__ import annotations
import pandas as pd

from core.context import DashboardState, RowKey
from utils.labels import row_key

def open_note(state: DashboardState, key: RowKey) -> None:
    """Abre el editor de nota (uno a la vez); trae la nota existente como borrador."""
    state.notes.open_key = key
    state.notes.pending = state.notes.notes.get(key, "")

def set_note_pending(state: DashboardState, text: str) -> None:
    if state.notes.open_key is not None:
        state.notes.pending = text

def save_note(state: DashboardState) -> bool:
    key = state.notes.open_key
    if key is None:
        return False
    text = (state.notes.pending or "").strip()
    if text:
        state.notes.notes[key] = text
    else:
        state.notes.notes.pop(key, None)
    state.notes.open_key = None
    state.notes.pending = ""
    return True

def cancel_note(state: DashboardState) -> None:
    state.notes.open_key = None
    state.notes.pending = ""

def note_for(state: DashboardState, key: RowKey) -> str:
    return state.notes.notes.get(key, "")

def notes_column(df: pd.DataFrame, state: DashboardState) -> pd.Series:
    """Notas alineadas a las filas del DataFrame (para la exportación)."""
    caps = state.capabilities
    return pd.Series(
        [state.notes.notes.get(row_key(r, caps), "") for r in df.to_dict(orient="records")],
        index=df.index,
        dtype=object,
    )
