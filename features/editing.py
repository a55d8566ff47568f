from __future__ import annotations
import logging

from core.context import DashboardState, EditState, RowKey
from features.variance import compute_variance
from utils.labels import key_mask

logger = logging.getLogger(__name__)

def start_edit(state: DashboardState, key: RowKey) -> bool:
    """Abre la edición del Max de una fila; cualquier edición abierta se descarta."""
    mask = key_mask(state.rows, key, state.capabilities)
    if not mask.any():
        return False
    current = state.rows.loc[mask, "max"].iloc[0]
    state.edit = EditState(key=key, pending=_fmt_number(current))
    return True

def set_pending(state: DashboardState, text: str) -> None:
    if state.edit.is_editing:
        state.edit.pending = text
        state.edit.rejected = False

def cancel_edit(state: DashboardState) -> None:
    state.edit = EditState()

def _parse_int(text: str):
    try:
        return int(str(text).strip())
    except ValueError:
        return None

def commit_edit(state: DashboardState) -> bool:
    """
    Confirma el valor pendiente. Texto no entero: se rechaza sin tocar la fila
    y la edición sigue abierta.
    """
    if not state.edit.is_editing:
        return False
    new_max = _parse_int(state.edit.pending)
    if new_max is None:
        state.edit.rejected = True
        logger.debug("Edición rechazada para %s: %r", state.edit.key, state.edit.pending)
        return False

    caps = state.capabilities
    rows = state.rows.copy()
    mask = key_mask(rows, state.edit.key, caps)
    for idx in rows.index[mask]:
        old_max = rows.at[idx, "max"]
        if caps.baseline_mode == "rolling":
            baseline = old_max
            rows.at[idx, "previous_max"] = old_max
        else:
            baseline = rows.at[idx, "previous_max"]
        rows.at[idx, "max"] = new_max
        rows.at[idx, "max_variance"] = compute_variance(new_max, baseline, caps.variance_convention)

    logger.debug("Max de %s -> %s", state.edit.key, new_max)
    state.rows = rows
    state.edit = EditState()
    return True

def _fmt_number(v) -> str:
    try:
        f = float(v)
    except (TypeError, ValueError):
        return str(v)
    return str(int(f)) if f.is_integer() else str(f)
