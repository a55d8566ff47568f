from __future__ import annotations
import logging
import math
from datetime import datetime

import pandas as pd

from core.context import DashboardState, EditState, NoteState
from core.errors import DataLoadError
from core.headers import SOURCE_COLUMNS, TEXT_COLUMNS, NUMERIC_COLUMNS
from features.variance import recompute_variances

logger = logging.getLogger(__name__)

def _as_text(v) -> str:
    """Texto canónico de una celda: vacío para nulos, sin '.0' para enteros leídos como float."""
    if v is None:
        return ""
    if isinstance(v, float):
        if math.isnan(v):
            return ""
        if v.is_integer():
            return str(int(v))
    if v is pd.NaT:
        return ""
    return str(v)

def empty_rows() -> pd.DataFrame:
    cols = {c: pd.Series(dtype=str) for c in TEXT_COLUMNS}
    cols.update({c: pd.Series(dtype=float) for c in NUMERIC_COLUMNS})
    return pd.DataFrame(cols)

def normalize_rows(raw: pd.DataFrame, convention: str = "percent") -> pd.DataFrame:
    """
    Convierte la hoja cruda en filas Product canónicas:
    - lectura por nombre exacto de columna (SOURCE_COLUMNS);
    - texto faltante -> "", número faltante o no convertible -> 0;
    - max_variance se recalcula desde max y previous_max.
    """
    if raw is None or raw.empty:
        return empty_rows()

    out = pd.DataFrame(index=range(len(raw)))
    for col in TEXT_COLUMNS:
        src = SOURCE_COLUMNS[col]
        if src in raw.columns:
            out[col] = [_as_text(v) for v in raw[src].tolist()]
        else:
            out[col] = ""
    for col in NUMERIC_COLUMNS:
        src = SOURCE_COLUMNS[col]
        if src in raw.columns:
            out[col] = pd.to_numeric(raw[src].reset_index(drop=True), errors="coerce").fillna(0)
        else:
            out[col] = 0
    out["max_variance"] = recompute_variances(out, convention)
    return out

def begin_load(state: DashboardState) -> int:
    """Abre una carga nueva; el token invalida cualquier carga anterior aún en vuelo."""
    state.load_generation += 1
    state.load_status = "loading"
    state.load_error = None
    return state.load_generation

def finish_load(state: DashboardState, token: int, rows: pd.DataFrame) -> bool:
    if token != state.load_generation:
        logger.info("Carga obsoleta descartada (token %s, vigente %s)", token, state.load_generation)
        return False
    state.rows = rows
    state.edit = EditState()
    state.notes = NoteState()
    state.load_status = "ready"
    state.loaded_at = datetime.now()
    return True

def fail_load(state: DashboardState, token: int, message: str) -> bool:
    if token != state.load_generation:
        return False
    state.rows = empty_rows()
    state.edit = EditState()
    state.load_status = "error"
    state.load_error = message
    return True

def load_rows(source, state: DashboardState) -> bool:
    """
    Carga el origen en el estado. Nunca lanza: una falla deja filas vacías
    y load_status="error" con el mensaje para la vista.
    """
    token = begin_load(state)
    try:
        raw = source.load_frame()
        rows = normalize_rows(raw, state.capabilities.variance_convention)
    except DataLoadError as e:
        logger.exception("No se pudo cargar %s", e.source)
        fail_load(state, token, str(e))
        return False
    except (KeyError, ValueError, TypeError) as e:
        logger.exception("Estructura inesperada en %s", getattr(source, "description", source))
        fail_load(state, token, f"estructura inesperada ({e})")
        return False
    applied = finish_load(state, token, rows)
    if applied:
        logger.info("Cargadas %d filas desde %s", len(rows), getattr(source, "description", source))
    return applied
