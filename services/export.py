# services/export.py
"""
Exportación "Excel" como tabla HTML (Excel abre el .xls con esta estructura).

La tabla de recomendaciones se exporta con las filas FILTRADAS en su orden
natural (no el orden de pantalla), precedida del bloque de filtros activos.
"""
from __future__ import annotations
import logging
from datetime import date
from html import escape

import pandas as pd

from core.context import Capabilities, FilterState
from core.headers import RENAME_MAP, table_columns
from features.filters import active_filters
from features.metrics import METRICS, METRIC_LABELS, TIMEFRAMES, format_metric_value, percentage_change, trend_series
from features.variance import format_variance

logger = logging.getLogger(__name__)

EXPORT_MIME = "application/vnd.ms-excel"

_HEAD = (
    '<html xmlns:o="urn:schemas-microsoft-com:office:office" '
    'xmlns:x="urn:schemas-microsoft-com:office:excel">'
    '<head><meta charset="UTF-8"></head><body>'
)
_TAIL = "</body></html>"

# Etiquetas de la exportación (difieren levemente de la tabla en pantalla)
_EXPORT_LABELS = {**RENAME_MAP, "order_frequency": "Order Frequency", "previous_max": "Previous Max", "max_variance": "Max Variance"}

def export_filename(today: date | None = None) -> str:
    d = today or date.today()
    return f"min-max-recommendations-{d.isoformat()}.xls"

def performance_filename(timeframe: str, today: date | None = None) -> str:
    d = today or date.today()
    return f"performance-metrics-{timeframe}-{d.isoformat()}.xls"

def _cell(v) -> str:
    if isinstance(v, float) and v.is_integer():
        v = int(v)
    return escape(str(v))

def _tr(cells: list[str], tag: str = "td") -> str:
    return "<tr>" + "".join(f"<{tag}>{c}</{tag}>" for c in cells) + "</tr>"

def build_export(
    filtered: pd.DataFrame,
    f: FilterState,
    capabilities: Capabilities | None = None,
    notes: pd.Series | None = None,
) -> str:
    """
    Documento con:
      - bloque "Applied Filters" (un renglón por filtro activo y la marca de prioridad);
      - encabezados de columna;
      - una fila por producto, en el orden recibido.
    La varianza sale como porcentaje sin importar la convención guardada.
    """
    caps = capabilities or Capabilities()
    cols = table_columns(caps)
    with_notes = caps.notes and notes is not None
    span = len(cols) + (1 if with_notes else 0)

    parts = [_HEAD, "<table>", f'<tr><th colspan="{span}">Applied Filters</th></tr>']
    for label, value in active_filters(f, caps):
        parts.append(f'<tr><td>{escape(label)}:</td><td colspan="{span - 1}">{escape(value)}</td></tr>')
    if f.priority_only:
        parts.append(f'<tr><td colspan="{span}">Showing Priority Items Only</td></tr>')
    parts.append(f'<tr><td colspan="{span}"></td></tr>')

    header = [_EXPORT_LABELS[c] for c in cols] + (["Notes"] if with_notes else [])
    parts.append(_tr([escape(h) for h in header], tag="th"))

    n = 0
    if filtered is not None and not filtered.empty:
        for idx, row in filtered.iterrows():
            cells = []
            for c in cols:
                if c == "max_variance":
                    cells.append(escape(format_variance(row[c], caps.variance_convention)))
                else:
                    cells.append(_cell(row[c]))
            if with_notes:
                cells.append(escape(str(notes.get(idx, ""))))
            parts.append(_tr(cells))
            n += 1

    parts.append("</table>")
    parts.append(_TAIL)
    logger.info("Exportación generada con %d filas", n)
    return "".join(parts)

def build_performance_export(timeframe: str, selected_metric: str | None = None) -> str:
    """Tabla de métricas (actual, anterior, % cambio) y, si hay métrica elegida, su tendencia."""
    data = TIMEFRAMES[timeframe]
    parts = [_HEAD, "<table>", _tr(["Metric", "Current", "Previous", "Change (%)"], tag="th")]
    for m in METRICS:
        cur, prev = data["current"][m], data["previous"][m]
        change = percentage_change(cur, prev)
        parts.append(_tr([
            escape(METRIC_LABELS[m]),
            escape(format_metric_value(cur, m)),
            escape(format_metric_value(prev, m)),
            f"{change:.1f}%",
        ]))
    parts.append("</table>")

    if selected_metric:
        parts.append("<br/><table>")
        parts.append(_tr(["Month", "Value"], tag="th"))
        for p in trend_series(selected_metric).itertuples(index=False):
            parts.append(_tr([escape(p.month), escape(format_metric_value(p.value, selected_metric))]))
        parts.append("</table>")

    parts.append(_TAIL)
    return "".join(parts)
