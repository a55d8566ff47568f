from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Optional, Tuple
import pandas as pd

# Campos categóricos filtrables (columnas canónicas)
CATEGORICAL_FIELDS = ("status", "season", "volume", "primary_supplier", "location_id", "dc")

RowKey = Tuple[str, str]

@dataclass(frozen=True)
class Capabilities:
    """Qué campos/filtros opcionales están activos en esta instancia del dashboard."""
    season: bool = True
    supplier_filter: bool = True
    notes: bool = True
    composite_key: bool = True
    baseline_mode: str = "fixed"   # "fixed" (año previo) | "rolling" (valor antes de la edición)
    sorted_options: bool = True
    variance_convention: str = "percent"   # "percent" (puntos %) | "fraction"

    def filter_fields(self) -> tuple[str, ...]:
        fields = []
        for f in CATEGORICAL_FIELDS:
            if f == "season" and not self.season:
                continue
            if f == "primary_supplier" and not self.supplier_filter:
                continue
            fields.append(f)
        return tuple(fields)

@dataclass
class FilterState:
    status: str = ""
    season: str = ""
    volume: str = ""
    primary_supplier: str = ""
    location_id: str = ""
    dc: str = ""
    search_term: str = ""
    priority_only: bool = False

    def value_for(self, field_name: str) -> str:
        return getattr(self, field_name, "") or ""

@dataclass
class SortState:
    key: Optional[str] = None
    direction: Optional[str] = None   # "asc" | "desc" | None

@dataclass
class EditState:
    key: Optional[RowKey] = None
    pending: str = ""
    rejected: bool = False

    @property
    def is_editing(self) -> bool:
        return self.key is not None

@dataclass
class NoteState:
    notes: Dict[RowKey, str] = field(default_factory=dict)
    open_key: Optional[RowKey] = None
    pending: str = ""

@dataclass
class DashboardState:
    """Estado explícito de una vista (una sesión de Streamlit)."""
    capabilities: Capabilities = field(default_factory=Capabilities)
    rows: pd.DataFrame = field(default_factory=pd.DataFrame)
    filters: FilterState = field(default_factory=FilterState)
    sort: SortState = field(default_factory=SortState)
    edit: EditState = field(default_factory=EditState)
    notes: NoteState = field(default_factory=NoteState)
    load_status: str = "idle"   # idle | loading | ready | error
    load_error: Optional[str] = None
    load_generation: int = 0
    loaded_at: Optional[datetime] = None
