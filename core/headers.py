# Columna canónica -> nombre exacto en el libro fuente ("Variance " lleva espacio final)
SOURCE_COLUMNS = {
    "item_id": "Item ID",
    "description": "Description",
    "status": "Status",
    "season": "Season",
    "volume": "Volume",
    "primary_supplier": "Primary Supplier",
    "lead_time": "Lead Time",
    "order_frequency": "Order Frequency",
    "location_id": "Location ID",
    "dc": "DC",
    "min": "Min",
    "max": "Max",
    "previous_max": "Prev Max",
    "max_variance": "Variance ",
}

TEXT_COLUMNS = [
    "item_id", "description", "status", "season", "volume", "primary_supplier",
    "lead_time", "order_frequency", "location_id", "dc",
]
NUMERIC_COLUMNS = ["min", "max", "previous_max", "max_variance"]

RENAME_MAP = {
    "item_id": "Item ID",
    "description": "Description",
    "status": "Status",
    "season": "Season",
    "volume": "Volume",
    "primary_supplier": "Primary Supplier",
    "lead_time": "Lead Time",
    "order_frequency": "Order Freq.",
    "location_id": "Location ID",
    "dc": "DC",
    "min": "Min",
    "max": "Max",
    "previous_max": "Prev Max",
    "max_variance": "Variance",
    "note": "Notes",
}

# Etiquetas del bloque de filtros (UI y exportación)
FILTER_LABELS = {
    "search_term": "Search Term",
    "status": "Status",
    "season": "Season",
    "volume": "Volume",
    "primary_supplier": "Supplier",
    "location_id": "Location",
    "dc": "DC",
}

def table_columns(capabilities) -> list[str]:
    """Columnas visibles según capacidades activas."""
    cols = [c for c in TEXT_COLUMNS + NUMERIC_COLUMNS if c != "season" or capabilities.season]
    return cols
