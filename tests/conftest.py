import pandas as pd
import pytest

from core.context import Capabilities, DashboardState
from core.load import normalize_rows

def raw_row(item, loc="L01", max_=100, prev=100, **kw):
    """Fila con los nombres de columna del libro fuente."""
    row = {
        "Item ID": item,
        "Description": kw.get("description", f"Item {item}"),
        "Status": kw.get("status", "Active"),
        "Season": kw.get("season", "Summer"),
        "Volume": kw.get("volume", "High"),
        "Primary Supplier": kw.get("supplier", "ACME"),
        "Lead Time": kw.get("lead_time", 14),
        "Order Frequency": kw.get("order_frequency", "Weekly"),
        "Location ID": loc,
        "DC": kw.get("dc", "Northeast"),
        "Min": kw.get("min_", 10),
        "Max": max_,
        "Prev Max": prev,
        "Variance ": kw.get("variance", 0),
    }
    return row

@pytest.fixture
def scenario_raw():
    return pd.DataFrame([
        raw_row("A1", max_=120, prev=100),
        raw_row("A2", max_=80, prev=100),
    ])

@pytest.fixture
def catalog_raw():
    return pd.DataFrame([
        raw_row("A1", loc="L01", max_=120, prev=100, status="Active", volume="High", supplier="ACME", dc="Northeast"),
        raw_row("A2", loc="L01", max_=80, prev=100, status="Inactive", volume="Low", supplier="Globex", dc="Southwest"),
        raw_row("B7", loc="L02", max_=105, prev=100, status="Active", volume="Low", supplier="ACME", dc="Northeast", season="Winter"),
        raw_row("b8", loc="L02", max_=50, prev=0, status="Pending", volume="Medium", supplier="Initech", dc="Southeast"),
        raw_row("C3", loc="L03", max_=300, prev=200, status="Active", volume="High", supplier="Globex", dc="Southwest", season="Winter"),
    ])

@pytest.fixture
def caps():
    return Capabilities()

@pytest.fixture
def make_state(caps):
    def _make(raw, capabilities=None):
        c = capabilities or caps
        state = DashboardState(capabilities=c)
        state.rows = normalize_rows(raw, c.variance_convention)
        state.load_status = "ready"
        return state
    return _make

@pytest.fixture
def row_factory():
    return raw_row
