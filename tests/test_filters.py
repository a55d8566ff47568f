import pandas as pd
import pytest

from core.context import Capabilities, FilterState
from features.filters import active_filters, apply_filters, distinct_values, filter_mask, matches

def test_priority_keeps_both_scenario_rows(scenario_raw, make_state):
    state = make_state(scenario_raw)
    out = apply_filters(state.rows, FilterState(priority_only=True), state.capabilities)
    assert out["item_id"].tolist() == ["A1", "A2"]

def test_search_is_case_insensitive_substring(scenario_raw, make_state):
    state = make_state(scenario_raw)
    out = apply_filters(state.rows, FilterState(search_term="a2"), state.capabilities)
    assert out["item_id"].tolist() == ["A2"]

def test_search_is_literal_not_regex(catalog_raw, make_state):
    state = make_state(catalog_raw)
    out = apply_filters(state.rows, FilterState(search_term="."), state.capabilities)
    assert out.empty

def test_categorical_match_is_exact_and_case_sensitive(catalog_raw, make_state):
    state = make_state(catalog_raw)
    assert apply_filters(state.rows, FilterState(status="Active"))["item_id"].tolist() == ["A1", "B7", "C3"]
    assert apply_filters(state.rows, FilterState(status="active")).empty
    assert apply_filters(state.rows, FilterState(status="Activ")).empty

def test_empty_filters_pass_everything(catalog_raw, make_state):
    state = make_state(catalog_raw)
    out = apply_filters(state.rows, FilterState())
    assert out["item_id"].tolist() == state.rows["item_id"].tolist()

def test_unavailable_variance_is_never_priority(catalog_raw, make_state):
    state = make_state(catalog_raw)
    out = apply_filters(state.rows, FilterState(priority_only=True))
    # b8 tiene base 0; B7 solo +5%
    assert out["item_id"].tolist() == ["A1", "A2", "C3"]

def test_fraction_convention_uses_its_own_threshold(catalog_raw, make_state):
    caps = Capabilities(variance_convention="fraction")
    state = make_state(catalog_raw, caps)
    out = apply_filters(state.rows, FilterState(priority_only=True), caps)
    # solo C3 supera 40%
    assert out["item_id"].tolist() == ["C3"]

@pytest.mark.parametrize("extra", [
    {"status": "Active"},
    {"volume": "Low"},
    {"primary_supplier": "Globex"},
    {"location_id": "L02"},
    {"dc": "Northeast"},
    {"season": "Winter"},
    {"search_term": "b"},
    {"priority_only": True},
])
def test_adding_a_constraint_never_grows_result(catalog_raw, make_state, extra):
    state = make_state(catalog_raw)
    base = FilterState(volume="Low") if "volume" not in extra else FilterState(dc="Northeast")
    narrowed = FilterState(**{**base.__dict__, **extra})
    before = filter_mask(state.rows, base)
    after = filter_mask(state.rows, narrowed)
    assert after.sum() <= before.sum()
    assert not (after & ~before).any()

def test_disabled_fields_are_ignored(catalog_raw, make_state):
    caps = Capabilities(season=False, supplier_filter=False)
    state = make_state(catalog_raw, caps)
    out = apply_filters(state.rows, FilterState(season="nope", primary_supplier="nope"), caps)
    assert len(out) == len(state.rows)

def test_single_row_predicate(catalog_raw, make_state):
    state = make_state(catalog_raw)
    row = state.rows.iloc[0].to_dict()
    assert matches(row, FilterState(search_term="a1"))
    assert not matches(row, FilterState(dc="Southwest"))

def test_distinct_values_use_all_rows(catalog_raw, make_state):
    state = make_state(catalog_raw)
    assert distinct_values(state.rows, "status") == ["Active", "Inactive", "Pending"]
    assert distinct_values(state.rows, "status", sort=False) == ["Active", "Inactive", "Pending"]
    assert distinct_values(state.rows, "primary_supplier", sort=False) == ["ACME", "Globex", "Initech"]
    assert distinct_values(state.rows, "location_id") == ["L01", "L02", "L03"]
    assert distinct_values(pd.DataFrame(), "status") == []

def test_distinct_values_insertion_order_when_unsorted():
    df = pd.DataFrame({"dc": ["West", "East", "West", "Central"]})
    assert distinct_values(df, "dc", sort=False) == ["West", "East", "Central"]
    assert distinct_values(df, "dc") == ["Central", "East", "West"]

def test_active_filters_summary():
    f = FilterState(search_term="a", status="Active", dc="Northeast", priority_only=True)
    assert active_filters(f) == [("Search Term", "a"), ("Status", "Active"), ("DC", "Northeast")]
