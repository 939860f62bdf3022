# tests/test_view.py
import pytest
from pydantic import ValidationError
from plateau.view import ViewState, share_message

def test_defaults_and_reset():
    v = ViewState.reset()
    assert v.plateau == 200000
    assert v.interventions == ["healthcare", "homelessness"]

def test_from_query_happy_path():
    v = ViewState.from_query("?plateau=500000&interventions=education,poverty")
    assert v.plateau == 500000
    assert v.interventions == ["poverty", "education"]

@pytest.mark.parametrize("query", ["", "plateau=", "plateau=abc", "plateau=0", "plateau=inf"])
def test_from_query_plateau_fallback(query):
    v = ViewState.from_query(query)
    assert v.plateau == 200000
    assert v.interventions == ["healthcare", "homelessness"]

def test_from_query_interventions():
    assert ViewState.from_query("plateau=1e6&interventions=").interventions == []
    assert ViewState.from_query("interventions=poverty,bogus").interventions == ["poverty"]
    assert ViewState.from_query("plateau=1e6").plateau == 1_000_000

def test_to_query():
    assert ViewState().to_query() == "plateau=200000&interventions=healthcare%2Chomelessness"
    assert ViewState(plateau=250000.5, interventions=[]).to_query() == "plateau=250000.5"

def test_query_restores_view():
    v = ViewState(plateau=750000, interventions=["education", "healthcare"])
    assert ViewState.from_query(v.to_query()) == v

def test_unknown_intervention_rejected():
    with pytest.raises(ValidationError):
        ViewState(interventions=["moonshot"])

def test_share_message():
    assert share_message(200000, 0.0000059) == (
        "Excess wealth above €200,000 could end homelessness 0× over. See the math:"
    )
    assert "€1,234.5 " in share_message(1234.5, 2.5)
    assert "3× over" in share_message(1234.5, 2.5)
