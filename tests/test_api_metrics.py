# tests/test_api_metrics.py
import pytest


def test_tax_rate_endpoint(client):
    r = client.get("/tax-rate", params={"location": "Houston, TX"})
    assert r.status_code == 200, r.text
    assert r.json() == {"location": "Houston, TX", "propertyTaxRate": 2.81}


def test_tax_rate_default(client):
    r = client.get("/tax-rate")
    assert r.json()["propertyTaxRate"] == 1.5


def test_metrics_preview_accepts_form_payload(client):
    payload = {
        "propertyType": "carwash",
        "constructionType": "groundUp",
        "location": "Houston, TX",
        "purchasePrice": 500000,
        "constructionCost": "1,200,000",
        "downPayment": "30%",
        "interestRate": 6.8,
        "grossRevenue": 580000,
        "vacancyRate": 3,
        "operatingExpenseRatio": 32,
        "exitCapRate": 7.2,
    }
    r = client.post("/metrics", json=payload)
    assert r.status_code == 200, r.text
    data = r.json()

    assert data["totalProjectCost"] == pytest.approx(1_700_000)
    assert data["noi"] == pytest.approx(334_798)
    assert data["constructionTimeframe"] == 18
    assert data["riskTier"] == "high"
    assert data["roiTier"] in {"strong", "moderate", "weak"}


def test_metrics_rejects_non_numeric(client):
    r = client.post("/metrics", json={"purchasePrice": "a lot"})
    assert r.status_code == 422


def test_suggestions(client):
    r = client.post("/deals/suggestions", json={"propertyType": "multifamily", "units": 10})
    assert r.status_code == 200, r.text
    assert r.json()["grossRevenue"] == 120_000


def test_reference_tables(client):
    pts = client.get("/reference/property-types").json()
    cts = client.get("/reference/construction-types").json()

    assert [p["key"] for p in pts] == ["carwash", "multifamily", "office", "retail", "industrial"]
    assert {c["key"]: c["timeframe"] for c in cts} == {"groundUp": 18, "ti": 6, "acquisition": 12}


def test_metrics_with_tiny_hold_period_does_not_error(client):
    r = client.post("/metrics", json={"purchasePrice": 500000, "constructionCost": 1200000, "grossRevenue": 580000, "location": "Houston, TX", "holdPeriod": 0.001})
    assert r.status_code == 200, r.text
    # infinite annualized return serializes as null
    assert r.json()["annualizedReturn"] is None
