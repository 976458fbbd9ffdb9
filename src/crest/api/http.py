# src/crest/api/http.py
from __future__ import annotations

import math
from typing import Any

from fastapi import FastAPI, HTTPException, Query, Response

from crest.adapters.config import config
from crest.analysis.finance import compute_metrics
from crest.analysis.placeholders import suggest
from crest.analysis.scoring import classify
from crest.analysis.tax import resolve_tax_rate
from crest.domain.deal import Deal
from crest.domain.ports import DealNotFound, DealRecord
from crest.domain.reference import CONSTRUCTION_TYPES, PROPERTY_TYPES
from crest.services.comparison import ALL, compare
from crest.services.deal_book import DealBook
from crest.services.export import deals_to_csv
from .schemas import DealItem, MetricsResponse, PortfolioSummary, SuggestionResponse, TaxRateResponse

app = FastAPI(title="CRE Deal Analyzer")

_book = DealBook()
if config.SEED_SAMPLE_DEALS:
    _book.seed_samples()


def _nan_to_none(value: float) -> float | None:
    return None if isinstance(value, float) and math.isnan(value) else value


def _item(record: DealRecord) -> dict[str, Any]:
    out = record.to_dict()
    out["metrics"].update(classify(record.metrics))
    return out


def _get_or_404(deal_id: int) -> DealRecord:
    try:
        return _book.get(deal_id)
    except DealNotFound as e:
        raise HTTPException(status_code=404, detail=str(e)) from e


# -----------------------------
# Calculator
# -----------------------------
@app.get("/tax-rate", response_model=TaxRateResponse)
def tax_rate(location: str = Query("", description="Free-text city/state, e.g. 'Houston, TX'")) -> TaxRateResponse:
    return TaxRateResponse(location=location, property_tax_rate=resolve_tax_rate(location))


@app.post("/metrics", response_model=MetricsResponse)
def metrics_endpoint(deal: Deal) -> MetricsResponse:
    """
    Stateless preview: compute metrics for a deal without saving it.
    """
    metrics = compute_metrics(deal)
    return MetricsResponse(**metrics.to_dict(), **classify(metrics))


@app.post("/deals/suggestions", response_model=SuggestionResponse)
def suggestions(deal: Deal) -> SuggestionResponse:
    return SuggestionResponse(**suggest(deal))


@app.get("/reference/property-types")
def property_types() -> list[dict[str, Any]]:
    return [
        {
            "key": p.key,
            "name": p.name,
            "avgRevenue": p.avg_revenue,
            "avgOpEx": p.avg_opex,
            "avgCapRate": p.avg_cap_rate,
            "constructionCostPSF": {"groundUp": p.cost_psf_ground_up, "ti": p.cost_psf_ti},
        }
        for p in PROPERTY_TYPES.values()
    ]


@app.get("/reference/construction-types")
def construction_types() -> list[dict[str, Any]]:
    return [
        {
            "key": c.key,
            "name": c.name,
            "timeframe": c.timeframe,
            "riskMultiplier": c.risk_multiplier,
            "contingency": c.contingency,
        }
        for c in CONSTRUCTION_TYPES.values()
    ]


# -----------------------------
# Deal book
# -----------------------------
@app.get("/deals", response_model=list[DealItem])
def list_deals() -> list[dict[str, Any]]:
    return [_item(r) for r in _book.records()]


@app.post("/deals", response_model=DealItem, status_code=201)
def create_deal(deal: Deal) -> dict[str, Any]:
    return _item(_book.save(deal))


@app.get("/deals/compare", response_model=list[DealItem])
def compare_deals(
    property_type: str = Query(ALL, alias="propertyType"),
    construction_type: str = Query(ALL, alias="constructionType"),
    sort_by: str = Query(config.DEFAULT_SORT_METRIC, alias="sortBy"),
) -> list[dict[str, Any]]:
    try:
        ranked = compare(
            _book.records(),
            property_type=property_type,
            construction_type=construction_type,
            sort_by=sort_by,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return [_item(r) for r in ranked]


@app.get("/deals/export.csv")
def export_csv() -> Response:
    body = deals_to_csv(_book.records())
    return Response(
        content=body,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{config.EXPORT_FILENAME}"'},
    )


@app.get("/summary", response_model=PortfolioSummary)
def summary() -> PortfolioSummary:
    data = _book.summary().to_dict()
    return PortfolioSummary(**{k: _nan_to_none(v) for k, v in data.items()})


@app.get("/deals/{deal_id}", response_model=DealItem)
def get_deal(deal_id: int) -> dict[str, Any]:
    return _item(_get_or_404(deal_id))


@app.put("/deals/{deal_id}", response_model=DealItem)
def update_deal(deal_id: int, deal: Deal) -> dict[str, Any]:
    _get_or_404(deal_id)
    return _item(_book.save(deal, deal_id=deal_id))


@app.post("/deals/{deal_id}/duplicate", response_model=DealItem, status_code=201)
def duplicate_deal(deal_id: int) -> dict[str, Any]:
    _get_or_404(deal_id)
    return _item(_book.duplicate(deal_id))


@app.delete("/deals/{deal_id}", status_code=204)
def delete_deal(deal_id: int) -> Response:
    try:
        _book.delete(deal_id)
    except DealNotFound as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return Response(status_code=204)
