# src/crest/services/comparison.py
from __future__ import annotations

import math
from typing import Iterable

import pandas as pd

from crest.adapters.config import SORT_METRICS
from crest.analysis.scoring import risk_tier, roi_tier
from crest.domain.ports import DealRecord
from crest.domain.reference import construction_type_name, property_type_name

ALL = "all"


def _sort_value(record: DealRecord, metric: str) -> float:
    value = record.metrics.get(metric)
    if value is None:
        return 0.0
    try:
        v = float(value)
    except (TypeError, ValueError):
        return 0.0
    return 0.0 if math.isnan(v) else v


def compare(
    records: Iterable[DealRecord],
    *,
    property_type: str = ALL,
    construction_type: str = ALL,
    sort_by: str = "totalROI",
) -> list[DealRecord]:
    """
    Filter deals by type and rank them best-first on one metric.

    Missing metric values rank as 0. Ties keep their book order.
    """
    if sort_by not in SORT_METRICS:
        raise ValueError(f"cannot sort by {sort_by!r}; choose one of {', '.join(SORT_METRICS)}")

    filtered = [
        r
        for r in records
        if (property_type == ALL or r.deal.property_type == property_type)
        and (construction_type == ALL or r.deal.construction_type == construction_type)
    ]
    return sorted(filtered, key=lambda r: _sort_value(r, sort_by), reverse=True)


def comparison_frame(records: Iterable[DealRecord]) -> pd.DataFrame:
    """One row per deal with the columns shown in the comparison table."""
    rows = []
    for r in records:
        m = r.metrics
        rows.append(
            {
                "id": r.id,
                "name": r.deal.name,
                "propertyType": property_type_name(r.deal.property_type),
                "constructionType": construction_type_name(r.deal.construction_type),
                "location": r.deal.location,
                "totalProjectCost": m.total_project_cost,
                "noi": m.noi,
                "annualPropertyTax": m.annual_property_tax,
                "propertyTaxRate": m.property_tax_rate,
                "cashFlow": m.cash_flow,
                "capRate": m.cap_rate,
                "cashOnCash": m.cash_on_cash,
                "dscr": m.dscr,
                "totalROI": m.total_roi,
                "annualizedReturn": m.annualized_return,
                "riskScore": m.risk_score,
                "riskTier": risk_tier(m.risk_score),
                "roiTier": roi_tier(m.total_roi),
            }
        )
    return pd.DataFrame(rows, columns=_FRAME_COLUMNS)


_FRAME_COLUMNS = [
    "id",
    "name",
    "propertyType",
    "constructionType",
    "location",
    "totalProjectCost",
    "noi",
    "annualPropertyTax",
    "propertyTaxRate",
    "cashFlow",
    "capRate",
    "cashOnCash",
    "dscr",
    "totalROI",
    "annualizedReturn",
    "riskScore",
    "riskTier",
    "roiTier",
]
