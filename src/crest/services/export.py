# src/crest/services/export.py
from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import Iterable

import pandas as pd

from crest.adapters.logging_utils import get_logger
from crest.domain.ports import DealRecord
from crest.domain.reference import construction_type_name, property_type_name

logger = get_logger(__name__)

CSV_HEADERS = [
    "Deal Name",
    "Property Type",
    "Construction Type",
    "Location",
    "Total Project Cost",
    "NOI",
    "Cash Flow",
    "Cap Rate",
    "Cash on Cash",
    "Total ROI",
    "IRR",
    "Risk Score",
    "Construction Timeline",
]


def _cell(value: object) -> str:
    # 1700000.0 -> "1700000", 2.81 -> "2.81"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def deals_to_frame(records: Iterable[DealRecord]) -> pd.DataFrame:
    rows = []
    for r in records:
        m = r.metrics
        rows.append(
            [
                r.deal.name,
                property_type_name(r.deal.property_type),
                construction_type_name(r.deal.construction_type),
                r.deal.location,
                m.total_project_cost,
                m.noi,
                m.cash_flow,
                m.cap_rate,
                m.cash_on_cash,
                m.total_roi,
                m.annualized_return,
                m.risk_score,
                m.construction_timeframe,
            ]
        )
    return pd.DataFrame(rows, columns=CSV_HEADERS)


def deals_to_csv(records: Iterable[DealRecord]) -> str:
    """
    Comparison export: header row plus one row per deal, every cell quoted,
    rows separated by a bare newline and no newline after the last row.
    """
    df = deals_to_frame(records).astype(object).map(_cell)
    buf = io.StringIO()
    df.to_csv(buf, index=False, quoting=csv.QUOTE_ALL, lineterminator="\n")
    return buf.getvalue().rstrip("\n")


def write_csv(records: Iterable[DealRecord], path: str | Path) -> Path:
    path = Path(path)
    records = list(records)
    path.write_text(deals_to_csv(records), encoding="utf-8")
    logger.info("deals exported", extra={"context": {"path": str(path), "count": len(records)}})
    return path
