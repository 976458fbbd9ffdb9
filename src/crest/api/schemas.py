# src/crest/api/schemas.py
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# --------------------------------------------
# Calculator
# --------------------------------------------

class TaxRateResponse(BaseModel):
    location: str
    property_tax_rate: float = Field(serialization_alias="propertyTaxRate")


class MetricsResponse(BaseModel):
    """
    camelCase DealMetrics plus the risk / ROI tiers used for badges.
    """
    model_config = ConfigDict(extra="allow")

    riskTier: str
    roiTier: str


# --------------------------------------------
# Deal book
# --------------------------------------------

class DealItem(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int
    name: str = ""
    propertyType: str
    constructionType: str
    location: str = ""
    metrics: dict[str, Any]


class SuggestionResponse(BaseModel):
    grossRevenue: float
    constructionCost: float


class PortfolioSummary(BaseModel):
    dealCount: int
    totalProjectCost: float
    totalNoi: float
    meanTotalROI: float
    medianCashOnCash: float | None = None
    medianDscr: float | None = None
