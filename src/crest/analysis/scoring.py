# src/crest/analysis/scoring.py
from __future__ import annotations

from typing import Literal

from crest.domain.metrics import DealMetrics

RiskTier = Literal["low", "medium", "high"]
RoiTier = Literal["strong", "moderate", "weak"]


def risk_tier(risk_score: float) -> RiskTier:
    if risk_score <= 1.0:
        return "low"
    if risk_score <= 1.3:
        return "medium"
    return "high"


def roi_tier(total_roi: float) -> RoiTier:
    if total_roi >= 20:
        return "strong"
    if total_roi >= 10:
        return "moderate"
    return "weak"


def classify(metrics: DealMetrics) -> dict[str, str]:
    return {
        "riskTier": risk_tier(metrics.risk_score),
        "roiTier": roi_tier(metrics.total_roi),
    }
