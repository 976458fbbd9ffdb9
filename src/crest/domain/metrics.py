from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Iterable

import numpy as np


# camelCase keys used by the front end, CSV export and sort selector
_CAMEL_KEYS = {
    "total_project_cost": "totalProjectCost",
    "down_payment_amount": "downPaymentAmount",
    "loan_amount": "loanAmount",
    "monthly_payment": "monthlyPayment",
    "annual_debt_service": "annualDebtService",
    "effective_gross_revenue": "effectiveGrossRevenue",
    "base_operating_expenses": "baseOperatingExpenses",
    "annual_property_tax": "annualPropertyTax",
    "total_operating_expenses": "totalOperatingExpenses",
    "property_tax_rate": "propertyTaxRate",
    "noi": "noi",
    "cash_flow": "cashFlow",
    "cash_on_cash": "cashOnCash",
    "cap_rate": "capRate",
    "dscr": "dscr",
    "exit_value": "exitValue",
    "total_return": "totalReturn",
    "total_roi": "totalROI",
    "annualized_return": "annualizedReturn",
    "construction_timeframe": "constructionTimeframe",
    "risk_score": "riskScore",
}

METRIC_ATTRS = {camel: attr for attr, camel in _CAMEL_KEYS.items()}


@dataclass(frozen=True)
class DealMetrics:
    total_project_cost: float
    down_payment_amount: float
    loan_amount: float
    monthly_payment: float
    annual_debt_service: float
    effective_gross_revenue: float
    base_operating_expenses: float
    annual_property_tax: float
    total_operating_expenses: float
    property_tax_rate: float        # % of assessed value
    noi: float                      # annual net operating income
    cash_flow: float                # annual, after debt service
    cash_on_cash: float             # %
    cap_rate: float                 # %
    dscr: float                     # ratio
    exit_value: float
    total_return: float
    total_roi: float                # %
    annualized_return: float        # %
    construction_timeframe: int     # months
    risk_score: float               # dimensionless multiplier

    def get(self, key: str, default: float | None = None) -> Any:
        """Look a metric up by camelCase or snake_case name."""
        attr = METRIC_ATTRS.get(key, key)
        return getattr(self, attr, default)

    def to_dict(self) -> dict[str, Any]:
        return {_CAMEL_KEYS[f.name]: getattr(self, f.name) for f in fields(self)}


@dataclass
class PortfolioMetrics:
    """
    Dashboard roll-up across every deal in the book.
    """
    n_deals: int
    total_project_cost: float
    total_noi: float
    mean_total_roi: float
    p50_cash_on_cash: float
    p50_dscr: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "dealCount": self.n_deals,
            "totalProjectCost": self.total_project_cost,
            "totalNoi": self.total_noi,
            "meanTotalROI": self.mean_total_roi,
            "medianCashOnCash": self.p50_cash_on_cash,
            "medianDscr": self.p50_dscr,
        }


def summarize_portfolio(metrics: Iterable[DealMetrics]) -> PortfolioMetrics:
    """
    Reduction step: collapse per-deal metrics into the headline numbers.

    An empty book reports zero totals and a zero average ROI, while the
    medians are NaN since there is nothing to take a median of.
    """
    items = list(metrics)
    n = len(items)

    if n == 0:
        return PortfolioMetrics(
            n_deals=0,
            total_project_cost=0.0,
            total_noi=0.0,
            mean_total_roi=0.0,
            p50_cash_on_cash=float("nan"),
            p50_dscr=float("nan"),
        )

    cost = np.array([m.total_project_cost for m in items], dtype=float)
    noi = np.array([m.noi for m in items], dtype=float)
    roi = np.array([m.total_roi for m in items], dtype=float)
    coc = np.array([m.cash_on_cash for m in items], dtype=float)
    dscr = np.array([m.dscr for m in items], dtype=float)

    return PortfolioMetrics(
        n_deals=n,
        total_project_cost=float(np.sum(cost)),
        total_noi=float(np.sum(noi)),
        mean_total_roi=float(np.nanmean(roi)),
        p50_cash_on_cash=float(np.nanmedian(coc)),
        p50_dscr=float(np.nanmedian(dscr)),
    )
