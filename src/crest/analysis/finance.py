from __future__ import annotations

import math
from typing import Any, Mapping

from crest.analysis.tax import resolve_tax_rate
from crest.domain.deal import Deal
from crest.domain.metrics import DealMetrics
from crest.domain.reference import (
    CONSTRUCTION_TYPES,
    DEFAULT_RISK_FACTOR,
    DEFAULT_RISK_MULTIPLIER,
    DEFAULT_TIMEFRAME_MONTHS,
    PROPERTY_TYPE_RISK_FACTORS,
)


def _monthly_mortgage_payment(principal: float, annual_rate_pct: float, years: float) -> float:
    """
    Standard fixed-rate amortization formula:
    M = P * [ r(1+r)^n / ((1+r)^n - 1) ]
    P = loan principal
    r = monthly interest rate
    n = number of payments (months)

    No loan, no interest or no payments means no payment.
    """
    r = annual_rate_pct / 100.0 / 12.0
    n = years * 12

    if principal <= 0 or r <= 0 or n <= 0:
        return 0.0

    try:
        growth = (1 + r) ** n
    except OverflowError:
        # (1+r)^n / ((1+r)^n - 1) -> 1 as n grows
        return principal * r

    if growth - 1 <= 0:
        # 1 + r rounds to 1.0 for vanishing rates; use the zero-rate limit
        return principal / n

    return principal * (r * growth) / (growth - 1)


def _annualize(total_roi_pct: float, hold_years: float) -> float:
    """
    Compound a total-return percentage down to a per-year rate.

    This is not an IRR over the yearly cash flows; it treats the whole
    return as one lump sum earned over the hold period.
    """
    if hold_years <= 0:
        return 0.0
    growth = 1 + total_roi_pct / 100.0
    if growth <= 0:
        return -100.0
    try:
        return (growth ** (1 / hold_years) - 1) * 100.0
    except OverflowError:
        return math.inf


def _risk_score(property_type: str, construction_type: str) -> float:
    profile = CONSTRUCTION_TYPES.get(construction_type)
    multiplier = profile.risk_multiplier if profile else DEFAULT_RISK_MULTIPLIER
    return multiplier * PROPERTY_TYPE_RISK_FACTORS.get(property_type, DEFAULT_RISK_FACTOR)


def compute_metrics(deal: Deal | Mapping[str, Any]) -> DealMetrics:
    """
    Core underwriting brain for a single deal.

    Pure and deterministic: the same Deal always produces the same metrics.
    Degenerate denominators fall back to neutral values instead of raising,
    and inputs are not range-checked (negative revenue flows straight through).
    """
    if not isinstance(deal, Deal):
        deal = Deal.model_validate(dict(deal))

    # --- project cost & taxes ---
    total_project_cost = deal.purchase_price + deal.construction_cost
    property_tax_rate = resolve_tax_rate(deal.location)
    # Assessed value is taken to be the full project cost.
    annual_property_tax = total_project_cost * (property_tax_rate / 100)

    # --- financing basics ---
    loan_amount = total_project_cost * (1 - deal.down_payment / 100)
    down_payment_amount = total_project_cost * (deal.down_payment / 100)

    monthly_payment = _monthly_mortgage_payment(
        principal=loan_amount,
        annual_rate_pct=deal.interest_rate,
        years=deal.loan_term,
    )
    annual_debt_service = monthly_payment * 12

    # --- income & operating expenses ---
    effective_gross_revenue = deal.gross_revenue * (1 - deal.vacancy_rate / 100)
    base_operating_expenses = effective_gross_revenue * (deal.operating_expense_ratio / 100)
    total_operating_expenses = base_operating_expenses + annual_property_tax

    # --- NOI (before debt) ---
    noi = effective_gross_revenue - total_operating_expenses
    cash_flow = noi - annual_debt_service

    cash_on_cash = 0.0
    if down_payment_amount > 0:
        cash_on_cash = (cash_flow / down_payment_amount) * 100

    cap_rate = 0.0
    if total_project_cost > 0:
        cap_rate = (noi / total_project_cost) * 100

    dscr = 0.0
    if annual_debt_service > 0:
        dscr = noi / annual_debt_service

    # --- disposition ---
    exit_value = total_project_cost
    if deal.exit_cap_rate > 0:
        exit_value = noi / (deal.exit_cap_rate / 100)

    total_cash_flow = cash_flow * deal.hold_period
    total_return = exit_value - total_project_cost + total_cash_flow

    # Equity in is the down payment only.
    total_roi = 0.0
    if down_payment_amount > 0:
        total_roi = (total_return / down_payment_amount) * 100

    annualized_return = _annualize(total_roi, deal.hold_period)

    # --- schedule & risk ---
    construction = CONSTRUCTION_TYPES.get(deal.construction_type)
    construction_timeframe = construction.timeframe if construction else DEFAULT_TIMEFRAME_MONTHS

    return DealMetrics(
        total_project_cost=total_project_cost,
        down_payment_amount=down_payment_amount,
        loan_amount=loan_amount,
        monthly_payment=monthly_payment,
        annual_debt_service=annual_debt_service,
        effective_gross_revenue=effective_gross_revenue,
        base_operating_expenses=base_operating_expenses,
        annual_property_tax=annual_property_tax,
        total_operating_expenses=total_operating_expenses,
        property_tax_rate=property_tax_rate,
        noi=noi,
        cash_flow=cash_flow,
        cash_on_cash=cash_on_cash,
        cap_rate=cap_rate,
        dscr=dscr,
        exit_value=exit_value,
        total_return=total_return,
        total_roi=total_roi,
        annualized_return=annualized_return,
        construction_timeframe=construction_timeframe,
        risk_score=_risk_score(deal.property_type, deal.construction_type),
    )
