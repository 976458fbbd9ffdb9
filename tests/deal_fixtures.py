# tests/deal_fixtures.py

from crest.domain.deal import Deal


def houston_car_wash() -> Deal:
    """
    The Houston Express Car Wash sample with a hold period spelled out.
    500k land + 1.2M build, 30% down at 6.8% over 25 years.
    """
    return Deal(
        name="Houston Express Car Wash",
        property_type="carwash",
        construction_type="groundUp",
        location="Houston, TX",
        purchase_price=500_000,
        construction_cost=1_200_000,
        building_size=4800,
        down_payment=30,
        interest_rate=6.8,
        loan_term=25,
        gross_revenue=580_000,
        vacancy_rate=3,
        operating_expense_ratio=32,
        exit_cap_rate=7.2,
        hold_period=5,
    )


def all_cash_office() -> Deal:
    """
    Fully financed: zero down payment means zero equity in the ROI math, so the
    equity-based ratios fall back to 0.
    """
    return Deal(
        name="All Cash Office",
        property_type="office",
        construction_type="acquisition",
        location="Dallas",
        purchase_price=2_000_000,
        down_payment=0,
        gross_revenue=400_000,
    )


def money_pit() -> Deal:
    """
    No revenue at all: NOI is just the negative tax bill and the deal loses
    more than the equity put in.
    """
    return Deal(
        name="Money Pit",
        property_type="retail",
        construction_type="ti",
        purchase_price=1_000_000,
        gross_revenue=0,
    )
