import pytest
from pydantic import ValidationError

from crest.domain.deal import Deal


def test_defaults_match_deal_form():
    d = Deal()

    assert d.down_payment == 25
    assert d.interest_rate == 6.5
    assert d.loan_term == 25
    assert d.vacancy_rate == 5
    assert d.operating_expense_ratio == 35
    assert d.exit_cap_rate == 6.5
    assert d.hold_period == 5
    assert d.purchase_price == 0
    assert d.location == ""


def test_camel_case_and_snake_case_are_interchangeable():
    camel = Deal.model_validate({"purchasePrice": 100, "exitCapRate": 7, "propertyType": "office"})
    snake = Deal(purchase_price=100, exit_cap_rate=7, property_type="office")

    assert camel == snake
    assert camel.model_dump(by_alias=True)["purchasePrice"] == 100


def test_percent_and_currency_strings_are_normalized():
    d = Deal.model_validate(
        {"downPayment": "30%", "purchasePrice": "$1,200,000", "interestRate": " 6.8 ", "units": "80"}
    )

    assert d.down_payment == 30
    assert d.purchase_price == 1_200_000
    assert d.interest_rate == 6.8
    assert d.units == 80


def test_none_and_blank_take_field_default():
    d = Deal.model_validate({"downPayment": None, "vacancyRate": "", "location": None})

    assert d.down_payment == 25
    assert d.vacancy_rate == 5
    assert d.location == ""


def test_non_numeric_text_is_rejected():
    with pytest.raises(ValidationError) as exc:
        Deal.model_validate({"grossRevenue": "lots"})
    assert "gross_revenue must be numeric" in str(exc.value)


def test_deal_is_immutable():
    d = Deal(purchase_price=1)
    with pytest.raises(ValidationError):
        d.purchase_price = 2


def test_with_changes_returns_new_deal():
    d = Deal(name="A", purchase_price=1)
    d2 = d.with_changes(name="B", exitCapRate=8)

    assert d.name == "A" and d.exit_cap_rate == 6.5
    assert d2.name == "B" and d2.exit_cap_rate == 8
    assert d2.purchase_price == 1


def test_unknown_types_are_accepted():
    d = Deal(property_type="hotel", construction_type="modular")
    assert d.property_type == "hotel"
