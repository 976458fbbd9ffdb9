# src/crest/domain/deal.py
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

_NUMERIC_FIELDS = (
    "purchase_price",
    "construction_cost",
    "building_size",
    "units",
    "down_payment",
    "interest_rate",
    "loan_term",
    "gross_revenue",
    "vacancy_rate",
    "operating_expense_ratio",
    "exit_cap_rate",
    "hold_period",
)


class Deal(BaseModel):
    """
    Inputs for one commercial deal.

    Rates are whole-number percentages (6.5 means 6.5%), matching what a user
    types into the deal form. Field names accept both snake_case and the
    camelCase keys the front end sends.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    name: str = ""
    property_type: str = Field(default="carwash", alias="propertyType")
    construction_type: str = Field(default="groundUp", alias="constructionType")
    location: str = ""
    notes: str = ""

    purchase_price: float = Field(default=0.0, alias="purchasePrice", description="Land or acquisition cost")
    construction_cost: float = Field(default=0.0, alias="constructionCost")
    building_size: float = Field(default=0.0, alias="buildingSize", description="Square feet")
    units: int = 0

    down_payment: float = Field(default=25.0, alias="downPayment", description="% of total project cost")
    interest_rate: float = Field(default=6.5, alias="interestRate", description="Annual nominal %")
    loan_term: float = Field(default=25, alias="loanTerm", description="Amortization period in years")

    gross_revenue: float = Field(default=0.0, alias="grossRevenue", description="Annual, before vacancy")
    vacancy_rate: float = Field(default=5.0, alias="vacancyRate")
    operating_expense_ratio: float = Field(
        default=35.0,
        alias="operatingExpenseRatio",
        description="% of effective gross revenue",
    )

    exit_cap_rate: float = Field(default=6.5, alias="exitCapRate")
    hold_period: float = Field(default=5, alias="holdPeriod", description="Years")

    @field_validator("name", "location", "notes", mode="before")
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator(*_NUMERIC_FIELDS, mode="before")
    @classmethod
    def _clean_numeric(cls, v: Any, info: ValidationInfo) -> Any:
        if v is None:
            return cls.model_fields[info.field_name].default
        if isinstance(v, str):
            cleaned = v.strip().replace("%", "").replace("$", "").replace(",", "")
            if not cleaned:
                return cls.model_fields[info.field_name].default
            try:
                return float(cleaned)
            except ValueError as err:
                raise ValueError(f"{info.field_name} must be numeric, got {v!r}") from err
        return v

    def with_changes(self, **changes: Any) -> "Deal":
        """Return a new validated Deal with `changes` applied (either naming style)."""
        data = self.model_dump(by_alias=True)
        for key, value in changes.items():
            field = type(self).model_fields.get(key)
            data[(field.alias or key) if field else key] = value
        return type(self).model_validate(data)
