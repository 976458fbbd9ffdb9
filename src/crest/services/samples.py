# src/crest/services/samples.py
from __future__ import annotations

from crest.domain.deal import Deal

# Example book shown on first load. Fields not listed take the Deal defaults
# (25 year term, 5 year hold).
SAMPLE_DEALS: tuple[dict, ...] = (
    {
        "name": "Houston Express Car Wash",
        "propertyType": "carwash",
        "constructionType": "groundUp",
        "location": "Houston, TX",
        "purchasePrice": 500_000,
        "constructionCost": 1_200_000,
        "buildingSize": 4800,
        "grossRevenue": 580_000,
        "vacancyRate": 3,
        "operatingExpenseRatio": 32,
        "downPayment": 30,
        "interestRate": 6.8,
        "exitCapRate": 7.2,
    },
    {
        "name": "Austin Multifamily Development",
        "propertyType": "multifamily",
        "constructionType": "groundUp",
        "location": "Austin, TX",
        "purchasePrice": 2_500_000,
        "constructionCost": 8_500_000,
        "buildingSize": 72_000,
        "units": 80,
        "grossRevenue": 1_920_000,
        "vacancyRate": 5,
        "operatingExpenseRatio": 45,
        "downPayment": 25,
        "interestRate": 6.2,
        "exitCapRate": 5.8,
    },
    {
        "name": "Dallas Office TI Project",
        "propertyType": "office",
        "constructionType": "ti",
        "location": "Dallas, TX",
        "purchasePrice": 3_200_000,
        "constructionCost": 850_000,
        "buildingSize": 25_000,
        "grossRevenue": 750_000,
        "vacancyRate": 8,
        "operatingExpenseRatio": 40,
        "downPayment": 20,
        "interestRate": 5.9,
        "exitCapRate": 6.5,
    },
    {
        "name": "Miami Beach Car Wash",
        "propertyType": "carwash",
        "constructionType": "groundUp",
        "location": "Miami, FL",
        "purchasePrice": 800_000,
        "constructionCost": 1_400_000,
        "buildingSize": 5200,
        "grossRevenue": 720_000,
        "vacancyRate": 2,
        "operatingExpenseRatio": 30,
        "downPayment": 35,
        "interestRate": 6.5,
        "exitCapRate": 6.8,
    },
    {
        "name": "Tampa Retail Center TI",
        "propertyType": "retail",
        "constructionType": "ti",
        "location": "Tampa, FL",
        "purchasePrice": 2_800_000,
        "constructionCost": 650_000,
        "buildingSize": 18_000,
        "grossRevenue": 540_000,
        "vacancyRate": 6,
        "operatingExpenseRatio": 38,
        "downPayment": 25,
        "interestRate": 6.1,
        "exitCapRate": 7.0,
    },
)


def sample_deals() -> list[Deal]:
    return [Deal.model_validate(d) for d in SAMPLE_DEALS]
