# src/crest/analysis/placeholders.py
from __future__ import annotations

from crest.domain.deal import Deal
from crest.domain.reference import PROPERTY_TYPES

# Form defaults when the user has not filled in a size yet
DEFAULT_BUILDING_SIZE_SF = 5000
DEFAULT_MULTIFAMILY_UNITS = 50
DEFAULT_COST_PSF = 150.0


def suggest_gross_revenue(deal: Deal) -> float:
    """
    Ballpark annual revenue from the property-type benchmark.

    Multifamily benchmarks are per unit and car washes per site-SF; the other
    types fall back to the raw benchmark figure.
    """
    profile = PROPERTY_TYPES.get(deal.property_type)
    if profile is None:
        return 0.0
    if deal.property_type == "multifamily":
        return profile.avg_revenue * (deal.units or DEFAULT_MULTIFAMILY_UNITS)
    if deal.property_type == "carwash":
        return profile.avg_revenue * (deal.building_size or DEFAULT_BUILDING_SIZE_SF)
    return profile.avg_revenue


def suggest_construction_cost(deal: Deal) -> float:
    profile = PROPERTY_TYPES.get(deal.property_type)
    cost_psf = profile.cost_psf(deal.construction_type) if profile else None
    if not cost_psf:
        cost_psf = DEFAULT_COST_PSF
    return cost_psf * (deal.building_size or DEFAULT_BUILDING_SIZE_SF)


def suggest(deal: Deal) -> dict[str, float]:
    return {
        "grossRevenue": suggest_gross_revenue(deal),
        "constructionCost": suggest_construction_cost(deal),
    }
