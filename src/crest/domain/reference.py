# src/crest/domain/reference.py
"""
Static reference data shared by the calculators.

Everything here is built once at import time and never mutated: profiles are
frozen dataclasses, lookups are read-only mapping proxies, and the tax table
is an ordered tuple because substring matching depends on its order.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class PropertyTypeProfile:
    key: str
    name: str
    avg_revenue: float        # carwash/multifamily: $/yr (per unit for MF); others: $/SF/yr
    avg_opex: float           # % of effective gross revenue
    avg_cap_rate: float       # %
    cost_psf_ground_up: float
    cost_psf_ti: float

    def cost_psf(self, construction_type: str) -> float | None:
        if construction_type == "groundUp":
            return self.cost_psf_ground_up
        if construction_type == "ti":
            return self.cost_psf_ti
        return None


@dataclass(frozen=True)
class ConstructionTypeProfile:
    key: str
    name: str
    timeframe: int            # months
    risk_multiplier: float
    contingency: float        # fraction of construction cost, informational only


PROPERTY_TYPES: Mapping[str, PropertyTypeProfile] = MappingProxyType({
    "carwash": PropertyTypeProfile("carwash", "Car Wash", 150_000, 35, 7.5, 250, 75),
    "multifamily": PropertyTypeProfile("multifamily", "Multifamily", 12_000, 45, 5.5, 180, 45),
    "office": PropertyTypeProfile("office", "Office", 28, 40, 6.5, 200, 85),
    "retail": PropertyTypeProfile("retail", "Retail", 22, 38, 7.0, 175, 65),
    "industrial": PropertyTypeProfile("industrial", "Industrial", 8, 25, 7.5, 120, 35),
})

CONSTRUCTION_TYPES: Mapping[str, ConstructionTypeProfile] = MappingProxyType({
    "groundUp": ConstructionTypeProfile("groundUp", "Ground-Up Development", 18, 1.4, 0.15),
    "ti": ConstructionTypeProfile("ti", "Tenant Improvement", 6, 1.1, 0.08),
    "acquisition": ConstructionTypeProfile("acquisition", "Acquisition/Renovation", 12, 1.2, 0.10),
})

PROPERTY_TYPE_RISK_FACTORS: Mapping[str, float] = MappingProxyType({
    "carwash": 1.2,
    "multifamily": 0.9,
})

DEFAULT_RISK_FACTOR = 1.0
DEFAULT_RISK_MULTIPLIER = 1.0
DEFAULT_TIMEFRAME_MONTHS = 12

# Percent of assessed value per year.
DEFAULT_TAX_RATE = 1.5

# Ordered (key, rate) pairs. Qualified city names come before bare ones and
# state-level fallbacks come last, so the substring scan prefers cities.
TAX_RATE_TABLE: tuple[tuple[str, float], ...] = (
    ("houston, tx", 2.81),
    ("houston", 2.81),
    ("dallas, tx", 2.42),
    ("dallas", 2.42),
    ("austin, tx", 2.23),
    ("austin", 2.23),
    ("san antonio, tx", 2.34),
    ("san antonio", 2.34),
    ("fort worth, tx", 2.38),
    ("fort worth", 2.38),
    ("plano, tx", 2.15),
    ("plano", 2.15),
    ("arlington, tx", 2.33),
    ("arlington", 2.33),
    ("corpus christi, tx", 2.45),
    ("corpus christi", 2.45),
    ("lubbock, tx", 2.28),
    ("lubbock", 2.28),
    ("irving, tx", 2.41),
    ("irving", 2.41),
    ("miami, fl", 1.02),
    ("miami", 1.02),
    ("orlando, fl", 1.18),
    ("orlando", 1.18),
    ("tampa, fl", 1.23),
    ("tampa", 1.23),
    ("jacksonville, fl", 1.15),
    ("jacksonville", 1.15),
    ("fort lauderdale, fl", 1.04),
    ("fort lauderdale", 1.04),
    ("tallahassee, fl", 0.89),
    ("tallahassee", 0.89),
    ("gainesville, fl", 1.31),
    ("gainesville", 1.31),
    ("pensacola, fl", 0.95),
    ("pensacola", 0.95),
    ("clearwater, fl", 1.08),
    ("clearwater", 1.08),
    ("west palm beach, fl", 1.12),
    ("west palm beach", 1.12),
    ("texas", 2.35),
    ("tx", 2.35),
    ("florida", 1.08),
    ("fl", 1.08),
)


def property_type_name(key: str) -> str:
    profile = PROPERTY_TYPES.get(key)
    return profile.name if profile else key


def construction_type_name(key: str) -> str:
    profile = CONSTRUCTION_TYPES.get(key)
    return profile.name if profile else key
