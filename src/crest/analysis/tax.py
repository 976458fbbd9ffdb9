# src/crest/analysis/tax.py
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable

from crest.domain.reference import DEFAULT_TAX_RATE, TAX_RATE_TABLE


class TaxRateResolver:
    """
    Maps a free-text location to an annual property tax rate (percent).

    Lookup order:
      1. empty location -> default rate
      2. exact match on the lowercased, trimmed text
      3. first table key (in table order) contained in the text
      4. default rate
    """

    def __init__(
        self,
        table: Iterable[tuple[str, float]] = TAX_RATE_TABLE,
        default_rate: float = DEFAULT_TAX_RATE,
    ) -> None:
        self._table = tuple((k.lower().strip(), float(r)) for k, r in table)
        self._exact = MappingProxyType(dict(self._table))
        self._default = float(default_rate)

    @property
    def default_rate(self) -> float:
        return self._default

    def resolve(self, location: str | None) -> float:
        if not location:
            return self._default

        loc = location.lower().strip()

        rate = self._exact.get(loc)
        if rate is not None:
            return rate

        # Substring scan: the table key must appear inside the location text.
        for key, rate in self._table:
            if key in loc:
                return rate

        return self._default


_default_resolver = TaxRateResolver()


def resolve_tax_rate(location: str | None) -> float:
    return _default_resolver.resolve(location)
