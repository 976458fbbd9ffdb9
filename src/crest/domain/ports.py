# src/crest/domain/ports.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from crest.domain.deal import Deal
from crest.domain.metrics import DealMetrics


class DealNotFound(LookupError):
    def __init__(self, deal_id: int) -> None:
        super().__init__(f"deal {deal_id} not found")
        self.deal_id = deal_id


@dataclass(frozen=True)
class DealRecord:
    """A deal in the book together with the metrics computed from it."""
    id: int
    deal: Deal
    metrics: DealMetrics

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            **self.deal.model_dump(by_alias=True),
            "metrics": self.metrics.to_dict(),
        }


# ----------------------------
# Deal storage
# ----------------------------

class DealRepository(Protocol):
    def next_id(self) -> int:
        ...

    def add(self, record: DealRecord) -> DealRecord:
        ...

    def get(self, deal_id: int) -> DealRecord:
        ...

    def replace(self, record: DealRecord) -> DealRecord:
        ...

    def delete(self, deal_id: int) -> None:
        ...

    def all(self) -> list[DealRecord]:
        ...

    def clear(self) -> None:
        ...
