# src/crest/services/deal_book.py
from __future__ import annotations

from typing import Any, Mapping

from crest.adapters.logging_utils import get_logger
from crest.adapters.memory_repo import InMemoryDealRepository
from crest.analysis.finance import compute_metrics
from crest.domain.deal import Deal
from crest.domain.metrics import PortfolioMetrics, summarize_portfolio
from crest.domain.ports import DealRecord, DealRepository
from crest.services.samples import sample_deals

logger = get_logger(__name__)


def _as_deal(deal: Deal | Mapping[str, Any]) -> Deal:
    if isinstance(deal, Deal):
        return deal
    return Deal.model_validate(dict(deal))


class DealBook:
    """
    The working set of deals a user is comparing.

    Every write goes through compute_metrics, so a stored record never
    carries metrics from an older version of its inputs.
    """

    def __init__(self, repo: DealRepository | None = None) -> None:
        self._repo = repo if repo is not None else InMemoryDealRepository()

    def save(self, deal: Deal | Mapping[str, Any], deal_id: int | None = None) -> DealRecord:
        """
        Insert a new deal, or replace the inputs of an existing one.

        An id that is not in the book is treated as a new deal and gets a
        fresh id, same as the deal form's save button.
        """
        deal = _as_deal(deal)
        metrics = compute_metrics(deal)

        if deal_id is not None and deal_id in self._ids():
            record = self._repo.replace(DealRecord(id=deal_id, deal=deal, metrics=metrics))
            action = "updated"
        else:
            record = self._repo.add(DealRecord(id=self._repo.next_id(), deal=deal, metrics=metrics))
            action = "created"

        logger.debug(
            f"deal {action}",
            extra={"context": {"deal_id": record.id, "deal_name": deal.name, "total_roi": metrics.total_roi}},
        )
        return record

    def update(self, deal_id: int, **changes: Any) -> DealRecord:
        current = self._repo.get(deal_id)
        deal = current.deal.with_changes(**changes)
        metrics = compute_metrics(deal)
        record = self._repo.replace(DealRecord(id=deal_id, deal=deal, metrics=metrics))
        logger.debug(
            "deal updated",
            extra={"context": {"deal_id": deal_id, "fields": sorted(changes), "total_roi": metrics.total_roi}},
        )
        return record

    def duplicate(self, deal_id: int) -> DealRecord:
        source = self._repo.get(deal_id)
        copy = source.deal.with_changes(name=f"{source.deal.name} (Copy)")
        record = self._repo.add(DealRecord(id=self._repo.next_id(), deal=copy, metrics=compute_metrics(copy)))
        logger.info("deal duplicated", extra={"context": {"source_id": deal_id, "deal_id": record.id}})
        return record

    def delete(self, deal_id: int) -> None:
        self._repo.delete(deal_id)
        logger.info("deal deleted", extra={"context": {"deal_id": deal_id}})

    def get(self, deal_id: int) -> DealRecord:
        return self._repo.get(deal_id)

    def records(self) -> list[DealRecord]:
        return self._repo.all()

    def summary(self) -> PortfolioMetrics:
        return summarize_portfolio(r.metrics for r in self._repo.all())

    def seed_samples(self) -> list[DealRecord]:
        records = [self.save(d) for d in sample_deals()]
        logger.info("sample deals loaded", extra={"context": {"count": len(records)}})
        return records

    def reset(self, *, seed: bool = False) -> None:
        self._repo.clear()
        if seed:
            self.seed_samples()

    def _ids(self) -> set[int]:
        return {r.id for r in self._repo.all()}
