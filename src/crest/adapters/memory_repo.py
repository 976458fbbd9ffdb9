from itertools import count

from crest.domain.ports import DealNotFound, DealRecord, DealRepository


class InMemoryDealRepository(DealRepository):
    """Insertion-ordered deal store; everything is lost when the process exits."""

    def __init__(self) -> None:
        self._items: dict[int, DealRecord] = {}
        self._ids = count(1)

    def next_id(self) -> int:
        deal_id = next(self._ids)
        while deal_id in self._items:
            deal_id = next(self._ids)
        return deal_id

    def add(self, record: DealRecord) -> DealRecord:
        if record.id in self._items:
            raise ValueError(f"deal {record.id} already exists")
        self._items[record.id] = record
        return record

    def get(self, deal_id: int) -> DealRecord:
        try:
            return self._items[deal_id]
        except KeyError:
            raise DealNotFound(deal_id) from None

    def replace(self, record: DealRecord) -> DealRecord:
        if record.id not in self._items:
            raise DealNotFound(record.id)
        self._items[record.id] = record
        return record

    def delete(self, deal_id: int) -> None:
        if self._items.pop(deal_id, None) is None:
            raise DealNotFound(deal_id)

    def clear(self) -> None:
        self._items.clear()

    def all(self) -> list[DealRecord]:
        return list(self._items.values())
