import pytest

from crest.adapters.memory_repo import InMemoryDealRepository
from crest.analysis.finance import compute_metrics
from crest.domain.ports import DealNotFound
from crest.services import deal_book
from crest.services.deal_book import DealBook
from deal_fixtures import houston_car_wash, money_pit


@pytest.fixture
def book():
    return DealBook(InMemoryDealRepository())


def test_save_assigns_ids_and_metrics(book):
    a = book.save(houston_car_wash())
    b = book.save(money_pit())

    assert (a.id, b.id) == (1, 2)
    assert a.metrics == compute_metrics(houston_car_wash())
    assert [r.id for r in book.records()] == [1, 2]


def test_save_accepts_camel_case_mapping(book):
    rec = book.save({"name": "From Form", "purchasePrice": "500000", "grossRevenue": 90_000})

    assert rec.deal.name == "From Form"
    assert rec.metrics.total_project_cost == 500_000


def test_save_with_existing_id_replaces_and_recalculates(book):
    rec = book.save(houston_car_wash())
    updated = book.save(houston_car_wash().with_changes(gross_revenue=600_000), deal_id=rec.id)

    assert updated.id == rec.id
    assert len(book.records()) == 1
    assert updated.metrics.noi > rec.metrics.noi


def test_save_with_unknown_id_inserts_new(book):
    rec = book.save(houston_car_wash(), deal_id=42)

    assert rec.id != 42
    assert len(book.records()) == 1


def test_update_recomputes_metrics(book):
    rec = book.save(houston_car_wash())
    updated = book.update(rec.id, location="Miami, FL")

    assert updated.metrics.property_tax_rate == 1.02
    assert book.get(rec.id).metrics.property_tax_rate == 1.02


def test_update_is_logged(book, monkeypatch):
    calls = []
    monkeypatch.setattr(deal_book.logger, "debug", lambda msg, **kw: calls.append((msg, kw)))

    rec = book.save(houston_car_wash())
    book.update(rec.id, gross_revenue=600_000)

    msg, kw = calls[-1]
    assert msg == "deal updated"
    assert kw["extra"]["context"]["deal_id"] == rec.id
    assert kw["extra"]["context"]["fields"] == ["gross_revenue"]


def test_duplicate_appends_copy(book):
    rec = book.save(houston_car_wash())
    dup = book.duplicate(rec.id)

    assert dup.id != rec.id
    assert dup.deal.name == "Houston Express Car Wash (Copy)"
    assert dup.metrics == rec.metrics
    assert len(book.records()) == 2


def test_delete_and_missing_ids(book):
    rec = book.save(houston_car_wash())
    book.delete(rec.id)

    assert book.records() == []
    with pytest.raises(DealNotFound):
        book.get(rec.id)
    with pytest.raises(DealNotFound):
        book.delete(rec.id)
    with pytest.raises(DealNotFound):
        book.duplicate(rec.id)


def test_ids_are_not_reused_after_delete(book):
    first = book.save(houston_car_wash())
    book.delete(first.id)
    second = book.save(houston_car_wash())

    assert second.id != first.id


def test_seed_samples_loads_five_deals(book):
    records = book.seed_samples()

    assert len(records) == 5
    assert records[0].deal.name == "Houston Express Car Wash"
    assert records[0].metrics.noi == pytest.approx(334_798)


def test_reset_clears_and_optionally_reseeds(book):
    book.save(houston_car_wash())
    book.reset()
    assert book.records() == []

    book.reset(seed=True)
    assert len(book.records()) == 5


def test_summary_rolls_up_book(book):
    book.seed_samples()
    s = book.summary()

    assert s.n_deals == 5
    assert s.total_project_cost == pytest.approx(22_400_000)
    assert s.total_noi == pytest.approx(sum(r.metrics.noi for r in book.records()))
    assert s.mean_total_roi == pytest.approx(sum(r.metrics.total_roi for r in book.records()) / 5)
