from datetime import datetime

from domain_watch.domain.models import add_years
from domain_watch.store import DomainRecordStore


def test_new_store_is_empty(store: DomainRecordStore):
    assert len(store) == 0
    assert store.all_records() == ()


def test_insert_preserves_order_and_derives_expiry(store: DomainRecordStore):
    store.insert(2, "b.com", "Bea", datetime(2023, 2, 1))
    store.insert(1, "a.com", "Al", datetime(2023, 1, 1))

    records = store.all_records()
    assert [r.id for r in records] == [2, 1]
    assert [r.name for r in records] == ["b.com", "a.com"]
    for record in records:
        assert record.expiry_date == add_years(record.start_date, 1)


def test_duplicate_ids_and_names_are_kept(store: DomainRecordStore):
    store.insert(1, "dup.com", "First", datetime(2023, 1, 1))
    store.insert(1, "dup.com", "Second", datetime(2023, 1, 2))
    assert len(store) == 2
    assert [r.owner for r in store] == ["First", "Second"]


def test_all_records_is_a_read_only_snapshot(store: DomainRecordStore):
    store.insert(1, "a.com", "Al", datetime(2023, 1, 1))
    snapshot = store.all_records()
    assert isinstance(snapshot, tuple)

    store.insert(2, "b.com", "Bea", datetime(2023, 1, 1))
    assert len(snapshot) == 1
    assert len(store.all_records()) == 2


def test_sample_seed_inserts_ten_records(sample_store: DomainRecordStore):
    assert [r.id for r in sample_store] == list(range(1, 11))
