from __future__ import annotations

import pytest

from product_grid.domain.errors import InvalidInputError, NotFoundError
from product_grid.store import RecordStore


def test_get_all_returns_canonical_order_copies(catalog_rows) -> None:
    store = RecordStore(catalog_rows)

    records = store.get_all()
    assert [r.id for r in records] == list(range(1, 26))

    records[0].product_name = "tampered"
    assert store.get(1).product_name == "Widget 01"


def test_seed_with_duplicate_ids_is_rejected() -> None:
    with pytest.raises(InvalidInputError):
        RecordStore([{"id": 1}, {"id": 1}])


def test_replace_overwrites_field_in_place(store: RecordStore) -> None:
    store.insert({"productName": "Mouse"})

    store.replace(1, "price", "850")

    laptop = store.get(1)
    assert laptop.price == "850"
    assert laptop.product_name == "Laptop"
    assert laptop.sale_price == 899.99
    assert store.ids() == [1, 2]


def test_replace_accepts_attribute_names(store: RecordStore) -> None:
    store.replace(1, "sale_price", 10)
    assert store.get(1).as_row()["salePrice"] == 10


def test_replace_missing_record_raises_not_found(store: RecordStore) -> None:
    with pytest.raises(NotFoundError) as excinfo:
        store.replace(42, "price", "1")
    assert excinfo.value.record_id == 42


def test_replace_rejects_id_and_unknown_fields(store: RecordStore) -> None:
    with pytest.raises(InvalidInputError):
        store.replace(1, "id", 7)
    with pytest.raises(InvalidInputError):
        store.replace(1, "colour", "red")
    assert store.ids() == [1]


def test_replace_extra_seed_column() -> None:
    store = RecordStore([{"id": 1, "sku": "LP-1"}])
    store.replace(1, "sku", "LP-2")
    assert store.get(1).as_row()["sku"] == "LP-2"


def test_remove_compacts_positions(catalog_rows) -> None:
    store = RecordStore(catalog_rows[:4])

    store.remove(2)

    assert store.ids() == [1, 3, 4]
    assert 2 not in store
    with pytest.raises(NotFoundError):
        store.remove(2)


def test_insert_allocates_max_plus_one_and_merges_blank(store: RecordStore) -> None:
    created = store.insert({"productName": "Mouse"})

    assert created.id == 2
    row = created.as_row()
    assert row["productName"] == "Mouse"
    assert row["category"] == ""
    assert row["price"] == ""
    assert store.ids() == [1, 2]


def test_insert_into_empty_store_starts_at_one() -> None:
    store = RecordStore()
    assert store.insert().id == 1


def test_insert_does_not_reuse_deleted_id(store: RecordStore) -> None:
    store.insert({"productName": "Mouse"})
    store.remove(1)

    assert store.insert({}).id == 3


def test_insert_reuses_ids_only_when_every_higher_id_is_gone(store: RecordStore) -> None:
    store.insert({})
    store.remove(2)
    assert store.insert({}).id == 2

    store.remove(1)
    store.remove(2)
    assert len(store) == 0
    assert store.insert({}).id == 1


def test_insert_with_colliding_id_leaves_store_unchanged(store: RecordStore) -> None:
    with pytest.raises(InvalidInputError):
        store.insert({"id": 1, "productName": "Clone"})

    assert store.ids() == [1]
    assert store.get(1).product_name == "Laptop"


def test_insert_with_free_explicit_id_is_honored(store: RecordStore) -> None:
    assert store.insert({"id": 10}).id == 10
    assert store.next_id() == 11


def test_insert_with_invalid_values_is_rejected(store: RecordStore) -> None:
    with pytest.raises(InvalidInputError):
        store.insert({"id": "not-a-number"})
    assert len(store) == 1


def test_ids_stay_unique_across_insert_delete_sequences() -> None:
    store = RecordStore()
    for step in range(40):
        if step % 3 == 2 and len(store):
            store.remove(store.ids()[step % len(store)])
        else:
            store.insert({"productName": f"p{step}"})
        ids = store.ids()
        assert len(ids) == len(set(ids))
