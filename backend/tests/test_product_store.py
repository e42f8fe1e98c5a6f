"""Tests for ProductStore against an in-memory SQLite database."""

from unittest.mock import MagicMock

from sqlalchemy import Text
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from catalog.db.models.product import Product
from catalog.services.product_store import MAX_PRODUCT_ID, ProductStore, StoreStatus


def _record(**overrides):
    record = {
        "title": "Pencil set",
        "description": "Box of 12 pencils",
        "price": 7.5,
        "featured": False,
    }
    record.update(overrides)
    return record


class TestProductStore:
    def test_create_assigns_id_and_get_returns_same_record(self, db_session):
        store = ProductStore(db_session)

        created = store.create(_record())
        fetched = store.get_by_id(created.value.id)

        assert created.status is StoreStatus.OK
        assert created.value.id > 0
        assert fetched.status is StoreStatus.OK
        assert fetched.value == created.value

    def test_list_returns_products_in_id_order(self, db_session):
        store = ProductStore(db_session)
        first = store.create(_record(title="First product")).value
        second = store.create(_record(title="Second product")).value

        result = store.list_all()

        assert result.status is StoreStatus.OK
        assert [p.id for p in result.value] == [first.id, second.id]

    def test_list_empty_table(self, db_session):
        assert ProductStore(db_session).list_all().value == []

    def test_get_missing_product(self, db_session):
        assert ProductStore(db_session).get_by_id(999999).status is StoreStatus.NOT_FOUND

    def test_id_beyond_integer_range_is_not_found(self, db_session):
        store = ProductStore(db_session)

        assert store.get_by_id(MAX_PRODUCT_ID + 1).status is StoreStatus.NOT_FOUND
        assert store.update(MAX_PRODUCT_ID + 1, {"price": 1.0}).status is StoreStatus.NOT_FOUND
        assert store.delete(MAX_PRODUCT_ID + 1).status is StoreStatus.NOT_FOUND

    def test_update_changes_only_supplied_fields(self, db_session):
        store = ProductStore(db_session)
        created = store.create(_record(featured=True)).value

        updated = store.update(created.id, {"price": 9.99})

        assert updated.status is StoreStatus.OK
        assert updated.value.price == 9.99
        assert updated.value.title == created.title
        assert updated.value.description == created.description
        assert updated.value.featured is True

    def test_update_with_no_changes_returns_current_record(self, db_session):
        store = ProductStore(db_session)
        created = store.create(_record()).value

        assert store.update(created.id, {}).value == created

    def test_update_missing_product(self, db_session):
        assert ProductStore(db_session).update(12345, {"price": 1.0}).status is StoreStatus.NOT_FOUND

    def test_delete_removes_permanently(self, db_session):
        store = ProductStore(db_session)
        created = store.create(_record()).value

        assert store.delete(created.id).status is StoreStatus.OK
        assert store.get_by_id(created.id).status is StoreStatus.NOT_FOUND
        assert store.delete(created.id).status is StoreStatus.NOT_FOUND

    def test_deleted_ids_are_not_reused(self, db_session):
        store = ProductStore(db_session)
        store.create(_record(title="Keep this one"))
        removed = store.create(_record(title="Remove this one")).value
        store.delete(removed.id)

        replacement = store.create(_record(title="Brand new one")).value

        assert replacement.id > removed.id


class TestProductStoreFailures:
    def _broken_session(self):
        session = MagicMock(spec=Session)
        error = OperationalError("SELECT 1", {}, Exception("connection refused"))
        session.scalars.side_effect = error
        session.get.side_effect = error
        session.execute.side_effect = error
        session.commit.side_effect = error
        return session

    def test_storage_errors_become_failed_results(self):
        session = self._broken_session()
        store = ProductStore(session)

        results = [
            store.list_all(),
            store.get_by_id(1),
            store.create(_record()),
            store.update(1, {"price": 2.0}),
            store.delete(1),
        ]

        assert all(r.status is StoreStatus.FAILED for r in results)
        assert all("OperationalError" in r.detail for r in results)
        assert session.rollback.call_count == len(results)


class TestProductSchema:
    def test_text_columns_are_unbounded(self):
        assert isinstance(Product.__table__.c.title.type, Text)
        assert isinstance(Product.__table__.c.description.type, Text)

    def test_long_title_round_trips(self, db_session):
        store = ProductStore(db_session)

        created = store.create(_record(title="T" * 1000)).value

        assert store.get_by_id(created.id).value.title == "T" * 1000
