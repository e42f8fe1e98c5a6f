"""Persistence layer bridging validated product records and the products table."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import ObjectDeletedError, StaleDataError

from catalog.api.schemas.product import ProductRead
from catalog.db.models.product import Product

logger = logging.getLogger(__name__)

# Largest value the INTEGER primary key can hold
MAX_PRODUCT_ID = 2**31 - 1


class StoreStatus(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True)
class StoreResult:
    """Result of one storage call.

    ``detail`` is only set for ``FAILED`` and is meant for logs, never for
    API responses.
    """

    status: StoreStatus
    value: Any = None
    detail: str | None = None

    @classmethod
    def ok(cls, value: Any = None) -> StoreResult:
        return cls(StoreStatus.OK, value)

    @classmethod
    def not_found(cls) -> StoreResult:
        return cls(StoreStatus.NOT_FOUND)

    @classmethod
    def failed(cls, detail: str) -> StoreResult:
        return cls(StoreStatus.FAILED, detail=detail)


class ProductStore:
    """Read/write access to products for a single session (one request)."""

    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> StoreResult:
        try:
            products = self.db.scalars(select(Product).order_by(Product.id)).all()
            return StoreResult.ok([ProductRead.model_validate(p) for p in products])
        except SQLAlchemyError as e:
            return self._failed("listing products", e)

    def get_by_id(self, product_id: int) -> StoreResult:
        if product_id > MAX_PRODUCT_ID:
            return StoreResult.not_found()
        try:
            product = self.db.get(Product, product_id)
            if product is None:
                return StoreResult.not_found()
            return StoreResult.ok(ProductRead.model_validate(product))
        except SQLAlchemyError as e:
            return self._failed(f"fetching product {product_id}", e)

    def create(self, record: dict[str, Any]) -> StoreResult:
        try:
            product = Product(**record)
            self.db.add(product)
            self.db.commit()
            self.db.refresh(product)
            logger.info(f"Created product {product.id}")
            return StoreResult.ok(ProductRead.model_validate(product))
        except SQLAlchemyError as e:
            return self._failed("creating product", e)

    def update(self, product_id: int, changes: dict[str, Any]) -> StoreResult:
        """Apply only the supplied fields to an existing product."""
        if product_id > MAX_PRODUCT_ID:
            return StoreResult.not_found()
        try:
            product = self.db.get(Product, product_id)
            if product is None:
                return StoreResult.not_found()

            for field, value in changes.items():
                setattr(product, field, value)

            self.db.commit()
            self.db.refresh(product)
            logger.info(f"Updated product {product_id} fields={sorted(changes)}")
            return StoreResult.ok(ProductRead.model_validate(product))
        except (StaleDataError, ObjectDeletedError):
            # Row vanished between the lookup and the write
            self.db.rollback()
            logger.info(f"Product {product_id} was deleted during update")
            return StoreResult.not_found()
        except SQLAlchemyError as e:
            return self._failed(f"updating product {product_id}", e)

    def delete(self, product_id: int) -> StoreResult:
        """Permanently remove a product; ``NOT_FOUND`` when no row was deleted."""
        if product_id > MAX_PRODUCT_ID:
            return StoreResult.not_found()
        try:
            result = self.db.execute(delete(Product).where(Product.id == product_id))
            self.db.commit()
            if result.rowcount == 0:
                return StoreResult.not_found()
            logger.info(f"Deleted product {product_id}")
            return StoreResult.ok()
        except SQLAlchemyError as e:
            return self._failed(f"deleting product {product_id}", e)

    def _failed(self, action: str, error: SQLAlchemyError) -> StoreResult:
        self.db.rollback()
        logger.error(f"Database error {action}: {error}", exc_info=True)
        return StoreResult.failed(f"{type(error).__name__}: {error}")
