"""Business logic for the product CRUD operations.

Each public method takes raw request input (path segment and/or decoded
JSON body), runs the precondition checks, calls the store at most once for
a write, and returns an ``Outcome``. Nothing here raises for expected
failures; unexpected exceptions are logged and reported as
``INTERNAL_FAILURE``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from functools import wraps
from typing import Any, Callable

from catalog.services.product_store import ProductStore, StoreResult, StoreStatus
from catalog.utils.product_validator import (
    ProductValidationError,
    Violation,
    parse_product_id,
    validate_create,
    validate_update,
)

logger = logging.getLogger(__name__)


class OutcomeKind(str, Enum):
    SUCCESS = "success"
    VALIDATION_FAILED = "validation_failed"
    NOT_FOUND = "not_found"
    INVALID_IDENTIFIER = "invalid_identifier"
    INTERNAL_FAILURE = "internal_failure"


@dataclass(frozen=True)
class Outcome:
    kind: OutcomeKind
    payload: Any = None
    violations: list[Violation] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS


def _guarded(operation: str) -> Callable:
    """Turn any unexpected exception raised by ``operation`` into INTERNAL_FAILURE."""

    def decorator(func: Callable[..., Outcome]) -> Callable[..., Outcome]:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Outcome:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                logger.error(f"Unexpected error during {operation}: {e}", exc_info=True)
                return Outcome(OutcomeKind.INTERNAL_FAILURE)

        return wrapper

    return decorator


def _from_store(result: StoreResult, operation: str) -> Outcome:
    if result.status is StoreStatus.OK:
        return Outcome(OutcomeKind.SUCCESS, result.value)
    if result.status is StoreStatus.NOT_FOUND:
        return Outcome(OutcomeKind.NOT_FOUND)
    logger.error(f"Storage failure during {operation}: {result.detail}")
    return Outcome(OutcomeKind.INTERNAL_FAILURE)


class ProductService:
    def __init__(self, store: ProductStore):
        self.store = store

    @_guarded("list")
    def list_products(self) -> Outcome:
        return _from_store(self.store.list_all(), "list")

    @_guarded("get")
    def get_product(self, raw_id: Any) -> Outcome:
        product_id = parse_product_id(raw_id)
        if product_id is None:
            return Outcome(OutcomeKind.INVALID_IDENTIFIER)
        return _from_store(self.store.get_by_id(product_id), "get")

    @_guarded("create")
    def create_product(self, body: Any) -> Outcome:
        try:
            record = validate_create(body)
        except ProductValidationError as e:
            return Outcome(OutcomeKind.VALIDATION_FAILED, violations=e.violations)
        return _from_store(self.store.create(record), "create")

    @_guarded("update")
    def update_product(self, raw_id: Any, body: Any) -> Outcome:
        product_id = parse_product_id(raw_id)
        if product_id is None:
            return Outcome(OutcomeKind.INVALID_IDENTIFIER)
        try:
            changes = validate_update(body)
        except ProductValidationError as e:
            return Outcome(OutcomeKind.VALIDATION_FAILED, violations=e.violations)
        return _from_store(self.store.update(product_id, changes), "update")

    @_guarded("delete")
    def delete_product(self, raw_id: Any) -> Outcome:
        product_id = parse_product_id(raw_id)
        if product_id is None:
            return Outcome(OutcomeKind.INVALID_IDENTIFIER)
        return _from_store(self.store.delete(product_id), "delete")
