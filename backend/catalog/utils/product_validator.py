"""Validate raw product payloads and enforce field constraints."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from catalog.api.schemas.product import (
    DESCRIPTION_MIN_LENGTH,
    TITLE_MIN_LENGTH,
    ProductCreate,
    ProductUpdate,
)


class ViolationKind(str, Enum):
    """Which validation phase rejected a field."""

    MISSING = "missing"
    COERCION = "coercion"
    CONSTRAINT = "constraint"


# pydantic error types raised by the length/range checks; anything else
# other than "missing" comes from converting the input to the field type
CONSTRAINT_ERROR_TYPES = {"string_too_short", "greater_than"}

CONSTRAINT_MESSAGES = {
    "title": f"Title must be at least {TITLE_MIN_LENGTH} characters long.",
    "description": f"Description must be at least {DESCRIPTION_MIN_LENGTH} characters long.",
    "price": "Price must be greater than zero.",
}

NOT_AN_OBJECT_MESSAGE = "Request body must be a JSON object."
MALFORMED_JSON_MESSAGE = "Request body is not valid JSON."


@dataclass(frozen=True)
class Violation:
    path: str
    message: str
    kind: ViolationKind = ViolationKind.CONSTRAINT

    def as_issue(self) -> dict[str, str]:
        return {"path": self.path, "message": self.message}


class ProductValidationError(ValueError):
    """Raised when a payload fails validation; carries every violation found."""

    def __init__(self, violations: list[Violation]):
        self.violations = violations
        paths = ", ".join(v.path or "<body>" for v in violations)
        super().__init__(f"Invalid product payload: {paths}")


@dataclass(frozen=True)
class RawBody:
    """Undecoded request body, read by the validator and nothing else.

    Routes hand the bytes over untouched so that identifier checks run
    before the body is even parsed.
    """

    content: bytes

    def decode(self) -> Any:
        if not self.content.strip():
            return None
        try:
            return json.loads(self.content)
        except ValueError as exc:  # JSONDecodeError and UnicodeDecodeError
            raise ProductValidationError(
                [Violation("", MALFORMED_JSON_MESSAGE, ViolationKind.COERCION)]
            ) from exc


def _classify(error: dict[str, Any]) -> Violation:
    path = ".".join(str(part) for part in error["loc"])
    error_type = error["type"]

    if error_type == "missing":
        return Violation(path, f"Field '{path}' is required.", ViolationKind.MISSING)
    if error_type in CONSTRAINT_ERROR_TYPES:
        message = CONSTRAINT_MESSAGES.get(path, error["msg"])
        return Violation(path, message, ViolationKind.CONSTRAINT)
    return Violation(path, error["msg"], ViolationKind.COERCION)


def _validate(schema: type[BaseModel], raw: Any) -> BaseModel:
    if isinstance(raw, RawBody):
        raw = raw.decode()
    if not isinstance(raw, dict):
        raise ProductValidationError(
            [Violation("", NOT_AN_OBJECT_MESSAGE, ViolationKind.COERCION)]
        )
    try:
        return schema.model_validate(raw)
    except PydanticValidationError as exc:
        raise ProductValidationError([_classify(e) for e in exc.errors()]) from exc


def validate_create(raw: Any) -> dict[str, Any]:
    """Full-mode validation used on creation.

    Returns the normalized record (title, description, price, featured) with
    ``featured`` defaulted to ``False``. Unknown keys are dropped.
    """
    return _validate(ProductCreate, raw).model_dump()


def validate_update(raw: Any) -> dict[str, Any]:
    """Partial-mode validation used on update.

    Only the fields present in ``raw`` are checked and returned; absent
    fields are neither defaulted nor nulled.
    """
    return _validate(ProductUpdate, raw).model_dump(exclude_unset=True)


def parse_product_id(raw: Any) -> int | None:
    """Return ``raw`` as a positive integer id, or ``None`` if it is not one.

    Accepts integers and numeric text with an integral value ("7", " 7 ",
    "7.0"); rejects booleans, fractions, non-finite values and anything <= 0.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw if raw > 0 else None
    if not isinstance(raw, str):
        return None

    text = raw.strip()
    if "_" in text:  # int()/float() accept digit separators
        return None
    try:
        value = int(text)
    except ValueError:
        try:
            number = float(text)
        except ValueError:
            return None
        if not number.is_integer():  # also False for inf/nan
            return None
        value = int(number)
    return value if value > 0 else None
