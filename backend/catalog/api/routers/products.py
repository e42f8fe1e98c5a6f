"""CRUD endpoints for the product catalog."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from catalog.api.dependencies.db import get_product_service
from catalog.api.schemas.product import ProductRead
from catalog.services.product_service import Outcome, OutcomeKind, ProductService
from catalog.utils.product_validator import RawBody

logger = logging.getLogger(__name__)

router = APIRouter()

INVALID_ID_MESSAGE = "Invalid product id. It must be a positive integer."
NOT_FOUND_MESSAGE = "Product not found."
VALIDATION_MESSAGE = "Validation failed."
INTERNAL_MESSAGES = {
    "list": "Failed to retrieve products.",
    "get": "Failed to retrieve product.",
    "create": "Failed to create product.",
    "update": "Failed to update product.",
    "delete": "Failed to delete product.",
}


def _unwrap(outcome: Outcome, operation: str) -> Any:
    """Return the success payload or raise the matching HTTPException."""
    if outcome.kind is OutcomeKind.SUCCESS:
        return outcome.payload
    if outcome.kind is OutcomeKind.INVALID_IDENTIFIER:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_ID_MESSAGE)
    if outcome.kind is OutcomeKind.VALIDATION_FAILED:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "message": VALIDATION_MESSAGE,
                "issues": [v.as_issue() for v in outcome.violations],
            },
        )
    if outcome.kind is OutcomeKind.NOT_FOUND:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)
    raise HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=INTERNAL_MESSAGES[operation],
    )


@router.get("", summary="List all products", response_model=list[ProductRead])
@router.get("/", include_in_schema=False, response_model=list[ProductRead])
async def list_products(
    service: ProductService = Depends(get_product_service),
) -> list[ProductRead]:
    """Return every product in the catalog, ordered by id."""
    return _unwrap(service.list_products(), "list")


@router.get("/{product_id}", summary="Get a product by id", response_model=ProductRead)
async def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    return _unwrap(service.get_product(product_id), "get")


@router.post(
    "",
    summary="Create a product",
    status_code=status.HTTP_201_CREATED,
    response_model=ProductRead,
)
@router.post(
    "/",
    include_in_schema=False,
    status_code=status.HTTP_201_CREATED,
    response_model=ProductRead,
)
async def create_product(
    request: Request,
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    """Create a product from a full payload; ``featured`` defaults to false."""
    payload = RawBody(await request.body())
    return _unwrap(service.create_product(payload), "create")


@router.put("/{product_id}", summary="Update a product", response_model=ProductRead)
async def update_product(
    product_id: str,
    request: Request,
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    """Apply a partial update. Omitted fields keep their stored values."""
    payload = RawBody(await request.body())
    return _unwrap(service.update_product(product_id, payload), "update")


@router.delete(
    "/{product_id}",
    summary="Delete a product permanently",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> Response:
    _unwrap(service.delete_product(product_id), "delete")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
