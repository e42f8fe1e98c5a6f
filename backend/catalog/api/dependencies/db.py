"""Database session and service dependencies."""

from collections.abc import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from catalog.db.session import get_db
from catalog.services.product_service import ProductService
from catalog.services.product_store import ProductStore


def get_session() -> Generator[Session, None, None]:
    """FastAPI dependency that yields a managed SQLAlchemy session."""
    yield from get_db()


def get_product_service(db: Session = Depends(get_session)) -> ProductService:
    """Build a request-scoped product service over the request's session."""
    return ProductService(ProductStore(db))
