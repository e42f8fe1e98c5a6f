#!/usr/bin/env python3
"""Reset the products table and load the demo catalog."""

import logging
import sys

from sqlalchemy import delete
from sqlalchemy.orm import Session

from catalog.core.config import get_settings
from catalog.core.logging_config import setup_logging
from catalog.db.models.product import Product
from catalog.db.session import SessionLocal, init_db
from catalog.utils.product_validator import validate_create

logger = logging.getLogger("seed")

SEED_PRODUCTS = [
    {
        "title": "Black ballpoint pen",
        "description": "Fine tip ballpoint pen",
        "price": 4.00,
        "featured": True,
    },
    {
        "title": "Smartphone A40",
        "description": "LG smartphone, 64 GB",
        "price": 1205.00,
        "featured": False,
    },
    {
        "title": "20-subject notebook",
        "description": "Spiral bound 20-subject notebook",
        "price": 40.00,
        "featured": False,
    },
    {
        "title": "School eraser",
        "description": "Two-colour school eraser",
        "price": 5.00,
        "featured": False,
    },
    {
        "title": "Mechanical pencil 1.5",
        "description": "1.5 mm mechanical pencil",
        "price": 12.00,
        "featured": False,
    },
]


def seed(db: Session) -> int:
    """Replace every product with the demo rows and return how many were inserted."""
    records = [validate_create(item) for item in SEED_PRODUCTS]

    try:
        db.execute(delete(Product))
        db.add_all(Product(**record) for record in records)
        db.commit()
    except Exception:
        db.rollback()
        raise
    return len(records)


def main() -> int:
    setup_logging(get_settings().log_level)
    logger.info("Seeding database...")
    try:
        init_db()
        with SessionLocal() as db:
            count = seed(db)
    except Exception as e:
        logger.error(f"Failed to seed database: {e}", exc_info=True)
        return 1
    logger.info(f"{count} products created")
    return 0


if __name__ == "__main__":
    sys.exit(main())
