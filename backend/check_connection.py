#!/usr/bin/env python3
"""Print every product to confirm the database is reachable."""

from sqlalchemy import select

from catalog.db.models.product import Product
from catalog.db.session import SessionLocal

with SessionLocal() as db:
    products = db.scalars(select(Product).order_by(Product.id)).all()

    if not products:
        print("Connected. No products found.")
    for product in products:
        print(f"{product.title} - ${product.price:.2f}")
