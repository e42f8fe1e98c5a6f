"""SQLAlchemy model for catalog product records."""

from sqlalchemy import Boolean, Column, Float, Integer, Text, false

from catalog.db.base import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    price = Column(Float, nullable=False)
    featured = Column(Boolean, nullable=False, default=False, server_default=false())

    # Deleted ids must never be handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    def __repr__(self) -> str:
        return f"<Product id={self.id} title={self.title!r}>"
