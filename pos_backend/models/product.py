"""
Product model for the catalog.
"""
from typing import Optional
from datetime import datetime, timezone
from sqlalchemy import String, Float, Text, DateTime, Index
from sqlalchemy.orm import Mapped, mapped_column

from pos_backend.core.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Product(Base):
    """Catalog product, identified by its barcode."""

    __tablename__ = "products"

    barcode: Mapped[str] = mapped_column(String(100), nullable=False)
    name: Mapped[str] = mapped_column(String(500), nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    details: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False
    )

    __table_args__ = (
        Index("idx_products_barcode", "barcode", unique=True),
    )

    def __repr__(self) -> str:
        return f"<Product(barcode={self.barcode}, name={self.name}, price={self.price})>"
