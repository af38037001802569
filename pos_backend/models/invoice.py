"""
Invoice model for recorded sales.
"""
from typing import Optional
from datetime import datetime
from sqlalchemy import BigInteger, String, Float, DateTime, JSON, Index
from sqlalchemy.orm import Mapped, mapped_column

from pos_backend.core.database import Base
from pos_backend.models.product import utcnow


class Invoice(Base):
    """Sales invoice with its line items embedded in insertion order."""

    __tablename__ = "invoices"

    # Invoice number, suggested to clients by the next-id lookup
    id: Mapped[int] = mapped_column(BigInteger, nullable=False)
    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False
    )

    customer_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    customer_phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    # [{barcode, name, price, quantity, details}, ...]
    items: Mapped[list] = mapped_column(JSON, default=list, nullable=False)

    subtotal: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    discount: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    tax_rate: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    tax_amount: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    total: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    saved_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False
    )

    __table_args__ = (
        Index("idx_invoices_id", "id", unique=True),
        Index("idx_invoices_date", "date"),
    )

    def __repr__(self) -> str:
        return f"<Invoice(id={self.id}, customer={self.customer_name}, total={self.total})>"
