"""
Pydantic schemas for Invoice model.
"""
from typing import Optional
from datetime import datetime
import uuid
from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel


class InvoiceItem(BaseModel):
    """Single invoice line."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        extra="forbid"
    )

    barcode: Optional[str] = None
    name: Optional[str] = None
    price: Optional[float] = None
    quantity: Optional[float] = None
    details: Optional[str] = None


class InvoiceBase(BaseModel):
    """Base invoice schema."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int = Field(..., ge=-(2 ** 63 - 1), le=2 ** 63 - 1)
    customer_name: Optional[str] = Field(None, max_length=255)
    customer_phone: Optional[str] = Field(None, max_length=50)
    items: list[InvoiceItem] = Field(default_factory=list)
    subtotal: Optional[float] = None
    discount: Optional[float] = None
    tax_rate: Optional[float] = None
    tax_amount: Optional[float] = None
    total: Optional[float] = None


class InvoiceCreate(InvoiceBase):
    """
    Schema for creating an invoice.

    Totals are stored as sent; the caller is responsible for keeping
    subtotal, tax and total consistent with the items.
    """
    model_config = ConfigDict(extra="forbid")

    date: Optional[datetime] = None
    saved_at: Optional[datetime] = None


class InvoiceResponse(InvoiceBase):
    """Schema for invoice response."""
    model_config = ConfigDict(from_attributes=True)

    document_id: uuid.UUID
    date: datetime
    saved_at: datetime


class NextInvoiceIdResponse(BaseModel):
    """Advisory next invoice number."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    next_invoice_id: int


class QuickInvoiceCreate(BaseModel):
    """
    Payload of the quick invoice route.

    All fields are declared optional so that missing ones can be
    reported together in a single structured error.
    """
    model_config = ConfigDict(extra="forbid")

    items: Optional[list[InvoiceItem]] = None
    total: Optional[float] = None
    date: Optional[datetime] = None
    customer: Optional[str] = None

    def missing_fields(self) -> list[str]:
        missing = []
        for field in ("items", "total", "date", "customer"):
            value = getattr(self, field)
            if value is None or value == "":
                missing.append(field)
        return missing


class QuickInvoiceResponse(BaseModel):
    """Response of the quick invoice route."""
    message: str
    invoice: InvoiceResponse
