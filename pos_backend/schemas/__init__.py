"""
Pydantic schemas for request/response validation.
"""
from pos_backend.schemas.product import (
    ProductBase, ProductCreate, ProductUpdate, ProductResponse
)
from pos_backend.schemas.invoice import (
    InvoiceItem, InvoiceBase, InvoiceCreate, InvoiceResponse,
    NextInvoiceIdResponse, QuickInvoiceCreate, QuickInvoiceResponse
)
from pos_backend.schemas.health import HealthCheck

__all__ = [
    # Product schemas
    "ProductBase", "ProductCreate", "ProductUpdate", "ProductResponse",

    # Invoice schemas
    "InvoiceItem", "InvoiceBase", "InvoiceCreate", "InvoiceResponse",
    "NextInvoiceIdResponse", "QuickInvoiceCreate", "QuickInvoiceResponse",

    # Status
    "HealthCheck",
]
