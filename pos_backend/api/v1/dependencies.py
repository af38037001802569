"""
Repository dependencies for route handlers.
"""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from pos_backend.core.database import get_db
from pos_backend.repositories import ProductRepository, InvoiceRepository


def get_product_repository(db: AsyncSession = Depends(get_db)) -> ProductRepository:
    return ProductRepository(db)


def get_invoice_repository(db: AsyncSession = Depends(get_db)) -> InvoiceRepository:
    return InvoiceRepository(db)
