"""API Router."""
from fastapi import APIRouter

from pos_backend.api.v1 import products, invoices

api_router = APIRouter(prefix="/api")

# Include all route modules
api_router.include_router(products.router)
api_router.include_router(invoices.router)

__all__ = ["api_router"]
