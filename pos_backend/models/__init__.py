"""
SQLAlchemy models for the POS backend.
Import all models here to ensure they're registered with SQLAlchemy.
"""
from pos_backend.models.product import Product
from pos_backend.models.invoice import Invoice

__all__ = [
    "Product",
    "Invoice",
]
