"""Store access for the two document collections."""
from pos_backend.repositories.products import ProductRepository
from pos_backend.repositories.invoices import InvoiceRepository

__all__ = ["ProductRepository", "InvoiceRepository"]
