"""
Product repository over the ``products`` collection.
"""
from typing import Sequence
from sqlalchemy import select

from pos_backend.error_handlers import ResourceNotFoundError
from pos_backend.models.product import Product
from pos_backend.repositories.base import Repository
from pos_backend.schemas.product import ProductCreate, ProductUpdate


class ProductRepository(Repository):
    """CRUD for catalog products keyed by barcode."""

    resource = "Product"
    key_field = "barcode"

    async def list(self) -> Sequence[Product]:
        """Return every product, oldest first."""
        result = await self.session.execute(
            select(Product).order_by(Product.created_at)
        )
        return result.scalars().all()

    async def get(self, barcode: str) -> Product:
        result = await self.session.execute(
            select(Product).where(Product.barcode == barcode)
        )
        product = result.scalar_one_or_none()

        if not product:
            raise ResourceNotFoundError(self.resource, barcode)

        return product

    async def create(self, product_data: ProductCreate) -> Product:
        """Insert a product; the barcode index rejects duplicates."""
        product = Product(**product_data.model_dump(exclude_none=True))

        self.session.add(product)
        await self.commit(product.barcode)

        return product

    async def update(self, barcode: str, patch: ProductUpdate) -> Product:
        """
        Replace the supplied fields of the product with this barcode.

        Fields absent from the patch keep their stored values.
        """
        product = await self.get(barcode)

        update_data = patch.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(product, field, value)

        await self.commit(product.barcode)

        return product

    async def delete(self, barcode: str) -> None:
        product = await self.get(barcode)

        await self.session.delete(product)
        await self.session.commit()
