"""
Products API endpoints for the catalog.
"""
from fastapi import APIRouter, Depends, Response, status

from pos_backend.api.v1.dependencies import get_product_repository
from pos_backend.logging_config import get_logger
from pos_backend.repositories import ProductRepository
from pos_backend.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductResponse
)

logger = get_logger("api.products")

router = APIRouter(prefix="/products", tags=["Products"])


@router.get("", response_model=list[ProductResponse])
async def list_products(
    repo: ProductRepository = Depends(get_product_repository)
):
    """List all products. No filtering or pagination."""
    return await repo.list()


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    product_data: ProductCreate,
    repo: ProductRepository = Depends(get_product_repository)
):
    """
    Create a new product.

    - **barcode**: Unique product barcode
    - **name**: Product name
    - **price**: Unit price
    - **details**: Optional free-text details
    """
    product = await repo.create(product_data)
    logger.info(f"Product created: {product.barcode}")
    return product


@router.put("/{barcode}", response_model=ProductResponse)
async def update_product(
    barcode: str,
    product_data: ProductUpdate,
    repo: ProductRepository = Depends(get_product_repository)
):
    """
    Update a product.

    Only provided fields will be updated.
    """
    product = await repo.update(barcode, product_data)
    logger.info(f"Product updated: {barcode}")
    return product


@router.delete("/{barcode}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    barcode: str,
    repo: ProductRepository = Depends(get_product_repository)
):
    """Delete a product by barcode."""
    await repo.delete(barcode)
    logger.info(f"Product deleted: {barcode}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
