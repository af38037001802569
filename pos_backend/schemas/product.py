"""
Pydantic schemas for Product model.
"""
from typing import Optional
from datetime import datetime
import uuid
from pydantic import BaseModel, Field, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class ProductBase(BaseModel):
    """Base product schema."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    barcode: str = Field(..., min_length=1, max_length=100)
    name: str = Field(..., min_length=1, max_length=500)
    price: float
    details: Optional[str] = None


class ProductCreate(ProductBase):
    """Schema for creating a product."""
    model_config = ConfigDict(extra="forbid")

    created_at: Optional[datetime] = None


class ProductUpdate(BaseModel):
    """Schema for updating a product. Only provided fields are replaced."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    barcode: Optional[str] = Field(None, min_length=1, max_length=100)
    name: Optional[str] = Field(None, min_length=1, max_length=500)
    price: Optional[float] = None
    details: Optional[str] = None

    @field_validator("barcode", "name", "price")
    @classmethod
    def required_fields_not_null(cls, value):
        # Defaults are not validated, so this only fires on an explicit null
        if value is None:
            raise ValueError("field is required and cannot be null")
        return value


class ProductResponse(ProductBase):
    """Schema for product response."""
    model_config = ConfigDict(from_attributes=True)

    document_id: uuid.UUID
    created_at: datetime
