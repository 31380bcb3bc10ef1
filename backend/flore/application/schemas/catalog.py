"""Pydantic DTOs (Data Transfer Objects) for products and categories."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductCreate(BaseModel):
    """Schema for creating a product. ``id`` is generated when omitted."""

    model_config = _CAMEL

    id: str | None = Field(None, min_length=1, max_length=64)
    name: str = Field(..., min_length=1, max_length=255, examples=["Buquê de Tulipas"])
    description: str = ""
    price: float = Field(..., ge=0, examples=[79.9])
    category: str = ""
    image_url: str = ""
    featured: bool = False
    views: int = Field(0, ge=0)
    tags: list[str] = Field(default_factory=list)
    active: bool = True


class ProductUpdate(BaseModel):
    """Schema for updating a product — all fields optional, id is immutable."""

    model_config = _CAMEL

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    price: float | None = Field(None, ge=0)
    category: str | None = None
    image_url: str | None = None
    featured: bool | None = None
    views: int | None = Field(None, ge=0)
    tags: list[str] | None = None
    active: bool | None = None


class CategoryCreate(BaseModel):
    """Schema for creating a category. ``id`` is generated when omitted."""

    id: str | None = Field(None, min_length=1, max_length=64, examples=["cestas"])
    name: str = Field(..., min_length=1, max_length=255, examples=["Cestas"])
    description: str = ""


class CategoryUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
