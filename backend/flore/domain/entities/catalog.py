"""Catalog entities — products and categories as stored in the document."""

import numbers
from dataclasses import dataclass, field
from typing import Any

from flore.domain.exceptions import DomainValidationError


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


@dataclass
class Product:
    """A sellable item. ``active=False`` hides it from the public catalog."""

    id: str
    name: str
    price: float
    description: str = ""
    category: str = ""
    image_url: str = ""
    featured: bool = False
    views: int = 0
    tags: list[str] = field(default_factory=list)
    active: bool = True

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Raise DomainValidationError if any field would corrupt the document."""
        if not isinstance(self.id, str) or not self.id.strip():
            raise DomainValidationError("Product id must be a non-empty string")
        if not isinstance(self.name, str) or not self.name.strip():
            raise DomainValidationError("Product name must be a non-empty string")
        if not _is_number(self.price) or self.price < 0:
            raise DomainValidationError("Product price must be a non-negative number")
        if isinstance(self.views, bool) or not isinstance(self.views, int) or self.views < 0:
            raise DomainValidationError("Product views must be a non-negative integer")
        if not isinstance(self.tags, list) or not all(isinstance(t, str) for t in self.tags):
            raise DomainValidationError("Product tags must be a list of strings")
        for flag in ("featured", "active"):
            if not isinstance(getattr(self, flag), bool):
                raise DomainValidationError(f"Product {flag} must be a boolean")

    def to_document(self) -> dict[str, Any]:
        """Serialise using the stored (camelCase) key names."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "category": self.category,
            "imageUrl": self.image_url,
            "featured": self.featured,
            "views": self.views,
            "tags": list(self.tags),
            "active": self.active,
        }

    @classmethod
    def from_document(cls, data: dict[str, Any]) -> "Product":
        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            price=data.get("price", 0),
            description=data.get("description", ""),
            category=data.get("category", ""),
            image_url=data.get("imageUrl", ""),
            featured=data.get("featured", False),
            views=data.get("views", 0),
            tags=data.get("tags", []),
            active=data.get("active", True),
        )


@dataclass
class Category:
    """Product grouping referenced by ``Product.category`` (no FK enforcement)."""

    id: str
    name: str
    description: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id.strip():
            raise DomainValidationError("Category id must be a non-empty string")
        if not isinstance(self.name, str) or not self.name.strip():
            raise DomainValidationError("Category name must be a non-empty string")

    def to_document(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "description": self.description}

    @classmethod
    def from_document(cls, data: dict[str, Any]) -> "Category":
        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            description=data.get("description", ""),
        )
