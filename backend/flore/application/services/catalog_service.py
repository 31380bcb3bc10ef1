"""Application service (use case) for products and categories."""

import copy
import logging
import uuid
from typing import Any

from flore.application.schemas import CategoryCreate, CategoryUpdate, ProductCreate, ProductUpdate
from flore.application.services.document_store import DocumentStore
from flore.domain.default_document import CATEGORIES, PRODUCTS
from flore.domain.entities import Category, Product
from flore.domain.exceptions import DuplicateEntityError, EntityNotFoundError

logger = logging.getLogger(__name__)


def _index_of(items: list[dict[str, Any]], entity_id: str) -> int | None:
    for index, item in enumerate(items):
        if item.get("id") == entity_id:
            return index
    return None


class CatalogService:
    """Reads and administers the product and category collections.

    Public callers only ever see active products; admin callers pass
    ``include_inactive=True``. Every write goes through ``DocumentStore.mutate``.
    """

    def __init__(self, store: DocumentStore):
        self._store = store

    # ── Products ────────────────────────────────────────────────────

    def list_products(self, include_inactive: bool = False) -> list[dict[str, Any]]:
        products = self._store.read(PRODUCTS)
        if include_inactive:
            return products
        return [p for p in products if p.get("active")]

    def get_product(self, product_id: str, include_inactive: bool = False) -> dict[str, Any]:
        for product in self.list_products(include_inactive=include_inactive):
            if product.get("id") == product_id:
                return product
        raise EntityNotFoundError("Product", product_id)

    async def create_product(self, data: ProductCreate) -> dict[str, Any]:
        product = Product(
            id=data.id or str(uuid.uuid4()),
            name=data.name,
            price=data.price,
            description=data.description,
            category=data.category,
            image_url=data.image_url,
            featured=data.featured,
            views=data.views,
            tags=list(data.tags),
            active=data.active,
        )
        document = product.to_document()

        def _append(doc: dict[str, Any]) -> dict[str, Any]:
            products = doc[PRODUCTS]
            if _index_of(products, product.id) is not None:
                raise DuplicateEntityError("Product", "id", product.id)
            products.append(document)
            return copy.deepcopy(document)

        created = await self._store.mutate(_append)
        logger.info("Created product %s", product.id)
        return created

    async def update_product(self, product_id: str, data: ProductUpdate) -> dict[str, Any]:
        changes = data.model_dump(by_alias=True, exclude_unset=True, exclude_none=True)

        def _update(doc: dict[str, Any]) -> dict[str, Any]:
            products = doc[PRODUCTS]
            index = _index_of(products, product_id)
            if index is None:
                raise EntityNotFoundError("Product", product_id)
            merged = {**products[index], **changes}
            Product.from_document(merged)
            products[index] = merged
            return copy.deepcopy(merged)

        updated = await self._store.mutate(_update)
        logger.info("Updated product %s (%s)", product_id, ", ".join(changes) or "no changes")
        return updated

    async def delete_product(self, product_id: str) -> bool:
        def _delete(doc: dict[str, Any]) -> bool:
            products = doc[PRODUCTS]
            index = _index_of(products, product_id)
            if index is None:
                raise EntityNotFoundError("Product", product_id)
            del products[index]
            return True

        result = await self._store.mutate(_delete)
        logger.info("Deleted product %s", product_id)
        return result

    # ── Categories ──────────────────────────────────────────────────

    def list_categories(self) -> list[dict[str, Any]]:
        return self._store.read(CATEGORIES)

    def get_category(self, category_id: str) -> dict[str, Any]:
        for category in self.list_categories():
            if category.get("id") == category_id:
                return category
        raise EntityNotFoundError("Category", category_id)

    async def create_category(self, data: CategoryCreate) -> dict[str, Any]:
        category = Category(
            id=data.id or str(uuid.uuid4()),
            name=data.name,
            description=data.description,
        )
        document = category.to_document()

        def _append(doc: dict[str, Any]) -> dict[str, Any]:
            categories = doc[CATEGORIES]
            if _index_of(categories, category.id) is not None:
                raise DuplicateEntityError("Category", "id", category.id)
            categories.append(document)
            return copy.deepcopy(document)

        created = await self._store.mutate(_append)
        logger.info("Created category %s", category.id)
        return created

    async def update_category(self, category_id: str, data: CategoryUpdate) -> dict[str, Any]:
        changes = data.model_dump(exclude_unset=True, exclude_none=True)

        def _update(doc: dict[str, Any]) -> dict[str, Any]:
            categories = doc[CATEGORIES]
            index = _index_of(categories, category_id)
            if index is None:
                raise EntityNotFoundError("Category", category_id)
            merged = {**categories[index], **changes}
            Category.from_document(merged)
            categories[index] = merged
            return copy.deepcopy(merged)

        updated = await self._store.mutate(_update)
        logger.info("Updated category %s (%s)", category_id, ", ".join(changes) or "no changes")
        return updated

    async def delete_category(self, category_id: str) -> bool:
        """Remove a category. Products referencing it are left untouched."""

        def _delete(doc: dict[str, Any]) -> bool:
            categories = doc[CATEGORIES]
            index = _index_of(categories, category_id)
            if index is None:
                raise EntityNotFoundError("Category", category_id)
            del categories[index]
            return True

        result = await self._store.mutate(_delete)
        logger.info("Deleted category %s", category_id)
        return result
