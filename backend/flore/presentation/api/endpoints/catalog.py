"""Public catalog endpoints — active products, categories and site settings."""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from flore.application.services import CatalogService, SettingsService
from flore.domain.exceptions import EntityNotFoundError
from flore.infrastructure.dependencies import get_catalog_service, get_settings_service

router = APIRouter(tags=["Catalog"])


@router.get("/products")
async def list_products(
    service: CatalogService = Depends(get_catalog_service),
) -> list[dict[str, Any]]:
    """Active products, in store order."""
    return service.list_products()


@router.get("/products/{product_id}")
async def get_product(
    product_id: str,
    service: CatalogService = Depends(get_catalog_service),
) -> dict[str, Any]:
    """A single active product. Inactive products are reported as missing."""
    try:
        return service.get_product(product_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/categories")
async def list_categories(
    service: CatalogService = Depends(get_catalog_service),
) -> list[dict[str, Any]]:
    return service.list_categories()


@router.get("/settings")
async def read_settings(
    service: SettingsService = Depends(get_settings_service),
) -> dict[str, Any]:
    return service.read_settings()
